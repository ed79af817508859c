"""Splitting of comment text into paragraphs, sentences and sections.

A comment is read the way godoc reads it: blank lines separate
paragraphs, indented lines are preformatted code, and an upper case line
standing alone is the heading of a new section.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from .regex import NEWLINE_RX, SENTENCE_RX, inverse_match


@dataclass(frozen=True)
class Loc:
    """A line and its indentation level; -1 marks a blank line."""
    indent: int
    line: str

    @property
    def blank(self) -> bool:
        return self.indent == -1


@dataclass(frozen=True)
class Prose:
    """A paragraph of running text, split into sentences."""
    sentences: List[str]


@dataclass(frozen=True)
class Code:
    """An indented block, rendered without reflowing."""
    lines: List[Loc]


@dataclass(frozen=True)
class Raw:
    """Text copied to the output untouched."""
    text: str


Paragraph = Union[Prose, Code, Raw]


@dataclass
class Section:
    """A named run of paragraphs; the lead section has an empty name."""
    name: str
    paras: List[Paragraph] = field(default_factory=list)


def lines(text: str) -> List[str]:
    """Split text into lines, each keeping a trailing newline."""
    return [line + "\n" for line in inverse_match(NEWLINE_RX, text)]


def empty(line: str) -> bool:
    return len(line.strip()) == 0


def indent_of(line: str) -> int:
    """Indentation level of a single non-blank line.

    Tabs count one level each. Lines indented by three or more spaces are
    measured in spaces instead: go/doc strips one leading space from every
    comment line, so four spaces (three after stripping) make one level.
    """
    tabs = line[0] == "\t" or not line.startswith("   ")
    pad = "\t" if tabs else " "
    count = len(line) - len(line.lstrip(pad))
    if not tabs:
        count = (count + 1) // 4
    return count


def locify(ls: List[str]) -> List[Loc]:
    """Attach normalized indentation levels to lines."""
    raw = [-1 if empty(line) else indent_of(line) for line in ls]
    levels = [n for n in raw if n != -1]
    least = min(levels) if levels else 0

    locs = []
    for n, line in zip(raw, ls):
        if n == -1:
            locs.append(Loc(-1, ""))
        else:
            locs.append(Loc(n - least, line.lstrip()))
    return locs


def partition(locs: List[Loc]) -> List[Paragraph]:
    """Group located lines into prose paragraphs and code blocks."""
    out: List[Paragraph] = []
    i, n = 0, len(locs)
    while i < n:
        while i < n and locs[i].blank:
            i += 1
        if i == n:
            break

        if locs[i].indent == 0:
            acc = []
            while i < n and locs[i].indent == 0:
                acc.append(locs[i].line)
                i += 1
            out.append(Prose(sentences("".join(acc))))
            continue

        block = []
        while i < n and locs[i].indent != 0:
            loc = locs[i]
            block.append(Loc(loc.indent, loc.line.strip()))
            i += 1
        # blank lines only separate code blocks from what follows
        while block and block[-1].blank:
            block.pop()
        if block:
            out.append(Code(block))
    return out


def unstring(text: str) -> List[Paragraph]:
    """Turn a documentation comment into a list of paragraphs."""
    return partition(locify(lines(text)))


def sentences(text: str) -> List[str]:
    """Split prose into sentences.

    Each sentence keeps its terminal punctuation; the whitespace that
    follows it is dropped.
    """
    out = []
    start = 0
    for m in SENTENCE_RX.finditer(text):
        # the match begins with the last character of the sentence, then
        # its punctuation
        out.append(text[start:m.start() + 2])
        start = m.end()
    if start < len(text) and text[start:].strip():
        out.append(text[start:])
    return out


def is_section_header(para: Paragraph) -> bool:
    """True for a one-line paragraph made only of upper case and spaces."""
    if not isinstance(para, Prose) or len(para.sentences) != 1:
        return False
    text = para.sentences[0].strip()
    if not text or "\n" in text:
        return False
    return all(ch.isupper() or ch.isspace() for ch in text)


def sections(paras: List[Paragraph]) -> List[Section]:
    """Partition paragraphs at section headers.

    The first section is always the unnamed lead section holding whatever
    precedes the first header, even when that is nothing.
    """
    out = [Section("")]
    for para in paras:
        if is_section_header(para):
            out.append(Section(" ".join(para.sentences[0].split())))
        else:
            out[-1].paras.append(para)
    return out
