"""Troff output buffer."""
from __future__ import annotations

from typing import List

from ..errors import ImpossibleIndentation
from .escape import escape
from .extract import Code, Loc, Paragraph, Prose, Raw
from .words import words


class BoldRoman:
    """Collects alternating bold and roman runs for a single .BR call."""

    def __init__(self):
        self.current: List[str] = []
        self.args: List[str] = []
        self.bold = True

    def switch(self):
        """Close the current run and start one of the other weight."""
        if not self.current:
            return
        self.args.append('"' + escape("".join(self.current)) + '"')
        self.current = []
        self.bold = not self.bold

    def B(self, s: str):
        if not self.bold:
            self.switch()
        self.current.append(s)

    def R(self, s: str):
        if self.bold:
            if not self.current and not self.args:
                # .BR starts bold; an empty bold run keeps the weights in step
                self.args.append('""')
                self.bold = False
            else:
                self.switch()
        self.current.append(s)

    def flush(self) -> str:
        """Return the accumulated .BR macro line and reset, or ''."""
        self.switch()
        args, self.args = self.args, []
        self.bold = True
        if not args:
            return ""
        return ".BR " + " ".join(args) + "\n"


class Formatter:
    """Accumulates man macros and text.

    Output is built up in memory and read back with getvalue() once the
    page is complete.
    """

    def __init__(self):
        self._chunks: List[str] = []
        self._last = ""
        self.BR = BoldRoman()

    def write(self, s: str):
        if s:
            self._chunks.append(s)
            self._last = s[-1]

    def getvalue(self) -> str:
        return "".join(self._chunks)

    def nl(self):
        """Make sure the next write starts on a fresh line."""
        if self._last and self._last != "\n":
            self.write("\n")

    def br(self):
        """Emit whatever is in the bold/roman accumulator."""
        line = self.BR.flush()
        if line:
            self.nl()
            self.write(line)

    def pp(self):
        self.nl()
        self.write(".PP\n")

    def section(self, name: str):
        self.nl()
        self.write('.SH "' + name + '"\n')

    def subsection(self, name: str):
        self.nl()
        self.write('.SS "' + name + '"\n')

    def text(self, para: Prose):
        """Write prose, each sentence on a line of its own."""
        for sentence in para.sentences:
            for line in words(sentence):
                self.nl()
                self.write(line)
        self.nl()

    def code(self, lines: List[Loc]):
        """Write an indented block, keeping its relative indentation."""
        first = next((loc.indent for loc in lines if not loc.blank), 0)
        depth, last = 0, first
        self.nl()
        self.write(".RS\n")
        for i, loc in enumerate(lines):
            if loc.blank:
                self.write(".sp\n")
                continue
            if loc.indent > last:
                for _ in range(loc.indent - last):
                    depth += 1
                    self.write(".RS\n")
            elif loc.indent < last:
                for _ in range(last - loc.indent):
                    depth -= 1
                    if depth < 0:
                        raise ImpossibleIndentation()
                    self.write(".RE\n")
            self.write(escape(loc.line.strip()) + "\n")
            if i != len(lines) - 1:
                self.write(".sp 0\n")
            last = loc.indent
        for _ in range(depth + 1):
            self.write(".RE\n")

    def paras(self, paras: List[Paragraph]):
        """Write paragraphs, separated by .PP."""
        for i, para in enumerate(paras):
            if i != 0:
                self.pp()
            if isinstance(para, Raw):
                self.nl()
                self.write(para.text)
            elif isinstance(para, Code):
                self.code(para.lines)
            else:
                self.text(para)
