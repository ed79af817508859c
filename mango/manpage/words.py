"""Word classification for prose.

Each word of a sentence is given a typographic role: command line flags
are bold, man page references are bold with a roman section number,
acronyms are set small and paths italic. Everything else is plain text.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from .escape import escape
from .regex import PATH_RX, REF_RX, WORD_RX, inverse_match

ACRONYM_TAIL = ".,;:!?"


class WordKind(Enum):
    """Typographic role of a word."""
    FLAG = "flag"
    REF = "ref"
    ACRONYM = "acronym"
    PATH = "path"
    PLAIN = "plain"


def split_words(sentence: str) -> List[str]:
    return [w for w in inverse_match(WORD_RX, sentence) if w.strip()]


def is_acronym(word: str) -> bool:
    if len(word) < 3 or not any(ch.isupper() for ch in word):
        return False
    head, tail = word[:-1], word[-1]
    if not all(ch.isupper() or ch in ".-" for ch in head):
        return False
    return tail.isupper() or tail in ACRONYM_TAIL


def is_path(word: str) -> bool:
    return "/" in word and PATH_RX.match(word) is not None


def classify(word: str) -> WordKind:
    """Return the role of word; the first matching rule wins."""
    if word.startswith("-"):
        return WordKind.FLAG
    if REF_RX.search(word):
        return WordKind.REF
    if is_acronym(word):
        return WordKind.ACRONYM
    if is_path(word):
        return WordKind.PATH
    return WordKind.PLAIN


def split_ref(word: str) -> Tuple[str, str]:
    """Split "name(s)" into ("name", "(s)")."""
    i = word.rindex("(")
    return word[:i], word[i:]


def refs(sentence: str) -> Iterable[str]:
    """Yield the man page references in a sentence."""
    for word in split_words(sentence):
        if classify(word) is WordKind.REF:
            yield word


def words(sentence: str) -> List[str]:
    """Render a sentence as troff lines, one macro per emphasized word."""
    out: List[str] = []
    plain: List[str] = []

    def flush():
        if plain:
            out.append(" ".join(plain))
            plain.clear()

    for word in split_words(sentence):
        kind = classify(word)
        if kind is WordKind.PLAIN:
            plain.append(escape(word))
            continue
        flush()
        if kind is WordKind.FLAG:
            out.append(".B " + escape(word))
        elif kind is WordKind.REF:
            name, sec = split_ref(word)
            out.append(".BR " + escape(name) + " " + escape(sec))
        elif kind is WordKind.ACRONYM:
            out.append(".SM " + escape(word))
        else:
            out.append(".I " + escape(word))
    flush()
    return out
