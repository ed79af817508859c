"""Shared regular expressions and inverse-match segmentation."""
from __future__ import annotations

import re
from typing import List, Pattern

SP = "[ \t]"
NS = "[^ \t]"

NEWLINE_RX = re.compile("\n")
# a sentence ends with a non-blank character, then terminal punctuation,
# then whitespace
SENTENCE_RX = re.compile(NS + "[.!?][ \n\t]+")
WORD_RX = re.compile(r"\s+")
REF_RX = re.compile(r"..\(.\)$")
PATH_RX = re.compile(r"^/?(?:[^/\s]+/)*[^/\s]+/?$")
USAGE_RX = re.compile("^" + SP + "*Usage:([ ]+%name)?([ ]+%flags?)?([ ]+|$)")


def inverse_match_spans(rx: Pattern[str], s: str) -> List[tuple]:
    """Return (start, end) of the maximal pieces of s that rx does not match."""
    matches = [m.span() for m in rx.finditer(s)]
    if not matches:
        return [(0, len(s))]

    spans = []
    if matches[0][0] != 0:
        spans.append((0, matches[0][0]))
    for (_, end), (start, _) in zip(matches, matches[1:]):
        spans.append((end, start))
    if matches[-1][1] != len(s):
        spans.append((matches[-1][1], len(s)))
    return spans


def inverse_match(rx: Pattern[str], s: str) -> List[str]:
    """Split s into the pieces between matches of rx.

    No empty piece is produced at either end when s starts or ends with a
    match, and a string covered by a single match yields an empty list.
    """
    return [s[start:end] for start, end in inverse_match_spans(rx, s)]
