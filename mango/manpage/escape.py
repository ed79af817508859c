"""Escaping of plain text for troff."""
from __future__ import annotations


def escape(text: str) -> str:
    """Rewrite text so troff prints it as is.

    Newlines become spaces, backslashes and hyphens are escaped, and a
    period or apostrophe at the start of a word is protected so it cannot
    be read as a control character.
    """
    out = []
    last = ""
    for ch in text:
        if ch == "\n":
            out.append(" ")
            last = " "
            continue
        at_word_start = last == "" or last.isspace()
        if ch == "\\":
            out.append("\\e")
        elif ch == "-":
            out.append("\\-")
        elif ch == "." and at_word_start:
            out.append("\\&.")
        elif ch == "'" and at_word_start:
            out.append("\\(fm")
        else:
            out.append(ch)
        last = ch
    return "".join(out)
