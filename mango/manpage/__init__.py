"""Man page generation: paragraphs, troff formatting and page layout."""
from __future__ import annotations

from .escape import escape
from .extract import Code, Loc, Prose, Raw, Section, sections, sentences, unstring
from .format import BoldRoman, Formatter
from .man1 import CommandPage
from .man3 import PackagePage

__all__ = [
    'escape',
    'Code',
    'Loc',
    'Prose',
    'Raw',
    'Section',
    'sections',
    'sentences',
    'unstring',
    'BoldRoman',
    'Formatter',
    'CommandPage',
    'PackagePage',
]
