"""Errors raised by mango. Every one of them is fatal."""
from __future__ import annotations

from typing import List, Optional


class MangoError(Exception):
    """Base class; carries the process exit status."""

    exit_code = 2


class UsageError(MangoError):
    """Bad flag combination or help requested."""

    exit_code = 1


class DiscoveryError(MangoError):
    """No package, no main function, or an ambiguous package selection."""

    def __init__(self, message: str, candidates: Optional[List[str]] = None):
        super().__init__(message)
        self.candidates = sorted(candidates or [])


class GoParseError(MangoError):
    """The Go source could not be parsed."""


class ExtractionError(MangoError):
    """Documentation could not be extracted from otherwise valid source."""


class ImpossibleIndentation(ExtractionError):
    """A code block dedents past the level it started at."""

    def __init__(self, message: str = "impossible indentation"):
        super().__init__(message)
