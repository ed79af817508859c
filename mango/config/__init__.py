"""Configuration and constants for mango."""
from __future__ import annotations

PROG = "mango"

# Default manual names, shown in the .TH header
COMMAND_MANUAL = "User Commands"
PACKAGE_MANUAL = "Go Packages"

COMMAND_SECTION = "1"
PACKAGE_SECTION = "3"

# User sections that always come first in section 1 pages, in this order
FIXED_SECTIONS = ("DIAGNOSTICS", "ENVIRONMENT", "FILES")

# Emitted after SEE ALSO
TRAILING_SECTIONS = ("HISTORY",)

# Sections mango generates itself; -section may not replace them
PROTECTED_SECTIONS = ("SYNOPSIS", "OPTIONS", "BUGS", "SEE ALSO")

# A section file with this name replaces the leading, unnamed section
LEAD_SECTION_FILE = "DESCRIPTION"

# Package whose doc comment documents its sibling package
DOCUMENTATION_PACKAGE = "documentation"

GO_SUFFIX = ".go"
GO_TEST_SUFFIX = "_test.go"

DATE_FORMAT = "%Y-%m-%d"
