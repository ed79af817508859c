"""Go front end: finding, parsing and documenting a package."""
from __future__ import annotations

from .discovery import load_package, select_package
from .doc import PackageDoc, new_package_doc
from .parser import parse_file, parse_source

__all__ = [
    'load_package',
    'select_package',
    'PackageDoc',
    'new_package_doc',
    'parse_file',
    'parse_source',
]
