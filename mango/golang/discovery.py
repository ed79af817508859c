"""Finding, parsing and selecting the package to document."""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..config import DOCUMENTATION_PACKAGE, GO_SUFFIX, GO_TEST_SUFFIX
from ..errors import DiscoveryError
from .doc import FileDoc, PackageDoc, new_package_doc
from .parser import parse_file


@dataclass
class Source:
    """Where the package comes from: a directory and the files to read."""
    dir: str
    files: List[str]


def is_go_file(name: str) -> bool:
    return name.endswith(GO_SUFFIX) and not name.endswith(GO_TEST_SUFFIX)


def clean(cwd: str, p: str) -> str:
    """Absolute, normalized form of p relative to cwd."""
    if not os.path.isabs(p):
        p = os.path.join(cwd, p)
    return os.path.normpath(p)


def go_files(directory: str) -> List[str]:
    """The non-test Go files of a directory, sorted by name."""
    try:
        entries = sorted(os.listdir(directory))
    except OSError as e:
        raise DiscoveryError(f"Could not read {directory}: {e.strerror or e}") from e
    out = []
    for name in entries:
        path = os.path.join(directory, name)
        if is_go_file(name) and not os.path.isdir(path):
            out.append(path)
    return out


def resolve_source(args: List[str], cwd: Optional[str] = None) -> Source:
    """Interpret the command line arguments.

    No argument means the working directory. A single argument is a
    directory unless it names a .go file. Several arguments are files.
    """
    cwd = cwd or os.getcwd()
    if not args:
        return Source(cwd, go_files(cwd))
    if len(args) == 1:
        path = clean(cwd, args[0])
        if path.endswith(GO_SUFFIX):
            return Source(os.path.dirname(path), [path])
        return Source(path, go_files(path))
    files = [clean(cwd, a) for a in args]
    return Source(os.path.dirname(files[0]), files)


def parse_packages(files: List[str]) -> Dict[str, List[FileDoc]]:
    """Parse files and group them by package clause."""
    pkgs: Dict[str, List[FileDoc]] = {}
    for path in files:
        f = parse_file(path)
        pkgs.setdefault(f.package, []).append(f)
    return pkgs


def select_package(
    pkgs: Dict[str, List[FileDoc]],
    directory: str,
    package_name: str = "",
    import_path: str = "",
) -> PackageDoc:
    """Choose the package to document and build its PackageDoc.

    A package named "documentation" only contributes its package comment,
    which replaces the comment of the chosen package.
    """
    pkgs = dict(pkgs)
    xdoc = ""
    if DOCUMENTATION_PACKAGE in pkgs:
        xdoc = new_package_doc(DOCUMENTATION_PACKAGE, pkgs.pop(DOCUMENTATION_PACKAGE)).doc

    if not pkgs:
        raise DiscoveryError(f"No packages found at {directory}")

    if package_name:
        if package_name not in pkgs:
            raise ambiguous(directory, pkgs)
        name = package_name
    elif len(pkgs) == 1:
        name = next(iter(pkgs))
    else:
        name = os.path.basename(directory)
        if name not in pkgs:
            raise ambiguous(directory, pkgs)

    pkg = new_package_doc(name, pkgs[name], import_path)
    if xdoc:
        pkg.doc = xdoc
    return pkg


def ambiguous(directory: str, pkgs: Dict[str, List[FileDoc]]) -> DiscoveryError:
    return DiscoveryError(
        f"{directory} contains multiple packages; specify one of them with -package",
        candidates=list(pkgs),
    )


def load_package(
    args: List[str],
    package_name: str = "",
    import_path: str = "",
    cwd: Optional[str] = None,
    verbose: bool = False,
) -> PackageDoc:
    """Locate, parse and select the package named by the command line."""
    source = resolve_source(args, cwd)
    if verbose:
        print(f"Parsing {len(source.files)} files in {source.dir}", file=sys.stderr)
    pkg = select_package(parse_packages(source.files), source.dir, package_name, import_path)
    if verbose:
        print(f"Documenting package {pkg.name}", file=sys.stderr)
    return pkg
