"""Command-line interface for mango."""
from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from .config import LEAD_SECTION_FILE, PROG, PROTECTED_SECTIONS
from .errors import DiscoveryError, MangoError, UsageError
from .golang import load_package
from .manpage import CommandPage, PackagePage, Raw, Section, unstring

USAGE = f"{PROG} [flags] [package-directory|package-files]"


class FlagParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad flags as UsageError."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> FlagParser:
    parser = FlagParser(
        prog=PROG,
        usage=USAGE,
        description="Create a man page from the documentation of a Go package.",
        epilog="Example: mango | nroff -man > name.section",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("paths", nargs="*", help="Package directory or package files")
    parser.add_argument("-help", action="store_true", help="Display help")
    parser.add_argument("-import", dest="import_path", default="", help="Specify import path")
    parser.add_argument("-name", default="", help="Specify name of man page")
    parser.add_argument("-version", default="", help="Specify version")
    parser.add_argument("-manual", default="", help="Specify the manual: see man-pages(7)")
    parser.add_argument(
        "-package", dest="package_name", default="",
        help="Select package to use if there are multiple packages in a directory",
    )
    parser.add_argument(
        "-section", dest="sections", default="",
        help="Generate sections from a comma-separated list of filenames, formatted "
             "like comments. Each section is named after its file (_ is replaced by a "
             "space). SYNOPSIS, OPTIONS, BUGS and SEE ALSO cannot be overridden.",
    )
    parser.add_argument(
        "-include", dest="includes", default="",
        help="Generate sections from a comma-separated list of filenames, included as-is.",
    )
    parser.add_argument("-v", dest="verbose", action="store_true", help="Report progress on stderr")
    return parser


def section_name(path: str) -> str:
    """Section named by a file: its base name, upper case, _ as space."""
    return os.path.basename(path.strip()).upper().replace("_", " ")


def section_files(spec: str, formatted: bool) -> List[Section]:
    """Read the comma-separated files of -section or -include."""
    out = []
    for fname in spec.split(","):
        fname = fname.strip()
        if not fname:
            continue
        name = section_name(fname)
        if formatted and name in PROTECTED_SECTIONS:
            raise MangoError("Cannot override " + ", ".join(PROTECTED_SECTIONS))
        try:
            with open(fname, "r", encoding="utf-8") as f:
                body = f.read()
        except OSError as e:
            raise MangoError(f"{fname}: {e.strerror or e}") from e
        if name == LEAD_SECTION_FILE:
            name = ""
        paras = unstring(body) if formatted else [Raw(body)]
        out.append(Section(name, paras))
    return out


def invalid_flag(sec: str, flag: str, value: str):
    if value:
        raise UsageError(f"The -{flag} flag does not apply to section {sec} pages.")


def generate(args: argparse.Namespace) -> str:
    """Build the man page described by parsed arguments."""
    pkg = load_package(
        args.paths,
        package_name=args.package_name,
        import_path=args.import_path,
        verbose=args.verbose,
    )

    overrides = []
    if args.sections:
        overrides += section_files(args.sections, True)
    if args.includes:
        overrides += section_files(args.includes, False)

    if pkg.is_main:
        invalid_flag("1", "import", args.import_path)
        page = CommandPage(pkg, overrides, name=args.name, version=args.version, manual=args.manual)
    else:
        invalid_flag("3", "name", args.name)
        page = PackagePage(pkg, overrides, version=args.version, manual=args.manual)
    return page.output()


def report(e: MangoError, parser: argparse.ArgumentParser):
    """Describe a fatal error on stderr."""
    msg = str(e)
    if isinstance(e, DiscoveryError) and e.candidates:
        print("The following packages were found:", file=sys.stderr)
        for name in e.candidates:
            print("\t" + name, file=sys.stderr)
    if msg:
        print(msg, file=sys.stderr)
    if isinstance(e, UsageError):
        parser.print_help(sys.stderr)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        if args.help:
            raise UsageError("")
        page = generate(args)
    except MangoError as e:
        report(e, parser)
        sys.exit(e.exit_code)

    sys.stdout.write(page)
