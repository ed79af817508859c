"""Section 1 pages, for package main."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from ..config import COMMAND_MANUAL, COMMAND_SECTION, GO_SUFFIX
from ..errors import DiscoveryError, ExtractionError
from ..golang.doc import PackageDoc
from ..golang.syntax import CallExpr, Ident, Selector, literal
from .escape import escape
from .extract import Prose, sentences
from .page import ManPage
from .regex import USAGE_RX, WORD_RX, inverse_match

# flag package functions that define a flag and return a pointer to it
FLAG_FUNCS = (
    "Bool", "Duration", "Float64", "Int", "Int64", "String", "Uint", "Uint64",
)


@dataclass
class Flag:
    """A command line flag; var and default are empty for booleans."""
    var: str
    name: str
    default: str
    help: str


@dataclass
class Flags:
    usage: str = ""
    flags: List[Flag] = field(default_factory=list)


def grep_name(pkg: PackageDoc) -> str:
    """Name of the file defining func main, without its extension."""
    main = pkg.func("main")
    if main is None or main.recv is not None:
        raise DiscoveryError("package main has no main function")
    base = os.path.basename(main.filename)
    if base.endswith(GO_SUFFIX):
        base = base[:-len(GO_SUFFIX)]
    return base


def grep_usage(pkg: PackageDoc) -> str:
    """Extra synopsis words from a "Usage:" line in main's comment."""
    main = pkg.func("main")
    if main is None:
        return ""
    for line in main.doc.split("\n"):
        m = USAGE_RX.search(line)
        if m:
            return line[m.end():]
    return ""


def grep_flags(pkg: PackageDoc) -> Flags:
    """Find flags declared as var N = flag.Type(name, default, help)."""
    out = Flags(usage=grep_usage(pkg))
    for v in pkg.all_values():
        if v.kind != "var":
            continue
        for spec in v.specs:
            for i, val in enumerate(spec.values):
                if not isinstance(val, CallExpr) or not isinstance(val.fun, Selector):
                    continue
                fun = val.fun
                if not isinstance(fun.x, Ident) or fun.x.name != "flag":
                    continue
                if fun.sel.name not in FLAG_FUNCS:
                    continue
                if len(val.args) != 3 or i >= len(spec.names):
                    raise ExtractionError("Could not parse flags.")
                f = Flag(
                    var=spec.names[i],
                    name=literal(val.args[0]),
                    default=literal(val.args[1]),
                    help=literal(val.args[2]),
                )
                if fun.sel.name == "Bool":
                    f.var = f.default = ""
                out.flags.append(f)
    return out


class CommandPage(ManPage):
    """Man page for a command: NAME, SYNOPSIS, DESCRIPTION, OPTIONS, ..."""

    sec = COMMAND_SECTION
    default_manual = COMMAND_MANUAL

    def render(self):
        if not self.name:
            self.name = grep_name(self.pkg)
        flags = grep_flags(self.pkg)
        self.find_refs(f.help for f in flags.flags)

        self.header()
        self.do_name()
        self.synopsis(flags)
        self.description()
        self.options(flags.flags)
        self.fixed_user_sections()
        self.bugs()
        self.see_also()
        self.endmatter()

    def synopsis(self, flags: Flags):
        self.section("SYNOPSIS")
        self.write(".B " + escape(self.name) + "\n")
        for f in flags.flags:
            self.write(".RB [ " + escape("-" + f.name))
            if f.var:
                self.write("\n.IR " + escape(f.var))
            self.write(" ]\n")
        for w in inverse_match(WORD_RX, flags.usage.strip()):
            if not w:
                continue
            if w.startswith("[") and w.endswith("]"):
                self.write(".RB [ " + escape(w[1:-1]) + " ]\n")
            else:
                self.write(".B " + escape(w) + "\n")

    def options(self, flags: List[Flag]):
        if not flags:
            return
        self.section("OPTIONS")
        for f in flags:
            self.nl()
            self.write('.TP\n.BR "' + escape("-" + f.name) + ' "')
            if f.var:
                self.write(" " + escape(f.var))
                if f.default:
                    self.write(' " = ' + escape(f.default) + '"')
            self.write("\n")
            self.text(Prose(sentences(f.help)))
