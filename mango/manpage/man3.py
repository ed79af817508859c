"""Section 3 pages, for library packages."""
from __future__ import annotations

from typing import Iterable, List

from ..config import PACKAGE_MANUAL, PACKAGE_SECTION
from ..golang.doc import FuncDoc, ValueDoc
from .decl import funcs, gen_doc, receiver, type_decl, values
from .escape import escape
from .page import ManPage


def docs_of(vals: List[ValueDoc], fns: List[FuncDoc]) -> Iterable[str]:
    for v in vals:
        yield v.doc
    for fn in fns:
        yield fn.doc


class PackagePage(ManPage):
    """Man page for an importable package.

    The package is filtered down to its exported API before anything is
    written.
    """

    sec = PACKAGE_SECTION
    default_manual = PACKAGE_MANUAL

    def __init__(self, pkg, *args, **kwargs):
        super().__init__(pkg.filter_exported(), *args, **kwargs)
        self.name = self.pkg.name

    def decl_docs(self) -> Iterable[str]:
        pkg = self.pkg
        yield from docs_of(pkg.consts + pkg.vars, pkg.funcs)
        for t in pkg.types:
            yield t.doc
            yield from docs_of(t.consts + t.vars, t.factories + t.methods)

    def render(self):
        pkg = self.pkg
        self.find_refs(d for d in self.decl_docs() if d)

        self.header()
        self.do_name()
        self.synopsis()
        self.description()
        self.fixed_user_sections()

        if pkg.consts:
            self.section("CONSTANTS")
            values(self, pkg.consts)
        if pkg.vars:
            self.section("VARIABLES")
            values(self, pkg.vars)
        if pkg.funcs:
            self.section("FUNCTIONS")
            funcs(self, pkg.funcs)
        if pkg.types:
            self.section("TYPES")
            for t in pkg.types:
                self.subsection(t.name)
                type_decl(self, t.name, t.type)
                if t.doc:
                    self.pp()
                    gen_doc(self, t.doc)
                values(self, t.consts)
                values(self, t.vars)
                funcs(self, t.factories)
                funcs(self, t.methods)

        self.bugs()
        self.see_also()
        self.endmatter()

    def synopsis(self):
        """Import line and a table of contents."""
        pkg = self.pkg
        self.section("SYNOPSIS")
        self.write(".B import \\(lq" + escape(pkg.import_path or pkg.name) + "\\(rq\n.sp\n")
        if pkg.consts:
            self.write(".B Constants\n.sp 0\n")
        if pkg.vars:
            self.write(".B Variables\n.sp 0\n")
        for fn in pkg.funcs:
            self.toc_func(fn)
        for t in pkg.types:
            self.write('.RB "type " ' + escape(t.name) + "\n.sp 0\n")
            if not (t.factories or t.methods):
                continue
            self.write(".RS\n")
            for fn in t.factories + t.methods:
                self.toc_func(fn)
            self.write(".RE\n")

    def toc_func(self, fn: FuncDoc):
        prefix = "func "
        if fn.recv is not None:
            prefix += receiver(fn)
        self.write('.RB "' + escape(prefix) + '" ' + escape(fn.name) + "\n.sp 0\n")
