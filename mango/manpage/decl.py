"""Rendering of Go declarations.

Type expressions render to plain strings. Function declarations go
through the formatter's bold/roman accumulator so parameter names come
out roman and everything else bold in a single .BR call.
"""
from __future__ import annotations

from typing import Callable, List, Tuple

from ..golang.doc import FuncDoc, ValueDoc
from ..golang.syntax import (
    ArrayType, BasicLit, CallExpr, ChanDir, ChanType, Ellipsis, Expr, Field,
    FuncType, Ident, InterfaceType, MapType, Selector, Star, StructType,
    base_name, is_exported, is_predeclared,
)
from .escape import escape
from .extract import unstring
from .format import Formatter


def typesig(e: Expr) -> str:
    """Go source form of a type expression."""
    if isinstance(e, ArrayType):
        return "[" + (e.length or "") + "]" + typesig(e.elt)
    if isinstance(e, ChanType):
        prefix = "<-" if e.direction is ChanDir.RECV else ""
        suffix = "<-" if e.direction is ChanDir.SEND else ""
        return prefix + "chan" + suffix + " " + typesig(e.value)
    if isinstance(e, Ellipsis):
        return "..." + typesig(e.elt)
    if isinstance(e, MapType):
        return "map[" + typesig(e.key) + "]" + typesig(e.value)
    if isinstance(e, Star):
        return "*" + typesig(e.x)
    if isinstance(e, Ident):
        return e.name
    if isinstance(e, FuncType):
        return "func" + signature(e)
    if isinstance(e, InterfaceType):
        items, _ = method_lines(e.methods)
        return "interface{" + "; ".join(items) + "}"
    if isinstance(e, StructType):
        items, _ = field_lines(e.fields)
        return "struct{" + "; ".join(items) + "}"
    if isinstance(e, Selector):
        return typesig(e.x) + "." + e.sel.name
    if isinstance(e, BasicLit):
        return e.value
    if isinstance(e, CallExpr):
        return typesig(e.fun) + "(" + ", ".join(typesig(a) for a in e.args) + ")"
    return ""


def _fields(fl: List[Field], name: Callable[[str], None], other: Callable[[str], None]):
    for i, f in enumerate(fl):
        for j, n in enumerate(f.names):
            name(n)
            if j != len(f.names) - 1:
                other(",")
            other(" ")
        other(typesig(f.type))
        if i != len(fl) - 1:
            other(", ")


def _signature(ft: FuncType, name: Callable[[str], None], other: Callable[[str], None]):
    other("(")
    _fields(ft.params, name, other)
    other(")")
    if ft.results:
        other(" ")
        paren = len(ft.results) > 1 or len(ft.results[0].names) > 0
        if paren:
            other("(")
        _fields(ft.results, name, other)
        if paren:
            other(")")


def signature(ft: FuncType) -> str:
    """Parameters and results of a function type."""
    out: List[str] = []
    _signature(ft, out.append, out.append)
    return "".join(out)


def receiver(fn: FuncDoc) -> str:
    """Receiver of a method as "(T) " or "(*T) ", with any type parameters."""
    return "(" + typesig(fn.recv) + ") "


def func_decl(m: Formatter, fn: FuncDoc):
    """Write a function declaration as one .BR line."""
    m.BR.B("func ")
    if fn.recv is not None:
        m.BR.B(receiver(fn))
    m.BR.B(fn.name)
    _signature(fn.type, m.BR.R, m.BR.B)
    m.br()


def field_lines(fl: List[Field]) -> Tuple[List[str], bool]:
    """Exported struct fields, one per line, and whether any were hidden."""
    out, hidden = [], False
    for f in fl:
        if f.names:
            names = [n for n in f.names if is_exported(n)]
            if len(names) != len(f.names):
                hidden = True
            if not names:
                continue
            out.append(", ".join(names) + " " + typesig(f.type))
        else:
            if not is_exported(base_name(f.type) or ""):
                hidden = True
                continue
            out.append(typesig(f.type))
    return out, hidden


def method_lines(fl: List[Field]) -> Tuple[List[str], bool]:
    """Exported interface methods and embedded interfaces, one per line."""
    out, hidden = [], False
    for f in fl:
        if f.names:
            if not is_exported(f.names[0]):
                hidden = True
                continue
            ft = f.type if isinstance(f.type, FuncType) else FuncType()
            out.append(f.names[0] + signature(ft))
        else:
            # unions and ~T elements are type sets, not embedded interfaces
            name = base_name(f.type)
            if (
                name is not None and name.isidentifier()
                and not is_exported(name) and not is_predeclared(name)
            ):
                hidden = True
                continue
            out.append(typesig(f.type))
    return out, hidden


def composite(m: Formatter, opener: str, items: List[str], hidden: bool, kind: str):
    """Write a struct or interface body, indented, one member per line."""
    m.write(escape(opener) + " {\n.RS\n")
    for i, item in enumerate(items):
        if i != 0:
            m.write(".sp 0\n")
        m.write(".B " + escape(item) + "\n")
    if hidden:
        if items:
            m.write(".sp 0\n")
        m.write(".B //contains unexported " + kind + ".\n")
    m.write(".RE\n.B }\n")


def type_decl(m: Formatter, name: str, e: Expr):
    """Write the declaration of a named type."""
    m.nl()
    m.write(".B type " + escape(name) + " ")
    if isinstance(e, InterfaceType):
        items, hidden = method_lines(e.methods)
        composite(m, "interface", items, hidden, "methods")
    elif isinstance(e, StructType):
        items, hidden = field_lines(e.fields)
        composite(m, "struct", items, hidden, "fields")
    else:
        m.write(escape(typesig(e)) + "\n")


def gen_doc(m: Formatter, doc: str):
    """Write a doc comment, if there is one."""
    paras = unstring(doc) if doc else []
    if paras:
        m.paras(paras)


def value_line(spec) -> str:
    names = [n for n in spec.names if is_exported(n)]
    line = ", ".join(names)
    if spec.type is not None:
        line += " " + typesig(spec.type)
    return line


def values(m: Formatter, vals: List[ValueDoc]):
    """Write const or var declarations, each followed by its doc."""
    for v in vals:
        m.pp()
        if v.grouped:
            m.write(".B " + v.kind + " (\n.RS\n")
            for i, spec in enumerate(v.specs):
                if i != 0:
                    m.write(".sp 0\n")
                m.write(".B " + escape(value_line(spec)) + "\n")
            m.write(".RE\n.B )\n")
        else:
            m.write(".B " + v.kind + " " + escape(value_line(v.specs[0])) + "\n")
        if v.doc:
            m.pp()
            gen_doc(m, v.doc)


def funcs(m: Formatter, fns: List[FuncDoc]):
    """Write exported function declarations, each followed by its doc."""
    for fn in fns:
        if not is_exported(fn.name):
            continue
        m.pp()
        func_decl(m, fn)
        if fn.doc:
            m.pp()
            gen_doc(m, fn.doc)
