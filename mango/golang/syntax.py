"""Go declaration syntax, reduced to what a man page needs.

The parser maps the tree-sitter tree onto this closed set of node types;
type syntax outside of it is kept as an Ident carrying its source text.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class ChanDir(Enum):
    BOTH = "both"
    SEND = "send"
    RECV = "recv"


@dataclass(frozen=True)
class Ident:
    name: str


@dataclass(frozen=True)
class Selector:
    """A qualified name, X.Sel."""
    x: "Expr"
    sel: Ident


@dataclass(frozen=True)
class Star:
    x: "Expr"


@dataclass(frozen=True)
class ArrayType:
    """Array or slice; length is None for slices."""
    length: Optional[str]
    elt: "Expr"


@dataclass(frozen=True)
class ChanType:
    direction: ChanDir
    value: "Expr"


@dataclass(frozen=True)
class Ellipsis:
    elt: "Expr"


@dataclass(frozen=True)
class MapType:
    key: "Expr"
    value: "Expr"


@dataclass(frozen=True)
class Field:
    """Parameter, result, struct field or interface method.

    Embedded fields and interface elements have no names.
    """
    names: List[str]
    type: "Expr"


@dataclass(frozen=True)
class FuncType:
    params: List[Field] = field(default_factory=list)
    results: List[Field] = field(default_factory=list)


@dataclass(frozen=True)
class InterfaceType:
    methods: List[Field] = field(default_factory=list)


@dataclass(frozen=True)
class StructType:
    fields: List[Field] = field(default_factory=list)


@dataclass(frozen=True)
class BasicLit:
    """A literal; kind is "string", "int", "float", "bool", ..."""
    kind: str
    value: str


@dataclass(frozen=True)
class CallExpr:
    fun: "Expr"
    args: List["Expr"] = field(default_factory=list)


Expr = Union[
    Ident, Selector, Star, ArrayType, ChanType, Ellipsis, MapType,
    FuncType, InterfaceType, StructType, BasicLit, CallExpr,
]


PREDECLARED_TYPES = frozenset((
    "any", "bool", "byte", "comparable", "complex64", "complex128", "error",
    "float32", "float64", "int", "int8", "int16", "int32", "int64", "rune",
    "string", "uint", "uint8", "uint16", "uint32", "uint64", "uintptr",
))


def is_exported(name: str) -> bool:
    """Go's rule: a name is exported if it starts with an upper case letter."""
    return bool(name) and name[0].isupper()


def is_predeclared(name: str) -> bool:
    return name in PREDECLARED_TYPES


def base_name(e: Optional[Expr]) -> Optional[str]:
    """Name of the type behind e, looking through pointers and qualifiers.

    Type arguments are dropped, so List[T] names the generic type List.
    """
    if isinstance(e, Star):
        return base_name(e.x)
    if isinstance(e, Selector):
        return e.sel.name
    if isinstance(e, Ident):
        return e.name.split("[", 1)[0].strip()
    return None


def literal(e: Expr) -> str:
    """The value of a literal with any string quoting removed."""
    if isinstance(e, BasicLit):
        if e.kind == "string" and len(e.value) >= 2 and e.value[0] in "\"`":
            body = e.value[1:-1]
            if e.value[0] == '"':
                body = body.replace('\\"', '"').replace("\\n", "\n").replace("\\\\", "\\")
            return body
        return e.value
    if isinstance(e, Ident):
        return e.name
    if isinstance(e, Selector):
        return literal(e.x) + "." + e.sel.name
    return ""
