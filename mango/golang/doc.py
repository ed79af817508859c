"""Package documentation model.

PackageDoc mirrors what go/doc extracts from a package: the package
comment, the top-level declarations with their comments, and types with
the constants, variables, constructors and methods that belong to them.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from .syntax import Expr, FuncType, Ident, Star, base_name, is_exported, literal


@dataclass
class ValueSpec:
    """One line of a const or var declaration."""
    names: List[str]
    type: Optional[Expr] = None
    values: List[Expr] = field(default_factory=list)


@dataclass
class ValueDoc:
    """A const or var declaration, possibly a parenthesized group."""
    kind: str
    specs: List[ValueSpec]
    doc: str = ""

    @property
    def grouped(self) -> bool:
        return len(self.specs) != 1


@dataclass
class FuncDoc:
    name: str
    type: FuncType
    doc: str = ""
    recv: Optional[Expr] = None
    filename: str = ""


@dataclass
class TypeDoc:
    name: str
    type: Expr
    doc: str = ""
    consts: List[ValueDoc] = field(default_factory=list)
    vars: List[ValueDoc] = field(default_factory=list)
    factories: List[FuncDoc] = field(default_factory=list)
    methods: List[FuncDoc] = field(default_factory=list)


@dataclass
class FileDoc:
    """Declarations of a single source file, in source order."""
    path: str
    package: str
    doc: str = ""
    values: List[ValueDoc] = field(default_factory=list)
    types: List[TypeDoc] = field(default_factory=list)
    funcs: List[FuncDoc] = field(default_factory=list)
    bugs: List[str] = field(default_factory=list)


@dataclass
class PackageDoc:
    name: str
    import_path: str = ""
    doc: str = ""
    consts: List[ValueDoc] = field(default_factory=list)
    vars: List[ValueDoc] = field(default_factory=list)
    funcs: List[FuncDoc] = field(default_factory=list)
    types: List[TypeDoc] = field(default_factory=list)
    bugs: List[str] = field(default_factory=list)
    filenames: List[str] = field(default_factory=list)

    @property
    def is_main(self) -> bool:
        return self.name == "main"

    def func(self, name: str) -> Optional[FuncDoc]:
        for f in self.funcs:
            if f.name == name:
                return f
        return None

    def all_values(self) -> List[ValueDoc]:
        out = self.consts + self.vars
        for t in self.types:
            out += t.consts + t.vars
        return out

    def value_of(self, name: str) -> Optional[str]:
        """The literal a const or var was initialized with, if any."""
        for v in self.all_values():
            for spec in v.specs:
                for i, n in enumerate(spec.names):
                    if n == name and i < len(spec.values):
                        return literal(spec.values[i])
        return None

    def filter_exported(self) -> "PackageDoc":
        """Return a copy without unexported identifiers.

        Exported constructors and values belonging to an unexported type
        are moved up to the package level.
        """
        funcs = _exported_funcs(self.funcs)
        consts = _exported_values(self.consts)
        vars = _exported_values(self.vars)
        types = []
        for t in self.types:
            if not is_exported(t.name):
                funcs += _exported_funcs(t.factories)
                consts += _exported_values(t.consts)
                vars += _exported_values(t.vars)
                continue
            types.append(replace(
                t,
                consts=_exported_values(t.consts),
                vars=_exported_values(t.vars),
                factories=_exported_funcs(t.factories),
                methods=_exported_funcs(t.methods),
            ))
        funcs.sort(key=lambda f: f.name)
        return replace(self, consts=consts, vars=vars, funcs=funcs, types=types)


def _exported_funcs(funcs: List[FuncDoc]) -> List[FuncDoc]:
    return [f for f in funcs if is_exported(f.name)]


def _exported_values(values: List[ValueDoc]) -> List[ValueDoc]:
    out = []
    for v in values:
        specs = [s for s in v.specs if any(is_exported(n) for n in s.names)]
        if specs:
            out.append(replace(v, specs=specs))
    return out


def _local_type(e: Optional[Expr], types: Dict[str, TypeDoc]) -> Optional[TypeDoc]:
    """The package type e names, directly or through a pointer."""
    if isinstance(e, Star):
        e = e.x
    if isinstance(e, Ident):
        return types.get(base_name(e) or "")
    return None


def _value_owner(v: ValueDoc, types: Dict[str, TypeDoc]) -> Optional[TypeDoc]:
    """The type the typed specs of v are declared with, if they agree.

    Untyped specs continue an iota sequence and do not count.
    """
    owner = None
    for spec in v.specs:
        if spec.type is None:
            continue
        t = _local_type(spec.type, types) if isinstance(spec.type, Ident) else None
        if t is None or (owner is not None and t is not owner):
            return None
        owner = t
    return owner


def new_package_doc(name: str, files: List[FileDoc], import_path: str = "") -> PackageDoc:
    """Collect the declarations of a package's files into a PackageDoc."""
    files = sorted(files, key=lambda f: f.path)
    pkg = PackageDoc(
        name=name,
        import_path=import_path or name,
        doc="\n\n".join(f.doc for f in files if f.doc),
        filenames=[os.path.basename(f.path) for f in files],
    )

    types: Dict[str, TypeDoc] = {}
    for f in files:
        for t in f.types:
            types.setdefault(t.name, t)

    for f in files:
        pkg.bugs += f.bugs
        for v in f.values:
            owner = _value_owner(v, types)
            if owner is not None:
                (owner.consts if v.kind == "const" else owner.vars).append(v)
            elif v.kind == "const":
                pkg.consts.append(v)
            else:
                pkg.vars.append(v)

        for fn in f.funcs:
            if fn.recv is not None:
                owner = types.get(base_name(fn.recv) or "")
                if owner is not None:
                    owner.methods.append(fn)
                continue
            results = fn.type.results
            owner = _local_type(results[0].type, types) if results else None
            if owner is not None:
                owner.factories.append(fn)
            else:
                pkg.funcs.append(fn)

    for t in types.values():
        t.factories.sort(key=lambda fn: fn.name)
        t.methods.sort(key=lambda fn: fn.name)
    pkg.types = sorted(types.values(), key=lambda t: t.name)
    pkg.funcs.sort(key=lambda fn: fn.name)
    return pkg
