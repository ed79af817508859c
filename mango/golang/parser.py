"""Go source parsing with tree-sitter.

The concrete syntax tree from tree-sitter-go is reduced to the nodes in
syntax.py and the per-file declaration lists in doc.py. Comments are
attached as documentation the way go/doc does it: a comment group is the
doc of the declaration on the line right after it.
"""
from __future__ import annotations

import re
from typing import List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..errors import GoParseError
from .doc import FileDoc, FuncDoc, TypeDoc, ValueDoc, ValueSpec
from .syntax import (
    ArrayType, BasicLit, CallExpr, ChanDir, ChanType, Ellipsis, Expr, Field,
    FuncType, Ident, InterfaceType, MapType, Selector, Star, StructType,
)

GO_LANGUAGE = Language(tree_sitter_go.language())

# go/doc marks known bugs with comments like //BUG(who): text
BUG_RX = re.compile(r"^[ \t]*BUG\((.*?)\):[ \t]*")

# compiler and tool directives such as //go:embed are not documentation
DIRECTIVE_RX = re.compile(r"^(?:line |extern |export |[a-z0-9]+:[a-z0-9])")

LITERAL_KINDS = {
    "interpreted_string_literal": "string",
    "raw_string_literal": "string",
    "int_literal": "int",
    "float_literal": "float",
    "imaginary_literal": "imag",
    "rune_literal": "char",
    "true": "bool",
    "false": "bool",
    "nil": "nil",
}


def text(node: Optional[Node]) -> str:
    if node is None:
        return ""
    return node.text.decode("utf-8")


def named(node: Node) -> List[Node]:
    """Named children, comments excluded."""
    return [c for c in node.named_children if c.type != "comment"]


def comment_text(comments: List[Node]) -> str:
    """The text of a comment group, without comment markers.

    Directive lines such as //go:noinline are skipped. A single space
    after // is dropped, trailing blanks are trimmed, runs of blank lines
    collapse to one and the result ends in a newline.
    """
    lines: List[str] = []
    for c in comments:
        body = text(c)
        if body.startswith("//"):
            body = body[2:]
            if DIRECTIVE_RX.match(body):
                continue
            if body.startswith(" "):
                body = body[1:]
        elif body.startswith("/*"):
            body = body[2:-2]
        lines += [line.rstrip() for line in body.split("\n")]

    out: List[str] = []
    for line in lines:
        if not line and (not out or not out[-1]):
            continue
        out.append(line)
    while out and not out[-1]:
        out.pop()
    if not out:
        return ""
    return "\n".join(out) + "\n"


def comment_groups(nodes: List[Node]) -> List[List[Node]]:
    """Group comments that sit on consecutive lines."""
    groups: List[List[Node]] = []
    for node in nodes:
        if node.type != "comment":
            continue
        if groups and groups[-1][-1].end_point[0] + 1 >= node.start_point[0]:
            groups[-1].append(node)
        else:
            groups.append([node])
    return groups


def doc_before(children: List[Node], i: int) -> str:
    """Doc comment of children[i]: the comments ending on the line above."""
    node = children[i]
    group: List[Node] = []
    row = node.start_point[0]
    j = i - 1
    while j >= 0 and children[j].type == "comment" and children[j].end_point[0] == row - 1:
        group.insert(0, children[j])
        row = children[j].start_point[0]
        j -= 1
    return comment_text(group)


def type_expr(node: Optional[Node]) -> Expr:
    """Map a type node onto the declaration syntax."""
    if node is None:
        return Ident("")
    kind = node.type
    if kind in ("type_identifier", "identifier", "package_identifier", "field_identifier"):
        return Ident(text(node))
    if kind == "qualified_type":
        return Selector(
            Ident(text(node.child_by_field_name("package"))),
            Ident(text(node.child_by_field_name("name"))),
        )
    if kind == "pointer_type":
        return Star(type_expr(named(node)[0]))
    if kind == "parenthesized_type":
        return type_expr(named(node)[0])
    if kind == "slice_type":
        return ArrayType(None, type_expr(node.child_by_field_name("element")))
    if kind == "array_type":
        return ArrayType(
            text(node.child_by_field_name("length")),
            type_expr(node.child_by_field_name("element")),
        )
    if kind == "implicit_length_array_type":
        return ArrayType("...", type_expr(node.child_by_field_name("element")))
    if kind == "map_type":
        return MapType(
            type_expr(node.child_by_field_name("key")),
            type_expr(node.child_by_field_name("value")),
        )
    if kind == "channel_type":
        return ChanType(chan_dir(node), type_expr(node.child_by_field_name("value")))
    if kind == "function_type":
        return func_type(node)
    if kind == "interface_type":
        return InterfaceType(interface_elems(node))
    if kind == "struct_type":
        return StructType(struct_fields(node))
    return Ident(text(node))


def chan_dir(node: Node) -> ChanDir:
    tokens = [c.type for c in node.children if not c.is_named]
    if tokens and tokens[0] == "<-":
        return ChanDir.RECV
    if "<-" in tokens:
        return ChanDir.SEND
    return ChanDir.BOTH


def params(node: Optional[Node]) -> List[Field]:
    """Fields of a parameter_list."""
    if node is None:
        return []
    out = []
    for p in named(node):
        names = [text(n) for n in p.children_by_field_name("name")]
        typ = type_expr(p.child_by_field_name("type"))
        if p.type == "variadic_parameter_declaration":
            typ = Ellipsis(typ)
        out.append(Field(names, typ))
    return out


def results(node: Optional[Node]) -> List[Field]:
    if node is None:
        return []
    if node.type == "parameter_list":
        return params(node)
    return [Field([], type_expr(node))]


def func_type(node: Node) -> FuncType:
    """Signature of a function declaration, method, or function type."""
    return FuncType(
        params(node.child_by_field_name("parameters")),
        results(node.child_by_field_name("result")),
    )


def interface_elems(node: Node) -> List[Field]:
    out = []
    for child in named(node):
        if child.type.endswith("_list"):
            out += interface_elems(child)
        elif child.type in ("method_elem", "method_spec"):
            out.append(Field([text(child.child_by_field_name("name"))], func_type(child)))
        else:
            inner = named(child)
            out.append(Field([], type_expr(inner[0] if len(inner) == 1 else child)))
    return out


def struct_fields(node: Node) -> List[Field]:
    out = []
    for child in named(node):
        if child.type == "field_declaration_list":
            out += struct_fields(child)
            continue
        if child.type != "field_declaration":
            continue
        names = [text(n) for n in child.children_by_field_name("name")]
        typ = type_expr(child.child_by_field_name("type"))
        if not names and any(c.type == "*" for c in child.children):
            typ = Star(typ)
        out.append(Field(names, typ))
    return out


def value_expr(node: Node) -> Expr:
    """Map an initializer expression; only calls and literals keep structure."""
    kind = node.type
    if kind in LITERAL_KINDS:
        return BasicLit(LITERAL_KINDS[kind], text(node))
    if kind == "identifier":
        return Ident(text(node))
    if kind == "selector_expression":
        return Selector(
            value_expr(node.child_by_field_name("operand")),
            Ident(text(node.child_by_field_name("field"))),
        )
    if kind == "call_expression":
        args = node.child_by_field_name("arguments")
        return CallExpr(
            value_expr(node.child_by_field_name("function")),
            [value_expr(a) for a in named(args)] if args is not None else [],
        )
    return Ident(text(node))


def value_specs(decl: Node) -> List[ValueSpec]:
    out = []
    for child in named(decl):
        if child.type.endswith("_spec_list"):
            out += value_specs(child)
        elif child.type in ("const_spec", "var_spec"):
            typ = child.child_by_field_name("type")
            values = child.child_by_field_name("value")
            out.append(ValueSpec(
                names=[text(n) for n in child.children_by_field_name("name")],
                type=type_expr(typ) if typ is not None else None,
                values=[value_expr(v) for v in named(values)] if values is not None else [],
            ))
    return out


def type_specs(decl: Node, doc: str) -> List[TypeDoc]:
    children = decl.children
    specs = [i for i, c in enumerate(children) if c.type in ("type_spec", "type_alias")]
    out = []
    for i in specs:
        spec = children[i]
        spec_doc = doc_before(children, i)
        if not spec_doc and len(specs) == 1:
            spec_doc = doc
        out.append(TypeDoc(
            name=text(spec.child_by_field_name("name")),
            type=type_expr(spec.child_by_field_name("type")),
            doc=spec_doc,
        ))
    return out


def receiver(node: Node) -> Optional[Expr]:
    recv = params(node.child_by_field_name("receiver"))
    return recv[0].type if recv else None


def first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = first_error(child)
            if found is not None:
                return found
    return None


def parse_source(source: bytes, path: str) -> FileDoc:
    """Parse one Go file into its declarations."""
    tree = Parser(GO_LANGUAGE).parse(source)
    root = tree.root_node
    if root.has_error:
        bad = first_error(root) or root
        row, col = bad.start_point[0] + 1, bad.start_point[1] + 1
        raise GoParseError(f"{path}:{row}:{col}: syntax error")

    f = FileDoc(path=path, package="")
    children = root.children
    for i, node in enumerate(children):
        kind = node.type
        if kind == "package_clause":
            f.package = text(named(node)[0])
            f.doc = doc_before(children, i)
        elif kind == "function_declaration":
            f.funcs.append(FuncDoc(
                name=text(node.child_by_field_name("name")),
                type=func_type(node),
                doc=doc_before(children, i),
                filename=path,
            ))
        elif kind == "method_declaration":
            f.funcs.append(FuncDoc(
                name=text(node.child_by_field_name("name")),
                type=func_type(node),
                doc=doc_before(children, i),
                recv=receiver(node),
                filename=path,
            ))
        elif kind == "type_declaration":
            f.types += type_specs(node, doc_before(children, i))
        elif kind in ("const_declaration", "var_declaration"):
            f.values.append(ValueDoc(
                kind=kind.split("_")[0],
                specs=value_specs(node),
                doc=doc_before(children, i),
            ))

    for group in comment_groups(children):
        body = comment_text(group)
        m = BUG_RX.match(body)
        if m:
            f.bugs.append(body[m.end():])
    return f


def parse_file(path: str) -> FileDoc:
    try:
        with open(path, "rb") as fh:
            source = fh.read()
    except OSError as e:
        raise GoParseError(f"{path}: {e.strerror or e}") from e
    return parse_source(source, path)
