from mango.golang.doc import FileDoc, FuncDoc, TypeDoc, ValueDoc, ValueSpec, new_package_doc
from mango.golang.syntax import BasicLit, Field, FuncType, Ident, Star, StructType


def sample_files():
    a = FileDoc(
        path="/src/shapes/a.go",
        package="shapes",
        doc="Package shapes draws.\n",
        types=[
            TypeDoc("Circle", StructType(), doc="Circle is round.\n"),
            TypeDoc("point", StructType()),
        ],
        values=[
            ValueDoc("const", [ValueSpec(["Version"], None, [BasicLit("string", '"1.2"')])]),
            ValueDoc("var", [ValueSpec(["Unit"], Ident("Circle"))]),
        ],
        funcs=[
            FuncDoc("NewCircle", FuncType([], [Field([], Star(Ident("Circle")))])),
            FuncDoc("Area", FuncType(), recv=Star(Ident("Circle"))),
            FuncDoc("origin", FuncType([], [Field([], Ident("point"))])),
            FuncDoc("Origin", FuncType([], [Field([], Ident("point"))])),
        ],
        bugs=["Circles are squares.\n"],
    )
    b = FileDoc(
        path="/src/shapes/b.go",
        package="shapes",
        funcs=[FuncDoc("Draw", FuncType()), FuncDoc("helper", FuncType())],
    )
    return [b, a]


def test_association():
    pkg = new_package_doc("shapes", sample_files())
    assert pkg.doc == "Package shapes draws.\n"
    assert pkg.filenames == ["a.go", "b.go"]
    assert [f.name for f in pkg.funcs] == ["Draw", "helper"]
    circle = pkg.types[0]
    assert circle.name == "Circle"
    assert [f.name for f in circle.factories] == ["NewCircle"]
    assert [f.name for f in circle.methods] == ["Area"]
    assert [v.specs[0].names for v in circle.vars] == [["Unit"]]
    assert pkg.bugs == ["Circles are squares.\n"]
    assert pkg.import_path == "shapes"


def test_value_of():
    pkg = new_package_doc("shapes", sample_files())
    assert pkg.value_of("Version") == "1.2"
    assert pkg.value_of("Missing") is None


def test_filter_exported():
    pkg = new_package_doc("shapes", sample_files()).filter_exported()
    assert [t.name for t in pkg.types] == ["Circle"]
    # exported constructor of an unexported type moves to the package level
    assert [f.name for f in pkg.funcs] == ["Draw", "Origin"]


def test_filter_value_specs():
    files = [FileDoc(
        path="x.go",
        package="x",
        values=[
            ValueDoc("var", [ValueSpec(["a"]), ValueSpec(["B"])]),
            ValueDoc("var", [ValueSpec(["c"])]),
        ],
    )]
    pkg = new_package_doc("x", files).filter_exported()
    assert len(pkg.vars) == 1
    assert [s.names for s in pkg.vars[0].specs] == [["B"]]


def test_is_main():
    assert new_package_doc("main", []).is_main
    assert not new_package_doc("shapes", []).is_main


def test_generic_type_methods():
    f = FileDoc(
        path="/src/list/list.go",
        package="list",
        types=[TypeDoc("List", StructType())],
        funcs=[
            FuncDoc("New", FuncType([], [Field([], Star(Ident("List[T]")))])),
            FuncDoc("Push", FuncType([Field(["v"], Ident("T"))]), recv=Star(Ident("List[T]"))),
            FuncDoc("Len", FuncType(), recv=Ident("List[T]")),
        ],
    )
    pkg = new_package_doc("list", [f]).filter_exported()
    assert pkg.funcs == []
    lst = pkg.types[0]
    assert [fn.name for fn in lst.factories] == ["New"]
    assert [fn.name for fn in lst.methods] == ["Len", "Push"]
