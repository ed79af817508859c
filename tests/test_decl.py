from mango.golang.doc import FuncDoc, ValueDoc, ValueSpec
from mango.golang.syntax import (
    ArrayType, ChanDir, ChanType, Ellipsis, Field, FuncType, Ident,
    InterfaceType, MapType, Selector, Star, StructType,
)
from mango.manpage import Formatter
from mango.manpage.decl import field_lines, func_decl, type_decl, typesig, values


def test_typesig_composites():
    assert typesig(MapType(Ident("string"), ArrayType(None, Star(Ident("T"))))) == "map[string][]*T"
    assert typesig(ArrayType("4", Ident("byte"))) == "[4]byte"
    assert typesig(Selector(Ident("io"), Ident("Reader"))) == "io.Reader"


def test_typesig_channels():
    assert typesig(ChanType(ChanDir.BOTH, Ident("int"))) == "chan int"
    assert typesig(ChanType(ChanDir.RECV, Ident("int"))) == "<-chan int"
    assert typesig(ChanType(ChanDir.SEND, Ident("int"))) == "chan<- int"


def test_typesig_functions():
    ft = FuncType([Field(["a", "b"], Ident("int"))], [Field([], Ident("error"))])
    assert typesig(ft) == "func(a, b int) error"

    ft = FuncType([], [Field([], Ident("int")), Field([], Ident("error"))])
    assert typesig(ft) == "func() (int, error)"

    ft = FuncType([Field(["args"], Ellipsis(Ident("string")))], [Field(["n"], Ident("int"))])
    assert typesig(ft) == "func(args ...string) (n int)"


def test_typesig_inline_interface_and_struct():
    it = InterfaceType([Field(["Close"], FuncType([], [Field([], Ident("error"))]))])
    assert typesig(it) == "interface{Close() error}"
    st = StructType([Field(["X", "y"], Ident("int"))])
    assert typesig(st) == "struct{X int}"


def test_func_decl():
    fn = FuncDoc(
        name="Read",
        type=FuncType(
            [Field(["p"], ArrayType(None, Ident("byte")))],
            [Field(["n"], Ident("int")), Field(["err"], Ident("error"))],
        ),
        recv=Star(Ident("File")),
    )
    f = Formatter()
    func_decl(f, fn)
    assert f.getvalue() == (
        '.BR "func (*File) Read(" "p" " []byte) (" "n" " int, " "err" " error)"\n'
    )


def test_field_lines_hide_unexported():
    fields = [
        Field(["Name"], Ident("string")),
        Field(["secret"], Ident("int")),
        Field([], Star(Ident("Embedded"))),
        Field([], Ident("hidden")),
        Field(["A", "b"], Ident("bool")),
    ]
    lines, hidden = field_lines(fields)
    assert lines == ["Name string", "*Embedded", "A bool"]
    assert hidden


def test_struct_decl():
    f = Formatter()
    type_decl(f, "T", StructType([Field(["A"], Ident("int")), Field(["b"], Ident("int"))]))
    assert f.getvalue() == (
        ".B type T struct {\n.RS\n.B A int\n.sp 0\n"
        ".B //contains unexported fields.\n.RE\n.B }\n"
    )


def test_interface_decl():
    read = FuncType(
        [Field(["p"], ArrayType(None, Ident("byte")))],
        [Field(["n"], Ident("int")), Field(["err"], Ident("error"))],
    )
    f = Formatter()
    type_decl(f, "R", InterfaceType([Field(["Read"], read), Field(["close"], FuncType())]))
    out = f.getvalue()
    assert ".B Read(p []byte) (n int, err error)\n" in out
    assert "//contains unexported methods." in out
    assert "close" not in out


def test_plain_type_decl():
    f = Formatter()
    type_decl(f, "Handler", FuncType([Field(["w"], Ident("Writer"))], []))
    assert f.getvalue() == ".B type Handler func(w Writer)\n"


def test_single_value():
    f = Formatter()
    values(f, [ValueDoc("const", [ValueSpec(["MaxSize"], Ident("int"))], doc="Maximum size.\n")])
    assert f.getvalue() == ".PP\n.B const MaxSize int\n.PP\nMaximum size.\n"


def test_grouped_values():
    f = Formatter()
    values(f, [ValueDoc("var", [ValueSpec(["A"]), ValueSpec(["B", "c"], Ident("string"))])])
    assert f.getvalue() == ".PP\n.B var (\n.RS\n.B A\n.sp 0\n.B B string\n.RE\n.B )\n"


def test_interface_type_set():
    f = Formatter()
    number = InterfaceType([Field([], Ident("~int | ~float64")), Field([], Ident("comparable"))])
    type_decl(f, "Number", number)
    out = f.getvalue()
    assert ".B ~int | ~float64\n.sp 0\n.B comparable\n" in out
    assert "unexported" not in out


def test_interface_embeds_unexported():
    f = Formatter()
    type_decl(f, "R", InterfaceType([Field([], Ident("reader")), Field([], Ident("Closer"))]))
    out = f.getvalue()
    assert ".B Closer\n" in out
    assert "//contains unexported methods." in out
    assert "reader" not in out


def test_generic_receiver():
    f = Formatter()
    func_decl(f, FuncDoc("Push", FuncType([Field(["v"], Ident("T"))]), recv=Star(Ident("List[T]"))))
    assert f.getvalue() == '.BR "func (*List[T]) Push(" "v" " T)"\n'
