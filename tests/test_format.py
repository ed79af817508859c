import pytest

from mango.errors import ImpossibleIndentation
from mango.manpage import BoldRoman, Formatter, Loc, Prose, Raw, unstring


def test_prose_sentences_on_own_lines():
    f = Formatter()
    f.paras(unstring("Hello world. Goodbye."))
    assert f.getvalue() == "Hello world.\nGoodbye.\n"


def test_paragraphs_separated_by_pp():
    f = Formatter()
    f.paras([Prose(["a."]), Raw(".nf\nraw\n.fi\n")])
    assert f.getvalue() == "a.\n.PP\n.nf\nraw\n.fi\n"


def test_code_block():
    f = Formatter()
    f.code([Loc(1, "x := 1"), Loc(1, "y := 2")])
    assert f.getvalue() == ".RS\nx := 1\n.sp 0\ny := 2\n.RE\n"


def test_code_nested_indentation_balances():
    f = Formatter()
    f.code([Loc(1, "a"), Loc(2, "b"), Loc(3, "c"), Loc(1, "d")])
    out = f.getvalue()
    assert out == ".RS\na\n.sp 0\n.RS\nb\n.sp 0\n.RS\nc\n.sp 0\n.RE\n.RE\nd\n.RE\n"
    assert out.count(".RS\n") == out.count(".RE\n")


def test_code_unbalanced_at_end():
    f = Formatter()
    f.code([Loc(1, "a"), Loc(2, "b")])
    out = f.getvalue()
    assert out.count(".RS\n") == out.count(".RE\n") == 2


def test_code_blank_line():
    f = Formatter()
    f.code([Loc(1, "a"), Loc(-1, ""), Loc(1, "b")])
    assert ".sp\nb\n" in f.getvalue()


def test_code_escapes_lines():
    f = Formatter()
    f.code([Loc(1, ".hidden -x")])
    assert "\\&.hidden \\-x\n" in f.getvalue()


def test_impossible_indentation():
    f = Formatter()
    with pytest.raises(ImpossibleIndentation):
        f.code([Loc(2, "a"), Loc(0, "b")])


def test_section_starts_on_new_line():
    f = Formatter()
    f.write("x")
    f.section("NAME")
    assert f.getvalue() == 'x\n.SH "NAME"\n'


def test_bold_roman():
    br = BoldRoman()
    br.B("func ")
    br.B("F(")
    br.R("x")
    br.B(" int)")
    assert br.flush() == '.BR "func F(" "x" " int)"\n'
    assert br.flush() == ""


def test_bold_roman_starting_roman():
    br = BoldRoman()
    br.R("x")
    br.B("y")
    assert br.flush() == '.BR "" "x" "y"\n'


def test_formatter_br():
    f = Formatter()
    f.BR.B("a-b")
    f.br()
    assert f.getvalue() == '.BR "a\\-b"\n'
