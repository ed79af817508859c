from mango.manpage import escape


def test_safe_alphabet_unchanged():
    s = "Hello World 42 abc XYZ"
    assert escape(s) == s


def test_hyphens():
    out = escape("a-b --c")
    assert out == "a\\-b \\-\\-c"
    assert out.count("\\-") == 3


def test_period_at_word_start():
    assert escape(".foo bar .baz") == "\\&.foo bar \\&.baz"
    assert escape("x.y end.") == "x.y end."


def test_apostrophe_at_word_start():
    assert escape("'tis") == "\\(fmtis"
    assert escape("it's") == "it's"


def test_backslash():
    assert escape("a\\b") == "a\\eb"


def test_newline_becomes_space():
    assert escape("a\nb") == "a b"
    assert escape("a\n.b") == "a \\&.b"
