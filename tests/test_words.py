from mango.manpage.words import WordKind, classify, refs, words


def test_classify():
    assert classify("-flag") is WordKind.FLAG
    assert classify("ls(1)") is WordKind.REF
    assert classify("HTTP") is WordKind.ACRONYM
    assert classify("USA.") is WordKind.ACRONYM
    assert classify("/usr/bin") is WordKind.PATH
    assert classify("a/b/c") is WordKind.PATH
    assert classify("hello") is WordKind.PLAIN
    assert classify("Go") is WordKind.PLAIN
    assert classify("NaN") is WordKind.PLAIN
    assert classify("...") is WordKind.PLAIN
    assert classify("a//b") is WordKind.PLAIN


def test_flag_wins_over_acronym():
    assert classify("-ABC") is WordKind.FLAG


def test_cross_reference():
    assert words("See ls(1) for details.") == ["See", ".BR ls (1)", "for details."]


def test_mixed_sentence():
    assert words("Use -v to read /etc/passwd now.") == [
        "Use", ".B \\-v", "to read", ".I /etc/passwd", "now.",
    ]


def test_acronym_small_caps():
    assert words("Speaks HTTP well.") == ["Speaks", ".SM HTTP", "well."]


def test_refs():
    assert list(refs("See ls(1) and cat(1).")) == ["ls(1)"]
