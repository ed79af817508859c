import re

from mango.manpage.regex import REF_RX, USAGE_RX, inverse_match


def test_inverse_match_splits_between_matches():
    assert inverse_match(re.compile(","), "a,b,,c") == ["a", "b", "", "c"]


def test_inverse_match_drops_empty_ends():
    assert inverse_match(re.compile(","), ",a,") == ["a"]


def test_inverse_match_without_matches():
    assert inverse_match(re.compile(","), "abc") == ["abc"]


def test_inverse_match_fully_covered():
    assert inverse_match(re.compile(",+"), ",,,") == []


def test_ref_pattern():
    assert REF_RX.search("ls(1)")
    assert REF_RX.search("man-pages(7)")
    assert not REF_RX.search("ls(1),")
    assert not REF_RX.search("f(x, y)")


def test_usage_pattern():
    line = "Usage: %name %flags [file] target"
    m = USAGE_RX.search(line)
    assert m
    assert line[m.end():] == "[file] target"
    assert not USAGE_RX.search("Use it wisely")


def test_usage_pattern_without_arguments():
    for line in ("Usage: %name %flags", "Usage: %name", "Usage: %flag"):
        m = USAGE_RX.search(line)
        assert m
        assert line[m.end():] == ""
