import pytest

from mfcommons.strings import (
    contains,
    ends_with,
    is_blank,
    is_blank_char,
    is_space_char,
    join,
    split,
    starts_with,
    strip,
    text_to_utf8,
    to_lower_case,
    to_upper_case,
    utf8_to_text,
)


@pytest.mark.parametrize(
    "substring, expected",
    [
        ("a", True),
        ("b", True),
        ("abcd", True),
        ("abcde", True),
        ("de", True),
        ("", True),
        ("ac", False),
        (" ", False),
        ("\\", False),
    ],
)
def test_contains(substring, expected):
    assert contains("abcde", substring) is expected


def test_split_on_colon():
    assert split("boo:and:foo", ":") == ["boo", "and", "foo"]


def test_split_on_o_drops_trailing_empties():
    assert split("boo:and:foo", "o") == ["b", "", ":and:f"]


def test_split_without_match():
    assert split("boo:and:foo", " ") == ["boo:and:foo"]


def test_split_default_separator_is_newline():
    assert split("a\nb\n\n") == ["a", "b"]


def test_split_rejects_empty_separator():
    with pytest.raises(ValueError):
        split("abc", "")


@pytest.mark.parametrize(
    "prefix, expected",
    [
        ("a", True),
        ("ab", True),
        ("abcde", True),
        ("b", False),
        ("bcde", False),
        ("ac", False),
        (" ", False),
        ("e", False),
    ],
)
def test_starts_with(prefix, expected):
    assert starts_with("abcde", prefix) is expected


def test_starts_with_on_empty_text():
    assert starts_with("", "a") is False
    assert starts_with("", "") is True


@pytest.mark.parametrize(
    "suffix, expected",
    [
        ("e", True),
        ("de", True),
        ("abcde", True),
        ("d", False),
        ("abcd", False),
        ("ce", False),
        (" ", False),
        ("\\", False),
        ("a", False),
    ],
)
def test_ends_with(suffix, expected):
    assert ends_with("abcde", suffix) is expected


def test_ends_with_on_empty_text():
    assert ends_with("", "a") is False
    assert ends_with("", "") is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("abc", "abc"),
        (" abc", "abc"),
        ("abc ", "abc"),
        (" abc ", "abc"),
        (" \t  abc  \t \n \t ", "abc"),
        ("  ", ""),
        ("", ""),
        ("\n", ""),
        (" a b ", "a b"),
    ],
)
def test_strip(text, expected):
    assert strip(text) == expected


def test_to_upper_case():
    assert to_upper_case("e") == "E"
    assert to_upper_case("aBc1") == "ABC1"


def test_to_lower_case():
    assert to_lower_case("E") == "e"
    assert to_lower_case("AbC1") == "abc1"


def test_case_conversion_keeps_length():
    text = "İstanbul ß"
    assert len(to_lower_case(text)) == len(text)
    assert len(to_upper_case(text)) == len(text)


def test_is_blank():
    assert is_blank("") is True
    assert is_blank(" \t ") is True
    assert is_blank(" \n ") is False
    assert is_blank(" a ") is False


def test_char_predicates():
    assert is_blank_char(" ") is True
    assert is_blank_char("\t") is True
    assert is_blank_char("\n") is False
    assert is_space_char("\n") is True
    assert is_space_char("x") is False


def test_char_predicates_reject_multiple_chars():
    with pytest.raises(ValueError):
        is_blank_char("ab")
    with pytest.raises(ValueError):
        is_space_char("")


def test_join():
    assert join(", ", ["a", "b", "c"]) == "a, b, c"
    assert join("-", []) == ""


def test_utf8_round_trip():
    text = "héllo wörld €"
    assert utf8_to_text(text_to_utf8(text)) == text
    assert text_to_utf8("é") == b"\xc3\xa9"


def test_utf8_empty():
    assert utf8_to_text(b"") == ""
    assert text_to_utf8("") == b""


def test_utf8_invalid_input():
    with pytest.raises(UnicodeDecodeError):
        utf8_to_text(b"\xff\xfe")
    with pytest.raises(UnicodeEncodeError):
        text_to_utf8("\ud800")