"""Tests for member name ordering."""

from ts_api_md.member_sort_key import member_sort_key


def test_case_insensitive() -> None:
    """Upper and lower case names interleave alphabetically."""
    names = ["pop", "Clear", "at", "Bar"]
    assert sorted(names, key=member_sort_key) == ["at", "Bar", "Clear", "pop"]


def test_case_variants_keep_order() -> None:
    """Names equal at base strength keep their original order."""
    assert sorted(["size", "Size"], key=member_sort_key) == ["size", "Size"]
    assert sorted(["Size", "size"], key=member_sort_key) == ["Size", "size"]


def test_accents_ignored() -> None:
    """Accented letters sort with their base letter."""
    names = ["f", "élan", "d"]
    assert sorted(names, key=member_sort_key) == ["d", "élan", "f"]


def test_punctuation_before_digits_before_letters() -> None:
    """Punctuation sorts first, then digits, then letters."""
    names = ["a", "1a", "_a"]
    assert sorted(names, key=member_sort_key) == ["_a", "1a", "a"]


def test_prefix_sorts_first() -> None:
    """A name sorts before names it is a prefix of."""
    assert sorted(["sizeOf", "size"], key=member_sort_key) == ["size", "sizeOf"]


def test_punctuation_uses_code_point_order() -> None:
    """Within punctuation, characters compare by code point."""
    assert sorted(["_x", "$x"], key=member_sort_key) == ["$x", "_x"]
