"""
Tests for pq_async/utils/text.py
"""

import pytest

from pq_async.utils.text import (
    iequals,
    join,
    ltrim,
    ltrim_copy,
    rtrim,
    rtrim_copy,
    str_to_lower,
    trim,
    trim_copy,
)


# ============================================================================
# Trimming
# ============================================================================

def test_trim_copy_both_sides():
    """Test that trim_copy removes whitespace on both sides only."""
    assert trim_copy("  ab c  ") == "ab c"


def test_ltrim_copy_left_side_only():
    """Test that ltrim_copy keeps trailing whitespace."""
    assert ltrim_copy("  ab c  ") == "ab c  "


def test_rtrim_copy_right_side_only():
    """Test that rtrim_copy keeps leading whitespace."""
    assert rtrim_copy("  ab c  ") == "  ab c"


def test_trim_copy_all_c_whitespace():
    """Test the full byte-wise whitespace set."""
    assert trim_copy(" \t\n\v\f\rx\r\f\v\n\t ") == "x"


def test_trim_copy_keeps_unicode_spaces():
    """Test that non-ASCII spaces are not classified as whitespace."""
    assert trim_copy("\u00a0ab\u00a0") == "\u00a0ab\u00a0"
    assert trim_copy("\x1cab") == "\x1cab"


def test_trim_copy_all_whitespace_and_empty():
    """Test degenerate inputs."""
    assert trim_copy("   ") == ""
    assert trim_copy("") == ""


def test_trim_copy_bytes_returns_bytes():
    """Test that bytes in gives bytes out."""
    assert trim_copy(b"  select 1\n") == b"select 1"
    assert ltrim_copy(b"\t1 ") == b"1 "
    assert rtrim_copy(b"\t1 ") == b"\t1"


def test_trim_copy_does_not_modify_argument():
    """Test that copying trim leaves a bytearray argument alone."""
    buf = bytearray(b"  x  ")
    assert trim_copy(buf) == bytearray(b"x")
    assert buf == bytearray(b"  x  ")


def test_trim_copy_rejects_other_types():
    """Test that non-text input raises TypeError."""
    with pytest.raises(TypeError):
        trim_copy(42)
    with pytest.raises(TypeError):
        ltrim_copy(None)
    with pytest.raises(TypeError):
        rtrim_copy([" a "])


def test_in_place_trims():
    """Test ltrim/rtrim/trim mutate the bytearray they are given."""
    buf = bytearray(b"  ab c  ")
    ltrim(buf)
    assert buf == bytearray(b"ab c  ")

    buf = bytearray(b"  ab c  ")
    rtrim(buf)
    assert buf == bytearray(b"  ab c")

    buf = bytearray(b"  ab c  ")
    result = trim(buf)
    assert buf == bytearray(b"ab c")
    assert result is None


def test_in_place_trim_all_whitespace():
    """Test that an all-whitespace buffer becomes empty."""
    buf = bytearray(b" \t\n ")
    trim(buf)
    assert buf == bytearray()


def test_in_place_trim_rejects_immutable():
    """Test that in-place trimming needs a mutable buffer."""
    with pytest.raises(TypeError):
        ltrim("  x")
    with pytest.raises(TypeError):
        rtrim(b"x  ")


# ============================================================================
# Case folding
# ============================================================================

def test_str_to_lower_ascii_only():
    """Test that only A-Z are folded."""
    assert str_to_lower("HeLLo World 123") == "hello world 123"
    assert str_to_lower("ÄBC") == "Äbc"


def test_str_to_lower_bytes():
    """Test bytes input."""
    assert str_to_lower(b"SELECT \xc4") == b"select \xc4"


def test_str_to_lower_rejects_other_types():
    """Test that non-text input raises TypeError."""
    with pytest.raises(TypeError):
        str_to_lower(None)


def test_iequals_case_insensitive():
    """Test ASCII case-insensitive equality."""
    assert iequals("AbC", "abc")
    assert iequals(b"SELECT", b"select")
    assert iequals("", "")


def test_iequals_length_mismatch():
    """Test that different lengths are never equal."""
    assert not iequals("abc", "abcd")
    assert not iequals("abcd", "ABC")


def test_iequals_different_content():
    """Test same length, different letters."""
    assert not iequals("abc", "abd")


def test_iequals_non_ascii_not_folded():
    """Test that non-ASCII letters must match exactly."""
    assert not iequals("Ä", "ä")


# ============================================================================
# Join
# ============================================================================

def test_join_three_elements():
    """Test the separator appears only between elements."""
    assert join(["a", "b", "c"], ",") == "a,b,c"


def test_join_empty_and_single():
    """Test that empty gives "" and a single element has no separator."""
    assert join([], ",") == ""
    assert join(["x"], ",") == "x"


def test_join_accepts_any_iterable():
    """Test tuples and generators."""
    assert join(("a", "b"), ", ") == "a, b"
    assert join((s for s in ["p", "q"]), "-") == "p-q"


def test_join_keeps_empty_elements():
    """Test that empty strings still get separators around them."""
    assert join(["", "b"], ",") == ",b"
    assert join(["a", "", "c"], ",") == "a,,c"


def test_join_rejects_non_strings():
    """Test that every element must be a str."""
    with pytest.raises(TypeError) as exc_info:
        join(["a", 1], ",")
    assert "int" in str(exc_info.value)
