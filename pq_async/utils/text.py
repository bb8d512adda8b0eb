"""
Byte-wise text helpers: trimming, ASCII case folding and joining.

**Conceptual**: These helpers treat text as a run of single-byte characters
and classify them the way the "C" locale does. Whitespace is exactly space,
tab, newline, vertical tab, form feed and carriage return; case folding only
maps A-Z to a-z. Unicode whitespace (e.g. U+00A0) and non-ASCII letters are
left alone, which keeps results identical whether the text arrives as `str`
or as raw `bytes` from the wire.

In-place trimming works on `bytearray`, the only mutable string type Python
has; the `*_copy` variants accept `str` or `bytes` and return the same type.
"""

from typing import AnyStr, Iterable, Union

WHITESPACE = " \t\n\v\f\r"
_WHITESPACE_BYTES = WHITESPACE.encode("ascii")

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_LOWER_TABLE = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)


def _whitespace_for(value: Union[str, bytes, bytearray]) -> Union[str, bytes]:
    if isinstance(value, str):
        return WHITESPACE
    if isinstance(value, (bytes, bytearray)):
        return _WHITESPACE_BYTES
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


# trim from start (in place)
def ltrim(buf: bytearray) -> None:
    """Remove leading whitespace from `buf` in place."""
    if not isinstance(buf, bytearray):
        raise TypeError(f"in-place trim needs a bytearray, got {type(buf).__name__}")
    keep = len(buf) - len(buf.lstrip(_WHITESPACE_BYTES))
    del buf[:keep]


# trim from end (in place)
def rtrim(buf: bytearray) -> None:
    """Remove trailing whitespace from `buf` in place."""
    if not isinstance(buf, bytearray):
        raise TypeError(f"in-place trim needs a bytearray, got {type(buf).__name__}")
    del buf[len(buf.rstrip(_WHITESPACE_BYTES)):]


# trim from both ends (in place)
def trim(buf: bytearray) -> None:
    """Remove leading and trailing whitespace from `buf` in place."""
    ltrim(buf)
    rtrim(buf)


def ltrim_copy(s: AnyStr) -> AnyStr:
    """Return `s` without leading whitespace."""
    chars = _whitespace_for(s)
    return s.lstrip(chars)


def rtrim_copy(s: AnyStr) -> AnyStr:
    """Return `s` without trailing whitespace."""
    chars = _whitespace_for(s)
    return s.rstrip(chars)


def trim_copy(s: AnyStr) -> AnyStr:
    """Return `s` without leading or trailing whitespace."""
    chars = _whitespace_for(s)
    return s.strip(chars)


def str_to_lower(s: AnyStr) -> AnyStr:
    """
    Lowercase ASCII letters only; every other character is unchanged.

    `str.lower()` would also fold non-ASCII letters ("Ä" -> "ä"), which the
    byte-wise classification deliberately does not.
    """
    if isinstance(s, str):
        return s.translate(_LOWER_TABLE)
    if isinstance(s, (bytes, bytearray)):
        # bytes.lower() only touches A-Z
        return s.lower()
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def iequals(a: AnyStr, b: AnyStr) -> bool:
    """
    Case-insensitive (ASCII) equality.

    Strings of different length are never equal; that check happens before
    any folding.
    """
    if len(a) != len(b):
        return False
    return a == b or str_to_lower(a) == str_to_lower(b)


def join(items: Iterable[str], separator: str) -> str:
    """
    Concatenate `items` with `separator` between consecutive elements.

    No leading or trailing separator; an empty sequence gives "" and a
    single element is returned as-is.

    Raises:
        TypeError: If any element is not a str.
    """
    parts = list(items)
    for part in parts:
        if not isinstance(part, str):
            raise TypeError(f"join expects str elements, got {type(part).__name__}")
    return separator.join(parts)
