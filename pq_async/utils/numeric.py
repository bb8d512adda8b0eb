"""
Number <-> text conversion with explicit numeric-locale handling.

**Conceptual**: Query results are often rendered for humans ("1,234,567 rows")
while query parameters arrive as text that has to become numbers. This module
does both directions:

- `num_to_str` formats integers and floats, grouping the integer digits
  according to a `NumericLocale`. The locale is an explicit value: callers
  pass one in (or get a snapshot of the process locale by default), so the
  same call gives the same text no matter what another thread does with
  `locale.setlocale`.
- `str_to_num` parses the longest numeric prefix of a string and, when
  nothing parses, returns zero. That silent default is lossy: "0" and "abc"
  both give 0. `parse_num` performs the same parse but reports success
  explicitly through a `ParseResult`; new code should prefer it.

**Formatting rules** (the classic stream defaults):
- Integers render as plain decimal digits with an optional "-".
- Floats render like printf "%g" with precision 6: 3.14159, 1e+20,
  1.23457e+06, inf, nan. No fixed number of decimal places is forced.
- Only the integer part of the mantissa is grouped; the decimal point comes
  from the locale, the exponent is never grouped.

**Parsing rules** (classic locale, "." decimal point, no grouping):
- Leading whitespace (space, \\t, \\n, \\v, \\f, \\r) is skipped, then an
  optional sign.
- Integer kinds consume ASCII digits; "4.7" parses as 4, "0x1A" as 0.
- Float kinds consume digits, an optional fraction and an optional exponent,
  or the literals inf/infinity/nan (case-insensitive).
- The result must fit the requested kind. Out-of-range values, and negative
  values for unsigned numpy kinds, are failures.
"""

import locale
import logging
import math
import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Iterator, Optional, Tuple, Union

import numpy as np

if TYPE_CHECKING:
    from pq_async.config.settings import FormatSettings

logger = logging.getLogger(__name__)

Number = Union[int, float, np.integer, np.floating]
NumericKind = Union[type, np.dtype]

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.ASCII | re.IGNORECASE,
)


# =============================================================================
# NUMERIC LOCALE
# =============================================================================


@dataclass(frozen=True)
class NumericLocale:
    """
    The numeric facets of a locale: decimal point, thousands separator and
    digit grouping.

    `grouping` follows `locale.localeconv()`: entries are group sizes read
    from the right, 0 repeats the previous size for the rest of the number,
    `locale.CHAR_MAX` stops grouping, and running out of entries also stops
    grouping. An empty tuple means no grouping.

    Attributes:
        decimal_point: Character placed between integer and fraction digits.
        thousands_sep: Separator inserted between digit groups.
        grouping: Group sizes, right to left.
    """
    decimal_point: str = "."
    thousands_sep: str = ""
    grouping: Tuple[int, ...] = ()

    def __post_init__(self):
        """Validate the grouping rule."""
        if not self.decimal_point:
            raise ValueError("decimal_point must not be empty")
        object.__setattr__(self, "grouping", tuple(self.grouping))
        for size in self.grouping:
            if not 0 <= size <= locale.CHAR_MAX:
                raise ValueError(f"grouping sizes must be in [0, {locale.CHAR_MAX}], got: {size}")
        if self.grouping and self.grouping[0] == 0:
            raise ValueError("grouping cannot start with 0 (nothing to repeat)")

    @property
    def groups_digits(self) -> bool:
        """True when this locale would insert any separator."""
        return bool(self.thousands_sep) and bool(self.grouping) and self.grouping[0] != locale.CHAR_MAX

    def without_grouping(self) -> "NumericLocale":
        """Copy with grouping suppressed; decimal point and separator kept."""
        return replace(self, grouping=())

    @classmethod
    def classic(cls) -> "NumericLocale":
        """The "C" locale: "." decimal point, no grouping."""
        return cls()

    @classmethod
    def current(cls) -> "NumericLocale":
        """
        Snapshot the process's active LC_NUMERIC conventions.

        Reads `locale.localeconv()` without changing any locale state. Python
        starts in the "C" locale, so unless the host application has called
        `locale.setlocale` this equals `classic()`.
        """
        conv = locale.localeconv()
        return cls(
            decimal_point=conv["decimal_point"] or ".",
            thousands_sep=conv["thousands_sep"],
            grouping=tuple(conv["grouping"]),
        )

    @classmethod
    def from_name(cls, name: str) -> "NumericLocale":
        """
        Load the numeric conventions of a named locale (e.g. "en_US.UTF-8").

        The C library only exposes another locale's conventions through
        setlocale, so LC_NUMERIC is switched, read and restored. Call this
        once at startup (see `from_settings`) and pass the result around
        rather than calling it on a hot path from several threads.

        Raises:
            ValueError: If the locale is not installed on this host.
        """
        previous = locale.setlocale(locale.LC_NUMERIC)
        try:
            locale.setlocale(locale.LC_NUMERIC, name)
        except locale.Error as e:
            raise ValueError(f"numeric locale {name!r} is not available: {e}") from e
        try:
            return cls.current()
        finally:
            locale.setlocale(locale.LC_NUMERIC, previous)

    @classmethod
    def from_settings(cls, settings: "FormatSettings") -> "NumericLocale":
        """
        Resolve the locale named in `FormatSettings`.

        "" -> the active process locale, "C"/"POSIX" -> classic, anything
        else -> `from_name`.
        """
        if settings.is_classic:
            return cls.classic()
        if not settings.locale_name:
            return cls.current()
        return cls.from_name(settings.locale_name)


def _grouping_intervals(grouping: Tuple[int, ...]) -> Iterator[int]:
    last_interval = None
    for interval in grouping:
        if interval == locale.CHAR_MAX:
            return
        if interval == 0:
            # repeat the previous size forever
            while True:
                yield last_interval
        yield interval
        last_interval = interval


def _group_digits(digits: str, numeric_locale: NumericLocale) -> str:
    if not numeric_locale.groups_digits:
        return digits

    groups = []
    end = len(digits)
    for interval in _grouping_intervals(numeric_locale.grouping):
        if end <= interval:
            break
        groups.append(digits[end - interval:end])
        end -= interval
    groups.append(digits[:end])
    return numeric_locale.thousands_sep.join(reversed(groups))


# =============================================================================
# FORMATTING
# =============================================================================


def _default_text(value: Any) -> str:
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("num_to_str does not format booleans")
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return format(float(value), "g")
    raise TypeError(f"num_to_str expects an int or float, got {type(value).__name__}")


def num_to_str(
    value: Number,
    grouping: bool = True,
    numeric_locale: Optional[NumericLocale] = None,
) -> str:
    """
    Format a number as decimal text.

    Args:
        value: Python or numpy integer/float.
        grouping: Group integer digits per the locale. When False, only the
                  grouping rule is switched off; the locale's decimal point
                  is still used.
        numeric_locale: Conventions to use; defaults to a snapshot of the
                        active process locale.

    Returns:
        The formatted text.

    Raises:
        TypeError: For booleans and non-numeric values.

    Examples:
        >>> us = NumericLocale(".", ",", (3, 0))
        >>> num_to_str(1234567, numeric_locale=us)
        '1,234,567'
        >>> num_to_str(1234567, grouping=False, numeric_locale=us)
        '1234567'
        >>> num_to_str(2.5, numeric_locale=NumericLocale(",", ".", (3, 0)))
        '2,5'
    """
    text = _default_text(value)

    if numeric_locale is None:
        numeric_locale = NumericLocale.current()
    if not grouping:
        numeric_locale = numeric_locale.without_grouping()

    sign = ""
    if text[0] in "+-":
        sign, text = text[0], text[1:]
    if not text[0].isdigit():
        # inf / nan
        return sign + text

    mantissa, e, exponent = text.partition("e")
    int_part, point, fraction = mantissa.partition(".")
    int_part = _group_digits(int_part, numeric_locale)
    if point:
        int_part += numeric_locale.decimal_point + fraction
    return sign + int_part + e + exponent


# =============================================================================
# PARSING
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of `parse_num`.

    Attributes:
        value: Parsed value, or the zero value of the kind on failure.
        ok: Whether a numeric prefix was parsed and fits the kind.
        consumed: Characters of the input consumed (0 on failure).
    """
    value: Any
    ok: bool
    consumed: int = 0

    def __bool__(self) -> bool:
        return self.ok


def _resolve_kind(kind: NumericKind) -> type:
    if isinstance(kind, np.dtype):
        kind = kind.type
    if kind is int or kind is float:
        return kind
    if isinstance(kind, type) and issubclass(kind, (np.integer, np.floating)):
        return kind
    raise TypeError(f"unsupported numeric kind: {kind!r}")


def _convert(token: str, kind: type) -> Optional[Number]:
    is_float_kind = kind is float or issubclass(kind, np.floating)

    if not is_float_kind:
        number = int(token)
        if kind is int:
            return number
        info = np.iinfo(kind)
        if not info.min <= number <= info.max:
            return None
        return kind(number)

    number = float(token)
    if math.isinf(number) and "inf" not in token.lower():
        # finite digits that overflowed the double range
        return None
    if kind is float:
        return number
    info = np.finfo(kind)
    if math.isfinite(number) and abs(number) > float(info.max):
        return None
    return kind(number)


def parse_num(text: str, kind: NumericKind = int) -> ParseResult:
    """
    Parse the longest numeric prefix of `text` into `kind`.

    Args:
        text: Input text.
        kind: int, float, or a numpy scalar type / dtype (np.int16, np.uint32,
              np.float32, ...).

    Returns:
        ParseResult with ok=True and the parsed value, or ok=False and the
        zero value of `kind`.

    Raises:
        TypeError: If `kind` is not a supported numeric type.
    """
    kind = _resolve_kind(kind)
    zero = kind(0)

    if not isinstance(text, str):
        return ParseResult(zero, False)

    is_float_kind = kind is float or issubclass(kind, np.floating)
    match = (_FLOAT_PREFIX if is_float_kind else _INT_PREFIX).match(text)
    if match is None:
        return ParseResult(zero, False)

    value = _convert(match.group(1), kind)
    if value is None:
        return ParseResult(zero, False)
    return ParseResult(value, True, match.end())


def str_to_num(text: str, kind: NumericKind = int) -> Number:
    """
    Parse `text` into `kind`, returning zero when it does not parse.

    Callers cannot tell "0" from a failed parse with this function; use
    `parse_num` when that matters.

    Examples:
        >>> str_to_num("42")
        42
        >>> str_to_num("notanumber")
        0
        >>> str_to_num(" 2.5kg", float)
        2.5
    """
    result = parse_num(text, kind)
    if not result.ok:
        logger.debug("could not parse %r as %s; defaulting to zero", text, getattr(kind, "__name__", kind))
    return result.value
