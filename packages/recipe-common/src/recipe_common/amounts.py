"""
Reading and rendering numeric amounts.

Amounts are read from recipe notation ("2", "1.5", "1/2", "1 1/2") and
rendered back either as kitchen fractions ("1 1/2") or as short decimals
("1.5"). Only the eleven fractions a cook would expect to see are used:
sixteenths, eighths, sixths, quarters, thirds and halves from 1/16 to 7/8.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from recipe_common.exceptions import MalformedNumberError

_NUMBER_RE = re.compile(
    r"^(?:(?P<whole>\d+)\s+)?(?P<num>\d+)\s*/\s*(?P<den>\d+)$"
    r"|^(?P<decimal>\d*\.\d+|\d+)$"
)

# Tolerance below which a remainder is dropped when forcing a fraction
_DROP_REMAINDER = 0.03


def _round2(value: float) -> float:
    """Round half up to two decimal places, as the number reads (0.285 -> 0.29)."""
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


_FRACTIONS: tuple[tuple[float, str], ...] = tuple(
    (_round2(numerator / denominator), f"{numerator}/{denominator}")
    for numerator, denominator in (
        (1, 16),
        (1, 8),
        (1, 6),
        (1, 4),
        (1, 3),
        (3, 8),
        (1, 2),
        (5, 8),
        (2, 3),
        (3, 4),
        (7, 8),
    )
)

FRACTION_STRINGS: dict[float, str] = dict(_FRACTIONS)


def parse_number(text: str) -> float:
    """
    Read an amount written in recipe notation.

    Args:
        text: Integer, decimal, fraction or mixed fraction ("1 1/2")

    Returns:
        The amount as a float

    Raises:
        MalformedNumberError: If the text is not one of those notations
    """
    match = _NUMBER_RE.match(text.strip())
    if not match:
        raise MalformedNumberError(f"Cannot read amount: {text!r}")

    if match.group("decimal") is not None:
        return float(match.group("decimal"))

    denominator = int(match.group("den"))
    if denominator == 0:
        raise MalformedNumberError(f"Zero denominator in amount: {text!r}")

    whole = int(match.group("whole") or 0)
    return whole + int(match.group("num")) / denominator


def format_decimal(value: float) -> str:
    """
    Render a number as a short decimal string.

    Rounds to two places and drops trailing zeros, so 0.5 -> "0.5",
    2.0 -> "2" and 1/3 -> "0.33". Positive amounts too small for two
    places keep one significant digit (0.001 -> "0.001").
    """
    rounded = _round2(value)
    if rounded == 0 and value > 0:
        places = -math.floor(math.log10(value))
        return f"{value:.{places}f}".rstrip("0")

    text = f"{rounded:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def _join(whole: int, fraction: str) -> str:
    return f"{whole} {fraction}" if whole else fraction


def to_fraction(value: float, force: bool = False) -> str:
    """
    Render a number as a whole number plus a kitchen fraction.

    The amount is rounded to two places and its fractional part looked up
    among the supported fractions. When it is not one of them:
    - with force=False the rounded decimal is returned instead ("1.4")
    - with force=True a remainder of 0.03 or less is dropped, otherwise the
      nearest fraction is used, carrying into the whole part when the
      nearest value is 1

    A positive amount is never rendered as "0"; amounts below what a
    fraction can show fall back to a decimal.

    Args:
        value: Amount to render
        force: Always produce a fraction, even if inexact

    Returns:
        Rendered amount, e.g. "1 1/2", "2/3", "3"

    Example:
        >>> to_fraction(1.5)
        '1 1/2'
        >>> to_fraction(0.3)
        '0.3'
        >>> to_fraction(0.3, force=True)
        '1/3'
    """
    rounded = _round2(value)
    if rounded == 0 and value > 0:
        return format_decimal(value)

    whole = int(rounded)
    remainder = _round2(rounded - whole)

    if remainder == 0:
        return str(whole)

    fraction = FRACTION_STRINGS.get(remainder)
    if fraction:
        return _join(whole, fraction)

    if not force:
        return format_decimal(whole + remainder)

    if remainder <= _DROP_REMAINDER:
        return str(whole) if whole else format_decimal(remainder)

    # Nearest supported fraction, ties go to the smaller one. 1 is the
    # upper bound and rounds up to the next whole number.
    best_delta = math.inf
    best = None
    for decimal, candidate in _FRACTIONS + ((1.0, None),):
        delta = abs(decimal - remainder)
        if delta < best_delta:
            best_delta = delta
            best = candidate

    if best is None:
        return str(whole + 1)
    return _join(whole, best)


def display_amount(amount: float | str) -> str:
    """Text form of an amount returned by render_amount."""
    if isinstance(amount, str):
        return amount
    return format_decimal(amount)
