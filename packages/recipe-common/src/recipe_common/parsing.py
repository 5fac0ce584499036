"""
Find amounts and units in free-form ingredient text.

Recognised number formats:
- integers: "2"
- decimals: "1.5", "0.5", ".5"
- fractions and mixed fractions: "1/2", "1 1/2"
- Unicode fraction glyphs, alone or after a whole number: "½", "1½", "1 ½"
- ranges of any of the above: "1-2", "1 - 2", "1 to 2"

A number must be followed (optionally after one space) by a word, which is
taken as its unit. The word need not be a real unit: "2 potatoes" parses
with unit "potatoes".
"""

import logging
import re

from recipe_common.models import AmountRange, ParsedAmount, RangeBound

logger = logging.getLogger(__name__)


UNICODE_FRACTIONS: dict[str, str] = {
    "½": "1/2",
    "⅓": "1/3",
    "¼": "1/4",
    "⅛": "1/8",
    "⅔": "2/3",
    "¾": "3/4",
}

_GLYPHS = "".join(UNICODE_FRACTIONS)

# Order matters: the first alternative that fits wins
NUMBER_PATTERN = (
    r"(?:\d+ )?\d+/\d+"
    rf"|(?:\d+ ?)?[{_GLYPHS}]"
    r"|\d*\.\d+"
    r"|\d+"
)

# Two-word fluid ounce spellings first so "fl oz" is not cut to "fl".
# "to" is never a unit, so "1 to 2" without one is not read as "1 to".
UNIT_PATTERN = r"(?!(?i:to)\b)(?:(?i:fl(?:uid)?\.? ?(?:oz|ounces?))\.?|[a-zA-Z]+\.?)"

RANGE_SEPARATORS = (" - ", " to ", "-")

AMOUNT_RE = re.compile(
    rf"(?:(?P<left>{NUMBER_PATTERN})"
    rf"(?P<sep>{'|'.join(re.escape(sep) for sep in RANGE_SEPARATORS)})"
    rf"(?P<right>{NUMBER_PATTERN})"
    rf"|(?P<amount>{NUMBER_PATTERN}))"
    rf" ?(?P<unit>{UNIT_PATTERN})"
)

_GLYPH_RE = re.compile(rf"^(?:(?P<whole>\d+) ?)?(?P<glyph>[{_GLYPHS}])$")


def spell_out_fraction(number: str) -> str:
    """
    Rewrite a Unicode fraction glyph as plain text.

    Example:
        >>> spell_out_fraction("1½")
        '1 1/2'
        >>> spell_out_fraction("½")
        '1/2'
    """
    match = _GLYPH_RE.match(number)
    if not match:
        return number

    whole = match.group("whole")
    fraction = UNICODE_FRACTIONS[match.group("glyph")]
    return f"{whole} {fraction}" if whole else fraction


def _bound(number: str) -> RangeBound:
    return RangeBound(amount=spell_out_fraction(number), source_span=number)


def parse(text: str) -> list[ParsedAmount]:
    """
    Find every amount followed by a unit in a block of text.

    Args:
        text: Ingredient line(s), e.g. "2 cups (9 oz) flour"

    Returns:
        Parsed amounts in the order they appear. Empty if the text has none.

    Example:
        >>> [p.source_span for p in parse("1 onion (about 2 c diced)")]
        ['1 onion', '2 c']
    """
    amounts: list[ParsedAmount] = []

    for match in AMOUNT_RE.finditer(text):
        if match.group("amount") is not None:
            amount = spell_out_fraction(match.group("amount"))
            amount_range = None
        else:
            amount_range = AmountRange(
                left=_bound(match.group("left")),
                right=_bound(match.group("right")),
                separator=match.group("sep"),
            )
            amount = (
                f"{amount_range.left.amount}"
                f"{amount_range.separator}"
                f"{amount_range.right.amount}"
            )

        amounts.append(
            ParsedAmount(
                amount=amount,
                unit=match.group("unit"),
                source_span=match.group(0),
                start=match.start(),
                end=match.end(),
                range=amount_range,
            )
        )

    logger.debug("Found %d amount(s) in %r", len(amounts), text)
    return amounts
