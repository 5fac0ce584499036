"""
Rescale every amount in a recipe by a multiplier.

Amounts are found with `parse`, multiplied, converted to a legible unit and
written back in place of the original text. Ranges are scaled side by
side, and the left side drops its unit when both sides end up in the same
unit ("2-4 c").
"""

import logging
import math

from recipe_common.amounts import display_amount
from recipe_common.conversion import convert_unit
from recipe_common.exceptions import MalformedNumberError, ScalingError
from recipe_common.models import AmountFormat, ConversionOptions, ParsedAmount
from recipe_common.parsing import parse

logger = logging.getLogger(__name__)


def _check_multiplier(multiplier: float) -> None:
    if not math.isfinite(multiplier) or multiplier <= 0:
        raise ScalingError(f"Multiplier must be a positive number, got {multiplier!r}")


def _options_for(parsed: ParsedAmount, options: ConversionOptions) -> ConversionOptions:
    # Without an explicit format, keep decimals as decimals and render
    # everything else as fractions where they are exact
    if options.format is not None:
        return options
    fmt = AmountFormat.DECIMAL if parsed.is_decimal else AmountFormat.AUTO
    return options.model_copy(update={"format": fmt})


def rescale_amount(
    parsed: ParsedAmount,
    multiplier: float,
    options: ConversionOptions | None = None,
) -> str:
    """
    Rescale one parsed amount and return its replacement text.

    Args:
        parsed: Amount found by `parse`
        multiplier: Scale factor, e.g. 2 to double or 0.5 to halve
        options: Conversion options applied to every side of the amount

    Returns:
        Text to put in place of `parsed.source_span`

    Raises:
        ScalingError: If the multiplier is not a positive number
    """
    _check_multiplier(multiplier)
    options = _options_for(parsed, options or ConversionOptions())

    if parsed.range is None:
        return convert_unit(parsed.value * multiplier, parsed.unit, options).string

    low, high = parsed.bounds
    left = convert_unit(low * multiplier, parsed.unit, options)
    right = convert_unit(high * multiplier, parsed.unit, options)
    separator = parsed.range.separator

    if left.unit == right.unit:
        return f"{display_amount(left.amount)}{separator}{right.string}"
    return f"{left.string}{separator}{right.string}"


def rescale(
    text: str,
    multiplier: float,
    options: ConversionOptions | None = None,
) -> str:
    """
    Multiply every amount in a block of text.

    Each match is replaced at its own position, so repeated identical
    amounts ("1 c sugar, 1 c milk") are each rescaled exactly once. Text
    without amounts is returned unchanged, and so is any amount that
    cannot be read ("3/0 c").

    Args:
        text: Ingredient line(s)
        multiplier: Scale factor, e.g. 2 to double or 0.5 to halve
        options: Conversion options (target unit, flags, format)

    Returns:
        Text with every amount rescaled and re-rendered

    Raises:
        ScalingError: If the multiplier is not a positive number

    Example:
        >>> rescale("1-2 c", 0.5)
        '1/2-1 c'
    """
    _check_multiplier(multiplier)

    amounts = parse(text)
    if not amounts:
        return text

    pieces: list[str] = []
    position = 0
    for parsed in amounts:
        pieces.append(text[position:parsed.start])
        try:
            pieces.append(rescale_amount(parsed, multiplier, options))
        except MalformedNumberError as e:
            logger.debug("Keeping %r as written: %s", parsed.source_span, e)
            pieces.append(text[parsed.start:parsed.end])
        position = parsed.end
    pieces.append(text[position:])

    return "".join(pieces)
