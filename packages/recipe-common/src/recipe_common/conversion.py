"""
Convert recipe amounts between kitchen units.

The conversion table is picked per call from the unit and the ingredient
flags (weight, flour by weight, butter, or plain volume). When no target
unit is requested the most legible unit for the amount is chosen, e.g.
3/4 tsp stays in tsp while 48 tsp becomes 1 c.

Amounts that cannot be converted are passed through unchanged with a
warning on the result, unless strict mode asks for an exception.
"""

import logging
from collections.abc import Mapping

from recipe_common.amounts import display_amount, to_fraction
from recipe_common.exceptions import (
    AmbiguousUnitError,
    IncompatibleUnitsError,
    UnitConversionError,
)
from recipe_common.models import (
    AmountFormat,
    ConversionOptions,
    ConversionResult,
    MeasurementType,
    UnitFamily,
)
from recipe_common.units import (
    BUTTER_TABLE,
    FLOUR_TABLE,
    RYE_FLOUR_TABLE,
    VOLUME_TABLE,
    WEIGHT_TABLE,
    CanonicalUnit,
    normalize_unit,
)

logger = logging.getLogger(__name__)

TSP = CanonicalUnit.TSP.value
TBSP = CanonicalUnit.TBSP.value
OZ = CanonicalUnit.OZ.value
C = CanonicalUnit.C.value
QT = CanonicalUnit.QT.value
LB = CanonicalUnit.LB.value
STICK = CanonicalUnit.STICK.value

# Unit the auto-selection thresholds are expressed in
REFERENCE_UNITS: dict[UnitFamily, str] = {
    UnitFamily.VOLUME: C,
    UnitFamily.BUTTER: C,
    UnitFamily.FLOUR: C,
    UnitFamily.WEIGHT: OZ,
}

# Flags that settle whether oz is a weight or a volume
_OZ_CONTEXT_FLAGS = ("liquor", "flour", "butter")


def render_amount(value: float, fmt: AmountFormat | str | None = None) -> float | str:
    """
    Render an amount in the requested format.

    Args:
        value: Amount to render
        fmt: "fraction" forces the nearest fraction, "auto" uses a fraction
            only when it is exact, "decimal" or None leaves the number as is

    Returns:
        A rendered string for fraction/auto, otherwise the number itself
    """
    fmt = AmountFormat(fmt) if fmt is not None else AmountFormat.DECIMAL

    if fmt == AmountFormat.FRACTION:
        return to_fraction(value, force=True)
    if fmt == AmountFormat.AUTO:
        return to_fraction(value)
    return value


def _result(
    amount: float,
    unit: str,
    options: ConversionOptions,
    warnings: list[str] | None = None,
) -> ConversionResult:
    rendered = render_amount(amount, options.format)
    return ConversionResult(
        amount=rendered,
        unit=unit,
        string=f"{display_amount(rendered)} {unit}",
        warnings=warnings or [],
    )


def _unconverted(
    amount: float,
    unit: str,
    options: ConversionOptions,
    error: type[UnitConversionError],
    message: str,
) -> ConversionResult:
    if options.strict:
        raise error(message)
    logger.debug("Leaving %s %s unconverted: %s", amount, unit, message)
    return _result(amount, unit, options, [message])


def oz_is_resolved(options: ConversionOptions) -> bool:
    """Check if the options say whether oz means weight or fluid ounces."""
    return options.type is not None or any(
        options.has_flag(flag) for flag in _OZ_CONTEXT_FLAGS
    )


def select_table(
    unit: str,
    options: ConversionOptions,
) -> tuple[UnitFamily, Mapping[str, float]]:
    """
    Pick the conversion table for a canonical unit.

    First match wins:
    - weight table when oz is declared a weight, or lb is involved
    - flour-by-weight table when converting between oz and c with a
      flour flag (rye flour is lighter); flour in oz with no target is a
      weight
    - butter table when flagged as butter, or sticks are involved
    - volume table otherwise

    Args:
        unit: Canonical source unit
        options: Conversion options

    Returns:
        (family, table) tuple
    """
    target = options.to

    if options.type == MeasurementType.WEIGHT or LB in (unit, target):
        return UnitFamily.WEIGHT, WEIGHT_TABLE

    if options.has_flag("flour"):
        if unit in (OZ, C) and target in (OZ, C):
            table = RYE_FLOUR_TABLE if options.has_flag("rye") else FLOUR_TABLE
            return UnitFamily.FLOUR, table
        if unit == OZ and target is None:
            return UnitFamily.WEIGHT, WEIGHT_TABLE

    if options.has_flag("butter") or STICK in (unit, target):
        return UnitFamily.BUTTER, BUTTER_TABLE

    return UnitFamily.VOLUME, VOLUME_TABLE


def auto_unit(
    amount: float,
    family: UnitFamily,
    options: ConversionOptions,
) -> str:
    """
    Choose the most legible unit for an amount.

    Args:
        amount: Amount in the family's reference unit (cups, or ounces
            for weight)
        family: Conversion table family
        options: Conversion options (for the liquor flag)

    Returns:
        Canonical unit to convert to
    """
    if family == UnitFamily.WEIGHT:
        return LB if amount >= 16 else OZ

    if family == UnitFamily.BUTTER:
        return TBSP if amount < 1 / 2 else STICK

    if amount >= 8:
        return QT
    if amount < 1 / 16:
        return TSP
    if amount <= 1 / 2 and options.has_flag("liquor"):
        return OZ
    if amount < 1 / 4:
        return TBSP
    return C


def convert_unit(
    amount: float,
    unit: str,
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """
    Convert an amount to another unit.

    If `options.to` is not set, a unit that suits the amount is chosen
    (e.g. 1/48 c becomes 1 tsp, 12 c becomes 3 qt).

    Args:
        amount: Amount in the source unit
        unit: Source unit in any recognised spelling
        options: Target unit, oz type, ingredient flags and output format

    Returns:
        ConversionResult. Unconvertible amounts come back unchanged with
        a warning explaining why.

    Raises:
        AmbiguousUnitError: In strict mode, for oz without weight/volume context
        IncompatibleUnitsError: In strict mode, when the units are not in
            the same conversion table

    Example:
        >>> convert_unit(9, "oz", ConversionOptions(flags=["flour"], to="c")).amount
        2.0
    """
    options = options or ConversionOptions()
    unit = normalize_unit(unit)

    if unit == OZ and not oz_is_resolved(options):
        return _unconverted(
            amount, unit, options, AmbiguousUnitError,
            "ambiguous oz: volume or weight unclear",
        )

    family, table = select_table(unit, options)

    if unit not in table:
        return _unconverted(
            amount, unit, options, IncompatibleUnitsError,
            f"incompatible units: {unit!r} is not a {family.value} unit",
        )

    if options.to:
        target = options.to
    else:
        reference = REFERENCE_UNITS[family]
        target = auto_unit(amount * table[reference] / table[unit], family, options)

    if target not in table:
        return _unconverted(
            amount, unit, options, IncompatibleUnitsError,
            f"incompatible units: cannot convert {unit!r} to {target!r}",
        )

    new_amount = amount * table[target] / table[unit]
    return _result(new_amount, target, options)
