"""
Unit normalisation and conversion tables for recipe measurements.

Every spelling of a kitchen unit is folded onto one canonical token
(tsp, tbsp, oz, c, pt, qt, gal, lb, stick). Conversion tables map those
tokens to scale factors relative to a single reference unit per family:
- Volume: cups
- Weight: pounds
- Butter: sticks
- Flour by weight: cups
"""

import string
from enum import Enum
from types import MappingProxyType


class CanonicalUnit(str, Enum):
    """Canonical kitchen units."""

    TSP = "tsp"
    TBSP = "tbsp"
    OZ = "oz"
    C = "c"
    PT = "pt"
    QT = "qt"
    GAL = "gal"
    LB = "lb"
    STICK = "stick"


_SYNONYMS: dict[CanonicalUnit, tuple[str, ...]] = {
    CanonicalUnit.TSP: ("tsp", "tsps", "teaspoon", "teaspoons"),
    CanonicalUnit.TBSP: (
        "tbl", "tbls", "tbs", "tbsp", "tbsps", "tablespoon", "tablespoons",
    ),
    # Every "fl"/"fluid" spelling the parser accepts: "fl oz", "fl. ounces", "fluidoz"
    CanonicalUnit.OZ: ("oz", "ozs", "ounce", "ounces") + tuple(
        f"{prefix}{space}{word}"
        for prefix in ("fl", "fl.", "fluid", "fluid.")
        for space in ("", " ")
        for word in ("oz", "ounce", "ounces")
    ),
    CanonicalUnit.C: ("c", "cup", "cups"),
    CanonicalUnit.PT: ("pt", "pts", "pint", "pints"),
    CanonicalUnit.QT: ("qt", "qts", "quart", "quarts"),
    CanonicalUnit.GAL: ("gal", "gals", "gallon", "gallons"),
    CanonicalUnit.LB: ("lb", "lbs", "pound", "pounds"),
    CanonicalUnit.STICK: ("stick", "sticks"),
}

# Lowercase spelling -> canonical token
UNIT_SYNONYMS: MappingProxyType = MappingProxyType({
    spelling: unit.value
    for unit, spellings in _SYNONYMS.items()
    for spelling in spellings
})

CANONICAL_UNITS: frozenset[str] = frozenset(unit.value for unit in CanonicalUnit)


# Conversion tables: amount_in_target = amount * table[target] / table[source]
VOLUME_TABLE: MappingProxyType = MappingProxyType({
    CanonicalUnit.TSP.value: 16 * 3,  # 3 tsp = 1 tbsp
    CanonicalUnit.TBSP.value: 16,
    CanonicalUnit.OZ.value: 16 / 2,  # 1 fl oz = 2 tbsp
    CanonicalUnit.C.value: 1,
    CanonicalUnit.PT.value: 1 / 2,
    CanonicalUnit.QT.value: 1 / 4,
    CanonicalUnit.GAL.value: 1 / 16,
})

WEIGHT_TABLE: MappingProxyType = MappingProxyType({
    CanonicalUnit.OZ.value: 16,
    CanonicalUnit.LB.value: 1,
})

BUTTER_TABLE: MappingProxyType = MappingProxyType({
    CanonicalUnit.TBSP.value: 8,
    CanonicalUnit.C.value: 0.5,
    CanonicalUnit.STICK.value: 1,
    CanonicalUnit.OZ.value: 4,
    CanonicalUnit.LB.value: 0.25,
})

# Ounces by weight per cup of flour
FLOUR_TABLE: MappingProxyType = MappingProxyType({
    CanonicalUnit.C.value: 1,
    CanonicalUnit.OZ.value: 4.5,
})

RYE_FLOUR_TABLE: MappingProxyType = MappingProxyType({
    CanonicalUnit.C.value: 1,
    CanonicalUnit.OZ.value: 3.5,
})


def normalize_unit(unit: str) -> str:
    """
    Convert a unit spelling or abbreviation to its canonical token.

    "t" and "T" are the only case-sensitive spellings (teaspoon and
    tablespoon). Trailing periods are ignored. Anything that is not
    a known unit ("onion", "potatoes") is returned unchanged so callers can
    treat it as non-convertible.

    Args:
        unit: Raw unit text as written in a recipe

    Returns:
        Canonical unit token, or the cleaned input if unrecognised

    Example:
        >>> normalize_unit("Tablespoons")
        'tbsp'
        >>> normalize_unit("T")
        'tbsp'
        >>> normalize_unit("cloves")
        'cloves'
    """
    unit = unit.lstrip().rstrip(string.whitespace + ".")

    if unit == "t":
        return CanonicalUnit.TSP.value
    if unit == "T":
        return CanonicalUnit.TBSP.value

    # Collapse inner whitespace so "fl  oz" matches "fl oz"
    key = " ".join(unit.lower().split())
    return UNIT_SYNONYMS.get(key, unit)


def is_known_unit(unit: str) -> bool:
    """Check whether a raw unit normalises to a canonical kitchen unit."""
    return normalize_unit(unit) in CANONICAL_UNITS
