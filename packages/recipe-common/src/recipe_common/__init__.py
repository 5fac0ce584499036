"""
recipe-common: Shared library for parsing and scaling recipe amounts.

Provides unit normalisation, amount parsing, kitchen unit conversion
and whole-recipe rescaling.
"""

from recipe_common.models import (
    MeasurementType,
    AmountFormat,
    UnitFamily,
    RangeBound,
    AmountRange,
    ParsedAmount,
    ConversionOptions,
    ConversionResult,
)
from recipe_common.units import (
    CanonicalUnit,
    normalize_unit,
    is_known_unit,
)
from recipe_common.amounts import (
    parse_number,
    to_fraction,
    format_decimal,
)
from recipe_common.parsing import parse
from recipe_common.conversion import (
    convert_unit,
    render_amount,
    select_table,
)
from recipe_common.scaling import (
    rescale,
    rescale_amount,
)
from recipe_common.exceptions import (
    RecipeCommonError,
    MalformedNumberError,
    UnitConversionError,
    AmbiguousUnitError,
    IncompatibleUnitsError,
    ScalingError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "MeasurementType",
    "AmountFormat",
    "UnitFamily",
    "RangeBound",
    "AmountRange",
    "ParsedAmount",
    "ConversionOptions",
    "ConversionResult",
    # Units
    "CanonicalUnit",
    "normalize_unit",
    "is_known_unit",
    # Amounts
    "parse_number",
    "to_fraction",
    "format_decimal",
    # Parsing
    "parse",
    # Conversion
    "convert_unit",
    "render_amount",
    "select_table",
    # Scaling
    "rescale",
    "rescale_amount",
    # Exceptions
    "RecipeCommonError",
    "MalformedNumberError",
    "UnitConversionError",
    "AmbiguousUnitError",
    "IncompatibleUnitsError",
    "ScalingError",
    "ConfigurationError",
]
