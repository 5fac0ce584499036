"""
Exception types for recipe-common.

All exceptions inherit from RecipeCommonError for easy catching
of any library-related errors.
"""


class RecipeCommonError(Exception):
    """Base exception for all recipe-common errors."""

    pass


class MalformedNumberError(RecipeCommonError, ValueError):
    """Raised when an amount string cannot be read as a number."""

    pass


class UnitConversionError(RecipeCommonError):
    """Raised when a unit conversion fails."""

    pass


class AmbiguousUnitError(UnitConversionError):
    """Raised in strict mode when oz could be either volume or weight."""

    pass


class IncompatibleUnitsError(UnitConversionError):
    """Raised in strict mode when units are not in the same conversion table."""

    pass


class ScalingError(RecipeCommonError, ValueError):
    """Raised when a recipe cannot be rescaled by the given multiplier."""

    pass


class ConfigurationError(RecipeCommonError):
    """Raised when configuration is invalid or missing."""

    pass
