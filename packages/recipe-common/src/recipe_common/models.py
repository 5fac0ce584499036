"""
Shared data models for recipe amount parsing and conversion.

All models use Pydantic v2 for validation and serialisation.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, field_validator

from recipe_common.amounts import parse_number
from recipe_common.units import normalize_unit


class MeasurementType(str, Enum):
    """How an ambiguous unit (oz) should be read."""

    WEIGHT = "weight"
    VOLUME = "volume"


class AmountFormat(str, Enum):
    """How converted amounts are rendered."""

    FRACTION = "fraction"
    DECIMAL = "decimal"
    AUTO = "auto"


class UnitFamily(str, Enum):
    """Conversion table families."""

    VOLUME = "volume"
    WEIGHT = "weight"
    BUTTER = "butter"
    FLOUR = "flour"


class RangeBound(BaseModel):
    """One side of a range such as "1-2 c"."""

    model_config = ConfigDict(frozen=True)

    amount: str = Field(..., description="Amount in recipe notation")
    source_span: str = Field(..., description="Text of this side as written")


class AmountRange(BaseModel):
    """Both sides of a range plus the text between them."""

    model_config = ConfigDict(frozen=True)

    left: RangeBound
    right: RangeBound
    separator: str = Field(..., description='Literal separator: "-", " - " or " to "')


class ParsedAmount(BaseModel):
    """
    An amount and unit found in free text.

    `source_span` is the exact text that was matched and `start`/`end` are
    its offsets in the parsed string, so the span can be replaced in place.
    Unicode fraction glyphs are spelled out in `amount` ("1½" -> "1 1/2")
    but left untouched in `source_span`.
    """

    model_config = ConfigDict(frozen=True)

    amount: str = Field(..., description='Amount in recipe notation, e.g. "1 1/2"')
    unit: str = Field(..., description="Unit as written, before normalisation")
    source_span: str = Field(..., description="Matched text")
    start: int = Field(..., ge=0, description="Offset of the match in the source")
    end: int = Field(..., ge=0, description="Offset just past the match")
    range: AmountRange | None = Field(
        default=None,
        description="Both sides of the amount when it is a range",
    )

    @property
    def is_range(self) -> bool:
        """Check if this amount is a range."""
        return self.range is not None

    @property
    def is_decimal(self) -> bool:
        """Check if the amount was written as a decimal ("1.5", ".5")."""
        return "." in self.amount

    @property
    def value(self) -> float:
        """Numeric amount. Ranges have no single value; use `bounds`."""
        return parse_number(self.amount)

    @property
    def bounds(self) -> tuple[float, float]:
        """Lower and upper numeric amounts (equal for non-ranges)."""
        if self.range is None:
            value = parse_number(self.amount)
            return value, value
        return parse_number(self.range.left.amount), parse_number(self.range.right.amount)


class ConversionOptions(BaseModel):
    """
    Options for converting and rendering an amount.

    Flags are free-text ingredient hints ("butter", "rye flour", "liquor")
    and are matched by substring, so "unsalted butter" counts as butter.
    """

    model_config = ConfigDict(frozen=True)

    to: str | None = Field(
        default=None,
        description="Target unit; overrides automatic unit selection",
    )
    type: MeasurementType | None = Field(
        default=None,
        description="Read oz as weight or volume",
    )
    flags: frozenset[str] = Field(
        default_factory=frozenset,
        description="Ingredient hints: butter, flour, rye, liquor",
    )
    format: AmountFormat | None = Field(
        default=None,
        description="fraction, decimal or auto",
    )
    strict: bool = Field(
        default=False,
        description="Raise instead of warning when an amount cannot be converted",
    )

    @field_validator("to", mode="before")
    @classmethod
    def normalise_target(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return normalize_unit(v) if v else None
        return v

    @field_validator("flags", mode="before")
    @classmethod
    def normalise_flags(cls, v: Any) -> Any:
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = v.split(",")
        return frozenset(flag.strip().lower() for flag in v if flag and flag.strip())

    def has_flag(self, name: str) -> bool:
        """Check if any flag mentions the given hint."""
        return any(name in flag for flag in self.flags)


class ConversionResult(BaseModel):
    """Result of converting an amount."""

    amount: float | str = Field(..., description="Number, or rendered fraction")
    unit: str = Field(..., description="Canonical or passthrough unit")
    string: str = Field(..., description='Display form, e.g. "1 1/2 c"')
    warnings: list[str] = Field(
        default_factory=list,
        description="Why the amount was left unconverted, if it was",
    )

    @property
    def converted(self) -> bool:
        """Check if the conversion went through without diagnostics."""
        return not self.warnings
