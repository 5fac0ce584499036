"""Configuration management for the recipe scaler MCP server."""

import os
from dataclasses import dataclass, field

from recipe_common.exceptions import ConfigurationError
from recipe_common.models import AmountFormat, ConversionOptions

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


@dataclass
class ScalerConfig:
    """Defaults applied to every tool call."""

    default_format: AmountFormat | None = None
    strict: bool = False
    default_flags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if isinstance(self.default_format, str):
            self.default_format = AmountFormat(self.default_format.strip().lower())
        self.default_flags = frozenset(
            flag.strip().lower() for flag in self.default_flags if flag.strip()
        )

    def options(
        self,
        to: str | None = None,
        type: str | None = None,
        flags: list[str] | None = None,
        format: str | None = None,
    ) -> ConversionOptions:
        """Build conversion options, with per-call values over the defaults."""
        return ConversionOptions(
            to=to,
            type=type,
            flags=self.default_flags | frozenset(flags or ()),
            format=format or self.default_format,
            strict=self.strict,
        )


def get_config() -> ScalerConfig:
    """
    Get scaler configuration from environment.

    Environment variables:
        RECIPE_SCALER_FORMAT: Default output format - fraction, decimal or auto (optional)
        RECIPE_SCALER_STRICT: Raise on unconvertible amounts instead of warning (optional)
        RECIPE_SCALER_FLAGS: Comma-separated ingredient flags applied to every call (optional)

    Returns:
        ScalerConfig instance

    Raises:
        ConfigurationError: If a variable has an invalid value
    """
    fmt = os.environ.get("RECIPE_SCALER_FORMAT", "").strip().lower()
    strict = os.environ.get("RECIPE_SCALER_STRICT", "").strip().lower()
    flags = os.environ.get("RECIPE_SCALER_FLAGS", "")

    if fmt and fmt not in {f.value for f in AmountFormat}:
        raise ConfigurationError(
            f"RECIPE_SCALER_FORMAT must be one of fraction, decimal or auto, got '{fmt}'"
        )

    if strict not in _TRUE | _FALSE:
        raise ConfigurationError(
            f"RECIPE_SCALER_STRICT must be true or false, got '{strict}'"
        )

    return ScalerConfig(
        default_format=AmountFormat(fmt) if fmt else None,
        strict=strict in _TRUE,
        default_flags=frozenset(flags.split(",")),
    )
