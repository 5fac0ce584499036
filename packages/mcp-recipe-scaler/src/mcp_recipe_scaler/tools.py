"""MCP tool definitions for recipe scaling."""

from fastmcp import FastMCP
from pydantic import ValidationError

from recipe_common.conversion import convert_unit
from recipe_common.exceptions import RecipeCommonError
from recipe_common.parsing import parse
from recipe_common.scaling import rescale
from recipe_common.units import is_known_unit, normalize_unit

from mcp_recipe_scaler.config import ScalerConfig, get_config


def unit_info(unit: str) -> dict:
    """Canonical spelling of a unit and whether it is convertible."""
    normalized = normalize_unit(unit)
    return {
        "unit": unit,
        "normalized": normalized,
        "known": is_known_unit(unit),
    }


def parse_text(text: str) -> dict:
    """Amounts found in a block of text."""
    amounts = parse(text)
    return {
        "found": bool(amounts),
        "amounts": [amount.model_dump() for amount in amounts],
    }


def convert(
    amount: float,
    unit: str,
    to: str | None = None,
    type: str | None = None,
    flags: list[str] | None = None,
    format: str | None = None,
    config: ScalerConfig | None = None,
) -> dict:
    """Convert one amount, returning the result or an error."""
    config = config or get_config()
    try:
        options = config.options(to=to, type=type, flags=flags, format=format)
        return convert_unit(amount, unit, options).model_dump()
    except (RecipeCommonError, ValidationError) as e:
        return {"error": str(e)}


def rescale_text(
    text: str,
    multiplier: float,
    to: str | None = None,
    type: str | None = None,
    flags: list[str] | None = None,
    format: str | None = None,
    config: ScalerConfig | None = None,
) -> dict:
    """Rescale every amount in a block of text, returning the result or an error."""
    config = config or get_config()
    try:
        options = config.options(to=to, type=type, flags=flags, format=format)
        return {
            "original": text,
            "multiplier": multiplier,
            "rescaled": rescale(text, multiplier, options),
        }
    except (RecipeCommonError, ValidationError) as e:
        return {"error": str(e)}


def scale_lines(
    lines: list[str],
    multiplier: float,
    flags: list[str] | None = None,
    format: str | None = None,
    config: ScalerConfig | None = None,
) -> list[dict]:
    """Rescale ingredient lines one by one; a bad line does not stop the rest."""
    config = config or get_config()
    results = []
    for line in lines:
        entry = {"original": line}
        try:
            options = config.options(flags=flags, format=format)
            entry["scaled"] = rescale(line, multiplier, options)
            entry["amounts"] = len(parse(line))
        except (RecipeCommonError, ValidationError) as e:
            entry["scaled"] = line
            entry["error"] = str(e)
        results.append(entry)
    return results


def register_tools(mcp: FastMCP) -> None:
    """Register all recipe scaler MCP tools."""

    @mcp.tool()
    def normalize_unit_name(unit: str) -> dict:
        """
        Get the canonical spelling of a kitchen unit.

        Args:
            unit: Unit as written, e.g. "Tablespoons", "T", "fl oz"

        Returns the canonical unit (tsp, tbsp, oz, c, pt, qt, gal, lb, stick)
        and whether it is a convertible unit. Unknown words come back unchanged.
        """
        return unit_info(unit)

    @mcp.tool()
    def parse_ingredients(text: str) -> dict:
        """
        Find amounts and units in ingredient text.

        Args:
            text: One or more ingredient lines, e.g. "1 1/2 c flour"

        Returns each amount with its unit, the matched text, and both sides
        of ranges such as "1-2 c".
        """
        return parse_text(text)

    @mcp.tool()
    def convert_amount(
        amount: float,
        unit: str,
        to: str | None = None,
        type: str | None = None,
        flags: list[str] | None = None,
        format: str | None = None,
    ) -> dict:
        """
        Convert an amount between kitchen units.

        Args:
            amount: Amount to convert
            unit: Unit of the amount, e.g. "tbsp", "cups", "oz"
            to: Unit to convert to (optional, chosen automatically if omitted)
            type: "weight" or "volume", needed for oz without flags (optional)
            flags: Ingredient hints - butter, flour, rye, liquor (optional)
            format: fraction, decimal or auto (optional)

        Returns the converted amount, unit and display string. Warnings explain
        why an amount was left unconverted (e.g. oz without weight/volume context).
        """
        return convert(amount, unit, to=to, type=type, flags=flags, format=format)

    @mcp.tool()
    def rescale_recipe(
        text: str,
        multiplier: float,
        to: str | None = None,
        type: str | None = None,
        flags: list[str] | None = None,
        format: str | None = None,
    ) -> dict:
        """
        Multiply every amount in a recipe and rewrite it.

        Args:
            text: Recipe ingredients
            multiplier: Scale factor, e.g. 2 to double, 0.5 to halve
            to: Unit to convert every amount to (optional)
            type: "weight" or "volume" for oz amounts (optional)
            flags: Ingredient hints - butter, flour, rye, liquor (optional)
            format: fraction, decimal or auto (optional)

        Returns the rescaled text.
        """
        return rescale_text(
            text, multiplier, to=to, type=type, flags=flags, format=format
        )

    @mcp.tool()
    def scale_ingredient_lines(
        lines: list[str],
        multiplier: float,
        flags: list[str] | None = None,
        format: str | None = None,
    ) -> list[dict]:
        """
        Rescale a list of ingredient lines.

        Args:
            lines: Ingredient lines, one amount or more per line
            multiplier: Scale factor, e.g. 2 to double, 0.5 to halve
            flags: Ingredient hints applied to every line (optional)
            format: fraction, decimal or auto (optional)

        Returns the original and scaled text for each line.
        """
        return scale_lines(lines, multiplier, flags=flags, format=format)
