import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from recipe_utils.ingredients.policy import (
    FRACTION_SNAPS,
    FRACTION_TOLERANCE,
    QUANTITY_DECIMALS,
)

# Optional whole part, separated from the fraction by whitespace
FRACTION_PATTERN = re.compile(r"(?:(\d+)\s+)?(\d+)/(\d+)")


def _is_number(text: str) -> bool:
    """Check if a string represents a valid finite number (int or float)."""
    try:
        return math.isfinite(float(text))
    except (TypeError, ValueError):
        return False


def parse_decimal(text: str) -> float:
    """Parse a plain decimal or integer quantity such as '2' or '1.5'."""
    if not _is_number(text):
        raise ValueError(f"Not a number: {text!r}")
    return float(text)


def parse_fraction(text: str) -> Decimal:
    """Parse a fraction ('1/2') or mixed number ('1 1/2') into a Decimal."""
    match = FRACTION_PATTERN.search(text)
    if not match:
        raise ValueError(f"Not a fraction: {text!r}")

    whole_str, numerator_str, denominator_str = match.groups()
    whole = Decimal(whole_str) if whole_str else Decimal(0)
    numerator = Decimal(numerator_str)
    denominator = Decimal(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return whole + numerator / denominator


def format_quantity(value) -> str:
    """Round to two decimals (halves away from zero) and drop trailing zeros.

    Examples:
        >>> format_quantity(2.5)
        '2.5'
        >>> format_quantity(4.0)
        '4'
        >>> format_quantity(0.125)
        '0.13'
    """
    value = Decimal(value)
    exponent = Decimal(1).scaleb(-QUANTITY_DECIMALS)
    with localcontext() as ctx:
        # Room for every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, value.adjusted() + QUANTITY_DECIMALS + 2)
        rounded = value.quantize(exponent, rounding=ROUND_HALF_UP)
        if rounded == 0:
            return "0"
        return format(rounded.normalize(), "f")


def snap_to_fraction(quantity: str) -> str:
    """Re-express a formatted decimal quantity as a culinary fraction.

    Only the fractional part is snapped, using the first entry of
    FRACTION_SNAPS within FRACTION_TOLERANCE. Whole numbers, negative
    values and fractional parts with no close label are returned as-is.

    Examples:
        >>> snap_to_fraction("1.5")
        '1 1/2'
        >>> snap_to_fraction("0.33")
        '1/3'
        >>> snap_to_fraction("2.1")
        '2.1'
    """
    if "." not in quantity:
        return quantity

    value = float(quantity)
    if value < 0:
        return quantity

    whole = math.floor(value)
    fraction = value - whole

    for snap_value, label in FRACTION_SNAPS:
        if abs(fraction - snap_value) < FRACTION_TOLERANCE:
            return f"{whole} {label}" if whole > 0 else label

    return quantity
