"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

CENT = Decimal("0.01")

# Largest magnitude a Numeric(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")

CURRENCY_SYMBOLS = re.compile(r"[$€£¥¤]")


def check_amount(amount: Decimal) -> Decimal:
    """Check that a Decimal is storable as money.

    Args:
        amount: Signed amount

    Returns:
        The amount quantized to cents, sign kept

    Raises:
        ValueError: If the amount is not finite, has more than 2 decimal
            places, or is larger than MAX_AMOUNT
    """
    if not amount.is_finite():
        raise ValueError(f"Amount {amount} is not a finite number")

    # More than two fractional digits, e.g. "1.005"
    if amount.as_tuple().exponent < -2:
        raise ValueError(f"Amount {amount} has more than 2 decimal places")

    if abs(amount) > MAX_AMOUNT:
        raise ValueError(f"Amount {amount} is out of range")

    return amount.quantize(CENT)


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a non-negative Decimal.

    Handles various formats:
    - "100.50"
    - "-25.00" or "25.00-"
    - "$1,234.56"
    - "(123.45)" (negative in parentheses)

    The sign is discarded: direction alone decides whether money comes in
    or goes out.

    Args:
        amount_str: Amount string

    Returns:
        Absolute amount quantized to cents

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()

    if text.startswith("(") and text.endswith(")"):
        text = text[1:-1]

    # Trailing sign
    if text.endswith(("-", "+")):
        text = text[-1] + text[:-1]

    text = CURRENCY_SYMBOLS.sub("", text)

    # Thousands separators are only valid before the decimal point
    if "," in text.partition(".")[2]:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    text = text.replace(",", "").strip()

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    return abs(check_amount(amount))
