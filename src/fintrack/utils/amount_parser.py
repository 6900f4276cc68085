"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("999999.99")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a transaction amount into a Decimal.

    Accepts "123.45", "1,234.56", "1 234,56" and a leading or trailing
    currency sign ("$", "€", "₽"). Amounts are always positive; the
    direction of a transaction says whether money comes in or goes out.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount with two decimal places

    Raises:
        ValueError: If the string is not a number, is not positive, exceeds
            999999.99 or has more than two decimal places
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"[$€£₽\s]", "", amount_str.strip())
    # A lone comma is a decimal separator, otherwise commas group thousands.
    if "," in cleaned and "." not in cleaned and cleaned.count(",") == 1 and len(cleaned.split(",")[1]) <= 2:
        cleaned = cleaned.replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")

    if not amount.is_finite() or amount < CENT:
        raise ValueError(f"Amount must be at least {CENT}, got '{amount_str.strip()}'")
    if amount > MAX_AMOUNT:
        raise ValueError(f"Amount must not exceed {MAX_AMOUNT}, got '{amount_str.strip()}'")
    if amount != amount.quantize(CENT):
        raise ValueError(f"Amount '{amount_str.strip()}' has more than two decimal places")

    return amount.quantize(CENT)
