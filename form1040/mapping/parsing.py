"""Permissive parsers for raw extracted values.

Extraction output is noisy, so none of these functions raise: malformed input
degrades to zero or empty strings. Strict checks live in
``form1040.documents.validation``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, DecimalException

# Leading numeric prefix, the same text a float parser would consume.
_AMOUNT_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_AMOUNT_NOISE = re.compile(r"[$,\s]")
_NON_DIGITS = re.compile(r"\D")
_STATE_ZIP = re.compile(r"^([A-Z]{2})\s*(\d{5}(?:-\d{4})?)$")

ZERO = Decimal("0")

# Largest magnitude accepted as a real amount; anything above is OCR noise.
MAX_AMOUNT = Decimal("1e15")


@dataclass(frozen=True)
class ParsedAddress:
    """Address split into form header components."""

    street: str
    city: str = ""
    state: str = ""
    zip_code: str = ""


def parse_amount(value: object) -> Decimal:
    """Parse a monetary amount.

    Numbers pass through. Strings lose currency symbols, commas and
    whitespace, then their leading numeric prefix is parsed, so
    ``"$1,234.50 USD"`` gives ``Decimal("1234.50")``.

    Returns:
        The amount, or zero for unparsable text, non-finite numbers,
        magnitudes above ``MAX_AMOUNT``, booleans, None, and any other type.

    Example:
        >>> parse_amount("$50,000.00")
        Decimal('50000.00')
        >>> parse_amount("n/a")
        Decimal('0')
        >>> parse_amount("1e30")
        Decimal('0')
    """
    if isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return _bounded(value)
    if isinstance(value, (int, float)):
        try:
            return _bounded(Decimal(str(value)))
        except DecimalException:
            return ZERO
    if isinstance(value, str):
        match = _AMOUNT_PREFIX.match(_AMOUNT_NOISE.sub("", value))
        if match is None:
            return ZERO
        try:
            return _bounded(Decimal(match.group(0)))
        except DecimalException:
            return ZERO
    return ZERO


def _bounded(amount: Decimal) -> Decimal:
    """Zero for non-finite or out-of-range amounts."""
    if not amount.is_finite() or abs(amount) > MAX_AMOUNT:
        return ZERO
    return amount


def split_name(value: object) -> tuple[str, str]:
    """Split a full name into (given name, family name).

    The first whitespace-separated token is the given name; the remaining
    tokens, joined by single spaces, are the family name.

    Example:
        >>> split_name("  Mary  Ann   Smith ")
        ('Mary', 'Ann Smith')
    """
    if value is None:
        return "", ""
    tokens = str(value).split()
    if not tokens:
        return "", ""
    return tokens[0], " ".join(tokens[1:])


def format_ssn(value: object) -> str:
    """Format an identifier as XXX-XX-XXXX when it has exactly nine digits.

    Non-digit characters are always removed; any other digit count is
    returned bare rather than rejected.
    """
    if value is None:
        return ""
    digits = _NON_DIGITS.sub("", str(value))
    if len(digits) == 9:
        return f"{digits[:3]}-{digits[3:5]}-{digits[5:]}"
    return digits


def parse_address(value: object) -> ParsedAddress:
    """Split a one-line address into street, city, state and ZIP.

    Needs at least three comma-separated segments; otherwise the whole string
    is the street. The last segment must look like ``IL 62704`` or
    ``IL 62704-1234`` to fill state and ZIP, and is dropped when it does not.

    Example:
        >>> parse_address("123 Main St, Springfield, IL 62704")
        ParsedAddress(street='123 Main St', city='Springfield', state='IL', zip_code='62704')
    """
    if value is None:
        return ParsedAddress(street="")
    text = str(value)
    parts = [part.strip() for part in text.split(",")]
    if len(parts) < 3:
        return ParsedAddress(street=text)

    match = _STATE_ZIP.match(parts[-1])
    return ParsedAddress(
        street=", ".join(parts[:-2]),
        city=parts[-2],
        state=match.group(1) if match else "",
        zip_code=match.group(2) if match else "",
    )
