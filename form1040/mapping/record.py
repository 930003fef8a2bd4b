"""Canonical Form 1040 record.

``Form1040Data`` is the accumulating result of mapping every source document
of a tax return. Each field is optional and ``None`` means *absent*, which is
kept distinct from a line explicitly provided as zero. Stored records use
camelCase aliases (``firstName``, ``zipCode``, ``line25a``) so the
persistence layer can hand a saved record straight back to the mapper.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from form1040.core.logging import get_logger
from form1040.documents.models import FilingStatus

logger = get_logger(__name__)


class FormLine(str, Enum):
    """Numeric Form 1040 lines tracked by the engine."""

    WAGES = "line1"
    TAX_EXEMPT_INTEREST = "line2a"
    TAXABLE_INTEREST = "line2b"
    QUALIFIED_DIVIDENDS = "line3a"
    ORDINARY_DIVIDENDS = "line3b"
    IRA_DISTRIBUTIONS = "line4b"
    PENSIONS_AND_ANNUITIES = "line5b"
    SOCIAL_SECURITY_BENEFITS = "line6b"
    CAPITAL_GAIN = "line7"
    ADDITIONAL_INCOME = "line8"
    TOTAL_INCOME = "line9"
    ADJUSTED_GROSS_INCOME = "line11"
    STANDARD_DEDUCTION = "line12"
    ITEMIZED_DEDUCTION = "line13"
    TAXABLE_INCOME = "line15"
    TAX = "line16"
    OTHER_TAX = "line17"
    ADDITIONAL_TAX = "line23"
    TOTAL_TAX = "line24"
    W2_WITHHOLDING = "line25a"
    FORM_1099_WITHHOLDING = "line25b"
    OTHER_WITHHOLDING = "line25c"
    OTHER_PAYMENTS = "line25d"
    TOTAL_PAYMENTS = "line32"
    OVERPAID = "line33"
    REFUND = "line34"
    APPLIED_TO_NEXT_YEAR = "line36"
    AMOUNT_OWED = "line37"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``Line 25a``."""
        return f"Line {self.value.removeprefix('line')}"


# Lines summed into total income (line 9).
INCOME_LINES: tuple[FormLine, ...] = (
    FormLine.WAGES,
    FormLine.TAXABLE_INTEREST,
    FormLine.ORDINARY_DIVIDENDS,
    FormLine.IRA_DISTRIBUTIONS,
    FormLine.PENSIONS_AND_ANNUITIES,
    FormLine.SOCIAL_SECURITY_BENEFITS,
    FormLine.CAPITAL_GAIN,
    FormLine.ADDITIONAL_INCOME,
)

# Withholding and payment lines summed into total payments (line 32).
PAYMENT_LINES: tuple[FormLine, ...] = (
    FormLine.W2_WITHHOLDING,
    FormLine.FORM_1099_WITHHOLDING,
    FormLine.OTHER_WITHHOLDING,
    FormLine.OTHER_PAYMENTS,
)


class Form1040Data(BaseModel):
    """Sparse Form 1040 record: identity header plus numeric lines."""

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
    )

    # Header
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    ssn: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = Field(default=None, alias="zipCode")
    filing_status: FilingStatus | None = Field(default=None, alias="filingStatus")
    tax_year: int | None = Field(default=None, alias="taxYear")

    # Income
    line1: Decimal | None = None
    line2a: Decimal | None = None
    line2b: Decimal | None = None
    line3a: Decimal | None = None
    line3b: Decimal | None = None
    line4b: Decimal | None = None
    line5b: Decimal | None = None
    line6b: Decimal | None = None
    line7: Decimal | None = None
    line8: Decimal | None = None
    line9: Decimal | None = None
    line11: Decimal | None = None

    # Deductions and tax
    line12: Decimal | None = None
    line13: Decimal | None = None
    line15: Decimal | None = None
    line16: Decimal | None = None
    line17: Decimal | None = None
    line23: Decimal | None = None
    line24: Decimal | None = None

    # Payments
    line25a: Decimal | None = None
    line25b: Decimal | None = None
    line25c: Decimal | None = None
    line25d: Decimal | None = None
    line32: Decimal | None = None

    # Refund / amount owed
    line33: Decimal | None = None
    line34: Decimal | None = None
    line36: Decimal | None = None
    line37: Decimal | None = None

    @field_validator("filing_status", mode="before")
    @classmethod
    def normalize_filing_status(cls, value: Any) -> FilingStatus | None:
        """Accept stored enum values and short codes.

        Blank and unrecognized values are treated as absent, so no standard
        deduction is filled in until a valid status is set.
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        status = FilingStatus.from_value(value)
        if status is None:
            logger.warning("filing_status_unrecognized", filing_status=repr(value))
        return status

    def amount(self, line: FormLine) -> Decimal:
        """Value of a numeric line, zero when absent."""
        value = getattr(self, line.value)
        return value if value is not None else Decimal("0")

    def has_line(self, line: FormLine) -> bool:
        """True when the line was provided, even as zero."""
        return getattr(self, line.value) is not None

    def to_storage(self) -> dict[str, Any]:
        """Serialize for the persistence layer, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
