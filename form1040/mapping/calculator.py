"""Tax calculation functions for the Form 1040 record.

This module provides pure functions for computing the derived 1040 lines:
- Total income and AGI from the income lines
- Standard deduction lookup by filing status
- Federal tax liability using marginal brackets
- Total tax, total payments, and refund/amount-owed settlement

All monetary values use Decimal for precision. ``recalculate`` is the single
entry point the mapper uses; it is idempotent for a given set of input lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from form1040.core.config import settings
from form1040.documents.models import FilingStatus
from form1040.mapping.record import (
    INCOME_LINES,
    PAYMENT_LINES,
    Form1040Data,
    FormLine,
)
from form1040.tax.year_config import TaxYearConfig, resolve_tax_year_config

ZERO = Decimal("0")
CENT = Decimal("0.01")


# =============================================================================
# Data Structures
# =============================================================================


@dataclass
class BracketSlice:
    """Tax owed on the portion of income falling inside one bracket.

    Attributes:
        lower_bound: Bracket start.
        upper_bound: Bracket end, None for the top bracket.
        rate: Marginal rate.
        taxable_amount: Income taxed inside this bracket.
        tax_in_bracket: Unrounded tax on ``taxable_amount``.
    """

    lower_bound: Decimal
    upper_bound: Decimal | None
    rate: Decimal
    taxable_amount: Decimal
    tax_in_bracket: Decimal


@dataclass
class TaxResult:
    """Result of the bracket tax calculation.

    Attributes:
        gross_tax: Tax rounded half-up to the cent.
        bracket_breakdown: Slices of income taxed per bracket.
        effective_rate: Gross tax divided by taxable income.
    """

    gross_tax: Decimal
    bracket_breakdown: list[BracketSlice] = field(default_factory=list)
    effective_rate: Decimal = ZERO


@dataclass(frozen=True)
class Settlement:
    """Refund or balance due once tax and payments are known.

    Attributes:
        overpaid: Line 33, payments in excess of tax.
        refund: Line 34, the portion of the overpayment refunded.
        applied_to_next_year: Line 36, overpayment applied to next year's tax.
        amount_owed: Line 37, tax in excess of payments.
    """

    overpaid: Decimal
    refund: Decimal
    applied_to_next_year: Decimal
    amount_owed: Decimal


# =============================================================================
# Income
# =============================================================================


def calculate_total_income(record: Form1040Data) -> Decimal:
    """Sum wages and the other income lines (line 9), absent lines as zero."""
    return sum((record.amount(line) for line in INCOME_LINES), ZERO)


def calculate_taxable_income(
    adjusted_gross_income: Decimal,
    standard_deduction: Decimal,
    itemized_deduction: Decimal = ZERO,
) -> Decimal:
    """Taxable income (line 15), floored at zero."""
    return max(ZERO, adjusted_gross_income - standard_deduction - itemized_deduction)


# =============================================================================
# Deductions
# =============================================================================


def get_standard_deduction(
    filing_status: FilingStatus | None, config: TaxYearConfig
) -> Decimal:
    """Get the standard deduction for a filing status.

    Statuses missing from the year's table fall back to the single amount.

    Example:
        >>> get_standard_deduction(FilingStatus.HEAD_OF_HOUSEHOLD, TAX_YEAR_2023)
        Decimal('20800')
    """
    return config.standard_deduction_for(filing_status)


# =============================================================================
# Tax Calculation
# =============================================================================


def calculate_tax(
    taxable_income: Decimal,
    filing_status: FilingStatus | None,
    config: TaxYearConfig,
) -> TaxResult:
    """Calculate federal income tax using marginal brackets.

    Married filing jointly uses the joint table; every other status uses the
    single table. Each bracket taxes ``min(remaining, width) * rate`` and the
    walk stops once no income remains. The total is rounded half-up to the
    cent.

    Args:
        taxable_income: Income after deductions.
        filing_status: Filing status, None when unknown.
        config: Tax year tables.

    Returns:
        TaxResult with gross tax, bracket breakdown, and effective rate.

    Example:
        >>> calculate_tax(Decimal("36150"), FilingStatus.SINGLE, TAX_YEAR_2023).gross_tax
        Decimal('4118.00')
    """
    if taxable_income <= ZERO:
        return TaxResult(gross_tax=ZERO.quantize(CENT))

    remaining_income = taxable_income
    gross_tax = ZERO
    bracket_breakdown: list[BracketSlice] = []

    for bracket in config.brackets_for(filing_status):
        if remaining_income <= ZERO:
            break

        width = bracket.width
        slice_amount = remaining_income if width is None else min(remaining_income, width)
        tax_in_bracket = slice_amount * bracket.rate
        gross_tax += tax_in_bracket
        bracket_breakdown.append(
            BracketSlice(
                lower_bound=bracket.lower_bound,
                upper_bound=bracket.upper_bound,
                rate=bracket.rate,
                taxable_amount=slice_amount,
                tax_in_bracket=tax_in_bracket,
            )
        )
        remaining_income -= slice_amount

    gross_tax = gross_tax.quantize(CENT, rounding=ROUND_HALF_UP)
    return TaxResult(
        gross_tax=gross_tax,
        bracket_breakdown=bracket_breakdown,
        effective_rate=gross_tax / taxable_income,
    )


def calculate_total_tax(record: Form1040Data) -> Decimal:
    """Total tax (line 24): tax plus other and additional taxes."""
    return (
        record.amount(FormLine.TAX)
        + record.amount(FormLine.OTHER_TAX)
        + record.amount(FormLine.ADDITIONAL_TAX)
    )


def calculate_total_payments(record: Form1040Data) -> Decimal:
    """Total payments (line 32): withholding lines 25a-25d."""
    return sum((record.amount(line) for line in PAYMENT_LINES), ZERO)


def resolve_settlement(total_tax: Decimal, total_payments: Decimal) -> Settlement:
    """Split the difference between payments and tax into refund or owed.

    The whole overpayment is requested as a refund. Equal tax and payments
    settle as zero owed.
    """
    if total_payments > total_tax:
        overpaid = total_payments - total_tax
        return Settlement(
            overpaid=overpaid,
            refund=overpaid,
            applied_to_next_year=ZERO,
            amount_owed=ZERO,
        )
    return Settlement(
        overpaid=ZERO,
        refund=ZERO,
        applied_to_next_year=ZERO,
        amount_owed=total_tax - total_payments,
    )


# =============================================================================
# Full recomputation
# =============================================================================


def config_for_record(record: Form1040Data) -> TaxYearConfig:
    """Tables for the record's tax year, or the configured default year."""
    return resolve_tax_year_config(record.tax_year, settings.default_tax_year)


def recalculate(
    record: Form1040Data, config: TaxYearConfig | None = None
) -> Form1040Data:
    """Recompute every derived line from the current input lines.

    Derived lines are overwritten in dependency order. The standard
    deduction is only filled in when absent and the filing status is known;
    an explicit value, including zero, is never replaced.

    Args:
        record: Record to recompute. Not modified.
        config: Tax year tables; defaults to the record's year.

    Returns:
        A new record with derived lines populated.
    """
    config = config or config_for_record(record)
    result = record.model_copy()

    total_income = calculate_total_income(result)
    result.line9 = total_income
    result.line11 = total_income

    if result.line12 is None and result.filing_status is not None:
        result.line12 = get_standard_deduction(result.filing_status, config)

    result.line15 = calculate_taxable_income(
        result.amount(FormLine.ADJUSTED_GROSS_INCOME),
        result.amount(FormLine.STANDARD_DEDUCTION),
        result.amount(FormLine.ITEMIZED_DEDUCTION),
    )
    result.line16 = calculate_tax(result.line15, result.filing_status, config).gross_tax
    result.line24 = calculate_total_tax(result)
    result.line32 = calculate_total_payments(result)

    settlement = resolve_settlement(result.line24, result.line32)
    result.line33 = settlement.overpaid
    result.line34 = settlement.refund
    result.line36 = settlement.applied_to_next_year
    result.line37 = settlement.amount_owed
    return result
