"""Tests for the Form 1040 calculator.

These tests cover:
- Total income aggregation (line 9)
- Standard deduction lookup (line 12)
- Marginal bracket tax calculation (line 16)
- Settlement into refund or amount owed (lines 33-37)
- Full recalculation of derived lines
"""

from decimal import Decimal

import pytest

from form1040.core.config import settings
from form1040.documents.models import FilingStatus
from form1040.mapping.calculator import (
    calculate_tax,
    calculate_taxable_income,
    calculate_total_income,
    calculate_total_payments,
    calculate_total_tax,
    get_standard_deduction,
    recalculate,
    resolve_settlement,
)
from form1040.mapping.record import Form1040Data
from form1040.tax.year_config import TAX_YEAR_2023, TAX_YEAR_2024


# =============================================================================
# Income
# =============================================================================


class TestTotalIncome:
    """Tests for calculate_total_income."""

    def test_sums_all_income_lines(self) -> None:
        record = Form1040Data(
            line1=Decimal("50000"),
            line2b=Decimal("1000"),
            line3b=Decimal("500"),
            line4b=Decimal("200"),
            line5b=Decimal("300"),
            line6b=Decimal("400"),
            line7=Decimal("600"),
            line8=Decimal("700"),
        )
        assert calculate_total_income(record) == Decimal("53700")

    def test_informational_lines_not_counted(self) -> None:
        """Tax-exempt interest and qualified dividends are subsets, not income."""
        record = Form1040Data(
            line1=Decimal("1000"), line2a=Decimal("250"), line3a=Decimal("125")
        )
        assert calculate_total_income(record) == Decimal("1000")

    def test_empty_record(self) -> None:
        assert calculate_total_income(Form1040Data()) == Decimal("0")


class TestTaxableIncome:
    def test_subtracts_deductions(self) -> None:
        assert calculate_taxable_income(Decimal("50000"), Decimal("13850")) == Decimal(
            "36150"
        )

    def test_floored_at_zero(self) -> None:
        assert calculate_taxable_income(Decimal("10000"), Decimal("13850")) == Decimal("0")


# =============================================================================
# Deductions
# =============================================================================


class TestStandardDeduction:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (FilingStatus.SINGLE, Decimal("13850")),
            (FilingStatus.MARRIED_FILING_JOINTLY, Decimal("27700")),
            (FilingStatus.HEAD_OF_HOUSEHOLD, Decimal("20800")),
            (None, Decimal("13850")),
        ],
    )
    def test_2023_amounts(self, status: FilingStatus | None, expected: Decimal) -> None:
        assert get_standard_deduction(status, TAX_YEAR_2023) == expected


# =============================================================================
# Tax Calculation
# =============================================================================


class TestCalculateTax:
    """Tests for calculate_tax."""

    def test_zero_taxable_income(self) -> None:
        result = calculate_tax(Decimal("0"), FilingStatus.SINGLE, TAX_YEAR_2023)
        assert result.gross_tax == Decimal("0.00")
        assert result.bracket_breakdown == []

    def test_negative_taxable_income(self) -> None:
        result = calculate_tax(Decimal("-500"), FilingStatus.SINGLE, TAX_YEAR_2023)
        assert result.gross_tax == Decimal("0.00")

    def test_first_bracket_boundary(self) -> None:
        """Income exactly at the first bound is taxed only at 10%."""
        result = calculate_tax(Decimal("11000"), FilingStatus.SINGLE, TAX_YEAR_2023)
        assert result.gross_tax == Decimal("1100.00")
        assert len(result.bracket_breakdown) == 1

    def test_one_dollar_over_boundary(self) -> None:
        result = calculate_tax(Decimal("11001"), FilingStatus.SINGLE, TAX_YEAR_2023)
        assert result.gross_tax == Decimal("1100.12")
        assert result.bracket_breakdown[1].taxable_amount == Decimal("1")

    def test_single_two_brackets(self) -> None:
        result = calculate_tax(Decimal("36150"), FilingStatus.SINGLE, TAX_YEAR_2023)
        assert result.gross_tax == Decimal("4118.00")
        assert result.effective_rate == Decimal("4118.00") / Decimal("36150")

    def test_married_filing_jointly(self) -> None:
        """22000 * 10% + 50300 * 12% for 72300 of taxable income."""
        result = calculate_tax(
            Decimal("72300"), FilingStatus.MARRIED_FILING_JOINTLY, TAX_YEAR_2023
        )
        assert result.gross_tax == Decimal("8236.00")

    def test_head_of_household_uses_single_table(self) -> None:
        single = calculate_tax(Decimal("60000"), FilingStatus.SINGLE, TAX_YEAR_2023)
        hoh = calculate_tax(Decimal("60000"), FilingStatus.HEAD_OF_HOUSEHOLD, TAX_YEAR_2023)
        assert hoh.gross_tax == single.gross_tax

    def test_top_bracket(self) -> None:
        """Income above the last bound is taxed at 37%."""
        result = calculate_tax(Decimal("600000"), FilingStatus.SINGLE, TAX_YEAR_2023)
        top = result.bracket_breakdown[-1]
        assert top.upper_bound is None
        assert top.rate == Decimal("0.37")
        assert top.taxable_amount == Decimal("21875")

    def test_rounds_half_up_to_cent(self) -> None:
        """10% of 0.05 is 0.005, which rounds up."""
        result = calculate_tax(Decimal("0.05"), FilingStatus.SINGLE, TAX_YEAR_2023)
        assert result.gross_tax == Decimal("0.01")

    def test_year_tables_differ(self) -> None:
        result = calculate_tax(Decimal("11600"), FilingStatus.SINGLE, TAX_YEAR_2024)
        assert result.gross_tax == Decimal("1160.00")


class TestTotals:
    def test_total_tax_adds_other_taxes(self) -> None:
        record = Form1040Data(
            line16=Decimal("4118"), line17=Decimal("100"), line23=Decimal("50")
        )
        assert calculate_total_tax(record) == Decimal("4268")

    def test_total_payments_adds_withholding_lines(self) -> None:
        record = Form1040Data(
            line25a=Decimal("5000"), line25b=Decimal("100"), line25d=Decimal("25")
        )
        assert calculate_total_payments(record) == Decimal("5125")


class TestSettlement:
    """Tests for resolve_settlement."""

    def test_refund(self) -> None:
        settlement = resolve_settlement(Decimal("4118.00"), Decimal("5000"))
        assert settlement.overpaid == Decimal("882.00")
        assert settlement.refund == Decimal("882.00")
        assert settlement.applied_to_next_year == Decimal("0")
        assert settlement.amount_owed == Decimal("0")

    def test_amount_owed(self) -> None:
        settlement = resolve_settlement(Decimal("4118.00"), Decimal("4000"))
        assert settlement.overpaid == Decimal("0")
        assert settlement.refund == Decimal("0")
        assert settlement.amount_owed == Decimal("118.00")

    def test_exactly_paid_owes_zero(self) -> None:
        settlement = resolve_settlement(Decimal("100"), Decimal("100"))
        assert settlement.refund == Decimal("0")
        assert settlement.amount_owed == Decimal("0")


# =============================================================================
# Recalculation
# =============================================================================


class TestRecalculate:
    """Tests for recalculate."""

    def test_single_w2_refund(self, single_record: Form1040Data) -> None:
        single_record.line1 = Decimal("50000")
        single_record.line25a = Decimal("5000")

        result = recalculate(single_record)

        assert result.line9 == Decimal("50000")
        assert result.line11 == Decimal("50000")
        assert result.line12 == Decimal("13850")
        assert result.line15 == Decimal("36150")
        assert result.line16 == Decimal("4118.00")
        assert result.line24 == Decimal("4118.00")
        assert result.line32 == Decimal("5000")
        assert result.line33 == Decimal("882.00")
        assert result.line34 == Decimal("882.00")
        assert result.line36 == Decimal("0")
        assert result.line37 == Decimal("0")

    def test_does_not_modify_input(self, single_record: Form1040Data) -> None:
        single_record.line1 = Decimal("50000")
        recalculate(single_record)
        assert single_record.line9 is None
        assert single_record.line16 is None

    def test_idempotent(self, single_record: Form1040Data) -> None:
        single_record.line1 = Decimal("80000")
        once = recalculate(single_record)
        assert recalculate(once) == once

    def test_without_filing_status_deduction_stays_absent(self) -> None:
        """Unknown status: no deduction, so all income is taxable."""
        result = recalculate(Form1040Data(line1=Decimal("11000")))
        assert result.line12 is None
        assert result.line15 == Decimal("11000")
        assert result.line16 == Decimal("1100.00")

    def test_explicit_zero_deduction_is_kept(self, single_record: Form1040Data) -> None:
        single_record.line1 = Decimal("11000")
        single_record.line12 = Decimal("0")

        result = recalculate(single_record)

        assert result.line12 == Decimal("0")
        assert result.line15 == Decimal("11000")

    def test_itemized_deduction_is_subtracted(self, single_record: Form1040Data) -> None:
        single_record.line1 = Decimal("50000")
        single_record.line13 = Decimal("1150")
        result = recalculate(single_record)
        assert result.line15 == Decimal("35000")

    def test_record_year_selects_tables(self) -> None:
        record = Form1040Data(
            filing_status=FilingStatus.SINGLE, tax_year=2024, line1=Decimal("50000")
        )
        assert recalculate(record).line12 == Decimal("14600")

    def test_unconfigured_year_uses_default(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "default_tax_year", 2024)
        record = Form1040Data(
            filing_status=FilingStatus.SINGLE, tax_year=1999, line1=Decimal("50000")
        )
        assert recalculate(record).line12 == Decimal("14600")

    def test_explicit_config_wins(self, single_record: Form1040Data) -> None:
        single_record.line1 = Decimal("50000")
        result = recalculate(single_record, TAX_YEAR_2024)
        assert result.line12 == Decimal("14600")
