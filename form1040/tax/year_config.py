"""Tax year-specific deduction amounts and marginal bracket tables.

This module centralizes tax year-specific values so the mapping engine never
bakes a single year's literals into its logic. Each year is a frozen
configuration object; add a year by registering a new ``TaxYearConfig``.

Example:
    >>> from form1040.tax.year_config import get_tax_year_config
    >>> config = get_tax_year_config(2023)
    >>> print(config.standard_deduction_single)
    13850
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from form1040.documents.models import FilingStatus


@dataclass(frozen=True)
class TaxBracket:
    """A contiguous income range taxed at a single marginal rate.

    Attributes:
        lower_bound: Income where the bracket starts.
        upper_bound: Income where the bracket ends, or None for the top bracket.
        rate: Marginal rate applied to income inside the bracket.
    """

    lower_bound: Decimal
    upper_bound: Decimal | None
    rate: Decimal

    @property
    def width(self) -> Decimal | None:
        """Size of the bracket, None when unbounded."""
        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound


def _brackets(
    upper_bounds: list[str], rates: list[str]
) -> tuple[TaxBracket, ...]:
    """Build a contiguous bracket table from its upper bounds.

    The last rate gets an unbounded bracket, so ``rates`` is one longer
    than ``upper_bounds``.
    """
    brackets: list[TaxBracket] = []
    lower = Decimal("0")
    for index, rate in enumerate(rates):
        upper = Decimal(upper_bounds[index]) if index < len(upper_bounds) else None
        brackets.append(TaxBracket(lower_bound=lower, upper_bound=upper, rate=Decimal(rate)))
        if upper is not None:
            lower = upper
    return tuple(brackets)


def validate_brackets(brackets: tuple[TaxBracket, ...]) -> None:
    """Check that a bracket table is usable by the bracket walk.

    Raises:
        ValueError: If the table is empty, does not start at zero, has gaps or
            overlaps, is not ascending, or has a bounded top bracket.
    """
    if not brackets:
        raise ValueError("Bracket table is empty")
    if brackets[0].lower_bound != Decimal("0"):
        raise ValueError("First bracket must start at 0")
    for previous, current in zip(brackets, brackets[1:]):
        if previous.upper_bound is None:
            raise ValueError("Only the last bracket may be unbounded")
        if current.lower_bound != previous.upper_bound:
            raise ValueError(
                f"Bracket starting at {current.lower_bound} does not continue "
                f"from {previous.upper_bound}"
            )
    for bracket in brackets:
        if bracket.upper_bound is not None and bracket.upper_bound <= bracket.lower_bound:
            raise ValueError(f"Bracket {bracket.lower_bound}-{bracket.upper_bound} is empty")
    if brackets[-1].upper_bound is not None:
        raise ValueError("Last bracket must be unbounded")


@dataclass(frozen=True)
class TaxYearConfig:
    """Tax year-specific deduction amounts and bracket tables.

    All monetary values are Decimal for precision in tax calculations.
    This dataclass is frozen to prevent accidental modification.

    Attributes:
        tax_year: The tax year these values apply to.
        standard_deduction_single: Standard deduction for single filers.
        standard_deduction_mfj: Standard deduction for married filing jointly.
        standard_deduction_mfs: Standard deduction for married filing separately.
        standard_deduction_hoh: Standard deduction for head of household.
        standard_deduction_qss: Standard deduction for qualifying surviving spouse.
        brackets_single: Bracket table for single and every non-joint status.
        brackets_mfj: Bracket table for married filing jointly.
    """

    tax_year: int

    # Standard deductions
    standard_deduction_single: Decimal
    standard_deduction_mfj: Decimal
    standard_deduction_mfs: Decimal
    standard_deduction_hoh: Decimal
    standard_deduction_qss: Decimal

    # Marginal brackets
    brackets_single: tuple[TaxBracket, ...]
    brackets_mfj: tuple[TaxBracket, ...]

    def __post_init__(self) -> None:
        validate_brackets(self.brackets_single)
        validate_brackets(self.brackets_mfj)

    @property
    def standard_deductions(self) -> dict[FilingStatus, Decimal]:
        """Standard deduction lookup keyed by filing status."""
        return {
            FilingStatus.SINGLE: self.standard_deduction_single,
            FilingStatus.MARRIED_FILING_JOINTLY: self.standard_deduction_mfj,
            FilingStatus.MARRIED_FILING_SEPARATELY: self.standard_deduction_mfs,
            FilingStatus.HEAD_OF_HOUSEHOLD: self.standard_deduction_hoh,
            FilingStatus.QUALIFYING_SURVIVING_SPOUSE: self.standard_deduction_qss,
        }

    def standard_deduction_for(self, filing_status: FilingStatus | None) -> Decimal:
        """Standard deduction for a status, falling back to the single amount."""
        if filing_status is None:
            return self.standard_deduction_single
        return self.standard_deductions.get(filing_status, self.standard_deduction_single)

    def brackets_for(self, filing_status: FilingStatus | None) -> tuple[TaxBracket, ...]:
        """Joint filers use the joint table; everyone else uses the single table."""
        if filing_status == FilingStatus.MARRIED_FILING_JOINTLY:
            return self.brackets_mfj
        return self.brackets_single


# 2023 Configuration - IRS published values (Rev. Proc. 2022-38)
TAX_YEAR_2023 = TaxYearConfig(
    tax_year=2023,
    standard_deduction_single=Decimal("13850"),
    standard_deduction_mfj=Decimal("27700"),
    standard_deduction_mfs=Decimal("13850"),
    standard_deduction_hoh=Decimal("20800"),
    standard_deduction_qss=Decimal("27700"),
    brackets_single=_brackets(
        ["11000", "44725", "95375", "182100", "231250", "578125"],
        ["0.10", "0.12", "0.22", "0.24", "0.32", "0.35", "0.37"],
    ),
    brackets_mfj=_brackets(
        ["22000", "89450", "190750", "364200", "462500", "693750"],
        ["0.10", "0.12", "0.22", "0.24", "0.32", "0.35", "0.37"],
    ),
)

# 2024 Configuration - IRS published values (Rev. Proc. 2023-34)
TAX_YEAR_2024 = TaxYearConfig(
    tax_year=2024,
    standard_deduction_single=Decimal("14600"),
    standard_deduction_mfj=Decimal("29200"),
    standard_deduction_mfs=Decimal("14600"),
    standard_deduction_hoh=Decimal("21900"),
    standard_deduction_qss=Decimal("29200"),
    brackets_single=_brackets(
        ["11600", "47150", "100525", "191950", "243725", "609350"],
        ["0.10", "0.12", "0.22", "0.24", "0.32", "0.35", "0.37"],
    ),
    brackets_mfj=_brackets(
        ["23200", "94300", "201050", "383900", "487450", "731200"],
        ["0.10", "0.12", "0.22", "0.24", "0.32", "0.35", "0.37"],
    ),
)

# Registry of available tax year configurations
TAX_YEAR_CONFIGS: dict[int, TaxYearConfig] = {
    2023: TAX_YEAR_2023,
    2024: TAX_YEAR_2024,
}


def get_tax_year_config(year: int) -> TaxYearConfig:
    """Get configuration for a specific tax year.

    Args:
        year: The tax year (e.g., 2023).

    Returns:
        TaxYearConfig for the specified year.

    Raises:
        ValueError: If no configuration exists for the requested year.
    """
    if year not in TAX_YEAR_CONFIGS:
        available = sorted(TAX_YEAR_CONFIGS.keys())
        raise ValueError(
            f"No tax configuration for year {year}. Available years: {available}"
        )
    return TAX_YEAR_CONFIGS[year]


def resolve_tax_year_config(year: int | None, default_year: int) -> TaxYearConfig:
    """Get configuration for a return's year without raising.

    Returns with no year or an unconfigured year use ``default_year``.
    """
    if year is not None and year in TAX_YEAR_CONFIGS:
        return TAX_YEAR_CONFIGS[year]
    return get_tax_year_config(default_year)
