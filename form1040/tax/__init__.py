"""Tax year-specific deduction and bracket configurations."""

from form1040.tax.year_config import (
    TAX_YEAR_2023,
    TAX_YEAR_2024,
    TAX_YEAR_CONFIGS,
    TaxBracket,
    TaxYearConfig,
    get_tax_year_config,
    resolve_tax_year_config,
    validate_brackets,
)

__all__ = [
    "TaxBracket",
    "TaxYearConfig",
    "TAX_YEAR_2023",
    "TAX_YEAR_2024",
    "TAX_YEAR_CONFIGS",
    "get_tax_year_config",
    "resolve_tax_year_config",
    "validate_brackets",
]
