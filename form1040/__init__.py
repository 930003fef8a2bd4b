"""Map extracted tax document fields onto a Form 1040 and compute the return.

Example:
    >>> from form1040 import merge_document
    >>> record = merge_document(
    ...     {"employeeName": "Jane Doe", "wages": "50000", "federalTaxWithheld": "5000"}
    ... )
    >>> record.line9
    Decimal('50000')
"""

from form1040.documents.models import DocumentType, FilingStatus, ProcessingStatus
from form1040.documents.validation import (
    DocumentValidator,
    ValidationResult,
    validate_for_mapping,
)
from form1040.mapping.calculator import (
    Settlement,
    TaxResult,
    calculate_tax,
    calculate_taxable_income,
    calculate_total_income,
    calculate_total_payments,
    calculate_total_tax,
    get_standard_deduction,
    recalculate,
    resolve_settlement,
)
from form1040.mapping.mapper import merge_document
from form1040.mapping.parsing import format_ssn, parse_address, parse_amount, split_name
from form1040.mapping.record import Form1040Data, FormLine
from form1040.mapping.summary import MappingEntry, create_mapping_summary
from form1040.tax.year_config import TaxYearConfig, get_tax_year_config

__version__ = "0.1.0"

__all__ = [
    # Vocabularies
    "DocumentType",
    "FilingStatus",
    "ProcessingStatus",
    # Record
    "Form1040Data",
    "FormLine",
    # Mapping
    "merge_document",
    "create_mapping_summary",
    "MappingEntry",
    # Parsing
    "format_ssn",
    "parse_address",
    "parse_amount",
    "split_name",
    # Calculation
    "Settlement",
    "TaxResult",
    "calculate_tax",
    "calculate_taxable_income",
    "calculate_total_income",
    "calculate_total_payments",
    "calculate_total_tax",
    "get_standard_deduction",
    "recalculate",
    "resolve_settlement",
    # Validation
    "DocumentValidator",
    "ValidationResult",
    "validate_for_mapping",
    # Tax years
    "TaxYearConfig",
    "get_tax_year_config",
]
