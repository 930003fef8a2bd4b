"""Map one document's extracted fields onto the Form 1040 record.

``merge_document`` folds a raw extraction bag into an accumulating
``Form1040Data``:

- Identity fields are first-write-wins: a later document never replaces a
  name, SSN or address already set by an earlier one.
- Amounts accumulate: each strictly positive amount is added to its line.
- Derived lines are recomputed from scratch after every merge.

Malformed input degrades to zero or empty values; this module never raises
for bad extraction data. Callers gate documents with
``form1040.documents.validation`` and duplicate detection before merging,
since merging the same document twice counts its amounts twice.

Example:
    >>> record = merge_document({"employeeName": "Jane Doe", "wages": "$50,000"})
    >>> record.first_name, record.line1
    ('Jane', Decimal('50000'))
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from form1040.documents.models import DocumentType, RawFields, is_present
from form1040.documents.vocabulary import FieldVocabulary, get_vocabulary
from form1040.mapping.calculator import recalculate
from form1040.mapping.parsing import format_ssn, parse_address, parse_amount, split_name
from form1040.mapping.record import Form1040Data
from form1040.tax.year_config import TaxYearConfig


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def copy_record(existing: Form1040Data | Mapping[str, Any] | None) -> Form1040Data:
    """Copy the caller's record; stored mappings are validated into a model."""
    if existing is None:
        return Form1040Data()
    if isinstance(existing, Form1040Data):
        return existing.model_copy()
    return Form1040Data.model_validate(dict(existing))


def _apply_identity(
    record: Form1040Data, raw_fields: RawFields, vocabulary: FieldVocabulary
) -> None:
    """Fill name, SSN and address when the record does not have them yet."""
    name_key = vocabulary.name_key
    if name_key and is_present(raw_fields, name_key) and _is_blank(record.first_name):
        record.first_name, record.last_name = split_name(raw_fields[name_key])

    identifier_key = vocabulary.identifier_key
    if identifier_key and is_present(raw_fields, identifier_key) and _is_blank(record.ssn):
        record.ssn = format_ssn(raw_fields[identifier_key])

    address_key = vocabulary.address_key
    if address_key and is_present(raw_fields, address_key) and _is_blank(record.address):
        parsed = parse_address(raw_fields[address_key])
        record.address = parsed.street
        record.city = parsed.city
        record.state = parsed.state
        record.zip_code = parsed.zip_code


def _apply_amounts(
    record: Form1040Data, raw_fields: RawFields, vocabulary: FieldVocabulary
) -> None:
    """Add each positive amount to the line it maps to."""
    for key, line in vocabulary.monetary_lines.items():
        amount = parse_amount(raw_fields.get(key))
        if amount > Decimal("0"):
            setattr(record, line.value, record.amount(line) + amount)


def merge_document(
    raw_fields: RawFields,
    existing_record: Form1040Data | Mapping[str, Any] | None = None,
    document_type: DocumentType | str = DocumentType.W2,
    config: TaxYearConfig | None = None,
) -> Form1040Data:
    """Merge one document's raw fields into a Form 1040 record.

    Args:
        raw_fields: Extracted field bag for a single document. Read only.
        existing_record: Record accumulated so far, either a model or a stored
            camelCase mapping. Never modified. None starts an empty record.
        document_type: Category selecting which raw keys are recognized.
        config: Tax year tables; defaults to the record's tax year.

    Returns:
        A new record with identity, amounts and every derived line updated.
    """
    vocabulary = get_vocabulary(document_type)
    record = copy_record(existing_record)
    _apply_identity(record, raw_fields, vocabulary)
    _apply_amounts(record, raw_fields, vocabulary)
    return recalculate(record, config)
