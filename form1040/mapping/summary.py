"""Audit summary of which extracted fields land on which 1040 lines.

The summary is a side channel for display: it reads the raw field bag only,
never a record, and never raises.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from form1040.documents.models import DocumentType, RawFields, is_present
from form1040.documents.vocabulary import ChecklistItem, get_vocabulary
from form1040.mapping.parsing import format_ssn, parse_amount


class MappingEntry(BaseModel):
    """One source field -> 1040 line correspondence."""

    model_config = ConfigDict(frozen=True)

    source_field: str = Field(description="Box or field label on the source document")
    source_value: Any = Field(description="Value exactly as extracted")
    target_line: str = Field(description="1040 line label, Header, or Informational")
    target_value: Any = Field(description="Value as it would appear on the 1040")
    description: str = Field(description="Human-readable explanation")


def _target_value(item: ChecklistItem, value: Any) -> Any:
    if item.kind == "ssn":
        return format_ssn(value)
    if item.kind == "text":
        return value
    return parse_amount(value)


def create_mapping_summary(
    raw_fields: RawFields,
    document_type: DocumentType | str = DocumentType.W2,
) -> list[MappingEntry]:
    """List the mappings a document's fields produce, in checklist order.

    Args:
        raw_fields: Extracted field bag for a single document.
        document_type: Category selecting the checklist.

    Returns:
        One MappingEntry per checklist field present in ``raw_fields``.

    Example:
        >>> entries = create_mapping_summary({"wages": "50,000"})
        >>> entries[0].target_line, entries[0].target_value
        ('Line 1', Decimal('50000'))
    """
    vocabulary = get_vocabulary(document_type)
    entries: list[MappingEntry] = []
    for item in vocabulary.checklist:
        if not is_present(raw_fields, item.key):
            continue
        value = raw_fields[item.key]
        entries.append(
            MappingEntry(
                source_field=item.source_label,
                source_value=value,
                target_line=item.target_label,
                target_value=_target_value(item, value),
                description=item.description.format(form=vocabulary.label),
            )
        )
    return entries
