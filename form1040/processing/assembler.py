"""Build a tax return's Form 1040 from its processed documents.

Documents are folded into the record one at a time, in the order given.
Identity comes from the first document that supplies it; amounts are summed
across documents. Documents that failed extraction or were flagged as
duplicates are skipped so their amounts are never counted twice.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from form1040.core.logging import get_logger
from form1040.mapping.calculator import recalculate
from form1040.mapping.mapper import copy_record, merge_document
from form1040.mapping.record import Form1040Data
from form1040.mapping.summary import create_mapping_summary
from form1040.processing.models import (
    DocumentMappings,
    Form1040Assembly,
    ProcessedDocument,
    TaxpayerProfile,
)
from form1040.tax.year_config import TaxYearConfig

logger = get_logger(__name__)

_PROFILE_IDENTITY_FIELDS = (
    "first_name",
    "last_name",
    "ssn",
    "address",
    "city",
    "state",
    "zip_code",
)


def _start_from_profile(
    existing_record: Form1040Data | Mapping[str, Any] | None,
    taxpayer: TaxpayerProfile | None,
) -> Form1040Data:
    """Seed the return-level filing status and tax year before any merge."""
    record = copy_record(existing_record)
    if taxpayer is None:
        return record
    if record.filing_status is None and taxpayer.filing_status is not None:
        record.filing_status = taxpayer.filing_status
    if record.tax_year is None and taxpayer.tax_year is not None:
        record.tax_year = taxpayer.tax_year
    return record


def _backfill_identity(record: Form1040Data, taxpayer: TaxpayerProfile) -> None:
    """Use the taxpayer's own entries when no document supplied a name."""
    if record.first_name:
        return
    for name in _PROFILE_IDENTITY_FIELDS:
        setattr(record, name, getattr(taxpayer, name) or "")


def assemble_form1040(
    documents: Iterable[ProcessedDocument],
    taxpayer: TaxpayerProfile | None = None,
    existing_record: Form1040Data | Mapping[str, Any] | None = None,
    config: TaxYearConfig | None = None,
) -> Form1040Assembly:
    """Fold every mappable document into one Form 1040 record.

    Args:
        documents: Processed documents of a single return, in merge order.
        taxpayer: Return-level entries: filing status, tax year, and identity
            used when no document names the taxpayer.
        existing_record: Previously stored record to resume from, either a
            model or its camelCase storage mapping.
        config: Tax year tables; defaults to the record's tax year.

    Returns:
        Form1040Assembly with the record, per-document mapping summaries, and
        the IDs of skipped documents.
    """
    record = _start_from_profile(existing_record, taxpayer)
    document_mappings: list[DocumentMappings] = []
    skipped: list[str] = []

    for document in documents:
        if not document.mappable:
            logger.info(
                "document_skipped",
                document_id=document.document_id,
                status=document.status.value,
                is_duplicate=document.duplicate_detection.is_duplicate,
            )
            skipped.append(document.document_id)
            continue

        record = merge_document(
            document.extracted_fields, record, document.document_type, config
        )
        document_mappings.append(
            DocumentMappings(
                document_id=document.document_id,
                file_name=document.file_name,
                document_type=document.document_type,
                mappings=create_mapping_summary(
                    document.extracted_fields, document.document_type
                ),
            )
        )
        logger.debug(
            "document_merged",
            document_id=document.document_id,
            total_income=record.line9,
            total_payments=record.line32,
        )

    if taxpayer is not None:
        _backfill_identity(record, taxpayer)

    record = recalculate(record, config)
    logger.info(
        "form1040_assembled",
        documents_merged=len(document_mappings),
        documents_skipped=len(skipped),
        refund=record.line34,
        amount_owed=record.line37,
    )
    return Form1040Assembly(
        record=record,
        document_mappings=document_mappings,
        skipped_document_ids=skipped,
    )
