"""Pydantic models exchanged between processing and its collaborators."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from form1040.documents.models import DocumentType, FilingStatus, ProcessingStatus
from form1040.documents.validation import ValidationResult
from form1040.mapping.record import Form1040Data
from form1040.mapping.summary import MappingEntry


class MatchCriteria(BaseModel):
    """Which comparisons matched an existing document."""

    document_type: bool = False
    employer_info: bool = False
    recipient_info: bool = False
    amount_similarity: bool = False
    name_similarity: bool = False


class DuplicateDetectionResult(BaseModel):
    """Outcome of checking a document against the rest of its tax return."""

    is_duplicate: bool = Field(default=False, description="Document already in the return")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0, description="Match confidence")
    matching_documents: list[str] = Field(
        default_factory=list, description="IDs of documents this one matches"
    )
    match_criteria: MatchCriteria = Field(default_factory=MatchCriteria)

    @classmethod
    def not_duplicate(cls) -> DuplicateDetectionResult:
        """Result used when no checker is configured or the checker fails."""
        return cls()


class SourceDocument(BaseModel):
    """An uploaded document waiting for extraction."""

    document_id: str
    tax_return_id: str
    document_type: DocumentType
    file_name: str = ""
    content: bytes = Field(repr=False)


class ProcessedDocument(BaseModel):
    """A document after extraction, duplicate check, and validation."""

    document_id: str
    tax_return_id: str
    document_type: DocumentType
    file_name: str = ""
    status: ProcessingStatus = ProcessingStatus.COMPLETED
    ocr_text: str = ""
    extracted_fields: dict[str, Any] = Field(default_factory=dict)
    duplicate_detection: DuplicateDetectionResult = Field(
        default_factory=DuplicateDetectionResult.not_duplicate
    )
    validation: ValidationResult | None = None

    @property
    def mappable(self) -> bool:
        """Completed and not flagged as a duplicate."""
        return (
            self.status == ProcessingStatus.COMPLETED
            and not self.duplicate_detection.is_duplicate
        )


class TaxpayerProfile(BaseModel):
    """Return-level information entered by the taxpayer, not extracted."""

    first_name: str | None = None
    last_name: str | None = None
    ssn: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    filing_status: FilingStatus | None = None
    tax_year: int | None = None


class DocumentMappings(BaseModel):
    """Mapping summary for one source document."""

    document_id: str
    file_name: str = ""
    document_type: DocumentType
    mappings: list[MappingEntry] = Field(default_factory=list)


class Form1040Assembly(BaseModel):
    """Record built from every mappable document of a return."""

    record: Form1040Data
    document_mappings: list[DocumentMappings] = Field(default_factory=list)
    skipped_document_ids: list[str] = Field(default_factory=list)
