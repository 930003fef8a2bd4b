"""Per-document processing: extract, check for duplicates, validate.

``DocumentProcessor`` turns an uploaded document into the raw field bag the
mapping engine consumes. It owns no I/O clients itself: the extraction
service and the duplicate checker are passed in.

Example:
    >>> processor = DocumentProcessor(extractor=my_extractor, duplicate_checker=checker)
    >>> processed = await processor.process(source_document)
    >>> if processed.mappable:
    ...     record = merge_document(processed.extracted_fields, record, processed.document_type)
"""

from __future__ import annotations

from form1040.core.logging import document_id_ctx, get_logger, tax_return_id_ctx
from form1040.core.sentry import capture_processing_exception
from form1040.documents.models import DocumentType, ProcessingStatus, RawFields
from form1040.documents.validation import DocumentValidator
from form1040.documents.vocabulary import (
    FULL_TEXT_KEY,
    model_id_for,
    normalize_service_fields,
    recognized_keys,
)
from form1040.processing.collaborators import DuplicateChecker, FieldExtractor
from form1040.processing.models import (
    DuplicateDetectionResult,
    ProcessedDocument,
    SourceDocument,
)

logger = get_logger(__name__)


class DocumentProcessingError(Exception):
    """Raised when a document cannot be extracted.

    Attributes:
        document_id: Document that failed.
        result: Processed document in FAILED status, for the caller to persist.
    """

    def __init__(self, message: str, document_id: str, result: ProcessedDocument) -> None:
        self.document_id = document_id
        self.result = result
        super().__init__(message)


class DocumentProcessor:
    """Run one document through extraction, duplicate detection and validation.

    Attributes:
        extractor: Hosted extraction service.
        duplicate_checker: Optional duplicate gate; without one every
            document is treated as unique.
        validator: Presence validator for the extracted fields.
    """

    def __init__(
        self,
        extractor: FieldExtractor,
        duplicate_checker: DuplicateChecker | None = None,
        validator: DocumentValidator | None = None,
    ) -> None:
        self.extractor = extractor
        self.duplicate_checker = duplicate_checker
        self.validator = validator or DocumentValidator()

    async def process(self, document: SourceDocument) -> ProcessedDocument:
        """Process a single uploaded document.

        Args:
            document: Uploaded document with its bytes and category.

        Returns:
            ProcessedDocument in COMPLETED status with normalized fields,
            duplicate detection outcome, and validation result.

        Raises:
            DocumentProcessingError: If the extraction service fails. The
                attached result is in FAILED status.
        """
        return_token = tax_return_id_ctx.set(document.tax_return_id)
        document_token = document_id_ctx.set(document.document_id)
        try:
            return await self._process(document)
        finally:
            document_id_ctx.reset(document_token)
            tax_return_id_ctx.reset(return_token)

    async def _process(self, document: SourceDocument) -> ProcessedDocument:
        model_id = model_id_for(document.document_type)
        logger.info(
            "document_processing_start",
            document_type=document.document_type.value,
            model_id=model_id,
            file_name=document.file_name,
        )

        try:
            service_fields = await self.extractor.extract(
                document.content, document.document_type, model_id
            )
        except Exception as e:
            logger.error(
                "document_extraction_failed",
                document_type=document.document_type.value,
                error=str(e),
            )
            capture_processing_exception(
                e,
                document_type=document.document_type.value,
                model_id=model_id,
            )
            failed = ProcessedDocument(
                document_id=document.document_id,
                tax_return_id=document.tax_return_id,
                document_type=document.document_type,
                file_name=document.file_name,
                status=ProcessingStatus.FAILED,
            )
            raise DocumentProcessingError(
                f"Extraction failed for document {document.document_id}: {e}",
                document_id=document.document_id,
                result=failed,
            ) from e

        full_text = service_fields.get(FULL_TEXT_KEY)
        ocr_text = full_text if isinstance(full_text, str) else ""
        fields = normalize_service_fields(service_fields, document.document_type)

        duplicate_detection = await self._check_duplicates(
            document.document_type, fields, document.tax_return_id
        )
        validation = self.validator.validate_for_mapping(fields, document.document_type)

        logger.info(
            "document_processing_complete",
            document_type=document.document_type.value,
            recognized_fields=len(recognized_keys(fields, document.document_type)),
            duplicate_found=duplicate_detection.is_duplicate,
            is_valid=validation.is_valid,
            error_count=len(validation.errors),
            warning_count=len(validation.warnings),
        )

        return ProcessedDocument(
            document_id=document.document_id,
            tax_return_id=document.tax_return_id,
            document_type=document.document_type,
            file_name=document.file_name,
            status=ProcessingStatus.COMPLETED,
            ocr_text=ocr_text,
            extracted_fields=fields,
            duplicate_detection=duplicate_detection,
            validation=validation,
        )

    async def _check_duplicates(
        self,
        document_type: DocumentType,
        fields: RawFields,
        tax_return_id: str,
    ) -> DuplicateDetectionResult:
        """Run the duplicate checker; its failure never blocks processing."""
        if self.duplicate_checker is None:
            return DuplicateDetectionResult.not_duplicate()

        try:
            result = await self.duplicate_checker.check(document_type, fields, tax_return_id)
        except Exception as e:
            logger.warning(
                "duplicate_detection_failed",
                document_type=document_type.value,
                error=str(e),
            )
            return DuplicateDetectionResult.not_duplicate()

        logger.info(
            "duplicate_detection_complete",
            is_duplicate=result.is_duplicate,
            confidence=result.confidence,
            matching_count=len(result.matching_documents),
        )
        return result
