"""Document processing glue around the mapping engine.

This module provides:
- Protocols for the injected extraction service and duplicate checker
- DocumentProcessor for extract -> duplicate check -> validate
- assemble_form1040 for folding a return's documents into one record
"""

from form1040.processing.assembler import assemble_form1040
from form1040.processing.collaborators import DuplicateChecker, FieldExtractor
from form1040.processing.models import (
    DocumentMappings,
    DuplicateDetectionResult,
    Form1040Assembly,
    MatchCriteria,
    ProcessedDocument,
    SourceDocument,
    TaxpayerProfile,
)
from form1040.processing.processor import DocumentProcessingError, DocumentProcessor

__all__ = [
    # Collaborators
    "DuplicateChecker",
    "FieldExtractor",
    # Models
    "DocumentMappings",
    "DuplicateDetectionResult",
    "Form1040Assembly",
    "MatchCriteria",
    "ProcessedDocument",
    "SourceDocument",
    "TaxpayerProfile",
    # Processing
    "DocumentProcessingError",
    "DocumentProcessor",
    "assemble_form1040",
]
