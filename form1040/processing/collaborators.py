"""Interfaces of the external services processing depends on.

Both services are constructed by the application and injected into
``DocumentProcessor``; nothing in this package holds a module-level client.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from form1040.documents.models import DocumentType, RawFields
from form1040.processing.models import DuplicateDetectionResult


@runtime_checkable
class FieldExtractor(Protocol):
    """Hosted document-understanding service.

    ``extract`` returns the service's field map for one document: field name
    (``Employee.Name``, ``WagesAndTips``, ...) to either a bare value or a
    ``{"value": ...}`` object. The OCR text, when available, is returned
    under ``fullText``. ``model_id`` is the prebuilt model to use, see
    ``form1040.documents.vocabulary.model_id_for``.
    """

    async def extract(
        self, content: bytes, document_type: DocumentType, model_id: str
    ) -> Mapping[str, Any]: ...


@runtime_checkable
class DuplicateChecker(Protocol):
    """Compares a document's fields with documents already in the return."""

    async def check(
        self,
        document_type: DocumentType,
        fields: RawFields,
        tax_return_id: str,
    ) -> DuplicateDetectionResult: ...
