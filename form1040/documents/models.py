"""Document categories, filing statuses, and raw extraction types.

This module defines the closed vocabularies shared by the mapping engine:
- DocumentType: source document categories the engine recognizes
- FilingStatus: filing-status categories governing deductions and brackets
- RawFields: the untyped field bag produced per document by extraction
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# One document's extracted fields: field name -> string or number.
RawFields = Mapping[str, Any]


class DocumentType(str, Enum):
    """Type of source tax document."""

    W2 = "W2"
    FORM_1099_INT = "FORM_1099_INT"
    FORM_1099_DIV = "FORM_1099_DIV"
    FORM_1099_MISC = "FORM_1099_MISC"
    FORM_1099_NEC = "FORM_1099_NEC"
    OTHER = "OTHER_TAX_DOCUMENT"

    @property
    def is_information_return(self) -> bool:
        """True for the 1099 family."""
        return self in (
            DocumentType.FORM_1099_INT,
            DocumentType.FORM_1099_DIV,
            DocumentType.FORM_1099_MISC,
            DocumentType.FORM_1099_NEC,
        )


class FilingStatus(str, Enum):
    """Filing-status category for a return."""

    SINGLE = "SINGLE"
    MARRIED_FILING_JOINTLY = "MARRIED_FILING_JOINTLY"
    MARRIED_FILING_SEPARATELY = "MARRIED_FILING_SEPARATELY"
    HEAD_OF_HOUSEHOLD = "HEAD_OF_HOUSEHOLD"
    QUALIFYING_SURVIVING_SPOUSE = "QUALIFYING_SURVIVING_SPOUSE"

    @classmethod
    def from_value(cls, value: object) -> FilingStatus | None:
        """Resolve a stored or user-entered status, None when unrecognized.

        Accepts enum values in any case, hyphen/space separated variants, and
        the short codes single, mfj, mfs, hoh, qss (and legacy qw).
        """
        if isinstance(value, FilingStatus):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        if not key:
            return None
        if key in cls.__members__:
            return cls[key]
        return _FILING_STATUS_CODES.get(key)


_FILING_STATUS_CODES: dict[str, FilingStatus] = {
    "MFJ": FilingStatus.MARRIED_FILING_JOINTLY,
    "MFS": FilingStatus.MARRIED_FILING_SEPARATELY,
    "HOH": FilingStatus.HEAD_OF_HOUSEHOLD,
    "QSS": FilingStatus.QUALIFYING_SURVIVING_SPOUSE,
    "QW": FilingStatus.QUALIFYING_SURVIVING_SPOUSE,
    "QUALIFYING_WIDOW": FilingStatus.QUALIFYING_SURVIVING_SPOUSE,
}


class ProcessingStatus(str, Enum):
    """Lifecycle of a source document inside a tax return."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


def is_present(fields: RawFields, key: str) -> bool:
    """True when ``key`` carries a value: not missing, None, or blank text.

    Zero counts as present; only absence is tested, nothing is parsed.
    """
    value = fields.get(key)
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True
