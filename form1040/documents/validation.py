"""Presence checks for extracted fields before they are mapped.

The mapper accepts anything; this module is the strict gate. It separates
hard requirements (errors: a document without income, identifier or name is
probably mis-extracted or the wrong document type) from soft ones (warnings:
usable, but missing withholding or employer/payer identity). Values are
only tested for presence, never parsed.

Example:
    >>> from form1040.documents.validation import DocumentValidator
    >>> validator = DocumentValidator()
    >>> result = validator.validate_for_mapping(raw_fields)
    >>> if not result.is_valid:
    ...     print(f"Errors: {result.errors}")
"""

from __future__ import annotations

from dataclasses import dataclass, field

from form1040.documents.models import DocumentType, RawFields, is_present
from form1040.documents.vocabulary import FieldVocabulary, get_vocabulary


@dataclass
class ValidationResult:
    """Result of document validation.

    Attributes:
        is_valid: True if no errors were found.
        errors: List of critical errors that must be resolved.
        warnings: List of potential issues that should be reviewed.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _any_present(raw_fields: RawFields, keys: tuple[str, ...]) -> bool:
    return any(is_present(raw_fields, key) for key in keys)


class DocumentValidator:
    """Check that extracted fields are complete enough to map.

    Use this after extraction but before merging into the 1040 record. The
    caller decides whether to merge a document that fails validation.

    Example:
        >>> validator = DocumentValidator()
        >>> result = validator.validate_for_mapping({}, DocumentType.W2)
        >>> len(result.errors)
        3
    """

    def validate_for_mapping(
        self,
        raw_fields: RawFields,
        document_type: DocumentType | str = DocumentType.W2,
    ) -> ValidationResult:
        """Validate that a document's raw fields can be mapped to the 1040.

        Checks (W-2 spellings shown; 1099 forms use their own keys):
        - Wages present as ``wages`` or ``line1`` (error)
        - SSN present as ``employeeSSN`` or ``ssn`` (error)
        - Name present as ``employeeName``, ``firstName`` or ``lastName`` (error)
        - Federal withholding present (warning)
        - Employer name and EIN present (warnings)

        Args:
            raw_fields: Extracted field bag for a single document.
            document_type: Category selecting the accepted spellings.

        Returns:
            ValidationResult with any errors or warnings.
        """
        vocabulary = get_vocabulary(document_type)
        errors = self._required_field_errors(raw_fields, vocabulary)
        warnings = self._optional_field_warnings(raw_fields, vocabulary)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
        )

    def _required_field_errors(
        self, raw_fields: RawFields, vocabulary: FieldVocabulary
    ) -> list[str]:
        errors: list[str] = []
        person = vocabulary.person_label

        if vocabulary.income_keys and not _any_present(raw_fields, vocabulary.income_keys):
            errors.append(f"{vocabulary.income_label} is required but not found")

        if vocabulary.identifier_keys and not _any_present(
            raw_fields, vocabulary.identifier_keys
        ):
            identifier = "SSN" if vocabulary.document_type == DocumentType.W2 else "TIN"
            errors.append(f"{person} {identifier} is required but not found")

        if vocabulary.name_keys and not _any_present(raw_fields, vocabulary.name_keys):
            errors.append(f"{person} name is required but not found")

        return errors

    def _optional_field_warnings(
        self, raw_fields: RawFields, vocabulary: FieldVocabulary
    ) -> list[str]:
        warnings: list[str] = []
        party = vocabulary.party_label

        if vocabulary.withholding_key and not is_present(raw_fields, vocabulary.withholding_key):
            box = "Box 2" if vocabulary.document_type == DocumentType.W2 else "Box 4"
            warnings.append(
                f"Federal tax withheld ({box}) not found - no withholdings will be applied"
            )

        if vocabulary.party_name_key and not is_present(raw_fields, vocabulary.party_name_key):
            warnings.append(f"{party} name not found - may be needed for verification")

        if vocabulary.party_identifier_key and not is_present(
            raw_fields, vocabulary.party_identifier_key
        ):
            identifier = "EIN" if vocabulary.document_type == DocumentType.W2 else "TIN"
            warnings.append(
                f"{party} {identifier} not found - may be needed for verification"
            )

        return warnings


def validate_for_mapping(
    raw_fields: RawFields,
    document_type: DocumentType | str = DocumentType.W2,
) -> ValidationResult:
    """Module-level shortcut for ``DocumentValidator().validate_for_mapping``."""
    return DocumentValidator().validate_for_mapping(raw_fields, document_type)
