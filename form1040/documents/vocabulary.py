"""Per-category field vocabularies for extracted documents.

Field names in a raw extraction bag depend on the document category: a W-2
speaks of ``employeeName`` and ``wages`` while a 1099-INT speaks of
``recipientName`` and ``interestIncome``. A ``FieldVocabulary`` records,
for one category, which raw keys the mapper, mapping summary and validator
recognize, and how the hosted extraction service's field names translate into
those raw keys.

Example:
    >>> from form1040.documents.vocabulary import get_vocabulary
    >>> from form1040.documents.models import DocumentType
    >>> vocab = get_vocabulary(DocumentType.W2)
    >>> vocab.name_key
    'employeeName'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from form1040.documents.models import DocumentType, RawFields
from form1040.mapping.parsing import parse_amount
from form1040.mapping.record import FormLine


@dataclass(frozen=True)
class ChecklistItem:
    """One audit row of the mapping summary checklist.

    Attributes:
        key: Raw field name looked up in the extraction bag.
        source_label: Label of the box on the source document.
        target_label: 1040 line label, ``Header`` or ``Informational``.
        description: Text shown next to the mapping.
        kind: How the target value is derived: ``text``, ``ssn`` or ``amount``.
    """

    key: str
    source_label: str
    target_label: str
    description: str
    kind: str = "amount"


@dataclass(frozen=True)
class FieldVocabulary:
    """Raw field names recognized for one document category.

    Attributes:
        document_type: Category this vocabulary describes.
        label: Short display name used in messages (``W2``, ``1099-INT``).
        name_key: Key holding the taxpayer's full name.
        identifier_key: Key holding the taxpayer's SSN/TIN.
        address_key: Key holding the taxpayer's one-line address.
        income_lines: Income key -> 1040 line it accumulates into.
        withholding_key: Key holding federal income tax withheld.
        withholding_line: 1040 line the withholding accumulates into.
        income_keys: Accepted spellings of the required income amount.
        income_label: Description of the required income amount.
        identifier_keys: Accepted spellings of the identifier.
        name_keys: Accepted spellings of the name.
        party_name_key: Key holding the employer/payer name.
        party_identifier_key: Key holding the employer/payer EIN/TIN.
        party_label: ``Employer`` or ``Payer``.
        person_label: ``Employee`` or ``Recipient``.
        checklist: Ordered mapping summary checklist.
        service_fields: Hosted extraction field name -> raw key.
        text_keys: Raw keys kept as text rather than parsed as amounts.
        model_id: Hosted prebuilt model used to extract this category.
    """

    document_type: DocumentType
    label: str
    name_key: str | None = None
    identifier_key: str | None = None
    address_key: str | None = None
    income_lines: Mapping[str, FormLine] = field(default_factory=dict)
    withholding_key: str | None = None
    withholding_line: FormLine | None = None
    income_keys: tuple[str, ...] = ()
    income_label: str = ""
    identifier_keys: tuple[str, ...] = ()
    name_keys: tuple[str, ...] = ()
    party_name_key: str | None = None
    party_identifier_key: str | None = None
    party_label: str = "Payer"
    person_label: str = "Recipient"
    checklist: tuple[ChecklistItem, ...] = ()
    service_fields: Mapping[str, str] = field(default_factory=dict)
    text_keys: frozenset[str] = frozenset()
    model_id: str = "prebuilt-document"

    @property
    def monetary_lines(self) -> dict[str, FormLine]:
        """Every amount key that accumulates into a line, withholding included."""
        lines = dict(self.income_lines)
        if self.withholding_key and self.withholding_line:
            lines[self.withholding_key] = self.withholding_line
        return lines


_PAYER_SERVICE_FIELDS = {
    "Payer.Name": "payerName",
    "Payer.TIN": "payerTIN",
    "Payer.Address": "payerAddress",
    "Recipient.Name": "recipientName",
    "Recipient.TIN": "recipientTIN",
    "Recipient.Address": "recipientAddress",
    "FederalIncomeTaxWithheld": "federalTaxWithheld",
}

_PAYER_TEXT_KEYS = frozenset(
    {
        "payerName",
        "payerTIN",
        "payerAddress",
        "recipientName",
        "recipientTIN",
        "recipientAddress",
    }
)

_RECIPIENT_CHECKLIST = (
    ChecklistItem(
        key="recipientName",
        source_label="Recipient Name",
        target_label="Header",
        description="Taxpayer name from {form}",
        kind="text",
    ),
    ChecklistItem(
        key="recipientTIN",
        source_label="Recipient TIN",
        target_label="Header",
        description="Taxpayer SSN from {form}",
        kind="ssn",
    ),
)

_FEDERAL_WITHHOLDING_1099 = ChecklistItem(
    key="federalTaxWithheld",
    source_label="Box 4 - Federal Tax Withheld",
    target_label=FormLine.FORM_1099_WITHHOLDING.label,
    description="Federal income tax withheld",
)


def _information_return(
    document_type: DocumentType,
    label: str,
    model_id: str,
    income_lines: dict[str, FormLine],
    income_label: str,
    checklist: tuple[ChecklistItem, ...],
    service_fields: dict[str, str],
) -> FieldVocabulary:
    """Build a 1099-family vocabulary sharing the payer/recipient layout."""
    return FieldVocabulary(
        document_type=document_type,
        label=label,
        name_key="recipientName",
        identifier_key="recipientTIN",
        address_key="recipientAddress",
        income_lines=income_lines,
        withholding_key="federalTaxWithheld",
        withholding_line=FormLine.FORM_1099_WITHHOLDING,
        income_keys=tuple(income_lines),
        income_label=income_label,
        identifier_keys=("recipientTIN", "ssn"),
        name_keys=("recipientName", "firstName", "lastName"),
        party_name_key="payerName",
        party_identifier_key="payerTIN",
        party_label="Payer",
        person_label="Recipient",
        checklist=_RECIPIENT_CHECKLIST + checklist + (_FEDERAL_WITHHOLDING_1099,),
        service_fields={**_PAYER_SERVICE_FIELDS, **service_fields},
        text_keys=_PAYER_TEXT_KEYS,
        model_id=model_id,
    )


W2_VOCABULARY = FieldVocabulary(
    document_type=DocumentType.W2,
    label="W2",
    name_key="employeeName",
    identifier_key="employeeSSN",
    address_key="employeeAddress",
    income_lines={"wages": FormLine.WAGES},
    withholding_key="federalTaxWithheld",
    withholding_line=FormLine.W2_WITHHOLDING,
    income_keys=("wages", "line1"),
    income_label="W2 wages (Box 1)",
    identifier_keys=("employeeSSN", "ssn"),
    name_keys=("employeeName", "firstName", "lastName"),
    party_name_key="employerName",
    party_identifier_key="employerEIN",
    party_label="Employer",
    person_label="Employee",
    checklist=(
        ChecklistItem(
            key="employeeName",
            source_label="Employee Name",
            target_label="Header",
            description="Taxpayer name from W2",
            kind="text",
        ),
        ChecklistItem(
            key="employeeSSN",
            source_label="Employee SSN",
            target_label="Header",
            description="Taxpayer SSN from W2",
            kind="ssn",
        ),
        ChecklistItem(
            key="wages",
            source_label="Box 1 - Wages",
            target_label=FormLine.WAGES.label,
            description="Wages, tips, other compensation",
        ),
        ChecklistItem(
            key="federalTaxWithheld",
            source_label="Box 2 - Federal Tax Withheld",
            target_label=FormLine.W2_WITHHOLDING.label,
            description="Federal income tax withheld",
        ),
        ChecklistItem(
            key="socialSecurityWages",
            source_label="Box 3 - Social Security Wages",
            target_label="Informational",
            description="Social security wages (informational)",
        ),
        ChecklistItem(
            key="medicareWages",
            source_label="Box 5 - Medicare Wages",
            target_label="Informational",
            description="Medicare wages and tips (informational)",
        ),
    ),
    service_fields={
        "Employee.Name": "employeeName",
        "Employee.SSN": "employeeSSN",
        "Employee.Address": "employeeAddress",
        "Employer.Name": "employerName",
        "Employer.EIN": "employerEIN",
        "Employer.Address": "employerAddress",
        "WagesAndTips": "wages",
        "FederalIncomeTaxWithheld": "federalTaxWithheld",
        "SocialSecurityWages": "socialSecurityWages",
        "SocialSecurityTaxWithheld": "socialSecurityTaxWithheld",
        "MedicareWagesAndTips": "medicareWages",
        "MedicareTaxWithheld": "medicareTaxWithheld",
        "SocialSecurityTips": "socialSecurityTips",
        "AllocatedTips": "allocatedTips",
        "StateWagesTipsEtc": "stateWages",
        "StateIncomeTax": "stateTaxWithheld",
        "LocalWagesTipsEtc": "localWages",
        "LocalIncomeTax": "localTaxWithheld",
    },
    text_keys=frozenset(
        {
            "employeeName",
            "employeeSSN",
            "employeeAddress",
            "employerName",
            "employerEIN",
            "employerAddress",
        }
    ),
    model_id="prebuilt-tax.us.w2",
)

FORM_1099_INT_VOCABULARY = _information_return(
    DocumentType.FORM_1099_INT,
    label="1099-INT",
    model_id="prebuilt-tax.us.1099int",
    income_lines={
        "interestIncome": FormLine.TAXABLE_INTEREST,
        "taxExemptInterest": FormLine.TAX_EXEMPT_INTEREST,
    },
    income_label="1099-INT interest income (Box 1)",
    checklist=(
        ChecklistItem(
            key="interestIncome",
            source_label="Box 1 - Interest Income",
            target_label=FormLine.TAXABLE_INTEREST.label,
            description="Taxable interest",
        ),
        ChecklistItem(
            key="taxExemptInterest",
            source_label="Box 8 - Tax-Exempt Interest",
            target_label=FormLine.TAX_EXEMPT_INTEREST.label,
            description="Tax-exempt interest",
        ),
        ChecklistItem(
            key="interestOnUSavingsBonds",
            source_label="Box 3 - Interest on U.S. Savings Bonds and Treasury Obligations",
            target_label="Informational",
            description="Included in Box 1 interest (informational)",
        ),
    ),
    service_fields={
        "InterestIncome": "interestIncome",
        "EarlyWithdrawalPenalty": "earlyWithdrawalPenalty",
        "InterestOnUSTreasuryObligations": "interestOnUSavingsBonds",
        "InvestmentExpenses": "investmentExpenses",
        "ForeignTaxPaid": "foreignTaxPaid",
        "TaxExemptInterest": "taxExemptInterest",
    },
)

FORM_1099_DIV_VOCABULARY = _information_return(
    DocumentType.FORM_1099_DIV,
    label="1099-DIV",
    model_id="prebuilt-tax.us.1099div",
    income_lines={
        "ordinaryDividends": FormLine.ORDINARY_DIVIDENDS,
        "qualifiedDividends": FormLine.QUALIFIED_DIVIDENDS,
        "totalCapitalGain": FormLine.CAPITAL_GAIN,
    },
    income_label="1099-DIV ordinary dividends (Box 1a)",
    checklist=(
        ChecklistItem(
            key="ordinaryDividends",
            source_label="Box 1a - Ordinary Dividends",
            target_label=FormLine.ORDINARY_DIVIDENDS.label,
            description="Ordinary dividends",
        ),
        ChecklistItem(
            key="qualifiedDividends",
            source_label="Box 1b - Qualified Dividends",
            target_label=FormLine.QUALIFIED_DIVIDENDS.label,
            description="Qualified dividends",
        ),
        ChecklistItem(
            key="totalCapitalGain",
            source_label="Box 2a - Total Capital Gain Distributions",
            target_label=FormLine.CAPITAL_GAIN.label,
            description="Capital gain distributions",
        ),
        ChecklistItem(
            key="section199ADividends",
            source_label="Box 5 - Section 199A Dividends",
            target_label="Informational",
            description="Section 199A dividends (informational)",
        ),
    ),
    service_fields={
        "OrdinaryDividends": "ordinaryDividends",
        "QualifiedDividends": "qualifiedDividends",
        "TotalCapitalGainDistributions": "totalCapitalGain",
        "NondividendDistributions": "nondividendDistributions",
        "Section199ADividends": "section199ADividends",
    },
)

FORM_1099_MISC_VOCABULARY = _information_return(
    DocumentType.FORM_1099_MISC,
    label="1099-MISC",
    model_id="prebuilt-tax.us.1099misc",
    income_lines={
        "rents": FormLine.ADDITIONAL_INCOME,
        "royalties": FormLine.ADDITIONAL_INCOME,
        "otherIncome": FormLine.ADDITIONAL_INCOME,
    },
    income_label="1099-MISC income (Boxes 1-3)",
    checklist=(
        ChecklistItem(
            key="rents",
            source_label="Box 1 - Rents",
            target_label=FormLine.ADDITIONAL_INCOME.label,
            description="Rents (Schedule 1 additional income)",
        ),
        ChecklistItem(
            key="royalties",
            source_label="Box 2 - Royalties",
            target_label=FormLine.ADDITIONAL_INCOME.label,
            description="Royalties (Schedule 1 additional income)",
        ),
        ChecklistItem(
            key="otherIncome",
            source_label="Box 3 - Other Income",
            target_label=FormLine.ADDITIONAL_INCOME.label,
            description="Other income (Schedule 1 additional income)",
        ),
    ),
    service_fields={
        "Rents": "rents",
        "Royalties": "royalties",
        "OtherIncome": "otherIncome",
        "FishingBoatProceeds": "fishingBoatProceeds",
        "MedicalAndHealthCarePayments": "medicalHealthPayments",
        "NonemployeeCompensation": "nonemployeeCompensation",
    },
)

FORM_1099_NEC_VOCABULARY = _information_return(
    DocumentType.FORM_1099_NEC,
    label="1099-NEC",
    model_id="prebuilt-tax.us.1099nec",
    income_lines={"nonemployeeCompensation": FormLine.ADDITIONAL_INCOME},
    income_label="1099-NEC nonemployee compensation (Box 1)",
    checklist=(
        ChecklistItem(
            key="nonemployeeCompensation",
            source_label="Box 1 - Nonemployee Compensation",
            target_label=FormLine.ADDITIONAL_INCOME.label,
            description="Nonemployee compensation (Schedule 1 additional income)",
        ),
    ),
    service_fields={"NonemployeeCompensation": "nonemployeeCompensation"},
)

# Unknown categories: nothing maps, every extracted field is kept verbatim.
GENERIC_VOCABULARY = FieldVocabulary(document_type=DocumentType.OTHER, label="document")

VOCABULARIES: dict[DocumentType, FieldVocabulary] = {
    DocumentType.W2: W2_VOCABULARY,
    DocumentType.FORM_1099_INT: FORM_1099_INT_VOCABULARY,
    DocumentType.FORM_1099_DIV: FORM_1099_DIV_VOCABULARY,
    DocumentType.FORM_1099_MISC: FORM_1099_MISC_VOCABULARY,
    DocumentType.FORM_1099_NEC: FORM_1099_NEC_VOCABULARY,
    DocumentType.OTHER: GENERIC_VOCABULARY,
}


def get_vocabulary(document_type: DocumentType | str) -> FieldVocabulary:
    """Vocabulary for a document category; unknown categories get the generic one."""
    try:
        return VOCABULARIES[DocumentType(document_type)]
    except ValueError:
        return GENERIC_VOCABULARY


def model_id_for(document_type: DocumentType | str) -> str:
    """Hosted prebuilt model id used to extract a document category."""
    return get_vocabulary(document_type).model_id


# Key under which the extraction service returns OCR text.
FULL_TEXT_KEY = "fullText"


def _field_value(service_field: Any) -> Any:
    """Unwrap ``{"value": ...}`` field objects; bare values pass through."""
    if isinstance(service_field, Mapping):
        return service_field.get("value")
    return service_field


def normalize_service_fields(
    service_fields: Mapping[str, Any],
    document_type: DocumentType | str,
) -> dict[str, Any]:
    """Translate hosted extraction output into the raw field bag.

    Recognized service fields are renamed to the category's raw keys. Amount
    fields are parsed (numbers pass through), identity text is kept as text.
    Categories without a vocabulary keep every field that carries a value.
    The OCR text under ``fullText`` is not a field and is left out.

    Args:
        service_fields: Field name -> value or ``{"value": ...}`` object.
        document_type: Category of the source document.

    Returns:
        Raw fields ready for the mapper, summary and validator.
    """
    vocabulary = get_vocabulary(document_type)
    raw: dict[str, Any] = {}

    if not vocabulary.service_fields:
        for name, service_field in service_fields.items():
            value = _field_value(service_field)
            if name != FULL_TEXT_KEY and value is not None:
                raw[name] = value
        return raw

    for service_name, raw_key in vocabulary.service_fields.items():
        if service_name not in service_fields:
            continue
        value = _field_value(service_fields[service_name])
        if value is None:
            continue
        if raw_key in vocabulary.text_keys:
            raw[raw_key] = value if isinstance(value, str) else str(value)
        else:
            raw[raw_key] = parse_amount(value)
    return raw


def recognized_keys(fields: RawFields, document_type: DocumentType | str) -> set[str]:
    """Raw keys in ``fields`` that the category's mapper would consume."""
    vocabulary = get_vocabulary(document_type)
    keys = {vocabulary.name_key, vocabulary.identifier_key, vocabulary.address_key}
    keys.update(vocabulary.monetary_lines)
    return {key for key in keys if key and key in fields}
