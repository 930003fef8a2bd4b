"""Tests for per-category field vocabularies.

Tests cover:
- Vocabulary lookup and model ids
- Translation of extraction-service fields into raw keys
- Recognized key detection
"""

from decimal import Decimal

from form1040.documents.models import DocumentType
from form1040.documents.vocabulary import (
    FORM_1099_DIV_VOCABULARY,
    GENERIC_VOCABULARY,
    W2_VOCABULARY,
    get_vocabulary,
    model_id_for,
    normalize_service_fields,
    recognized_keys,
)
from form1040.mapping.record import FormLine


class TestVocabularyLookup:
    """Tests for get_vocabulary and model_id_for."""

    def test_w2_lookup_by_enum_and_string(self) -> None:
        assert get_vocabulary(DocumentType.W2) is W2_VOCABULARY
        assert get_vocabulary("W2") is W2_VOCABULARY

    def test_unknown_category_gets_generic(self) -> None:
        assert get_vocabulary("PAYSTUB") is GENERIC_VOCABULARY

    def test_model_ids(self) -> None:
        assert model_id_for(DocumentType.W2) == "prebuilt-tax.us.w2"
        assert model_id_for(DocumentType.FORM_1099_INT) == "prebuilt-tax.us.1099int"
        assert model_id_for(DocumentType.OTHER) == "prebuilt-document"

    def test_w2_withholding_goes_to_line_25a(self) -> None:
        assert W2_VOCABULARY.monetary_lines == {
            "wages": FormLine.WAGES,
            "federalTaxWithheld": FormLine.W2_WITHHOLDING,
        }

    def test_1099_withholding_goes_to_line_25b(self) -> None:
        lines = FORM_1099_DIV_VOCABULARY.monetary_lines
        assert lines["federalTaxWithheld"] is FormLine.FORM_1099_WITHHOLDING
        assert lines["ordinaryDividends"] is FormLine.ORDINARY_DIVIDENDS
        assert lines["qualifiedDividends"] is FormLine.QUALIFIED_DIVIDENDS
        assert lines["totalCapitalGain"] is FormLine.CAPITAL_GAIN


class TestNormalizeServiceFields:
    """Tests for normalize_service_fields."""

    def test_w2_fields_renamed_and_parsed(self) -> None:
        service_fields = {
            "Employee.Name": {"value": "Jane Doe"},
            "Employee.SSN": {"value": "123-45-6789"},
            "WagesAndTips": {"value": 50000},
            "FederalIncomeTaxWithheld": "5,000.50",
            "fullText": "FORM W-2 Wage and Tax Statement",
        }

        raw = normalize_service_fields(service_fields, DocumentType.W2)

        assert raw == {
            "employeeName": "Jane Doe",
            "employeeSSN": "123-45-6789",
            "wages": Decimal("50000"),
            "federalTaxWithheld": Decimal("5000.50"),
        }

    def test_missing_values_are_skipped(self) -> None:
        raw = normalize_service_fields(
            {"WagesAndTips": {"value": None}, "Employer.Name": {}}, DocumentType.W2
        )
        assert raw == {}

    def test_unknown_service_fields_are_dropped(self) -> None:
        raw = normalize_service_fields({"Box14Other": "SDI 120"}, DocumentType.W2)
        assert raw == {}

    def test_numeric_identity_kept_as_text(self) -> None:
        raw = normalize_service_fields({"Employee.SSN": 123456789}, DocumentType.W2)
        assert raw == {"employeeSSN": "123456789"}

    def test_1099_int_fields(self) -> None:
        raw = normalize_service_fields(
            {
                "Recipient.Name": "Jane Doe",
                "InterestIncome": {"value": "1,250.00"},
                "FederalIncomeTaxWithheld": 100,
            },
            DocumentType.FORM_1099_INT,
        )
        assert raw == {
            "recipientName": "Jane Doe",
            "interestIncome": Decimal("1250.00"),
            "federalTaxWithheld": Decimal("100"),
        }

    def test_generic_category_keeps_every_valued_field(self) -> None:
        raw = normalize_service_fields(
            {
                "AccountNumber": {"value": "0042"},
                "Total": 17,
                "Empty": {"value": None},
                "fullText": "statement text",
            },
            DocumentType.OTHER,
        )
        assert raw == {"AccountNumber": "0042", "Total": 17}


class TestRecognizedKeys:
    def test_only_mapped_keys_are_recognized(self, w2_fields) -> None:
        keys = recognized_keys(w2_fields, DocumentType.W2)
        assert keys == {
            "employeeName",
            "employeeSSN",
            "employeeAddress",
            "wages",
            "federalTaxWithheld",
        }

    def test_generic_recognizes_nothing(self) -> None:
        assert recognized_keys({"Total": 17}, DocumentType.OTHER) == set()
