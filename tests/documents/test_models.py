"""Tests for document vocabularies and presence checks."""

import pytest

from form1040.documents.models import DocumentType, FilingStatus, is_present


class TestFilingStatus:
    """Tests for FilingStatus.from_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("SINGLE", FilingStatus.SINGLE),
            ("single", FilingStatus.SINGLE),
            ("married-filing-jointly", FilingStatus.MARRIED_FILING_JOINTLY),
            ("Married Filing Separately", FilingStatus.MARRIED_FILING_SEPARATELY),
            ("mfj", FilingStatus.MARRIED_FILING_JOINTLY),
            ("MFS", FilingStatus.MARRIED_FILING_SEPARATELY),
            ("hoh", FilingStatus.HEAD_OF_HOUSEHOLD),
            ("qss", FilingStatus.QUALIFYING_SURVIVING_SPOUSE),
            ("QW", FilingStatus.QUALIFYING_SURVIVING_SPOUSE),
            (FilingStatus.HEAD_OF_HOUSEHOLD, FilingStatus.HEAD_OF_HOUSEHOLD),
        ],
    )
    def test_recognized_values(self, value: object, expected: FilingStatus) -> None:
        assert FilingStatus.from_value(value) is expected

    @pytest.mark.parametrize("value", [None, "", "   ", "WIDOWER", 3])
    def test_unrecognized_values(self, value: object) -> None:
        assert FilingStatus.from_value(value) is None


class TestDocumentType:
    def test_information_returns(self) -> None:
        assert DocumentType.FORM_1099_INT.is_information_return
        assert DocumentType.FORM_1099_NEC.is_information_return
        assert not DocumentType.W2.is_information_return
        assert not DocumentType.OTHER.is_information_return


class TestIsPresent:
    """Presence is about absence only; values are never parsed."""

    def test_missing_key(self) -> None:
        assert not is_present({}, "wages")

    @pytest.mark.parametrize("value", [None, "", "  \t"])
    def test_blank_values_are_absent(self, value: object) -> None:
        assert not is_present({"wages": value}, "wages")

    @pytest.mark.parametrize("value", [0, "0", "n/a", 0.0])
    def test_zero_and_unparsable_text_are_present(self, value: object) -> None:
        assert is_present({"wages": value}, "wages")
