"""Pytest configuration and shared fixtures for tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest

from form1040.mapping.record import Form1040Data


@pytest.fixture
def w2_fields() -> dict[str, Any]:
    """Raw fields of a typical single-employer W-2.

    Returns:
        Extracted field bag as the extraction layer produces it.
    """
    return {
        "employeeName": "Jane Q Taxpayer",
        "employeeSSN": "123456789",
        "employeeAddress": "123 Main St, Springfield, IL 62704",
        "employerName": "Acme Corporation",
        "employerEIN": "12-3456789",
        "wages": "$50,000.00",
        "federalTaxWithheld": "5,000",
        "socialSecurityWages": "50000",
        "medicareWages": "50000",
    }


@pytest.fixture
def int_fields() -> dict[str, Any]:
    """Raw fields of a 1099-INT.

    Returns:
        Extracted field bag for a bank interest statement.
    """
    return {
        "payerName": "First National Bank",
        "payerTIN": "98-7654321",
        "recipientName": "Jane Q Taxpayer",
        "recipientTIN": "123-45-6789",
        "interestIncome": Decimal("1250.00"),
        "taxExemptInterest": Decimal("300.00"),
        "federalTaxWithheld": Decimal("100.00"),
    }


@pytest.fixture
def single_record() -> Form1040Data:
    """Empty record for a single filer in 2023.

    Returns:
        Form1040Data with only the return-level header set.
    """
    return Form1040Data(filing_status="SINGLE", tax_year=2023)
