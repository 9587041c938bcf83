"""Shared test fixtures for LedgerPrep."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerprep.models.accounts import Account, AccountSuggestion
from ledgerprep.models.documents import ClassifiedDocument, Transaction
from ledgerprep.models.enums import AccountType, DocumentCategory, TransactionType
from ledgerprep.templates import TemplateStore


@pytest.fixture
def store() -> TemplateStore:
    return TemplateStore()


@pytest.fixture
def sample_accounts() -> list[Account]:
    return [
        Account(
            number="1000",
            name="Checking Account",
            type=AccountType.ASSET,
            detail_type="Bank",
            description="Primary business checking",
        ),
        Account(
            number="2000",
            name="Accounts Payable",
            type=AccountType.LIABILITY,
            detail_type="Accounts Payable",
            description="Amounts owed to vendors",
        ),
        Account(
            number="4000",
            name="Sales Revenue",
            type=AccountType.INCOME,
            detail_type="Sales",
            description="Revenue from sales, net of returns",
        ),
        Account(
            number="6050",
            name="Office Supplies",
            type=AccountType.EXPENSE,
            detail_type="Supplies",
            description='Paper, toner and "misc" items',
        ),
    ]


@pytest.fixture
def sample_suggestion() -> AccountSuggestion:
    return AccountSuggestion(
        account=Account(
            number="6500",
            name="Software Subscriptions",
            type=AccountType.EXPENSE,
            detail_type="Dues & Subscriptions",
            description="SaaS tools",
        ),
        reason="Recurring software charges on bank statements",
        confidence=0.9,
    )


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    return [
        Transaction(
            id="txn-00000001",
            date=date(2024, 1, 5),
            description="Client payment",
            amount=Decimal("1500.00"),
            type=TransactionType.CREDIT,
            vendor="Acme Corp",
            suggested_account_number="4000",
            suggested_account_name="Sales Revenue",
            document_name="jan.pdf",
            category="Sales",
        ),
        Transaction(
            id="txn-00000002",
            date=date(2024, 1, 12),
            description="Staples, printer paper",
            amount=Decimal("45.50"),
            type=TransactionType.DEBIT,
            vendor="Staples",
            suggested_account_number="6000",
            suggested_account_name="Advertising and Marketing",
            reviewed_account_number="6050",
            reviewed_account_name="Office Supplies",
            document_name="jan.pdf",
        ),
        Transaction(
            id="txn-00000003",
            date=date(2024, 3, 2),
            description="Monthly rent",
            amount=Decimal("1200"),
            type=TransactionType.DEBIT,
            vendor="Landlord LLC",
            suggested_account_number="6060",
            suggested_account_name="Rent",
            document_name="mar.pdf",
        ),
        Transaction(
            id="txn-00000004",
            date=date(2024, 3, 20),
            description="ATM withdrawal",
            amount=Decimal("100"),
            type=TransactionType.DEBIT,
        ),
    ]


@pytest.fixture
def sample_documents() -> list[ClassifiedDocument]:
    return [
        ClassifiedDocument(
            id="doc-1",
            category=DocumentCategory.BANK_STATEMENT,
            year=2024,
            metadata={"statement_date": "2024-01-31"},
            file_name="jan.pdf",
        ),
        ClassifiedDocument(
            id="doc-2",
            category=DocumentCategory.BANK_STATEMENT,
            year=2024,
            metadata={"statement_date": "2024-03-31"},
            file_name="mar.pdf",
        ),
        ClassifiedDocument(
            id="doc-3",
            category=DocumentCategory.RECEIPT,
            year=2024,
            file_name="staples.jpg",
        ),
    ]
