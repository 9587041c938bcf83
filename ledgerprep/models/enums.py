"""Enumerations for LedgerPrep."""

from enum import StrEnum


class AccountType(StrEnum):
    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    INCOME = "Income"
    EXPENSE = "Expense"


class DocumentCategory(StrEnum):
    BANK_STATEMENT = "bank_statement"
    RECEIPT = "receipt"
    INVOICE = "invoice"
    TAX_DOCUMENT = "tax_document"
    PAYROLL = "payroll"
    CONTRACT = "contract"
    OTHER = "other"


class TransactionType(StrEnum):
    DEBIT = "debit"
    CREDIT = "credit"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ReportStatus(StrEnum):
    INCOMPLETE = "incomplete"
    NEEDS_REVIEW = "needs-review"
    READY = "ready"


class RecommendationCategory(StrEnum):
    DOCUMENTS = "documents"
    TRANSACTIONS = "transactions"
    ACCOUNTS = "accounts"
    GENERAL = "general"


class IssueSeverity(StrEnum):
    WARNING = "warning"
    INFO = "info"


class Industry(StrEnum):
    GENERAL = "general"
    RESTAURANT = "restaurant"
    CONTRACTOR = "contractor"
    PROFESSIONAL_SERVICES = "professional-services"
    RETAIL = "retail"


CATEGORY_LABELS: dict[DocumentCategory, str] = {
    DocumentCategory.BANK_STATEMENT: "Bank Statements",
    DocumentCategory.RECEIPT: "Receipts",
    DocumentCategory.INVOICE: "Vendor Invoices",
    DocumentCategory.TAX_DOCUMENT: "Prior Year Tax Return",
    DocumentCategory.PAYROLL: "Payroll Records / Pay Stubs",
    DocumentCategory.CONTRACT: "Contracts",
    DocumentCategory.OTHER: "Other Documents",
}

PRIORITY_ORDER: dict[Priority, int] = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}
