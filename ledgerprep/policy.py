"""Scoring and ranking policy constants.

Completeness penalties, status thresholds, and report limits. These are
product policy values; keep them here and never inline them in the
computation functions that use them.
"""

from decimal import Decimal

from ledgerprep.models.enums import DocumentCategory, Priority

# ---------------------------------------------------------------------------
# Missing-category rules: category -> priority when no document is present.
# Order is significant: findings of equal priority keep this order.
# ---------------------------------------------------------------------------
CATEGORY_RULES: dict[DocumentCategory, Priority] = {
    DocumentCategory.BANK_STATEMENT: Priority.HIGH,
    DocumentCategory.RECEIPT: Priority.MEDIUM,
    DocumentCategory.INVOICE: Priority.MEDIUM,
    DocumentCategory.TAX_DOCUMENT: Priority.MEDIUM,
    DocumentCategory.PAYROLL: Priority.MEDIUM,
    DocumentCategory.CONTRACT: Priority.LOW,
    DocumentCategory.OTHER: Priority.LOW,
}

CATEGORY_REASONS: dict[DocumentCategory, str] = {
    DocumentCategory.BANK_STATEMENT: (
        "Bank statements are required for transaction extraction and for "
        "reconciling cash activity."
    ),
    DocumentCategory.RECEIPT: (
        "Receipts support expense deductions that may not be itemized on "
        "bank records."
    ),
    DocumentCategory.INVOICE: (
        "Vendor invoices document expenses and help verify accounts payable."
    ),
    DocumentCategory.TAX_DOCUMENT: (
        "The prior year tax return establishes opening balances and the "
        "accounting method."
    ),
    DocumentCategory.PAYROLL: (
        "Payroll records are needed to verify wage expense and withholdings."
    ),
    DocumentCategory.CONTRACT: (
        "Contracts clarify recurring obligations, leases, and revenue terms."
    ),
    DocumentCategory.OTHER: "No supplementary documents were provided.",
}

# ---------------------------------------------------------------------------
# Completeness score
# ---------------------------------------------------------------------------
MAX_SCORE = 100
PRIORITY_PENALTIES: dict[Priority, int] = {
    Priority.HIGH: 20,
    Priority.MEDIUM: 10,
    Priority.LOW: 5,
}
MONTH_GAP_WEIGHT = 30

# Overall score is reduced when AI suggestions were offered but none accepted.
UNREVIEWED_SUGGESTIONS_PENALTY = 10

# ---------------------------------------------------------------------------
# Status thresholds (inclusive lower bounds)
# ---------------------------------------------------------------------------
READY_THRESHOLD = 80
NEEDS_REVIEW_THRESHOLD = 50

# ---------------------------------------------------------------------------
# Transaction summary and recommendations
# ---------------------------------------------------------------------------
TOP_VENDOR_LIMIT = 10
LARGEST_TRANSACTION_LIMIT = 5
UNUSUALLY_LARGE_MULTIPLIER = Decimal("5")
MONTH_GAP_RECOMMENDATION_THRESHOLD = 3
UNASSIGNED_SHARE_THRESHOLD = Decimal("0.2")
INDUSTRY_RECOMMENDATION_CEILING = 6
MAX_RECOMMENDATIONS = 8

INDUSTRY_DOCUMENTS: dict[str, list[str]] = {
    "restaurant": [
        "POS system reports",
        "Food vendor invoices",
        "Liquor license and permits",
        "Health inspection records",
    ],
    "contractor": [
        "Project contracts and change orders",
        "Subcontractor 1099s",
        "Equipment purchase or lease agreements",
        "Workers comp and liability insurance",
    ],
    "professional-services": [
        "Client contracts and engagement letters",
        "Professional liability insurance",
        "Continuing education receipts",
        "Professional license documentation",
    ],
    "retail": [
        "POS system reports",
        "Inventory purchase invoices",
        "Sales tax returns",
        "Supplier agreements",
    ],
}
