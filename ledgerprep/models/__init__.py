"""Data models for LedgerPrep."""

from ledgerprep.models.accounts import (
    Account,
    AccountSuggestion,
    ChartOfAccountsTemplate,
    ReconciliationResult,
)
from ledgerprep.models.coverage import (
    CategoryInfo,
    CoverageReport,
    DateRange,
    DateRangeCoverage,
    MissingFinding,
)
from ledgerprep.models.documents import ClassifiedDocument, Transaction
from ledgerprep.models.enums import (
    AccountType,
    DocumentCategory,
    Industry,
    IssueSeverity,
    Priority,
    RecommendationCategory,
    ReportStatus,
    TransactionType,
)
from ledgerprep.models.reports import (
    AccountActivity,
    AccountTypeCount,
    ChartOfAccountsSummary,
    ClientInfo,
    LargeTransaction,
    MonthlyActivity,
    OnboardingReport,
    Recommendation,
    TransactionIssue,
    TransactionSummary,
    VendorSummary,
)

__all__ = [
    "Account",
    "AccountActivity",
    "AccountSuggestion",
    "AccountType",
    "AccountTypeCount",
    "CategoryInfo",
    "ChartOfAccountsSummary",
    "ChartOfAccountsTemplate",
    "ClassifiedDocument",
    "ClientInfo",
    "CoverageReport",
    "DateRange",
    "DateRangeCoverage",
    "DocumentCategory",
    "Industry",
    "IssueSeverity",
    "LargeTransaction",
    "MissingFinding",
    "MonthlyActivity",
    "OnboardingReport",
    "Priority",
    "Recommendation",
    "RecommendationCategory",
    "ReconciliationResult",
    "ReportStatus",
    "Transaction",
    "TransactionIssue",
    "TransactionSummary",
    "TransactionType",
    "VendorSummary",
]
