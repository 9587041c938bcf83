"""Onboarding report output models."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from ledgerprep.models.coverage import CoverageReport, DateRange
from ledgerprep.models.enums import (
    IssueSeverity,
    Priority,
    RecommendationCategory,
    ReportStatus,
    TransactionType,
)


class VendorSummary(BaseModel):
    vendor: str
    transaction_count: int
    total_amount: Decimal


class LargeTransaction(BaseModel):
    id: str | None = None
    date: date
    description: str
    vendor: str | None = None
    amount: Decimal
    type: TransactionType
    account_name: str | None = None


class AccountActivity(BaseModel):
    account_number: str
    account_name: str
    account_type: str
    transaction_count: int
    total_amount: Decimal


class MonthlyActivity(BaseModel):
    month: str  # YYYY-MM
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    transaction_count: int = 0


class TransactionIssue(BaseModel):
    issue: str
    severity: IssueSeverity
    count: int


class TransactionSummary(BaseModel):
    total_transactions: int = 0
    date_range: DateRange | None = None
    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    net_amount: Decimal = Decimal("0")
    average_transaction_size: Decimal = Decimal("0")
    income_transaction_count: int = 0
    expense_transaction_count: int = 0
    transactions_by_account: list[AccountActivity] = Field(default_factory=list)
    top_vendors: list[VendorSummary] = Field(default_factory=list)
    largest_transactions: list[LargeTransaction] = Field(default_factory=list)


class AccountTypeCount(BaseModel):
    type: str
    count: int


class ChartOfAccountsSummary(BaseModel):
    total_accounts: int = 0
    accounts_by_type: list[AccountTypeCount] = Field(default_factory=list)
    industry: str
    custom_accounts: int = 0


class Recommendation(BaseModel):
    priority: Priority
    category: RecommendationCategory
    title: str
    description: str
    action_item: str | None = None


class ClientInfo(BaseModel):
    business_name: str
    project_name: str
    industry: str
    project_created_at: datetime | None = None
    report_generated_at: datetime | None = None


class OnboardingReport(BaseModel):
    client_info: ClientInfo
    document_coverage: CoverageReport
    transaction_summary: TransactionSummary
    monthly_breakdown: list[MonthlyActivity] = Field(default_factory=list)
    transaction_issues: list[TransactionIssue] = Field(default_factory=list)
    chart_of_accounts: ChartOfAccountsSummary
    recommendations: list[Recommendation] = Field(default_factory=list)
    overall_completeness_score: int = Field(ge=0, le=100)
    status: ReportStatus
