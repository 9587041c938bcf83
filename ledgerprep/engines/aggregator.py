"""Report aggregator: combine coverage, transactions, and accounts into one report."""

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import Decimal

from ledgerprep.engines.summary import TransactionSummarizer
from ledgerprep.models.accounts import Account
from ledgerprep.models.coverage import CoverageReport
from ledgerprep.models.documents import Transaction
from ledgerprep.models.enums import (
    PRIORITY_ORDER,
    IssueSeverity,
    Priority,
    RecommendationCategory,
    ReportStatus,
)
from ledgerprep.models.reports import (
    AccountTypeCount,
    ChartOfAccountsSummary,
    ClientInfo,
    OnboardingReport,
    Recommendation,
    TransactionIssue,
)
from ledgerprep.policy import (
    INDUSTRY_DOCUMENTS,
    INDUSTRY_RECOMMENDATION_CEILING,
    MAX_RECOMMENDATIONS,
    MONTH_GAP_RECOMMENDATION_THRESHOLD,
    NEEDS_REVIEW_THRESHOLD,
    READY_THRESHOLD,
    UNASSIGNED_SHARE_THRESHOLD,
    UNREVIEWED_SUGGESTIONS_PENALTY,
)

logger = logging.getLogger(__name__)


def summarize_chart(accounts: Iterable[Account], industry: str) -> ChartOfAccountsSummary:
    """Per-type account counts, largest group first, ties by type name."""
    accounts = list(accounts)
    counts = Counter(str(a.type) for a in accounts)
    by_type = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ChartOfAccountsSummary(
        total_accounts=len(accounts),
        accounts_by_type=[AccountTypeCount(type=t, count=c) for t, c in by_type],
        industry=industry,
        custom_accounts=sum(1 for a in accounts if a.is_custom),
    )


def adjust_score(score: int, custom_account_count: int, suggestion_count: int) -> int:
    """Deduct the unreviewed-suggestion penalty when no suggestion was accepted."""
    if custom_account_count == 0 and suggestion_count > 0:
        return max(0, score - UNREVIEWED_SUGGESTIONS_PENALTY)
    return score


def determine_status(score: int, has_high_priority_findings: bool) -> ReportStatus:
    if score >= READY_THRESHOLD and not has_high_priority_findings:
        return ReportStatus.READY
    if score >= NEEDS_REVIEW_THRESHOLD:
        return ReportStatus.NEEDS_REVIEW
    return ReportStatus.INCOMPLETE


def build_recommendations(
    coverage: CoverageReport,
    transactions: list[Transaction],
    accounts: list[Account],
    issues: list[TransactionIssue],
    industry: str,
) -> list[Recommendation]:
    """Ranked, capped list of actions for the bookkeeper."""
    recs: list[Recommendation] = []

    for finding in coverage.documents_missing:
        if finding.priority != Priority.HIGH:
            continue
        recs.append(Recommendation(
            priority=Priority.HIGH,
            category=RecommendationCategory.DOCUMENTS,
            title=f"Obtain {finding.label}",
            description=finding.reason,
            action_item=f"Request {finding.label.lower()} from the client",
        ))

    gaps = coverage.date_range_coverage.gaps
    if len(gaps) > MONTH_GAP_RECOMMENDATION_THRESHOLD:
        recs.append(Recommendation(
            priority=Priority.HIGH,
            category=RecommendationCategory.DOCUMENTS,
            title="Fill Date Range Gaps",
            description=f"Missing transaction data for {len(gaps)} months.",
            action_item=f"Request statements for: {', '.join(gaps[:3])}",
        ))

    for issue in issues:
        if issue.severity != IssueSeverity.WARNING:
            continue
        recs.append(Recommendation(
            priority=Priority.MEDIUM,
            category=RecommendationCategory.TRANSACTIONS,
            title=issue.issue,
            description=f"{issue.count} transactions need attention.",
            action_item="Review and correct in the transaction review page",
        ))

    if coverage.total_documents > 0 and not transactions:
        recs.append(Recommendation(
            priority=Priority.HIGH,
            category=RecommendationCategory.TRANSACTIONS,
            title="Extract Transactions",
            description="Documents have been uploaded but no transactions have been extracted.",
            action_item="Run transaction extraction on bank statements",
        ))

    if transactions:
        unassigned = sum(1 for t in transactions if not t.account_number)
        if Decimal(unassigned) > Decimal(len(transactions)) * UNASSIGNED_SHARE_THRESHOLD:
            recs.append(Recommendation(
                priority=Priority.MEDIUM,
                category=RecommendationCategory.ACCOUNTS,
                title="Review Account Mappings",
                description=f"{unassigned} transactions have no account assigned.",
                action_item="Assign accounts to unmapped transactions",
            ))

    if not accounts:
        recs.append(Recommendation(
            priority=Priority.HIGH,
            category=RecommendationCategory.ACCOUNTS,
            title="Generate Chart of Accounts",
            description="No chart of accounts has been set up for this project.",
            action_item="Generate a chart of accounts from the industry template",
        ))

    industry_docs = INDUSTRY_DOCUMENTS.get(industry)
    if industry_docs and len(recs) < INDUSTRY_RECOMMENDATION_CEILING:
        recs.append(Recommendation(
            priority=Priority.LOW,
            category=RecommendationCategory.GENERAL,
            title=f"{industry.replace('-', ' ').title()} Industry Documents",
            description="Consider requesting industry-specific documents.",
            action_item=", ".join(industry_docs),
        ))

    recs.sort(key=lambda r: PRIORITY_ORDER[r.priority])
    return recs[:MAX_RECOMMENDATIONS]


class ReportAggregator:
    """Assembles the onboarding report from the engine outputs."""

    def __init__(self, summarizer: TransactionSummarizer | None = None):
        self.summarizer = summarizer or TransactionSummarizer()

    def aggregate(
        self,
        client_info: ClientInfo,
        coverage_report: CoverageReport,
        transactions: Iterable[Transaction],
        accounts: Iterable[Account],
        suggestion_count: int = 0,
    ) -> OnboardingReport:
        transactions = list(transactions)
        accounts = list(accounts)

        chart = summarize_chart(accounts, client_info.industry)
        issues = self.summarizer.identify_issues(transactions)

        score = adjust_score(
            coverage_report.completeness_score, chart.custom_accounts, suggestion_count
        )
        status = determine_status(score, coverage_report.has_high_priority_findings)

        if client_info.report_generated_at is None:
            client_info = client_info.model_copy(
                update={"report_generated_at": datetime.now(timezone.utc)}
            )

        logger.info(
            "Aggregated report for %s: score %d, status %s",
            client_info.business_name, score, status.value,
        )
        return OnboardingReport(
            client_info=client_info,
            document_coverage=coverage_report,
            transaction_summary=self.summarizer.summarize(transactions),
            monthly_breakdown=self.summarizer.monthly_breakdown(transactions),
            transaction_issues=issues,
            chart_of_accounts=chart,
            recommendations=build_recommendations(
                coverage_report, transactions, accounts, issues, client_info.industry
            ),
            overall_completeness_score=score,
            status=status,
        )
