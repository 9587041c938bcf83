"""Tests for transaction summary statistics."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerprep.engines.summary import TransactionSummarizer
from ledgerprep.models.documents import Transaction
from ledgerprep.models.enums import IssueSeverity, TransactionType


@pytest.fixture
def summarizer():
    return TransactionSummarizer()


def _txn(amount, type_=TransactionType.DEBIT, vendor=None, day=date(2024, 5, 1), account=None):
    return Transaction(
        date=day,
        description="txn",
        amount=Decimal(amount),
        type=type_,
        vendor=vendor,
        suggested_account_number=account,
    )


class TestSummarize:
    def test_totals_follow_transaction_type(self, summarizer, sample_transactions):
        summary = summarizer.summarize(sample_transactions)
        assert summary.total_transactions == 4
        assert summary.total_income == Decimal("1500.00")
        assert summary.total_expenses == Decimal("1345.50")
        assert summary.net_amount == Decimal("154.50")
        assert summary.income_transaction_count == 1
        assert summary.expense_transaction_count == 3

    def test_average_is_rounded_to_cents(self, summarizer, sample_transactions):
        # 2845.50 / 4 = 711.375
        summary = summarizer.summarize(sample_transactions)
        assert summary.average_transaction_size == Decimal("711.38")

    def test_date_range(self, summarizer, sample_transactions):
        summary = summarizer.summarize(sample_transactions)
        assert summary.date_range.start == date(2024, 1, 5)
        assert summary.date_range.end == date(2024, 3, 20)

    def test_empty(self, summarizer):
        summary = summarizer.summarize([])
        assert summary.total_transactions == 0
        assert summary.average_transaction_size == Decimal("0")
        assert summary.date_range is None
        assert summary.top_vendors == []


class TestRankings:
    def test_top_vendors_unknown_bucket(self, summarizer, sample_transactions):
        vendors = summarizer.summarize(sample_transactions).top_vendors
        assert [v.vendor for v in vendors] == ["Acme Corp", "Landlord LLC", "Unknown", "Staples"]

    def test_missing_vendor_not_merged_with_named_unknown(self, summarizer):
        txns = [_txn("40", vendor="Unknown"), _txn("25"), _txn("10", vendor="")]
        vendors = summarizer.summarize(txns).top_vendors
        assert [(v.vendor, v.transaction_count, v.total_amount) for v in vendors] == [
            ("Unknown", 1, Decimal("40")),
            ("Unknown", 2, Decimal("35")),
        ]

    def test_vendor_ties_break_on_count_then_name(self, summarizer):
        txns = [
            _txn("100", vendor="Charlie"),
            _txn("100", vendor="Alpha"),
            _txn("50", vendor="Bravo"),
            _txn("50", vendor="Bravo"),
        ]
        vendors = summarizer.summarize(txns).top_vendors
        assert [v.vendor for v in vendors] == ["Bravo", "Alpha", "Charlie"]
        assert vendors[0].transaction_count == 2

    def test_top_vendors_limited_to_ten(self, summarizer):
        txns = [_txn(str(i + 1), vendor=f"Vendor {i:02d}") for i in range(15)]
        vendors = summarizer.summarize(txns).top_vendors
        assert len(vendors) == 10
        assert vendors[0].vendor == "Vendor 14"

    def test_largest_transactions(self, summarizer):
        txns = [_txn(str(amount)) for amount in (5, 80, 20, 80, 1, 60, 3)]
        largest = summarizer.summarize(txns).largest_transactions
        assert [t.amount for t in largest] == [Decimal(a) for a in (80, 80, 60, 20, 5)]

    def test_account_activity(self, summarizer, sample_transactions):
        activity = summarizer.summarize(sample_transactions).transactions_by_account
        assert [a.account_number for a in activity] == ["4000", "6060", "unassigned", "6050"]
        assert activity[0].account_type == "Income"
        assert activity[0].total_amount == Decimal("1500.00")
        assert activity[1].total_amount == Decimal("-1200")
        assert activity[2].account_name == "Unassigned"
        assert activity[2].account_type == "Expense"
        # Reviewed mapping wins over the suggestion
        assert activity[3].account_name == "Office Supplies"


class TestMonthlyBreakdown:
    def test_months_in_calendar_order(self, summarizer, sample_transactions):
        months = summarizer.monthly_breakdown(reversed(sample_transactions))
        assert [m.month for m in months] == ["2024-01", "2024-03"]
        assert months[0].income == Decimal("1500.00")
        assert months[0].expenses == Decimal("45.50")
        assert months[0].transaction_count == 2
        assert months[1].income == Decimal("0")
        assert months[1].expenses == Decimal("1300")


class TestIssues:
    def test_sample_issues(self, summarizer, sample_transactions):
        issues = summarizer.identify_issues(sample_transactions)
        assert [(i.issue, i.severity, i.count) for i in issues] == [
            ("Transactions without account mapping", IssueSeverity.WARNING, 1),
            ("Transactions without vendor information", IssueSeverity.INFO, 1),
        ]

    def test_large_and_duplicate_transactions(self, summarizer):
        txns = [_txn("10", vendor="V", account="6000") for _ in range(10)]
        txns.append(_txn("1000", vendor="V", account="6000", day=date(2024, 6, 1)))
        issues = {i.issue: i for i in summarizer.identify_issues(txns)}
        large = issues["Unusually large transactions (5x average)"]
        assert large.count == 1
        assert large.severity == IssueSeverity.INFO
        duplicates = issues["Potential duplicate transactions (same date/amount)"]
        assert duplicates.count == 9
        assert duplicates.severity == IssueSeverity.WARNING

    def test_no_issues_for_empty(self, summarizer):
        assert summarizer.identify_issues([]) == []
