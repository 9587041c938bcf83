"""Transaction summary statistics for the onboarding report.

Income and expense direction comes strictly from the transaction type:
credits are income, debits are expenses. Account categories are never
consulted for direction.
"""

from collections import defaultdict
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from ledgerprep.models.accounts import NUMBER_PREFIX_TYPES
from ledgerprep.models.coverage import DateRange
from ledgerprep.models.documents import Transaction
from ledgerprep.models.enums import AccountType, IssueSeverity, TransactionType
from ledgerprep.models.reports import (
    AccountActivity,
    LargeTransaction,
    MonthlyActivity,
    TransactionIssue,
    TransactionSummary,
    VendorSummary,
)
from ledgerprep.policy import (
    LARGEST_TRANSACTION_LIMIT,
    TOP_VENDOR_LIMIT,
    UNUSUALLY_LARGE_MULTIPLIER,
)

CENT = Decimal("0.01")
UNASSIGNED_NUMBER = "unassigned"
UNASSIGNED_NAME = "Unassigned"
UNKNOWN_VENDOR = "Unknown"


class TransactionSummarizer:
    """Computes totals, rankings, and data-quality issues over transactions."""

    def summarize(self, transactions: Iterable[Transaction]) -> TransactionSummary:
        transactions = list(transactions)
        if not transactions:
            return TransactionSummary()

        credits = [t for t in transactions if t.type == TransactionType.CREDIT]
        debits = [t for t in transactions if t.type == TransactionType.DEBIT]
        total_income = sum((t.amount for t in credits), Decimal("0"))
        total_expenses = sum((t.amount for t in debits), Decimal("0"))

        total_abs = sum((abs(t.amount) for t in transactions), Decimal("0"))
        average = (total_abs / len(transactions)).quantize(CENT, rounding=ROUND_HALF_UP)

        dates = [t.date for t in transactions]

        return TransactionSummary(
            total_transactions=len(transactions),
            date_range=DateRange(start=min(dates), end=max(dates)),
            total_income=total_income,
            total_expenses=total_expenses,
            net_amount=total_income - total_expenses,
            average_transaction_size=average,
            income_transaction_count=len(credits),
            expense_transaction_count=len(debits),
            transactions_by_account=self.by_account(transactions),
            top_vendors=self.top_vendors(transactions),
            largest_transactions=self.largest_transactions(transactions),
        )

    @staticmethod
    def by_account(transactions: list[Transaction]) -> list[AccountActivity]:
        """Signed totals per account, largest magnitude first."""
        totals: dict[str, Decimal] = defaultdict(Decimal)
        counts: dict[str, int] = defaultdict(int)
        names: dict[str, str] = {}

        for t in transactions:
            number = t.account_number or UNASSIGNED_NUMBER
            names.setdefault(number, t.account_name or UNASSIGNED_NAME)
            totals[number] += t.signed_amount
            counts[number] += 1

        activity = [
            AccountActivity(
                account_number=number,
                account_name=names[number],
                account_type=NUMBER_PREFIX_TYPES.get(number[:1], AccountType.EXPENSE).value,
                transaction_count=counts[number],
                total_amount=totals[number],
            )
            for number in totals
        ]
        activity.sort(key=lambda a: abs(a.total_amount), reverse=True)
        return activity

    @staticmethod
    def top_vendors(
        transactions: list[Transaction], limit: int = TOP_VENDOR_LIMIT
    ) -> list[VendorSummary]:
        """Vendors by summed amount, then transaction count, then name."""
        # Missing vendors group under None, separate from a vendor named "Unknown".
        totals: dict[str | None, Decimal] = defaultdict(Decimal)
        counts: dict[str | None, int] = defaultdict(int)
        for t in transactions:
            vendor = t.vendor or None
            totals[vendor] += t.amount
            counts[vendor] += 1

        ranked = sorted(
            totals,
            key=lambda v: (-totals[v], -counts[v], v or UNKNOWN_VENDOR, v is None),
        )
        return [
            VendorSummary(
                vendor=v or UNKNOWN_VENDOR,
                transaction_count=counts[v],
                total_amount=totals[v],
            )
            for v in ranked[:limit]
        ]

    @staticmethod
    def largest_transactions(
        transactions: list[Transaction], limit: int = LARGEST_TRANSACTION_LIMIT
    ) -> list[LargeTransaction]:
        ranked = sorted(transactions, key=lambda t: abs(t.amount), reverse=True)
        return [
            LargeTransaction(
                id=t.id,
                date=t.date,
                description=t.description,
                vendor=t.vendor,
                amount=t.amount,
                type=t.type,
                account_name=t.account_name,
            )
            for t in ranked[:limit]
        ]

    @staticmethod
    def monthly_breakdown(transactions: Iterable[Transaction]) -> list[MonthlyActivity]:
        """Income, expenses, and count per ``YYYY-MM``, in calendar order."""
        months: dict[str, MonthlyActivity] = {}
        for t in transactions:
            key = f"{t.date.year:04d}-{t.date.month:02d}"
            entry = months.setdefault(key, MonthlyActivity(month=key))
            if t.type == TransactionType.CREDIT:
                entry.income += t.amount
            else:
                entry.expenses += t.amount
            entry.transaction_count += 1
        return [months[key] for key in sorted(months)]

    @staticmethod
    def identify_issues(transactions: Iterable[Transaction]) -> list[TransactionIssue]:
        """Data-quality issues worth surfacing before export."""
        transactions = list(transactions)
        if not transactions:
            return []

        issues: list[TransactionIssue] = []

        unassigned = sum(1 for t in transactions if not t.account_number)
        if unassigned:
            issues.append(TransactionIssue(
                issue="Transactions without account mapping",
                severity=IssueSeverity.WARNING,
                count=unassigned,
            ))

        no_vendor = sum(1 for t in transactions if not t.vendor)
        if no_vendor:
            issues.append(TransactionIssue(
                issue="Transactions without vendor information",
                severity=IssueSeverity.INFO,
                count=no_vendor,
            ))

        average = sum((t.amount for t in transactions), Decimal("0")) / len(transactions)
        threshold = average * UNUSUALLY_LARGE_MULTIPLIER
        large = sum(1 for t in transactions if t.amount > threshold)
        if large:
            issues.append(TransactionIssue(
                issue="Unusually large transactions (5x average)",
                severity=IssueSeverity.INFO,
                count=large,
            ))

        seen: set[tuple] = set()
        duplicates = 0
        for t in transactions:
            key = (t.date, t.amount, t.type)
            if key in seen:
                duplicates += 1
            seen.add(key)
        if duplicates:
            issues.append(TransactionIssue(
                issue="Potential duplicate transactions (same date/amount)",
                severity=IssueSeverity.WARNING,
                count=duplicates,
            ))

        return issues
