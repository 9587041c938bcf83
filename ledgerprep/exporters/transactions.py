"""Dialect-neutral transaction CSV and the per-account summary CSV."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from ledgerprep.exceptions import NoTransactionsError
from ledgerprep.exporters.csv_utils import (
    TRANSACTION_ROW_SEPARATOR,
    encode_row,
    format_amount,
    join_rows,
)
from ledgerprep.models.documents import Transaction
from ledgerprep.models.enums import TransactionType

TRANSACTION_HEADERS = (
    "Date",
    "Description",
    "Vendor",
    "Amount",
    "Type",
    "Account Number",
    "Account Name",
    "Source Document",
    "Category",
)
SUMMARY_HEADERS = (
    "Account Number",
    "Account Name",
    "Total Debits",
    "Total Credits",
    "Net Amount",
    "Transaction Count",
)
UNCATEGORIZED = "Uncategorized"


def encode_transactions_csv(transactions: Iterable[Transaction]) -> str:
    transactions = list(transactions)
    if not transactions:
        raise NoTransactionsError()

    rows = [encode_row(TRANSACTION_HEADERS)]
    for txn in transactions:
        rows.append(encode_row((
            txn.date.isoformat(),
            txn.description,
            txn.vendor or "",
            format_amount(txn.amount),
            txn.type.value,
            txn.account_number or "",
            txn.account_name or "",
            txn.document_name or "",
            txn.category or "",
        )))
    return join_rows(rows, TRANSACTION_ROW_SEPARATOR)


@dataclass
class AccountTotals:
    account_number: str
    account_name: str
    total_debits: Decimal = Decimal("0")
    total_credits: Decimal = Decimal("0")
    transaction_count: int = 0

    @property
    def net_amount(self) -> Decimal:
        return self.total_credits - self.total_debits


def account_totals(transactions: Iterable[Transaction]) -> list[AccountTotals]:
    """Debit and credit totals per account, sorted by account number."""
    totals: dict[str, AccountTotals] = {}
    for txn in transactions:
        number = txn.account_number or UNCATEGORIZED
        entry = totals.setdefault(
            number, AccountTotals(number, txn.account_name or UNCATEGORIZED)
        )
        if txn.type == TransactionType.DEBIT:
            entry.total_debits += txn.amount
        else:
            entry.total_credits += txn.amount
        entry.transaction_count += 1
    return [totals[number] for number in sorted(totals)]


def encode_account_summary_csv(transactions: Iterable[Transaction]) -> str:
    transactions = list(transactions)
    if not transactions:
        raise NoTransactionsError("account summary export")

    summary = account_totals(transactions)
    rows = [encode_row(SUMMARY_HEADERS)]
    for item in summary:
        rows.append(encode_row((
            item.account_number,
            item.account_name,
            format_amount(item.total_debits),
            format_amount(item.total_credits),
            format_amount(item.net_amount),
            item.transaction_count,
        )))

    debits = sum((i.total_debits for i in summary), Decimal("0"))
    credits = sum((i.total_credits for i in summary), Decimal("0"))
    rows.append("")
    rows.append(encode_row((
        "TOTALS",
        "",
        format_amount(debits),
        format_amount(credits),
        format_amount(credits - debits),
        sum(i.transaction_count for i in summary),
    )))
    return join_rows(rows, TRANSACTION_ROW_SEPARATOR)
