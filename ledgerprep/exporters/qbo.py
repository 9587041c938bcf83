"""QuickBooks Online CSV encoders."""

from collections.abc import Iterable

from ledgerprep.exceptions import MissingTemplateError, NoTransactionsError
from ledgerprep.exporters.csv_utils import (
    ACCOUNT_ROW_SEPARATOR,
    TRANSACTION_ROW_SEPARATOR,
    encode_row,
    format_amount,
    join_rows,
)
from ledgerprep.exporters.vocabulary import qbo_account_type
from ledgerprep.models.accounts import Account
from ledgerprep.models.documents import Transaction
from ledgerprep.models.enums import TransactionType

QBO_ACCOUNT_HEADERS = ("Account Type", "Detail Type", "Name", "Description", "Number")
QBO_TRANSACTION_HEADERS = ("Date", "Description", "Amount", "Account", "Payee/Vendor", "Type")


def encode_qbo_accounts(accounts: Iterable[Account] | None) -> str:
    if accounts is None:
        raise MissingTemplateError("QuickBooks Online export")

    rows = [encode_row(QBO_ACCOUNT_HEADERS)]
    for account in accounts:
        rows.append(encode_row((
            qbo_account_type(account.detail_type, account.type),
            account.detail_type,
            account.name,
            account.description,
            account.number,
        )))
    return join_rows(rows, ACCOUNT_ROW_SEPARATOR)


def qbo_account_label(txn: Transaction) -> str:
    number = txn.account_number or ""
    name = txn.account_name
    return f"{number} - {name}" if name else number


def encode_qbo_transactions(transactions: Iterable[Transaction]) -> str:
    """Bank-register style import: signed amounts, debits negative."""
    transactions = list(transactions)
    if not transactions:
        raise NoTransactionsError("QuickBooks Online export")

    rows = [encode_row(QBO_TRANSACTION_HEADERS)]
    for txn in transactions:
        rows.append(encode_row((
            txn.date.isoformat(),
            txn.description,
            format_amount(txn.signed_amount),
            qbo_account_label(txn),
            txn.vendor or "",
            "Expense" if txn.type == TransactionType.DEBIT else "Deposit",
        )))
    return join_rows(rows, TRANSACTION_ROW_SEPARATOR)
