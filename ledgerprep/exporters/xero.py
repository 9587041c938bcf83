"""Xero CSV encoders."""

from collections.abc import Iterable

from ledgerprep.exceptions import MissingTemplateError, NoTransactionsError
from ledgerprep.exporters.csv_utils import (
    ACCOUNT_ROW_SEPARATOR,
    TRANSACTION_ROW_SEPARATOR,
    encode_row,
    format_amount,
    join_rows,
)
from ledgerprep.exporters.vocabulary import xero_account_type
from ledgerprep.models.accounts import Account
from ledgerprep.models.documents import Transaction

XERO_ACCOUNT_HEADERS = ("*Code", "*Name", "*Type", "Description")
XERO_TRANSACTION_HEADERS = (
    "*Date", "*Amount", "Payee", "Description", "Reference", "Account Code",
)
REFERENCE_LENGTH = 8


def encode_xero_accounts(accounts: Iterable[Account] | None) -> str:
    if accounts is None:
        raise MissingTemplateError("Xero export")

    rows = [encode_row(XERO_ACCOUNT_HEADERS)]
    for account in accounts:
        rows.append(encode_row((
            account.number,
            account.name,
            xero_account_type(account.type),
            account.description,
        )))
    return join_rows(rows, ACCOUNT_ROW_SEPARATOR)


def encode_xero_transactions(transactions: Iterable[Transaction]) -> str:
    """Bank statement import: DD/MM/YYYY dates, debits negative."""
    transactions = list(transactions)
    if not transactions:
        raise NoTransactionsError("Xero export")

    rows = [encode_row(XERO_TRANSACTION_HEADERS)]
    for txn in transactions:
        rows.append(encode_row((
            txn.date.strftime("%d/%m/%Y"),
            format_amount(txn.signed_amount),
            txn.vendor or "",
            txn.description,
            (txn.id or "")[-REFERENCE_LENGTH:],
            txn.account_number or "",
        )))
    return join_rows(rows, TRANSACTION_ROW_SEPARATOR)
