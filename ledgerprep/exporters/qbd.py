"""QuickBooks Desktop IIF encoders.

IIF is tab-delimited with no quoting. Account fields are written verbatim:
a tab or line break inside a name or description yields a structurally
invalid file. ``find_iif_unsafe_fields`` reports such fields so callers can
fix the data first; the encoder only logs them.
"""

import logging
import re
from collections.abc import Iterable

from ledgerprep.exceptions import MissingTemplateError, NoTransactionsError
from ledgerprep.exporters.csv_utils import format_amount
from ledgerprep.exporters.vocabulary import qbd_account_type
from ledgerprep.models.accounts import Account
from ledgerprep.models.documents import Transaction
from ledgerprep.models.enums import TransactionType

logger = logging.getLogger(__name__)

IIF_ACCOUNT_HEADER = "!ACCNT\tNAME\tACCNTTYPE\tDESC\tACCNUM"
IIF_TRANSACTION_HEADERS = (
    "!TRNS\tTRNSTYPE\tDATE\tACCNT\tNAME\tAMOUNT\tMEMO",
    "!SPL\tTRNSTYPE\tDATE\tACCNT\tNAME\tAMOUNT\tMEMO",
    "!ENDTRNS",
)
IIF_LINE_SEPARATOR = "\n"
IIF_TRANSACTION_SEPARATOR = "\r\n"

JOURNAL_TYPE = "GENERAL JOURNAL"
OFFSET_ACCOUNT = "Opening Balance Equity"
UNCATEGORIZED = "Uncategorized"

_UNSAFE = re.compile(r"[\t\r\n]")


def find_iif_unsafe_fields(accounts: Iterable[Account]) -> list[tuple[str, str]]:
    """(account number, field name) for every field containing a tab or line break."""
    unsafe: list[tuple[str, str]] = []
    for account in accounts:
        for field in ("number", "name", "description"):
            if _UNSAFE.search(getattr(account, field)):
                unsafe.append((account.number, field))
    return unsafe


def encode_qbd_accounts(accounts: Iterable[Account] | None) -> str:
    if accounts is None:
        raise MissingTemplateError("QuickBooks Desktop export")
    accounts = list(accounts)

    for number, field in find_iif_unsafe_fields(accounts):
        logger.warning(
            "Account %r has a tab or line break in %s; IIF output will be malformed",
            number, field,
        )

    lines = [IIF_ACCOUNT_HEADER]
    for account in accounts:
        lines.append("\t".join((
            "ACCNT",
            account.name,
            qbd_account_type(account.type),
            account.description,
            account.number,
        )))
    return IIF_LINE_SEPARATOR.join(lines)


def _flatten(value: str | None) -> str:
    if not value:
        return ""
    return _UNSAFE.sub(" ", value).strip()


def encode_qbd_transactions(transactions: Iterable[Transaction]) -> str:
    """General journal entries, each offset against Opening Balance Equity.

    Debits are positive on the TRNS line, credits negative.
    """
    transactions = list(transactions)
    if not transactions:
        raise NoTransactionsError("QuickBooks Desktop export")

    lines = list(IIF_TRANSACTION_HEADERS)
    for txn in transactions:
        qbd_date = txn.date.strftime("%m/%d/%Y")
        amount = txn.amount if txn.type == TransactionType.DEBIT else -txn.amount
        memo = _flatten(txn.description)

        lines.append("\t".join((
            "TRNS",
            JOURNAL_TYPE,
            qbd_date,
            _flatten(txn.account_name or UNCATEGORIZED),
            _flatten(txn.vendor),
            format_amount(amount),
            memo,
        )))
        lines.append("\t".join((
            "SPL",
            JOURNAL_TYPE,
            qbd_date,
            OFFSET_ACCOUNT,
            "",
            format_amount(-amount),
            memo,
        )))
        lines.append("ENDTRNS")
    return IIF_TRANSACTION_SEPARATOR.join(lines)
