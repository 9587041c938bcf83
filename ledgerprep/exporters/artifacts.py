"""Export artifacts: encoded content plus filename and MIME type."""

import logging
import re
from collections.abc import Callable, Iterable
from datetime import date
from enum import StrEnum

from pydantic import BaseModel

from ledgerprep.exporters.qbd import encode_qbd_accounts, encode_qbd_transactions
from ledgerprep.exporters.qbo import encode_qbo_accounts, encode_qbo_transactions
from ledgerprep.exporters.transactions import (
    encode_account_summary_csv,
    encode_transactions_csv,
)
from ledgerprep.exporters.xero import encode_xero_accounts, encode_xero_transactions
from ledgerprep.models.accounts import Account
from ledgerprep.models.documents import Transaction

logger = logging.getLogger(__name__)

CSV_CONTENT_TYPE = "text/csv"
IIF_CONTENT_TYPE = "text/plain"

_FILENAME_UNSAFE = re.compile(r"[^A-Za-z0-9\-_]")


class ExportFormat(StrEnum):
    QBO = "qbo"
    QBD = "qbd"
    XERO = "xero"


class ExportArtifact(BaseModel):
    filename: str
    content: str
    content_type: str


# Per format: filename prefix, extension, content type, account encoder, transaction encoder.
_DIALECTS: dict[ExportFormat, tuple[str, str, str, Callable, Callable]] = {
    ExportFormat.QBO: ("QBO", "csv", CSV_CONTENT_TYPE, encode_qbo_accounts, encode_qbo_transactions),
    ExportFormat.QBD: ("QBD", "iif", IIF_CONTENT_TYPE, encode_qbd_accounts, encode_qbd_transactions),
    ExportFormat.XERO: ("Xero", "csv", CSV_CONTENT_TYPE, encode_xero_accounts, encode_xero_transactions),
}


def sanitize_name(name: str) -> str:
    """Drop every character outside ``[A-Za-z0-9-_]``."""
    return _FILENAME_UNSAFE.sub("", name)


def build_filename(name: str, kind: str, ext: str, on: date | None = None) -> str:
    on = on or date.today()
    return f"{sanitize_name(name)}_{kind}_{on.isoformat()}.{ext}"


def export_chart_of_accounts(
    accounts: Iterable[Account] | None,
    fmt: ExportFormat,
    name: str,
    on: date | None = None,
) -> ExportArtifact:
    prefix, ext, content_type, encode_accounts, _ = _DIALECTS[ExportFormat(fmt)]
    content = encode_accounts(accounts)
    artifact = ExportArtifact(
        filename=build_filename(name, f"{prefix}_ChartOfAccounts", ext, on),
        content=content,
        content_type=content_type,
    )
    logger.info("Encoded %s (%d bytes)", artifact.filename, len(content))
    return artifact


def export_transactions(
    transactions: Iterable[Transaction],
    fmt: ExportFormat | None,
    name: str,
    on: date | None = None,
) -> ExportArtifact:
    """Transactions in a dialect, or the neutral transaction CSV when ``fmt`` is None."""
    if fmt is None:
        content = encode_transactions_csv(transactions)
        filename = build_filename(name, "Transactions", "csv", on)
        content_type = CSV_CONTENT_TYPE
    else:
        prefix, ext, content_type, _, encode_txns = _DIALECTS[ExportFormat(fmt)]
        content = encode_txns(transactions)
        filename = build_filename(name, f"{prefix}_Transactions", ext, on)
    logger.info("Encoded %s (%d bytes)", filename, len(content))
    return ExportArtifact(filename=filename, content=content, content_type=content_type)


def export_account_summary(
    transactions: Iterable[Transaction], name: str, on: date | None = None
) -> ExportArtifact:
    content = encode_account_summary_csv(transactions)
    return ExportArtifact(
        filename=build_filename(name, "AccountSummary", "csv", on),
        content=content,
        content_type=CSV_CONTENT_TYPE,
    )


def export_bundle(
    accounts: Iterable[Account] | None,
    transactions: Iterable[Transaction],
    fmt: ExportFormat,
    name: str,
    on: date | None = None,
    include_chart: bool = True,
    include_transactions: bool = True,
    include_summary: bool = True,
) -> list[ExportArtifact]:
    """Every requested artifact, or an exception and nothing.

    Transaction artifacts are skipped when there are no transactions.
    """
    on = on or date.today()
    transactions = list(transactions)
    artifacts: list[ExportArtifact] = []

    if include_chart:
        artifacts.append(export_chart_of_accounts(accounts, fmt, name, on))
    if include_transactions and transactions:
        artifacts.append(export_transactions(transactions, fmt, name, on))
    if include_summary and transactions:
        artifacts.append(export_account_summary(transactions, name, on))

    logger.info("Bundled %d artifacts for %s", len(artifacts), name)
    return artifacts
