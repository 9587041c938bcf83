"""Chart of Accounts and transaction encoders for QuickBooks Online, QuickBooks Desktop, and Xero."""

from ledgerprep.exporters.artifacts import (
    ExportArtifact,
    ExportFormat,
    build_filename,
    export_account_summary,
    export_bundle,
    export_chart_of_accounts,
    export_transactions,
)
from ledgerprep.exporters.csv_utils import escape_csv_field, format_amount, unescape_csv_field
from ledgerprep.exporters.qbd import (
    encode_qbd_accounts,
    encode_qbd_transactions,
    find_iif_unsafe_fields,
)
from ledgerprep.exporters.qbo import encode_qbo_accounts, encode_qbo_transactions
from ledgerprep.exporters.transactions import encode_account_summary_csv, encode_transactions_csv
from ledgerprep.exporters.vocabulary import qbd_account_type, qbo_account_type, xero_account_type
from ledgerprep.exporters.xero import encode_xero_accounts, encode_xero_transactions

__all__ = [
    "ExportArtifact",
    "ExportFormat",
    "build_filename",
    "encode_account_summary_csv",
    "encode_qbd_accounts",
    "encode_qbd_transactions",
    "encode_qbo_accounts",
    "encode_qbo_transactions",
    "encode_transactions_csv",
    "encode_xero_accounts",
    "encode_xero_transactions",
    "escape_csv_field",
    "export_account_summary",
    "export_bundle",
    "export_chart_of_accounts",
    "export_transactions",
    "find_iif_unsafe_fields",
    "format_amount",
    "qbd_account_type",
    "qbo_account_type",
    "unescape_csv_field",
    "xero_account_type",
]
