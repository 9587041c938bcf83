"""Account type vocabularies for QuickBooks Online, QuickBooks Desktop and Xero.

Every mapping is total: an unrecognised type falls through to a named
default instead of failing the export.
"""

import logging

from ledgerprep.models.enums import AccountType

logger = logging.getLogger(__name__)

QBO_DEFAULT_TYPE = "Expense"
QBD_DEFAULT_TYPE = "EXP"
XERO_DEFAULT_TYPE = "EXPENSE"


def qbd_account_type(account_type: AccountType | str) -> str:
    match account_type:
        case AccountType.ASSET:
            return "BANK"
        case AccountType.LIABILITY:
            return "OCLIAB"
        case AccountType.EQUITY:
            return "EQUITY"
        case AccountType.INCOME:
            return "INC"
        case AccountType.EXPENSE:
            return "EXP"
        case _:
            logger.warning(
                "Unknown account type %r, exporting to QBD as %s",
                account_type, QBD_DEFAULT_TYPE,
            )
            return QBD_DEFAULT_TYPE


def xero_account_type(account_type: AccountType | str) -> str:
    match account_type:
        case AccountType.ASSET:
            return "CURRENT"
        case AccountType.LIABILITY:
            return "CURRLIAB"
        case AccountType.EQUITY:
            return "EQUITY"
        case AccountType.INCOME:
            return "REVENUE"
        case AccountType.EXPENSE:
            return "EXPENSE"
        case _:
            logger.warning(
                "Unknown account type %r, exporting to Xero as %s",
                account_type, XERO_DEFAULT_TYPE,
            )
            return XERO_DEFAULT_TYPE


def _qbo_type_for_detail(detail_type: str) -> str | None:
    match detail_type:
        case "Cash" | "Bank":
            return "Bank"
        case "Accounts Receivable":
            return "Accounts Receivable"
        case "Inventory" | "Other Current Asset":
            return "Other Current Asset"
        case "Fixed Asset":
            return "Fixed Asset"
        case "Accounts Payable":
            return "Accounts Payable"
        case "Credit Card":
            return "Credit Card"
        case "Other Current Liability":
            return "Other Current Liability"
        case "Long-term Liability":
            return "Long Term Liability"
        case "Owner's Equity" | "Retained Earnings" | "Partner's Equity":
            return "Equity"
        case "Sales" | "Service" | "Discount":
            return "Income"
        case "Other Income":
            return "Other Income"
        case "Cost of Goods Sold":
            return "Cost of Goods Sold"
        case (
            "Payroll" | "Rent or Lease" | "Utilities" | "Insurance" | "Advertising"
            | "Bank Charges" | "Depreciation" | "Interest" | "Legal & Professional"
            | "Office/General Administrative" | "Repair & Maintenance" | "Supplies"
            | "Taxes Paid" | "Travel" | "Travel Meals" | "Auto"
            | "Dues & Subscriptions" | "Training" | "Shipping" | "Other Miscellaneous"
        ):
            return "Expense"
        case _:
            return None


def qbo_account_type(detail_type: str, account_type: AccountType | str) -> str:
    """QBO account type: by detail type first, then by the broad account type."""
    qbo_type = _qbo_type_for_detail(detail_type)
    if qbo_type is not None:
        return qbo_type

    match account_type:
        case AccountType.ASSET:
            return "Other Current Asset"
        case AccountType.LIABILITY:
            return "Other Current Liability"
        case AccountType.EQUITY:
            return "Equity"
        case AccountType.INCOME:
            return "Income"
        case AccountType.EXPENSE:
            return "Expense"
        case _:
            logger.warning(
                "Unknown account type %r, exporting to QBO as %s",
                account_type, QBO_DEFAULT_TYPE,
            )
            return QBO_DEFAULT_TYPE
