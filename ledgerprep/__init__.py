"""LedgerPrep: Chart of Accounts reconciliation, coverage analysis, and accounting exports."""

__version__ = "0.1.0"
