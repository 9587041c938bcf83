"""Reconciliation, coverage, and reporting engines."""

from ledgerprep.engines.aggregator import ReportAggregator
from ledgerprep.engines.coverage import CoverageAnalyzer
from ledgerprep.engines.reconciler import AccountReconciler, rank_suggestions
from ledgerprep.engines.summary import TransactionSummarizer

__all__ = [
    "AccountReconciler",
    "CoverageAnalyzer",
    "ReportAggregator",
    "TransactionSummarizer",
    "rank_suggestions",
]
