"""Input loading: JSON files and AI suggestion payloads."""

from ledgerprep.ingestion.manual import ManualAdapter
from ledgerprep.ingestion.suggestions import parse_suggestions

__all__ = ["ManualAdapter", "parse_suggestions"]
