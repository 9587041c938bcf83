"""Manual adapter: load JSON input files into validated models.

Each file holds either a bare list of records or an object wrapping the list
under its plural key, e.g. ``{"transactions": [...]}``.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ledgerprep.exceptions import InputFileError, SuggestionParseError
from ledgerprep.ingestion.suggestions import parse_suggestions
from ledgerprep.models.accounts import Account, AccountSuggestion
from ledgerprep.models.documents import ClassifiedDocument, Transaction

logger = logging.getLogger(__name__)

_DOCUMENTS = TypeAdapter(list[ClassifiedDocument])
_TRANSACTIONS = TypeAdapter(list[Transaction])
_ACCOUNTS = TypeAdapter(list[Account])


class ManualAdapter:
    """Reads documents, transactions, accounts, and suggestions from JSON files."""

    def load_documents(self, file_path: Path) -> list[ClassifiedDocument]:
        return self._load(file_path, "documents", _DOCUMENTS)

    def load_transactions(self, file_path: Path) -> list[Transaction]:
        return self._load(file_path, "transactions", _TRANSACTIONS)

    def load_accounts(self, file_path: Path) -> list[Account]:
        return self._load(file_path, "accounts", _ACCOUNTS)

    def load_suggestions(self, file_path: Path) -> list[AccountSuggestion]:
        """Suggestions file: raw model output or the decoded suggestions JSON."""
        text = self._read(file_path)
        try:
            return parse_suggestions(text)
        except SuggestionParseError as exc:
            raise InputFileError(str(file_path), str(exc)) from exc

    @staticmethod
    def _read(file_path: Path) -> str:
        if not file_path.exists():
            raise InputFileError(str(file_path), "file not found")
        try:
            return file_path.read_text()
        except OSError as exc:
            raise InputFileError(str(file_path), str(exc)) from exc

    def _load(self, file_path: Path, key: str, adapter: TypeAdapter) -> list:
        try:
            raw: Any = json.loads(self._read(file_path))
        except json.JSONDecodeError as exc:
            raise InputFileError(str(file_path), f"invalid JSON: {exc}") from exc

        if isinstance(raw, dict):
            if key not in raw:
                raise InputFileError(str(file_path), f"expected a list or a '{key}' key")
            raw = raw[key]

        try:
            records = adapter.validate_python(raw)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise InputFileError(
                str(file_path), f"{location}: {first['msg']}"
            ) from exc

        logger.info("Loaded %d %s from %s", len(records), key, file_path.name)
        return records
