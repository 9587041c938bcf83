"""Parse AI account suggestion payloads into validated models.

The model is asked for ``{"suggestions": [{"account": {...}, "reason": ...,
"confidence": ...}]}``. Responses are often wrapped in markdown fences or
surrounded by prose, so the JSON is located before validation. Entries are
validated one at a time: a bad entry is logged and dropped, the rest survive.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from ledgerprep.exceptions import SuggestionParseError
from ledgerprep.models.accounts import AccountSuggestion

logger = logging.getLogger(__name__)


def _strip_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        first_newline = text.index("\n") if "\n" in text else len(text)
        text = text[first_newline + 1:]
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3].rstrip()
    return text


def extract_json(text: str) -> dict | list | None:
    """Decode the first JSON object or array found in ``text``."""
    text = _strip_fences(text)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    for start_char, end_char in [("{", "}"), ("[", "]")]:
        start = text.find(start_char)
        end = text.rfind(end_char)
        if start != -1 and end != -1 and end > start:
            try:
                return json.loads(text[start:end + 1])
            except json.JSONDecodeError:
                continue
    return None


def _suggestion_entries(payload: Any) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        entries = payload.get("suggestions", [])
        if isinstance(entries, list):
            return entries
        raise SuggestionParseError("'suggestions' is not a list")
    raise SuggestionParseError(f"unexpected payload type {type(payload).__name__}")


def parse_suggestions(payload: str | dict | list) -> list[AccountSuggestion]:
    """Validate every suggestion entry in ``payload``.

    Args:
        payload: Raw model text, or JSON already decoded into a dict or list.

    Returns:
        The valid suggestions, in payload order.

    Raises:
        SuggestionParseError: The text contains no JSON, or the JSON has no
            usable suggestions list.
    """
    if isinstance(payload, str):
        decoded = extract_json(payload)
        if decoded is None:
            raise SuggestionParseError(
                f"no JSON found in response. Response preview: {payload[:300]}"
            )
        payload = decoded

    suggestions: list[AccountSuggestion] = []
    for index, entry in enumerate(_suggestion_entries(payload)):
        try:
            suggestion = AccountSuggestion.model_validate(entry)
        except ValidationError as exc:
            logger.warning(
                "Dropping malformed suggestion #%d: %s",
                index, exc.errors()[0]["msg"],
            )
            continue
        if not suggestion.account.has_known_type:
            logger.warning(
                "Dropping suggestion #%d (%s): unknown account type %r",
                index, suggestion.account.number, suggestion.account.type,
            )
            continue
        suggestions.append(suggestion)

    logger.info("Parsed %d account suggestions", len(suggestions))
    return suggestions
