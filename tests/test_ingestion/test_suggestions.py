"""Tests for AI suggestion payload parsing."""

import json
import logging

import pytest

from ledgerprep.exceptions import SuggestionParseError
from ledgerprep.ingestion.suggestions import extract_json, parse_suggestions
from ledgerprep.models.enums import AccountType

PAYLOAD = {
    "suggestions": [
        {
            "account": {
                "number": "6500",
                "name": "Software Subscriptions",
                "type": "Expense",
                "detailType": "Dues & Subscriptions",
                "description": "SaaS tools",
            },
            "reason": "Recurring software charges",
            "confidence": 0.9,
        },
        {
            "account": {"number": "4200", "name": "Catering Revenue", "type": "Income"},
            "reason": "Catering invoices",
            "confidence": 1.4,
        },
    ]
}


class TestExtractJson:
    def test_fenced(self):
        text = "```json\n" + json.dumps(PAYLOAD) + "\n```"
        assert extract_json(text) == PAYLOAD

    def test_surrounded_by_prose(self):
        text = "Here are my suggestions:\n" + json.dumps(PAYLOAD) + "\nLet me know!"
        assert extract_json(text) == PAYLOAD

    def test_no_json(self):
        assert extract_json("I could not find any accounts.") is None


class TestParseSuggestions:
    def test_text_payload(self):
        suggestions = parse_suggestions("```\n" + json.dumps(PAYLOAD) + "\n```")
        assert [s.account.number for s in suggestions] == ["6500", "4200"]
        assert suggestions[0].account.detail_type == "Dues & Subscriptions"
        assert suggestions[0].account.is_custom
        assert suggestions[1].account.type == AccountType.INCOME

    def test_confidence_clamped(self):
        suggestions = parse_suggestions(PAYLOAD)
        assert suggestions[1].confidence == 1.0

    def test_bare_list(self):
        assert len(parse_suggestions(PAYLOAD["suggestions"])) == 2

    def test_malformed_entries_dropped(self, caplog):
        payload = {
            "suggestions": [
                {"account": {"number": "6500", "name": "Software"}, "reason": "x", "confidence": 0.5},
                {"reason": "no account", "confidence": 0.5},
                "not an object",
                PAYLOAD["suggestions"][1],
            ]
        }
        with caplog.at_level(logging.WARNING, logger="ledgerprep.ingestion.suggestions"):
            suggestions = parse_suggestions(payload)
        assert [s.account.number for s in suggestions] == ["4200"]
        assert caplog.text.count("Dropping malformed suggestion") == 3

    def test_unknown_account_type_dropped(self, caplog):
        entry = {
            "account": {"number": "1500", "name": "Crypto", "type": "Digital Asset"},
            "reason": "wallet statements",
            "confidence": 0.7,
        }
        with caplog.at_level(logging.WARNING, logger="ledgerprep.ingestion.suggestions"):
            assert parse_suggestions({"suggestions": [entry]}) == []
        assert "unknown account type" in caplog.text

    def test_missing_suggestions_key_is_empty(self):
        assert parse_suggestions({"accounts": []}) == []

    def test_text_without_json(self):
        with pytest.raises(SuggestionParseError, match="no JSON found"):
            parse_suggestions("Sorry, I can't help with that.")

    def test_suggestions_not_a_list(self):
        with pytest.raises(SuggestionParseError):
            parse_suggestions({"suggestions": "none"})

    def test_blank_number_or_name_dropped(self, caplog):
        entries = [
            {"account": {"number": "", "name": "  ", "type": "Expense"}, "reason": "x", "confidence": 0.5},
            {"account": {"number": "6500", "name": "\t", "type": "Expense"}, "reason": "x", "confidence": 0.5},
            PAYLOAD["suggestions"][1],
        ]
        with caplog.at_level(logging.WARNING, logger="ledgerprep.ingestion.suggestions"):
            suggestions = parse_suggestions({"suggestions": entries})
        assert [s.account.number for s in suggestions] == ["4200"]
        assert caplog.text.count("must not be blank") == 2
