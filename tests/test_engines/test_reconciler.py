"""Tests for the account reconciler."""

import pytest
from pydantic import ValidationError

from ledgerprep.engines.reconciler import AccountReconciler, rank_suggestions
from ledgerprep.exceptions import MissingTemplateError, UnknownIndustryError
from ledgerprep.ingestion.suggestions import parse_suggestions
from ledgerprep.models.accounts import Account, AccountSuggestion
from ledgerprep.models.enums import AccountType


@pytest.fixture
def reconciler(store):
    return AccountReconciler(store)


def _suggest(number, name, confidence=0.8, type_=AccountType.EXPENSE):
    return AccountSuggestion(
        account=Account(number=number, name=name, type=type_),
        reason="test",
        confidence=confidence,
    )


class TestDeduplication:
    def test_name_match_is_case_insensitive(self, reconciler, sample_accounts):
        """6099 'office supplies' duplicates base 6050 'Office Supplies'."""
        result = reconciler.reconcile(
            "general", sample_accounts, [_suggest("6099", "office supplies")]
        )
        assert len(result.accounts) == len(sample_accounts)
        assert result.rejected_count == 1
        assert result.duplicates[0].account.number == "6099"

    def test_number_match_is_duplicate(self, reconciler, sample_accounts):
        result = reconciler.reconcile(
            "general", sample_accounts, [_suggest("6050", "Stationery")]
        )
        assert [a.number for a in result.accounts] == ["1000", "2000", "4000", "6050"]
        assert result.rejected_count == 1

    def test_duplicate_of_accepted_suggestion(self, reconciler, sample_accounts):
        result = reconciler.reconcile(
            "general",
            sample_accounts,
            [_suggest("6500", "Software"), _suggest("6510", "SOFTWARE ")],
        )
        assert [a.number for a in result.custom_accounts] == ["6500"]
        assert result.rejected_count == 1

    def test_base_account_not_modified(self, reconciler, sample_accounts):
        reconciler.reconcile("general", sample_accounts, [_suggest("6050", "Other")])
        assert sample_accounts[3].name == "Office Supplies"
        assert not sample_accounts[3].is_custom


class TestMerge:
    def test_base_first_then_suggestions_in_input_order(self, reconciler, sample_accounts):
        result = reconciler.reconcile(
            "general",
            sample_accounts,
            [_suggest("6600", "Low", 0.1), _suggest("6500", "High", 0.99)],
        )
        assert [a.number for a in result.accounts] == [
            "1000", "2000", "4000", "6050", "6600", "6500",
        ]
        assert all(a.is_custom for a in result.accounts[4:])
        assert not any(a.is_custom for a in result.accounts[:4])

    def test_unapproved_suggestions_rejected(self, reconciler, sample_accounts):
        result = reconciler.reconcile(
            "general",
            sample_accounts,
            [_suggest("6500", "Software"), _suggest("6600", "Hosting"), _suggest("6050", "Dup")],
            approved_numbers=["6600"],
        )
        assert [a.number for a in result.custom_accounts] == ["6600"]
        assert result.rejected_count == 2

    def test_empty_approval_rejects_all(self, reconciler, sample_accounts):
        result = reconciler.reconcile(
            "general", sample_accounts, [_suggest("6500", "Software")], approved_numbers=[]
        )
        assert result.custom_accounts == []
        assert result.rejected_count == 1

    def test_reconcile_industry_uses_store_template(self, reconciler, sample_suggestion):
        result = reconciler.reconcile_industry("general", [sample_suggestion])
        base = reconciler.store.get("general").accounts
        assert len(result.accounts) == len(base) + 1
        assert result.accounts[-1].number == "6500"
        assert result.industry == "general"


class TestErrors:
    def test_unknown_industry(self, reconciler, sample_accounts):
        with pytest.raises(UnknownIndustryError):
            reconciler.reconcile("bakery", sample_accounts, [])

    def test_missing_template(self, reconciler):
        with pytest.raises(MissingTemplateError):
            reconciler.reconcile("general", None, [])

    def test_blank_suggestion_never_reaches_chart(self, reconciler, store):
        raw = {"suggestions": [
            {"account": {"number": "", "name": "  ", "type": "Expense"}, "reason": "x", "confidence": 0.5},
        ]}
        result = reconciler.reconcile_industry("general", parse_suggestions(raw))
        assert result.custom_accounts == []
        assert len(result.accounts) == len(store.get("general").accounts)

    def test_blank_account_fields_rejected(self):
        with pytest.raises(ValidationError, match="must not be blank"):
            Account(number=" ", name="Software", type="Expense")


class TestRanking:
    def test_rank_by_confidence_stable(self):
        a = _suggest("6500", "A", 0.5)
        b = _suggest("6510", "B", 0.9)
        c = _suggest("6520", "C", 0.5)
        assert rank_suggestions([a, b, c]) == [b, a, c]
