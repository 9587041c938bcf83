"""Account reconciler: merge an industry base template with AI account suggestions.

Base accounts always come first, in template order, followed by accepted
suggestions in the order they were supplied. A suggestion is a duplicate
when its number, or its name compared case-insensitively, matches an account
already in the chart (base or previously accepted). Duplicates are dropped,
never merged.
"""

import logging
from collections.abc import Iterable

from ledgerprep.exceptions import MissingTemplateError
from ledgerprep.models.accounts import Account, AccountSuggestion, ReconciliationResult
from ledgerprep.templates import TemplateStore, default_store

logger = logging.getLogger(__name__)


def _name_key(name: str) -> str:
    return name.strip().casefold()


def rank_suggestions(suggestions: Iterable[AccountSuggestion]) -> list[AccountSuggestion]:
    """Suggestions by confidence, highest first. Ties keep input order."""
    return sorted(suggestions, key=lambda s: s.confidence, reverse=True)


class AccountReconciler:
    """Builds a Chart of Accounts from a base template and suggestions."""

    def __init__(self, store: TemplateStore | None = None):
        self.store = store or default_store()

    def reconcile(
        self,
        industry: str,
        base_template_accounts: list[Account] | None,
        suggestions: Iterable[AccountSuggestion],
        approved_numbers: Iterable[str] | None = None,
    ) -> ReconciliationResult:
        """Merge ``suggestions`` into ``base_template_accounts``.

        Args:
            industry: One of the supported industry keys.
            base_template_accounts: The industry's base accounts.
            suggestions: Validated AI suggestions, in caller ranking order.
            approved_numbers: Account numbers a reviewer accepted. When given,
                any suggestion not listed is rejected.

        Returns:
            ReconciliationResult with the merged accounts and rejected count.

        Raises:
            UnknownIndustryError: ``industry`` is not supported.
            MissingTemplateError: ``base_template_accounts`` is None.
        """
        # Validates the industry key even when the caller supplies the accounts.
        self.store.get(industry)
        if base_template_accounts is None:
            raise MissingTemplateError(f"industry '{industry}'")

        approved = set(approved_numbers) if approved_numbers is not None else None

        accounts: list[Account] = [a.model_copy() for a in base_template_accounts]
        numbers = {a.number for a in accounts}
        names = {_name_key(a.name) for a in accounts}

        duplicates: list[AccountSuggestion] = []
        rejected = 0

        for suggestion in suggestions:
            candidate = suggestion.account
            if candidate.number in numbers or _name_key(candidate.name) in names:
                logger.info(
                    "Dropping duplicate suggestion %s %s",
                    candidate.number, candidate.name,
                )
                duplicates.append(suggestion)
                rejected += 1
                continue

            if approved is not None and candidate.number not in approved:
                rejected += 1
                continue

            accepted = candidate.model_copy(update={"is_custom": True})
            accounts.append(accepted)
            numbers.add(accepted.number)
            names.add(_name_key(accepted.name))

        logger.info(
            "Reconciled %s chart: %d accounts (%d custom), %d suggestions rejected",
            industry,
            len(accounts),
            len(accounts) - len(base_template_accounts),
            rejected,
        )
        return ReconciliationResult(
            industry=industry,
            accounts=accounts,
            rejected_count=rejected,
            duplicates=duplicates,
        )

    def reconcile_industry(
        self,
        industry: str,
        suggestions: Iterable[AccountSuggestion] = (),
        approved_numbers: Iterable[str] | None = None,
    ) -> ReconciliationResult:
        """Reconcile against the store's own base template for ``industry``."""
        base = self.store.base_accounts(industry)
        return self.reconcile(industry, base, suggestions, approved_numbers)
