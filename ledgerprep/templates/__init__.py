"""Industry Chart of Accounts templates.

Base templates are JSON files under ``data/``, one per supported industry.
They are validated once on load and shared read-only afterwards.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from ledgerprep.exceptions import TemplateValidationError, UnknownIndustryError
from ledgerprep.models.accounts import Account, ChartOfAccountsTemplate
from ledgerprep.models.enums import Industry

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
SUPPORTED_INDUSTRIES: tuple[str, ...] = tuple(industry.value for industry in Industry)


def load_template_file(path: Path, industry: str) -> ChartOfAccountsTemplate:
    """Read and validate a single template file."""
    try:
        raw = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise TemplateValidationError(industry, f"cannot read {path.name}: {exc}") from exc

    try:
        template = ChartOfAccountsTemplate.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "template"
        raise TemplateValidationError(industry, f"{location}: {first['msg']}") from exc

    if template.key != industry:
        raise TemplateValidationError(
            industry, f"file declares key '{template.key}'"
        )
    return template


class TemplateStore:
    """Read-only registry of industry templates keyed by industry."""

    def __init__(self, data_dir: Path = DATA_DIR):
        self.data_dir = data_dir
        self._templates: dict[str, ChartOfAccountsTemplate] = {}

    def industries(self) -> list[str]:
        return list(SUPPORTED_INDUSTRIES)

    def get(self, industry: str) -> ChartOfAccountsTemplate:
        """Return the template for ``industry``, loading it on first use."""
        if industry not in SUPPORTED_INDUSTRIES:
            raise UnknownIndustryError(industry, self.industries())

        template = self._templates.get(industry)
        if template is None:
            path = self.data_dir / f"{industry}.json"
            template = load_template_file(path, industry)
            self._templates[industry] = template
            logger.info(
                "Loaded template %s (%s) with %d accounts",
                industry, template.name, len(template.accounts),
            )
        return template

    def base_accounts(self, industry: str) -> list[Account]:
        """Copies of the base accounts for ``industry``."""
        return [account.model_copy() for account in self.get(industry).accounts]

    def load_all(self) -> "TemplateStore":
        for industry in SUPPORTED_INDUSTRIES:
            self.get(industry)
        return self


@lru_cache(maxsize=1)
def default_store() -> TemplateStore:
    """Process-wide store over the packaged templates, loaded once."""
    return TemplateStore().load_all()
