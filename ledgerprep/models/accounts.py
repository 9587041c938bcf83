"""Chart of Accounts models: accounts, AI suggestions, and industry templates."""

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

from ledgerprep.models.enums import AccountType

# Leading digit of an account number -> conventional account type.
NUMBER_PREFIX_TYPES: dict[str, AccountType] = {
    "1": AccountType.ASSET,
    "2": AccountType.LIABILITY,
    "3": AccountType.EQUITY,
    "4": AccountType.INCOME,
    "5": AccountType.EXPENSE,
    "6": AccountType.EXPENSE,
    "7": AccountType.EXPENSE,
}


class Account(BaseModel):
    """A single Chart of Accounts entry.

    ``type`` is coerced to :class:`AccountType` when recognised. Anything else
    is kept as the raw string so exporters can apply their fail-open default
    instead of refusing the account.
    """

    number: str
    name: str
    type: AccountType | str = Field(union_mode="left_to_right")
    detail_type: str = Field(
        default="", validation_alias=AliasChoices("detail_type", "detailType")
    )
    description: str = ""
    is_custom: bool = Field(
        default=False, validation_alias=AliasChoices("is_custom", "isCustom")
    )

    @field_validator("number", "name")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @property
    def has_known_type(self) -> bool:
        return isinstance(self.type, AccountType)

    @property
    def conventional_type(self) -> AccountType | None:
        """Account type implied by the leading digit of the number (advisory)."""
        return NUMBER_PREFIX_TYPES.get(self.number.strip()[:1])


class AccountSuggestion(BaseModel):
    """An AI-proposed custom account. Confidence is clamped into [0, 1]."""

    account: Account
    reason: str
    confidence: float = Field(allow_inf_nan=False)

    @field_validator("confidence")
    @classmethod
    def _clamp_confidence(cls, value: float) -> float:
        return min(1.0, max(0.0, value))

    @field_validator("account")
    @classmethod
    def _mark_custom(cls, value: Account) -> Account:
        if value.is_custom:
            return value
        return value.model_copy(update={"is_custom": True})


class ChartOfAccountsTemplate(BaseModel):
    """Industry base template. Every account must carry a known type and a unique number."""

    key: str
    name: str
    description: str = ""
    accounts: list[Account]

    @model_validator(mode="after")
    def _check_accounts(self) -> "ChartOfAccountsTemplate":
        seen: set[str] = set()
        for account in self.accounts:
            if not account.has_known_type:
                raise ValueError(
                    f"account {account.number} has unknown type '{account.type}'"
                )
            if account.number in seen:
                raise ValueError(f"duplicate account number {account.number}")
            seen.add(account.number)
        return self


class ReconciliationResult(BaseModel):
    """Output of merging a base template with AI suggestions."""

    industry: str
    accounts: list[Account] = Field(default_factory=list)
    rejected_count: int = 0
    duplicates: list[AccountSuggestion] = Field(default_factory=list)

    @property
    def custom_accounts(self) -> list[Account]:
        return [a for a in self.accounts if a.is_custom]
