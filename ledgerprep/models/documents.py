"""Read-only inputs produced by the upstream classification and extraction steps."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from ledgerprep.models.enums import DocumentCategory, TransactionType

MetadataValue = str | int | float | bool | None


class ClassifiedDocument(BaseModel):
    category: DocumentCategory
    year: int | None = None
    metadata: dict[str, MetadataValue] = Field(default_factory=dict)
    id: str | None = None
    file_name: str | None = None


class Transaction(BaseModel):
    """An extracted transaction. ``amount`` is unsigned; ``type`` carries direction."""

    date: date
    description: str
    amount: Decimal = Field(ge=0)
    type: TransactionType
    vendor: str | None = None
    suggested_account_number: str | None = None
    suggested_account_name: str | None = None
    reviewed_account_number: str | None = None
    reviewed_account_name: str | None = None
    document_name: str | None = None
    category: str | None = None
    id: str | None = None

    @property
    def account_number(self) -> str | None:
        """Reviewed account number, falling back to the suggested one."""
        return self.reviewed_account_number or self.suggested_account_number or None

    @property
    def account_name(self) -> str | None:
        """Reviewed account name, falling back to the suggested one."""
        return self.reviewed_account_name or self.suggested_account_name or None

    @property
    def signed_amount(self) -> Decimal:
        """Amount with credits positive and debits negative."""
        if self.type == TransactionType.DEBIT:
            return -self.amount
        return self.amount
