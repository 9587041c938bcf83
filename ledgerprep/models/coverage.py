"""Document and transaction coverage models.

The coverage analyzer rebuilds a CoverageReport on every call; nothing here
is persisted or mutated after construction.
"""

from datetime import date

from pydantic import BaseModel, Field

from ledgerprep.models.enums import DocumentCategory, Priority


class DateRange(BaseModel):
    start: date
    end: date


class CategoryInfo(BaseModel):
    """Documents received for one category."""

    category: DocumentCategory
    label: str
    count: int
    years: list[int] = Field(default_factory=list)
    date_range: DateRange | None = None


class MissingFinding(BaseModel):
    """A single missing-document finding, ordered by priority in reports."""

    category: DocumentCategory
    label: str
    reason: str
    priority: Priority
    year: int | None = None
    missing_months: list[str] | None = None


class DateRangeCoverage(BaseModel):
    earliest: date | None = None
    latest: date | None = None
    gaps: list[str] = Field(default_factory=list)
    months_covered: int = 0
    months_expected: int = 0


class CoverageReport(BaseModel):
    documents_received: list[CategoryInfo] = Field(default_factory=list)
    documents_missing: list[MissingFinding] = Field(default_factory=list)
    total_documents: int = 0
    date_range_coverage: DateRangeCoverage = Field(default_factory=DateRangeCoverage)
    completeness_score: int = Field(default=100, ge=0, le=100)

    @property
    def has_high_priority_findings(self) -> bool:
        """True if any finding has HIGH priority."""
        return any(f.priority == Priority.HIGH for f in self.documents_missing)

    @property
    def year_gap_findings(self) -> list[MissingFinding]:
        """Findings produced by year-range gap detection."""
        return [
            f for f in self.documents_missing
            if f.year is not None and f.category == DocumentCategory.BANK_STATEMENT
        ]
