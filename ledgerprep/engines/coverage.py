"""Coverage analyzer: find missing document categories and temporal gaps.

Steps:
1. Category presence: every category without documents is a finding, with
   priority taken from the category rules. Tax documents are also checked
   for the year before the reference date.
2. Year gaps: when documents span at least two distinct years, every year in
   the closed range with no documents is a high-priority finding.
3. Month coverage from transaction dates.
4. Completeness score from finding priorities and the month gap ratio.

The report is a pure function of the inputs and ``reference_date``.
"""

from collections.abc import Iterable, Iterator
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from ledgerprep.models.coverage import (
    CategoryInfo,
    CoverageReport,
    DateRange,
    DateRangeCoverage,
    MissingFinding,
)
from ledgerprep.models.documents import ClassifiedDocument, Transaction
from ledgerprep.models.enums import CATEGORY_LABELS, PRIORITY_ORDER, DocumentCategory, Priority
from ledgerprep.policy import (
    CATEGORY_REASONS,
    CATEGORY_RULES,
    MAX_SCORE,
    MONTH_GAP_WEIGHT,
    PRIORITY_PENALTIES,
)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Metadata keys that may carry a statement or document date.
DOCUMENT_DATE_KEYS = ("date", "statement_date", "statementDate")


def format_month(year: int, month: int) -> str:
    """Format a calendar month as ``Mon YYYY`` independent of locale."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"


def iter_months(start: date, end: date) -> Iterator[tuple[int, int]]:
    """Yield (year, month) pairs from ``start`` to ``end`` inclusive."""
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        month += 1
        if month > 12:
            month = 1
            year += 1


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def document_date(doc: ClassifiedDocument) -> date | None:
    """Best known date for a document: metadata date, else January 1 of its year."""
    for key in DOCUMENT_DATE_KEYS:
        value = doc.metadata.get(key)
        if isinstance(value, str) and value:
            try:
                return date.fromisoformat(value[:10])
            except ValueError:
                continue
    if doc.year is not None:
        return date(doc.year, 1, 1)
    return None


class CoverageAnalyzer:
    """Analyzes a document and transaction corpus for completeness gaps."""

    def analyze(
        self,
        documents: Iterable[ClassifiedDocument],
        transactions: Iterable[Transaction],
        reference_date: date,
    ) -> CoverageReport:
        documents = list(documents)
        by_category = self._group_by_category(documents)

        findings = self.category_findings(by_category, reference_date)
        findings.extend(self.year_gap_findings(documents))
        findings.sort(key=lambda f: PRIORITY_ORDER[f.priority])

        coverage = self.date_range_coverage(transactions)

        return CoverageReport(
            documents_received=self._documents_received(by_category),
            documents_missing=findings,
            total_documents=len(documents),
            date_range_coverage=coverage,
            completeness_score=self.completeness_score(findings, coverage),
        )

    @staticmethod
    def _group_by_category(
        documents: list[ClassifiedDocument],
    ) -> dict[DocumentCategory, list[ClassifiedDocument]]:
        grouped: dict[DocumentCategory, list[ClassifiedDocument]] = {
            category: [] for category in DocumentCategory
        }
        for doc in documents:
            grouped[doc.category].append(doc)
        return grouped

    @staticmethod
    def _documents_received(
        by_category: dict[DocumentCategory, list[ClassifiedDocument]],
    ) -> list[CategoryInfo]:
        received: list[CategoryInfo] = []
        for category, docs in by_category.items():
            if not docs:
                continue
            dates = sorted(d for d in (document_date(doc) for doc in docs) if d is not None)
            received.append(CategoryInfo(
                category=category,
                label=CATEGORY_LABELS[category],
                count=len(docs),
                years=sorted({doc.year for doc in docs if doc.year is not None}),
                date_range=DateRange(start=dates[0], end=dates[-1]) if dates else None,
            ))
        # Stable: equal counts keep category declaration order
        received.sort(key=lambda info: info.count, reverse=True)
        return received

    def category_findings(
        self,
        by_category: dict[DocumentCategory, list[ClassifiedDocument]],
        reference_date: date,
    ) -> list[MissingFinding]:
        """One finding per empty category, plus the prior-year tax check."""
        findings: list[MissingFinding] = []
        for category, priority in CATEGORY_RULES.items():
            docs = by_category.get(category, [])
            if not docs:
                findings.append(MissingFinding(
                    category=category,
                    label=CATEGORY_LABELS[category],
                    reason=CATEGORY_REASONS[category],
                    priority=priority,
                ))
                continue

            if category == DocumentCategory.TAX_DOCUMENT:
                last_year = reference_date.year - 1
                if not any(doc.year == last_year for doc in docs):
                    findings.append(MissingFinding(
                        category=category,
                        label=CATEGORY_LABELS[category],
                        reason=f"No tax documents found for {last_year}.",
                        priority=Priority.MEDIUM,
                        year=last_year,
                    ))
        return findings

    @staticmethod
    def year_gap_findings(documents: Iterable[ClassifiedDocument]) -> list[MissingFinding]:
        """High-priority findings for years missing inside the document year range."""
        years = {doc.year for doc in documents if doc.year is not None}
        if len(years) < 2:
            return []

        findings: list[MissingFinding] = []
        for year in range(min(years), max(years) + 1):
            if year in years:
                continue
            findings.append(MissingFinding(
                category=DocumentCategory.BANK_STATEMENT,
                label=CATEGORY_LABELS[DocumentCategory.BANK_STATEMENT],
                reason=f"No documents found for {year}. There may be a gap in records.",
                priority=Priority.HIGH,
                year=year,
            ))
        return findings

    @staticmethod
    def date_range_coverage(transactions: Iterable[Transaction]) -> DateRangeCoverage:
        """Month-by-month coverage between the earliest and latest transaction."""
        dates = [t.date for t in transactions]
        if not dates:
            return DateRangeCoverage()

        earliest, latest = min(dates), max(dates)
        covered = {(d.year, d.month) for d in dates}
        expected = list(iter_months(earliest, latest))
        gaps = [format_month(y, m) for y, m in expected if (y, m) not in covered]

        return DateRangeCoverage(
            earliest=earliest,
            latest=latest,
            gaps=gaps,
            months_covered=len(covered),
            months_expected=len(expected),
        )

    @staticmethod
    def completeness_score(
        findings: Iterable[MissingFinding], coverage: DateRangeCoverage
    ) -> int:
        penalty = sum(PRIORITY_PENALTIES[f.priority] for f in findings)
        if coverage.months_expected:
            ratio = Decimal(len(coverage.gaps)) / Decimal(coverage.months_expected)
            penalty += round_half_up(ratio * MONTH_GAP_WEIGHT)
        return max(0, MAX_SCORE - penalty)
