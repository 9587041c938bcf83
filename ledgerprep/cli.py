"""Typer CLI interface for LedgerPrep."""

import logging
from datetime import date
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from ledgerprep.exceptions import LedgerPrepError
from ledgerprep.exporters import ExportFormat, export_bundle
from ledgerprep.models.accounts import AccountSuggestion, ReconciliationResult
from ledgerprep.models.coverage import CoverageReport

app = typer.Typer(
    name="ledgerprep",
    help="LedgerPrep: bookkeeping onboarding, Chart of Accounts and accounting exports.",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine activity to stderr"),
) -> None:
    """LedgerPrep: bookkeeping onboarding, Chart of Accounts and accounting exports."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(1)


def _parse_date(value: str | None, option: str) -> date:
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint=option)


def _reconcile(
    industry: str,
    suggestions_file: Path | None,
    approve: list[str] | None,
) -> tuple[ReconciliationResult, list[AccountSuggestion]]:
    from ledgerprep.engines.reconciler import AccountReconciler
    from ledgerprep.ingestion.manual import ManualAdapter

    suggestions: list[AccountSuggestion] = []
    if suggestions_file is not None:
        suggestions = ManualAdapter().load_suggestions(suggestions_file)
    result = AccountReconciler().reconcile_industry(industry, suggestions, approve or None)
    return result, suggestions


@app.command()
def templates() -> None:
    """List the industry Chart of Accounts templates."""
    from ledgerprep.templates import default_store

    try:
        store = default_store()
    except LedgerPrepError as exc:
        _fail(exc)

    table = Table(title="Industry templates")
    table.add_column("Industry")
    table.add_column("Name")
    table.add_column("Accounts", justify="right")
    for industry in store.industries():
        template = store.get(industry)
        table.add_row(industry, template.name, str(len(template.accounts)))
    Console().print(table)


@app.command()
def export(
    industry: str = typer.Argument(..., help="Industry template key"),
    fmt: ExportFormat = typer.Option(..., "--format", "-f", help="Target: qbo, qbd or xero"),
    name: str = typer.Option(..., "--name", help="Project name used in file names"),
    suggestions_file: Path | None = typer.Option(
        None, "--suggestions", help="JSON file (or raw model output) with account suggestions",
    ),
    approve: list[str] | None = typer.Option(
        None, "--approve", help="Approved suggestion account number (repeatable)",
    ),
    transactions_file: Path | None = typer.Option(
        None, "--transactions", help="JSON file with extracted transactions",
    ),
    output: Path = typer.Option(Path("exports"), "--output", "-o", help="Output directory"),
    on: str | None = typer.Option(None, "--date", help="Date stamped in file names (YYYY-MM-DD)"),
) -> None:
    """Reconcile the Chart of Accounts and write export files."""
    from ledgerprep.ingestion.manual import ManualAdapter

    export_date = _parse_date(on, "--date")
    try:
        result, _ = _reconcile(industry, suggestions_file, approve)
        transactions = []
        if transactions_file is not None:
            transactions = ManualAdapter().load_transactions(transactions_file)
        artifacts = export_bundle(result.accounts, transactions, fmt, name, export_date)
    except LedgerPrepError as exc:
        _fail(exc)

    output.mkdir(parents=True, exist_ok=True)
    for artifact in artifacts:
        # newline="" keeps the row separators exactly as encoded
        with open(output / artifact.filename, "w", newline="", encoding="utf-8") as fh:
            fh.write(artifact.content)
        typer.echo(f"  Wrote {output / artifact.filename}")

    typer.echo(
        f"\nChart of accounts: {len(result.accounts)} accounts "
        f"({len(result.custom_accounts)} custom, {result.rejected_count} suggestions rejected)"
    )


def _print_coverage(report: CoverageReport) -> None:
    console = Console()
    console.print(f"Documents: {report.total_documents}")
    console.print(f"Completeness score: {report.completeness_score}/100")

    if report.documents_missing:
        table = Table(title="Missing documents")
        table.add_column("Priority")
        table.add_column("Category")
        table.add_column("Reason")
        for finding in report.documents_missing:
            table.add_row(finding.priority.value, finding.label, finding.reason)
        console.print(table)

    coverage = report.date_range_coverage
    if coverage.earliest is not None:
        console.print(
            f"Transactions cover {coverage.months_covered} of "
            f"{coverage.months_expected} months ({coverage.earliest} to {coverage.latest})"
        )
        if coverage.gaps:
            console.print(f"Month gaps: {', '.join(coverage.gaps)}")


@app.command()
def analyze(
    documents_file: Path = typer.Argument(..., help="JSON file with classified documents"),
    transactions_file: Path = typer.Argument(..., help="JSON file with extracted transactions"),
    as_of: str | None = typer.Option(None, "--as-of", help="Reference date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Analyze document and transaction coverage."""
    from ledgerprep.engines.coverage import CoverageAnalyzer
    from ledgerprep.ingestion.manual import ManualAdapter

    reference_date = _parse_date(as_of, "--as-of")
    adapter = ManualAdapter()
    try:
        documents = adapter.load_documents(documents_file)
        transactions = adapter.load_transactions(transactions_file)
    except LedgerPrepError as exc:
        _fail(exc)

    report = CoverageAnalyzer().analyze(documents, transactions, reference_date)
    if json_output:
        typer.echo(report.model_dump_json(indent=2))
        return
    _print_coverage(report)


@app.command()
def report(
    documents_file: Path = typer.Argument(..., help="JSON file with classified documents"),
    transactions_file: Path = typer.Argument(..., help="JSON file with extracted transactions"),
    industry: str = typer.Option("general", "--industry", "-i", help="Industry template key"),
    business_name: str = typer.Option(..., "--business", help="Client business name"),
    project_name: str | None = typer.Option(None, "--project", help="Project name"),
    suggestions_file: Path | None = typer.Option(
        None, "--suggestions", help="JSON file (or raw model output) with account suggestions",
    ),
    approve: list[str] | None = typer.Option(
        None, "--approve", help="Approved suggestion account number (repeatable)",
    ),
    as_of: str | None = typer.Option(None, "--as-of", help="Reference date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the report to a file"),
) -> None:
    """Generate the client onboarding report."""
    from ledgerprep.engines.aggregator import ReportAggregator
    from ledgerprep.engines.coverage import CoverageAnalyzer
    from ledgerprep.ingestion.manual import ManualAdapter
    from ledgerprep.models.reports import ClientInfo
    from ledgerprep.reports.onboarding import OnboardingReportGenerator

    reference_date = _parse_date(as_of, "--as-of")
    adapter = ManualAdapter()
    try:
        documents = adapter.load_documents(documents_file)
        transactions = adapter.load_transactions(transactions_file)
        result, suggestions = _reconcile(industry, suggestions_file, approve)
    except LedgerPrepError as exc:
        _fail(exc)

    coverage = CoverageAnalyzer().analyze(documents, transactions, reference_date)
    client = ClientInfo(
        business_name=business_name,
        project_name=project_name or business_name,
        industry=industry,
    )
    onboarding = ReportAggregator().aggregate(
        client, coverage, transactions, result.accounts, suggestion_count=len(suggestions)
    )

    if json_output:
        text = onboarding.model_dump_json(indent=2)
    else:
        text = OnboardingReportGenerator().render(onboarding)

    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text)
    typer.echo(f"Report written to {output}")


if __name__ == "__main__":
    app()
