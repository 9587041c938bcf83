"""Client onboarding report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ledgerprep.models.reports import OnboardingReport

TEMPLATE_DIR = Path(__file__).parent / "templates"


class OnboardingReportGenerator:
    """Generates the human-readable onboarding report."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))
        self.env.filters["money"] = lambda value: f"{value:,.2f}"

    def render(self, report: OnboardingReport) -> str:
        """Render onboarding report."""
        template = self.env.get_template("onboarding_report.txt")
        return template.render(report=report)
