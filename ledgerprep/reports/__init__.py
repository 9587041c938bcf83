"""Report generators."""

from ledgerprep.reports.onboarding import OnboardingReportGenerator

__all__ = ["OnboardingReportGenerator"]
