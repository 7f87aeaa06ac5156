"""
Narrative report generation for classroom analyses.

The report generator is an external text service: it receives an
anonymized ReportSummary and returns prose, or a placeholder string
when it is unavailable or fails.
"""

from .factory import MockReportProvider, ReportProviderFactory, create_report_provider
from .provider import (
    REPORT_EMPTY,
    REPORT_ERROR,
    REPORT_UNAVAILABLE,
    ReportProvider,
    ReportProviderConfig,
    TokenUsage,
)
from .summary import AtRiskEntry, ReportSummary, build_report_summary

__all__ = [
    "REPORT_EMPTY",
    "REPORT_ERROR",
    "REPORT_UNAVAILABLE",
    "AtRiskEntry",
    "MockReportProvider",
    "ReportProvider",
    "ReportProviderConfig",
    "ReportProviderFactory",
    "ReportSummary",
    "TokenUsage",
    "build_report_summary",
    "create_report_provider",
]
