"""Report Provider - Abstract interface for report text generators

The classroom analysis is always complete before a provider is called.
Providers return plain prose; on misconfiguration or failure they return
one of the placeholder strings below instead of raising. Callers treat
every return value as an opaque string."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .prompts import format_prompt
from .summary import ReportSummary

logger = logging.getLogger(__name__)

REPORT_UNAVAILABLE = "API key not configured. The AI report cannot be generated."
REPORT_ERROR = "Error connecting to the AI service. Check your connection."
REPORT_EMPTY = "The report could not be generated."

INSTRUCTIONS = "You are an educational psychologist specialized in school coexistence."


@dataclass
class ReportProviderConfig:
    """Configuration for a report provider"""

    provider: str
    model: str
    api_key: str | None = None
    base_url: str | None = None  # For custom API endpoints
    timeout: float = 60.0

    def __post_init__(self) -> None:
        """Validate configuration"""
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


@dataclass
class TokenUsage:
    """Token usage tracking"""

    prompt_tokens: int
    completion_tokens: int


class ReportProvider(ABC):
    """Abstract base class for report generators"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name"""
        pass

    @abstractmethod
    async def generate_report(self, summary: ReportSummary) -> str:
        """Generate a narrative report for a classroom summary"""
        pass

    @abstractmethod
    def get_token_usage(self) -> TokenUsage:
        """Get current token usage statistics"""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if provider is healthy"""
        pass

    def build_prompt(self, summary: ReportSummary) -> str:
        """Render the report prompt for a summary."""
        risk_summary = "\n".join(
            f"- Student ID {s.id}: risk {s.risk_score}/100. "
            f"(Popularity: {s.in_degree}, conflicts received: {s.conflict_score})"
            for s in summary.at_risk
        )
        tension_summary = "\n".join(
            f"- Reciprocal tension between ID {a} and ID {b}" for a, b in summary.tension_groups
        )
        return format_prompt(
            "risk_report",
            grade=summary.grade,
            global_risk=summary.global_risk,
            at_risk_threshold=summary.at_risk_threshold,
            risk_summary=risk_summary or "- None",
            tension_summary=tension_summary or "- None",
            isolated_count=summary.isolated_count,
        )
