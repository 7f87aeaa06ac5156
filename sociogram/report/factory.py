"""Provider Factory - Creates report providers based on configuration.

Supports OpenAI and a deterministic Mock provider."""

from __future__ import annotations

import logging

from .provider import ReportProvider, ReportProviderConfig, TokenUsage
from .summary import ReportSummary

logger = logging.getLogger(__name__)


class MockReportProvider(ReportProvider):
    """Offline provider producing a fixed-shape report from the summary"""

    def __init__(self, config: ReportProviderConfig | None = None):
        self.config = config
        self._reports = 0

    @property
    def name(self) -> str:
        return "mock"

    async def generate_report(self, summary: ReportSummary) -> str:
        """Summarize the numbers without calling any service"""
        self._reports += 1
        lines = [
            f"Class {summary.grade}: global risk {summary.global_risk}/100.",
            f"{len(summary.at_risk)} students above {summary.at_risk_threshold} points, "
            f"{summary.isolated_count} isolated, {len(summary.tension_groups)} reciprocal tensions.",
        ]
        lines.extend(f"- Follow up with {a} and {b} (mutual rejection)." for a, b in summary.tension_groups)
        return "\n".join(lines)

    def get_token_usage(self) -> TokenUsage:
        """Mock usage"""
        return TokenUsage(prompt_tokens=0, completion_tokens=0)

    async def health_check(self) -> bool:
        """Always healthy"""
        return True


class ReportProviderFactory:
    """Factory for creating report providers"""

    def __init__(self) -> None:
        self.providers: dict[str, type[ReportProvider]] = {
            "mock": MockReportProvider,
        }

    def register_provider(self, name: str, provider_class: type[ReportProvider]) -> None:
        """Register a custom provider"""
        self.providers[name] = provider_class
        logger.info(f"Registered report provider: {name}")

    def create(self, config: ReportProviderConfig) -> ReportProvider:
        """Create a provider instance.

        A missing OpenAI key is not an error here: the provider is created and
        answers every request with the "not configured" placeholder.

        Raises:
            ValueError: If provider type is not supported
        """
        provider_type = config.provider.lower()

        if provider_type == "openai":
            from .openai_provider import OpenAIReportProvider

            if not config.api_key:
                logger.warning("No API key configured for OpenAI report provider; reports will be unavailable")
            return OpenAIReportProvider(
                api_key=config.api_key,
                model=config.model,
                base_url=config.base_url,
                timeout=config.timeout,
            )

        if provider_type in self.providers:
            return self.providers[provider_type](config)  # type: ignore[call-arg]

        available = ", ".join(["openai", *sorted(self.providers)])
        raise ValueError(f"Unsupported provider: {provider_type}. Available: {available}")


# Convenience function
def create_report_provider(config: ReportProviderConfig) -> ReportProvider:
    """Create a provider using the default factory"""
    factory = ReportProviderFactory()
    return factory.create(config)
