"""OpenAI report provider.

Uses the OpenAI SDK Responses API to turn an anonymized classroom summary
into a short pedagogical report.
"""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI

from .provider import (
    INSTRUCTIONS,
    REPORT_EMPTY,
    REPORT_ERROR,
    REPORT_UNAVAILABLE,
    ReportProvider,
    TokenUsage,
)
from .summary import ReportSummary

logger = logging.getLogger(__name__)


class OpenAIReportProvider(ReportProvider):
    """OpenAI SDK-based report provider.

    Never raises from generate_report: a missing key yields REPORT_UNAVAILABLE
    and any SDK or transport failure yields REPORT_ERROR.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str | None = None,
        timeout: float = 60.0,
    ):
        """Initialize the provider.

        Args:
            api_key: OpenAI API key; when empty, reports are unavailable
            model: Model name (e.g., 'gpt-4.1-mini')
            base_url: Optional custom API base URL
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url

        # Track token usage
        self._total_prompt_tokens = 0
        self._total_completion_tokens = 0

        self.client: AsyncOpenAI | None = None
        if api_key:
            self.client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
            )

    @property
    def name(self) -> str:
        return "openai"

    async def generate_report(self, summary: ReportSummary) -> str:
        """Generate the classroom report."""
        if self.client is None:
            logger.error("No API key configured for report generation")
            return REPORT_UNAVAILABLE

        try:
            prompt = self.build_prompt(summary)
            logger.debug(f"Report prompt: {prompt[:500]}..." if len(prompt) > 500 else f"Report prompt: {prompt}")

            response = await self.client.responses.create(
                model=self.model,
                input=prompt,
                instructions=INSTRUCTIONS,
            )

            if getattr(response, "usage", None):
                self._total_prompt_tokens += getattr(response.usage, "input_tokens", 0)
                self._total_completion_tokens += getattr(response.usage, "output_tokens", 0)

            text = response.output_text
            if not text:
                logger.warning(f"Empty report returned for {summary.grade}")
                return REPORT_EMPTY

            logger.info(f"Generated report for {summary.grade} ({len(text)} chars)")
            return text

        except Exception as e:
            logger.error(f"Error generating report with OpenAI: {e}", exc_info=True)
            return REPORT_ERROR

    def get_token_usage(self) -> TokenUsage:
        """Get cumulative token usage statistics."""
        return TokenUsage(
            prompt_tokens=self._total_prompt_tokens,
            completion_tokens=self._total_completion_tokens,
        )

    async def health_check(self) -> bool:
        """Check if the API is accessible."""
        if self.client is None:
            return False
        try:
            await self.client.models.retrieve(self.model)
            return True
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close the client and release resources."""
        if self.client:
            await self.client.close()

    async def __aenter__(self) -> OpenAIReportProvider:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit - cleanup."""
        await self.close()
