"""
Shared dependencies for the Sociogram API.

This module provides:
- The report provider used by the report endpoint
- The risk model configuration snapshot used by analysis endpoints
"""

from __future__ import annotations

import logging
from functools import lru_cache

from sociogram.config import RiskConfig
from sociogram.report import ReportProvider, ReportProviderConfig, create_report_provider

from .settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_report_provider() -> ReportProvider:
    """Create the report provider once from settings."""
    settings = get_settings()
    provider = create_report_provider(
        ReportProviderConfig(
            provider=settings.ai_provider,
            model=settings.ai_model,
            api_key=settings.ai_api_key or None,
            base_url=settings.ai_base_url,
            timeout=settings.ai_timeout_seconds,
        )
    )
    logger.info(f"Report provider: {provider.name}")
    return provider


def get_risk_config() -> RiskConfig:
    """Resolve risk model constants for one request."""
    return RiskConfig.from_loader()
