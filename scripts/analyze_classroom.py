#!/usr/bin/env python3
"""
Analyze a classroom survey from JSON files and print the risk analysis.

Usage:
    python scripts/analyze_classroom.py --roster roster.json --responses responses.json
    python scripts/analyze_classroom.py --roster roster.json --responses - --grade "6A" --report

The roster file holds a list of students ({"id", "name", "grade"}), the
responses file a list of survey responses. Use "-" to read either from stdin.
With --report, the narrative report is generated with the provider set by
the AI_* environment variables.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sociogram import ClassroomAnalysis, EmptyRosterError, Student, SurveyResponse, analyze  # noqa: E402
from sociogram.config import ConfigError, ConfigLoader, RiskConfig  # noqa: E402
from sociogram.logging_config import configure_logging, get_logger  # noqa: E402
from sociogram.report import (  # noqa: E402
    ReportProvider,
    ReportProviderConfig,
    build_report_summary,
    create_report_provider,
)

logger = get_logger(__name__)


def _read_json(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _summary(grade: str, result: ClassroomAnalysis) -> dict[str, Any]:
    analysis = result.analysis
    return {
        "grade": grade,
        "global_risk": analysis.global_risk,
        "at_risk_students": [{"id": n.id, "name": n.name, "risk_score": n.risk_score} for n in analysis.at_risk_students],
        "isolated_students": [{"id": n.id, "name": n.name, "out_degree": n.out_degree} for n in analysis.isolated_students],
        "tension_groups": [list(pair) for pair in analysis.tension_groups],
        "nodes": [n.model_dump(mode="json") for n in result.nodes],
    }


def _report_provider() -> ReportProvider:
    # Imported here so analysis-only runs do not need API settings
    from api.settings import get_settings

    settings = get_settings()
    return create_report_provider(
        ReportProviderConfig(
            provider=settings.ai_provider,
            model=settings.ai_model,
            api_key=settings.ai_api_key or None,
            base_url=settings.ai_base_url,
            timeout=settings.ai_timeout_seconds,
        )
    )


async def _generate_report(
    provider: ReportProvider, grade: str, result: ClassroomAnalysis, config: RiskConfig
) -> str:
    summary = build_report_summary(grade, result.analysis, at_risk_threshold=config.at_risk_threshold)
    return await provider.generate_report(summary)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze a classroom peer-relationship survey")
    parser.add_argument("--roster", required=True, help="JSON file with the student roster ('-' for stdin)")
    parser.add_argument("--responses", required=True, help="JSON file with survey responses ('-' for stdin)")
    parser.add_argument("--grade", default=None, help="Classroom label (defaults to the first student's grade)")
    parser.add_argument("--config", default=None, help="JSON file with risk model overrides")
    parser.add_argument("--report", action="store_true", help="Also generate the narrative report")
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # Logs go to stderr so stdout stays valid JSON
    configure_logging(source="cli", debug=args.debug, stream=sys.stderr)

    if args.roster == "-" and args.responses == "-":
        print("Error: only one of --roster/--responses can read from stdin", file=sys.stderr)
        return 1

    try:
        roster = TypeAdapter(list[Student]).validate_python(_read_json(args.roster))
        responses = TypeAdapter(list[SurveyResponse]).validate_python(_read_json(args.responses))
        loader = ConfigLoader.from_json_file(args.config) if args.config else ConfigLoader()
        config = RiskConfig.from_loader(loader)
        logger.debug(f"Loaded {len(roster)} students and {len(responses)} responses")
        result = analyze(roster, responses, config)
        provider = _report_provider() if args.report else None
    except (OSError, json.JSONDecodeError, PydanticValidationError, ConfigError, EmptyRosterError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    grade = args.grade or roster[0].grade
    output = _summary(grade, result)

    if provider is not None:
        output["report"] = asyncio.run(_generate_report(provider, grade, result, config))

    print(json.dumps(output, indent=2 if args.pretty else None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
