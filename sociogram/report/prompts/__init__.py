"""Load and format report prompts shipped alongside this package.

Prompts are stored as plain text files with {variable} placeholders
that are filled using Python's str.format().
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

PROMPTS_DIR = Path(__file__).parent


@lru_cache(maxsize=10)
def load_prompt(name: str) -> str:
    """Load a prompt template.

    Args:
        name: Prompt name without extension (e.g., "risk_report")

    Returns:
        The prompt template as a string.

    Raises:
        FileNotFoundError: If the prompt file doesn't exist.
    """
    path = PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    return path.read_text(encoding="utf-8")


def format_prompt(name: str, **kwargs: object) -> str:
    """Load a prompt and substitute its {variable} placeholders.

    Raises:
        FileNotFoundError: If the prompt file doesn't exist.
        KeyError: If a placeholder has no matching keyword argument.
    """
    return load_prompt(name).format(**kwargs)
