"""Scenario file loader for the E2E DSL tool.

Reads DSL scenario files from disk and hands their text to the parser.
"""

from pathlib import Path
from typing import Optional, Union

from ..config import DslConfig
from ..dsl.parser import E2EDslParser
from .schema import DslParseResult

SCENARIO_SUFFIXES = (".e2e", ".dsl")


def parse_scenario(
    file_path: Union[str, Path],
    config: Optional[DslConfig] = None,
) -> DslParseResult:
    """Parse a DSL scenario file.

    Args:
        file_path: Path to the scenario file (``.e2e`` or ``.dsl``).
        config: Parser configuration; defaults apply when omitted.

    Returns:
        The parse result. Syntax problems are reported on the result, not
        raised.

    Raises:
        FileNotFoundError: If the scenario file doesn't exist.
        ValueError: If the file has an unsupported suffix or is empty.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {file_path}")

    if file_path.suffix not in SCENARIO_SUFFIXES:
        raise ValueError(
            f"Expected one of {', '.join(SCENARIO_SUFFIXES)} files, got: {file_path.suffix or '<none>'}"
        )

    text = file_path.read_text(encoding="utf-8")
    if not text.strip():
        raise ValueError(f"Empty scenario file: {file_path}")

    return parse_scenario_text(text, config=config)


def parse_scenario_text(text: str, config: Optional[DslConfig] = None) -> DslParseResult:
    """Parse a scenario from DSL text already in memory."""
    return E2EDslParser(config).parse(text)
