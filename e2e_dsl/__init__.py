"""E2E DSL - compiler for end-to-end browser test scenarios."""

from .config import DslConfig, load_config
from .dsl import E2EDslParser, parse
from .reporting import JsonReporter
from .scenario import DslError, DslParseResult, TestScenario, TestStep, validate_scenario
from .scenario.loader import parse_scenario, parse_scenario_text

__version__ = "0.1.0"

parse_file = parse_scenario

__all__ = [
    "DslConfig",
    "load_config",
    "E2EDslParser",
    "parse",
    "parse_file",
    "parse_scenario",
    "parse_scenario_text",
    "DslError",
    "DslParseResult",
    "TestScenario",
    "TestStep",
    "validate_scenario",
    "JsonReporter",
]
