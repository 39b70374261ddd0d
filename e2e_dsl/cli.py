"""CLI entry point for the E2E DSL tool.

    e2e-dsl parse <scenario.e2e> [options]
    python -m e2e_dsl.cli validate <scenario.e2e>
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import DslConfig, load_config
from .dsl.reference import SYNTAX_REFERENCE
from .reporting.json_reporter import JsonReporter
from .scenario.loader import parse_scenario
from .scenario.validator import validate_scenario

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="e2e-dsl")
def main():
    """E2E DSL - parse and check end-to-end test scenarios."""


@main.command()
@click.argument("scenario_file", type=click.Path(path_type=Path))
@click.option("--format", "output_format", type=click.Choice(["json", "yaml"]), default="json",
              help="Output format (yaml prints only the parsed scenario).")
@click.option("--pretty", is_flag=True, help="Pretty print JSON output.")
@click.option("--validate/--no-validate", default=True, help="Run semantic validation.")
@click.option("--save-report", type=click.Path(path_type=Path), default=None,
              help="Write the full JSON report to this path.")
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="YAML config file.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def parse(
    scenario_file: Path,
    output_format: str,
    pretty: bool,
    validate: bool,
    save_report: Optional[Path],
    config_path: Optional[Path],
    verbose: bool,
):
    """Parse a DSL scenario file."""
    config = _load_config_or_exit(config_path, "parse")
    _setup_logging(config, verbose)

    try:
        result = parse_scenario(scenario_file, config=config)
    except (FileNotFoundError, ValueError) as e:
        output_error(str(e), command="parse", path=str(scenario_file))
        sys.exit(1)

    validation = None
    if validate and result.scenario is not None:
        validation = validate_scenario(result.scenario)

    reporter = JsonReporter()
    report = reporter.generate(result, source=str(scenario_file), validation=validation)

    report_path = None
    if save_report:
        report_path = str(reporter.save(report, save_report))
        logger.info("Saved report to %s", report_path)

    flow_output = reporter.generate_flow_output(report, command="parse", report_path=report_path)

    if output_format == "yaml" and result.scenario is not None:
        click.echo(reporter.scenario_to_yaml(result.scenario), nl=False)
    else:
        click.echo(reporter.to_json_string(flow_output, pretty=pretty))

    if not flow_output["success"]:
        sys.exit(1)


@main.command()
@click.argument("scenario_file", type=click.Path(path_type=Path))
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="YAML config file.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def validate(scenario_file: Path, config_path: Optional[Path], verbose: bool):
    """Validate a DSL scenario file."""
    config = _load_config_or_exit(config_path, "validate")
    _setup_logging(config, verbose)

    try:
        result = parse_scenario(scenario_file, config=config)
    except (FileNotFoundError, ValueError) as e:
        output_error(str(e), command="validate", path=str(scenario_file))
        sys.exit(1)

    if result.scenario is None:
        for error in result.errors:
            click.echo(f"error: {error}")
        sys.exit(1)

    validation = validate_scenario(result.scenario)
    click.echo(str(validation))
    for error in result.errors:
        click.echo(f"error: {error}")
    for finding in validation.errors + validation.warnings:
        click.echo(f"{finding.severity}: {finding.path}: {finding.message}")
    for warning in result.warnings:
        click.echo(f"warning: {warning}")

    if not (result.success and validation.valid):
        sys.exit(1)


@main.command()
def syntax():
    """Print the DSL syntax reference."""
    click.echo(SYNTAX_REFERENCE)


def output_error(message: str, command: str = "parse", **extra):
    """Output error in the CLI JSON envelope."""
    output = {
        "success": False,
        "command": command,
        "data": extra or None,
        "message": message,
    }
    click.echo(json.dumps(output, ensure_ascii=False))


def _load_config_or_exit(config_path: Optional[Path], command: str) -> DslConfig:
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        extra = {"config": str(config_path)} if config_path else {}
        output_error(f"Failed to load config: {e}", command=command, **extra)
        sys.exit(1)


def _setup_logging(config: DslConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


if __name__ == "__main__":
    main()
