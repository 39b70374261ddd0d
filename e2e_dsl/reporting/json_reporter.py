"""JSON report generator for DSL parse results.

Generates structured reports from parse and validation results, plus the
compact envelope printed by the CLI.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from ..scenario.schema import DslParseResult, TestScenario, ValidationResult


class JsonReporter:
    """Generates JSON reports from parse results."""

    def generate(
        self,
        result: DslParseResult,
        source: str = "<inline>",
        validation: Optional[ValidationResult] = None,
    ) -> dict[str, Any]:
        """Generate a report from a parse result.

        Args:
            result: Outcome of parsing the scenario.
            source: Where the DSL text came from (file path or label).
            validation: Validation result, if the scenario was validated.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        passed = result.success and (validation is None or validation.valid)
        scenario = result.scenario

        report = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "source": source,
            "status": "passed" if passed else "failed",
            "summary": {
                "scenario": scenario.name if scenario else None,
                "steps": scenario.total_steps if scenario else 0,
                "errors": result.error_count,
                "warnings": result.warning_count,
                "validation_errors": validation.error_count if validation else 0,
                "validation_warnings": validation.warning_count if validation else 0,
            },
            "scenario": scenario.to_dict() if scenario else None,
            "errors": [e.to_dict() for e in result.errors],
            "warnings": list(result.warnings),
            "validation": validation.to_dict() if validation else None,
        }

        return report

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report dictionary.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def to_json_string(self, report: dict[str, Any], pretty: bool = True) -> str:
        """Convert report to JSON string."""
        if pretty:
            return json.dumps(report, indent=2, ensure_ascii=False)
        return json.dumps(report, ensure_ascii=False)

    def scenario_to_yaml(self, scenario: TestScenario) -> str:
        """Render a scenario as YAML."""
        return yaml.safe_dump(
            scenario.to_dict(),
            sort_keys=False,
            allow_unicode=True,
        )

    def generate_flow_output(
        self,
        report: dict[str, Any],
        command: str = "parse",
        report_path: Optional[str] = None,
    ) -> dict[str, Any]:
        """Generate the CLI JSON envelope.

        {
            "success": bool,
            "command": "parse",
            "data": { ... },
            "message": str
        }
        """
        summary = report["summary"]
        passed = report["status"] == "passed"

        data: dict[str, Any] = {
            "source": report["source"],
            "scenario": report["scenario"],
            "errors": report["errors"],
            "warnings": report["warnings"],
            "validation": report["validation"],
        }

        if report_path:
            data["report_path"] = report_path

        if passed:
            message = f"Parsed '{summary['scenario']}' with {summary['steps']} steps"
        elif summary["errors"]:
            first = report["errors"][0]
            message = f"{summary['errors']} parse errors (first at line {first['line']}: {first['message']})"
        else:
            message = f"{summary['validation_errors']} validation errors"

        return {
            "success": passed,
            "command": command,
            "data": data,
            "message": message,
        }
