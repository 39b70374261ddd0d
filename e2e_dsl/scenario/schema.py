"""Scenario data models for E2E DSL scenarios.

Defines the dataclasses produced by the DSL parser and consumed by
validators, reporters and downstream executors.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .actions import TestAction, to_plain


class Priority(str, Enum):
    """Scenario priority levels."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class TestStep:
    """A single test step: one action plus its execution modifiers."""
    __test__ = False

    id: str
    description: str
    action: TestAction
    expected_outcome: Optional[str] = None
    timeout_ms: Optional[int] = None
    retry_count: int = 0
    continue_on_failure: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "action": self.action.to_dict(),
            "expected_outcome": self.expected_outcome,
            "timeout_ms": self.timeout_ms,
            "retry_count": self.retry_count,
            "continue_on_failure": self.continue_on_failure,
        }


@dataclass
class TestScenario:
    """A complete E2E test scenario."""
    __test__ = False

    id: str
    name: str
    description: str = ""
    start_url: str = ""
    steps: list[TestStep] = field(default_factory=list)
    tags: set[str] = field(default_factory=set)
    priority: Priority = Priority.MEDIUM

    @property
    def total_steps(self) -> int:
        """Total number of steps."""
        return len(self.steps)

    def to_dict(self) -> dict[str, Any]:
        """Convert scenario to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "start_url": self.start_url,
            "tags": to_plain(self.tags),
            "priority": self.priority.value,
            "steps": [step.to_dict() for step in self.steps],
        }


@dataclass
class DslError:
    """A parse error anchored to a source position."""
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "column": self.column, "message": self.message}


@dataclass
class DslParseResult:
    """Outcome of parsing one DSL document."""
    success: bool
    scenario: Optional[TestScenario] = None
    errors: list[DslError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "scenario": self.scenario.to_dict() if self.scenario else None,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": list(self.warnings),
        }


@dataclass
class ValidationError:
    """A single validation finding."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message, "severity": self.severity}


@dataclass
class ValidationResult:
    """Result of scenario validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }
