"""Scenario validator for the E2E DSL tool.

Validates parsed TestScenario objects against business rules the grammar
alone cannot express.
"""

from .actions import Duration, Navigate, Screenshot, Scroll, Select, Type, Wait
from .schema import TestScenario, TestStep, ValidationError, ValidationResult


def validate_scenario(scenario: TestScenario) -> ValidationResult:
    """Validate a parsed TestScenario.

    Checks:
    - Scenario metadata (name, start url)
    - Step modifiers (timeout, retry count)
    - Action arguments per action type

    Args:
        scenario: Parsed scenario to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    _validate_meta(scenario, errors, warnings)

    for i, step in enumerate(scenario.steps):
        path = f"steps[{i}]"
        _validate_step(step, path, errors)
        _validate_action(step, f"{path}.action", errors, warnings)

    # Warn if no steps
    if not scenario.steps:
        warnings.append(ValidationError(
            path="steps",
            message="No steps defined.",
            severity="warning",
        ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _validate_meta(
    scenario: TestScenario,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    """Validate scenario metadata."""
    if not scenario.name.strip():
        errors.append(ValidationError(
            path="name",
            message="'name' is required and must not be empty.",
        ))

    if not scenario.start_url:
        warnings.append(ValidationError(
            path="start_url",
            message="No start url set. The executor will start from its current page.",
            severity="warning",
        ))


def _validate_step(step: TestStep, path: str, errors: list[ValidationError]) -> None:
    if step.timeout_ms is not None and step.timeout_ms <= 0:
        errors.append(ValidationError(
            path=f"{path}.timeout_ms",
            message=f"Step timeout must be positive, got {step.timeout_ms}.",
        ))

    if step.retry_count < 0:
        errors.append(ValidationError(
            path=f"{path}.retry_count",
            message=f"Retry count must not be negative, got {step.retry_count}.",
        ))


def _validate_action(
    step: TestStep,
    path: str,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    """Type-specific action checks."""
    action = step.action

    if isinstance(action, Wait):
        if action.timeout_ms <= 0:
            errors.append(ValidationError(
                path=f"{path}.timeout_ms",
                message=f"'wait' timeout must be positive, got {action.timeout_ms}.",
            ))
        if isinstance(action.condition, Duration) and action.condition.ms <= 0:
            errors.append(ValidationError(
                path=f"{path}.condition.ms",
                message=f"'wait' duration must be positive, got {action.condition.ms}.",
            ))

    elif isinstance(action, Scroll):
        if action.amount <= 0:
            errors.append(ValidationError(
                path=f"{path}.amount",
                message=f"'scroll' amount must be positive, got {action.amount}.",
            ))

    elif isinstance(action, Navigate):
        if not action.url:
            errors.append(ValidationError(
                path=f"{path}.url",
                message="'navigate' step requires a non-empty url.",
            ))

    elif isinstance(action, Select):
        if action.index is not None and action.index < 0:
            errors.append(ValidationError(
                path=f"{path}.index",
                message=f"'select' index must not be negative, got {action.index}.",
            ))
        if action.value is None and action.label is None and action.index is None:
            warnings.append(ValidationError(
                path=path,
                message="'select' step has no value, label or index.",
                severity="warning",
            ))

    elif isinstance(action, Type):
        if not action.text:
            warnings.append(ValidationError(
                path=f"{path}.text",
                message="'type' step has empty text.",
                severity="warning",
            ))

    elif isinstance(action, Screenshot):
        if not action.name:
            warnings.append(ValidationError(
                path=f"{path}.name",
                message="'screenshot' step has no name.",
                severity="warning",
            ))
