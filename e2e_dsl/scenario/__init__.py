"""Scenario module - test model and validation."""

from .actions import (
    Assert,
    AssertionType,
    AttributeEquals,
    Checked,
    Click,
    Disabled,
    Duration,
    ElementEnabled,
    ElementHidden,
    ElementVisible,
    Enabled,
    GoBack,
    GoForward,
    HasClass,
    Hidden,
    Hover,
    KeyModifier,
    MouseButton,
    Navigate,
    NetworkIdle,
    PageLoaded,
    PressKey,
    Refresh,
    Screenshot,
    Scroll,
    ScrollDirection,
    Select,
    TestAction,
    TextContains,
    TextEquals,
    TextPresent,
    Type,
    Unchecked,
    UploadFile,
    UrlContains,
    Visible,
    Wait,
    WaitCondition,
)
from .schema import (
    DslError,
    DslParseResult,
    Priority,
    TestScenario,
    TestStep,
    ValidationError,
    ValidationResult,
)
from .validator import validate_scenario

__all__ = [
    "Assert",
    "AssertionType",
    "AttributeEquals",
    "Checked",
    "Click",
    "Disabled",
    "Duration",
    "ElementEnabled",
    "ElementHidden",
    "ElementVisible",
    "Enabled",
    "GoBack",
    "GoForward",
    "HasClass",
    "Hidden",
    "Hover",
    "KeyModifier",
    "MouseButton",
    "Navigate",
    "NetworkIdle",
    "PageLoaded",
    "PressKey",
    "Refresh",
    "Screenshot",
    "Scroll",
    "ScrollDirection",
    "Select",
    "TestAction",
    "TextContains",
    "TextEquals",
    "TextPresent",
    "Type",
    "Unchecked",
    "UploadFile",
    "UrlContains",
    "Visible",
    "Wait",
    "WaitCondition",
    "DslError",
    "DslParseResult",
    "Priority",
    "TestScenario",
    "TestStep",
    "ValidationError",
    "ValidationResult",
    "validate_scenario",
]
