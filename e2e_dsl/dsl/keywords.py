"""Keyword table for the E2E DSL.

All keyword matching goes through :func:`lookup_keyword`, which folds case
so ``continueOnFailure``, ``continueonfailure`` and ``CONTINUEONFAILURE``
resolve to the same member.
"""

from enum import Enum
from typing import Optional


class Keyword(str, Enum):
    """Every keyword the DSL understands, spelled in canonical form."""

    # Scenario structure
    SCENARIO = "scenario"
    DESCRIPTION = "description"
    URL = "url"
    TAGS = "tags"
    PRIORITY = "priority"
    STEP = "step"

    # Step modifiers
    EXPECT = "expect"
    TIMEOUT = "timeout"
    RETRY = "retry"
    CONTINUE_ON_FAILURE = "continueOnFailure"

    # Actions
    CLICK = "click"
    TYPE = "type"
    HOVER = "hover"
    SCROLL = "scroll"
    WAIT = "wait"
    PRESS_KEY = "pressKey"
    NAVIGATE = "navigate"
    GO_BACK = "goBack"
    GO_FORWARD = "goForward"
    REFRESH = "refresh"
    ASSERT = "assert"
    SELECT = "select"
    UPLOAD_FILE = "uploadFile"
    SCREENSHOT = "screenshot"

    # Action flags
    CLEAR_FIRST = "clearFirst"
    PRESS_ENTER = "pressEnter"
    FULL_PAGE = "fullPage"
    DOUBLE = "double"

    # Mouse buttons (left/right double as scroll directions)
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"

    # Scroll directions
    UP = "up"
    DOWN = "down"

    # Key modifiers
    CTRL = "ctrl"
    ALT = "alt"
    SHIFT = "shift"
    META = "meta"

    # Wait conditions
    DURATION = "duration"
    VISIBLE = "visible"
    HIDDEN = "hidden"
    ENABLED = "enabled"
    TEXT_PRESENT = "textPresent"
    URL_CONTAINS = "urlContains"
    PAGE_LOADED = "pageLoaded"
    NETWORK_IDLE = "networkIdle"

    # Assertions
    DISABLED = "disabled"
    CHECKED = "checked"
    UNCHECKED = "unchecked"
    TEXT_EQUALS = "textEquals"
    TEXT_CONTAINS = "textContains"
    ATTRIBUTE_EQUALS = "attributeEquals"
    HAS_CLASS = "hasClass"

    # Priorities
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    # Select options
    VALUE = "value"
    LABEL = "label"
    INDEX = "index"


_LOOKUP: dict[str, Keyword] = {kw.value.lower(): kw for kw in Keyword}

BOUNDARY_KEYWORDS = frozenset({
    Keyword.EXPECT,
    Keyword.TIMEOUT,
    Keyword.RETRY,
    Keyword.CONTINUE_ON_FAILURE,
})

ACTION_KEYWORDS = frozenset({
    Keyword.CLICK,
    Keyword.TYPE,
    Keyword.HOVER,
    Keyword.SCROLL,
    Keyword.WAIT,
    Keyword.PRESS_KEY,
    Keyword.NAVIGATE,
    Keyword.GO_BACK,
    Keyword.GO_FORWARD,
    Keyword.REFRESH,
    Keyword.ASSERT,
    Keyword.SELECT,
    Keyword.UPLOAD_FILE,
    Keyword.SCREENSHOT,
})


def lookup_keyword(text: str) -> Optional[Keyword]:
    """Resolve identifier text to a keyword, ignoring case.

    Returns None for identifiers that are not DSL keywords.
    """
    return _LOOKUP.get(text.lower())
