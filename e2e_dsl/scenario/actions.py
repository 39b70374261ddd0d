"""Action model for E2E test steps.

Each step performs exactly one action. Actions, wait conditions and
assertions are closed sets of frozen dataclasses joined into ``Union``
aliases; every variant carries a ``type`` tag used by :meth:`to_dict`.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Optional, Union


class MouseButton(str, Enum):
    """Mouse button used by a click."""
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class ScrollDirection(str, Enum):
    """Direction of a scroll action."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class KeyModifier(str, Enum):
    """Modifier keys held during a key press."""
    CTRL = "ctrl"
    ALT = "alt"
    SHIFT = "shift"
    META = "meta"


DEFAULT_WAIT_TIMEOUT_MS = 5000
DEFAULT_WAIT_DURATION_MS = 1000
DEFAULT_SCROLL_AMOUNT = 300
DEFAULT_SCREENSHOT_NAME = "screenshot"


def to_plain(value: Any) -> Any:
    """Convert model values into JSON/YAML-safe builtins."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(to_plain(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class _Tagged:
    """Mixin giving variant dataclasses a tagged ``to_dict``."""
    kind: ClassVar[str] = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.kind}
        for f in fields(self):  # type: ignore[arg-type]
            data[f.name] = to_plain(getattr(self, f.name))
        return data


# Wait conditions

@dataclass(frozen=True)
class Duration(_Tagged):
    kind: ClassVar[str] = "duration"
    ms: int


@dataclass(frozen=True)
class ElementVisible(_Tagged):
    kind: ClassVar[str] = "element_visible"
    target_id: int


@dataclass(frozen=True)
class ElementHidden(_Tagged):
    kind: ClassVar[str] = "element_hidden"
    target_id: int


@dataclass(frozen=True)
class ElementEnabled(_Tagged):
    kind: ClassVar[str] = "element_enabled"
    target_id: int


@dataclass(frozen=True)
class TextPresent(_Tagged):
    kind: ClassVar[str] = "text_present"
    text: str


@dataclass(frozen=True)
class UrlContains(_Tagged):
    kind: ClassVar[str] = "url_contains"
    substring: str


@dataclass(frozen=True)
class PageLoaded(_Tagged):
    kind: ClassVar[str] = "page_loaded"
    timeout_ms: int = DEFAULT_WAIT_TIMEOUT_MS


@dataclass(frozen=True)
class NetworkIdle(_Tagged):
    kind: ClassVar[str] = "network_idle"
    timeout_ms: int = DEFAULT_WAIT_TIMEOUT_MS


WaitCondition = Union[
    Duration,
    ElementVisible,
    ElementHidden,
    ElementEnabled,
    TextPresent,
    UrlContains,
    PageLoaded,
    NetworkIdle,
]


# Assertions

@dataclass(frozen=True)
class Visible(_Tagged):
    kind: ClassVar[str] = "visible"


@dataclass(frozen=True)
class Hidden(_Tagged):
    kind: ClassVar[str] = "hidden"


@dataclass(frozen=True)
class Enabled(_Tagged):
    kind: ClassVar[str] = "enabled"


@dataclass(frozen=True)
class Disabled(_Tagged):
    kind: ClassVar[str] = "disabled"


@dataclass(frozen=True)
class Checked(_Tagged):
    kind: ClassVar[str] = "checked"


@dataclass(frozen=True)
class Unchecked(_Tagged):
    kind: ClassVar[str] = "unchecked"


@dataclass(frozen=True)
class TextEquals(_Tagged):
    kind: ClassVar[str] = "text_equals"
    text: str


@dataclass(frozen=True)
class TextContains(_Tagged):
    kind: ClassVar[str] = "text_contains"
    text: str


@dataclass(frozen=True)
class AttributeEquals(_Tagged):
    kind: ClassVar[str] = "attribute_equals"
    attribute: str
    value: str


@dataclass(frozen=True)
class HasClass(_Tagged):
    kind: ClassVar[str] = "has_class"
    class_name: str


AssertionType = Union[
    Visible,
    Hidden,
    Enabled,
    Disabled,
    Checked,
    Unchecked,
    TextEquals,
    TextContains,
    AttributeEquals,
    HasClass,
]


# Actions

@dataclass(frozen=True)
class Click(_Tagged):
    """Click an element."""
    kind: ClassVar[str] = "click"
    target_id: int
    button: MouseButton = MouseButton.LEFT
    click_count: int = 1


@dataclass(frozen=True)
class Type(_Tagged):
    """Type text into an element."""
    kind: ClassVar[str] = "type"
    target_id: int
    text: str
    clear_first: bool = False
    press_enter: bool = False


@dataclass(frozen=True)
class Hover(_Tagged):
    kind: ClassVar[str] = "hover"
    target_id: int


@dataclass(frozen=True)
class Scroll(_Tagged):
    """Scroll the page, or a single element when target_id is set."""
    kind: ClassVar[str] = "scroll"
    direction: ScrollDirection = ScrollDirection.DOWN
    amount: int = DEFAULT_SCROLL_AMOUNT
    target_id: Optional[int] = None


@dataclass(frozen=True)
class Wait(_Tagged):
    """Wait until a condition holds or timeout_ms elapses."""
    kind: ClassVar[str] = "wait"
    condition: WaitCondition
    timeout_ms: int = DEFAULT_WAIT_TIMEOUT_MS


@dataclass(frozen=True)
class PressKey(_Tagged):
    kind: ClassVar[str] = "press_key"
    key: str
    modifiers: frozenset[KeyModifier] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Navigate(_Tagged):
    kind: ClassVar[str] = "navigate"
    url: str


@dataclass(frozen=True)
class GoBack(_Tagged):
    kind: ClassVar[str] = "go_back"


@dataclass(frozen=True)
class GoForward(_Tagged):
    kind: ClassVar[str] = "go_forward"


@dataclass(frozen=True)
class Refresh(_Tagged):
    kind: ClassVar[str] = "refresh"


@dataclass(frozen=True)
class Assert(_Tagged):
    """Check a condition on an element."""
    kind: ClassVar[str] = "assert"
    target_id: int
    assertion: AssertionType = field(default_factory=Visible)


@dataclass(frozen=True)
class Select(_Tagged):
    """Pick a dropdown option by value, label and/or index."""
    kind: ClassVar[str] = "select"
    target_id: int
    value: Optional[str] = None
    label: Optional[str] = None
    index: Optional[int] = None


@dataclass(frozen=True)
class UploadFile(_Tagged):
    kind: ClassVar[str] = "upload_file"
    target_id: int
    file_path: str


@dataclass(frozen=True)
class Screenshot(_Tagged):
    kind: ClassVar[str] = "screenshot"
    name: str = DEFAULT_SCREENSHOT_NAME
    full_page: bool = False


TestAction = Union[
    Click,
    Type,
    Hover,
    Scroll,
    Wait,
    PressKey,
    Navigate,
    GoBack,
    GoForward,
    Refresh,
    Assert,
    Select,
    UploadFile,
    Screenshot,
]
