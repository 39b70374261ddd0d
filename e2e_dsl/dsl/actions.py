"""Action parsers for the E2E DSL.

Each parser receives the tokens following its action keyword (the span
computed by :func:`collect_until_boundary`) and returns a typed action, or
None when a required argument is missing.
"""

from typing import Callable, Optional

from ..scenario.actions import (
    DEFAULT_WAIT_DURATION_MS,
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
from .context import ParseContext
from .keywords import ACTION_KEYWORDS, BOUNDARY_KEYWORDS, Keyword
from .lexer import Token, TokenType

ActionParser = Callable[[list[Token], ParseContext], Optional[TestAction]]

# Boundary keywords an action may keep when they sit on its own line.
CLAIMED_KEYWORDS: dict[Keyword, frozenset[Keyword]] = {
    Keyword.WAIT: frozenset({Keyword.TIMEOUT}),
}


def collect_until_boundary(tokens: list[Token], start: int) -> tuple[list[Token], int]:
    """Collect an action span starting at ``tokens[start]``.

    The span runs up to, but not including, the next boundary keyword or
    the next action keyword. A boundary keyword claimed by the action (see
    ``CLAIMED_KEYWORDS``) stays in the span when it is on the same line as
    the action keyword.

    Returns:
        The span (action keyword first) and the index just past it.
    """
    head = tokens[start]
    claimed = CLAIMED_KEYWORDS.get(head.keyword, frozenset())
    span = [head]

    i = start + 1
    while i < len(tokens):
        token = tokens[i]
        keyword = token.keyword
        if keyword in ACTION_KEYWORDS:
            break
        if keyword in BOUNDARY_KEYWORDS:
            if keyword not in claimed or token.line != head.line:
                break
        span.append(token)
        i += 1

    return span, i


def parse_action(span: list[Token], ctx: ParseContext) -> Optional[TestAction]:
    """Dispatch an action span to the parser for its keyword."""
    if not span:
        return None

    head = span[0]
    parser = _ACTION_PARSERS.get(head.keyword)
    if parser is None:
        ctx.warn(f"Unknown action '{head.value}'", head)
        return None

    action = parser(span[1:], ctx)
    if action is None:
        ctx.warn(f"'{head.value}' action is missing required arguments", head)
    return action


def to_int(text: str) -> Optional[int]:
    """Parse an integer token value, returning None for decimals or junk."""
    try:
        return int(text)
    except ValueError:
        return None


def _first(tokens: list[Token], token_type: TokenType) -> Optional[Token]:
    return next((t for t in tokens if t.type == token_type), None)


def _target_id(tokens: list[Token]) -> Optional[int]:
    token = _first(tokens, TokenType.TARGET_ID)
    return to_int(token.value) if token else None


def token_after(tokens: list[Token], i: int, token_type: TokenType) -> Optional[Token]:
    """Return ``tokens[i + 1]`` if it exists and has the wanted type."""
    if i + 1 < len(tokens) and tokens[i + 1].type == token_type:
        return tokens[i + 1]
    return None


def _parse_click(args: list[Token], ctx: ParseContext) -> Optional[Click]:
    target_id = _target_id(args)
    if target_id is None:
        return None

    button = MouseButton.LEFT
    click_count = 1
    for token in args:
        keyword = token.keyword
        if keyword in (Keyword.LEFT, Keyword.RIGHT, Keyword.MIDDLE):
            button = MouseButton(keyword.value)
        elif keyword is Keyword.DOUBLE:
            click_count = 2

    return Click(target_id, button, click_count)


def _parse_type(args: list[Token], ctx: ParseContext) -> Optional[Type]:
    target_id = _target_id(args)
    text = _first(args, TokenType.STRING)
    if target_id is None or text is None:
        return None

    return Type(
        target_id=target_id,
        text=text.value,
        clear_first=any(t.is_keyword(Keyword.CLEAR_FIRST) for t in args),
        press_enter=any(t.is_keyword(Keyword.PRESS_ENTER) for t in args),
    )


def _parse_hover(args: list[Token], ctx: ParseContext) -> Optional[Hover]:
    target_id = _target_id(args)
    return Hover(target_id) if target_id is not None else None


def _parse_scroll(args: list[Token], ctx: ParseContext) -> Scroll:
    direction = ScrollDirection.DOWN
    amount = ctx.config.default_scroll_amount
    target_id = None

    for token in args:
        if token.type == TokenType.TARGET_ID:
            target_id = to_int(token.value)
        elif token.type == TokenType.NUMBER:
            value = to_int(token.value)
            amount = value if value is not None else ctx.config.default_scroll_amount
        elif token.keyword in (Keyword.UP, Keyword.DOWN, Keyword.LEFT, Keyword.RIGHT):
            direction = ScrollDirection(token.keyword.value)

    return Scroll(direction, amount, target_id)


_WAIT_ARGUMENT_CONDITIONS: dict[Keyword, tuple[TokenType, Callable]] = {
    Keyword.DURATION: (TokenType.NUMBER, Duration),
    Keyword.VISIBLE: (TokenType.TARGET_ID, ElementVisible),
    Keyword.HIDDEN: (TokenType.TARGET_ID, ElementHidden),
    Keyword.ENABLED: (TokenType.TARGET_ID, ElementEnabled),
    Keyword.TEXT_PRESENT: (TokenType.STRING, TextPresent),
    Keyword.URL_CONTAINS: (TokenType.STRING, UrlContains),
}

# These conditions take the action timeout, known only once the span is read.
_WAIT_TIMEOUT_CONDITIONS: dict[Keyword, Callable] = {
    Keyword.PAGE_LOADED: PageLoaded,
    Keyword.NETWORK_IDLE: NetworkIdle,
}


def _parse_wait(args: list[Token], ctx: ParseContext) -> Wait:
    condition: Optional[WaitCondition] = None
    deferred: Optional[Callable] = None
    timeout_ms = ctx.config.default_wait_timeout_ms

    i = 0
    while i < len(args):
        token = args[i]
        keyword = token.keyword

        if token.type == TokenType.NUMBER:
            ms = to_int(token.value)
            condition, deferred = Duration(ms if ms is not None else DEFAULT_WAIT_DURATION_MS), None
        elif keyword in _WAIT_ARGUMENT_CONDITIONS:
            arg_type, factory = _WAIT_ARGUMENT_CONDITIONS[keyword]
            arg = token_after(args, i, arg_type)
            if arg is not None:
                value = arg.value if arg_type == TokenType.STRING else to_int(arg.value)
                if value is None:
                    value = DEFAULT_WAIT_DURATION_MS
                condition, deferred = factory(value), None
                i += 1
        elif keyword in _WAIT_TIMEOUT_CONDITIONS:
            condition, deferred = None, _WAIT_TIMEOUT_CONDITIONS[keyword]
        elif keyword is Keyword.TIMEOUT:
            arg = token_after(args, i, TokenType.NUMBER)
            if arg is not None:
                value = to_int(arg.value)
                timeout_ms = value if value is not None else ctx.config.default_wait_timeout_ms
                i += 1
        i += 1

    if deferred is not None:
        condition = deferred(timeout_ms)
    elif condition is None:
        condition = Duration(DEFAULT_WAIT_DURATION_MS)

    return Wait(condition, timeout_ms)


_KEY_MODIFIERS = {
    Keyword.CTRL: KeyModifier.CTRL,
    Keyword.ALT: KeyModifier.ALT,
    Keyword.SHIFT: KeyModifier.SHIFT,
    Keyword.META: KeyModifier.META,
}


def _parse_press_key(args: list[Token], ctx: ParseContext) -> Optional[PressKey]:
    key = _first(args, TokenType.STRING)
    if key is None or not key.value:
        return None

    modifiers = frozenset(
        _KEY_MODIFIERS[t.keyword] for t in args if t.keyword in _KEY_MODIFIERS
    )
    return PressKey(key.value, modifiers)


def _parse_navigate(args: list[Token], ctx: ParseContext) -> Optional[Navigate]:
    url = _first(args, TokenType.STRING)
    return Navigate(url.value) if url is not None else None


_FLAG_ASSERTIONS: dict[Keyword, Callable[[], AssertionType]] = {
    Keyword.VISIBLE: Visible,
    Keyword.HIDDEN: Hidden,
    Keyword.ENABLED: Enabled,
    Keyword.DISABLED: Disabled,
    Keyword.CHECKED: Checked,
    Keyword.UNCHECKED: Unchecked,
}

_TEXT_ASSERTIONS: dict[Keyword, Callable[[str], AssertionType]] = {
    Keyword.TEXT_EQUALS: TextEquals,
    Keyword.TEXT_CONTAINS: TextContains,
    Keyword.HAS_CLASS: HasClass,
}


def _parse_assert(args: list[Token], ctx: ParseContext) -> Optional[Assert]:
    target_id = _target_id(args)
    if target_id is None:
        return None

    assertion: AssertionType = Visible()
    i = 0
    while i < len(args):
        keyword = args[i].keyword
        if keyword in _FLAG_ASSERTIONS:
            assertion = _FLAG_ASSERTIONS[keyword]()
        elif keyword in _TEXT_ASSERTIONS:
            arg = token_after(args, i, TokenType.STRING)
            if arg is not None:
                assertion = _TEXT_ASSERTIONS[keyword](arg.value)
                i += 1
        elif keyword is Keyword.ATTRIBUTE_EQUALS:
            attribute = token_after(args, i, TokenType.STRING)
            value = token_after(args, i + 1, TokenType.STRING)
            if attribute is not None and value is not None:
                assertion = AttributeEquals(attribute.value, value.value)
                i += 2
        i += 1

    return Assert(target_id, assertion)


def _parse_select(args: list[Token], ctx: ParseContext) -> Optional[Select]:
    target_id = _target_id(args)
    if target_id is None:
        return None

    value = label = None
    index = None
    i = 0
    while i < len(args):
        keyword = args[i].keyword
        if keyword in (Keyword.VALUE, Keyword.LABEL):
            arg = token_after(args, i, TokenType.STRING)
            if arg is not None:
                if keyword is Keyword.VALUE:
                    value = arg.value
                else:
                    label = arg.value
                i += 1
        elif keyword is Keyword.INDEX:
            arg = token_after(args, i, TokenType.NUMBER)
            if arg is not None:
                index = to_int(arg.value)
                i += 1
        i += 1

    return Select(target_id, value=value, label=label, index=index)


def _parse_upload_file(args: list[Token], ctx: ParseContext) -> Optional[UploadFile]:
    target_id = _target_id(args)
    path = _first(args, TokenType.STRING)
    if target_id is None or path is None or not path.value:
        return None
    return UploadFile(target_id, path.value)


def _parse_screenshot(args: list[Token], ctx: ParseContext) -> Screenshot:
    name = _first(args, TokenType.STRING)
    return Screenshot(
        name=name.value if name is not None else ctx.config.default_screenshot_name,
        full_page=any(t.is_keyword(Keyword.FULL_PAGE) for t in args),
    )


_ACTION_PARSERS: dict[Keyword, ActionParser] = {
    Keyword.CLICK: _parse_click,
    Keyword.TYPE: _parse_type,
    Keyword.HOVER: _parse_hover,
    Keyword.SCROLL: _parse_scroll,
    Keyword.WAIT: _parse_wait,
    Keyword.PRESS_KEY: _parse_press_key,
    Keyword.NAVIGATE: _parse_navigate,
    Keyword.GO_BACK: lambda args, ctx: GoBack(),
    Keyword.GO_FORWARD: lambda args, ctx: GoForward(),
    Keyword.REFRESH: lambda args, ctx: Refresh(),
    Keyword.ASSERT: _parse_assert,
    Keyword.SELECT: _parse_select,
    Keyword.UPLOAD_FILE: _parse_upload_file,
    Keyword.SCREENSHOT: _parse_screenshot,
}

