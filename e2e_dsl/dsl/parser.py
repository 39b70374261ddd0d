"""Parser for the E2E DSL.

Converts DSL text into a :class:`TestScenario`. The parser is lenient: it
extracts whatever it can, records problems as errors or warnings on the
result, and never raises to the caller.
"""

import logging
import time
import uuid
from typing import Optional

from ..config import DslConfig
from ..scenario.actions import TestAction
from ..scenario.schema import DslError, DslParseResult, Priority, TestScenario, TestStep
from .actions import collect_until_boundary, parse_action, to_int, token_after
from .context import ParseContext, TokenStream
from .keywords import Keyword
from .lexer import Token, TokenType, tokenize

logger = logging.getLogger(__name__)

_PRIORITIES = {
    Keyword.CRITICAL: Priority.CRITICAL,
    Keyword.HIGH: Priority.HIGH,
    Keyword.MEDIUM: Priority.MEDIUM,
    Keyword.LOW: Priority.LOW,
}


class E2EDslParser:
    """Parses E2E DSL text into test scenarios.

    The instance only holds configuration; diagnostics are collected in a
    fresh :class:`ParseContext` per call, so one parser can be reused.
    """

    def __init__(self, config: Optional[DslConfig] = None):
        self.config = config or DslConfig()

    def parse(self, dsl: str) -> DslParseResult:
        """Parse DSL text.

        Args:
            dsl: Complete DSL document.

        Returns:
            DslParseResult. ``success`` is True only when a scenario was
            produced without errors; a scenario with dropped steps is still
            returned next to the errors explaining them.
        """
        ctx = ParseContext(config=self.config)

        try:
            tokens = tokenize(dsl.splitlines())
            logger.debug("Tokenized DSL into %d tokens", len(tokens))
            scenario = self._parse_scenario(TokenStream(tokens, ctx), ctx)
        except Exception as e:
            logger.debug("Unexpected error while parsing DSL", exc_info=True)
            ctx.errors.append(DslError(ctx.line, ctx.column, str(e) or "Unknown parse error"))
            return DslParseResult(
                success=False,
                errors=list(ctx.errors),
                warnings=list(ctx.warnings),
            )

        logger.debug(
            "Parsed scenario %r: %d steps, %d errors, %d warnings",
            scenario.name if scenario else None,
            scenario.total_steps if scenario else 0,
            len(ctx.errors),
            len(ctx.warnings),
        )
        return DslParseResult(
            success=scenario is not None and not ctx.errors,
            scenario=scenario,
            errors=list(ctx.errors),
            warnings=list(ctx.warnings),
        )

    def _parse_scenario(self, stream: TokenStream, ctx: ParseContext) -> Optional[TestScenario]:
        name = ""
        description = ""
        start_url = ""
        tags: set[str] = set()
        priority = Priority.MEDIUM
        steps: list[TestStep] = []
        step_index = 0

        for token in stream:
            keyword = token.keyword
            if keyword is None:
                continue

            if keyword is Keyword.SCENARIO:
                value = _next_of(stream, TokenType.STRING)
                if value is None:
                    continue
                if name:
                    ctx.warn(f"Ignoring additional scenario '{value.value}'", token)
                else:
                    name = value.value
            elif keyword is Keyword.DESCRIPTION:
                value = _next_of(stream, TokenType.STRING)
                if value is not None:
                    description = value.value
            elif keyword is Keyword.URL:
                value = _next_of(stream, TokenType.STRING)
                if value is not None:
                    start_url = value.value
            elif keyword is Keyword.TAGS:
                value = _next_of(stream, TokenType.ARRAY)
                if value is not None:
                    tags = parse_tags(value.value)
            elif keyword is Keyword.PRIORITY:
                value = _next_of(stream, TokenType.KEYWORD)
                if value is not None:
                    priority = self._parse_priority(value, ctx)
            elif keyword is Keyword.STEP:
                step = self._parse_step(stream, ctx, token, step_index)
                step_index += 1
                if step is not None:
                    steps.append(step)

        if not name:
            ctx.errors.append(DslError(1, 0, "Scenario name is required"))
            return None

        return TestScenario(
            id=f"scenario_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}",
            name=name,
            description=description,
            start_url=start_url,
            steps=steps,
            tags=tags,
            priority=priority,
        )

    def _parse_step(
        self,
        stream: TokenStream,
        ctx: ParseContext,
        step_token: Token,
        index: int,
    ) -> Optional[TestStep]:
        """Parse one step; the stream is positioned just after ``step``."""
        description = ""
        peeked = stream.peek()
        if peeked is not None and peeked.type == TokenType.STRING:
            description = stream.next().value

        body, closed = self._read_step_body(stream)
        if not closed:
            ctx.warn(f"Step '{description}' is missing its closing brace", step_token)

        action: Optional[TestAction] = None
        expected_outcome: Optional[str] = None
        timeout_ms: Optional[int] = None
        retry_count = 0
        continue_on_failure = False

        i = 0
        while i < len(body):
            token = body[i]
            keyword = token.keyword
            if token.type != TokenType.KEYWORD:
                i += 1
                continue

            if keyword is Keyword.EXPECT:
                value = token_after(body, i, TokenType.STRING)
                if value is not None:
                    expected_outcome = value.value
                    i += 1
                i += 1
            elif keyword is Keyword.TIMEOUT:
                value = token_after(body, i, TokenType.NUMBER)
                if value is not None:
                    timeout_ms = to_int(value.value)
                    i += 1
                i += 1
            elif keyword is Keyword.RETRY:
                value = token_after(body, i, TokenType.NUMBER)
                if value is not None:
                    retry_count = to_int(value.value) or 0
                    if retry_count < 0:
                        ctx.warn(f"Step '{description}' has negative retry count; using 0", value)
                        retry_count = 0
                    i += 1
                i += 1
            elif keyword is Keyword.CONTINUE_ON_FAILURE:
                continue_on_failure = True
                i += 1
            else:
                span, i = collect_until_boundary(body, i)
                if action is None:
                    action = parse_action(span, ctx)
                else:
                    ctx.warn(
                        f"Step '{description}' already has an action; ignoring '{token.value}'",
                        token,
                    )

        if action is None:
            ctx.error(f"Step '{description}' has no action", step_token)
            return None

        return TestStep(
            id=f"step_{index}",
            description=description,
            action=action,
            expected_outcome=expected_outcome,
            timeout_ms=timeout_ms,
            retry_count=retry_count,
            continue_on_failure=continue_on_failure,
        )

    def _read_step_body(self, stream: TokenStream) -> tuple[list[Token], bool]:
        """Collect the tokens between a step's braces.

        Returns the body tokens and whether the closing brace was found.
        """
        body: list[Token] = []
        depth = 0
        found_open = False

        while stream.has_next():
            peeked = stream.peek()
            if not found_open and peeked.is_keyword(Keyword.STEP):
                # No body at all; leave the next step alone.
                return body, False

            token = stream.next()
            if token.type == TokenType.BRACE_OPEN:
                found_open = True
                depth += 1
            elif token.type == TokenType.BRACE_CLOSE:
                if not found_open:
                    return body, True
                depth -= 1
                if depth == 0:
                    return body, True
            elif found_open:
                body.append(token)

        return body, False

    def _parse_priority(self, token: Token, ctx: ParseContext) -> Priority:
        priority = _PRIORITIES.get(token.keyword)
        if priority is None:
            ctx.warn(f"Unknown priority '{token.value}', defaulting to medium", token)
            return Priority.MEDIUM
        return priority


def parse_tags(raw: str) -> set[str]:
    """Split a raw ``["a", "b"]`` array literal into a set of tags."""
    inner = raw
    if inner.startswith("[") and inner.endswith("]"):
        inner = inner[1:-1]
    elif inner.startswith("["):
        inner = inner[1:]

    tags = set()
    for part in inner.split(","):
        tag = part.strip()
        if len(tag) >= 2 and tag.startswith('"') and tag.endswith('"'):
            tag = tag[1:-1]
        if tag:
            tags.add(tag)
    return tags


def parse(dsl: str, config: Optional[DslConfig] = None) -> DslParseResult:
    """Parse DSL text with a throwaway parser."""
    return E2EDslParser(config).parse(dsl)


def _next_of(stream: TokenStream, token_type: TokenType) -> Optional[Token]:
    """Consume the next token if it has the wanted type.

    A following `step` keyword is never taken as a field value.
    """
    token = stream.peek()
    if token is None or token.type != token_type or token.is_keyword(Keyword.STEP):
        return None
    return stream.next()
