"""Per-parse state: diagnostics accumulators and the token cursor."""

from dataclasses import dataclass, field
from typing import Optional

from ..config import DslConfig
from ..scenario.schema import DslError
from .lexer import Token


@dataclass
class ParseContext:
    """Mutable state owned by a single ``parse`` call."""
    config: DslConfig = field(default_factory=DslConfig)
    errors: list[DslError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    line: int = 0
    column: int = 0

    def error(self, message: str, token: Optional[Token] = None) -> None:
        if token is not None:
            self.errors.append(DslError(token.line, token.column, message))
        else:
            self.errors.append(DslError(self.line, self.column, message))

    def warn(self, message: str, token: Optional[Token] = None) -> None:
        line = token.line if token is not None else self.line
        self.warnings.append(f"Line {line}: {message}")

    def track(self, token: Token) -> None:
        self.line = token.line
        self.column = token.column


class TokenStream:
    """Forward-only cursor over a token list.

    Every token handed out is recorded on the context so an unexpected
    failure can be reported at the last position reached.
    """

    def __init__(self, tokens: list[Token], context: ParseContext):
        self._tokens = tokens
        self._pos = 0
        self._context = context

    def has_next(self) -> bool:
        return self._pos < len(self._tokens)

    def peek(self) -> Optional[Token]:
        if not self.has_next():
            return None
        return self._tokens[self._pos]

    def next(self) -> Token:
        if not self.has_next():
            raise IndexError("Unexpected end of input")
        token = self._tokens[self._pos]
        self._pos += 1
        self._context.track(token)
        return token

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        if not self.has_next():
            raise StopIteration
        return self.next()
