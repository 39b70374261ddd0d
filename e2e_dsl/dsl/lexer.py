"""Tokenizer for the E2E DSL.

Turns raw script text into a flat list of line-tagged tokens. Tokenizing
never fails: malformed input just yields fewer (or oddly shaped) tokens,
which the parser reports on later.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .keywords import Keyword, lookup_keyword


class TokenType(str, Enum):
    """Token categories produced by the tokenizer."""
    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    TARGET_ID = "target_id"
    ARRAY = "array"
    BRACE_OPEN = "brace_open"
    BRACE_CLOSE = "brace_close"


@dataclass(frozen=True)
class Token:
    """A single lexical token with its 1-based line and 0-based column."""
    type: TokenType
    value: str
    line: int
    column: int

    @property
    def keyword(self) -> Optional[Keyword]:
        """The keyword this token spells, or None for non-keywords."""
        if self.type != TokenType.KEYWORD:
            return None
        return lookup_keyword(self.value)

    def is_keyword(self, *keywords: Keyword) -> bool:
        return self.keyword in keywords


_ESCAPES = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}


def tokenize(lines: Iterable[str]) -> list[Token]:
    """Tokenize source lines into a single token list."""
    tokens: list[Token] = []
    for line_num, line in enumerate(lines, start=1):
        tokens.extend(tokenize_line(line, line_num))
    return tokens


def tokenize_line(line: str, line_num: int) -> list[Token]:
    """Tokenize one source line."""
    tokens: list[Token] = []

    trimmed = line.strip()
    if not trimmed or trimmed.startswith("//") or trimmed.startswith("#"):
        return tokens

    i = 0
    length = len(line)
    while i < length:
        ch = line[i]
        nxt = line[i + 1] if i + 1 < length else ""

        if ch.isspace():
            i += 1
        elif ch == '"':
            value, end = _read_string(line, i)
            tokens.append(Token(TokenType.STRING, value, line_num, i))
            i = end
        elif ch == "#" and _is_digit(nxt):
            value, end = _read_digits(line, i + 1)
            tokens.append(Token(TokenType.TARGET_ID, value, line_num, i))
            i = end
        elif ch == "[":
            value, end = _read_array(line, i)
            tokens.append(Token(TokenType.ARRAY, value, line_num, i))
            i = end
        elif ch == "{":
            tokens.append(Token(TokenType.BRACE_OPEN, ch, line_num, i))
            i += 1
        elif ch == "}":
            tokens.append(Token(TokenType.BRACE_CLOSE, ch, line_num, i))
            i += 1
        elif _is_digit(ch) or (ch == "-" and _is_digit(nxt)):
            value, end = _read_number(line, i)
            tokens.append(Token(TokenType.NUMBER, value, line_num, i))
            i = end
        elif ch.isalpha() or ch == "_":
            value, end = _read_word(line, i)
            tokens.append(Token(TokenType.KEYWORD, value, line_num, i))
            i = end
        else:
            i += 1

    return tokens


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in "0123456789"


def _read_string(line: str, start: int) -> tuple[str, int]:
    """Read a quoted string starting at the opening quote.

    Returns the unescaped text and the index just past the closing quote
    (or the end of the line when the string is unterminated).
    """
    chars: list[str] = []
    i = start + 1
    while i < len(line) and line[i] != '"':
        if line[i] == "\\" and i + 1 < len(line):
            escaped = line[i + 1]
            chars.append(_ESCAPES.get(escaped, escaped))
            i += 2
        else:
            chars.append(line[i])
            i += 1
    return "".join(chars), min(i + 1, len(line))


def _read_digits(line: str, start: int) -> tuple[str, int]:
    i = start
    while i < len(line) and _is_digit(line[i]):
        i += 1
    return line[start:i], i


def _read_array(line: str, start: int) -> tuple[str, int]:
    """Copy a bracketed literal verbatim, honoring nested brackets."""
    depth = 1
    i = start + 1
    while i < len(line) and depth > 0:
        if line[i] == "[":
            depth += 1
        elif line[i] == "]":
            depth -= 1
        i += 1
    return line[start:i], i


def _read_number(line: str, start: int) -> tuple[str, int]:
    i = start + 1 if line[start] == "-" else start
    seen_dot = False
    while i < len(line):
        ch = line[i]
        if _is_digit(ch):
            i += 1
        elif ch == "." and not seen_dot:
            seen_dot = True
            i += 1
        else:
            break
    return line[start:i], i


def _read_word(line: str, start: int) -> tuple[str, int]:
    i = start
    while i < len(line) and (line[i].isalnum() or line[i] == "_"):
        i += 1
    return line[start:i], i
