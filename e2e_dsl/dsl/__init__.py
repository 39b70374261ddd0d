"""DSL module - tokenizer and parser."""

from .keywords import Keyword, lookup_keyword
from .lexer import Token, TokenType, tokenize
from .parser import E2EDslParser, parse
from .reference import SYNTAX_REFERENCE

__all__ = [
    "Keyword",
    "lookup_keyword",
    "Token",
    "TokenType",
    "tokenize",
    "E2EDslParser",
    "parse",
    "SYNTAX_REFERENCE",
]
