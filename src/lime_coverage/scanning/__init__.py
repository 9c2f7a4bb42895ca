"""PHP source tokenization."""

from .lexer import PhpLexer, tokenize
from .tokens import Token, TokenKind

__all__ = ["PhpLexer", "Token", "TokenKind", "tokenize"]
