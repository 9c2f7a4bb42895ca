"""Token model shared by the PHP lexer and the line classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical categories the line classifier distinguishes."""

    WHITESPACE = "whitespace"
    OPEN_TAG = "open_tag"
    CLOSE_TAG = "close_tag"
    COMMENT = "comment"
    INLINE_HTML = "inline_html"
    OPEN_BRACE = "open_brace"
    CURLY_OPEN = "curly_open"  # "{$" / "${" inside interpolated strings
    CLOSE_BRACE = "close_brace"
    SEMICOLON = "semicolon"
    ASSIGN = "assign"  # plain "=" only
    CLASS = "class"
    FUNCTION = "function"
    STATEMENT = "statement"
    OTHER = "other"


# Kinds whose text is pure layout: they only move the line cursor.
LAYOUT_KINDS = frozenset(
    {
        TokenKind.WHITESPACE,
        TokenKind.OPEN_TAG,
        TokenKind.CLOSE_TAG,
        TokenKind.COMMENT,
    }
)


@dataclass(frozen=True)
class Token:
    """A classified lexical unit of PHP source.

    Attributes:
        kind: Category used by the classifier
        text: Exact source text of the token (may span several lines)
    """

    kind: TokenKind
    text: str

    @property
    def newlines(self) -> int:
        """Number of line breaks embedded in the token text."""
        return self.text.count("\n")


# Keywords and operators that mark their line as executable wherever they occur.
STATEMENT_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "catch",
        "clone",
        "continue",
        "declare",
        "default",
        "do",
        "echo",
        "elseif",
        "empty",
        "enddeclare",
        "endfor",
        "endforeach",
        "endif",
        "endswitch",
        "endwhile",
        "eval",
        "exit",
        "die",
        "for",
        "foreach",
        "global",
        "if",
        "include",
        "include_once",
        "instanceof",
        "isset",
        "list",
        "new",
        "print",
        "require",
        "require_once",
        "return",
        "switch",
        "throw",
        "try",
        "unset",
        "use",
        "while",
        "and",
        "or",
        "xor",
    }
)

STATEMENT_OPERATORS = frozenset(
    {
        # increment / decrement
        "++",
        "--",
        # compound assignment
        "&=",
        ".=",
        "/=",
        "-=",
        "%=",
        "*=",
        "+=",
        "|=",
        "^=",
        "<<=",
        ">>=",
        "??=",
        "**=",
        # comparison and logic
        "==",
        ">=",
        "===",
        "!=",
        "<>",
        "!==",
        "<=",
        "&&",
        "||",
        "<<",
        ">>",
        # member access
        "->",
        "?->",
    }
)

# Keywords opening a class-like body whose direct "=" are declarations.
CLASS_KEYWORDS = frozenset({"class", "interface", "trait", "enum"})
