"""PHP tokenizer built on tree-sitter.

Parses PHP source with the tree-sitter-php grammar and flattens the syntax
tree into the ordered token stream the line classifier consumes. Leaves are
emitted in document order; the bytes between two leaves (whitespace, and
anything the grammar keeps hidden) become WHITESPACE or OTHER tokens, so
joining every token text gives back the original source.

Usage:
    lexer = PhpLexer()
    for token in lexer.tokenize(source):
        ...
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

import tree_sitter
import tree_sitter_php

from ..exceptions import GrammarUnavailableError
from ..logging_config import get_logger
from .tokens import (
    CLASS_KEYWORDS,
    STATEMENT_KEYWORDS,
    STATEMENT_OPERATORS,
    Token,
    TokenKind,
)

logger = get_logger(__name__)

# Leaf node types with a fixed kind.
_LEAF_KINDS: dict[str, TokenKind] = {
    "php_tag": TokenKind.OPEN_TAG,
    "php_end_tag": TokenKind.CLOSE_TAG,
    "comment": TokenKind.COMMENT,
    "text": TokenKind.INLINE_HTML,
    "{": TokenKind.OPEN_BRACE,
    "{$": TokenKind.CURLY_OPEN,
    "${": TokenKind.CURLY_OPEN,
    "}": TokenKind.CLOSE_BRACE,
    ";": TokenKind.SEMICOLON,
    "=": TokenKind.ASSIGN,
    "function": TokenKind.FUNCTION,
}
for _keyword in CLASS_KEYWORDS:
    _LEAF_KINDS[_keyword] = TokenKind.CLASS
for _keyword in STATEMENT_KEYWORDS | STATEMENT_OPERATORS:
    _LEAF_KINDS[_keyword] = TokenKind.STATEMENT

# Language constructs the grammar parses as plain names or cast types.
_NAMED_CONSTRUCTS = frozenset({"isset", "empty", "eval", "exit", "die", "unset", "list"})
_NAME_LEAF_TYPES = frozenset({"name", "cast_type"})

# Parents under which such a name is a declared or member identifier, never
# the construct itself (`const EMPTY`, `function isset()`, `A::isset()`).
_IDENTIFIER_PARENTS = frozenset(
    {
        "variable_name",
        "const_element",
        "method_declaration",
        "function_definition",
        "scoped_call_expression",
        "member_call_expression",
        "nullsafe_member_call_expression",
        "member_access_expression",
        "nullsafe_member_access_expression",
        "class_constant_access_expression",
        "scoped_property_access_expression",
        "named_type",
        "enum_case",
    }
)


def _load_language() -> Any:
    """Build the tree-sitter Language object for PHP."""
    try:
        return tree_sitter.Language(tree_sitter_php.language_php())
    except Exception as e:
        raise GrammarUnavailableError(str(e)) from e


def _leaves(root: Any) -> Iterator[Any]:
    """Yield the leaf nodes under root in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.child_count == 0:
            yield node
        else:
            stack.extend(reversed(node.children))


def leaf_kind(node_type: str, text: str, parent_type: Optional[str] = None) -> TokenKind:
    """Map a tree-sitter leaf to a token kind."""
    kind = _LEAF_KINDS.get(node_type)
    if kind is not None:
        return kind
    if parent_type in _IDENTIFIER_PARENTS:
        return TokenKind.OTHER
    if node_type in _NAME_LEAF_TYPES and text.strip().lower() in _NAMED_CONSTRUCTS:
        return TokenKind.STATEMENT
    return TokenKind.OTHER


def _gap_token(text: str) -> Token:
    kind = TokenKind.WHITESPACE if text.isspace() else TokenKind.OTHER
    return Token(kind, text)


class PhpLexer:
    """Reusable PHP tokenizer. The parser is created once per instance."""

    def __init__(self) -> None:
        self._language = _load_language()
        self._parser = tree_sitter.Parser(self._language)

    def tokenize(self, source: str) -> list[Token]:
        """Split PHP source into classified tokens.

        Args:
            source: Full text of one PHP file

        Returns:
            Tokens in document order; their texts concatenate to source
        """
        data = source.encode("utf-8")
        tree = self._parser.parse(data)
        if tree.root_node.has_error:
            logger.debug("Syntax errors in PHP source, tokenizing error nodes as-is")

        tokens: list[Token] = []
        cursor = 0
        for node in _leaves(tree.root_node):
            start = max(node.start_byte, cursor)
            end = node.end_byte
            if end <= start:
                continue
            if start > cursor:
                tokens.append(_gap_token(data[cursor:start].decode("utf-8", errors="replace")))
            text = data[start:end].decode("utf-8", errors="replace")
            parent = node.parent
            parent_type = parent.type if parent is not None else None
            tokens.append(Token(leaf_kind(node.type, text, parent_type), text))
            cursor = end

        if cursor < len(data):
            tokens.append(_gap_token(data[cursor:].decode("utf-8", errors="replace")))
        return tokens


_default_lexer: Optional[PhpLexer] = None


def tokenize(source: str) -> list[Token]:
    """Tokenize PHP source with a shared module-level lexer."""
    global _default_lexer
    if _default_lexer is None:
        _default_lexer = PhpLexer()
    return _default_lexer.tokenize(source)
