"""Executable-line classification for PHP source.

A line profiler reports hit counts for every opcode boundary it sees,
including lines that can never register as a statement: blank lines,
comments, lone braces, property defaults. The classifier decides from the
token stream alone which lines hold a statement-level construct and drops
the counts for every other line.

The scan is a single pass over the tokens with a small amount of state:

    - a line cursor, advanced by the newlines inside each token
    - the brace depth
    - the depth at which the last ``class`` and ``function`` keywords were
      seen (``None`` when not inside one)
    - whether we are between ``function`` and the next ``{`` or ``;``,
      i.e. inside a parameter list

Scope markers hold a single depth each, not a stack. A closure nested in a
method overwrites the method's marker and closes it early, so the rest of
that method body is under-marked. Unbalanced braces leave markers set for
the rest of the file. Both are accepted limitations of the heuristic.

Example:
    >>> result = classify("<?php\\n$a = 1;\\n// done\\n", {2: 1, 3: 1})
    >>> sorted(result.lines)
    [2]
    >>> result.coverage
    {2: 1}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional

from .scanning.lexer import tokenize
from .scanning.tokens import LAYOUT_KINDS, Token, TokenKind


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one file.

    Attributes:
        coverage: Input coverage restricted to executable lines
        lines: Line numbers (1-based) holding a statement
    """

    coverage: dict[int, int]
    lines: frozenset[int]

    def __iter__(self):
        # Allows ``coverage, lines = classify(...)``
        yield self.coverage
        yield self.lines


class LineClassifier:
    """Token-driven state machine collecting executable lines."""

    def __init__(self) -> None:
        self.line = 1
        self.depth = 0
        self.class_depth: Optional[int] = None
        self.function_depth: Optional[int] = None
        self.in_declaration = False
        self.executable: set[int] = set()

    def scan(self, tokens: Iterable[Token]) -> frozenset[int]:
        """Consume every token once, in order, and return the executable lines."""
        for token in tokens:
            self.feed(token)
        return frozenset(self.executable)

    def feed(self, token: Token) -> None:
        kind = token.kind

        if kind in LAYOUT_KINDS:
            self.line += token.newlines
            return

        if kind is TokenKind.OPEN_BRACE or kind is TokenKind.CURLY_OPEN:
            self.depth += 1
            self.in_declaration = False
        elif kind is TokenKind.SEMICOLON:
            self.in_declaration = False
        elif kind is TokenKind.CLOSE_BRACE:
            self.depth -= 1
            if self.depth == self.class_depth:
                self.class_depth = None
            if self.depth == self.function_depth:
                self.function_depth = None
        elif kind is TokenKind.CLASS:
            self.class_depth = self.depth
        elif kind is TokenKind.FUNCTION:
            self.function_depth = self.depth
            self.in_declaration = True
        elif kind is TokenKind.ASSIGN:
            # Class-body defaults and parameter defaults are declarations
            if self.class_depth is None or (
                self.function_depth is not None and not self.in_declaration
            ):
                self.executable.add(self.line)
        elif kind is TokenKind.STATEMENT:
            self.executable.add(self.line)

        # Strings, heredocs and inline HTML may span lines too
        self.line += token.newlines


def filter_coverage(coverage: Mapping[int, int], lines: Iterable[int]) -> dict[int, int]:
    """Keep only the coverage entries whose line is in lines.

    Counts are never changed and no entry is added.
    """
    keep = lines if isinstance(lines, (set, frozenset)) else set(lines)
    return {line: count for line, count in coverage.items() if line in keep}


def classify_tokens(
    tokens: Iterable[Token], coverage: Mapping[int, int]
) -> ClassificationResult:
    """Classify an already tokenized file."""
    lines = LineClassifier().scan(tokens)
    return ClassificationResult(coverage=filter_coverage(coverage, lines), lines=lines)


def classify(source: str, coverage: Mapping[int, int]) -> ClassificationResult:
    """Classify PHP source and filter its coverage map.

    Args:
        source: Full text of one PHP file
        coverage: Line number (1-based) to hit count

    Returns:
        ClassificationResult with the filtered coverage and executable lines
    """
    return classify_tokens(tokenize(source), coverage)
