"""Coverage-related exceptions: registration, dumps, sources, grammar."""

from pathlib import Path

from .base import LimeCoverageError


class CoverageError(LimeCoverageError):
    """Base class for errors raised while building a coverage report."""

    pass


class RegistrationError(CoverageError):
    """Raised when a file or directory cannot be registered."""

    def __init__(self, path: Path, reason: str):
        super().__init__(reason, details={"path": str(path)})
        self.path = path
        self.reason = reason


class CoverageDataError(CoverageError):
    """Raised when a coverage dump cannot be read or has the wrong shape."""

    def __init__(self, source: Path, reason: str):
        super().__init__(
            f"Invalid coverage data: {source}",
            details={"source": str(source), "reason": reason},
        )
        self.source = source
        self.reason = reason


class SourceReadError(CoverageError):
    """Raised when a registered source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot read source file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class GrammarUnavailableError(LimeCoverageError):
    """Raised when the tree-sitter PHP grammar cannot be loaded."""

    def __init__(self, reason: str):
        super().__init__("PHP grammar is not available", details={"reason": reason})
        self.reason = reason
