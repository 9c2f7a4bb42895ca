"""Registry of the source files a coverage report covers."""

from __future__ import annotations

import glob
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Union

from .exceptions import RegistrationError
from .logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


class FileRegistry:
    """Ordered, duplicate-free set of absolute source file paths.

    Args:
        extension: Suffix of files collected from directories
        base_dir: Directory stripped from names returned by relative_name()
    """

    def __init__(self, extension: str = ".php", base_dir: PathLike = "") -> None:
        self.extension = extension
        self.base_dir = Path(base_dir).resolve() if base_dir else None
        self._files: dict[Path, None] = {}

    @property
    def files(self) -> list[Path]:
        return list(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return Path(path).resolve() in self._files

    def _add(self, path: Path) -> None:
        resolved = path.resolve()
        if resolved not in self._files:
            self._files[resolved] = None
            logger.debug("Registered %s", resolved)

    def register(self, files_or_directories: Union[PathLike, Iterable[PathLike]]) -> None:
        """Register files, and every matching file below directories.

        Raises:
            RegistrationError: If a path is neither a file nor a directory
        """
        if isinstance(files_or_directories, (str, os.PathLike)):
            files_or_directories = [files_or_directories]

        for entry in files_or_directories:
            path = Path(entry)
            if path.is_file():
                self._add(path)
            elif path.is_dir():
                self.register_dir(path)
            else:
                raise RegistrationError(
                    path, f'The file or directory "{path}" does not exist.'
                )

    def register_glob(self, pattern: str) -> None:
        """Register every file matching a glob pattern (``**`` recurses)."""
        for match in sorted(glob.glob(pattern, recursive=True)):
            path = Path(match)
            if path.is_file():
                self._add(path)

    def register_dir(self, directory: PathLike) -> None:
        """Register every file below directory whose name ends with the extension.

        Raises:
            RegistrationError: If directory is not a directory
        """
        root = Path(directory)
        if not root.is_dir():
            raise RegistrationError(root, f'The directory "{root}" does not exist.')

        found = sorted(
            path for path in root.rglob(f"*{self.extension}") if path.is_file()
        )
        for path in found:
            self._add(path)

    def relative_name(self, path: PathLike) -> str:
        """Display name: the path without the base directory and the extension."""
        name = str(Path(path).resolve())
        if self.base_dir is not None:
            prefix = f"{self.base_dir}{os.sep}"
            if name.startswith(prefix):
                name = name[len(prefix):]
        if name.endswith(self.extension):
            name = name[: -len(self.extension)]
        return name
