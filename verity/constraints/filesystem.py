"""
Filesystem constraints. Values are paths given as str or os.PathLike.
"""

from __future__ import annotations

import os
from abc import abstractmethod
from pathlib import Path
from typing import Any

from .base import Constraint


def _as_path(value: Any) -> Path | None:
    if isinstance(value, (str, os.PathLike)) and str(value):
        return Path(value)
    return None


class _PathConstraint(Constraint):
    noun = "path"

    def matches(self, other: Any) -> bool:
        path = _as_path(other)
        return path is not None and self._check(path)

    @abstractmethod
    def _check(self, path: Path) -> bool:
        pass

    def failure_description(self, other: Any) -> str:
        if _as_path(other) is None:
            return super().failure_description(other)
        return f'{self.noun} "{os.fspath(other)}" {self.to_string()}'


class FileExists(_PathConstraint):
    """Path names an existing regular file."""

    noun = "file"

    def _check(self, path: Path) -> bool:
        return path.is_file()

    def to_string(self) -> str:
        return "exists"


class DirectoryExists(_PathConstraint):
    noun = "directory"

    def _check(self, path: Path) -> bool:
        return path.is_dir()

    def to_string(self) -> str:
        return "exists"


class IsReadable(_PathConstraint):
    def _check(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def to_string(self) -> str:
        return "is readable"


class IsWritable(_PathConstraint):
    def _check(self, path: Path) -> bool:
        return os.access(path, os.W_OK)

    def to_string(self) -> str:
        return "is writable"
