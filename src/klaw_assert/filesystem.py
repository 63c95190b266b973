"""Filesystem collaborator used by the file existence assertions."""

from __future__ import annotations

import os
import pathlib
from typing import Protocol, runtime_checkable

from klaw_assert.guard import safe
from klaw_assert.result import Err, Ok

__all__ = ['Filesystem', 'LocalFilesystem']


@runtime_checkable
class Filesystem(Protocol):
    """Protocol for querying whether a path exists."""

    def stat(self, path: str | os.PathLike[str]) -> Ok[os.stat_result] | Err[OSError | ValueError]:
        """Stat ``path``; Err carries the OSError (FileNotFoundError when absent)."""
        ...


class LocalFilesystem:
    """The local filesystem, through ``pathlib``."""

    def stat(self, path: str | os.PathLike[str]) -> Ok[os.stat_result] | Err[OSError | ValueError]:
        return _stat(pathlib.Path(path))

    def __repr__(self) -> str:
        return 'LocalFilesystem()'


@safe(exceptions=(OSError, ValueError))
def _stat(path: pathlib.Path) -> os.stat_result:
    # ValueError: embedded null byte
    return path.stat()
