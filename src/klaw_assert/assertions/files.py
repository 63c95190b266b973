"""Filesystem existence assertions."""

from __future__ import annotations

import os

from klaw_assert.assertions._report import assertion, describe, fail
from klaw_assert.filesystem import Filesystem, LocalFilesystem
from klaw_assert.result import Err, Ok

__all__ = ['assert_file_exists', 'assert_file_not_exists']

_local = LocalFilesystem()


@assertion
def assert_file_exists(
    t: object,
    path: str | os.PathLike[str],
    *args: object,
    fs: Filesystem | None = None,
) -> None:
    """Fail unless ``path`` can be stat'ed.

    Args:
        t: Test context.
        path: Path to check.
        *args: Extra message fragments.
        fs: Filesystem to query; the local one by default.
    """
    match (fs or _local).stat(path):
        case Err(error):
            fail(t, 'assert_file_exists', f'{describe(path=os.fspath(path))}, err = {error}', args)
        case Ok(_):
            pass


@assertion
def assert_file_not_exists(
    t: object,
    path: str | os.PathLike[str],
    *args: object,
    fs: Filesystem | None = None,
) -> None:
    """Fail unless stat'ing ``path`` reports that it does not exist.

    Any other outcome fails, including a permission error, since that does
    not prove the path is absent.
    """
    match (fs or _local).stat(path):
        case Err(FileNotFoundError()):
            pass
        case Err(error):
            fail(t, 'assert_file_not_exists', f'{describe(path=os.fspath(path))}, err = {error}', args)
        case Ok(_):
            fail(t, 'assert_file_not_exists', f'{describe(path=os.fspath(path))}, err = None', args)
