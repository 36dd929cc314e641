"""Read-only filesystem probes used by the path and danger engines.

Directory listing goes through :class:`DirectoryLister` so callers (and
tests) can swap the platform implementation. Only immediate entries are
ever listed; nothing here recurses.
"""

from __future__ import annotations

import logging
import os
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirEntryInfo:
    """Name, type and size of one immediate directory entry."""

    name: str
    is_dir: bool = False
    is_file: bool = False
    is_symlink: bool = False
    size: int = 0


class DirectoryLister(ABC):
    """Capability: list the immediate entries of a directory."""

    @abstractmethod
    def entries(self, path: str) -> Iterator[DirEntryInfo]:
        """Yield entries lazily in platform iteration order.

        Raises ``OSError`` when the directory cannot be opened; callers
        decide how to degrade.
        """
        ...


class ScandirLister(DirectoryLister):
    """``os.scandir`` backed lister (POSIX ``opendir`` / Windows ``FindFirstFile``)."""

    def entries(self, path: str) -> Iterator[DirEntryInfo]:
        with os.scandir(path) as it:
            for entry in it:
                yield _describe(entry)


def _describe(entry: os.DirEntry) -> DirEntryInfo:
    try:
        is_symlink = entry.is_symlink()
        is_dir = entry.is_dir(follow_symlinks=False)
        is_file = entry.is_file(follow_symlinks=False)
        size = entry.stat(follow_symlinks=False).st_size if is_file else 0
    except OSError:
        logger.debug("Could not stat %s", entry.path, exc_info=True)
        return DirEntryInfo(name=entry.name)
    return DirEntryInfo(
        name=entry.name,
        is_dir=is_dir,
        is_file=is_file,
        is_symlink=is_symlink,
        size=size,
    )


_default_lister: DirectoryLister = ScandirLister()


def default_lister() -> DirectoryLister:
    return _default_lister


def stat_target(path: str) -> os.stat_result | None:
    """``os.stat`` that degrades to ``None`` on any filesystem error."""
    try:
        return os.stat(path)
    except (OSError, ValueError):
        logger.debug("Could not stat %s", path, exc_info=True)
        return None


def is_symlink(path: str) -> bool:
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except (OSError, ValueError):
        return False


def path_exists(path: str) -> bool:
    return os.path.exists(path)


def owner_writable(path: str, st: os.stat_result) -> bool:
    """Owner-write bit on POSIX; the read-only attribute on Windows."""
    if os.name == "nt":
        return os.access(path, os.W_OK)
    return bool(st.st_mode & stat.S_IWUSR)


def world_writable(st: os.stat_result) -> bool:
    if os.name == "nt":
        return False
    return bool(st.st_mode & stat.S_IWOTH)
