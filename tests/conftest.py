"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from shark.magic.fs import DirectoryLister, DirEntryInfo


class FakeLister(DirectoryLister):
    """Lister with a fixed iteration order that records how far it was read."""

    def __init__(self, entries: list[DirEntryInfo | str]):
        self._entries = [
            DirEntryInfo(name=e, is_file=True) if isinstance(e, str) else e
            for e in entries
        ]
        self.yielded = 0

    def entries(self, path: str) -> Iterator[DirEntryInfo]:
        for entry in self._entries:
            self.yielded += 1
            yield entry


@pytest.fixture
def fake_lister():
    return FakeLister
