"""Data types shared by the scanner and the duplicate finder."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FileInfo:
    """A regular file found during a scan, with its size in bytes."""

    path: Path
    size: int


@dataclass
class DuplicateGroup:
    """Files that were found to be duplicates of one another."""

    files: list[FileInfo] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[FileInfo]:
        return iter(self.files)

    def size(self) -> int:
        """Size in bytes shared by the files of the group."""
        if not self.files:
            raise ValueError("an empty group has no size")
        return self.files[0].size


@dataclass
class DuplicateFiles:
    """All groups of duplicates found in one scan."""

    groups: list[DuplicateGroup] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[DuplicateGroup]:
        return iter(self.groups)

    def __bool__(self) -> bool:
        return bool(self.groups)


@dataclass(frozen=True)
class DedupOptions:
    """Settings for a duplicate search."""

    filters: Sequence[str] = ()
    exclude_empty: bool = False
    case_sensitive: bool = True
    only_compare_file_size: bool = False