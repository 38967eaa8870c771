"""Finding duplicate files by size and then by content hash."""

from __future__ import annotations

import os
from collections import defaultdict
from pathlib import Path

from .file_iter import FilterOptions, iter_files
from .types import DedupOptions, DuplicateFiles, DuplicateGroup, FileInfo

_CHUNK_SIZE = 8192
_MASK = (1 << 64) - 1


def file_hash(path: str | os.PathLike[str]) -> int:
    """Return the 64-bit polynomial hash (base 31) of a file's contents."""
    value = 0
    try:
        with open(path, "rb") as handle:
            while chunk := handle.read(_CHUNK_SIZE):
                for byte in chunk:
                    value = (value * 31 + byte) & _MASK
    except OSError as exc:
        message = f"Failed to read file: {Path(path)}"
        if exc.errno is not None:
            raise OSError(exc.errno, message, str(path)) from exc
        raise OSError(message) from exc
    return value


def _groups_of_same_size(folder_path: Path, filter_options: FilterOptions) -> DuplicateFiles:
    by_size: dict[int, list[FileInfo]] = defaultdict(list)
    for info in iter_files(folder_path, filter_options):
        by_size[info.size].append(info)
    return DuplicateFiles(
        groups=[DuplicateGroup(files=files) for files in by_size.values() if len(files) > 1]
    )


def _groups_of_same_hash(candidates: DuplicateFiles) -> DuplicateFiles:
    groups: list[DuplicateGroup] = []
    for group in candidates:
        if len(group) <= 1:
            continue
        by_hash: dict[int, list[FileInfo]] = defaultdict(list)
        for info in group:
            by_hash[file_hash(info.path)].append(info)
        groups.extend(
            DuplicateGroup(files=files) for files in by_hash.values() if len(files) > 1
        )
    return DuplicateFiles(groups=groups)


def find_duplicates(
    folder_path: str | os.PathLike[str], options: DedupOptions
) -> DuplicateFiles:
    """Find groups of duplicate files below ``folder_path``.

    Files are first grouped by size; unless ``options.only_compare_file_size``
    is set, each size group is then split by content hash.
    """
    filter_options = FilterOptions(
        filters=tuple(options.filters),
        case_sensitive=options.case_sensitive,
        exclude_empty=options.exclude_empty,
    )
    same_size = _groups_of_same_size(Path(folder_path), filter_options)
    if options.only_compare_file_size:
        return same_size
    return _groups_of_same_hash(same_size)