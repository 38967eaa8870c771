"""Breadth-first walk over a directory tree with file-name filters."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path, PurePath

from .types import FileInfo


@dataclass(frozen=True)
class FilterOptions:
    """Which files a walk reports."""

    filters: Sequence[str] = ()
    case_sensitive: bool = True
    exclude_empty: bool = False


def _ascii_lower(char: str) -> str:
    return char.lower() if "A" <= char <= "Z" else char


def matches_filter(path: str | os.PathLike[str], pattern: str, case_sensitive: bool) -> bool:
    """Tell whether the file name of ``path`` matches ``pattern``.

    ``*`` matches any run of characters and ``?`` any single character.
    Without case sensitivity only ASCII letters are folded.
    """
    if not pattern or pattern == "*":
        return True

    def same(a: str, b: str) -> bool:
        if case_sensitive:
            return a == b
        return _ascii_lower(a) == _ascii_lower(b)

    name = PurePath(path).name
    pat_pos = 0
    name_pos = 0
    star_pat_pos: int | None = None
    star_name_pos = 0

    while name_pos < len(name):
        pat_char = pattern[pat_pos] if pat_pos < len(pattern) else None
        if pat_char is not None and (pat_char == "?" or same(pat_char, name[name_pos])):
            pat_pos += 1
            name_pos += 1
        elif pat_char == "*":
            star_pat_pos = pat_pos
            star_name_pos = name_pos
            pat_pos += 1
        elif star_pat_pos is not None:
            pat_pos = star_pat_pos
            star_name_pos += 1
            name_pos = star_name_pos
        else:
            return False

    return all(char == "*" for char in pattern[pat_pos:])


def matches_filters(
    path: str | os.PathLike[str], filters: Sequence[str], case_sensitive: bool
) -> bool:
    """Tell whether ``path`` matches any of ``filters``; no filters match all."""
    if not filters or "*" in filters:
        return True
    return any(matches_filter(path, pattern, case_sensitive) for pattern in filters)


def _reraise(exc: OSError, message: str, path: str) -> OSError:
    if exc.errno is not None:
        return OSError(exc.errno, message, path)
    return OSError(message)


def iter_files(directory: str | os.PathLike[str], options: FilterOptions) -> Iterator[FileInfo]:
    """Yield every regular file below ``directory`` that passes ``options``.

    Directories are visited breadth first; an unreadable directory or file
    raises ``OSError``.
    """
    pending: deque[Path] = deque([Path(directory)])
    while pending:
        current = pending.popleft()
        try:
            with os.scandir(current) as entries:
                entry_list = list(entries)
        except OSError as exc:
            raise _reraise(exc, f"Failed to read directory {current}", str(current)) from exc

        for entry in entry_list:
            path = Path(entry.path)
            if path.is_dir():
                pending.append(path)
                continue
            if not path.is_file() or not matches_filters(
                path, options.filters, options.case_sensitive
            ):
                continue
            try:
                size = path.stat().st_size
            except OSError as exc:
                raise _reraise(exc, f"Failed to get metadata for {path}", str(path)) from exc
            if options.exclude_empty and size == 0:
                continue
            yield FileInfo(path=path, size=size)