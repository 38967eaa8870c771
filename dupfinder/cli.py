"""Command-line front end for the duplicate finder."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from .dedup import find_duplicates
from .types import DedupOptions

_PROG = "dupfinder"

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


def format_size(size: int) -> str:
    """Render a byte count in bytes, KB, MB or GB."""
    if size >= _GB:
        return f"{size / _GB:.2f} GB"
    if size >= _MB:
        return f"{size / _MB:.2f} MB"
    if size >= _KB:
        return f"{size / _KB:.2f} KB"
    return f"{size} bytes"


def _usage() -> str:
    return "\n".join(
        [
            f"Usage: {_PROG} <folder> [--exclude-empty] [--size-only] "
            "[--case-insensitive] [filter1] ... [filterN]",
            f"Example: {_PROG} ./my_documents *.txt *.pdf",
            "This will scan the 'my_documents' folder for duplicate files "
            "with .txt or .pdf extensions",
            "Options:",
            "  --exclude-empty      Exclude files with zero size from duplicate search",
            "  --size-only          Compare files only by size, not content",
            "  --case-insensitive   Use case-insensitive filter matching",
        ]
    )


def run(folder_path: str, options: DedupOptions) -> None:
    """Scan ``folder_path`` and print the duplicate groups found."""
    path = Path(folder_path)
    if not path.is_dir():
        raise NotADirectoryError(f"'{folder_path}' is not a valid directory")

    duplicates = find_duplicates(path, options)
    if not duplicates:
        print("No duplicate files found.")
        return

    suffix = " (by size only)" if options.only_compare_file_size else ""
    print(f"Found duplicate files{suffix}:")
    for group in duplicates:
        print(f"\nGroup: {len(group)} files of size {format_size(group.size())}")
        for info in group:
            print(f"  {info.path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the scan and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(_usage(), file=sys.stderr)
        return 1

    folder_path, *rest = args
    filters: list[str] = []
    exclude_empty = False
    size_only = False
    case_sensitive = True
    for arg in rest:
        if arg == "--exclude-empty":
            exclude_empty = True
        elif arg == "--size-only":
            size_only = True
        elif arg == "--case-insensitive":
            case_sensitive = False
        else:
            filters.append(arg)

    options = DedupOptions(
        filters=tuple(filters),
        exclude_empty=exclude_empty,
        case_sensitive=case_sensitive,
        only_compare_file_size=size_only,
    )
    try:
        run(folder_path, options)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())