# dupfinder

Scan a directory tree and report files that are duplicates of one another.

Files are grouped by size first. Unless asked to stop there, files of equal
size are then read and compared by a 64-bit content hash, and only groups
that still hold more than one file are reported. Directories are walked
breadth first, and only regular files are considered.

## Installation

    pip install .

## Command line

    dupfinder <folder> [--exclude-empty] [--size-only] [--case-insensitive] [filter1] ... [filterN]

Example:

    dupfinder ./my_documents "*.txt" "*.pdf"

This scans `my_documents` and everything below it for duplicate `.txt` or
`.pdf` files.

Options:

- `--exclude-empty` leaves files of zero size out of the search.
- `--size-only` compares files only by size, not by content.
- `--case-insensitive` matches filters without regard to ASCII case.

Any other argument after the folder is taken as a filter. Filters are matched
against the file name only. `*` matches any run of characters, `?` matches
exactly one. With no filters, or with a filter of `*`, every file is
considered.

Sample output:

    Found duplicate files:

    Group: 2 files of size 13 bytes
      my_documents/file1.txt
      my_documents/copy/file1.txt

With `--size-only` the heading reads `Found duplicate files (by size only):`.
Sizes are shown in bytes below 1 KB and otherwise in KB, MB or GB with two
decimals. If nothing is found the command prints `No duplicate files found.`

Run without arguments, the command prints its usage to standard error and
exits with status 1. A path that is not a directory, or a directory or file
that cannot be read, is reported as `Error: ...` on standard error, also with
status 1.

## Library use

```python
from pathlib import Path

from dupfinder.dedup import find_duplicates
from dupfinder.types import DedupOptions

options = DedupOptions(filters=["*.jpg"], exclude_empty=True)
for group in find_duplicates(Path("photos"), options):
    print(len(group), "files of", group.size(), "bytes")
    for info in group:
        print("  ", info.path)
```

`find_duplicates` returns a `DuplicateFiles`, which is false when no groups
were found; each `DuplicateGroup` holds `FileInfo` entries with a `path` and a
`size`. Unreadable directories or files raise `OSError`.

Other pieces:

- `dupfinder.file_iter.iter_files(directory, options)` walks a directory breadth
  first and yields a `FileInfo` for each file that passes a `FilterOptions`.
- `dupfinder.file_iter.matches_filter` and `matches_filters` expose the
  wildcard matching on its own.
- `dupfinder.dedup.file_hash(path)` returns the content hash used for
  comparison.
- `dupfinder.cli.format_size` renders byte counts as `bytes`, `KB`, `MB` or
  `GB`, and `dupfinder.cli.run(folder_path, options)` performs a scan and
  prints the report.

## What it does not do

dupfinder only reports duplicates. It does not delete, move or link files,
and the content hash is not cryptographic, so files reported as duplicates
are very likely, but not proven, to be identical byte for byte.

## Running the tests

    pip install .[test]
    pytest