from pathlib import Path

import pytest

from dupfinder.file_iter import FilterOptions, iter_files, matches_filter, matches_filters


def test_matches_filter():
    assert matches_filter(Path("a.txt"), "*", True)
    assert matches_filter(Path("a.txt"), "?.???", True)
    assert not matches_filter(Path("a.txt"), "?.??", False)
    assert matches_filter(Path("a.txt"), "*.*?", True)
    assert not matches_filter(Path("a"), "aa", False)
    assert not matches_filter(Path("A"), "a", True)
    assert matches_filter(Path("A"), "***********", True)


def test_matches_filter_case_insensitive():
    assert matches_filter(Path("A"), "a", False)
    assert matches_filter(Path("FILE.TXT"), "*.txt", False)
    assert not matches_filter(Path("FILE.TXT"), "*.txt", True)


def test_matches_filter_question_mark_is_single_char():
    assert matches_filter(Path("a.acb"), "*.a?b", True)
    assert matches_filter(Path("a.aab"), "*.a?b", True)
    assert not matches_filter(Path("a.a_something_b"), "*.a?b", True)


def test_matches_filter_empty_pattern_matches():
    assert matches_filter(Path("anything"), "", True)


def test_matches_filters():
    assert matches_filters(Path("c:\\temp\\test.txt"), [], True)
    assert matches_filters(Path("c:\\temp\\test.txt"), ["*test*"], True)
    assert not matches_filters(Path("c:\\temp\\test.txt"), ["nonexistent"], True)
    assert matches_filters(Path("/home/user/test.txt"), ["test*"], True)
    assert matches_filters(Path("/home/user/test.txt"), ["*.txt"], True)


def test_matches_filters_any_and_star():
    assert matches_filters(Path("x.pdf"), ["*.txt", "*.pdf"], True)
    assert not matches_filters(Path("x.doc"), ["*.txt", "*.pdf"], True)
    assert matches_filters(Path("x.doc"), ["*.txt", "*"], True)


def test_file_iterator(tmp_path):
    file1 = tmp_path / "file1.txt"
    file2 = tmp_path / "file2.txt"
    file1.touch()
    file2.touch()

    files = list(iter_files(tmp_path, FilterOptions(filters=(), case_sensitive=True)))

    assert len(files) == 2
    assert {f.path for f in files} == {file1, file2}


def test_iter_files_recurses_and_reports_sizes(tmp_path):
    sub = tmp_path / "sub" / "deeper"
    sub.mkdir(parents=True)
    top = tmp_path / "top.txt"
    nested = sub / "nested.txt"
    top.write_bytes(b"abc")
    nested.write_bytes(b"hello")

    files = {f.path: f.size for f in iter_files(tmp_path, FilterOptions())}

    assert files == {top: 3, nested: 5}


def test_iter_files_breadth_first(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "inner.txt").write_bytes(b"x")
    (tmp_path / "outer.txt").write_bytes(b"y")

    paths = [f.path for f in iter_files(tmp_path, FilterOptions())]

    assert paths == [tmp_path / "outer.txt", sub / "inner.txt"]


def test_iter_files_exclude_empty(tmp_path):
    (tmp_path / "empty.txt").touch()
    full = tmp_path / "full.txt"
    full.write_bytes(b"data")

    files = list(iter_files(tmp_path, FilterOptions(exclude_empty=True)))

    assert [f.path for f in files] == [full]


def test_iter_files_applies_filters(tmp_path):
    keep = tmp_path / "keep.TXT"
    keep.write_bytes(b"1")
    (tmp_path / "skip.pdf").write_bytes(b"2")

    sensitive = list(iter_files(tmp_path, FilterOptions(filters=("*.txt",))))
    insensitive = list(
        iter_files(tmp_path, FilterOptions(filters=("*.txt",), case_sensitive=False))
    )

    assert sensitive == []
    assert [f.path for f in insensitive] == [keep]


def test_iter_files_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(iter_files(tmp_path / "missing", FilterOptions()))