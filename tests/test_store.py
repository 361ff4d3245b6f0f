import os

import pytest

from clappie.filestore.meta import MetaBlock, get_meta_field
from clappie.filestore.store import (
    count,
    delete_file,
    exists,
    file_path,
    list_entries,
    read_and_parse,
    read_file,
    write_file,
    write_with_meta,
)


def test_store_roundtrip(tmp_path):
    path = tmp_path / "test.txt"
    write_file(path, "Hello, world!")
    assert read_file(path) == "Hello, world!"
    assert exists(path)
    delete_file(path)
    assert not exists(path)


def test_delete_missing_file_is_quiet(tmp_path):
    path = tmp_path / "missing.txt"
    delete_file(path)
    assert not exists(path)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_write_file_creates_directories(tmp_path):
    path = tmp_path / "a" / "b" / "note.txt"
    write_file(path, "deep")
    assert read_file(path) == "deep"


def test_list(tmp_path):
    write_file(tmp_path / "a.txt", "A")
    write_file(tmp_path / "b.txt", "B")
    write_file(tmp_path / "c.json", "C")
    (tmp_path / "subdir").mkdir()

    entries = list_entries(tmp_path)
    assert len(entries) == 2
    assert sorted(e.name for e in entries) == ["a", "b"]
    assert all(e.path == os.path.join(str(tmp_path), e.name + ".txt") for e in entries)


def test_list_newest_first(tmp_path):
    for name, stamp in [("old", 1_000_000), ("new", 3_000_000), ("mid", 2_000_000)]:
        path = tmp_path / f"{name}.txt"
        write_file(path, name)
        os.utime(path, (stamp, stamp))

    assert [e.name for e in list_entries(tmp_path)] == ["new", "mid", "old"]


def test_list_nonexistent():
    assert list_entries("/nonexistent/path") == []


def test_count(tmp_path):
    write_file(tmp_path / "a.txt", "A")
    write_file(tmp_path / "b.txt", "B")
    assert count(tmp_path) == 2


def test_count_missing_directory(tmp_path):
    assert count(tmp_path / "nope") == 0


def test_file_path(tmp_path):
    assert file_path(tmp_path, "note") == os.path.join(str(tmp_path), "note.txt")
    assert file_path(tmp_path, "note.txt") == os.path.join(str(tmp_path), "note.txt")


def test_read_and_parse(tmp_path):
    path = tmp_path / "test.txt"
    write_file(path, "Body text\n\n---\n[meta]\nkey: value\n")

    body, blocks = read_and_parse(path)
    assert body == "Body text"
    assert len(blocks) == 1
    assert blocks[0].fields["key"] == "value"


def test_write_with_meta(tmp_path):
    path = tmp_path / "test.txt"
    write_with_meta(path, "Hello", [MetaBlock(tag="meta", fields={"status": "ok"})])

    body, blocks = read_and_parse(path)
    assert body == "Hello"
    assert get_meta_field(blocks, "meta", "status") == "ok"