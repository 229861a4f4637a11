"""
Tests for FileRecord construction and sort mode names
"""
import stat
from datetime import datetime

import pytest

from lslens.core.records import FileRecord, Indicator, SortMode, indicator_from_mode
from lslens.utils.exceptions import InvalidRecordError, LsLensException


@pytest.mark.parametrize("st_mode, expected", [
    (stat.S_IFDIR | 0o755, Indicator.DIRECTORY),
    (stat.S_IFIFO | 0o644, Indicator.NAMED_PIPE),
    (stat.S_IFLNK | 0o777, Indicator.REGULAR),
    (stat.S_IFSOCK | 0o755, Indicator.SOCKET),
    (stat.S_IFREG | 0o755, Indicator.EXECUTABLE),
    (stat.S_IFREG | 0o001, Indicator.EXECUTABLE),
    (stat.S_IFREG | 0o644, Indicator.REGULAR),
])
def test_indicator_from_mode(st_mode, expected):
    assert indicator_from_mode(st_mode) == expected


def test_record_properties(make_record):
    folder = make_record("src", indicator=Indicator.DIRECTORY)
    tool = make_record("run", ".sh", indicator=Indicator.EXECUTABLE)
    link = make_record("latest", " -> v2")

    assert folder.is_dir and not folder.is_executable
    assert tool.is_executable and tool.full_name == "run.sh"
    assert link.is_symlink and not tool.is_symlink


def test_from_dict_defaults():
    record = FileRecord.from_dict({"name": "notes"})
    assert record == FileRecord(name="notes")


def test_from_dict_full():
    record = FileRecord.from_dict({
        "name": "app",
        "ext": ".py",
        "size": 2048,
        "mod_time": 1700000000,
        "indicator": "*",
        "uid": 1000,
        "gid": 100,
    })
    assert record.size == 2048
    assert record.mod_time == 1700000000.0
    assert record.is_executable
    assert (record.uid, record.gid) == (1000, 100)


def test_from_dict_parses_iso_time():
    record = FileRecord.from_dict({"name": "a", "mod_time": "2024-03-01T12:00:00"})
    assert record.mod_time == datetime(2024, 3, 1, 12, 0, 0).timestamp()


@pytest.mark.parametrize("data", [
    {},
    {"name": 5},
    {"name": "a", "ext": 3},
    {"name": "a", "size": -1},
    {"name": "a", "size": "10"},
    {"name": "a", "size": True},
    {"name": "a", "indicator": "@"},
    {"name": "a", "mod_time": "yesterday"},
    {"name": "a", "mod_time": float("nan")},
    {"name": "a", "mod_time": float("inf")},
    {"name": "a", "mod_time": float("-inf")},
    {"name": "a", "mod_time": 10 ** 400},
    {"name": "a", "ext": 0},
    {"name": "a", "ext": False},
    {"name": "a", "ext": []},
    {"name": "a", "indicator": 0},
    {"name": "a", "indicator": False},
    {"name": "a", "indicator": []},
    {"name": "a", "uid": "root"},
    ["name", "a"],
])
def test_from_dict_rejects_bad_records(data):
    with pytest.raises(InvalidRecordError) as exc_info:
        FileRecord.from_dict(data, index=3)
    assert exc_info.value.error_code == "INVALID_RECORD"
    assert exc_info.value.index == 3
    assert str(exc_info.value).startswith("record 3:")
    assert isinstance(exc_info.value, LsLensException)


def test_to_dict_round_trip():
    record = FileRecord(name="a", ext=".b", size=1, mod_time=2.0, indicator="/", uid=0, gid=0)
    assert FileRecord.from_dict(record.to_dict()) == record


@pytest.mark.parametrize("value, expected", [
    ("name", SortMode.ALPHABETICAL),
    ("SIZE", SortMode.SIZE_DESCENDING),
    (" time ", SortMode.TIME_DESCENDING),
    ("extension", SortMode.EXTENSION_ALPHABETICAL),
    ("version", SortMode.NATURAL_VERSION),
    ("none", SortMode.DEFAULT),
    ("bogus", SortMode.DEFAULT),
    (None, SortMode.DEFAULT),
    (SortMode.SIZE_DESCENDING, SortMode.SIZE_DESCENDING),
])
def test_sort_mode_from_name(value, expected):
    assert SortMode.from_name(value) is expected


def test_from_dict_accepts_explicit_nulls():
    record = FileRecord.from_dict({"name": "a", "ext": None, "indicator": None, "mod_time": None})
    assert record == FileRecord(name="a")
