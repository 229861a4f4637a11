"""
records.py - File record and sort mode definitions

Contains:
- Indicator: entry type tags
- SortMode: the mutually exclusive listing orders
- FileRecord: normalized metadata of one listing entry
"""
import logging
import math
import stat
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from lslens.utils.exceptions import InvalidRecordError


SYMLINK_ARROW = "->"


class Indicator:
    """Single-character entry type tags"""
    REGULAR = ""
    DIRECTORY = "/"
    NAMED_PIPE = "|"
    SOCKET = "="
    EXECUTABLE = "*"

    ALL = (REGULAR, DIRECTORY, NAMED_PIPE, SOCKET, EXECUTABLE)


class SortMode(Enum):
    """Sort mode enumeration"""
    DEFAULT = "none"                     # Keep input order
    ALPHABETICAL = "name"                # name+ext, hidden dot ignored
    SIZE_DESCENDING = "size"             # Largest first
    TIME_DESCENDING = "time"             # Newest first
    EXTENSION_ALPHABETICAL = "extension" # By extension, then name
    NATURAL_VERSION = "version"          # Grouped, numbers compared numerically

    @classmethod
    def from_name(cls, value: Optional[Union[str, "SortMode"]]) -> "SortMode":
        """Map a config/CLI name to a mode, falling back to DEFAULT"""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.DEFAULT
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logging.debug(f"Unknown sort mode {value!r}, using default order")
            return cls.DEFAULT


def indicator_from_mode(st_mode: int) -> str:
    """Get the indicator for a stat mode value"""
    if stat.S_ISDIR(st_mode):
        return Indicator.DIRECTORY
    if stat.S_ISFIFO(st_mode):
        return Indicator.NAMED_PIPE
    if stat.S_ISLNK(st_mode):
        # symlinks are marked through the arrow in ext instead
        return Indicator.REGULAR
    if stat.S_ISSOCK(st_mode):
        return Indicator.SOCKET
    if st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
        return Indicator.EXECUTABLE
    return Indicator.REGULAR


def _parse_mod_time(value: Any, index: Optional[int]) -> Union[datetime, float]:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise InvalidRecordError(f"invalid mod_time {value!r}", index)
    if isinstance(value, (int, float)):
        try:
            timestamp = float(value)
        except OverflowError:
            raise InvalidRecordError("mod_time out of range", index)
        # NaN would compare false against every other time
        if not math.isfinite(timestamp):
            raise InvalidRecordError(f"invalid mod_time {value!r}", index)
        return timestamp
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value).timestamp()
        except ValueError:
            raise InvalidRecordError(f"invalid mod_time {value!r}", index)
    raise InvalidRecordError(f"invalid mod_time {value!r}", index)


@dataclass(frozen=True)
class FileRecord:
    """Metadata of a single listing entry"""
    name: str                           # Base name without extension
    ext: str = ""                       # Extension with leading dot, or " -> target" for symlinks
    size: int = 0                       # Size in bytes
    mod_time: Any = 0.0                 # Modification time (datetime or timestamp)
    indicator: str = Indicator.REGULAR  # One of Indicator.ALL
    uid: Optional[int] = None           # Owner id
    gid: Optional[int] = None           # Group id

    @property
    def full_name(self) -> str:
        return self.name + self.ext

    @property
    def is_dir(self) -> bool:
        return self.indicator == Indicator.DIRECTORY

    @property
    def is_executable(self) -> bool:
        return self.indicator == Indicator.EXECUTABLE

    @property
    def is_symlink(self) -> bool:
        return SYMLINK_ARROW in self.ext

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: Optional[int] = None) -> "FileRecord":
        """
        Create a FileRecord from a plain mapping (e.g. decoded JSON)

        Args:
            data: Mapping with name, ext, size, mod_time, indicator, uid, gid
            index: Position of the record in its input, used in error messages

        Raises:
            InvalidRecordError: if a field has the wrong type or value
        """
        if not isinstance(data, dict):
            raise InvalidRecordError("record must be an object", index)

        name = data.get("name")
        if not isinstance(name, str):
            raise InvalidRecordError("'name' must be a string", index)

        ext = data.get("ext")
        if ext is None:
            ext = ""
        if not isinstance(ext, str):
            raise InvalidRecordError("'ext' must be a string", index)

        size = data.get("size", 0)
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise InvalidRecordError(f"invalid size {size!r}", index)

        indicator = data.get("indicator")
        if indicator is None:
            indicator = Indicator.REGULAR
        if not isinstance(indicator, str) or indicator not in Indicator.ALL:
            raise InvalidRecordError(f"unknown indicator {indicator!r}", index)

        ids = {}
        for key in ("uid", "gid"):
            value = data.get(key)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise InvalidRecordError(f"'{key}' must be an integer", index)
            ids[key] = value

        return cls(
            name=name,
            ext=ext,
            size=size,
            mod_time=_parse_mod_time(data.get("mod_time"), index),
            indicator=indicator,
            **ids,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping for JSON output"""
        mod_time = self.mod_time
        if isinstance(mod_time, datetime):
            mod_time = mod_time.isoformat()
        return {
            "name": self.name,
            "ext": self.ext,
            "size": self.size,
            "mod_time": mod_time,
            "indicator": self.indicator,
            "uid": self.uid,
            "gid": self.gid,
        }
