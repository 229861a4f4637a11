"""
comparators.py - Sort mode dispatch

Maps a SortMode to a less-than predicate over FileRecords and sorts
record sequences with it.
"""
import functools
import logging
from typing import Callable, Dict, List, Optional, Sequence

from lslens.core.name_compare import name_less
from lslens.core.natural import natural_less
from lslens.core.records import FileRecord, SortMode


Comparator = Callable[[FileRecord, FileRecord], bool]


def default_less(i: FileRecord, j: FileRecord) -> bool:
    """No content ordering; a stable sort keeps the input order"""
    return False


def alphabetical_less(i: FileRecord, j: FileRecord) -> bool:
    return name_less(i.full_name, j.full_name)


def size_less(i: FileRecord, j: FileRecord) -> bool:
    """Largest first, ties by name"""
    if i.size > j.size:
        return True
    if i.size == j.size:
        return alphabetical_less(i, j)
    return False


def time_less(i: FileRecord, j: FileRecord) -> bool:
    """Newest first"""
    # no name tie-break
    return i.mod_time > j.mod_time


def extension_less(i: FileRecord, j: FileRecord) -> bool:
    """By extension, then by name for case-insensitively equal extensions"""
    if name_less(i.ext, j.ext):
        return True
    if i.ext.lower() == j.ext.lower():
        return alphabetical_less(i, j)
    return False


_COMPARATORS: Dict[SortMode, Comparator] = {
    SortMode.DEFAULT: default_less,
    SortMode.ALPHABETICAL: alphabetical_less,
    SortMode.SIZE_DESCENDING: size_less,
    SortMode.TIME_DESCENDING: time_less,
    SortMode.EXTENSION_ALPHABETICAL: extension_less,
    SortMode.NATURAL_VERSION: natural_less,
}


def select_comparator(mode: Optional[SortMode]) -> Comparator:
    """
    Get the less-than predicate for a sort mode

    Args:
        mode: Sort mode; anything unrecognized selects the default order

    Returns:
        Function (i, j) -> True if i must sort strictly before j
    """
    comparator = _COMPARATORS.get(mode) if isinstance(mode, SortMode) else None
    if comparator is None:
        logging.debug(f"No comparator for {mode!r}, keeping input order")
        return default_less
    return comparator


def resolve_sort_mode(
    alpha: bool = False,
    size: bool = False,
    time: bool = False,
    extension: bool = False,
    natural: bool = False,
) -> SortMode:
    """Pick one mode from possibly conflicting flags, first match wins"""
    flags = (
        (alpha, SortMode.ALPHABETICAL),
        (size, SortMode.SIZE_DESCENDING),
        (time, SortMode.TIME_DESCENDING),
        (extension, SortMode.EXTENSION_ALPHABETICAL),
        (natural, SortMode.NATURAL_VERSION),
    )
    for enabled, mode in flags:
        if enabled:
            return mode
    return SortMode.DEFAULT


def comparator_key(less: Comparator):
    """Adapt a less-than predicate to a key for sorted()"""
    def compare(a: FileRecord, b: FileRecord) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return functools.cmp_to_key(compare)


def sort_records(records: Sequence[FileRecord], mode: Optional[SortMode]) -> List[FileRecord]:
    """Return the records in listing order (new list, stable)"""
    return sorted(records, key=comparator_key(select_comparator(mode)))


def sort_indices(records: Sequence[FileRecord], mode: Optional[SortMode]) -> List[int]:
    """Return the permutation of input positions in listing order"""
    key = comparator_key(select_comparator(mode))
    return sorted(range(len(records)), key=lambda index: key(records[index]))
