"""
Core ordering functionality for lslens
"""
from lslens.core.records import FileRecord, Indicator, SortMode, indicator_from_mode
from lslens.core.name_compare import name_less, strip_hidden_prefix
from lslens.core.digits import split_digits, extract_digits, extract_skeleton
from lslens.core.natural import natural_less
from lslens.core.comparators import (
    Comparator,
    select_comparator,
    resolve_sort_mode,
    sort_records,
    sort_indices,
)


__all__ = [
    'FileRecord',
    'Indicator',
    'SortMode',
    'indicator_from_mode',
    'name_less',
    'strip_hidden_prefix',
    'split_digits',
    'extract_digits',
    'extract_skeleton',
    'natural_less',
    'Comparator',
    'select_comparator',
    'resolve_sort_mode',
    'sort_records',
    'sort_indices',
]
