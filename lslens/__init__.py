"""
Listing Lens - ordering and formatting of directory listing entries
"""
from .core.records import FileRecord, Indicator, SortMode
from .core.comparators import select_comparator, resolve_sort_mode, sort_records, sort_indices
from .utils.size_formatter import SizeFormatter
from .utils.owner_cache import OwnerCache

__version__ = "1.0.0"
__all__ = [
    'FileRecord',
    'Indicator',
    'SortMode',
    'select_comparator',
    'resolve_sort_mode',
    'sort_records',
    'sort_indices',
    'SizeFormatter',
    'OwnerCache'
]
