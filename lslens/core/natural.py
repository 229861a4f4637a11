"""
natural.py - Natural (version) ordering of listing entries

Directories come first and executables last. Inside a group, entries with
the same extension and the same non-digit skeleton are ordered by the
numeric value of their digits, so file2 sorts before file10.
"""
from lslens.core.digits import split_digits
from lslens.core.records import FileRecord


def numeric_name_less(a: str, b: str) -> bool:
    """Compare two names by their digit runs when their skeletons match"""
    value_a, skeleton_a = split_digits(a)
    value_b, skeleton_b = split_digits(b)

    if value_a is None or value_b is None:
        return a < b
    if skeleton_a != skeleton_b:
        return a < b
    return value_a < value_b


def natural_less(i: FileRecord, j: FileRecord) -> bool:
    """Return True if record i sorts strictly before record j in version order"""
    # Group directories first
    if i.is_dir and j.is_dir:
        # hidden directories may split into an empty name and an ext
        if i.name == j.name:
            return i.ext < j.ext
        return numeric_name_less(i.name, j.name)
    if i.is_dir != j.is_dir:
        return i.is_dir

    # Group executables last
    if i.is_executable and j.is_executable:
        return i.name < j.name
    if i.is_executable != j.is_executable:
        return j.is_executable

    if i.is_symlink or j.is_symlink:
        return i.name < j.name

    if i.ext != j.ext:
        return i.ext < j.ext

    return numeric_name_less(i.name, j.name)
