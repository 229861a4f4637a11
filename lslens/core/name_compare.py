"""Case-insensitive name ordering shared by the listing comparators"""

_DOT_ENTRIES = (".", "..")


def strip_hidden_prefix(name: str) -> str:
    """Drop a single leading dot so hidden entries sort next to visible ones"""
    if name in _DOT_ENTRIES:
        return name
    if name.startswith("."):
        return name[1:]
    return name


def name_less(a: str, b: str) -> bool:
    """Return True if name a sorts strictly before name b"""
    return strip_hidden_prefix(a).lower() < strip_hidden_prefix(b).lower()
