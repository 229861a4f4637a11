"""
digits.py - Numeric substring extraction

Splits a name into its digit run (all ASCII digits, concatenated) and its
skeleton (everything else) in a single pass, so both views always agree on
which characters are digits.
"""
from typing import Optional, Tuple

# Largest value a digit run may parse to (signed 64-bit)
MAX_DIGIT_VALUE = 2 ** 63 - 1
_MAX_DIGIT_LEN = len(str(MAX_DIGIT_VALUE))


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def split_digits(name: str) -> Tuple[Optional[int], str]:
    """
    Split a name into (digit value, skeleton)

    The value is None when the name has no digits or the digit run is
    larger than MAX_DIGIT_VALUE.
    """
    digits = []
    skeleton = []
    for ch in name:
        if _is_digit(ch):
            digits.append(ch)
        else:
            skeleton.append(ch)

    run = "".join(digits).lstrip("0") or ("0" if digits else "")
    value = None
    # longer runs cannot fit, and would hit int()'s digit limit anyway
    if run and len(run) <= _MAX_DIGIT_LEN:
        value = int(run)
        if value > MAX_DIGIT_VALUE:
            value = None
    return value, "".join(skeleton)


def extract_digits(name: str) -> Tuple[int, bool]:
    """Return (value, ok); ok is False when the name is not numerically comparable"""
    value, _ = split_digits(name)
    if value is None:
        return 0, False
    return value, True


def extract_skeleton(name: str) -> str:
    """Return the name with every digit removed"""
    return split_digits(name)[1]
