"""ISO 7064 MOD 97-10 check digits, as used by IBANs and creditor identifiers.

The value is rotated (first four characters moved to the end), each character
is expanded to its numeric value (0-9 for digits, 10-35 for letters) and the
resulting digit sequence is folded into a remainder modulo 97. The running
total is reduced whenever it exceeds nine digits, so the fold never needs
more than a machine word.
"""
from __future__ import annotations

import string

ROTATION = 4
MODULUS = 97
VALID_REMAINDER = 1
_FOLD_LIMIT = 999_999_999

_VALUES = {c: int(c) for c in string.digits}
_VALUES.update({c: i for i, c in enumerate(string.ascii_uppercase, start=10)})
_VALUES.update({c: i for i, c in enumerate(string.ascii_lowercase, start=10)})


def _modulus(value: str) -> int:
    if value is None:
        raise TypeError("the value argument cannot be None")
    if len(value) <= ROTATION:
        raise ValueError(f"the value argument size must be greater than {ROTATION}")

    rotated = value[ROTATION:] + value[:ROTATION]
    total = 0
    for ch in rotated:
        try:
            v = _VALUES[ch]
        except KeyError:
            raise ValueError(f"{ch!r} has no MOD 97-10 numeric value") from None
        total = (total * 100 if v > 9 else total * 10) + v
        if total > _FOLD_LIMIT:
            total %= MODULUS
    return total % MODULUS


def validate(value: str) -> bool:
    """True if ``value`` (check digits in place) folds to a remainder of 1."""
    return _modulus(value) == VALID_REMAINDER


def calculate(value: str) -> str:
    """Two-digit check for ``value``, whose check-digit positions must hold ``00``."""
    return f"{98 - _modulus(value):02d}"
