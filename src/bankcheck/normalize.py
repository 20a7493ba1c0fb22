from __future__ import annotations

import re
import string

_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize(value: str) -> str:
    """Strip every whitespace character and uppercase ASCII letters."""
    return _WHITESPACE_RE.sub("", value).translate(_UPPER)
