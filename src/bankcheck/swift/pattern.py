"""SWIFT expressions, the length/character-class notation of the IBAN registry.

An expression is a run of groups ``<count>[!]<class>``:

    n   digits 0-9
    a   upper case letters A-Z
    c   upper and lower case alphanumerics
    e   blank space

``4!n`` means exactly four digits, ``3c`` one to three alphanumerics.
``compile("4!a3c")`` gives the same matcher as ``^[A-Z]{4}[A-Za-z0-9]{1,3}$``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache

from ..errors import SwiftPatternSyntaxError

log = logging.getLogger(__name__)

DIGITS = "n"
UPPER_CASE_LETTERS = "a"
ALPHANUMERICS = "c"
SPACES = "e"

_CLASSES = {
    DIGITS: "[0-9]",
    UPPER_CASE_LETTERS: "[A-Z]",
    ALPHANUMERICS: "[A-Za-z0-9]",
    SPACES: "[ ]",
}

_GROUP = r"([0-9]+)(!?)([ance])"
_EXPRESSION_RE = re.compile(rf"(?:{_GROUP})+")
_GROUP_RE = re.compile(_GROUP)

MAX_COUNT = 65535


@dataclass(frozen=True)
class SwiftPattern:
    expression: str
    regex: str = field(compare=False)
    _compiled: re.Pattern = field(compare=False, repr=False)

    def matches(self, candidate: str | None) -> bool:
        """Whole-string match; partial matches never count."""
        if candidate is None:
            return False
        return self._compiled.fullmatch(candidate) is not None

    @property
    def fixed_length(self) -> int | None:
        """Length of every match when all groups are exact, None otherwise."""
        total = 0
        for count, strict, _cls in _GROUP_RE.findall(self.expression):
            if not strict:
                return None
            total += int(count)
        return total

    def __str__(self) -> str:
        return f"{self.expression}{{regex={self.regex}}}"


def _to_regex(expression: str) -> str:
    parts = []
    for m in _GROUP_RE.finditer(expression):
        count, strict, cls = m.groups()
        if int(count) == 0:
            raise SwiftPatternSyntaxError(expression, f"group '{m.group(0)}' has a zero length")
        if int(count) > MAX_COUNT:
            raise SwiftPatternSyntaxError(expression, f"group '{m.group(0)}' is longer than {MAX_COUNT}")
        parts.append(f"{_CLASSES[cls]}{{{int(count)}}}" if strict else f"{_CLASSES[cls]}{{1,{int(count)}}}")
    return "".join(parts)


@lru_cache(maxsize=None)
def compile(expression: str) -> SwiftPattern:
    """Compile a SWIFT expression, raising SwiftPatternSyntaxError when malformed."""
    if expression is None:
        raise TypeError("the expression argument cannot be None")
    if not _EXPRESSION_RE.fullmatch(expression):
        raise SwiftPatternSyntaxError(expression)
    regex = _to_regex(expression)
    log.debug("compiled SWIFT expression %s -> %s", expression, regex)
    return SwiftPattern(expression, regex, re.compile(regex))
