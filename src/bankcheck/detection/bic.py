"""Business Identifier Codes (ISO 9362), a.k.a. SWIFT codes.

A BIC8 is 4 letters of institution code, 2 letters of ISO 3166-1 country
code and 2 alphanumerics of location code. A BIC11 adds a 3-character branch
code; a BIC8 refers to the primary office, branch ``XXX``.
"""
from __future__ import annotations

import re
from typing import List

from ..errors import FormatError
from ..normalize import normalize
from ..swift import pattern as swift
from .base import BankIdentifier, country_or_raise

KIND = "BIC"

PRIMARY_OFFICE_BRANCH_CODE = "XXX"
TEST_BIC_INDICATOR = "0"

BIC8_LENGTH = 8
INSTITUTION_CODE_INDEX = 0
INSTITUTION_CODE_LENGTH = 4
COUNTRY_CODE_INDEX = INSTITUTION_CODE_INDEX + INSTITUTION_CODE_LENGTH
COUNTRY_CODE_LENGTH = 2
LOCATION_CODE_INDEX = COUNTRY_CODE_INDEX + COUNTRY_CODE_LENGTH
LOCATION_CODE_LENGTH = 2
BRANCH_CODE_INDEX = LOCATION_CODE_INDEX + LOCATION_CODE_LENGTH
BRANCH_CODE_LENGTH = 3

_TEST_INDICATOR_INDEX = LOCATION_CODE_INDEX + LOCATION_CODE_LENGTH - 1

BIC8_FORMAT = swift.compile("4!a2!a2!c")
BIC11_FORMAT = swift.compile("4!a2!a2!c3!c")

_BIC_RE = re.compile(r'\b([A-Z]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?)\b')


class Bic(BankIdentifier):
    """A validated BIC, always held in its eleven-character form."""

    __slots__ = ()

    kind = KIND
    country_code_index = COUNTRY_CODE_INDEX

    def __init__(self, bic8_or_11: str):
        super().__init__(bic8_or_11)

    @classmethod
    def _parse(cls, bic: str) -> str:
        normalized = normalize(bic)
        if not (BIC8_FORMAT.matches(normalized) or BIC11_FORMAT.matches(normalized)):
            raise FormatError(KIND, bic)

        country_or_raise(normalized[COUNTRY_CODE_INDEX:LOCATION_CODE_INDEX], KIND, bic)

        if len(normalized) == BIC8_LENGTH:
            normalized += PRIMARY_OFFICE_BRANCH_CODE
        return normalized

    @property
    def institution_code(self) -> str:
        return self._value[INSTITUTION_CODE_INDEX:COUNTRY_CODE_INDEX]

    @property
    def location_code(self) -> str:
        return self._value[LOCATION_CODE_INDEX:BRANCH_CODE_INDEX]

    @property
    def branch_code(self) -> str:
        return self._value[BRANCH_CODE_INDEX:BRANCH_CODE_INDEX + BRANCH_CODE_LENGTH]

    @property
    def is_primary_office(self) -> bool:
        return self.branch_code == PRIMARY_OFFICE_BRANCH_CODE

    @property
    def is_test_bic(self) -> bool:
        """The second location character is '0' on test and training BICs."""
        return self._value[_TEST_INDICATOR_INDEX] == TEST_BIC_INDICATOR

    @property
    def is_live_bic(self) -> bool:
        return not self.is_test_bic

    def as_test_bic(self) -> "Bic":
        if self.is_test_bic:
            return self
        v = self._value
        return type(self)(v[:_TEST_INDICATOR_INDEX] + TEST_BIC_INDICATOR + v[_TEST_INDICATOR_INDEX + 1:])


def validate_bic(bic: str) -> bool:
    return Bic.is_valid(bic)


def find_bics(text: str) -> List[str]:
    """Valid BICs found in free text, eleven-character form, first-seen order.

    Only upper case tokens are considered.
    """
    out = []
    for m in _BIC_RE.finditer(text):
        if validate_bic(m.group(1)):
            out.append(str(Bic(m.group(1))))
    return list(dict.fromkeys(out))
