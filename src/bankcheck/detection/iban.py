"""International Bank Account Numbers (ISO 13616).

An IBAN is a two-letter ISO 3166-1 country code, two check digits and a BBAN
whose layout is fixed per country. Check digits follow ISO 7064 MOD 97-10.
IBANs are case insensitive and usually printed in groups of four characters.
"""
from __future__ import annotations

import re
from typing import List, Optional

from .. import checkdigit
from ..errors import FormatError, IncorrectCheckDigitsError, InvalidStructureError
from ..normalize import normalize
from ..structures import BBAN_STRUCTURES, CountryLike, StructureRegistry
from ..swift import pattern as swift
from .base import BankIdentifier, country_or_raise, require, resolve_country, rule_or_raise

KIND = "IBAN"

COUNTRY_CODE_INDEX = 0
COUNTRY_CODE_LENGTH = 2
CHECK_DIGITS_INDEX = COUNTRY_CODE_INDEX + COUNTRY_CODE_LENGTH
CHECK_DIGITS_LENGTH = 2
BBAN_INDEX = CHECK_DIGITS_INDEX + CHECK_DIGITS_LENGTH

PRINTABLE_GROUP_SIZE = 4

BASIC_FORMAT = swift.compile("2!a2!n30c")

_IBAN_RE = re.compile(r'\b([A-Z]{2}\d{2}[A-Z0-9]{1,30})\b')
_PRINTABLE_IBAN_RE = re.compile(r'\b([A-Z]{2}\d{2}(?: [A-Z0-9]{4}){1,7}(?: [A-Z0-9]{1,3})?)\b')


class Iban(BankIdentifier):
    """A validated IBAN.

    >>> Iban("fr14 2004 1010 0505 0001 3m02 606").bban
    '20041010050500013M02606'
    """

    __slots__ = ()

    kind = KIND
    country_code_index = COUNTRY_CODE_INDEX

    def __init__(self, iban: str, *, registry: Optional[StructureRegistry] = None):
        super().__init__(iban, registry=registry)

    @classmethod
    def _parse(cls, iban: str, registry: Optional[StructureRegistry] = None) -> str:
        if registry is None:
            registry = BBAN_STRUCTURES

        normalized = normalize(iban)
        if not BASIC_FORMAT.matches(normalized):
            raise FormatError(KIND, iban)

        country = country_or_raise(normalized[COUNTRY_CODE_INDEX:CHECK_DIGITS_INDEX], KIND, iban)
        rule = rule_or_raise(registry, country, KIND, iban)

        if not rule.is_valid(normalized[BBAN_INDEX:]):
            raise InvalidStructureError(KIND, iban, rule=rule)

        # 00, 01 and 99 also fold to 1 but are never issued
        expected = checkdigit.calculate(normalized[:CHECK_DIGITS_INDEX] + "00" + normalized[BBAN_INDEX:])
        if normalized[CHECK_DIGITS_INDEX:BBAN_INDEX] != expected:
            raise IncorrectCheckDigitsError(KIND, iban)

        return normalized

    @classmethod
    def from_parts(cls, country: CountryLike, bban: str, *,
                   registry: Optional[StructureRegistry] = None) -> "Iban":
        """Build an IBAN from a country and a BBAN, computing the check digits."""
        if registry is None:
            registry = BBAN_STRUCTURES
        country = resolve_country(country, KIND)
        require("bban", bban)

        normalized_bban = normalize(bban)
        rule = rule_or_raise(registry, country, KIND, bban)
        if not rule.is_valid(normalized_bban):
            raise InvalidStructureError(KIND, bban, rule=rule)

        check_digits = checkdigit.calculate(country.code + "00" + normalized_bban)
        return cls._from_canonical(country.code + check_digits + normalized_bban)

    @property
    def check_digits(self) -> str:
        return self._value[CHECK_DIGITS_INDEX:BBAN_INDEX]

    @property
    def bban(self) -> str:
        return self._value[BBAN_INDEX:]

    def to_printable_string(self) -> str:
        """Groups of four characters separated by a single space, the last one may be shorter."""
        v = self._value
        return " ".join(v[i:i + PRINTABLE_GROUP_SIZE] for i in range(0, len(v), PRINTABLE_GROUP_SIZE))


def validate_iban(iban: str) -> bool:
    return Iban.is_valid(iban)


def find_ibans(text: str) -> List[str]:
    """Valid IBANs found in free text, canonical form, first-seen order.

    Both the compact form and the printable form (groups of four) are found.
    """
    text = text.upper()
    found = []
    for m in _PRINTABLE_IBAN_RE.finditer(text):
        groups = m.group(1).split(" ")
        # a word following the IBAN may have been taken for its last group
        for end in range(len(groups), 1, -1):
            cand = "".join(groups[:end])
            if validate_iban(cand):
                found.append((m.start(), cand))
                break
    for m in _IBAN_RE.finditer(text):
        if validate_iban(m.group(1)):
            found.append((m.start(), m.group(1)))
    found.sort(key=lambda x: x[0])
    return list(dict.fromkeys(v for _, v in found))
