"""SEPA Creditor Identifiers, as defined by the European Payments Council.

    positions 1-2   ISO 3166-1 country code
    positions 3-4   check digits, ISO 7064 MOD 97-10
    positions 5-7   creditor business code, ZZZ when unused
    positions 8-    national identifier of the creditor

The business code is not covered by the check digits: it is cut out of the
identifier before the MOD 97-10 validation.
"""
from __future__ import annotations

import re
from typing import List, Optional

from .. import checkdigit
from ..errors import FormatError, IncorrectCheckDigitsError, InvalidStructureError
from ..normalize import normalize
from ..structures import CREDITOR_STRUCTURES, CountryLike, StructureRegistry
from ..swift import pattern as swift
from .base import BankIdentifier, country_or_raise, require, resolve_country, rule_or_raise

KIND = "creditor identifier"

NO_BUSINESS_CODE = "ZZZ"

COUNTRY_CODE_INDEX = 0
COUNTRY_CODE_LENGTH = 2
CHECK_DIGITS_INDEX = COUNTRY_CODE_INDEX + COUNTRY_CODE_LENGTH
CHECK_DIGITS_LENGTH = 2
BUSINESS_CODE_INDEX = CHECK_DIGITS_INDEX + CHECK_DIGITS_LENGTH
BUSINESS_CODE_LENGTH = 3
NATIONAL_ID_INDEX = BUSINESS_CODE_INDEX + BUSINESS_CODE_LENGTH

BASIC_FORMAT = swift.compile("2!a2!n3!c28c")
BUSINESS_CODE_FORMAT = swift.compile("3!c")

_CI_RE = re.compile(r'\b([A-Z]{2}\d{2}[A-Z0-9]{3}[A-Z0-9]{1,28})\b')


class CreditorIdentifier(BankIdentifier):
    """A validated creditor identifier."""

    __slots__ = ()

    kind = KIND
    country_code_index = COUNTRY_CODE_INDEX

    def __init__(self, creditor_id: str, *, registry: Optional[StructureRegistry] = None):
        super().__init__(creditor_id, registry=registry)

    @classmethod
    def _parse(cls, creditor_id: str, registry: Optional[StructureRegistry] = None) -> str:
        if registry is None:
            registry = CREDITOR_STRUCTURES

        normalized = normalize(creditor_id)
        if not BASIC_FORMAT.matches(normalized):
            raise FormatError(KIND, creditor_id)

        country = country_or_raise(normalized[COUNTRY_CODE_INDEX:CHECK_DIGITS_INDEX], KIND, creditor_id)
        rule = rule_or_raise(registry, country, KIND, creditor_id)

        if not rule.is_valid(normalized[NATIONAL_ID_INDEX:]):
            raise InvalidStructureError(KIND, creditor_id, rule=rule)

        expected = checkdigit.calculate(normalized[:CHECK_DIGITS_INDEX] + "00" + normalized[NATIONAL_ID_INDEX:])
        if normalized[CHECK_DIGITS_INDEX:BUSINESS_CODE_INDEX] != expected:
            raise IncorrectCheckDigitsError(KIND, creditor_id)

        return normalized

    @classmethod
    def from_parts(cls, country: CountryLike, business_code: str, national_id: str, *,
                   registry: Optional[StructureRegistry] = None) -> "CreditorIdentifier":
        """Build a creditor identifier, computing the check digits.

        Use NO_BUSINESS_CODE when the creditor has no business code.
        """
        if registry is None:
            registry = CREDITOR_STRUCTURES
        country = resolve_country(country, KIND)
        require("business_code", business_code)
        require("national_id", national_id)

        normalized_business_code = normalize(business_code)
        if not BUSINESS_CODE_FORMAT.matches(normalized_business_code):
            raise FormatError(KIND, business_code)

        normalized_national_id = normalize(national_id)
        rule = rule_or_raise(registry, country, KIND, national_id)
        if not rule.is_valid(normalized_national_id):
            raise InvalidStructureError(KIND, national_id, rule=rule)

        check_digits = checkdigit.calculate(country.code + "00" + normalized_national_id)
        return cls._from_canonical(country.code + check_digits + normalized_business_code + normalized_national_id)

    @property
    def check_digits(self) -> str:
        return self._value[CHECK_DIGITS_INDEX:BUSINESS_CODE_INDEX]

    @property
    def business_code(self) -> str:
        return self._value[BUSINESS_CODE_INDEX:NATIONAL_ID_INDEX]

    @property
    def national_identifier(self) -> str:
        return self._value[NATIONAL_ID_INDEX:]


def validate_creditor_id(creditor_id: str) -> bool:
    return CreditorIdentifier.is_valid(creditor_id)


def find_creditor_ids(text: str) -> List[str]:
    """Valid creditor identifiers found in free text, first-seen order."""
    out = []
    for m in _CI_RE.finditer(text.upper()):
        if validate_creditor_id(m.group(1)):
            out.append(m.group(1))
    return list(dict.fromkeys(out))
