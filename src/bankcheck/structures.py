"""Per-country layouts of the country-specific part of IBANs and creditor identifiers.

BBAN layouts follow the SWIFT IBAN registry. French overseas departments and
territories use the French layout under their own country code.

Creditor identifier layouts cover the SEPA scheme countries. Where a national
community fixes the layout of the national identifier it is given exactly,
otherwise the identifier may hold up to 28 alphanumerics (35 characters for
the whole CI).
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Union

from .countries import IsoCountry
from .swift import pattern as swift
from .swift.pattern import SwiftPattern

CountryLike = Union[IsoCountry, str]


@dataclass(frozen=True)
class StructureRule:
    country: IsoCountry
    pattern: SwiftPattern

    @property
    def expression(self) -> str:
        return self.pattern.expression

    @property
    def length(self) -> Optional[int]:
        return self.pattern.fixed_length

    def is_valid(self, body: str) -> bool:
        return self.pattern.matches(body)

    def __str__(self) -> str:
        return f"{self.country.code} ({self.expression})"


class StructureRegistry:
    """Read-only country -> StructureRule table, built once."""

    def __init__(self, kind: str, expressions: Mapping[str, str]):
        rules: Dict[str, StructureRule] = {}
        for code, expression in expressions.items():
            country = IsoCountry.from_code(code)
            if country is None:
                raise ValueError(f"{code!r} is not an ISO 3166-1-alpha-2 code")
            rules[country.code] = StructureRule(country, swift.compile(expression))
        self.kind = kind
        self._rules = MappingProxyType(rules)

    def lookup(self, country: Optional[CountryLike]) -> Optional[StructureRule]:
        if country is None:
            return None
        code = country.code if isinstance(country, IsoCountry) else country.strip().upper()
        return self._rules.get(code)

    def countries(self) -> List[str]:
        return sorted(self._rules)

    def __contains__(self, country: object) -> bool:
        if not isinstance(country, (IsoCountry, str)):
            return False
        return self.lookup(country) is not None

    def __iter__(self) -> Iterator[StructureRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"StructureRegistry({self.kind!r}, {len(self)} countries)"


_FRENCH_LAYOUT = "5!n5!n11!c2!n"

BBAN_EXPRESSIONS = {
    "AD": "4!n4!n12!c",
    "AE": "3!n16!n",
    "AL": "8!n16!c",
    "AT": "5!n11!n",
    "AZ": "4!a20!c",
    "BA": "3!n3!n8!n2!n",
    "BE": "3!n7!n2!n",
    "BG": "4!a4!n2!n8!c",
    "BH": "4!a14!c",
    "BI": "5!n5!n11!n2!n",
    "BR": "8!n5!n10!n1!a1!c",
    "BY": "4!c4!n16!c",
    "CH": "5!n12!c",
    "CR": "4!n14!n",
    "CY": "3!n5!n16!c",
    "CZ": "4!n6!n10!n",
    "DE": "8!n10!n",
    "DJ": "5!n5!n11!n2!n",
    "DK": "4!n9!n1!n",
    "DO": "4!c20!n",
    "EE": "2!n2!n11!n1!n",
    "EG": "4!n4!n17!n",
    "ES": "4!n4!n1!n1!n10!n",
    "FI": "3!n11!n",
    "FK": "2!a12!n",
    "FO": "4!n9!n1!n",
    "FR": _FRENCH_LAYOUT,
    "GB": "4!a6!n8!n",
    "GE": "2!a16!n",
    "GI": "4!a15!c",
    "GL": "4!n9!n1!n",
    "GR": "3!n4!n16!c",
    "GT": "4!c20!c",
    "HR": "7!n10!n",
    "HU": "3!n4!n1!n15!n1!n",
    "IE": "4!a6!n8!n",
    "IL": "3!n3!n13!n",
    "IQ": "4!a3!n12!n",
    "IS": "4!n2!n6!n10!n",
    "IT": "1!a5!n5!n12!c",
    "JO": "4!a4!n18!c",
    "KW": "4!a22!c",
    "KZ": "3!n13!c",
    "LB": "4!n20!c",
    "LC": "4!a24!c",
    "LI": "5!n12!c",
    "LT": "5!n11!n",
    "LU": "3!n13!c",
    "LV": "4!a13!c",
    "LY": "3!n3!n15!n",
    "MC": "5!n5!n11!c2!n",
    "MD": "2!c18!c",
    "ME": "3!n13!n2!n",
    "MK": "3!n10!c2!n",
    "MN": "4!n12!n",
    "MR": "5!n5!n11!n2!n",
    "MT": "4!a5!n18!c",
    "MU": "4!a2!n2!n12!n3!n3!a",
    "NI": "4!a20!n",
    "NL": "4!a10!n",
    "NO": "4!n6!n1!n",
    "OM": "3!n16!c",
    "PK": "4!a16!c",
    "PL": "8!n16!n",
    "PS": "4!a21!c",
    "PT": "4!n4!n11!n2!n",
    "QA": "4!a21!c",
    "RO": "4!a16!c",
    "RS": "3!n13!n2!n",
    "RU": "9!n5!n15!c",
    "SA": "2!n18!c",
    "SC": "4!a2!n2!n16!n3!a",
    "SD": "2!n12!n",
    "SE": "3!n16!n1!n",
    "SI": "5!n8!n2!n",
    "SK": "4!n6!n10!n",
    "SM": "1!a5!n5!n12!c",
    "SO": "4!n3!n12!n",
    "ST": "4!n4!n11!n2!n",
    "SV": "4!a20!n",
    "TL": "3!n14!n2!n",
    "TN": "2!n3!n13!n2!n",
    "TR": "5!n1!n16!c",
    "UA": "6!n19!c",
    "VA": "3!n15!n",
    "VG": "4!a16!n",
    "YE": "4!a4!n18!c",
    # French overseas departments and territories
    "BL": _FRENCH_LAYOUT,
    "GF": _FRENCH_LAYOUT,
    "GP": _FRENCH_LAYOUT,
    "MF": _FRENCH_LAYOUT,
    "MQ": _FRENCH_LAYOUT,
    "NC": _FRENCH_LAYOUT,
    "PF": _FRENCH_LAYOUT,
    "PM": _FRENCH_LAYOUT,
    "RE": _FRENCH_LAYOUT,
    "TF": _FRENCH_LAYOUT,
    "WF": _FRENCH_LAYOUT,
    "YT": _FRENCH_LAYOUT,
}

_ANY_NATIONAL_ID = "28c"

CREDITOR_EXPRESSIONS = {
    "AD": _ANY_NATIONAL_ID,
    "AT": "11!c",
    "BE": _ANY_NATIONAL_ID,
    "BG": _ANY_NATIONAL_ID,
    "CH": _ANY_NATIONAL_ID,
    "CY": _ANY_NATIONAL_ID,
    "CZ": _ANY_NATIONAL_ID,
    "DE": "11!c",
    "DK": _ANY_NATIONAL_ID,
    "EE": _ANY_NATIONAL_ID,
    "ES": "9!c",
    "FI": _ANY_NATIONAL_ID,
    "FR": "6!c",
    "GB": _ANY_NATIONAL_ID,
    "GI": _ANY_NATIONAL_ID,
    "GR": _ANY_NATIONAL_ID,
    "HR": _ANY_NATIONAL_ID,
    "HU": _ANY_NATIONAL_ID,
    "IE": _ANY_NATIONAL_ID,
    "IS": _ANY_NATIONAL_ID,
    "IT": "16!c",
    "LI": _ANY_NATIONAL_ID,
    "LT": _ANY_NATIONAL_ID,
    "LU": _ANY_NATIONAL_ID,
    "LV": _ANY_NATIONAL_ID,
    "MC": _ANY_NATIONAL_ID,
    "MT": _ANY_NATIONAL_ID,
    "NL": _ANY_NATIONAL_ID,
    "NO": _ANY_NATIONAL_ID,
    "PL": _ANY_NATIONAL_ID,
    "PT": _ANY_NATIONAL_ID,
    "RO": _ANY_NATIONAL_ID,
    "SE": _ANY_NATIONAL_ID,
    "SI": _ANY_NATIONAL_ID,
    "SK": _ANY_NATIONAL_ID,
    "SM": _ANY_NATIONAL_ID,
    "VA": _ANY_NATIONAL_ID,
}

BBAN_STRUCTURES = StructureRegistry("IBAN", BBAN_EXPRESSIONS)
CREDITOR_STRUCTURES = StructureRegistry("creditor identifier", CREDITOR_EXPRESSIONS)
