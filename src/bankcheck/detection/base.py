from __future__ import annotations

import logging
from typing import ClassVar, Optional

from ..countries import IsoCountry
from ..errors import BankIdentifierError, UnknownCountryError, UnsupportedCountryError
from ..structures import CountryLike, StructureRegistry, StructureRule

log = logging.getLogger(__name__)


def require(name: str, value):
    if value is None:
        raise TypeError(f"the {name} argument cannot be None")
    return value


def country_or_raise(code: str, kind: str, input_string: str) -> IsoCountry:
    country = IsoCountry.from_code(code)
    if country is None:
        raise UnknownCountryError(kind, input_string)
    return country


def resolve_country(country: CountryLike, kind: str) -> IsoCountry:
    """Accept an IsoCountry or its two-letter code."""
    require("country", country)
    if isinstance(country, IsoCountry):
        return country
    if not isinstance(country, str):
        raise TypeError(f"country must be an IsoCountry or a str, not {type(country).__name__}")
    return country_or_raise(country, kind, country)


def rule_or_raise(registry: StructureRegistry, country: IsoCountry, kind: str, input_string: str) -> StructureRule:
    rule = registry.lookup(country)
    if rule is None:
        raise UnsupportedCountryError(kind, input_string, country=country.code)
    return rule


class BankIdentifier:
    """Immutable wrapper around a normalized, validated identifier string.

    Subclasses implement ``_parse`` (raw string -> canonical string, raising a
    BankIdentifierError) and set ``kind`` and ``country_code_index``.
    """

    __slots__ = ("_value",)

    kind: ClassVar[str] = "identifier"
    country_code_index: ClassVar[int] = 0

    def __init__(self, value: str, **options):
        require(self.kind, value)
        object.__setattr__(self, "_value", self._parse(value, **options))

    @classmethod
    def _parse(cls, value: str, **options) -> str:
        raise NotImplementedError

    @classmethod
    def _from_canonical(cls, value: str):
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_value", value)
        return obj

    @classmethod
    def is_valid(cls, value: Optional[str], **options) -> bool:
        """Never raises: every rejection, including non-string input, is False."""
        if not isinstance(value, str):
            return False
        try:
            cls._parse(value, **options)
        except BankIdentifierError as e:
            log.debug("%s rejected: %s", cls.kind, e, extra={"identifier_kind": cls.kind})
            return False
        return True

    @property
    def country_code(self) -> str:
        return self._value[self.country_code_index:self.country_code_index + 2]

    @property
    def country(self) -> IsoCountry:
        return IsoCountry[self.country_code]

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self)._from_canonical, (self._value,))

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"
