import pytest

from bankcheck.countries import IsoCountry
from bankcheck.normalize import normalize
from bankcheck.structures import BBAN_STRUCTURES, CREDITOR_STRUCTURES, StructureRegistry
from bankcheck.errors import SwiftPatternSyntaxError


def test_from_code():
    assert IsoCountry.from_code("FR") is IsoCountry.FR
    assert IsoCountry.from_code("fr") is IsoCountry.FR
    assert IsoCountry.from_code(" FR ") is IsoCountry.FR
    assert IsoCountry.from_code("XX") is None
    assert IsoCountry.from_code("") is None
    assert IsoCountry.from_code(None) is None


def test_every_country_round_trips():
    for country in IsoCountry:
        assert IsoCountry.from_code(country.code) is country
        assert len(country.code) == 2


def test_country_attributes():
    assert IsoCountry.DE.code == "DE"
    assert IsoCountry.DE.label == "Germany"
    assert str(IsoCountry.DE) == "DE"


def test_bban_lookup():
    rule = BBAN_STRUCTURES.lookup(IsoCountry.FR)
    assert rule.expression == "5!n5!n11!c2!n"
    assert rule.length == 23
    assert rule.is_valid("20041010050500013M02606")
    assert not rule.is_valid("20041010050500013M0260")
    assert BBAN_STRUCTURES.lookup("de").length == 18
    assert BBAN_STRUCTURES.lookup(IsoCountry.US) is None
    assert BBAN_STRUCTURES.lookup(None) is None


def test_french_territories_share_the_french_layout():
    for code in ("GF", "GP", "MQ", "RE", "YT", "NC", "PF"):
        assert BBAN_STRUCTURES.lookup(code).pattern == BBAN_STRUCTURES.lookup("FR").pattern


def test_registry_protocol():
    assert "FR" in BBAN_STRUCTURES
    assert IsoCountry.FR in BBAN_STRUCTURES
    assert "US" not in BBAN_STRUCTURES
    assert 42 not in BBAN_STRUCTURES
    assert len(BBAN_STRUCTURES) == len(BBAN_STRUCTURES.countries())
    assert all(rule.country.code in BBAN_STRUCTURES.countries() for rule in BBAN_STRUCTURES)
    assert "FR" in CREDITOR_STRUCTURES
    assert "US" not in CREDITOR_STRUCTURES


def test_creditor_lengths():
    assert CREDITOR_STRUCTURES.lookup("DE").length == 11
    assert CREDITOR_STRUCTURES.lookup("NL").length is None


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        BBAN_STRUCTURES._rules["US"] = BBAN_STRUCTURES.lookup("FR")


def test_registry_rejects_bad_tables():
    with pytest.raises(ValueError):
        StructureRegistry("IBAN", {"XX": "4!n"})
    with pytest.raises(SwiftPatternSyntaxError):
        StructureRegistry("IBAN", {"FR": "4!x"})


@pytest.mark.parametrize("value", ["", "fr14 2004", " a\tb\nc  ", "ÄBC", "déjà vu"])
def test_normalize_is_idempotent(value):
    assert normalize(normalize(value)) == normalize(value)


def test_normalize():
    assert normalize(" fr14 2004\t1010\n") == "FR1420041010"
    # only ASCII letters are upper cased
    assert normalize("straße") == "STRAßE"
