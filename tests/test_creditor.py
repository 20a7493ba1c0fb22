import pytest

from bankcheck.countries import IsoCountry
from bankcheck.detection.creditor import (
    NO_BUSINESS_CODE,
    CreditorIdentifier,
    find_creditor_ids,
    validate_creditor_id,
)
from bankcheck.errors import (
    BankIdentifierError,
    FormatError,
    IncorrectCheckDigitsError,
    InvalidStructureError,
    UnknownCountryError,
    UnsupportedCountryError,
)

VALID = [
    "DE98ZZZ09999999999",
    "FR72ZZZ123456",
    "ES59ZZZX1234567L",
    "AT61ZZZ01234567890",
    "IT66ZZZA1B2C3D4E5F6G7H8",
    "BE69ZZZ050D000000008",
]


@pytest.mark.parametrize("value", VALID)
def test_valid_creditor_ids(value):
    assert CreditorIdentifier.is_valid(value)
    assert str(CreditorIdentifier(value)) == value


def test_normalization():
    assert str(CreditorIdentifier(" fr72 zzz 123456 ")) == "FR72ZZZ123456"


def test_accessors():
    ci = CreditorIdentifier("DE98ZZZ09999999999")
    assert ci.country_code == "DE"
    assert ci.country is IsoCountry.DE
    assert ci.check_digits == "98"
    assert ci.business_code == "ZZZ"
    assert ci.national_identifier == "09999999999"


def test_business_code_is_not_part_of_the_check_digits():
    a = CreditorIdentifier("FR72ZZZ123456")
    b = CreditorIdentifier("FR72ABC123456")
    c = CreditorIdentifier("FR72X9Y123456")
    assert a.check_digits == b.check_digits == c.check_digits
    assert a != b


def test_incorrect_check_digits():
    with pytest.raises(IncorrectCheckDigitsError) as e:
        CreditorIdentifier("FR73ZZZ123456")
    assert e.value.input_string == "FR73ZZZ123456"


def test_check_digits_outside_the_issued_range_are_rejected():
    assert str(CreditorIdentifier.from_parts("DE", "ZZZ", "00000000030")) == "DE02ZZZ00000000030"
    with pytest.raises(IncorrectCheckDigitsError):
        CreditorIdentifier("DE99ZZZ00000000030")
    assert not CreditorIdentifier.is_valid("DE99ABC00000000030")


@pytest.mark.parametrize("value", ["", "FR72", "FR72ZZZ", "FR7ZZZZ123456", "F172ZZZ123456", "FR72ZZZ12-456", "FR72ZZZ" + "1" * 29])
def test_format_errors(value):
    with pytest.raises(FormatError):
        CreditorIdentifier(value)


def test_unknown_country():
    with pytest.raises(UnknownCountryError):
        CreditorIdentifier("XX72ZZZ123456")


def test_unsupported_country():
    with pytest.raises(UnsupportedCountryError) as e:
        CreditorIdentifier("US72ZZZ123456")
    assert e.value.country == "US"
    assert "creditor identifier" in str(e.value)


def test_invalid_structure():
    with pytest.raises(InvalidStructureError) as e:
        CreditorIdentifier("FR72ZZZ1234567")
    assert e.value.rule.expression == "6!c"


@pytest.mark.parametrize("value", VALID + ["FR73ZZZ123456", "US72ZZZ123456", "", "FR72ZZZ1234567"])
def test_is_valid_iff_construction_succeeds(value):
    try:
        CreditorIdentifier(value)
        constructed = True
    except BankIdentifierError:
        constructed = False
    assert CreditorIdentifier.is_valid(value) == constructed


def test_is_valid_never_raises():
    assert validate_creditor_id(None) is False
    assert validate_creditor_id(b"FR72ZZZ123456") is False


def test_from_parts():
    ci = CreditorIdentifier.from_parts(IsoCountry.FR, NO_BUSINESS_CODE, "123456")
    assert str(ci) == "FR72ZZZ123456"
    assert ci == CreditorIdentifier("FR72ZZZ123456")


def test_from_parts_normalizes():
    ci = CreditorIdentifier.from_parts("de", "abc", " 0999 9999 999 ")
    assert str(ci) == "DE98ABC09999999999"
    assert CreditorIdentifier.is_valid(str(ci))


@pytest.mark.parametrize("value", VALID)
def test_from_parts_round_trip(value):
    ci = CreditorIdentifier(value)
    rebuilt = CreditorIdentifier.from_parts(ci.country, ci.business_code, ci.national_identifier)
    assert rebuilt == ci
    assert CreditorIdentifier(str(rebuilt)) == ci


def test_from_parts_errors():
    with pytest.raises(FormatError) as e:
        CreditorIdentifier.from_parts(IsoCountry.FR, "Z-Z", "123456")
    assert e.value.input_string == "Z-Z"
    with pytest.raises(InvalidStructureError) as e:
        CreditorIdentifier.from_parts(IsoCountry.FR, "ZZZ", "12345")
    assert e.value.input_string == "12345"
    with pytest.raises(UnsupportedCountryError):
        CreditorIdentifier.from_parts(IsoCountry.US, "ZZZ", "123456")
    with pytest.raises(UnknownCountryError):
        CreditorIdentifier.from_parts("QQ", "ZZZ", "123456")


def test_from_parts_preconditions():
    with pytest.raises(TypeError):
        CreditorIdentifier.from_parts(IsoCountry.FR, None, "123456")
    with pytest.raises(TypeError):
        CreditorIdentifier.from_parts(IsoCountry.FR, "ZZZ", None)
    with pytest.raises(TypeError):
        CreditorIdentifier(None)


def test_not_equal_to_other_identifier_kinds():
    from bankcheck.detection.iban import Iban
    ci = CreditorIdentifier("FR72ZZZ123456")
    assert ci != Iban("FR1420041010050500013M02606")
    assert ci != "FR72ZZZ123456"


def test_find_creditor_ids():
    text = "Mandate signed with creditor fr72zzz123456 / DE98ZZZ09999999999; FR73ZZZ123456 is wrong."
    assert find_creditor_ids(text) == ["FR72ZZZ123456", "DE98ZZZ09999999999"]
