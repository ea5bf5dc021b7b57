import pytest

from mdm_core.documents.patients import (
    PatientKey,
    is_placeholder,
    is_same_patient,
    levenshtein,
    normalize_claim_number,
    normalize_date_string,
    normalize_patient_name,
)


@pytest.mark.parametrize("value", ["", "  ", "Not specified", "UNDEFINED", "n/a", "NA", None])
def test_placeholders(value):
    assert is_placeholder(value)


def test_real_names_are_not_placeholders():
    assert not is_placeholder("Nadia")


def test_claim_numbers_compare_on_alphanumerics():
    assert normalize_claim_number("wc-1001 ") == normalize_claim_number("WC 1001") == "WC1001"
    assert normalize_claim_number("Not specified") == ""


def test_patient_name_key_ignores_order_case_and_initials():
    assert normalize_patient_name("Doe, Jane A") == normalize_patient_name("jane doe") == "doe jane"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1980-01-15", "1980-01-15"),
        ("1980-01-15T00:00:00Z", "1980-01-15"),
        ("1980-01-15T10:30:00.000+00:00", "1980-01-15"),
        ("", ""),
    ],
)
def test_date_normalization(raw, expected):
    assert normalize_date_string(raw) == expected


def test_bad_date_raises():
    with pytest.raises(ValueError):
        normalize_date_string("15/01/1980")


def test_us_style_dates_are_accepted():
    assert normalize_date_string("01/15/1980") == "1980-01-15"


def test_levenshtein():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("", "abc") == 3
    assert levenshtein("same", "same") == 0


def _key(name, dob="", claim=""):
    return PatientKey.for_values(name, dob, claim)


def test_matching_claims_decide_alone():
    assert is_same_patient(_key("Jane Doe", claim="WC-1"), _key("Someone Else", claim="wc 1"))
    assert not is_same_patient(_key("Jane Doe", claim="WC-1"), _key("Jane Doe", claim="WC-2"))


def test_missing_claim_falls_back_to_name_and_dob():
    assert is_same_patient(_key("Jane Doe", "1980-01-15", "WC-1"), _key("Jane Doe", "1980-01-15"))
    assert not is_same_patient(_key("Jane Doe", "1980-01-15"), _key("Jane Doe", "1990-01-15"))


def test_small_name_typos_match():
    assert is_same_patient(_key("Jon Smith", "1980-01-15"), _key("John Smith", "1980-01-15"))
    assert not is_same_patient(_key("Ann Lee"), _key("Bob Ray"))


def test_last_name_and_close_dob_match():
    assert is_same_patient(_key("Robert Brown", "1980-01-15"), _key("Bobby Brown", "1980-01-16"))
    assert not is_same_patient(_key("Robert Brown", "1980-01-15"), _key("Bobby Brown", "1980-01-25"))


def test_one_missing_dob_does_not_block_a_name_match():
    assert is_same_patient(_key("Jane Doe", "1980-01-15"), _key("Doe, Jane"))
