from __future__ import annotations

import pytest

from pricing.data.currency import CurrencyNormalizer


@pytest.fixture
def normalizer():
    return CurrencyNormalizer()


@pytest.mark.parametrize("raw, expected", [
    ("AR", "ARGENTINA"),
    ("ar", "ARGENTINA"),
    ("ARG", "ARGENTINA"),
    (" Argentina ", "ARGENTINA"),
    ("PARAGUAY\n", "PARAGUAY"),
    ("PT", "PORTUGAL"),
    ("Perú", "PERU"),
])
def test_normalize_country_aliases(normalizer, raw, expected):
    assert normalizer.normalize_country(raw) == expected


def test_normalize_country_falls_back_to_cleaned_input(normalizer):
    assert normalizer.normalize_country("  brasil ") == "BRASIL"
    assert normalizer.normalize_country("") == ""
    assert normalizer.normalize_country(None) == ""


def test_convert_argentina(normalizer):
    assert normalizer.convert_to_reference(1676, "AR") == 1.0
    assert normalizer.convert_to_reference(1676, "argentina") == 1.0


def test_convert_unknown_country_is_identity(normalizer):
    assert normalizer.convert_to_reference(123.5, "XX") == 123.5
    assert normalizer.convert_to_reference(123.5, "") == 123.5
    assert normalizer.convert_to_reference(123.5, None) == 123.5


def test_injected_tables():
    n = CurrencyNormalizer(exchange_rates={"zz": 4}, country_aliases={"ZZ": "ZETALAND"})
    assert n.normalize_country("zz") == "ZETALAND"
    assert n.convert_to_reference(10, "ZZ") == 2.5
    # default tables are not consulted
    assert n.convert_to_reference(1676, "AR") == 1676


def test_zero_rate_treated_as_unknown():
    n = CurrencyNormalizer(exchange_rates={"ZZ": 0})
    assert n.convert_to_reference(10, "ZZ") == 10
