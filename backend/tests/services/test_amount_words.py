import logging
from decimal import Decimal

import pytest

from mabank.services.amount_words import (
    CONVERSION_ERROR,
    ZERO_PHRASE,
    amount_to_words,
    whole_to_words,
)


def test_zero_and_sign():
    assert amount_to_words(0) == ZERO_PHRASE == "zéro dirhams"
    assert amount_to_words(0.0) == ZERO_PHRASE
    assert amount_to_words(-45.67) == "moins quarante-cinq dirhams et soixante-sept centimes"
    assert amount_to_words(-3) == "moins trois dirhams"


def test_singular_units():
    assert amount_to_words(1) == "un dirham"
    assert amount_to_words(0.01) == "un centime"
    assert amount_to_words(1.01) == "un dirham et un centime"
    assert amount_to_words(0.5) == "cinquante centimes"
    assert amount_to_words(2.02) == "deux dirhams et deux centimes"


@pytest.mark.parametrize("n,words", [
    (10, "dix"),
    (16, "seize"),
    (17, "dix-sept"),
    (21, "vingt-un"),
    (45, "quarante-cinq"),
    (60, "soixante"),
    (70, "soixante-dix"),
    (71, "soixante-onze"),
    (77, "soixante-dix-sept"),
    (80, "quatre-vingt"),
    (81, "quatre-vingt-un"),
    (89, "quatre-vingt-neuf"),
    (90, "quatre-vingt-dix"),
    (91, "quatre-vingt-onze"),
    (99, "quatre-vingt-dix-neuf"),
])
def test_below_hundred(n, words):
    assert whole_to_words(n) == words


def test_hundreds():
    assert amount_to_words(100) == "cent dirhams"
    assert amount_to_words(101) == "cent un dirhams"
    assert amount_to_words(200) == "deux cents dirhams"
    assert amount_to_words(1234) == "mille deux cents trente-quatre dirhams"
    assert amount_to_words(980) == "neuf cents quatre-vingt dirhams"


def test_thousands_and_millions():
    assert amount_to_words(1000) == "mille dirhams"
    assert amount_to_words(1001) == "mille un dirhams"
    assert amount_to_words(2000) == "deux mille dirhams"
    assert amount_to_words(80000) == "quatre-vingt mille dirhams"
    assert amount_to_words(1_000_000) == "un million dirhams"
    assert amount_to_words(2_000_000) == "deux millions dirhams"
    assert amount_to_words(3_001_100) == "trois millions mille cent dirhams"
    assert amount_to_words(1_000_000_000) == "un milliard dirhams"
    assert amount_to_words(2_500_000_000) == "deux milliards cinq cents millions dirhams"


def test_cents_rounding():
    assert amount_to_words(12.345) == "douze dirhams et trente-cinq centimes"
    assert amount_to_words(1.999) == "deux dirhams"
    assert amount_to_words(0.004) == ZERO_PHRASE
    assert amount_to_words(Decimal("7.10")) == "sept dirhams et dix centimes"


@pytest.mark.parametrize("value", [
    None,
    "12",
    True,
    float("nan"),
    float("inf"),
    -float("inf"),
    Decimal("NaN"),
    10 ** 12,
    [1],
])
def test_invalid_amounts(value):
    assert amount_to_words(value) == CONVERSION_ERROR


def test_invalid_amount_logged(caplog):
    caplog.set_level(logging.INFO, logger="mabank.services.amount_words")
    assert amount_to_words("abc") == "erreur de conversion"
    rec = [r for r in caplog.records if r.getMessage() == "amount_conversion_failed"]
    assert rec and rec[0].error_code == "INVALID_AMOUNT"
