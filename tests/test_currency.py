"""Tests for currency phrasing."""

from decimal import Decimal

import pytest

from numlingo.exceptions import CurrencyFormatError
from numlingo.linguistics.currency import (
    resolve_currency_names,
    split_amount,
    to_words_currency,
)
from numlingo.linguistics.tables import LanguageCode
from numlingo.linguistics.words import to_words

DEMO_WHOLE = "eighty-seven million three hundred sixty-four thousand eight hundred eighty-three"


class TestToWordsCurrency:
    """Tests for to_words_currency."""

    def test_default_english(self, demo_amount: float) -> None:
        assert to_words_currency(demo_amount) == f"{DEMO_WHOLE} dollar fifty-six cent"

    def test_matches_word_converter(self, demo_amount: float) -> None:
        expected = f"{to_words(87364883)} dollar {to_words(56)} cent"
        assert to_words_currency(demo_amount, "en") == expected

    def test_british_pound(self, demo_amount: float) -> None:
        assert to_words_currency(demo_amount, "en", "GB") == (
            f"{DEMO_WHOLE} pound sterling fifty-six penny"
        )

    def test_euro(self) -> None:
        assert to_words_currency(Decimal("2.10"), "en", "EU") == "two euro ten cent"

    def test_codes_are_case_insensitive(self, demo_amount: float) -> None:
        assert to_words_currency(demo_amount, "EN", "gb") == to_words_currency(
            demo_amount, "en", "GB"
        )

    def test_azerbaijani(self) -> None:
        assert to_words_currency(Decimal("25.56"), "az") == "iyirmi beş manat əlli altı qəpik"

    def test_turkish(self) -> None:
        assert to_words_currency(Decimal("3.05"), "tr", "TR") == "üç Türk Lirası beş kuruş"

    def test_russian(self) -> None:
        assert to_words_currency(Decimal("2.01"), "ru") == "два рубль один копейка"

    def test_zero_fraction_omits_sub_currency(self) -> None:
        assert to_words_currency(Decimal("10.00")) == "ten dollar"
        assert to_words_currency(10) == "ten dollar"

    def test_fraction_only(self) -> None:
        assert to_words_currency(Decimal("0.05")) == "zero dollar five cent"

    def test_fraction_rounds_half_up(self) -> None:
        assert to_words_currency(Decimal("1.999")) == "one dollar one hundred cent"
        assert to_words_currency(Decimal("1.005")) == "one dollar one cent"

    def test_float_noise_is_ignored(self) -> None:
        assert to_words_currency(0.1 + 0.2) == "zero dollar thirty cent"

    def test_string_amount(self) -> None:
        assert to_words_currency("1,250.50") == "one thousand two hundred fifty dollar fifty cent"

    def test_negative_amount(self) -> None:
        assert to_words_currency(Decimal("-12.50")) == "minus thirteen dollar fifty cent"
        assert to_words_currency(Decimal("-1.50")) == "minus two dollar fifty cent"
        assert to_words_currency(Decimal("-1"), "tr") == "eksi bir Türk Lirası"

    def test_name_overrides(self) -> None:
        result = to_words_currency(
            Decimal("4.20"), "en", currency_name="lira", sub_currency_name="kurus"
        )
        assert result == "four lira twenty kurus"

    def test_partial_override(self) -> None:
        assert to_words_currency(Decimal("1.50"), "en", "GB", currency_name="quid") == (
            "one quid fifty penny"
        )

    def test_unsupported_language_uses_english(self) -> None:
        assert to_words_currency(Decimal("7.25"), "fr") == "seven dollar twenty-five cent"

    def test_invalid_amount(self) -> None:
        with pytest.raises(CurrencyFormatError):
            to_words_currency("twelve")
        with pytest.raises(ValueError):
            to_words_currency(float("nan"))
        with pytest.raises(CurrencyFormatError):
            to_words_currency(True)


class TestResolveCurrencyNames:
    """Tests for currency name lookup."""

    def test_language_default(self) -> None:
        assert resolve_currency_names("az") == ("manat", "qəpik")

    def test_country_override(self) -> None:
        assert resolve_currency_names("en", "CA") == ("Canadian dollar", "cent")
        assert resolve_currency_names("en", "us").currency == "US dollar"

    def test_unknown_country_uses_language_default(self) -> None:
        assert resolve_currency_names("en", "XX") == ("dollar", "cent")
        assert resolve_currency_names("tr", "US") == ("Türk Lirası", "kuruş")

    def test_unknown_language_uses_english(self) -> None:
        assert resolve_currency_names("de") == ("dollar", "cent")
        assert resolve_currency_names("de", "GB") == ("dollar", "cent")

    def test_language_enum(self) -> None:
        assert resolve_currency_names(LanguageCode.RU, "ru") == ("рубль", "копейка")


class TestSplitAmount:
    """Tests for whole/fraction splitting."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Decimal("87364883.56"), (87364883, 56)),
            (Decimal("0.99"), (0, 99)),
            (Decimal("5"), (5, 0)),
            (Decimal("5.5"), (5, 50)),
            (Decimal("9.995"), (9, 100)),
            (Decimal("1.999"), (1, 100)),
            (Decimal("-1.50"), (-2, 50)),
            (Decimal("-12"), (-12, 0)),
            (12.34, (12, 34)),
        ],
    )
    def test_split(self, amount: Decimal | float, expected: tuple[int, int]) -> None:
        assert split_amount(amount) == expected
