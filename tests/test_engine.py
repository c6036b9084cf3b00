"""Tests for the configured engine facade."""

from decimal import Decimal

from numlingo import NumberLinguisticsConfig, NumberLinguisticsEngine, to_words


class TestNumberLinguisticsEngine:
    """Tests for NumberLinguisticsEngine."""

    def test_defaults_to_english(self, engine: NumberLinguisticsEngine) -> None:
        assert engine.to_words(42) == "forty-two"
        assert engine.to_ordinal(3) == "3rd"
        assert engine.to_words_currency(Decimal("1.50")) == "one dollar fifty cent"

    def test_configured_language(self, az_engine: NumberLinguisticsEngine) -> None:
        assert az_engine.to_words(5) == "beş"
        assert az_engine.to_ordinal(5) == "5-ci"
        assert az_engine.to_words_currency(Decimal("2.10")) == "iki manat on qəpik"

    def test_per_call_language_override(self, az_engine: NumberLinguisticsEngine) -> None:
        assert az_engine.to_words(5, "ru") == "пять"
        assert az_engine.to_ordinal(5, "tr") == "5."

    def test_default_country(self) -> None:
        engine = NumberLinguisticsEngine(NumberLinguisticsConfig(default_country="gb"))
        assert engine.to_words_currency(Decimal("3.01")) == "three pound sterling one penny"
        assert engine.to_words_currency(Decimal("3"), country="EU") == "three euro"

    def test_default_country_ignored_for_other_language(self) -> None:
        engine = NumberLinguisticsEngine(NumberLinguisticsConfig(default_country="GB"))
        assert engine.to_words_currency(Decimal("3"), "az") == "üç manat"

    def test_from_dict(self) -> None:
        engine = NumberLinguisticsEngine.from_dict({"default_language": "tr"})
        assert engine.to_words(21) == "yirmi bir"

    def test_matches_module_functions(self, engine: NumberLinguisticsEngine) -> None:
        for n in (0, 17, 110100021, -45):
            assert engine.to_words(n) == to_words(n)

    def test_tolerance(self) -> None:
        engine = NumberLinguisticsEngine(NumberLinguisticsConfig(tolerance=0.5))
        assert engine.is_approximately(1.0, 1.4)
        assert not engine.is_approximately(1.0, 1.6)

    def test_file_size_decimals(self) -> None:
        engine = NumberLinguisticsEngine(NumberLinguisticsConfig(file_size_decimals=2))
        assert engine.to_file_size(1536) == "1.50 KB"
