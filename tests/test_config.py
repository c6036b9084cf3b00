"""Tests for engine configuration."""

import pytest
from pydantic import ValidationError

from numlingo.config import NumberLinguisticsConfig
from numlingo.exceptions import ConfigurationError
from numlingo.linguistics.tables import LanguageCode


class TestNumberLinguisticsConfig:
    """Tests for NumberLinguisticsConfig."""

    def test_default_config(self) -> None:
        config = NumberLinguisticsConfig()
        assert config.default_language is LanguageCode.EN
        assert config.default_country is None
        assert config.tolerance == 1e-9
        assert config.file_size_decimals == 1

    def test_language_is_normalized(self) -> None:
        config = NumberLinguisticsConfig(default_language=" AZ ")
        assert config.default_language is LanguageCode.AZ

    def test_unsupported_language_falls_back(self) -> None:
        config = NumberLinguisticsConfig(default_language="de")
        assert config.default_language is LanguageCode.EN

    def test_country_is_upper_cased(self) -> None:
        assert NumberLinguisticsConfig(default_country="gb").default_country == "GB"
        assert NumberLinguisticsConfig(default_country="  ").default_country is None

    def test_frozen(self) -> None:
        config = NumberLinguisticsConfig()
        with pytest.raises(ValidationError):
            config.default_language = "ru"


class TestFromDict:
    """Tests for from_dict."""

    def test_load_from_dict(self) -> None:
        data = {
            "default_language": "ru",
            "default_country": "ru",
            "tolerance": 0.001,
            "file_size_decimals": 2,
        }
        config = NumberLinguisticsConfig.from_dict(data)
        assert config.default_language is LanguageCode.RU
        assert config.default_country == "RU"
        assert config.tolerance == 0.001
        assert config.file_size_decimals == 2

    @pytest.mark.parametrize(
        "data",
        [
            {"tolerance": 0},
            {"tolerance": -1.0},
            {"file_size_decimals": -1},
            {"file_size_decimals": 11},
            {"default_language": 5},
        ],
    )
    def test_invalid_values_raise(self, data: dict) -> None:
        with pytest.raises(ConfigurationError):
            NumberLinguisticsConfig.from_dict(data)
