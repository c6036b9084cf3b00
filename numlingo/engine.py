"""High-level engine binding the converters to a configuration."""

import logging
from decimal import Decimal
from typing import Any, Self

from numlingo.arithmetic import is_approximately, to_file_size
from numlingo.config import NumberLinguisticsConfig
from numlingo.linguistics import LanguageCode, to_ordinal, to_words, to_words_currency

logger = logging.getLogger(__name__)


class NumberLinguisticsEngine:
    """Number-to-words, currency and ordinal formatting with configured defaults.

    Every method is a pure function of its arguments and the (frozen)
    configuration, so one engine can be shared freely between threads.

    Attributes:
        config: Engine configuration.
    """

    def __init__(self, config: NumberLinguisticsConfig | None = None) -> None:
        """Initialize engine.

        Args:
            config: Engine configuration. Defaults to English with no country.
        """
        self.config = config or NumberLinguisticsConfig()
        logger.debug(
            f"Engine ready: language={self.config.default_language}, "
            f"country={self.config.default_country}"
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create an engine from a plain configuration dictionary."""
        return cls(NumberLinguisticsConfig.from_dict(data))

    def _language(self, lang: str | LanguageCode | None) -> str | LanguageCode:
        return self.config.default_language if lang is None else lang

    def to_words(self, number: int | float | Decimal, lang: str | None = None) -> str:
        """Spell out ``number``; see :func:`numlingo.linguistics.to_words`."""
        return to_words(number, self._language(lang))

    def to_words_currency(
        self,
        amount: Decimal | int | float | str,
        lang: str | None = None,
        country: str | None = None,
        currency_name: str | None = None,
        sub_currency_name: str | None = None,
    ) -> str:
        """Spell out a monetary amount; see :func:`numlingo.linguistics.to_words_currency`.

        The configured default country is used when ``country`` is omitted.
        """
        if country is None:
            country = self.config.default_country
        return to_words_currency(
            amount,
            self._language(lang),
            country,
            currency_name=currency_name,
            sub_currency_name=sub_currency_name,
        )

    def to_ordinal(self, number: int, lang: str | None = None) -> str:
        """Format ``number`` as an ordinal; see :func:`numlingo.linguistics.to_ordinal`."""
        return to_ordinal(number, self._language(lang))

    def is_approximately(self, value: float, other: float) -> bool:
        """Compare two floats using the configured tolerance."""
        return is_approximately(value, other, self.config.tolerance)

    def to_file_size(self, num_bytes: int) -> str:
        """Format a byte count using the configured number of decimals."""
        return to_file_size(num_bytes, self.config.file_size_decimals)
