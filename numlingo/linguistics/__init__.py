"""Number linguistics: cardinal words, currency phrases and ordinals."""

from numlingo.linguistics.currency import resolve_currency_names, split_amount, to_words_currency
from numlingo.linguistics.ordinal import azerbaijani_suffix, english_suffix, to_ordinal
from numlingo.linguistics.tables import (
    CurrencyNames,
    LanguageCode,
    LanguageTables,
    ScaleEntry,
    get_tables,
    normalize_language,
)
from numlingo.linguistics.words import select_scale_word, to_words

__all__ = [
    "resolve_currency_names",
    "split_amount",
    "to_words_currency",
    "azerbaijani_suffix",
    "english_suffix",
    "to_ordinal",
    "CurrencyNames",
    "LanguageCode",
    "LanguageTables",
    "ScaleEntry",
    "get_tables",
    "normalize_language",
    "select_scale_word",
    "to_words",
]
