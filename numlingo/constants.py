"""Shared lookup tables for numlingo.

All tables are read-only and built once at import time.
"""

from types import MappingProxyType
from typing import Final

# Languages
DEFAULT_LANGUAGE: Final = "en"

# Cardinal words (0-20, tens, 100)
LEXICONS: Final = MappingProxyType(
    {
        "en": MappingProxyType(
            {
                0: "zero",
                1: "one",
                2: "two",
                3: "three",
                4: "four",
                5: "five",
                6: "six",
                7: "seven",
                8: "eight",
                9: "nine",
                10: "ten",
                11: "eleven",
                12: "twelve",
                13: "thirteen",
                14: "fourteen",
                15: "fifteen",
                16: "sixteen",
                17: "seventeen",
                18: "eighteen",
                19: "nineteen",
                20: "twenty",
                30: "thirty",
                40: "forty",
                50: "fifty",
                60: "sixty",
                70: "seventy",
                80: "eighty",
                90: "ninety",
                100: "hundred",
            }
        ),
        "tr": MappingProxyType(
            {
                0: "sıfır",
                1: "bir",
                2: "iki",
                3: "üç",
                4: "dört",
                5: "beş",
                6: "altı",
                7: "yedi",
                8: "sekiz",
                9: "dokuz",
                10: "on",
                11: "on bir",
                12: "on iki",
                13: "on üç",
                14: "on dört",
                15: "on beş",
                16: "on altı",
                17: "on yedi",
                18: "on sekiz",
                19: "on dokuz",
                20: "yirmi",
                30: "otuz",
                40: "kırk",
                50: "elli",
                60: "altmış",
                70: "yetmiş",
                80: "seksen",
                90: "doksan",
                100: "yüz",
            }
        ),
        "az": MappingProxyType(
            {
                0: "sıfır",
                1: "bir",
                2: "iki",
                3: "üç",
                4: "dörd",
                5: "beş",
                6: "altı",
                7: "yeddi",
                8: "səkkiz",
                9: "doqquz",
                10: "on",
                11: "on bir",
                12: "on iki",
                13: "on üç",
                14: "on dörd",
                15: "on beş",
                16: "on altı",
                17: "on yeddi",
                18: "on səkkiz",
                19: "on doqquz",
                20: "iyirmi",
                30: "otuz",
                40: "qırx",
                50: "əlli",
                60: "altmış",
                70: "yetmiş",
                80: "səksən",
                90: "doxsan",
                100: "yüz",
            }
        ),
        "ru": MappingProxyType(
            {
                0: "ноль",
                1: "один",
                2: "два",
                3: "три",
                4: "четыре",
                5: "пять",
                6: "шесть",
                7: "семь",
                8: "восемь",
                9: "девять",
                10: "десять",
                11: "одиннадцать",
                12: "двенадцать",
                13: "тринадцать",
                14: "четырнадцать",
                15: "пятнадцать",
                16: "шестнадцать",
                17: "семнадцать",
                18: "восемнадцать",
                19: "девятнадцать",
                20: "двадцать",
                30: "тридцать",
                40: "сорок",
                50: "пятьдесят",
                60: "шестьдесят",
                70: "семьдесят",
                80: "восемьдесят",
                90: "девяносто",
                100: "сто",
                200: "двести",
                300: "триста",
                400: "четыреста",
                500: "пятьсот",
                600: "шестьсот",
                700: "семьсот",
                800: "восемьсот",
                900: "девятьсот",
            }
        ),
    }
)

# Scale words: (magnitude, singular, plural-1, plural-2), largest first
SCALES: Final = MappingProxyType(
    {
        "en": (
            (1_000_000_000_000, "trillion", "trillions", "trillions"),
            (1_000_000_000, "billion", "billions", "billions"),
            (1_000_000, "million", "millions", "millions"),
            (1_000, "thousand", "thousands", "thousands"),
            (100, "hundred", "hundreds", "hundreds"),
        ),
        "tr": (
            (1_000_000_000_000, "trilyon", "trilyon", "trilyon"),
            (1_000_000_000, "milyar", "milyar", "milyar"),
            (1_000_000, "milyon", "milyon", "milyon"),
            (1_000, "bin", "bin", "bin"),
            (100, "yüz", "yüz", "yüz"),
        ),
        "az": (
            (1_000_000_000_000, "trilyon", "trilyon", "trilyon"),
            (1_000_000_000, "milyard", "milyard", "milyard"),
            (1_000_000, "milyon", "milyon", "milyon"),
            (1_000, "min", "min", "min"),
            (100, "yüz", "yüz", "yüz"),
        ),
        "ru": (
            (1_000_000_000_000, "триллион", "триллиона", "триллионов"),
            (1_000_000_000, "миллиард", "миллиарда", "миллиардов"),
            (1_000_000, "миллион", "миллиона", "миллионов"),
            (1_000, "тысяча", "тысячи", "тысяч"),
            (100, "сто", "ста", "ста"),
        ),
    }
)

MINUS_WORDS: Final = MappingProxyType(
    {
        "en": "minus",
        "tr": "eksi",
        "az": "mənfi",
        "ru": "минус",
    }
)

# Separator between tens and ones words (21-99)
TENS_JOINERS: Final = MappingProxyType(
    {
        "en": "-",
        "tr": " ",
        "az": " ",
        "ru": "-",
    }
)

# Numbers at or above this are returned as digits
WORDS_UPPER_BOUND: Final = 10**15

# Currency names: (currency, sub-currency)
DEFAULT_CURRENCY_NAMES: Final = MappingProxyType(
    {
        "en": ("dollar", "cent"),
        "tr": ("Türk Lirası", "kuruş"),
        "az": ("manat", "qəpik"),
        "ru": ("рубль", "копейка"),
    }
)

COUNTRY_CURRENCY_NAMES: Final = MappingProxyType(
    {
        ("en", "US"): ("US dollar", "cent"),
        ("en", "GB"): ("pound sterling", "penny"),
        ("en", "CA"): ("Canadian dollar", "cent"),
        ("en", "EU"): ("euro", "cent"),
        ("tr", "TR"): ("Türk Lirası", "kuruş"),
        ("az", "AZ"): ("manat", "qəpik"),
        ("ru", "RU"): ("рубль", "копейка"),
    }
)

SUBUNITS_PER_UNIT: Final = 100

# Ordinals
ENGLISH_ORDINAL_SUFFIXES: Final = MappingProxyType({1: "st", 2: "nd", 3: "rd"})
ENGLISH_TEEN_EXCEPTIONS: Final = frozenset({11, 12, 13})

# Azerbaijani 4-way vowel harmony (-ci, -cı, -cü, -cu)
AZ_LAST_DIGIT_SUFFIXES: Final = MappingProxyType(
    {
        1: "ci",  # bir
        2: "ci",  # iki
        3: "cü",  # üç
        4: "cü",  # dörd
        5: "ci",  # beş
        6: "cı",  # altı
        7: "ci",  # yeddi
        8: "ci",  # səkkiz
        9: "cu",  # doqquz
    }
)
AZ_TENS_SUFFIXES: Final = MappingProxyType(
    {
        10: "cu",  # on
        20: "ci",  # iyirmi
        30: "cu",  # otuz
        40: "cı",  # qırx
        50: "ci",  # əlli
        60: "cı",  # altmış
        70: "ci",  # yetmiş
        80: "ci",  # səksən
        90: "cı",  # doxsan
    }
)
AZ_HUNDRED_SUFFIX: Final = "cü"  # yüz
AZ_DEFAULT_SUFFIX: Final = "ci"

# Roman numerals
ROMAN_NUMERALS: Final = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)
ROMAN_SYMBOL_VALUES: Final = MappingProxyType(
    {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
)
ROMAN_MIN: Final = 1
ROMAN_MAX: Final = 3999

# Formatting
FILE_SIZE_SUFFIXES: Final = ("bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
METRIC_SUFFIXES: Final = ((1_000_000_000, "B"), (1_000_000, "M"), (1_000, "k"))

# Math
FACTORIAL_MAX: Final = 20
DEFAULT_TOLERANCE: Final = 1e-9
