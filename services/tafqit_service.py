# services/tafqit_service.py
# Spells invoice / voucher amounts in words (EN / AR / KU) including the currency
# name and, for US dollars, the cents.
# Exposes: speak(amount, language, currency), number_to_words(n, language), TafqitService

import logging
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Dict, Mapping, Optional, Tuple

from constants import AmountLanguage, CurrencyCode, ConfigKeys
from exceptions import InvalidAmountError, UnsupportedMagnitudeError
from services.currency_service import parse_currency

logger = logging.getLogger(__name__)

EN = AmountLanguage.ENGLISH
AR = AmountLanguage.ARABIC
KU = AmountLanguage.KURDISH

# Whole parts from one trillion upwards have no scale word.
MAX_WHOLE = 10 ** 12

# ------------------------------------------------------------------
# CURRENCY WORDS (language x currency, total over both enumerations)
# ------------------------------------------------------------------

CURRENCY_NAMES = {
    CurrencyCode.USD: {
        EN: ("US dollars", "cents"),
        AR: ("دولار أمريكي", "سنت"),
        KU: ("دۆلاری ئەمریکی", "سەنت"),
    },
    CurrencyCode.IQD: {
        EN: ("Iraqi dinars", "fils"),
        AR: ("دينار عراقي", "فلس"),
        KU: ("دیناری عێراقی", "فلس"),
    },
}

_ZERO     = {EN: "zero", AR: "صفر", KU: "سفر"}
_NEGATIVE = {EN: "negative", AR: "سالب", KU: "نێگەتیڤ"}
_AND      = {EN: " and ", AR: " و ", KU: " و "}


def currency_names(currency: str, language: str) -> Tuple[str, str]:
    """(main unit, fractional unit) for a currency in the given language."""
    code = CurrencyCode.normalize(currency)
    lang = AmountLanguage.normalize(language)
    return CURRENCY_NAMES[code][lang]


# ------------------------------------------------------------------
# MAGNITUDE DECOMPOSITION
# ------------------------------------------------------------------

def _split_groups(n: int) -> Tuple[int, int, int, int]:
    """(billions, millions, thousands, remainder) of a whole number."""
    return (
        n // 1_000_000_000,
        n % 1_000_000_000 // 1_000_000,
        n % 1_000_000 // 1_000,
        n % 1_000,
    )


def _check_magnitude(whole: int) -> None:
    if whole >= MAX_WHOLE:
        logger.warning(f"Refusing to spell {whole}: above billions")
        raise UnsupportedMagnitudeError(whole, MAX_WHOLE)


# ------------------------------------------------------------------
# NUMBER → WORDS (EN / AR / KU)
# ------------------------------------------------------------------

_EN_ONES  = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_EN_TEENS = ("ten", "eleven", "twelve", "thirteen", "fourteen",
             "fifteen", "sixteen", "seventeen", "eighteen", "nineteen")
_EN_TENS  = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
_EN_SCALES = ("billion", "million", "thousand", "")


def _words_1_999_en(x: int) -> str:
    w = []
    if x >= 100:
        w.append(f"{_EN_ONES[x // 100]} hundred")
        x %= 100
    if x >= 20:
        t, u = divmod(x, 10)
        w.append(f"{_EN_TENS[t]}-{_EN_ONES[u]}" if u else _EN_TENS[t])
    elif x >= 10:
        w.append(_EN_TEENS[x - 10])
    elif x > 0:
        w.append(_EN_ONES[x])
    return " ".join(w)


def number_to_words_en(n: int) -> str:
    if n == 0:
        return _ZERO[EN]
    if n < 0:
        return f"{_NEGATIVE[EN]} {number_to_words_en(-n)}"
    _check_magnitude(n)

    parts = []
    for count, scale in zip(_split_groups(n), _EN_SCALES):
        if count:
            txt = _words_1_999_en(count)
            parts.append(f"{txt} {scale}" if scale else txt)
    return " ".join(parts)


_AR_ONES  = ("", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة")
_AR_TEENS = ("عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
             "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر")
_AR_TENS  = ("", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون")


def _words_1_99_ar(x: int) -> str:
    if x >= 20:
        t, u = divmod(x, 10)
        return f"{_AR_ONES[u]} و{_AR_TENS[t]}" if u else _AR_TENS[t]
    if x >= 10:
        return _AR_TEENS[x - 10]
    return _AR_ONES[x]


def _words_1_999_ar(x: int) -> str:
    h, r = divmod(x, 100)
    parts = []
    if h == 1:
        parts.append("مائة")
    elif h == 2:
        parts.append("مائتان")
    elif h:
        parts.append(f"{_AR_ONES[h]} مائة")
    if r:
        parts.append(_words_1_99_ar(r))
    return " و".join(parts)


def _thousands_ar(t: int) -> str:
    # 1 and 2 take the singular / dual noun alone; 3-10 take the plural
    if t == 1:
        return "ألف"
    if t == 2:
        return "ألفان"
    if 3 <= t <= 10:
        return f"{_words_1_999_ar(t)} آلاف"
    return f"{_words_1_999_ar(t)} ألف"


def number_to_words_ar(n: int) -> str:
    if n == 0:
        return _ZERO[AR]
    if n < 0:
        return f"{_NEGATIVE[AR]} {number_to_words_ar(-n)}"
    _check_magnitude(n)

    billions, millions, thousands, rest = _split_groups(n)
    parts = []
    if billions:
        parts.append(f"{_words_1_999_ar(billions)} مليار")
    if millions:
        parts.append(f"{_words_1_999_ar(millions)} مليون")
    if thousands:
        parts.append(_thousands_ar(thousands))
    if rest:
        parts.append(_words_1_999_ar(rest))
    return " و".join(parts)


# Sorani
_KU_ONES  = ("", "یەک", "دوو", "سێ", "چوار", "پێنج", "شەش", "حەوت", "هەشت", "نۆ")
_KU_TEENS = ("دە", "یازدە", "دوازدە", "سیازدە", "چواردە",
             "پازدە", "شازدە", "حەڤدە", "هەژدە", "نۆزدە")
_KU_TENS  = ("", "", "بیست", "سی", "چل", "پەنجا", "شەست", "حەفتا", "هەشتا", "نەوەد")


def _words_1_999_ku(x: int) -> str:
    parts = []
    if x >= 100:
        parts.append("سەد" if x == 100 else f"{_KU_ONES[x // 100]} سەد")
        x %= 100
    if x >= 20:
        t, u = divmod(x, 10)
        parts.append(f"{_KU_ONES[u]} و {_KU_TENS[t]}" if u else _KU_TENS[t])
    elif x >= 10:
        parts.append(_KU_TEENS[x - 10])
    elif x > 0:
        parts.append(_KU_ONES[x])
    return " و ".join(parts)


def number_to_words_ku(n: int) -> str:
    if n == 0:
        return _ZERO[KU]
    if n < 0:
        return f"{_NEGATIVE[KU]} {number_to_words_ku(-n)}"
    _check_magnitude(n)

    billions, millions, thousands, rest = _split_groups(n)
    parts = []
    if billions:
        parts.append(f"{_words_1_999_ku(billions)} ملیار")
    if millions:
        parts.append(f"{_words_1_999_ku(millions)} ملیۆن")
    if thousands:
        parts.append("هەزار" if thousands == 1 else f"{_words_1_999_ku(thousands)} هەزار")
    if rest:
        parts.append(_words_1_999_ku(rest))
    return " و ".join(parts)


_SPELLERS = {
    EN: number_to_words_en,
    AR: number_to_words_ar,
    KU: number_to_words_ku,
}


def number_to_words(n: int, language: str) -> str:
    """Whole number in words, no currency (quantities, counts)."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidAmountError(n, "expected a whole number")
    return _SPELLERS[AmountLanguage.normalize(language)](n)


# ------------------------------------------------------------------
# AMOUNT SPLITTING
# ------------------------------------------------------------------

def split_amount(amount) -> Tuple[bool, int, int]:
    """
    Break an amount into (negative, whole, cents).

    The whole part is truncated toward zero; cents are the fraction rounded
    half-up to hundredths, carrying into the whole part at 100.
    Strings are read like form input ("$1,234.50"); None counts as zero.
    """
    if amount is None:
        value = Decimal(0)
    elif isinstance(amount, bool):
        raise InvalidAmountError(amount, "expected a number")
    elif isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, str):
        value = Decimal(str(parse_currency(amount)))
    else:
        try:
            # str() of a float is its shortest repr, so 1234.56 stays 1234.56
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as e:
            raise InvalidAmountError(amount, "expected a number") from e

    if not value.is_finite():
        raise InvalidAmountError(amount)

    negative = value < 0
    value = abs(value)
    whole = int(value)
    cents = int(((value - whole) * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    if cents == 100:
        # the largest spellable whole part keeps its cents at 99 instead of carrying
        if whole + 1 < MAX_WHOLE:
            whole, cents = whole + 1, 0
        else:
            cents = 99

    return negative and bool(whole or cents), whole, cents


# ------------------------------------------------------------------
# PUBLIC API
# ------------------------------------------------------------------

def speak(amount, language: str, currency: str) -> str:
    """
    Amount in words with the currency name, e.g.
    speak(1234.56, "english", "USD") ->
    "One thousand two hundred thirty-four US dollars and fifty-six cents".

    Cents are spelled for USD only; IQD amounts never carry a fractional clause.
    """
    lang = AmountLanguage.normalize(language)
    code = CurrencyCode.normalize(currency)
    negative, whole, cents = split_amount(amount)

    spell = _SPELLERS[lang]
    main_unit, frac_unit = CURRENCY_NAMES[code][lang]

    result = f"{spell(whole)} {main_unit}"
    if negative:
        result = f"{_NEGATIVE[lang]} {result}"
    if code == CurrencyCode.USD and cents > 0:
        result += f"{_AND[lang]}{spell(cents)} {frac_unit}"

    if lang == EN:
        result = result[0].upper() + result[1:]
    return result


class TafqitService:
    """
    Amount-in-words for stored invoices and vouchers.

    Records keep their language under ``amountLanguage`` (client payloads) or
    ``amount_language`` (database rows); records without one fall back to the
    configured default language.
    """

    def __init__(self, default_language: Optional[str] = None, default_currency: Optional[str] = None):
        if default_language is None or default_currency is None:
            from core.config import Config
            config = Config()
            default_language = default_language or config.get(
                ConfigKeys.DEFAULT_AMOUNT_LANGUAGE, AmountLanguage.DEFAULT)
            default_currency = default_currency or config.get(
                ConfigKeys.DEFAULT_CURRENCY, CurrencyCode.DEFAULT)
        self.default_language = AmountLanguage.normalize(default_language)
        self.default_currency = CurrencyCode.normalize(default_currency)

    def amount_in_words(self, amount, language: Optional[str] = None, currency: Optional[str] = None) -> str:
        lang = AmountLanguage.normalize(language, default=self.default_language)
        code = CurrencyCode.normalize(currency, default=self.default_currency)
        return speak(amount, lang, code)

    def for_record(self, record: Mapping, amount_key: str = "total") -> Dict[str, str]:
        """Context for the document's amount-in-words line."""
        raw_lang = record.get("amountLanguage") or record.get("amount_language")
        lang = AmountLanguage.normalize(raw_lang, default=self.default_language)
        code = CurrencyCode.normalize(record.get("currency"), default=self.default_currency)
        logger.debug(f"Spelling {amount_key} of record {record.get('id')} in {lang}/{code}")
        return {
            "amount_in_words": speak(record.get(amount_key), lang, code),
            "dir": AmountLanguage.text_direction(lang),
            "language": lang,
        }
