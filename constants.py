"""
FATURA Constants - Single Source of Truth
==========================================

Closed selector sets used when spelling amounts on invoices and vouchers.
Using constants instead of magic strings prevents typos and makes refactoring easier.

    from constants import AmountLanguage, CurrencyCode
    lang = AmountLanguage.normalize(record.get("amount_language"), default=AmountLanguage.DEFAULT)
"""
from typing import Optional

from exceptions import InvalidCurrencyError, InvalidLanguageError


class AmountLanguage:
    """Languages an amount can be spelled in (stored per invoice / voucher)."""
    ENGLISH = "english"
    ARABIC  = "arabic"
    KURDISH = "kurdish"   # Sorani

    CHOICES = (ENGLISH, ARABIC, KURDISH)
    DEFAULT = ENGLISH

    ALIASES = {
        "en":  ENGLISH,
        "ar":  ARABIC,
        "ku":  KURDISH,
        "ckb": KURDISH,
    }

    RTL = frozenset({ARABIC, KURDISH})

    @classmethod
    def normalize(cls, value, default: Optional[str] = None) -> str:
        """Return the canonical language name, or raise InvalidLanguageError."""
        key = str(value).strip().lower() if value is not None else ""
        if not key:
            if default is not None:
                return cls.normalize(default)
            raise InvalidLanguageError(value, cls.CHOICES)
        if key in cls.CHOICES:
            return key
        if key in cls.ALIASES:
            return cls.ALIASES[key]
        raise InvalidLanguageError(value, cls.CHOICES)

    @classmethod
    def text_direction(cls, language) -> str:
        """'rtl' for Arabic-script languages, 'ltr' otherwise."""
        return "rtl" if cls.normalize(language) in cls.RTL else "ltr"


class CurrencyCode:
    """Currencies invoices and vouchers are issued in."""
    USD = "USD"
    IQD = "IQD"

    CHOICES = (USD, IQD)
    DEFAULT = USD

    @classmethod
    def normalize(cls, value, default: Optional[str] = None) -> str:
        """Return the canonical ISO code, or raise InvalidCurrencyError."""
        key = str(value).strip().upper() if value is not None else ""
        if not key:
            if default is not None:
                return cls.normalize(default)
            raise InvalidCurrencyError(value, cls.CHOICES)
        if key in cls.CHOICES:
            return key
        raise InvalidCurrencyError(value, cls.CHOICES)


class ConfigKeys:
    """Configuration keys read through core.config"""
    DEFAULT_AMOUNT_LANGUAGE = "DEFAULT_AMOUNT_LANGUAGE"
    DEFAULT_CURRENCY        = "DEFAULT_CURRENCY"
    LOG_LEVEL               = "LOG_LEVEL"
    LOG_DIR                 = "LOG_DIR"
    LOG_TO_FILE             = "LOG_TO_FILE"
