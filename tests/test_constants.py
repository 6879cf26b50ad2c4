# -*- coding: utf-8 -*-
"""
tests/test_constants.py
=======================
Selector normalisation in constants.py — pure Python.
"""
import pytest

from constants import AmountLanguage, CurrencyCode
from exceptions import InvalidCurrencyError, InvalidLanguageError


class TestAmountLanguage:

    @pytest.mark.parametrize("raw,expected", [
        ("english", "english"),
        ("Arabic",  "arabic"),
        (" KURDISH ", "kurdish"),
        ("en", "english"),
        ("ar", "arabic"),
        ("ku", "kurdish"),
        ("ckb", "kurdish"),
    ])
    def test_normalize(self, raw, expected):
        assert AmountLanguage.normalize(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_uses_default(self, raw):
        assert AmountLanguage.normalize(raw, default=AmountLanguage.DEFAULT) == "english"

    @pytest.mark.parametrize("raw", [None, "", "tr", "french", 3])
    def test_rejected(self, raw):
        with pytest.raises(InvalidLanguageError):
            AmountLanguage.normalize(raw)

    def test_default_is_english(self):
        assert AmountLanguage.DEFAULT == AmountLanguage.ENGLISH

    @pytest.mark.parametrize("lang,direction", [
        ("english", "ltr"),
        ("arabic",  "rtl"),
        ("kurdish", "rtl"),
        ("ar",      "rtl"),
    ])
    def test_text_direction(self, lang, direction):
        assert AmountLanguage.text_direction(lang) == direction


class TestCurrencyCode:

    @pytest.mark.parametrize("raw,expected", [
        ("USD", "USD"),
        ("usd", "USD"),
        (" iqd ", "IQD"),
    ])
    def test_normalize(self, raw, expected):
        assert CurrencyCode.normalize(raw) == expected

    def test_empty_uses_default(self):
        assert CurrencyCode.normalize(None, default="iqd") == "IQD"

    @pytest.mark.parametrize("raw", [None, "", "EUR", "dollar"])
    def test_rejected(self, raw):
        with pytest.raises(InvalidCurrencyError):
            CurrencyCode.normalize(raw)
