# services/currency_service.py
# Display formatting for invoice/voucher amounts (USD / IQD).
# Exposes: CURRENCIES, format_currency(), format_currency_for_pdf(), parse_currency()

import re
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

from constants import CurrencyCode
from exceptions import InvalidAmountError

CURRENCIES = {
    CurrencyCode.USD: {"symbol": "$",   "name": "US Dollar",   "code": "USD"},
    CurrencyCode.IQD: {"symbol": "د.ع", "name": "Iraqi Dinar", "code": "IQD"},
}

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def _to_decimal(amount) -> Decimal:
    if amount is None:
        return Decimal(0)
    if isinstance(amount, str):
        amount = parse_currency(amount)
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as e:
        raise InvalidAmountError(amount) from e
    if not value.is_finite():
        raise InvalidAmountError(amount)
    return value


def _grouped(amount, places: int) -> str:
    exp = Decimal(1).scaleb(-places)
    value = _to_decimal(amount).quantize(exp, rounding=ROUND_HALF_UP)
    if value == 0:
        value = abs(value)
    return f"{value:,.{places}f}"


def format_currency(amount, currency: str) -> str:
    """
    Screen format: USD with two decimals and leading symbol,
    IQD rounded to whole dinars with the Arabic symbol after the number.
    """
    code = CurrencyCode.normalize(currency)
    info = CURRENCIES[code]
    if code == CurrencyCode.IQD:
        return f"{_grouped(amount, 0)} {info['symbol']}"
    return f"{info['symbol']}{_grouped(amount, 2)}"


def format_currency_for_pdf(amount, currency: str) -> str:
    """Same as format_currency() but Latin-only, for fonts without Arabic glyphs."""
    code = CurrencyCode.normalize(currency)
    if code == CurrencyCode.IQD:
        return f"{_grouped(amount, 0)} IQD"
    return f"${_grouped(amount, 2)}"


def parse_currency(value) -> float:
    """
    Read a number out of user input such as "$1,234.50" or "1,500 د.ع".
    Anything that is not a digit, '.' or '-' is dropped; unreadable input gives 0.0.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return float(value)

    cleaned = _NON_NUMERIC.sub("", str(value))
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return 0.0
    return float(match.group()) or 0.0
