from .tafqit_service import speak, number_to_words, currency_names, TafqitService
from .currency_service import format_currency, format_currency_for_pdf, parse_currency

__all__ = [
    "speak",
    "number_to_words",
    "currency_names",
    "TafqitService",
    "format_currency",
    "format_currency_for_pdf",
    "parse_currency",
]
