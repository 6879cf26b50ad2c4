"""
exceptions.py
=============
FATURA — Hierarchical Exception System

All application exceptions inherit from FaturaError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
FaturaError
├── ValidationError
│   └── InvalidValueError
│       ├── InvalidAmountError
│       ├── UnsupportedMagnitudeError
│       ├── InvalidLanguageError
│       └── InvalidCurrencyError
└── ConfigurationError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class FaturaError(Exception):
    """Base exception for all FATURA errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "AMOUNT_TOO_LARGE"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(FaturaError):
    """Raised when caller-provided data fails validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidValueError(ValidationError):
    """Raised when a field value is out of range or has an invalid format."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for field '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.reason = reason


class InvalidAmountError(InvalidValueError):
    """Raised when an amount is not a finite number."""

    def __init__(self, value=None, reason: str = "amount must be a finite number", **kwargs):
        kwargs.setdefault("code", "INVALID_AMOUNT")
        super().__init__("amount", value, reason, **kwargs)


class UnsupportedMagnitudeError(InvalidValueError):
    """Raised when the whole part has no scale word (one trillion and above)."""

    def __init__(self, value=None, limit: int = 0, **kwargs):
        kwargs.setdefault("code", "AMOUNT_TOO_LARGE")
        reason = f"whole part must be below {limit:,}" if limit else "amount too large"
        super().__init__("amount", value, reason, **kwargs)
        self.limit = limit


class InvalidLanguageError(InvalidValueError):
    """Raised when an amount language is outside english/arabic/kurdish."""

    def __init__(self, value=None, choices=(), **kwargs):
        kwargs.setdefault("code", "INVALID_LANGUAGE")
        reason = f"expected one of {', '.join(choices)}" if choices else ""
        super().__init__("amount_language", value, reason, **kwargs)
        self.choices = tuple(choices)


class InvalidCurrencyError(InvalidValueError):
    """Raised when a currency code is not supported."""

    def __init__(self, value=None, choices=(), **kwargs):
        kwargs.setdefault("code", "INVALID_CURRENCY")
        reason = f"expected one of {', '.join(choices)}" if choices else ""
        super().__init__("currency", value, reason, **kwargs)
        self.choices = tuple(choices)


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(FaturaError):
    """Raised when the application configuration is invalid or incomplete."""
