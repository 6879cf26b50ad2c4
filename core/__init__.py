# core/__init__.py
"""
FATURA Core Module
==================

Public API:
    - Configuration: Config
    - Logging: LoggingConfig
    - Utilities: SingletonMeta
"""

from .config import Config
from .logging_config import LoggingConfig
from .singleton import SingletonMeta

__all__ = [
    "Config",
    "LoggingConfig",
    "SingletonMeta",
]
