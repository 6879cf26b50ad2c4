"""
version.py — FATURA
====================
Single source of truth for the version number.
Used by:
  - pyproject.toml metadata
  - the command line (--version)
"""

APP_NAME = "FATURA"
VERSION  = "1.0.0"
BUILD    = "2026.10.19"
