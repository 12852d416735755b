"""
Configuration module for the Cashback Reconciliation Engine.

This module contains the default bank settings, fallback labels, export locales
and loaders for user-supplied bank configuration.
"""

from .reconciliation_config import (
    DEFAULT_BANK_CONFIG,
    RECONCILIATION_CONFIG,
    EXPORT_LOCALES,
    get_export_locale,
)
from .bank_config_loader import (
    load_bank_config_csv,
    bank_config_from_dict,
    bank_config_from_rows,
    bank_config_to_dict,
    parse_limit,
    parse_enabled,
)

__all__ = [
    "DEFAULT_BANK_CONFIG",
    "RECONCILIATION_CONFIG",
    "EXPORT_LOCALES",
    "get_export_locale",
    "load_bank_config_csv",
    "bank_config_from_dict",
    "bank_config_from_rows",
    "bank_config_to_dict",
    "parse_limit",
    "parse_enabled",
]
