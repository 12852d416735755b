"""
Bank configuration loader.
Loads per-bank settings (enabled flag, Top-N limit, colour) from CSV files or JSON-style dicts.
"""

import csv
from typing import Any, Dict
from pathlib import Path

from ..models import Bank, BankConfig
from .reconciliation_config import RECONCILIATION_CONFIG


_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "no", "n", "off"}


def parse_limit(value: Any) -> int:
    """
    Parse a Top-N limit.

    Args:
        value: Integer or integer-like string

    Returns:
        Non-negative integer limit

    Raises:
        ValueError: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid limit: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Invalid limit: {value!r}")
        value = int(value)
    try:
        limit = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError(f"Invalid limit: {value!r}")
    if limit < 0:
        raise ValueError(f"Limit must be >= 0, got {limit}")
    return limit


def parse_enabled(value: Any) -> bool:
    """Parse an enabled flag from a bool or a CSV-style string."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid enabled flag: {value!r}")


def load_bank_config_csv(csv_path: str) -> Dict[Bank, BankConfig]:
    """
    Load bank configuration from a CSV file.

    Args:
        csv_path: Path to CSV file containing bank settings

    Returns:
        Dictionary mapping banks to their configuration, in file order

    Example CSV format:
        bank,enabled,limit,display_color
        Sber,true,5,#21A038
        T-Bank,false,4,#FFDD2D
    """
    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"Bank config file not found: {csv_path}")

    with open(csv_path, 'r', encoding='utf-8') as f:
        return bank_config_from_rows(csv.DictReader(f))


def bank_config_from_rows(rows) -> Dict[Bank, BankConfig]:
    """Build bank configuration from CSV-style row dicts."""
    config = {}
    for row in rows:
        bank_name = (row.get('bank') or '').strip()
        if not bank_name:
            continue
        bank = Bank.from_label(bank_name)
        enabled_text = (row.get('enabled') or '').strip()
        limit_text = (row.get('limit') or '').strip()
        config[bank] = BankConfig(
            enabled=parse_enabled(enabled_text) if enabled_text else True,
            limit=parse_limit(limit_text) if limit_text else RECONCILIATION_CONFIG["default_limit"],
            display_color=(row.get('display_color') or '').strip(),
        )
    return config


def bank_config_from_dict(data: Dict[str, Dict]) -> Dict[Bank, BankConfig]:
    """
    Build bank configuration from a JSON-style mapping.

    Args:
        data: Mapping of bank label to {"enabled", "limit", "displayColor"}

    Returns:
        Dictionary mapping banks to their configuration, in input order

    Raises:
        ValueError: If a bank label, flag or limit is invalid
    """
    if not isinstance(data, dict):
        raise ValueError("Bank config must be an object keyed by bank name")

    config = {}
    for bank_name, settings in data.items():
        bank = Bank.from_label(bank_name)
        if not isinstance(settings, dict):
            raise ValueError(f"Settings for {bank_name!r} must be an object")
        config[bank] = BankConfig(
            enabled=parse_enabled(settings.get("enabled", True)),
            limit=parse_limit(settings.get("limit", RECONCILIATION_CONFIG["default_limit"])),
            display_color=str(settings.get("displayColor", settings.get("display_color", "")) or ""),
        )
    return config


def bank_config_to_dict(config: Dict[Bank, BankConfig]) -> Dict[str, Dict]:
    """Serialize bank configuration for JSON responses."""
    return {
        bank.value: {
            "enabled": settings.enabled,
            "limit": settings.limit,
            "displayColor": settings.display_color,
        }
        for bank, settings in config.items()
    }
