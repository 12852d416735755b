"""
Reconciliation configuration for the cashback matrix.
Contains default bank settings, fallback labels and export locales.
"""

from ..models import Bank, BankConfig


# Default bank settings, in column order.
# Limits are the number of categories each bank lets the customer pick per period.
DEFAULT_BANK_CONFIG = {
    Bank.SBER: BankConfig(enabled=True, limit=5, display_color="#21A038"),
    Bank.T_BANK: BankConfig(enabled=True, limit=4, display_color="#FFDD2D"),
    Bank.ALFA: BankConfig(enabled=True, limit=5, display_color="#EF3124"),
    Bank.VTB: BankConfig(enabled=True, limit=4, display_color="#0A2896"),
    Bank.YANDEX: BankConfig(enabled=True, limit=5, display_color="#FC3F1D"),
}

RECONCILIATION_CONFIG = {
    # Labels used when an oracle returns an empty field
    "fallback_bank": Bank.OTHER,
    "fallback_category": "Unknown",
    "manual_category": "Manual Category",

    # Applied to banks added without an explicit limit
    "default_limit": 5,

    "default_locale": "en",
}

# Text used by the exporters. Month names are nominative, as in a calendar header.
EXPORT_LOCALES = {
    "en": {
        "category_header": "Category",
        "cheat_sheet_title": "📋 CASHBACK CHEAT SHEET",
        "separator": "=====================",
        "date_marker": "📅",
        "winner_marker": "✅",
        "or_connector": " or ",
        "footer": "Generated by AI Cashacker",
        "months": [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ],
    },
    "ru": {
        "category_header": "Категория",
        "cheat_sheet_title": "📋 ПАМЯТКА ПО КЭШБЭКУ",
        "separator": "=====================",
        "date_marker": "📅",
        "winner_marker": "✅",
        "or_connector": " или ",
        "footer": "Сгенерировано AI Cashacker",
        "months": [
            "январь", "февраль", "март", "апрель", "май", "июнь",
            "июль", "август", "сентябрь", "октябрь", "ноябрь", "декабрь",
        ],
    },
}


def get_export_locale(locale: str = None) -> dict:
    """
    Get export strings for a locale.

    Args:
        locale: Locale code ("en", "ru"); defaults to the configured locale

    Returns:
        Dictionary of export strings

    Raises:
        ValueError: If the locale is not a string or is not supported
    """
    code = RECONCILIATION_CONFIG["default_locale"] if locale is None or locale == "" else locale
    if not isinstance(code, str) or code not in EXPORT_LOCALES:
        raise ValueError(
            f"Unsupported locale: {code!r}. Expected one of {sorted(EXPORT_LOCALES)}"
        )
    return EXPORT_LOCALES[code]
