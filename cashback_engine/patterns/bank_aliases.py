"""
Bank alias patterns for cashback offer normalization.
Maps spellings, transliterations and native-language names of banks to canonical tags.
"""

from ..models import Bank


# Ordered (pattern, canonical) pairs, first match wins.
# More specific names come before shorter ones that they contain.
BANK_ALIAS_PATTERNS = [
    # T-Bank (formerly Tinkoff)
    ("TINKOFF", Bank.T_BANK),
    ("TINKOV", Bank.T_BANK),
    ("ТИНЬКОФФ", Bank.T_BANK),
    ("ТИНЬКОВ", Bank.T_BANK),
    ("T-BANK", Bank.T_BANK),
    ("TBANK", Bank.T_BANK),
    ("Т-БАНК", Bank.T_BANK),
    ("ТБАНК", Bank.T_BANK),

    # Sber
    ("SBERBANK", Bank.SBER),
    ("SBER", Bank.SBER),
    ("СБЕРБАНК", Bank.SBER),
    ("СБЕР", Bank.SBER),

    # Alfa
    ("ALFA-BANK", Bank.ALFA),
    ("ALFABANK", Bank.ALFA),
    ("ALFA", Bank.ALFA),
    ("ALPHA", Bank.ALFA),
    ("АЛЬФА", Bank.ALFA),

    # VTB
    ("VTB", Bank.VTB),
    ("ВТБ", Bank.VTB),

    # Yandex
    ("YANDEX", Bank.YANDEX),
    ("ЯНДЕКС", Bank.YANDEX),
]

# The table the first version of the product shipped with: case-sensitive,
# one alias per bank.
LEGACY_BANK_ALIAS_PATTERNS = [
    ("Tinkoff", Bank.T_BANK),
    ("Сбер", Bank.SBER),
    ("Альфа", Bank.ALFA),
    ("ВТБ", Bank.VTB),
    ("Яндекс", Bank.YANDEX),
]
