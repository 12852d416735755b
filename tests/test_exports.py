"""
Tests for the tab-separated and cheat-sheet exports.
"""

import unittest
from datetime import datetime

from cashback_engine.models import Bank, BankConfig, RawEntry, ReconciliationResult
from cashback_engine.config import DEFAULT_BANK_CONFIG
from cashback_engine.export import (
    export_cheat_sheet,
    export_tabular,
    format_number,
    format_percentage,
)
from cashback_engine.pipeline import reconcile


OCTOBER = datetime(2026, 10, 17)


def raw(bank, category, percentage):
    return RawEntry(
        id=f"{bank}-{category}-{percentage}",
        bank_name=bank,
        category=category,
        percentage=percentage,
    )


def taxi_result():
    return reconcile(
        [
            raw("Sber", "Такси", 5),
            raw("Sber", "такси ", 7),
            raw("T-Bank", "Такси", 6),
        ],
        DEFAULT_BANK_CONFIG,
    )


class TestFormatting(unittest.TestCase):

    def test_whole_numbers_have_no_decimals(self):
        self.assertEqual(format_number(7.0), "7")
        self.assertEqual(format_number(10), "10")

    def test_fractions_keep_significant_digits(self):
        self.assertEqual(format_number(7.5), "7.5")
        self.assertEqual(format_number(0.25), "0.25")

    def test_zero(self):
        self.assertEqual(format_number(0.0), "0")
        self.assertEqual(format_percentage(0.0), "0%")

    def test_percentage_suffix(self):
        self.assertEqual(format_percentage(3.5), "3.5%")

    def test_small_and_long_fractions_are_not_rounded(self):
        self.assertEqual(format_number(1e-7), "0.0000001")
        self.assertEqual(format_number(7.1234567), "7.1234567")
        self.assertEqual(format_percentage(1e-7), "0.0000001%")

    def test_large_whole_numbers_keep_trailing_zeros(self):
        self.assertEqual(format_number(100), "100")
        self.assertEqual(format_number(1e20), "100000000000000000000")


class TestTabularExport(unittest.TestCase):
    """Spreadsheet-ready matrix text."""

    def test_taxi_example(self):
        self.assertEqual(
            export_tabular(taxi_result()),
            "Category\tSber\tT-Bank\tAlfa\tVTB\tYandex\n"
            "такси\t7%\t6%\t\t\t"
        )

    def test_russian_header(self):
        text = export_tabular(taxi_result(), locale="ru")
        self.assertTrue(text.startswith("Категория\tSber\t"))

    def test_empty_matrix_is_header_only(self):
        result = reconcile([], DEFAULT_BANK_CONFIG)
        self.assertEqual(
            export_tabular(result),
            "Category\tSber\tT-Bank\tAlfa\tVTB\tYandex"
        )

    def test_only_enabled_banks_are_columns(self):
        config = {
            Bank.SBER: BankConfig(enabled=True, limit=5),
            Bank.T_BANK: BankConfig(enabled=False, limit=4),
            Bank.ALFA: BankConfig(enabled=True, limit=5),
        }
        result = reconcile(
            [raw("Alfa", "АЗС", 3), raw("T-Bank", "АЗС", 10), raw("Sber", "Кафе", 1.5)],
            config
        )
        self.assertEqual(
            export_tabular(result).split("\n"),
            ["Category\tSber\tAlfa", "АЗС\t\t3%", "Кафе\t1.5%\t"]
        )

    def test_unselected_offers_are_still_listed(self):
        config = {Bank.SBER: BankConfig(enabled=True, limit=1)}
        result = reconcile([raw("Sber", "Такси", 5), raw("Sber", "Кафе", 3)], config)

        self.assertEqual(
            export_tabular(result).split("\n"),
            ["Category\tSber", "Кафе\t3%", "Такси\t5%"]
        )

    def test_unknown_locale(self):
        with self.assertRaises(ValueError):
            export_tabular(taxi_result(), locale="de")

    def test_quoted_category_is_written_verbatim(self):
        config = {Bank.SBER: BankConfig(enabled=True, limit=5)}
        result = reconcile([raw("Sber", 'Магазин "Ромашка"', 5)], config)

        self.assertEqual(
            export_tabular(result),
            'Category\tSber\nМагазин "Ромашка"\t5%'
        )

    def test_tiny_percentage_is_not_rounded_to_zero(self):
        config = {Bank.SBER: BankConfig(enabled=True, limit=5)}
        result = reconcile([raw("Sber", "A", 1e-7)], config)

        self.assertEqual(export_tabular(result), "Category\tSber\nA\t0.0000001%")


class TestCheatSheetExport(unittest.TestCase):
    """Human-readable list of winning banks."""

    def test_taxi_example_english(self):
        self.assertEqual(
            export_cheat_sheet(taxi_result(), generated_at=OCTOBER),
            "📋 CASHBACK CHEAT SHEET\n"
            "=====================\n"
            "📅 October 2026\n"
            "\n"
            "✅ такси: Sber (7%)\n"
            "\n"
            "=====================\n"
            "Generated by AI Cashacker"
        )

    def test_tie_in_russian(self):
        result = reconcile([raw("Sber", "Кафе", 5), raw("Alfa", "Кафе", 5)], DEFAULT_BANK_CONFIG)
        text = export_cheat_sheet(result, generated_at=OCTOBER, locale="ru")

        self.assertEqual(
            text.split("\n"),
            [
                "📋 ПАМЯТКА ПО КЭШБЭКУ",
                "=====================",
                "📅 октябрь 2026",
                "",
                "✅ Кафе: Sber (5%) или Alfa (5%)",
                "",
                "=====================",
                "Сгенерировано AI Cashacker",
            ]
        )

    def test_tie_in_english_uses_or(self):
        result = reconcile([raw("Sber", "Кафе", 5), raw("Alfa", "Кафе", 5)], DEFAULT_BANK_CONFIG)
        text = export_cheat_sheet(result, generated_at=OCTOBER)
        self.assertIn("✅ Кафе: Sber (5%) or Alfa (5%)", text)

    def test_rows_without_winner_are_omitted(self):
        config = {Bank.SBER: BankConfig(enabled=True, limit=1)}
        result = reconcile([raw("Sber", "Такси", 5), raw("Sber", "Кафе", 3)], config)
        text = export_cheat_sheet(result, generated_at=OCTOBER)

        self.assertIn("✅ Такси: Sber (5%)", text)
        self.assertNotIn("Кафе", text)

    def test_empty_matrix_keeps_frame(self):
        text = export_cheat_sheet(ReconciliationResult(), generated_at=OCTOBER)
        self.assertEqual(
            text.split("\n"),
            [
                "📋 CASHBACK CHEAT SHEET",
                "=====================",
                "📅 October 2026",
                "",
                "",
                "=====================",
                "Generated by AI Cashacker",
            ]
        )

    def test_winner_lines_follow_row_order(self):
        result = reconcile(
            [raw("VTB", "Такси", 4), raw("Sber", "Аптеки", 5), raw("Alfa", "Кафе", 2)],
            DEFAULT_BANK_CONFIG
        )
        lines = [
            line for line in export_cheat_sheet(result, generated_at=OCTOBER).split("\n")
            if line.startswith("✅")
        ]
        self.assertEqual(
            lines,
            ["✅ Аптеки: Sber (5%)", "✅ Кафе: Alfa (2%)", "✅ Такси: VTB (4%)"]
        )


if __name__ == "__main__":
    unittest.main()
