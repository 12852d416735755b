"""
Property-style tests for the reconciliation pipeline and the entry point.
"""

import unittest
from datetime import datetime

from cashback_engine import run_cashback_reconciliation
from cashback_engine.models import Bank, BankConfig, RawEntry
from cashback_engine.config import DEFAULT_BANK_CONFIG
from cashback_engine.pipeline import reconcile


SAMPLE_ENTRIES = [
    RawEntry(id="1", bank_name="Сбербанк", category="Такси", percentage=5),
    RawEntry(id="2", bank_name="Sber", category="такси ", percentage=7),
    RawEntry(id="3", bank_name="Tinkoff", category="Такси", percentage=6),
    RawEntry(id="4", bank_name="Тинькофф", category="Кафе", percentage="10%"),
    RawEntry(id="5", bank_name="Альфа-Банк", category="Кафе", percentage=10),
    RawEntry(id="6", bank_name="ВТБ", category="АЗС", percentage=3),
    RawEntry(id="7", bank_name="Yandex Pay", category="Аптеки", percentage=2.5),
    RawEntry(id="8", bank_name="Sber", category="Цветы", percentage=4),
    RawEntry(id="9", bank_name="Sber", category="АЗС", percentage=1),
    RawEntry(id="10", bank_name="Sber", category="Кино", percentage=2),
    RawEntry(id="11", bank_name="Sber", category="Книги", percentage=3),
    RawEntry(id="12", bank_name="Sber", category="Спорт", percentage=6),
    RawEntry(id="13", bank_name="Ozon Bank", category="Кафе", percentage=30),
    RawEntry(id="14", bank_name="", category="", percentage=None),
]


class TestPipelineInvariants(unittest.TestCase):

    def setUp(self):
        self.result = reconcile(SAMPLE_ENTRIES, DEFAULT_BANK_CONFIG)

    def test_idempotent(self):
        self.assertEqual(reconcile(SAMPLE_ENTRIES, DEFAULT_BANK_CONFIG), self.result)

    def test_input_is_not_mutated(self):
        before = list(SAMPLE_ENTRIES)
        reconcile(SAMPLE_ENTRIES, DEFAULT_BANK_CONFIG)
        self.assertEqual(SAMPLE_ENTRIES, before)

    def test_offers_are_unique_per_bank_and_category(self):
        keys = [entry.offer_key for entry in self.result.entries]
        self.assertEqual(len(keys), len(set(keys)))

    def test_selection_respects_limits(self):
        for bank, settings in DEFAULT_BANK_CONFIG.items():
            offered = [entry for entry in self.result.entries if entry.bank == bank]
            selected = [key for key in self.result.selections if key[0] == bank]
            self.assertEqual(len(selected), min(settings.limit, len(offered)))

    def test_selected_offers_outrank_unselected(self):
        for bank in DEFAULT_BANK_CONFIG:
            offered = [entry for entry in self.result.entries if entry.bank == bank]
            selected = [e.percentage for e in offered if e.offer_key in self.result.selections]
            rejected = [e.percentage for e in offered if e.offer_key not in self.result.selections]
            if selected and rejected:
                self.assertGreaterEqual(min(selected), max(rejected))

    def test_sber_top_five(self):
        sber = {key for bank, key in self.result.selections if bank == Bank.SBER}
        self.assertEqual(sber, {"такси", "спорт", "цветы", "книги", "кино"})

    def test_winners_are_selected_maxima(self):
        for row in self.result.rows:
            selected = [cell for cell in row.present_cells() if cell.is_selected]
            if not selected:
                self.assertEqual(row.winners, ())
                continue
            best = max(cell.percentage for cell in selected)
            self.assertEqual(
                row.winners,
                tuple(cell.bank for cell in selected if cell.percentage == best)
            )
            for cell in row.present_cells():
                self.assertEqual(cell.is_winner, cell.bank in row.winners)

    def test_unmatched_banks_fall_outside_default_columns(self):
        self.assertNotIn(Bank.OTHER, self.result.banks)
        others = [entry for entry in self.result.entries if entry.bank == Bank.OTHER]
        self.assertEqual(
            sorted(entry.category_key for entry in others),
            ["unknown", "кафе"]
        )

    def test_cafe_tie(self):
        cafe = [row for row in self.result.rows if row.category_key == "кафе"][0]
        self.assertEqual(cafe.winners, (Bank.T_BANK, Bank.ALFA))


class TestRunCashbackReconciliation(unittest.TestCase):

    ENTRIES = [
        {"bankName": "Sber", "category": "Такси", "percentage": 5},
        {"bankName": "Sber", "category": "такси ", "percentage": 7},
        {"bankName": "T-Bank", "category": "Такси", "percentage": 6},
    ]

    def test_default_output(self):
        result = run_cashback_reconciliation(self.ENTRIES, generated_at=datetime(2026, 10, 17))

        self.assertEqual(result["banks"], ["Sber", "T-Bank", "Alfa", "VTB", "Yandex"])
        self.assertEqual(result["selected_count"], 2)
        self.assertEqual(len(result["rows"]), 1)

        row = result["rows"][0]
        self.assertEqual(row["category"], "такси")
        self.assertEqual(row["winners"], ["Sber"])
        self.assertEqual(
            row["cells"]["Sber"],
            {"percentage": 7.0, "is_selected": True, "is_winner": True}
        )
        self.assertIsNone(row["cells"]["Alfa"])
        self.assertEqual(
            result["exports"]["tabular"],
            "Category\tSber\tT-Bank\tAlfa\tVTB\tYandex\nтакси\t7%\t6%\t\t\t"
        )
        self.assertIn("✅ такси: Sber (7%)", result["exports"]["cheat_sheet"])

    def test_json_config_sets_columns(self):
        result = run_cashback_reconciliation(
            self.ENTRIES,
            bank_config={
                "T-Bank": {"enabled": True, "limit": 4},
                "Sber": {"enabled": False, "limit": 5},
            },
        )

        self.assertEqual(result["banks"], ["T-Bank"])
        self.assertEqual(result["rows"][0]["winners"], ["T-Bank"])
        self.assertEqual(list(result["bank_config"]), ["T-Bank", "Sber"])

    def test_bank_keyed_config(self):
        result = run_cashback_reconciliation(
            self.ENTRIES,
            bank_config={Bank.SBER: BankConfig(enabled=True, limit=0)},
        )
        self.assertEqual(result["selected_count"], 0)
        self.assertEqual(result["rows"][0]["winners"], [])

    def test_entries_report_selection(self):
        result = run_cashback_reconciliation(self.ENTRIES)
        sber = [entry for entry in result["entries"] if entry["bank"] == "Sber"]

        self.assertEqual(len(sber), 1)
        self.assertEqual(sber[0]["percentage"], 7.0)
        self.assertTrue(sber[0]["is_selected"])

    def test_invalid_locale(self):
        with self.assertRaises(ValueError):
            run_cashback_reconciliation(self.ENTRIES, locale="xx")


if __name__ == "__main__":
    unittest.main()
