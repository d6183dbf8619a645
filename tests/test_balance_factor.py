#!/usr/bin/env python3

from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from balance_factor import DEFAULT_BALANCE, normalize_balance_factor
from models import BALANCE_CATEGORIES


class BalanceFactorTests(unittest.TestCase):
    def test_complete_breakdown_is_returned_unchanged(self) -> None:
        result = normalize_balance_factor("30% protein, 35% carbs, 15% fiber, 10% vitamins, 10% fats")
        self.assertEqual(result, {"protein": 30, "carbs": 35, "fiber": 15, "vitamins": 10, "fats": 10})

    def test_category_first_word_order_and_spacing(self) -> None:
        result = normalize_balance_factor("Protein 25 %, carbs: 40%, fiber 15%, vitamins 10%, fats 10%")
        self.assertEqual(result, {"protein": 25, "carbs": 40, "fiber": 15, "vitamins": 10, "fats": 10})

    def test_mixed_word_order(self) -> None:
        result = normalize_balance_factor("20 % protein, carbs 50%, 10% fiber, vitamins 10%, 10% FATS")
        self.assertEqual(result, {"protein": 20, "carbs": 50, "fiber": 10, "vitamins": 10, "fats": 10})

    def test_empty_and_missing_input_use_default(self) -> None:
        for text in (None, "", "   "):
            with self.subTest(text=text):
                self.assertEqual(normalize_balance_factor(text), DEFAULT_BALANCE)

    def test_unparseable_input_uses_default(self) -> None:
        self.assertEqual(normalize_balance_factor("well balanced, lots of greens"), DEFAULT_BALANCE)

    def test_all_zero_values_use_default(self) -> None:
        self.assertEqual(normalize_balance_factor("0% protein, 0% carbs"), DEFAULT_BALANCE)

    def test_default_is_a_fresh_copy(self) -> None:
        result = normalize_balance_factor("")
        result["protein"] = 99
        self.assertEqual(DEFAULT_BALANCE["protein"], 30)

    def test_missing_categories_share_the_remainder(self) -> None:
        result = normalize_balance_factor("30% protein, 20% carbs, 10% fats")
        self.assertEqual(result, {"protein": 30, "carbs": 20, "fiber": 20, "vitamins": 20, "fats": 10})

    def test_remainder_extra_goes_to_first_missing_categories(self) -> None:
        result = normalize_balance_factor("50% protein, 29% carbs")
        # 21 left over three buckets: 7 each; 20 over three gives 7, 7, 6.
        self.assertEqual(result, {"protein": 50, "carbs": 29, "fiber": 7, "vitamins": 7, "fats": 7})

        result = normalize_balance_factor("50% protein, 30% carbs")
        self.assertEqual(result, {"protein": 50, "carbs": 30, "fiber": 7, "vitamins": 7, "fats": 6})

    def test_full_total_borrows_for_missing_categories(self) -> None:
        result = normalize_balance_factor("40% carbs, 30% protein, 30% fats")
        self.assertEqual(result, {"protein": 28, "carbs": 38, "fiber": 2, "vitamins": 2, "fats": 28})

    def test_borrowing_never_drops_below_floor(self) -> None:
        result = normalize_balance_factor("96% carbs, 4% protein")
        self.assertEqual(result["carbs"], 94)
        self.assertEqual(result["protein"], 5)
        self.assertEqual([result["fiber"], result["vitamins"], result["fats"]], [2, 2, 2])

    def test_last_mention_of_a_category_wins(self) -> None:
        result = normalize_balance_factor("10% protein, 20% carbs, 20% fiber, 20% vitamins, 10% fats, 30% protein")
        self.assertEqual(result["protein"], 30)

    def test_every_category_is_positive(self) -> None:
        samples = [
            "100% protein",
            "60% carbs, 60% fats",
            "1% fiber",
            "protein 33%, carbs 33%, fats 33%",
        ]
        for text in samples:
            with self.subTest(text=text):
                result = normalize_balance_factor(text)
                self.assertEqual(list(result), list(BALANCE_CATEGORIES))
                self.assertTrue(all(value > 0 for value in result.values()), result)


if __name__ == "__main__":
    unittest.main()
