#!/usr/bin/env python3

from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from ingredient_parser import (
    DEFAULT_AMOUNT, default_amount, extract_ingredients, infer_category,
    ingredients_from_request, parse_ingredient_line, resolve_categories
)


class ParseIngredientLineTests(unittest.TestCase):
    def test_name_amount_and_category(self) -> None:
        ingredient = parse_ingredient_line("- Chicken breast - 200g (protein)")
        self.assertEqual(ingredient.model_dump(), {
            "name": "Chicken breast",
            "amount": "200g",
            "category": ["protein"],
        })

    def test_other_bullets(self) -> None:
        for line in ("• Brown rice - 1 cup (carbs)", "* Brown rice - 1 cup (carbs)", "  - Brown rice - 1 cup (carbs)"):
            with self.subTest(line=line):
                ingredient = parse_ingredient_line(line)
                self.assertEqual((ingredient.name, ingredient.amount, ingredient.category),
                                 ("Brown rice", "1 cup", ["carbs"]))

    def test_unbulleted_note_lines_are_dropped(self) -> None:
        for line in ("All amounts are approximate.", "Serve with lemon wedges (optional)", "Makes enough for two"):
            with self.subTest(line=line):
                self.assertIsNone(parse_ingredient_line(line))

    def test_unbulleted_line_with_spaced_dash_is_kept(self) -> None:
        ingredient = parse_ingredient_line("Brown rice - 1 cup (carbs)")
        self.assertEqual((ingredient.name, ingredient.amount), ("Brown rice", "1 cup"))

    def test_splits_at_first_spaced_dash(self) -> None:
        ingredient = parse_ingredient_line("- Salt - 1 tsp - optional")
        self.assertEqual((ingredient.name, ingredient.amount), ("Salt", "1 tsp - optional"))

    def test_category_is_case_insensitive(self) -> None:
        self.assertEqual(parse_ingredient_line("- Lentils - 100g (Protein)").category, ["protein"])

    def test_several_categories(self) -> None:
        ingredient = parse_ingredient_line("- Salmon fillet - 150g (protein/fats)")
        self.assertEqual(ingredient.category, ["protein", "fats"])
        ingredient = parse_ingredient_line("- Kale - 50g (fiber, vitamins, minerals)")
        self.assertEqual(ingredient.category, ["fiber", "vitamins", "minerals"])

    def test_unknown_category_text_is_inferred_from_name(self) -> None:
        ingredient = parse_ingredient_line("- Avocado - 1 whole (healthy stuff)")
        self.assertEqual(ingredient.category, ["fats"])

    def test_missing_amount_defaults(self) -> None:
        ingredient = parse_ingredient_line("- Fresh basil (vitamins)")
        self.assertEqual((ingredient.name, ingredient.amount), ("Fresh basil", DEFAULT_AMOUNT))

    def test_hyphenated_name_and_range_amount(self) -> None:
        ingredient = parse_ingredient_line("- Extra-virgin olive oil - 2 tbsp (fats)")
        self.assertEqual((ingredient.name, ingredient.amount), ("Extra-virgin olive oil", "2 tbsp"))
        ingredient = parse_ingredient_line("- Garlic - 1-2 cloves")
        self.assertEqual((ingredient.name, ingredient.amount), ("Garlic", "1-2 cloves"))

    def test_short_or_empty_names_are_dropped(self) -> None:
        for line in ("-", "- ", "- Ox - 1kg (protein)", "   "):
            with self.subTest(line=line):
                self.assertIsNone(parse_ingredient_line(line))


class CategoryInferenceTests(unittest.TestCase):
    def test_keyword_table(self) -> None:
        cases = {
            "Chicken thigh": "protein",
            "Hard boiled eggs": "protein",
            "Whole wheat bread": "carbs",
            "Baby spinach": "fiber",
            "Red bell pepper": "vitamins",
            "Cheddar cheese": "fats",
        }
        for name, category in cases.items():
            with self.subTest(name=name):
                self.assertEqual(infer_category(name), category)

    def test_quinoa_has_no_keyword(self) -> None:
        self.assertEqual(infer_category("Quinoa"), "ingredient")
        self.assertEqual(parse_ingredient_line("- Quinoa - 1 cup").category, ["ingredient"])

    def test_explicit_category_beats_keywords(self) -> None:
        self.assertEqual(resolve_categories("Chicken", "fats"), ["fats"])
        self.assertEqual(resolve_categories("Chicken", None), ["protein"])


class DefaultAmountTests(unittest.TestCase):
    def test_metric_and_customary_tables(self) -> None:
        cases = [
            ("Olive oil", "15ml", "1 tbsp"),
            ("Butter", "15ml", "1 tbsp"),
            ("Sea salt", "5g", "1 tsp"),
            ("Chicken breast", "150g", "5 oz"),
            ("Jasmine rice", "100g", "1/2 cup"),
            ("Zucchini", "100g", "1/2 cup"),
        ]
        for name, metric, customary in cases:
            with self.subTest(name=name):
                self.assertEqual(default_amount(name, "metric"), metric)
                self.assertEqual(default_amount(name, "customary"), customary)

    def test_request_fallback_splits_on_commas_and_newlines(self) -> None:
        ingredients = ingredients_from_request("chicken breast, rice\nspinach,  , ox", "metric")
        self.assertEqual([(i.name, i.amount, i.category) for i in ingredients], [
            ("chicken breast", "150g", ["protein"]),
            ("rice", "100g", ["carbs"]),
            ("spinach", "100g", ["fiber"]),
        ])


class ExtractIngredientsTests(unittest.TestCase):
    def test_section_lines_are_parsed(self) -> None:
        text = "List of Ingredients:\n- Tofu - 200g (protein)\n- Soy sauce - 1 tbsp\n\nActual recipe steps:\n1. Fry."
        ingredients = extract_ingredients(text, "metric", "tofu, soy sauce")
        self.assertEqual([(i.name, i.amount) for i in ingredients], [("Tofu", "200g"), ("Soy sauce", "1 tbsp")])

    def test_note_lines_in_section_are_skipped(self) -> None:
        text = "List of Ingredients:\nAll amounts are approximate.\n- Tofu - 200g (protein)\n\nActual recipe steps:\n1. Fry."
        ingredients = extract_ingredients(text, "metric", "tofu")
        self.assertEqual([(i.name, i.amount, i.category) for i in ingredients], [("Tofu", "200g", ["protein"])])

    def test_missing_section_uses_request(self) -> None:
        ingredients = extract_ingredients("Recipe Title: Toast", "customary", "bread, butter")
        self.assertEqual([(i.name, i.amount, i.category) for i in ingredients], [
            ("bread", "1/2 cup", ["carbs"]),
            ("butter", "1 tbsp", ["ingredient"]),
        ])


if __name__ == "__main__":
    unittest.main()
