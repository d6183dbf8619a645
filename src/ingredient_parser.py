# ingredient_parser.py
#
# Description:
# Parses the "List of Ingredients" section into IngredientLine records and
# falls back to the user's own ingredient list when the model left the
# section out. Dietary classes come from the line's parenthetical when it
# names known classes, otherwise from a small keyword table.

import logging
import re
from typing import List, Optional, Tuple

from models import (
    DIETARY_CATEGORIES, GENERIC_CATEGORY, UNIT_CUSTOMARY, UNIT_METRIC, IngredientLine
)
from section_extractor import extract_section

DEFAULT_AMOUNT = "1 portion"
MIN_NAME_LENGTH = 3

LEADING_BULLET_RE = re.compile(r"^\s*[-•*]\s*")
CATEGORY_SUFFIX_RE = re.compile(r"^(?P<body>.*?)\s*\((?P<category>[^)]+)\)\s*$")
# Prefer the first spaced dash ("Garlic - 1-2 cloves"), else any dash.
SPACED_DASH_RE = re.compile(r"^(?P<name>.+?)\s+[-–]\s+(?P<amount>.+)$")
ANY_DASH_RE = re.compile(r"^(?P<name>.+?)\s*-\s*(?P<amount>.+)$")
CATEGORY_SPLIT_RE = re.compile(r"\s*(?:/|,|&|\band\b)\s*", re.IGNORECASE)

# Ordered (category, keywords) table for name-based inference.
CATEGORY_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ("protein", ("chicken", "beef", "fish", "egg")),
    ("carbs", ("rice", "pasta", "bread")),
    ("fiber", ("spinach", "broccoli", "lettuce")),
    ("vitamins", ("tomato", "carrot", "bell pepper")),
    ("fats", ("oil", "avocado", "cheese")),
]

# Ordered (keywords, metric amount, customary amount) table.
DEFAULT_AMOUNTS: List[Tuple[Tuple[str, ...], str, str]] = [
    (("oil", "butter"), "15ml", "1 tbsp"),
    (("salt", "pepper"), "5g", "1 tsp"),
    (("chicken", "beef"), "150g", "5 oz"),
    (("rice", "pasta"), "100g", "1/2 cup"),
]
FALLBACK_AMOUNT = {UNIT_METRIC: "100g", UNIT_CUSTOMARY: "1/2 cup"}


def infer_category(name: str) -> str:
    """Guesses a dietary class from the ingredient name."""
    lowered = name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return GENERIC_CATEGORY


def resolve_categories(name: str, category_text: Optional[str]) -> List[str]:
    """
    Returns the dietary classes named in `category_text` ("protein",
    "protein/fats", ...), in order and without duplicates. Falls back to
    keyword inference on `name` when none of them is a known class.
    """
    categories: List[str] = []
    if category_text:
        for token in CATEGORY_SPLIT_RE.split(category_text.strip()):
            token = token.strip().lower()
            if token in DIETARY_CATEGORIES and token not in categories:
                categories.append(token)
    return categories or [infer_category(name)]


def default_amount(name: str, unit_system: str) -> str:
    lowered = name.lower()
    metric = unit_system == UNIT_METRIC
    for keywords, metric_amount, customary_amount in DEFAULT_AMOUNTS:
        if any(keyword in lowered for keyword in keywords):
            return metric_amount if metric else customary_amount
    return FALLBACK_AMOUNT[UNIT_METRIC if metric else UNIT_CUSTOMARY]


def parse_ingredient_line(line: str) -> Optional[IngredientLine]:
    """
    Parses one bulleted line such as "- Chicken breast - 200g (protein)".

    Returns:
        An IngredientLine, or None if the line has no usable name or is a
        note (neither bulleted nor split by a spaced dash).
    """
    bulleted = LEADING_BULLET_RE.match(line) is not None
    text = LEADING_BULLET_RE.sub("", line).strip()
    if not text:
        return None
    if not bulleted and not SPACED_DASH_RE.match(text):
        return None

    category_text = None
    suffix = CATEGORY_SUFFIX_RE.match(text)
    if suffix:
        text, category_text = suffix.group("body").strip(), suffix.group("category")

    name, amount = text, DEFAULT_AMOUNT
    split = SPACED_DASH_RE.match(text) or ANY_DASH_RE.match(text)
    if split:
        name, amount = split.group("name").strip(), split.group("amount").strip()

    if len(name) < MIN_NAME_LENGTH:
        return None

    return IngredientLine(name=name, amount=amount or DEFAULT_AMOUNT,
                          category=resolve_categories(name, category_text))


def ingredients_from_request(original_ingredients: str, unit_system: str) -> List[IngredientLine]:
    """Builds one IngredientLine per comma/newline separated item the user entered."""
    lines = []
    for item in re.split(r"[,\n]", original_ingredients or ""):
        name = item.strip()
        if len(name) < MIN_NAME_LENGTH:
            continue
        lines.append(IngredientLine(
            name=name,
            amount=default_amount(name, unit_system),
            category=[infer_category(name)],
        ))
    return lines


def extract_ingredients(text: str, unit_system: str, original_ingredients: str) -> List[IngredientLine]:
    """
    Reads the ingredients section of a recipe block. When the section is
    missing, or none of its lines parse, the user's own list is used instead.
    """
    span = extract_section(text, "ingredients")
    if span is not None:
        parsed = [ingredient for ingredient in map(parse_ingredient_line, span.splitlines()) if ingredient]
        if parsed:
            return parsed
        logging.debug("Ingredients section held no parseable lines, using the requested ingredients.")
    return ingredients_from_request(original_ingredients, unit_system)
