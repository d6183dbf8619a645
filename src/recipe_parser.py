# recipe_parser.py
#
# Description:
# Converts the model's free-text answer into Recipe records. The full answer
# is split on the "=== RECIPE n ===" markers, each segment is assembled into
# one Recipe (or dropped), and the result is capped at the requested count.
# Parsing is pure: the same text always yields the same records.

import logging
import re
from typing import List, Optional

import config
from balance_factor import normalize_balance_factor
from ingredient_parser import extract_ingredients
from models import GOAL_BULK, GOAL_CUT, GOAL_NO_GOAL, UNIT_METRIC, Recipe
from section_extractor import extract_history, extract_steps, extract_substitutes

RECIPE_DELIMITER_RE = re.compile(r"=== RECIPE \d+ ===")

# Labels a field value may not start with when it sits on the line below its own label.
FIELD_LABELS = (
    r"(?:Recipe Title|Cuisine|Prep Time|Number of Servings|Caloric Amount|Balance Factor|Goal Type"
    r"|Cooking Required|Required Tools|List of Ingredients|Actual recipe steps|Substitutes|Cultural Background)"
)


def labelled_field(label: str) -> re.Pattern:
    """Matches the value after `label`, on the same line or the one below it."""
    return re.compile(
        rf"{label}:[ \t]*(?:\r?\n[ \t]*)?(?!{FIELD_LABELS})(\S.*?)[ \t]*(?:\r?\n|$)",
        re.IGNORECASE,
    )


TITLE_RE = labelled_field(r"Recipe Title")
CUISINE_RE = labelled_field(r"Cuisine")
TIME_RE = labelled_field(r"Prep Time.*?Cook Time")
SERVINGS_RE = labelled_field(r"Number of Servings.*?Serving Size")
CALORIES_RE = re.compile(r"Caloric Amount.*?(\d+)", re.IGNORECASE)
BALANCE_RE = labelled_field(r"Balance Factor")
COOKING_RE = labelled_field(r"Cooking Required")
TOOLS_RE = labelled_field(r"Required Tools")
PARENTHESIS_RE = re.compile(r"\(([^)]+)\)")

DEFAULT_CUISINE = "Global"
DEFAULT_PREP_TIME = "15 minutes"
DEFAULT_COOK_TIME = "20 minutes"
DEFAULT_SERVINGS = "2 servings (1 plate)"
DEFAULT_SERVING_SIZE = "1 plate"
DEFAULT_TOOLS = "Basic kitchen tools"
DEFAULT_CALORIES = {GOAL_CUT: 220, GOAL_NO_GOAL: 325, GOAL_BULK: 450}


def _field(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    return match.group(1).strip() if match else None


def default_calories(goal_type: str) -> int:
    return DEFAULT_CALORIES.get(goal_type, DEFAULT_CALORIES[GOAL_BULK])


def split_times(time_info: Optional[str]) -> tuple[str, str]:
    """Splits "15 minutes + 25 minutes" into prep and cook time."""
    if not time_info:
        return DEFAULT_PREP_TIME, DEFAULT_COOK_TIME
    prep, _, cook = time_info.partition("+")
    return prep.strip() or DEFAULT_PREP_TIME, cook.strip() or DEFAULT_COOK_TIME


def split_servings(servings_info: Optional[str]) -> tuple[str, str]:
    """Splits "2 servings (1 plate)" into the servings count and serving size."""
    servings_info = servings_info or DEFAULT_SERVINGS
    servings = servings_info.split("(", 1)[0].strip() or "2"
    size = PARENTHESIS_RE.search(servings_info)
    return servings, size.group(1).strip() if size else DEFAULT_SERVING_SIZE


def requires_cooking(cooking_info: Optional[str]) -> bool:
    if cooking_info is None:
        return True
    return "yes" in cooking_info.lower()


def parse_single_recipe(text: str, goal_type: str, original_ingredients: str,
                        unit_system: str = UNIT_METRIC) -> Optional[Recipe]:
    """
    Assembles one Recipe from a single recipe segment.

    Args:
        text: The segment between two recipe markers.
        goal_type: The goal type of the request, echoed into the record.
        original_ingredients: The user's ingredient list, used when the
            segment has no ingredients section.
        unit_system: 'metric' or 'customary', for default amounts.

    Returns:
        The Recipe, or None if the segment has no title.
    """
    title = _field(TITLE_RE, text)
    if not title:
        return None

    cuisine = _field(CUISINE_RE, text) or DEFAULT_CUISINE
    prep_time, cook_time = split_times(_field(TIME_RE, text))
    servings, serving_size = split_servings(_field(SERVINGS_RE, text))
    calories = _field(CALORIES_RE, text)

    return Recipe(
        title=title,
        cuisine=cuisine,
        prep_time=prep_time,
        cook_time=cook_time,
        servings=servings,
        serving_size=serving_size,
        calories=int(calories) if calories else default_calories(goal_type),
        balance_factor=normalize_balance_factor(_field(BALANCE_RE, text)),
        goal_type=goal_type,
        requires_cooking=requires_cooking(_field(COOKING_RE, text)),
        tools=_field(TOOLS_RE, text) or DEFAULT_TOOLS,
        ingredients=extract_ingredients(text, unit_system, original_ingredients),
        steps=extract_steps(text),
        substitutes=extract_substitutes(text),
        history=extract_history(text, title, cuisine),
    )


def split_segments(text: str) -> List[str]:
    """Splits the full answer on the recipe markers, dropping blank pieces."""
    text = (text or "").replace("\r\n", "\n")
    return [segment.strip() for segment in RECIPE_DELIMITER_RE.split(text) if segment.strip()]


def parse_recipes_from_text(text: str, goal_type: str, original_ingredients: str,
                            unit_system: str, recipe_count: int) -> List[Recipe]:
    """
    Parses every recipe segment of a model answer.

    Segments shorter than config.MIN_SEGMENT_LENGTH, segments without a title
    and segments that fail to parse are skipped. At most `recipe_count`
    recipes are returned; fewer is not an error.
    """
    recipes: List[Recipe] = []
    for index, segment in enumerate(split_segments(text), start=1):
        if len(segment) < config.MIN_SEGMENT_LENGTH:
            logging.debug(f"Skipping segment {index}: only {len(segment)} characters.")
            continue
        try:
            recipe = parse_single_recipe(segment, goal_type, original_ingredients, unit_system)
        except Exception:
            logging.exception(f"Error parsing recipe segment {index}.")
            continue
        if recipe is None:
            logging.warning(f"Skipping segment {index}: no recipe title found.")
            continue
        recipes.append(recipe)

    if len(recipes) > recipe_count:
        logging.info(f"Model returned {len(recipes)} recipes, keeping the first {recipe_count}.")
    return recipes[:recipe_count]
