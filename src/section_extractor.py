# section_extractor.py
#
# Description:
# Locates the named sections of one recipe's text block. Each section has an
# ordered list of extraction rules; the first rule that yields a non-empty
# span wins, and each section reader supplies its own default when none do.

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import config

DEFAULT_STEPS = ["Follow the recipe instructions provided by the AI"]
DEFAULT_SUBSTITUTES = "Feel free to substitute ingredients based on your preferences and dietary needs."

STEP_NUMBER_RE = re.compile(r"^\d+\.\s*")
BULLET_RE = re.compile(r"^[-•*]\s*")
MIN_STEP_LENGTH = 6


@dataclass(frozen=True)
class ExtractionRule:
    """A named rule returning the text between a start label and its end markers."""
    name: str
    pattern: re.Pattern

    def __call__(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        if not match:
            return None
        span = match.group(1).strip()
        return span or None


def between(name: str, start: str, ends: Sequence[str]) -> ExtractionRule:
    """Builds a rule capturing everything after `start` up to the first end marker."""
    end_group = "|".join(list(ends) + [r"\Z"])
    pattern = re.compile(rf"{start}(.*?)(?={end_group})", re.IGNORECASE | re.DOTALL)
    return ExtractionRule(name, pattern)


SECTION_RULES: Dict[str, List[ExtractionRule]] = {
    "ingredients": [
        between("list_of_ingredients", r"List of Ingredients:",
                [r"Actual recipe steps", r"Recipe steps", r"Steps:", r"Instructions:"]),
        between("ingredients", r"Ingredients:", [r"Instructions:", r"Steps:"]),
    ],
    "steps": [
        between("actual_recipe_steps", r"Actual recipe steps:",
                [r"Substitutes", r"Cultural Background", r"History", r"=== RECIPE"]),
        between("instructions", r"Instructions:",
                [r"Substitutes", r"Cultural Background", r"History", r"=== RECIPE"]),
    ],
    "substitutes": [
        between("substitutes", r"Substitutes:", [r"Cultural Background", r"History", r"=== RECIPE"]),
        between("substitutions", r"Substitutions:", [r"Cultural Background", r"History", r"=== RECIPE"]),
    ],
    "history": [
        between("cultural_background", r"Cultural Background:", [r"=== RECIPE"]),
        between("history", r"History:", [r"=== RECIPE"]),
    ],
}


def extract_section(text: str, section: str, default: Optional[str] = None) -> Optional[str]:
    """
    Runs the rules registered for `section` in order.

    Returns:
        The first non-empty span, or `default` if no rule matched.
    """
    for rule in SECTION_RULES[section]:
        span = rule(text)
        if span is not None:
            logging.debug(f"Section '{section}' matched by rule '{rule.name}'.")
            return span
    return default


def extract_steps(text: str) -> List[str]:
    span = extract_section(text, "steps")
    if span is None:
        return list(DEFAULT_STEPS)

    steps = []
    for line in span.splitlines():
        step = BULLET_RE.sub("", STEP_NUMBER_RE.sub("", line.strip()))
        if len(step) >= MIN_STEP_LENGTH:
            steps.append(step)
    return steps or list(DEFAULT_STEPS)


def extract_substitutes(text: str) -> str:
    return extract_section(text, "substitutes", DEFAULT_SUBSTITUTES)


def default_history(title: str, cuisine: str) -> str:
    """A generic cultural note used when the model's one is missing or too short."""
    return (
        f"This {title.lower()} represents a modern interpretation of {cuisine.lower()} culinary traditions. "
        "The dish showcases how traditional cooking methods can be adapted to contemporary tastes "
        "while maintaining authentic flavors and cultural significance."
    )


def extract_history(text: str, title: str = "this dish", cuisine: str = "global") -> str:
    """Returns the cultural background collapsed to one line, or a generated one."""
    history = extract_section(text, "history", "")
    history = re.sub(r"\s+", " ", history).strip()
    if len(history) < config.MIN_HISTORY_LENGTH:
        return default_history(title, cuisine)
    return history
