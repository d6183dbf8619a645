# balance_factor.py
#
# Description:
# Turns the model's free-text "Balance Factor" line into the five fixed
# nutrient buckets used for the pie chart. The result only has to be
# visually representable: every bucket ends up with a positive share, but
# the shares are not forced to add up to exactly 100.

import logging
import re
from typing import Dict, Optional

from models import BALANCE_CATEGORIES

DEFAULT_BALANCE = {"protein": 30, "carbs": 40, "fiber": 10, "vitamins": 10, "fats": 10}

# Largest share moved out of each non-zero bucket when filling empty ones.
MAX_REDISTRIBUTION = 2
# Non-zero buckets never go below this while giving away their share.
REDISTRIBUTION_FLOOR = 5

_CATEGORY_GROUP = "|".join(BALANCE_CATEGORIES)

# Either "30% protein" or "protein 30%" (also "protein: 30 %").
BALANCE_PATTERN = re.compile(
    rf"(?P<value>\d+)\s*%\s*(?P<category>{_CATEGORY_GROUP})"
    rf"|(?P<category_first>{_CATEGORY_GROUP})\s*:?\s*(?P<value_after>\d+)\s*%",
    re.IGNORECASE,
)


def _scan_percentages(text: str) -> Dict[str, int] | None:
    """Returns the matched percentages, or None when nothing matched."""
    percentages = {category: 0 for category in BALANCE_CATEGORIES}
    found_any = False
    for match in BALANCE_PATTERN.finditer(text):
        if match.group("category"):
            category, value = match.group("category"), match.group("value")
        else:
            category, value = match.group("category_first"), match.group("value_after")
        # Later mentions of the same category overwrite earlier ones.
        percentages[category.lower()] = int(value)
        found_any = True
    return percentages if found_any else None


def _fill_remainder(percentages: Dict[str, int]) -> None:
    """Spreads whatever is left below 100 evenly over the empty buckets."""
    total = sum(percentages.values())
    missing = [category for category in BALANCE_CATEGORIES if percentages[category] == 0]
    if not missing or total >= 100:
        return

    share, extra = divmod(100 - total, len(missing))
    for index, category in enumerate(missing):
        percentages[category] = share + (1 if index < extra else 0)


def _borrow_for_empty(percentages: Dict[str, int]) -> None:
    """Moves a small slice from every filled bucket into the empty ones."""
    non_zero = [category for category in BALANCE_CATEGORIES if percentages[category] > 0]
    zero = [category for category in BALANCE_CATEGORIES if percentages[category] == 0]
    if not non_zero or not zero:
        return

    amount = min(MAX_REDISTRIBUTION, 100 // (len(non_zero) * len(zero)))
    for category in non_zero:
        percentages[category] = max(REDISTRIBUTION_FLOOR, percentages[category] - amount)
    for category in zero:
        percentages[category] = amount


def normalize_balance_factor(text: Optional[str]) -> Dict[str, int]:
    """
    Parses a balance-factor phrase into the five nutrient buckets.

    Args:
        text: The model's text, e.g. "30% protein, 35% carbs, 15% fiber,
            10% vitamins, 10% fats". Order and word order are free.

    Returns:
        A dict with every category of BALANCE_CATEGORIES mapped to an integer
        percentage. Empty or unparseable input, or input where every matched
        value is zero, yields DEFAULT_BALANCE.
    """
    if not text or not text.strip():
        return dict(DEFAULT_BALANCE)

    percentages = _scan_percentages(text)
    if percentages is None or not any(percentages.values()):
        logging.debug(f"No usable percentages in balance factor '{text}', using default.")
        return dict(DEFAULT_BALANCE)

    _fill_remainder(percentages)
    if any(value == 0 for value in percentages.values()):
        _borrow_for_empty(percentages)

    return percentages
