# models.py
#
# Description:
# This module defines the Pydantic data models used throughout the application.
# These models ensure that the user's request and the recipes recovered from
# the LLM's free-text output are structured correctly and consistently.
# Recipe fields serialize with the camelCase names the front-end reads.

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

# The five buckets of a recipe's balance factor, in their fixed order.
BALANCE_CATEGORIES = ("protein", "carbs", "fiber", "vitamins", "fats")

# Classes an ingredient line may be tagged with explicitly.
DIETARY_CATEGORIES = BALANCE_CATEGORIES + ("minerals",)

# Tag used when no dietary class can be determined.
GENERIC_CATEGORY = "ingredient"

GOAL_CUT = "cut"
GOAL_NO_GOAL = "no_goal"
GOAL_BULK = "bulk"

UNIT_METRIC = "metric"
UNIT_CUSTOMARY = "customary"


class RecipeRequest(BaseModel):
    """A validated recipe-generation request, immutable once submitted."""
    model_config = ConfigDict(frozen=True)

    ingredients: str = Field(..., description="Free text, comma or newline separated.")
    serving_size: str = Field(..., description="Serving size chosen by the user.")
    goal_type: str = Field(..., description="'cut', 'no_goal' or anything else for bulk.")
    cuisine: str = Field(..., description="Requested cuisine, e.g. 'Italian'.")
    dietary_restrictions: str = Field("", description="Optional free-text restrictions.")
    unit_system: str = Field(UNIT_METRIC, description="'metric' or anything else for customary units.")
    recipe_count: int = Field(..., gt=0, description="How many recipes to ask the model for.")


class IngredientLine(BaseModel):
    """Represents a single ingredient with its amount and dietary classes."""
    name: str = Field(..., description="The name of the ingredient, e.g., 'Chicken breast'.")
    amount: str = Field(..., description="The quantity, e.g., '200g' or '1 tbsp'.")
    category: List[str] = Field(..., min_length=1, description="One or more dietary classes.")


class Recipe(BaseModel):
    """The main model representing a complete, normalized recipe."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    cuisine: str
    prep_time: str = Field(..., alias="prepTime")
    cook_time: str = Field(..., alias="cookTime")
    servings: str
    serving_size: str = Field(..., alias="servingSize")
    calories: int = Field(..., ge=0)
    balance_factor: Dict[str, int] = Field(..., alias="balanceFactor")
    goal_type: str = Field(..., alias="goalType")
    requires_cooking: bool = Field(..., alias="requiresCooking")
    tools: str
    ingredients: List[IngredientLine]
    steps: List[str]
    substitutes: str
    history: str


# --- API payloads ---

class GenerateRecipeBody(BaseModel):
    """
    Raw body of the generation endpoint. Every field is optional here so the
    endpoint can answer missing fields with its own 400 message.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    ingredients: Optional[str] = None
    servingSize: Optional[str] = None
    goalType: Optional[str] = None
    cuisine: Optional[str] = None
    dietaryRestrictions: Optional[str] = None
    unitSystem: Optional[str] = None
    recipeCount: Optional[str] = None


class FeedbackBody(BaseModel):
    type: Optional[str] = None


class GenerateRecipeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    recipes: List[Recipe]
    raw_response: str = Field(..., alias="rawResponse")
    requested_count: int = Field(..., alias="requestedCount")
    notice: Optional[str] = None
