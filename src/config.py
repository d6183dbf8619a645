# config.py
#
# Description:
# This file contains all the configuration settings for the recipe service.
# By keeping them in one place, it's easy to adjust providers, model names,
# and parsing limits without changing the core logic of the application.

import os

# --- Server Settings ---
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

# Origins allowed to call the API from a browser (comma separated).
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

# --- Google Gemini API Settings ---
# IMPORTANT: It's recommended to set your Google API key as an environment
# variable for security.
# How to set an environment variable:
# macOS/Linux: export GOOGLE_API_KEY="your_api_key_here"
# Windows: set GOOGLE_API_KEY="your_api_key_here"
GOOGLE_API_KEY = os.environ.get("GOOGLE_API_KEY") or os.environ.get("GEMINI_API_KEY", "")

# --- LLM Provider Settings ---
# Choose your LLM provider: "local", "google", or "lmstudio".
LLM_PROVIDER = os.environ.get("LLM_PROVIDER", "google")

# --- LLM Model Settings ---
# Default model for each provider. LLM_MODEL overrides it.
LLM_MODELS = {
    "local": "llama3",
    "google": "gemini-2.5-flash",
    "lmstudio": "google/gemma-3-12b",
}
LLM_MODEL = os.environ.get("LLM_MODEL", "")

# Sampling parameters sent with every generation call.
GENERATION_SETTINGS = {
    "temperature": 0.8,
    "top_k": 40,
    "top_p": 0.95,
    "max_output_tokens": 8000,
}

# --- Raw Response Archive ---
SAVE_RAW_RESPONSES = os.environ.get("SAVE_RAW_RESPONSES", "").lower() in ("1", "true", "yes")
RAW_RESPONSES_DIR = os.environ.get("RAW_RESPONSES_DIR", "output/raw_responses")

# --- Parsing Settings ---
MIN_SEGMENT_LENGTH = 100  # Shorter recipe segments are discarded as noise
MIN_HISTORY_LENGTH = 30   # Shorter cultural backgrounds are replaced by a generated one
MAX_RECIPE_COUNT = 7      # Upper bound on recipes per request, one prompt section each


def get_model_name(provider: str | None = None) -> str:
    """Returns the model configured for the given (or active) provider."""
    if LLM_MODEL:
        return LLM_MODEL
    return LLM_MODELS.get(provider or LLM_PROVIDER, "")


# --- LLM Prompt ---
# The parsing pipeline reads these section labels back, so they must stay
# exactly as written here.
RECIPE_PROMPT_TEMPLATE = '''You are a professional chef and nutritionist for Nourish 'N' Flourish. Create exactly {recipe_count} unique recipes using ONLY these ingredients: {ingredients}{dietary_instructions}

CRITICAL REQUIREMENTS:
- Use ONLY the ingredients listed above
- Do NOT add any ingredients not in the list
- Create EXACTLY {recipe_count} recipes; no more, no less.
- Each recipe must be {calorie_range}
- Each recipe must be {goal_label}
- Provide detailed, step-by-step cooking instructions
- Include specific ingredient quantities and cooking methods
- {dietary_requirement}
- CUISINE REQUIREMENT: ALL recipes MUST be {cuisine} cuisine. Use authentic {cuisine} cooking methods, spices, and techniques. Do NOT create generic recipes - make them truly {cuisine} authentic.

FORMAT EACH RECIPE EXACTLY LIKE THIS:

=== RECIPE 1 ===
Recipe Title: [Creative, descriptive name]
Cuisine: [Specific cuisine type]
Prep Time + Cook Time: [e.g., 15 minutes + 25 minutes]
Number of Servings (per average adult) + Serving Size: [e.g., 2 servings (1 plate)]
Caloric Amount per general serving for adults: [specific number]
Balance Factor: [MUST include ALL categories: protein, carbs, fiber, vitamins, fats - e.g., 30% protein, 35% carbs, 15% fiber, 10% vitamins, 10% fats]
Goal Type: [{goal_label}]
Cooking Required: [Yes/No - specify if this recipe requires cooking or can be made without heat]
Required Tools: [List specific tools needed: pan, blender, peeler, knife, cutting board, etc.]

List of Ingredients:
- [ingredient name] - [amount/quantity in {unit_text}] (protein/carbs/fiber/vitamins/fats)
- [ingredient name] - [amount/quantity in {unit_text}] (protein/carbs/fiber/vitamins/fats)
- [continue with all ingredients used]

Actual recipe steps:
1. [Detailed step using specific ingredients and quantities]
2. [Detailed step using specific ingredients and quantities]
3. [Continue with all steps]

Substitutes: [Specific substitution suggestions]

Cultural Background: [Write 2-3 COMPLETE sentences about THIS SPECIFIC DISH's history, cultural significance, and ethnic symbolism. Make it unique to this recipe. Do NOT cut off mid-sentence. Provide the FULL cultural background without truncation.]

CRITICAL REQUIREMENTS:
- You MUST include the "List of Ingredients:" section with ONLY the ingredients actually used in this specific recipe
- Each ingredient MUST show its exact amount/quantity in {unit_text} and ALL applicable dietary classes (protein, carbs, fiber, vitamins, fats)
- Each Cultural Background MUST be unique to that specific dish, not generic
- Cultural Background MUST be complete and not truncated - write full sentences until the end
- Do NOT skip any sections
- EVERY recipe MUST include ALL dietary categories (protein, carbs, fiber, vitamins, fats) in the Balance Factor
- Ensure each recipe has a balanced nutritional profile with all categories represented
- IMPORTANT: Only list ingredients that are actually used in the cooking steps of this recipe
{additional_sections}
Remember: Use ONLY these ingredients: {ingredients}. Each recipe must be unique and include detailed cooking instructions. {dietary_reminder}

CUISINE ENFORCEMENT: Every single recipe MUST be authentic {cuisine} cuisine. Use traditional {cuisine} cooking techniques, authentic {cuisine} spices and seasonings, and follow {cuisine} culinary traditions. Do NOT create generic recipes - make them genuinely {cuisine} authentic.'''

DIETARY_INSTRUCTIONS_TEMPLATE = '''

DIETARY RESTRICTIONS TO FOLLOW:
- {restrictions}
- ALL recipes must strictly comply with these restrictions
- Do NOT use any ingredients that violate these restrictions
- Ensure all cooking methods and ingredients are compliant'''
