# server.py
#
# Description:
# FastAPI application exposing the recipe generation and feedback endpoints.
# A generation request builds the prompt, makes exactly one LLM call, and
# parses the raw answer into recipes before returning both to the client.

import logging
from typing import Callable, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from llm_processor import LLMProcessingError, LLMProcessor, OllamaProcessor, build_recipe_prompt
from llm_processor_gemini import GeminiProcessor
from llm_processor_lmstudio import LMStudioProcessor
from models import (
    UNIT_METRIC, FeedbackBody, GenerateRecipeBody, GenerateRecipeResponse, RecipeRequest
)
from recipe_parser import parse_recipes_from_text
from utils import save_raw_response

FEEDBACK_TYPES = ("like", "dislike")

REQUIRED_FIELDS = ("ingredients", "servingSize", "goalType", "cuisine", "recipeCount")


def get_llm_processor() -> LLMProcessor:
    """
    Factory function to select and instantiate the correct LLM processor
    based on the configuration.
    """
    provider = config.LLM_PROVIDER
    if provider == "google":
        logging.debug("Using Google Gemini as the LLM provider.")
        return GeminiProcessor()
    elif provider == "local":
        logging.debug("Using local Ollama as the LLM provider.")
        return OllamaProcessor()
    elif provider == "lmstudio":
        logging.debug("Using LM Studio as the LLM provider.")
        return LMStudioProcessor()
    else:
        raise ValueError(
            f"Invalid LLM_PROVIDER in config: '{provider}'. "
            "Choose 'local', 'google', or 'lmstudio'."
        )


def llm_processor_factory() -> Callable[[], LLMProcessor]:
    """Dependency returning the processor factory used by the generation endpoint."""
    return get_llm_processor


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def under_delivery_notice(produced: int, requested: int) -> Optional[str]:
    """Message shown when the model yields fewer recipes than asked for."""
    if produced >= requested:
        return None
    plural = "" if produced == 1 else "s"
    return (
        "Due to limitations in available ingredients and dietary restrictions, "
        f"we were only able to generate {produced} recipe{plural} instead of the requested {requested}."
    )


def to_recipe_request(body: GenerateRecipeBody) -> RecipeRequest:
    """
    Validates the raw body.

    Raises:
        ValueError: With a client-facing message if a field is missing or invalid.
    """
    missing: List[str] = [field for field in REQUIRED_FIELDS if not (getattr(body, field) or "").strip()]
    if missing:
        raise ValueError(f"Missing required fields: {', '.join(missing)}")

    try:
        recipe_count = int(body.recipeCount.strip())
    except ValueError:
        raise ValueError(f"recipeCount must be a positive integer, got '{body.recipeCount}'") from None
    if not 1 <= recipe_count <= config.MAX_RECIPE_COUNT:
        raise ValueError(
            f"recipeCount must be between 1 and {config.MAX_RECIPE_COUNT}, got '{body.recipeCount}'"
        )

    return RecipeRequest(
        ingredients=body.ingredients.strip(),
        serving_size=body.servingSize.strip(),
        goal_type=body.goalType.strip(),
        cuisine=body.cuisine.strip(),
        dietary_restrictions=(body.dietaryRestrictions or "").strip(),
        unit_system=(body.unitSystem or UNIT_METRIC).strip(),
        recipe_count=recipe_count,
    )


router = APIRouter(prefix="/api", tags=["recipes"])


@router.post("/generate-recipe")
def generate_recipe(
    body: Optional[GenerateRecipeBody] = Body(None),
    processor_factory: Callable[[], LLMProcessor] = Depends(llm_processor_factory),
):
    """Generates recipes with the configured LLM and parses them."""
    try:
        request = to_recipe_request(body or GenerateRecipeBody())
    except ValueError as e:
        return error_response(400, str(e))

    try:
        processor = processor_factory()
        raw_text = processor.generate(build_recipe_prompt(request))
    except LLMProcessingError as e:
        logging.error(f"Recipe generation failed: {e}")
        return error_response(500, str(e) or "Server error")
    except Exception as e:
        logging.exception("Unexpected error during recipe generation.")
        return error_response(500, str(e) or "Server error")

    if config.SAVE_RAW_RESPONSES:
        save_raw_response(raw_text, request.model_dump(), config.RAW_RESPONSES_DIR)

    recipes = parse_recipes_from_text(
        raw_text, request.goal_type, request.ingredients, request.unit_system, request.recipe_count
    )
    logging.info(f"Parsed {len(recipes)} of {request.recipe_count} requested recipes.")

    response = GenerateRecipeResponse(
        recipes=recipes,
        raw_response=raw_text,
        requested_count=request.recipe_count,
        notice=under_delivery_notice(len(recipes), request.recipe_count),
    )
    return JSONResponse(content=response.model_dump(by_alias=True, exclude_none=True))


@router.post("/recipe-feedback")
def recipe_feedback(body: Optional[FeedbackBody] = Body(None)):
    """Acknowledges a like/dislike. Feedback is only logged."""
    feedback_type = body.type if body else None
    if feedback_type not in FEEDBACK_TYPES:
        return error_response(400, 'Invalid feedback type. Must be "like" or "dislike"')

    logging.info(f"Recipe feedback received: {feedback_type}")
    return {"success": True}


def create_app() -> FastAPI:
    app = FastAPI(title="Nourish 'N' Flourish - Recipe API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok", "provider": config.LLM_PROVIDER}

    app.include_router(router)
    return app


app = create_app()
