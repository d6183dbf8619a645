# llm_processor.py
#
# Description:
# This module defines the common interface for all LLM processors and provides
# shared functionality like building the recipe prompt. It also contains the
# implementation for the local Ollama processor.

import logging
import time
from abc import ABC, abstractmethod

import ollama

import config
from models import GOAL_CUT, GOAL_NO_GOAL, UNIT_METRIC, RecipeRequest


class LLMProcessingError(Exception):
    """Raised when the provider call fails (network, auth, quota, ...)."""


class EmptyResponseError(LLMProcessingError):
    """Raised when the provider answered but returned no text."""

    def __init__(self, message: str = "No response from AI model"):
        super().__init__(message)


def calorie_range(goal_type: str) -> str:
    if goal_type == GOAL_CUT:
        return "under 250 calories"
    if goal_type == GOAL_NO_GOAL:
        return "250-400 calories (balanced)"
    return "above 400 calories"


def goal_label(goal_type: str) -> str:
    if goal_type == GOAL_CUT:
        return "cut-friendly"
    if goal_type == GOAL_NO_GOAL:
        return "balanced and nutritious"
    return "bulk-friendly"


def unit_text(unit_system: str) -> str:
    if unit_system == UNIT_METRIC:
        return "metric units (g, ml, kg)"
    return "customary units (oz, cups, tbsp, tsp)"


def build_recipe_prompt(request: RecipeRequest) -> str:
    """
    Renders the recipe prompt for a request. The prompt asks for exactly
    `recipe_count` numbered sections in the layout the parser expects.
    """
    restrictions = request.dietary_restrictions.strip()
    dietary_instructions = ""
    if restrictions:
        dietary_instructions = config.DIETARY_INSTRUCTIONS_TEMPLATE.format(restrictions=restrictions)

    additional_sections = "".join(
        f"\n=== RECIPE {number} ===\n[Repeat exact same format]\n"
        for number in range(2, request.recipe_count + 1)
    )

    return config.RECIPE_PROMPT_TEMPLATE.format(
        recipe_count=request.recipe_count,
        ingredients=request.ingredients,
        dietary_instructions=dietary_instructions,
        calorie_range=calorie_range(request.goal_type),
        goal_label=goal_label(request.goal_type),
        dietary_requirement="STRICTLY follow all dietary restrictions provided" if restrictions else "",
        cuisine=request.cuisine,
        unit_text=unit_text(request.unit_system),
        additional_sections=additional_sections,
        dietary_reminder=f"All recipes must comply with: {restrictions}" if restrictions else "",
    )


class LLMProcessor(ABC):
    """
    Abstract base class for all LLM processors.
    Ensures a consistent interface for generating recipe text.
    """

    name = "base"

    def __init__(self, model_name: str | None = None):
        self.model_name = model_name or config.get_model_name(self.name)

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Sends one prompt to the model and returns its complete text answer.

        Args:
            prompt: The fully rendered prompt.

        Returns:
            The generated text, never empty.

        Raises:
            LLMProcessingError: If the provider call fails.
            EmptyResponseError: If the provider returned no text.
        """
        pass


class OllamaProcessor(LLMProcessor):
    """
    LLM processor for local models served via the Ollama API.
    """

    name = "local"

    def generate(self, prompt: str) -> str:
        """
        Sends the prompt to the local Ollama LLM and returns the raw text.
        """
        settings = config.GENERATION_SETTINGS
        start_time = time.time()
        try:
            logging.debug(f"Sending recipe prompt to Ollama ({self.model_name})...")
            response = ollama.generate(
                model=self.model_name,
                prompt=prompt,
                options={
                    "temperature": settings["temperature"],
                    "top_k": settings["top_k"],
                    "top_p": settings["top_p"],
                    "num_predict": settings["max_output_tokens"],
                },
            )
        except ollama.ResponseError as e:
            logging.error(f"Ollama returned an error for model {self.model_name}: {e.error}")
            raise LLMProcessingError(e.error) from e
        except ConnectionError as e:
            logging.error(f"Could not reach the Ollama server for model {self.model_name}: {e}")
            raise LLMProcessingError(str(e)) from e

        text = (response["response"] or "").strip()
        if not text:
            raise EmptyResponseError()

        logging.info(f"Ollama {self.model_name} answered in {time.time() - start_time:.2f}s ({len(text)} chars).")
        return text
