# llm_processor_gemini.py
#
# Description:
# This module handles all interactions with the Google Gemini API using the
# `google-genai` SDK. It conforms to the LLMProcessor interface.

import logging
import time

from google import genai
from google.genai import types, errors

import config
from llm_processor import EmptyResponseError, LLMProcessingError, LLMProcessor

# Set specific Google Gemini loggers to WARNING level
logging.getLogger('google.genai').setLevel(logging.WARNING)


class GeminiProcessor(LLMProcessor):
    """
    LLM processor for the Google Gemini API using the `google-genai` SDK.
    """

    name = "google"

    def generate(self, prompt: str) -> str:
        """
        Sends the prompt to the Google Gemini API and returns the plain text
        of the answer.
        """
        if not config.GOOGLE_API_KEY:
            logging.error("GOOGLE_API_KEY is not set. Cannot call Gemini.")
            raise LLMProcessingError("GOOGLE_API_KEY is not set")

        settings = config.GENERATION_SETTINGS
        model_name = self.model_name
        if model_name.startswith("models/"):
            model_name = model_name.split('/', 1)[1]

        start_time = time.time()
        try:
            client = genai.Client(api_key=config.GOOGLE_API_KEY)
            logging.debug(f"Sending recipe prompt to Google Gemini ({model_name})...")

            response = client.models.generate_content(
                model=model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=settings["temperature"],
                    top_k=settings["top_k"],
                    top_p=settings["top_p"],
                    max_output_tokens=settings["max_output_tokens"],
                ),
            )
        # Catch the specific APIError from the google-genai SDK
        except errors.APIError as e:
            logging.error(f"Google API call failed with model {model_name}: {e}")
            raise LLMProcessingError(e.message or str(e)) from e

        text = (response.text or "").strip()
        if not text:
            logging.error(f"Gemini response from {model_name} was empty.")
            raise EmptyResponseError()

        logging.info(f"Gemini {model_name} answered in {time.time() - start_time:.2f}s ({len(text)} chars).")
        return text
