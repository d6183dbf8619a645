# llm_processor_lmstudio.py
#
# Description:
# This module handles all interactions with the LM Studio local server
# through the native `lmstudio-python` library. The model answers in plain
# text; structuring the recipes is left to the parsing pipeline.

import logging
import time

import lmstudio as lms
from lmstudio import Chat

import config
from llm_processor import EmptyResponseError, LLMProcessingError, LLMProcessor


class LMStudioProcessor(LLMProcessor):
    """
    LLM processor for local models served via the LM Studio.
    """

    name = "lmstudio"

    def generate(self, prompt: str) -> str:
        """
        Sends the prompt to the LM Studio server and returns the text answer.
        """
        settings = config.GENERATION_SETTINGS
        inference_config = {
            "temperature": settings["temperature"],
            "topKSampling": settings["top_k"],
            "topPSampling": settings["top_p"],
            "maxTokens": settings["max_output_tokens"],
        }

        start_time = time.time()
        try:
            with lms.Client() as client:
                logging.debug(f"Sending recipe prompt to LM Studio ({self.model_name})...")
                model = client.llm.model(self.model_name)

                chat = Chat()
                chat.add_user_message(prompt)

                logging.debug(f"Applying inference config: {inference_config}")
                prediction = model.respond(chat, config=inference_config)
        except lms.LMStudioError as e:
            logging.error(f"LM Studio call failed for model {self.model_name}: {e}")
            logging.error("Please ensure the model is downloaded and correctly named in your LM Studio library.")
            raise LLMProcessingError(str(e)) from e

        text = (prediction.content or "").strip()
        if not text:
            raise EmptyResponseError()

        logging.info(f"LM Studio {self.model_name} answered in {time.time() - start_time:.2f}s ({len(text)} chars).")
        return text
