# utils.py
#
# Description:
# This module contains utility functions used across the application,
# such as setting up logging and archiving raw model responses.

import json
import logging
import os
import time
from typing import Any, Dict


class NoiseFilter(logging.Filter):
    """A filter to suppress common, noisy log messages from libraries."""

    def __init__(self, patterns_to_suppress):
        super().__init__()
        self.patterns = patterns_to_suppress

    def filter(self, record):
        message = record.getMessage()
        return not any(p in message for p in self.patterns)


def setup_logging():
    """Configures the logging for the application."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
        force=True
    )

    patterns_to_silence = [
        "HTTP Request:", "AFC is enabled", "AFC remote call",
        "Both GOOGLE_API_KEY and GEMINI_API_KEY are set",
        "lmstudio-greeting", "Websocket",
    ]
    noise_filter = NoiseFilter(patterns_to_silence)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        handler.addFilter(noise_filter)

    logging.getLogger('google.genai').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)


def save_raw_response(raw_text: str, request: Dict[str, Any], output_dir: str) -> str | None:
    """
    Writes one model answer, together with the request that produced it,
    to a timestamped JSON file in `output_dir`.

    Returns:
        The path of the written file, or None if it could not be written.
    """
    timestamp = time.strftime('%Y-%m-%d_%H-%M-%S')
    path = os.path.join(output_dir, f"response_{timestamp}_{time.time_ns() % 1_000_000:06d}.json")
    data = {
        'timestamp': timestamp,
        'request': request,
        'raw_response': raw_text,
    }
    try:
        os.makedirs(output_dir, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4, ensure_ascii=False)
    except OSError as e:
        logging.error(f"Failed to save raw response to {path}: {e}")
        return None
    logging.debug(f"Saved raw model response to {path}")
    return path
