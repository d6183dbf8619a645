# main.py
#
# Description:
# This is the main entry point for the recipe generation service. It sets up
# logging and serves the FastAPI application with uvicorn, using whichever
# LLM provider is selected in the configuration.

import logging

import uvicorn

import config
from server import app
from utils import setup_logging


def main():
    setup_logging()
    logging.info(
        f"Starting recipe service on {config.HOST}:{config.PORT} "
        f"(provider '{config.LLM_PROVIDER}', model '{config.get_model_name()}')..."
    )
    if config.SAVE_RAW_RESPONSES:
        logging.info(f"Raw model responses will be archived in '{config.RAW_RESPONSES_DIR}'.")

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
