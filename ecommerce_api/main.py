# ecommerce_api/main.py
"""
Run the API with:
    python -m ecommerce_api
or the installed ``ecommerce-api`` script.
"""

import logging

from fastapi import FastAPI

from ecommerce_api.api.root import router as root_router
from ecommerce_api.config import load_settings
from ecommerce_api.server import logger as startup_logger
from ecommerce_api.server import serve


def create_app() -> FastAPI:
    # Building the app registers routes only; nothing binds until serve().
    # No docs or schema routes: "/" is the whole route table.
    application = FastAPI(
        title="E-commerce API",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.include_router(root_router)
    return application


app = create_app()


def main() -> None:
    settings = load_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    # The port announcement is printed at any LOG_LEVEL.
    startup_logger.setLevel(min(logging.INFO, logging.getLogger().level))

    serve(app, settings)


# Only start the listener when run directly, not when imported by tests
if __name__ == "__main__":
    main()
