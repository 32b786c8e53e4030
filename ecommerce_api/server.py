# ecommerce_api/server.py

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from ecommerce_api.config import ServerSettings, load_settings

logger = logging.getLogger(__name__)


class ListeningServer(uvicorn.Server):
    """uvicorn server that announces the port once its socket is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # uvicorn exits the process on bind errors, so reaching here unstarted
        # only happens when startup was aborted (e.g. lifespan failure).
        if self.started:
            logger.info("Server running on port %s", self.config.port)


def serve(application: FastAPI, settings: Optional[ServerSettings] = None) -> None:
    """
    Bind a listener for ``application`` and block until shutdown.

    Bind failures are not retried; uvicorn logs them and exits non-zero.
    """
    if settings is None:
        settings = load_settings()

    config = uvicorn.Config(
        application,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    ListeningServer(config).run()
