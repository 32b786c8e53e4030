# ecommerce_api/config.py

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_LOG_LEVEL = "info"


class ServerSettings(BaseModel):
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("port", mode="before")
    @classmethod
    def _port_or_default(cls, value):
        # Anything that isn't an integer falls back to the default port.
        # Range is not checked here; a bad port fails when the listener binds.
        try:
            return int(value)
        except (TypeError, ValueError):
            return DEFAULT_PORT

    @field_validator("log_level")
    @classmethod
    def _lowercase_level(cls, value: str) -> str:
        return value.strip().lower()


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ServerSettings:
    """
    Resolve listener settings from PORT, HOST and LOG_LEVEL.

    Read at call time, so importing the app never depends on the environment.
    Unset or empty variables keep their defaults.
    """
    if environ is None:
        environ = os.environ

    values = {}
    for field, var in (("host", "HOST"), ("port", "PORT"), ("log_level", "LOG_LEVEL")):
        raw = environ.get(var)
        if raw is not None and raw.strip():
            values[field] = raw.strip()

    return ServerSettings(**values)
