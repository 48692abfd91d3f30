"""Executable entry point for launching the OpenAPI Components FastAPI application.

This module is intentionally minimal so that process managers (uvicorn / gunicorn /
ASGI workers) can import a stable `app` object from `openapi_components.app` OR run
`python -m openapi_components.run_server` directly for local development.

Environment Variables:
    OPENAPI_COMPONENTS_DOCUMENT (path): JSON document served at startup.
    HOST (str): Override bind host (default 0.0.0.0).
    PORT (int): Override listening port (default 8000).
    OPENAPI_COMPONENTS_LOG_LEVEL (str): Logging level (default INFO).

Example:
    $ OPENAPI_COMPONENTS_DOCUMENT=openapi.json python -m openapi_components.run_server
    $ PORT=9000 python -m openapi_components.run_server
"""

from __future__ import annotations

import logging

import uvicorn

from .app import app
from .config import ServerConfig


def main() -> None:
    """Launch the ASGI server with development-friendly defaults."""
    config = ServerConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
