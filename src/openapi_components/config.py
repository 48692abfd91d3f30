"""Runtime configuration for the components API server."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class ServerConfig:
    """Configuration container for the REST / GraphQL server.

    Attributes:
        document_path: JSON OpenAPI document loaded at startup (empty document
            when unset).
        host: Bind host for the ASGI server.
        port: TCP port for the ASGI server.
        log_level: Python logging level name.
    """

    document_path: Optional[Path] = None
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create configuration from environment variables."""
        document = os.getenv("OPENAPI_COMPONENTS_DOCUMENT")
        return cls(
            document_path=Path(document) if document else None,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("OPENAPI_COMPONENTS_LOG_LEVEL", "INFO"),
        )
