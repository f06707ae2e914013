"""
Configuration Module for the Menu API
=====================================

This module centralizes the environment-derived settings of the menu
service. Values are read once at import time; `main.py` loads a `.env`
file before this module is imported so local overrides apply.

Configuration Categories:
-------------------------
- **Store Connection**: SQLAlchemy URL of the database holding menu items.

- **Server**: Host and port uvicorn binds to.

- **CORS Settings**: Origins allowed to call the API from a browser. The
  default matches the static site's local dev server.

- **GraphQL**: Whether the in-browser GraphQL IDE is served at /graphql.

Environment Variables:
----------------------
- DATABASE_URL: Store connection URL (default: "sqlite:///./menu.db")
- HOST: Bind address (default: "0.0.0.0")
- PORT: Bind port (default: 4000)
- CORS_ORIGINS: Comma-separated allowed origins (default: "http://localhost:4321")
- GRAPHQL_IDE: Serve the GraphQL IDE (default: "true")
- LOG_LEVEL: See logging_config.py (default: "INFO")

Usage:
------
    from menu_api.config import DATABASE_URL, PORT
"""

import os
from typing import List


# =============================================================================
# Store Connection
# =============================================================================

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./menu.db")


# =============================================================================
# Server
# =============================================================================

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "4000"))


# =============================================================================
# CORS Configuration
# =============================================================================
# Format: comma-separated list of origins, e.g. "https://shop.example,https://admin.shop.example"

_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["http://localhost:4321"]


# =============================================================================
# GraphQL
# =============================================================================

GRAPHQL_PATH: str = "/graphql"
GRAPHQL_IDE_ENABLED: bool = os.getenv("GRAPHQL_IDE", "true").lower() == "true"
