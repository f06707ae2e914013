"""
Application factory for the menu API.

All collaborators are wired explicitly here: engine and session factory,
repository, service, then the GraphQL router that receives the service.
"""

import contextlib
import logging
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker

from . import config
from .db import create_session_factory, create_store_engine, init_db
from .exceptions import StoreUnavailableError
from .repository import MenuItemRepository
from .routes import create_graphql_router
from .services.menu import MenuService

logger = logging.getLogger(__name__)


def create_app(
    database_url: Optional[str] = None,
    session_factory: Optional[sessionmaker] = None,
    graphql_ide: Optional[bool] = None,
) -> FastAPI:
    """
    Create a FastAPI application serving the menu GraphQL API.

    Args:
        database_url: Store URL; defaults to config.DATABASE_URL.
                      Ignored when session_factory is given.
        session_factory: Pre-built SQLAlchemy sessionmaker (tests pass an
                         in-memory SQLite one).
        graphql_ide: Serve the GraphQL IDE; defaults to config.GRAPHQL_IDE_ENABLED.

    Returns:
        Configured FastAPI application
    """
    if session_factory is None:
        session_factory = create_session_factory(create_store_engine(database_url))
    engine = session_factory.kw["bind"]

    if graphql_ide is None:
        graphql_ide = config.GRAPHQL_IDE_ENABLED

    repository = MenuItemRepository(session_factory)
    service = MenuService(repository)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(
        title="Menu API",
        description="GraphQL API for managing the beverage shop menu",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.repository = repository
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        create_graphql_router(service, graphql_ide=graphql_ide),
        prefix=config.GRAPHQL_PATH,
    )

    @app.get("/health")
    def health_check(response: Response):
        try:
            repository.ping()
        except StoreUnavailableError:
            response.status_code = 503
            return {"status": "unhealthy", "store": "unavailable"}
        return {"status": "healthy", "store": "ok"}

    logger.info("Application created; GraphQL at %s", config.GRAPHQL_PATH)

    return app
