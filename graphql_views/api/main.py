"""GraphQL Views API.

Serves view definitions and the GraphQL field definitions derived from them:
- View definitions (base table, displays, cache metadata)
- Derived fields, one per GraphQL display of an entity-backed view
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from graphql_views import __version__, config
from graphql_views.api.routes import fields, views
from graphql_views.entities.registry import get_entity_type_registry
from graphql_views.interfaces.registry import get_interface_registry
from graphql_views.views.storage import get_view_storage

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: load all definitions so broken files fail fast
    logger.info("Loading entity type definitions...")
    logger.info(f"Loaded {get_entity_type_registry().count()} entity types")

    logger.info("Loading GraphQL interfaces...")
    logger.info(f"Loaded {get_interface_registry().count()} interfaces")

    logger.info("Loading view definitions...")
    logger.info(f"Loaded {get_view_storage().count()} views")

    logger.info("GraphQL Views API ready")
    yield
    logger.info("Shutting down GraphQL Views API")


app = FastAPI(
    title="GraphQL Views API",
    description="Derives GraphQL field definitions from configured views.",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(views.router, prefix="/v1")
app.include_router(fields.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "GraphQL Views API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "views": "/v1/views",
            "fields": "/v1/fields",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "entity_types_loaded": get_entity_type_registry().count(),
        "interfaces_loaded": get_interface_registry().count(),
        "views_loaded": get_view_storage().count(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "graphql_views.api.main:app",
        host="0.0.0.0",
        port=8002,
        reload=True,
    )
