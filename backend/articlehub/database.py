"""
ArticleHub Backend — MongoDB Client Management
================================================

What:  Motor client construction, the per-request collection dependency,
       and lifecycle helpers.
How:   The lifespan handler in main.py builds one AsyncIOMotorClient and
       stores it on `app.state.mongo_client`. Route handlers receive the
       article collection through `get_articles_collection`, a FastAPI
       dependency that reads it back from the application state.
Who:   Used by main.py (lifecycle), routes (dependency) and health checks.
When:  Client is created at startup and closed at shutdown; the collection
       handle is resolved per request.

There is no module-level client. Services never import this module; they
receive the collection they operate on as an argument, which lets tests pass
a mock collection directly or through `app.dependency_overrides`.

Timeouts:
    Every operation is bounded by the client-wide `timeoutMS` option
    (DB_TIMEOUT_SECONDS, default 10s), covering server selection, the query
    itself and cursor iteration.
"""

import logging

from fastapi import Request
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
)

from articlehub.config import Settings
from articlehub.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def create_client(config: Settings) -> AsyncIOMotorClient:
    """
    Build the Motor client from configuration.

    The client connects lazily; no network I/O happens here. Connection
    problems surface on the first operation (or the health check ping).
    """
    # Empty DB_URL falls back to the driver default (localhost:27017)
    client = AsyncIOMotorClient(
        config.db_url or None,
        timeoutMS=config.db_timeout_ms,
        serverSelectionTimeoutMS=config.db_timeout_ms,
    )
    logger.info(
        "MongoDB client created (database=%s, collection=%s, timeout=%ds)",
        config.db_name,
        config.db_collection,
        config.db_timeout_seconds,
    )
    return client


def articles_collection(
    client: AsyncIOMotorClient, config: Settings
) -> AsyncIOMotorCollection:
    """Resolve the configured article collection from a client."""
    return client[config.db_name][config.db_collection]


# ── Request Dependency ────────────────────────────────────────────────────
def get_articles_collection(request: Request) -> AsyncIOMotorCollection:
    """
    FastAPI dependency that provides the article collection for a request.

    Example usage in a route:
        @router.get("/articles")
        async def list_articles(
            collection: AsyncIOMotorCollection = Depends(get_articles_collection),
        ):
            ...

    Raises:
        DatabaseError: The application was started without a client
                       (e.g. lifespan did not run).
    """
    client = getattr(request.app.state, "mongo_client", None)
    if client is None:
        raise DatabaseError(
            message="Database is not available. Please try again later.",
            context={"reason": "mongo client not initialized"},
        )
    return articles_collection(client, request.app.state.settings)


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def ping(client: AsyncIOMotorClient) -> None:
    """
    What:  Round-trips a `ping` command to the server.
    When:  Health checks.
    Raises whatever the driver raises; callers decide how to report it.
    """
    await client.admin.command("ping")


def close_client(client: AsyncIOMotorClient) -> None:
    """
    What:  Closes all pooled connections held by the client.
    When:  Called during application shutdown (lifespan handler).
    """
    client.close()
    logger.info("MongoDB client closed")
