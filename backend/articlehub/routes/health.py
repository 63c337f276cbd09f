"""
ArticleHub Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings MongoDB through the application's client and reports status.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   MongoDB answered the ping (HTTP 200)
    - unhealthy: No client, or the ping failed / timed out (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Request, Response, status

from articlehub import __version__
from articlehub.database import ping
from articlehub.schemas.article import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module load time, used for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """
    Check that the service can reach its database.

    The ping is a single round-trip `{"ping": 1}` admin command, bounded by
    the client's configured timeout.
    """
    db_status = "connected"
    overall = "healthy"

    client = getattr(request.app.state, "mongo_client", None)
    try:
        if client is None:
            raise RuntimeError("mongo client not initialized")
        await ping(client)
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
