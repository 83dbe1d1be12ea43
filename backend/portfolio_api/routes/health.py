"""
Portfolio API — Root Greeting and Health Check Routes
======================================================

What:  GET / (plain-text greeting) and GET /health (dependency status).
Why:   The greeting confirms the process is up; the health check tells load
       balancers and monitoring whether the database is reachable.
How:   /health pings the document store and reports the aggregate status.

Status levels:
    - healthy:   Database answered the ping
    - unhealthy: Database unreachable or never configured (requests touching
                 it fail with 500)
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from portfolio_api import __version__
from portfolio_api.database import get_optional_document_store
from portfolio_api.schemas.common import HealthResponse
from portfolio_api.services.store_base import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root() -> str:
    return "Hello World!"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description=(
        "Returns the health status of the backend and its database. "
        "Used by container health checks and load balancers."
    ),
)
async def health_check(
    store: Optional[DocumentStore] = Depends(get_optional_document_store),
) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    if store is None:
        # Startup could not build a client from DB_URI
        reachable = False
    else:
        try:
            reachable = await store.ping()
        except Exception as e:
            logger.warning("Health check: database ping raised: %s", str(e))
            reachable = False

    if not reachable:
        db_status = "disconnected"
        overall = "unhealthy"

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
