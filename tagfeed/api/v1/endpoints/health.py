"""Health check endpoints: liveness and search-backend readiness."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tagfeed.api.v1.dependencies import get_search_engine
from tagfeed.infrastructure.search import SolrSearchEngine
from tagfeed.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Search backend unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    search_engine: Annotated[SolrSearchEngine, Depends(get_search_engine)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 if the search backend answers its ping; 503 otherwise."""
    if await search_engine.ping():
        return ReadinessResponse()
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(
            message="Search backend did not answer ping",
        ).model_dump(),
    )
