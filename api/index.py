import logging
import os
from pathlib import Path
import sys

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from brew_advisor import __version__  # noqa: E402
from brew_advisor.catalog import DEFAULT_CATALOG  # noqa: E402
from brew_advisor.core import (  # noqa: E402
    INTERNAL_ERROR_MESSAGE,
    RecommendationOrchestrator,
    build_orchestrator,
    http_status_for,
)
from brew_advisor.schema import (  # noqa: E402
    BrewingMachine,
    CoffeeBean,
    RecommendationRequest,
    RecommendationResponse,
)

app = FastAPI(title="brew-advisor API", version=__version__)
logger = logging.getLogger(__name__)
ORCHESTRATOR = build_orchestrator()

raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
allow_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CatalogResponse(BaseModel):
    beans: list[CoffeeBean]
    machines: list[BrewingMachine]


def get_orchestrator() -> RecommendationOrchestrator:
    return ORCHESTRATOR


def _envelope(result: RecommendationResponse) -> JSONResponse:
    return JSONResponse(
        status_code=http_status_for(result),
        content=result.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.get("/api/catalog", response_model=CatalogResponse, response_model_by_alias=True)
def catalog() -> CatalogResponse:
    return CatalogResponse(
        beans=list(DEFAULT_CATALOG.beans),
        machines=list(DEFAULT_CATALOG.machines),
    )


@app.post(
    "/api/recommendations",
    response_model=RecommendationResponse,
    response_model_exclude_none=True,
    responses={400: {"model": RecommendationResponse}, 500: {"model": RecommendationResponse}},
)
async def create_recommendation(
    request: Request,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> JSONResponse:
    try:
        body = RecommendationRequest.model_validate(await request.json())
    except Exception:
        logger.exception("malformed recommendation request")
        return _envelope(RecommendationResponse(success=False, error=INTERNAL_ERROR_MESSAGE))

    # The provider call blocks; keep it off the event loop.
    result = await run_in_threadpool(orchestrator.recommend, body.bean_id, body.machine_id)
    return _envelope(result)
