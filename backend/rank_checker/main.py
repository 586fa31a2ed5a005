"""
Rank Checker API: run a rank check over HTTP.
"""

from typing import Literal, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from rank_checker import __version__
from rank_checker.config import Settings
from rank_checker.tracking import (
    CsvSink,
    DecodeError,
    MemorySink,
    NoResultsError,
    RankCheckResult,
    TransportError,
    run_rank_check,
)

app = FastAPI(title="Rank Checker", version=__version__)


class RankCheckRequest(BaseModel):
    """Per-request overrides of the configured search params. Omitted fields use Settings."""

    query: Optional[str] = None
    location: Optional[str] = None
    filter: Optional[int] = Field(default=None, ge=0, le=1)
    domain: Optional[str] = None
    gl: Optional[str] = None
    hl: Optional[str] = None
    device_type: Optional[Literal["desktop", "mobile"]] = None
    searched_domain: Optional[str] = None
    dry_run: bool = Field(default=False, description="Keep rows in memory instead of appending to the CSV file")


def get_settings() -> Settings:
    return Settings()


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/v1/rank/check", response_model=RankCheckResult)
def rank_check(body: Optional[RankCheckRequest] = None, settings: Settings = Depends(get_settings)):
    """
    Run one rank check: SERP query → domain filter → append matches.

    Returns: output (CSV path, or "memory" for dry runs), outcome, matches.
    """
    body = body or RankCheckRequest()
    params = settings.request_params(**body.model_dump(exclude={"dry_run"}))
    if body.dry_run:
        sink = MemorySink(empty_policy=settings.empty_policy)
    else:
        sink = CsvSink(settings.output_path, empty_policy=settings.empty_policy)

    try:
        return run_rank_check(params, sink, api_key=settings.api_key, timeout=settings.request_timeout)
    except TransportError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except (DecodeError, NoResultsError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=503, detail=str(e))
