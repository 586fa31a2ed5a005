"""Rank tracking: SERP query, domain filter, CSV sink."""

from .clients import build_search_url, fetch_serp
from .errors import DecodeError, NoResultsError, RankCheckError, TransportError
from .matching import match_results
from .parsing import decode_body, load_search_response
from .pipeline import run_rank_check
from .schemas import (
    OrganicResult,
    RankCheckResult,
    RankRecord,
    RawResponse,
    RequestMetadata,
    SearchRequestParams,
    SearchResponse,
    WriteOutcome,
)
from .sinks import CsvSink, MemorySink, Sink

__all__ = [
    "build_search_url",
    "fetch_serp",
    "decode_body",
    "load_search_response",
    "match_results",
    "run_rank_check",
    "RankCheckError",
    "TransportError",
    "DecodeError",
    "NoResultsError",
    "OrganicResult",
    "RankCheckResult",
    "RankRecord",
    "RawResponse",
    "RequestMetadata",
    "SearchRequestParams",
    "SearchResponse",
    "WriteOutcome",
    "Sink",
    "CsvSink",
    "MemorySink",
]
