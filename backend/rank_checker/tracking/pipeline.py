"""
Rank check pipeline: build URL → fetch → decode → filter → write to sink.

Single entry point: run_rank_check(params, sink, api_key=..., timeout=...).
"""

import logging
from datetime import datetime
from typing import Optional

from rank_checker.tracking.clients import build_search_url, fetch_serp
from rank_checker.tracking.matching import match_results
from rank_checker.tracking.parsing import decode_body, load_search_response
from rank_checker.tracking.schemas import RankCheckResult, SearchRequestParams
from rank_checker.tracking.sinks import Sink

logger = logging.getLogger(__name__)


def run_rank_check(
    params: SearchRequestParams,
    sink: Sink,
    *,
    api_key: str,
    timeout: float = 30.0,
    now: Optional[datetime] = None,
) -> RankCheckResult:
    """
    Run one rank check and append the matches to the sink.

    Args:
        params: Query, location and the domain to look for.
        sink: Where matching rows go (CsvSink in production).
        api_key: HasData API key.
        timeout: Seconds to wait for the SERP API.
        now: Capture time stamped on every row (defaults to local wall-clock time).

    Returns:
        RankCheckResult with the matched records and what the sink did.

    Raises:
        TransportError, DecodeError, NoResultsError: the run stops, nothing is written.
    """
    url = build_search_url(params)
    logger.info("Checking rank of %s for %r in %s", params.searched_domain, params.query, params.location)

    raw = fetch_serp(url, api_key, timeout=timeout)
    data = decode_body(raw.text)
    response = load_search_response(data)

    matches = match_results(response, params, now or datetime.now())
    logger.info(
        "%d of %d organic results link to %s",
        len(matches),
        len(response.organic_results),
        params.searched_domain,
    )

    outcome = sink.write(matches)
    return RankCheckResult(output=sink.describe(), matches=matches, outcome=outcome)
