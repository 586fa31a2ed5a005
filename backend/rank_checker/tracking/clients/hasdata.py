"""
HasData Google SERP API client. Reuses a single requests.Session.
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from rank_checker.tracking.errors import TransportError
from rank_checker.tracking.schemas import RawResponse, SearchRequestParams

logger = logging.getLogger(__name__)

HASDATA_SERP_URL = "https://api.hasdata.com/scrape/google"
API_KEY_HEADER = "x-api-key"

_session: Optional[requests.Session] = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def _encode(value: str) -> str:
    # RFC 3986: only A-Z a-z 0-9 - _ . ~ stay literal
    return quote(value, safe="")


def build_search_url(params: SearchRequestParams) -> str:
    """Build the SERP query URL, encoding each parameter on its own."""
    return (
        f"{HASDATA_SERP_URL}"
        f"?location={_encode(params.location)}"
        f"&q={_encode(params.query)}"
        f"&filter={int(params.filter)}"
        f"&domain={_encode(params.domain)}"
        f"&gl={_encode(params.gl)}"
        f"&hl={_encode(params.hl)}"
        f"&deviceType={_encode(params.device_type)}"
    )


def fetch_serp(url: str, api_key: str, timeout: float = 30.0) -> RawResponse:
    """
    GET the SERP URL and return the raw body.

    The status code is passed through, not checked: whatever body the API sent
    goes on to the parser. Network failures raise TransportError.
    """
    if not api_key:
        raise ValueError("HASDATA_API_KEY environment variable is required")

    headers = {API_KEY_HEADER: api_key}
    try:
        response = _get_session().get(url, headers=headers, timeout=timeout)
    except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
        raise TransportError(f"SERP request failed: {e}", retryable=True) from e
    except requests.exceptions.RequestException as e:
        raise TransportError(f"SERP request failed: {e}", retryable=False) from e

    if not response.ok:
        logger.warning("SERP API answered HTTP %s for %s", response.status_code, url)
    else:
        logger.info("SERP API answered HTTP %s (%d bytes)", response.status_code, len(response.content))
    return RawResponse(status_code=response.status_code, text=response.text)
