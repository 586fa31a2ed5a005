"""
Decode the SERP API body and turn it into typed models.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from rank_checker.tracking.errors import DecodeError, NoResultsError
from rank_checker.tracking.schemas import SearchResponse

logger = logging.getLogger(__name__)


def decode_body(body: str) -> dict[str, Any]:
    """Decode JSON; anything but a non-empty object is a DecodeError."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        logger.debug("Body is not JSON: %s", e)
        raise DecodeError() from e
    if not isinstance(data, dict) or not data:
        raise DecodeError()
    return data


def load_search_response(data: dict[str, Any]) -> SearchResponse:
    """Validate the decoded tree. Requires a non-empty organicResults list."""
    organic = data.get("organicResults")
    if not isinstance(organic, list) or not organic:
        raise NoResultsError()

    tree = dict(data)
    if not isinstance(tree.get("requestMetadata"), dict):
        tree.pop("requestMetadata", None)
    try:
        return SearchResponse.model_validate(tree)
    except ValidationError as e:
        raise DecodeError(f"Malformed SERP response: {e.error_count()} invalid field(s); {e.errors()[0]['msg']}") from e
