"""Application configuration."""
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from rank_checker.tracking.schemas import SearchRequestParams


class Settings(BaseSettings):
    """App settings from env (RANK_CHECKER_*) and .env."""

    api_key: str = Field(default="", validation_alias=AliasChoices("HASDATA_API_KEY", "RANK_CHECKER_API_KEY"))

    # Search request
    location: str = "Austin,Texas,United States"
    query: str = "Coffee"
    filter: int = Field(default=1, ge=0, le=1)
    domain: str = "google.com"
    gl: str = "us"
    hl: str = "en"
    device_type: Literal["desktop", "mobile"] = "desktop"
    searched_domain: str = "wikipedia.org"

    output_path: str = "rank_checker.csv"
    request_timeout: float = Field(default=30.0, gt=0)
    empty_policy: Literal["skip", "header"] = "skip"  # what to do when nothing matches
    log_level: str = "WARNING"

    class Config:
        env_prefix = "RANK_CHECKER_"
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True

    def request_params(self, **overrides) -> SearchRequestParams:
        """Frozen request params from settings; non-None overrides win."""
        values = {
            "location": self.location,
            "query": self.query,
            "filter": self.filter,
            "domain": self.domain,
            "gl": self.gl,
            "hl": self.hl,
            "device_type": self.device_type,
            "searched_domain": self.searched_domain,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SearchRequestParams(**values)
