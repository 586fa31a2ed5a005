"""
Rank tracking: Pydantic schemas for request params, the SERP response, and output rows.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ----- Request -----


class SearchRequestParams(BaseModel):
    """Parameters of one SERP query. Fixed for the whole run."""

    model_config = ConfigDict(frozen=True)

    location: str = Field(default="Austin,Texas,United States", description="Free-text search location")
    query: str = Field(default="Coffee", description="Keyword to search for")
    filter: int = Field(default=1, description="Google duplicate-content filter flag (0 or 1)")
    domain: str = Field(default="google.com", description="Google domain to query")
    gl: str = Field(default="us", description="Country (geo locale) code")
    hl: str = Field(default="en", description="Interface language code")
    device_type: str = Field(default="desktop", description="desktop | mobile")
    searched_domain: str = Field(default="wikipedia.org", description="Domain whose rank is tracked")


# ----- SERP API response -----


class _WireModel(BaseModel):
    """Models read from the API's camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrganicResult(_WireModel):
    """Single organic (non-paid) search result."""

    position: Optional[int] = None
    link: Optional[str] = None
    title: Optional[str] = None
    displayed_link: Optional[str] = None
    source: Optional[str] = None
    snippet: Optional[str] = None


class RequestMetadata(_WireModel):
    google_url: Optional[str] = None
    google_html_file: Optional[str] = None


class SearchResponse(_WireModel):
    """Typed view of the parts of the SERP response we use."""

    organic_results: list[OrganicResult] = Field(..., min_length=1)
    request_metadata: RequestMetadata = Field(default_factory=RequestMetadata)


class RawResponse(BaseModel):
    status_code: int
    text: str


# ----- Output -----


class RankRecord(_WireModel):
    """
    One CSV row: a result whose link contains the searched domain.

    Field order is the column order of the CSV file.
    """

    position: Optional[int] = None
    domain: str = Field(..., description="Searched (target) domain, not the result's own host")
    keyword: str
    link: str
    title: Optional[str] = None
    displayed_link: Optional[str] = None
    source: Optional[str] = None
    snippet: Optional[str] = None
    google_url: Optional[str] = None
    google_html_file: Optional[str] = None
    date: str = Field(..., description="Capture time, YYYY-MM-DD HH:MM:SS")

    @classmethod
    def columns(cls) -> list[str]:
        return [to_camel(name) for name in cls.model_fields]

    def row(self) -> list[str]:
        """Values in column order; None becomes an empty field."""
        data = self.model_dump(by_alias=True)
        return ["" if data[col] is None else str(data[col]) for col in self.columns()]


class WriteOutcome(str, Enum):
    NO_ROWS = "no_rows"
    HEADER_ONLY = "header_only"
    HEADER_PLUS_ROWS = "header_plus_rows"
    ROWS_ONLY = "rows_only"


class RankCheckResult(BaseModel):
    """What a single run produced."""

    output: str = Field(..., description="Where rows went (file path or sink name)")
    matches: list[RankRecord] = Field(default_factory=list)
    outcome: WriteOutcome
