from datetime import datetime

from rank_checker.tracking.schemas import RankRecord, SearchRequestParams, SearchResponse

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def link_matches(link: str | None, searched_domain: str) -> bool:
    """Plain substring test against the whole URL, not just the host."""
    return bool(link) and searched_domain in link


def match_results(
    response: SearchResponse,
    params: SearchRequestParams,
    captured_at: datetime,
) -> list[RankRecord]:
    """Keep organic results linking to the searched domain, in SERP order."""
    date = captured_at.strftime(DATE_FORMAT)
    meta = response.request_metadata
    records = []
    for item in response.organic_results:
        if not link_matches(item.link, params.searched_domain):
            continue
        records.append(
            RankRecord(
                position=item.position,
                domain=params.searched_domain,
                keyword=params.query,
                link=item.link,
                title=item.title,
                displayed_link=item.displayed_link,
                source=item.source,
                snippet=item.snippet,
                google_url=meta.google_url,
                google_html_file=meta.google_html_file,
                date=date,
            )
        )
    return records
