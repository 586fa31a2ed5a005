"""
Command line entry point: one rank check, appended to the CSV file.

  rank-checker --query "Coffee" --searched-domain wikipedia.org

Flags that are not given fall back to Settings (RANK_CHECKER_* env vars / .env).
Requires HASDATA_API_KEY in env unless --api-key is passed.
"""

import logging
import sys

import click

from rank_checker import __version__
from rank_checker.config import Settings
from rank_checker.tracking import CsvSink, RankCheckError, WriteOutcome, run_rank_check


@click.command()
@click.version_option(version=__version__)
@click.option("--location", help="Search location, e.g. 'Austin,Texas,United States'.")
@click.option("--query", "-q", help="Keyword to check.")
@click.option("--filter", "filter_", type=click.IntRange(0, 1), help="Google duplicate filter (0 or 1).")
@click.option("--domain", help="Google domain to query, e.g. google.com.")
@click.option("--gl", help="Country code.")
@click.option("--hl", help="Language code.")
@click.option("--device-type", type=click.Choice(["desktop", "mobile"]), help="Device to emulate.")
@click.option("--searched-domain", "-d", help="Domain whose rank is tracked.")
@click.option("--api-key", help="HasData API key (overrides HASDATA_API_KEY).")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="CSV file to append to.")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), help="Request timeout in seconds.")
@click.option(
    "--on-empty",
    type=click.Choice(["skip", "header"]),
    help="When nothing matches: write nothing, or write the header to a new file.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each stage.")
def main(
    location,
    query,
    filter_,
    domain,
    gl,
    hl,
    device_type,
    searched_domain,
    api_key,
    output,
    timeout,
    on_empty,
    verbose: bool,
) -> None:
    """Check where a domain ranks on Google for a keyword and append the rows to a CSV file."""
    try:
        settings = Settings()
        logging.basicConfig(level=logging.INFO if verbose else settings.log_level.upper())

        params = settings.request_params(
            location=location,
            query=query,
            filter=filter_,
            domain=domain,
            gl=gl,
            hl=hl,
            device_type=device_type,
            searched_domain=searched_domain,
        )
        sink = CsvSink(output or settings.output_path, empty_policy=on_empty or settings.empty_policy)
        result = run_rank_check(
            params,
            sink,
            api_key=api_key or settings.api_key,
            timeout=timeout or settings.request_timeout,
        )
    except (RankCheckError, ValueError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    if result.outcome == WriteOutcome.NO_ROWS:
        click.echo(f"No results matched {params.searched_domain}; nothing written to {result.output}")
    elif result.outcome == WriteOutcome.HEADER_ONLY:
        click.echo(f"No results matched {params.searched_domain}; header written to {result.output}")
    else:
        click.echo(f"Data saved to CSV file: {result.output}")


if __name__ == "__main__":
    main()
