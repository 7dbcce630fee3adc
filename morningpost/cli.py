"""
Command-line interface for morningpost
"""

import click

from .aggregator import write_summaries
from .config import HN_API_BASE_URL, REQUEST_TIMEOUT
from .exceptions import AggregateError
from .logging_config import setup_logging, get_logger
from .models import ClientConfig
from .summarizers import HNClient


@click.command()
@click.option(
    "--base-url",
    envvar="MORNINGPOST_HN_BASE_URL",
    default=HN_API_BASE_URL,
    show_default=True,
    help="Hacker News API base URL",
)
@click.option(
    "--timeout",
    envvar="MORNINGPOST_TIMEOUT",
    type=click.FloatRange(min=0, min_open=True),
    default=REQUEST_TIMEOUT,
    show_default=True,
    help="HTTP request timeout in seconds",
)
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of news sources to fetch concurrently",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default="-",
    help="Output file (default: stdout)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set logging level (default: WARNING)",
)
@click.option(
    "--log-file",
    type=click.Path(),
    default=None,
    help="Also log to this file",
)
@click.pass_context
def main(ctx, base_url: str, timeout: float, workers: int, output: str, log_level: str, log_file: str):
    """Print the newest Hacker News stories."""
    setup_logging(level=log_level, log_file=log_file)
    logger = get_logger(__name__)

    config = ClientConfig(base_url=base_url, timeout=timeout)
    logger.info(f"Starting morningpost - base URL: {config.base_url}, timeout: {config.timeout}s, workers: {workers}")

    sources = [HNClient(config)]
    output_file = click.open_file(output, "w", encoding="utf-8")
    try:
        write_summaries(output_file, *sources, max_workers=workers)
    except AggregateError as e:
        logger.debug(f"{len(e)} news source(s) failed")
        click.echo(str(e), err=True)
        ctx.exit(1)
    finally:
        if output != "-":
            output_file.close()
        for source in sources:
            source.close()

    logger.info("morningpost completed successfully")


if __name__ == "__main__":
    main()
