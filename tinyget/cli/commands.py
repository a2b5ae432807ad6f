"""CLI command implementation for TinyGet."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from tinyget.core.report import format_header, format_outcome, format_summary
from tinyget.models.config import Config
from tinyget.services.batch_dispatcher import BatchDispatcher
from tinyget.services.http_client import ClientSetupError
from tinyget.utils.logger import configure_logging
from tinyget.utils.validators import is_valid_url

if TYPE_CHECKING:
    from tinyget.models.outcome import RequestOutcome


def _get_config() -> Config:
    """Load configuration from the environment and .env file."""
    try:
        return Config()
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc


def _validate_url(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not is_valid_url(value):
        raise click.BadParameter(f"'{value}' is not a valid URL.")
    return value


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


def _echo_outcome(outcome: RequestOutcome) -> None:
    _echo_lines(format_outcome(outcome))


@click.command(name="tinyget")
@click.argument("url", callback=_validate_url)
@click.option(
    "-x",
    "--threads",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of requests to make in parallel",
)
@click.option("-t", "--trace", is_flag=True, help="Log the response body to console")
def tinyget(url: str, threads: int, trace: bool) -> None:
    """TinyGet - A simple HTTP load testing tool.

    Makes THREADS simultaneous GET requests to URL and reports the status
    and timing of each, followed by the total and average time.
    """
    config = _get_config()
    configure_logging(config.log_level)

    _echo_lines(format_header(url, threads, trace))

    dispatcher = BatchDispatcher(config)
    try:
        result = dispatcher.run(
            url,
            parallel_count=threads,
            log_response_body=trace,
            on_outcome=_echo_outcome,
        )
    except ClientSetupError as exc:
        raise click.ClickException(str(exc)) from exc

    _echo_lines(format_summary(result))
