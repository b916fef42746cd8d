"""`temporis` command line entrypoint.

Hard contract: on success stdout carries exactly one line (the resolved date or the parsed form).
Unparseable expressions print a readable error to stderr and exit with status 1; invalid options
or configuration exit with status 2.
"""

import logging
from datetime import date, datetime

import typer
from rich.console import Console
from rich.text import Text

from temporis.config.logging import configure_logging
from temporis.config.settings import Settings, load_settings
from temporis.grammar.classifier import classify
from temporis.grammar.errors import DateExpressionError, ParseError
from temporis.grammar.parser import parse_date_with_form
from temporis.grammar.schema import form_to_json

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

app = typer.Typer(
    name="temporis",
    help="Resolve short date expressions (tomorrow, nfri, 2mon, 5d, eoq, 16-Jan-2024) to dates.",
    add_completion=False,
)


def _print_error(message: str) -> None:
    err_console.print(Text.assemble(("Error: ", "bold red"), message), soft_wrap=True)


def _load_settings_or_exit() -> Settings:
    try:
        settings = load_settings()
    except RuntimeError as exc:
        _print_error(str(exc))
        raise typer.Exit(2) from exc

    configure_logging(settings.log_level)
    return settings


def _reference_from(option: datetime | None, settings: Settings) -> date:
    if option is not None:
        return option.date()
    return settings.reference_or_today()


@app.command()
def resolve(
        expression: str = typer.Argument(..., help="Date expression, e.g. 'nfriday' or '5d'"),
        reference: datetime | None = typer.Option(
            None,
            "--reference",
            "-r",
            formats=["%Y-%m-%d"],
            help="Reference date used as 'today' (defaults to TEMPORIS_REFERENCE_DATE, then today)",
        ),
        output_format: str | None = typer.Option(
            None,
            "--format",
            "-f",
            help="strftime format for the output (defaults to TEMPORIS_OUTPUT_FORMAT)",
        ),
) -> None:
    """Resolve EXPRESSION to a calendar date and print it."""

    settings = _load_settings_or_exit()
    reference_date = _reference_from(reference, settings)

    try:
        result = parse_date_with_form(expression, reference=reference_date)
    except DateExpressionError as exc:
        logger.info("unresolved expression=%r error=%s", expression, exc)
        _print_error(str(exc))
        raise typer.Exit(1) from exc

    typer.echo(result.value.strftime(output_format or settings.output_format))


@app.command()
def explain(
        expression: str = typer.Argument(..., help="Date expression to classify"),
) -> None:
    """Print the grammar rule EXPRESSION matches, as JSON, without resolving it."""

    _load_settings_or_exit()

    try:
        form = classify(expression)
    except ParseError as exc:
        logger.info("unclassified expression=%r reason=%s", expression, exc.reason)
        _print_error(str(exc))
        raise typer.Exit(1) from exc

    typer.echo(form_to_json(form))


def main() -> None:
    """Run the `temporis` command line."""

    app()


if __name__ == "__main__":
    main()
