"""Command-line entry point: ``rfcs list`` and ``rfcs get``."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .config import get_settings
from .core.errors import RFCSError, handle_cli_error
from .dependencies import close_fetcher, get_content_repository, get_rfc_repository
from .index.models import sort_by_publication_date
from .index.selectors import QuerySelector, RFCCategory, RFCStream

logger = logging.getLogger("rfcs.cli")

DEFAULT_TEMPLATE = "{document_id} {title}"


def _fail(exc: Exception) -> click.ClickException:
    return click.ClickException(handle_cli_error(exc))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: RFCS_LOG_LEVEL or WARNING)",
)
@click.pass_context
def app(ctx: click.Context, log_level: Optional[str]) -> None:
    """Query the RFC index and fetch RFC documents."""
    ctx.call_on_close(close_fetcher)
    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command("list")
@click.option("--exclude-obsolete", is_flag=True, help="Exclude obsolete RFCs")
@click.option("--obsoleted-by", type=int, default=0, help="List RFCs obsoleted by the specified RFC")
@click.option("--obsolete", type=int, default=0, help="List RFCs obsoleting the specified RFC")
@click.option("--updated-by", type=int, default=0, help="List RFCs updated by the specified RFC")
@click.option("--update", type=int, default=0, help="List RFCs updating the specified RFC")
@click.option("--std", type=int, default=0, help="List RFCs labeled with the specified STD")
@click.option("--bcp", type=int, default=0, help="List RFCs labeled with the specified BCP")
@click.option("--fyi", type=int, default=0, help="List RFCs labeled with the specified FYI")
@click.option(
    "--category",
    default=None,
    help=f"List RFCs with the specified category ({', '.join(c.value for c in RFCCategory)})",
)
@click.option(
    "--stream",
    default=None,
    help=f"List RFCs in the specified document stream ({', '.join(s.value for s in RFCStream)})",
)
@click.option("--sort-by-date", is_flag=True, help="Sort by publication date")
@click.option(
    "--format",
    "template",
    default=DEFAULT_TEMPLATE,
    show_default=True,
    help="Output template; fields: number, document_id, title, publication_date",
)
def list_rfcs(
    exclude_obsolete: bool,
    obsoleted_by: int,
    obsolete: int,
    updated_by: int,
    update: int,
    std: int,
    bcp: int,
    fyi: int,
    category: Optional[str],
    stream: Optional[str],
    sort_by_date: bool,
    template: str,
) -> None:
    """List RFCs matching one selection option."""
    try:
        selector = QuerySelector.from_options(
            exclude_obsolete=exclude_obsolete,
            obsoleted_by=obsoleted_by,
            obsolete=obsolete,
            updated_by=updated_by,
            update=update,
            std=std,
            bcp=bcp,
            fyi=fyi,
            category=category,
            stream=stream,
        )
        rfcs = get_rfc_repository().find(selector)
    except RFCSError as exc:
        raise _fail(exc) from exc

    if sort_by_date:
        rfcs = sort_by_publication_date(rfcs)

    for rfc in rfcs:
        try:
            line = template.format(**rfc.as_template_fields())
        except (AttributeError, KeyError, IndexError, ValueError) as exc:
            raise click.BadParameter(f"invalid template: {exc}", param_hint="--format") from exc
        click.echo(line)


@app.command("get")
@click.argument("number", type=int)
def get_rfc(number: int) -> None:
    """Print the text of RFC NUMBER."""
    try:
        content = get_content_repository().find_by_number(number)
    except RFCSError as exc:
        raise _fail(exc) from exc

    click.echo(content.decode("utf-8", errors="replace"))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
