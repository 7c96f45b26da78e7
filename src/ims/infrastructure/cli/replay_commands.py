"""CLI command that replays a script of ledger operations.

The ledger lives in memory only, so each ``replay`` run starts from an
empty inventory.  A script is JSON lines, one call per line::

    {"op": "add_item", "args": {"name": "Widget", "quantity": 10, "price": 2.5}}
    {"op": "record_sale", "args": {"items": [[1, 3]]}}

Blank lines and lines starting with ``#`` are skipped.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any

import click

from ims.application.dispatcher import OperationDispatcher
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import (
    DEFAULT_REORDER_THRESHOLD,
    DEFAULT_TOP_N,
    build_dispatcher,
)
from ims.infrastructure.cli.formatting import (
    echo_items,
    echo_overview,
    echo_result,
    echo_top_sellers,
)

logger = logging.getLogger(__name__)


def _parse_line(raw: str, line_no: int) -> tuple[str, dict[str, Any]]:
    """Parse one script line into (operation, kwargs)."""
    try:
        call = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Line {line_no}: invalid JSON ({exc.msg})")

    if not isinstance(call, dict) or "op" not in call:
        raise click.BadParameter(f"Line {line_no}: expected an object with an 'op' key")

    args = call.get("args", {})
    if not isinstance(args, dict):
        raise click.BadParameter(f"Line {line_no}: 'args' must be an object")
    return call["op"], args


def _echo_report(dispatcher: OperationDispatcher, threshold: int, top: int) -> None:
    click.echo()
    click.echo("== Inventory")
    echo_items(dispatcher.dispatch("get_inventory"))
    click.echo()
    click.echo("== Financial overview")
    echo_overview(dispatcher.dispatch("financial_overview"))
    click.echo()
    click.echo(f"== Reorder suggestions (below {threshold})")
    echo_items(dispatcher.dispatch("reorder_suggestions", threshold=threshold))
    click.echo()
    click.echo(f"== Top {top} sellers")
    echo_top_sellers(dispatcher.dispatch("get_top_selling_items", n=top))


@click.command("replay")
@click.argument("script", type=click.File("r"))
@click.option("--strict", is_flag=True, default=False, help="Stop at the first rejected call.")
@click.option("--report", is_flag=True, default=False, help="Print a summary report at the end.")
@click.option(
    "--threshold",
    type=int,
    default=DEFAULT_REORDER_THRESHOLD,
    show_default=True,
    envvar="IMS_REORDER_THRESHOLD",
    help="Reorder threshold used by --report.",
)
@click.option(
    "--top",
    type=int,
    default=DEFAULT_TOP_N,
    show_default=True,
    envvar="IMS_TOP_N",
    help="Number of top sellers shown by --report.",
)
def replay(script: IO[str], strict: bool, report: bool, threshold: int, top: int) -> None:
    """Run a JSON-lines SCRIPT of operations against a fresh ledger."""
    dispatcher = build_dispatcher()
    rejected = 0

    for line_no, raw in enumerate(script, start=1):
        raw = raw.strip()
        if not raw or raw.startswith("#"):
            continue

        operation, args = _parse_line(raw, line_no)
        click.echo(f"> {operation}")
        try:
            result = dispatcher.dispatch(operation, **args)
        except DomainException as exc:
            if strict:
                raise click.ClickException(f"Line {line_no}: {exc}")
            rejected += 1
            click.echo(f"error: {exc}")
            continue
        echo_result(operation, result)

    if rejected:
        logger.warning("%d call(s) rejected", rejected)

    if report:
        _echo_report(dispatcher, threshold, top)
