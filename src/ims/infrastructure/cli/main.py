import logging

import click

from ims.infrastructure.bootstrap import build_dispatcher
from ims.infrastructure.cli.replay_commands import replay


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every call.")
def cli(verbose: bool) -> None:
    """IMS — Inventory & Sales Ledger"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("operations")
def operations() -> None:
    """List the operations a replay script may call."""
    for name in build_dispatcher().operations:
        click.echo(name)


# Register subcommands
cli.add_command(replay)
