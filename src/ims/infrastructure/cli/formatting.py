"""Plain-text rendering of ledger results for the terminal."""

from __future__ import annotations

import click

from ims.domain.model.item import Item
from ims.domain.model.reports import FinancialOverview, TopSeller
from ims.domain.model.sale import SaleRecord


def echo_items(items: list[Item]) -> None:
    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Qty':>6} {'Price':>10} {'Value':>12}")
    click.echo("-" * 58)
    for item in items:
        click.echo(
            f"{item.id:<6} {item.name:<20} {item.quantity:>6} "
            f"{item.price:>10.2f} {item.stock_value:>12.2f}"
        )


def echo_sale(record: SaleRecord) -> None:
    click.echo(f"Sale #{record.sequence}  ({record.timestamp:%Y-%m-%d %H:%M:%S UTC})")
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in record.lines:
        click.echo(
            f"  {line.item_name:<20} {line.quantity:>5} "
            f"{line.unit_price:>10.2f} {line.line_total:>10.2f}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Sale Total':<27} {record.total_amount:>20.2f}")


def echo_overview(overview: FinancialOverview) -> None:
    click.echo(f"Total sales:     {overview.total_sales:>12.2f}")
    click.echo(f"Inventory value: {overview.inventory_value:>12.2f}")


def echo_top_sellers(sellers: list[TopSeller]) -> None:
    if not sellers:
        click.echo("No sales recorded.")
        return

    click.echo(f"{'#':<4} {'Name':<20} {'Sold':>8}")
    click.echo("-" * 34)
    for rank, seller in enumerate(sellers, start=1):
        click.echo(f"{rank:<4} {seller.name:<20} {seller.quantity:>8}")


def echo_result(operation: str, result: object) -> None:
    """Render whatever a dispatched operation returned."""
    if operation == "add_item":
        click.echo(f"Item #{result} added")
    elif operation in ("update_item", "remove_item"):
        click.echo("ok")
    elif operation == "get_item_details":
        if result is None:
            click.echo("Item not found.")
        else:
            echo_items([result])  # type: ignore[list-item]
    elif operation in ("get_inventory", "search_item_by_name", "reorder_suggestions"):
        echo_items(result)  # type: ignore[arg-type]
    elif operation in ("record_sale", "get_sale"):
        echo_sale(result)  # type: ignore[arg-type]
    elif operation == "get_sales":
        if not result:
            click.echo("No sales recorded.")
        for record in result:  # type: ignore[attr-defined]
            echo_sale(record)
    elif operation == "financial_overview":
        echo_overview(result)  # type: ignore[arg-type]
    elif operation == "get_top_selling_items":
        echo_top_sellers(result)  # type: ignore[arg-type]
    else:
        click.echo(repr(result))
