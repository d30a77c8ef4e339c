"""CLI commands for inventory management."""

from __future__ import annotations

import click

from shoestore.application.set_inventory import SetInventoryHandler
from shoestore.application.show_inventory import ShowInventoryHandler
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import DomainException
from shoestore.infrastructure.bootstrap import catalog_repository, inventory_ledger
from shoestore.infrastructure.cli.common import domain_error


@click.command("set")
@click.option("--model", "model_id", required=True, type=int, help="Shoe model ID.")
@click.option("--size", required=True, help="Shoe size, e.g. 42 or 9.5.")
@click.option("--quantity", required=True, type=int, help="Quantity on hand.")
@click.pass_obj
def inventory_set(ctx: RequestContext, model_id: int, size: str, quantity: int) -> None:
    """Set inventory level for a model in one size (admin)."""
    handler = SetInventoryHandler(
        ledger=inventory_ledger(),
        catalog_repo=catalog_repository(),
    )

    try:
        line = handler.handle(ctx, product_model_id=model_id, size=size, quantity=quantity)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(
        f"Inventory for model {line.product_model_id} size {line.size} set to {line.total} "
        f"({line.reserved} reserved)"
    )


@click.command("show")
@click.option("--model", "model_id", type=int, default=None, help="Only this shoe model.")
@click.option("--available", "available_only", is_flag=True, default=False, help="Only sizes that can be ordered.")
def inventory_show(model_id: int | None, available_only: bool) -> None:
    """Show current inventory levels."""
    handler = ShowInventoryHandler(ledger=inventory_ledger())
    lines = handler.handle(product_model_id=model_id, available_only=available_only)

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Model':<8} {'Size':<6} {'Total':>8} {'Reserved':>10} {'Available':>10}")
    click.echo("-" * 46)
    for line in lines:
        click.echo(
            f"{line.product_model_id:<8} {line.size:<6} {line.total:>8} {line.reserved:>10} {line.available:>10}"
        )
