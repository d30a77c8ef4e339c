"""CLI commands for catalog and address provisioning."""

from __future__ import annotations

import click

from shoestore.application.add_address import AddAddressHandler
from shoestore.application.manage_catalog import (
    AddProductModelHandler,
    UpdateProductModelHandler,
)
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import DomainException
from shoestore.infrastructure.bootstrap import address_repository, catalog_repository
from shoestore.infrastructure.cli.common import domain_error


@click.command("add")
@click.option("--name", required=True, help="Model name.")
@click.option("--price", required=True, help="Price (e.g. 129.90).")
@click.option("--inactive", is_flag=True, default=False, help="Create the model switched off.")
@click.pass_obj
def catalog_add(ctx: RequestContext, name: str, price: str, inactive: bool) -> None:
    """Add a shoe model to the catalog (admin)."""
    handler = AddProductModelHandler(catalog_repo=catalog_repository())

    try:
        model = handler.handle(ctx, name=name, price=price, is_active=not inactive)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Model #{model.id} '{model.name}' added at {model.price}")


@click.command("update")
@click.option("--id", "model_id", required=True, type=int, help="Model ID.")
@click.option("--price", default=None, help="New price (e.g. 99.90).")
@click.option("--active/--inactive", "is_active", default=None, help="Switch the model on or off.")
@click.pass_obj
def catalog_update(ctx: RequestContext, model_id: int, price: str | None, is_active: bool | None) -> None:
    """Change a model's price or availability (admin)."""
    handler = UpdateProductModelHandler(catalog_repo=catalog_repository())

    try:
        model = handler.handle(ctx, model_id, new_price=price, is_active=is_active)
    except DomainException as exc:
        raise domain_error(exc)

    state = "active" if model.is_orderable else "inactive"
    click.echo(f"Model #{model.id} now {model.price} ({state})")


@click.command("list")
def catalog_list() -> None:
    """List all shoe models in the catalog."""
    models = catalog_repository().list_all()

    if not models:
        click.echo("No models found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Price':>10} {'Active':>7}")
    click.echo("-" * 50)
    for m in models:
        click.echo(f"{m.id:<6} {m.name:<24} {str(m.price):>10} {'yes' if m.is_orderable else 'no':>7}")


@click.command("add")
@click.option("--street", required=True)
@click.option("--city", required=True)
@click.option("--postal-code", "postal_code", required=True)
@click.option("--country", default="IL", show_default=True)
@click.pass_obj
def address_add(ctx: RequestContext, street: str, city: str, postal_code: str, country: str) -> None:
    """Save a shipping address for the current user."""
    handler = AddAddressHandler(address_repo=address_repository())

    try:
        address = handler.handle(
            ctx,
            user_id=ctx.principal.user_id,
            street=street,
            city=city,
            postal_code=postal_code,
            country=country,
        )
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Address #{address.id} saved: {address}")
