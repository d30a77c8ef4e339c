"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from shoestore.application.cancel_order import CancelOrderHandler
from shoestore.application.change_order_status import ChangeOrderStatusHandler
from shoestore.application.confirm_order import ConfirmOrderHandler
from shoestore.application.dto import CheckoutRequest, OrderDTO
from shoestore.application.place_order import PlaceOrderHandler
from shoestore.application.show_order import ListOrdersHandler, ShowOrderHandler
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import DomainException
from shoestore.domain.model.order import OrderStatus
from shoestore.infrastructure.bootstrap import (
    address_repository,
    order_item_builder,
    order_lifecycle,
    order_number_generator,
    order_repository,
)
from shoestore.infrastructure.cli.common import domain_error, parse_lines

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  number={dto.order_number}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}   Address: {dto.shipping_address_id}")
    click.echo(f"Ordered:  {dto.order_date}")
    if dto.shipped_date:
        click.echo(f"Shipped:  {dto.shipped_date}")
    if dto.delivered_date:
        click.echo(f"Delivered: {dto.delivered_date}")
    click.echo()
    click.echo(f"  {'Model':<8} {'Size':<6} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*43}")
    for item in dto.items:
        click.echo(
            f"  {item.product_model_id:<8} {item.size:<6} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.total_price:>10}"
        )
    click.echo(f"  {'-'*43}")
    click.echo(f"  {'Order Total':<25} {dto.total_amount:>18}")


@click.command("place")
@click.option("--address", "address_id", required=True, type=int, help="Shipping address ID.")
@click.option("--items", required=True, help="Items as 'ModelId:Size:Qty,ModelId:Size:Qty'.")
@click.option("--for-user", "for_user", type=int, default=None, help="Order on behalf of another user (admin).")
@click.pass_obj
def order_place(ctx: RequestContext, address_id: int, items: str, for_user: int | None) -> None:
    """Place an order (reserves inventory)."""
    lines = parse_lines(items)
    order_repo = order_repository()
    handler = PlaceOrderHandler(
        order_repo=order_repo,
        address_repo=address_repository(),
        item_builder=order_item_builder(order_repo),
        number_generator=order_number_generator(order_repo),
    )
    request = CheckoutRequest(
        user_id=for_user if for_user is not None else ctx.principal.user_id,
        shipping_address_id=address_id,
        lines=lines,
    )

    try:
        dto = handler.handle(ctx, request)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Order #{dto.id} placed  (number={dto.order_number}, status={dto.status})")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(ctx: RequestContext, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(ctx, order_id)
    except DomainException as exc:
        raise domain_error(exc)

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", type=int, default=None, help="Orders of this user (admin).")
@click.option("--status", type=_STATUS_CHOICE, default=None, help="Only orders in this status (admin).")
@click.pass_obj
def order_list(ctx: RequestContext, user_id: int | None, status: str | None) -> None:
    """List orders (your own by default)."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        dtos = handler.handle(
            ctx,
            user_id=user_id,
            status=OrderStatus(status.upper()) if status else None,
        )
    except DomainException as exc:
        raise domain_error(exc)

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Number':<9} {'User':<6} {'Status':<11} {'Total':>12}")
    click.echo("-" * 48)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.order_number:<9} {dto.user_id:<6} {dto.status:<11} {dto.total_amount:>12}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--to", "new_status", required=True, type=_STATUS_CHOICE, help="New status.")
@click.pass_obj
def order_status(ctx: RequestContext, order_id: int, new_status: str) -> None:
    """Move an order to a new status (admin)."""
    handler = ChangeOrderStatusHandler(
        order_repo=order_repository(),
        lifecycle=order_lifecycle(),
    )

    try:
        dto = handler.handle(ctx, order_id, OrderStatus(new_status.upper()))
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Order #{order_id} is now {dto.status}.")


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
@click.pass_obj
def order_confirm(ctx: RequestContext, order_id: int) -> None:
    """Confirm a pending order (commits reserved inventory)."""
    handler = ConfirmOrderHandler(
        order_repo=order_repository(),
        lifecycle=order_lifecycle(),
    )

    try:
        handler.handle(ctx, order_id)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Order #{order_id} confirmed - inventory committed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(ctx: RequestContext, order_id: int) -> None:
    """Cancel an order (releases or restores inventory)."""
    handler = CancelOrderHandler(
        order_repo=order_repository(),
        lifecycle=order_lifecycle(),
    )

    try:
        handler.handle(ctx, order_id)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Order #{order_id} cancelled.")
