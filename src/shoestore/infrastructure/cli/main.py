import click

from shoestore.domain.context import RequestContext
from shoestore.domain.model.user import Principal
from shoestore.infrastructure.cli.catalog_commands import (
    address_add,
    catalog_add,
    catalog_list,
    catalog_update,
)
from shoestore.infrastructure.cli.inventory_commands import inventory_set, inventory_show
from shoestore.infrastructure.cli.order_commands import (
    order_cancel,
    order_confirm,
    order_list,
    order_place,
    order_show,
    order_status,
)
from shoestore.infrastructure.logging import bind_request, configure_logging


@click.group()
@click.option("--user-id", type=int, default=1, show_default=True, envvar="SHOESTORE_USER_ID", help="Acting user.")
@click.option("--admin", is_flag=True, default=False, envvar="SHOESTORE_ADMIN", help="Act with administrator rights.")
@click.pass_context
def cli(click_ctx: click.Context, user_id: int, admin: bool) -> None:
    """Shoe store - orders and inventory"""
    configure_logging()
    bind_request(user_id=user_id, admin=admin)
    click_ctx.obj = RequestContext(principal=Principal(user_id=user_id, is_admin=admin))


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def catalog() -> None:
    """Manage shoe models."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


@cli.group()
def address() -> None:
    """Manage shipping addresses."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
catalog.add_command(catalog_add)
catalog.add_command(catalog_list)
catalog.add_command(catalog_update)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
address.add_command(address_add)
