"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from shoestore.application.dto import OrderLineSpec
from shoestore.application.errors import to_error_response
from shoestore.domain.exceptions import DomainException


def domain_error(exc: DomainException) -> click.ClickException:
    """Render a domain error with its status and error name."""
    return click.ClickException(str(to_error_response(exc)))


def parse_lines(raw: str) -> list[OrderLineSpec]:
    """Parse '12:42:2,13:9.5:1' (model:size:quantity) into OrderLineSpec list."""
    specs: list[OrderLineSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ModelId:Size:Quantity'."
            )
        model_str, size, qty_str = (p.strip() for p in parts)
        try:
            model_id = int(model_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid model id or quantity in '{entry}'."
            )
        specs.append(OrderLineSpec(product_model_id=model_id, size=size, quantity=qty))
    return specs
