"""Application service: Add Address use case."""

from __future__ import annotations

from shoestore.application.access import require_owner_or_admin
from shoestore.domain.context import RequestContext
from shoestore.domain.model.user import ShippingAddress
from shoestore.domain.repository.address_repository import AddressRepository


class AddAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(
        self,
        ctx: RequestContext,
        user_id: int,
        street: str,
        city: str,
        postal_code: str,
        country: str = "IL",
    ) -> ShippingAddress:
        require_owner_or_admin(ctx.principal, user_id)
        address = ShippingAddress(
            id=None,
            user_id=user_id,
            street=street.strip(),
            city=city.strip(),
            postal_code=postal_code.strip(),
            country=country.strip().upper(),
        )
        self._address_repo.save(address)
        return address
