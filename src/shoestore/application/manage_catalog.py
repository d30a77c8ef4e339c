"""Application services: Add / Update Product Model use cases (catalog provisioning)."""

from __future__ import annotations

from shoestore.application.access import require_admin
from shoestore.domain.context import RequestContext
from shoestore.domain.exceptions import EntityNotFoundError, ValidationError
from shoestore.domain.model.catalog import ProductModel
from shoestore.domain.model.value_objects import Money
from shoestore.domain.repository.catalog_repository import CatalogRepository


class AddProductModelHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        ctx: RequestContext,
        name: str,
        price: str,
        is_active: bool = True,
        product_is_active: bool = True,
    ) -> ProductModel:
        """Add a new shoe model to the catalog."""
        require_admin(ctx.principal)
        if not name or not name.strip():
            raise ValidationError("Product model name is required")

        money = Money.of(price)
        if money.is_zero:
            raise ValidationError("Product model price must be greater than zero")

        model = ProductModel(
            id=None,
            name=name.strip(),
            price=money,
            is_active=is_active,
            product_is_active=product_is_active,
        )
        self._catalog_repo.save(model)
        return model


class UpdateProductModelHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        ctx: RequestContext,
        model_id: int,
        new_price: str | None = None,
        is_active: bool | None = None,
    ) -> ProductModel:
        """Change a model's price and/or availability.

        This does NOT affect any existing orders - they captured a
        price snapshot at creation time.
        """
        require_admin(ctx.principal)
        model = self._catalog_repo.get_by_id(model_id)
        if model is None:
            raise EntityNotFoundError(f"Shoe model {model_id} not found")

        if new_price is not None:
            model.update_price(Money.of(new_price))
        if is_active is not None:
            model.is_active = is_active
        self._catalog_repo.save(model)
        return model
