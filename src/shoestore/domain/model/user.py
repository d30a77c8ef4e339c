"""Users as seen by the ordering core: the acting principal and addresses."""

from __future__ import annotations

from dataclasses import dataclass

from shoestore.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Principal:
    """Who is making the current request."""

    user_id: int
    is_admin: bool = False

    def owns(self, owner_id: int) -> bool:
        return self.user_id == owner_id


@dataclass
class ShippingAddress:
    """A user's saved address, referenced by orders through its id."""

    id: int | None
    user_id: int
    street: str
    city: str
    postal_code: str
    country: str = "IL"

    def __post_init__(self) -> None:
        for name in ("street", "city", "postal_code"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValidationError(f"Address {name.replace('_', ' ')} is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.city} {self.postal_code}, {self.country}"
