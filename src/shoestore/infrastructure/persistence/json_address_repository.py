"""JSON-file-backed implementation of AddressRepository."""

from __future__ import annotations

from pathlib import Path

from shoestore.domain.model.user import ShippingAddress
from shoestore.domain.repository.address_repository import AddressRepository
from shoestore.infrastructure.persistence.json_file import JsonFile


class JsonAddressRepository(AddressRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_for_user(self, user_id: int, address_id: int) -> ShippingAddress | None:
        for raw in self._file.load():
            if raw["id"] == address_id and raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def list_by_user(self, user_id: int) -> list[ShippingAddress]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["user_id"] == user_id
        ]

    def save(self, address: ShippingAddress) -> None:
        with self._file.transaction() as records:
            if address.id is None:
                address.id = JsonFile.next_id(records)
            for i, raw in enumerate(records):
                if raw["id"] == address.id:
                    records[i] = self._to_raw(address)
                    break
            else:
                records.append(self._to_raw(address))

    @staticmethod
    def _to_raw(address: ShippingAddress) -> dict:
        return {
            "id": address.id,
            "user_id": address.user_id,
            "street": address.street,
            "city": address.city,
            "postal_code": address.postal_code,
            "country": address.country,
        }

    @staticmethod
    def _to_domain(raw: dict) -> ShippingAddress:
        return ShippingAddress(
            id=raw["id"],
            user_id=raw["user_id"],
            street=raw["street"],
            city=raw["city"],
            postal_code=raw["postal_code"],
            country=raw.get("country", "IL"),
        )
