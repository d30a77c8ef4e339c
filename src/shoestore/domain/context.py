"""Per-request context passed explicitly through handlers and services.

Holds the acting principal and an identity map of entities already loaded
while serving the request, so the same order or product model is not looked
up twice.  A context lives for exactly one request and is never shared
between threads.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from shoestore.domain.model.user import Principal


@dataclass
class RequestContext:

    principal: Principal
    _entities: dict[tuple[str, Any], Any] = field(default_factory=dict, repr=False)

    def remember(self, kind: str, entity_id: Any, entity: Any) -> None:
        self._entities[(kind, entity_id)] = entity

    def cached(self, kind: str, entity_id: Any) -> Any | None:
        return self._entities.get((kind, entity_id))

    def get_or_load(
        self,
        kind: str,
        entity_id: Any,
        loader: Callable[[Any], Any | None],
    ) -> Any | None:
        key = (kind, entity_id)
        if key not in self._entities:
            entity = loader(entity_id)
            if entity is None:
                return None
            self._entities[key] = entity
        return self._entities[key]

    def get_many(
        self,
        kind: str,
        ids: Iterable[Any],
        batch_loader: Callable[[list[Any]], Iterable[Any]],
        id_of: Callable[[Any], Any] = lambda entity: entity.id,
    ) -> dict[Any, Any]:
        """Return ``{id: entity}`` for *ids*, loading only the missing ones in one batch."""
        wanted = list(dict.fromkeys(ids))
        missing = [i for i in wanted if (kind, i) not in self._entities]
        if missing:
            for entity in batch_loader(missing):
                self._entities[(kind, id_of(entity))] = entity
        return {
            i: self._entities[(kind, i)]
            for i in wanted
            if (kind, i) in self._entities
        }

