"""A store of spawned shapes tagged with how they respond to reloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from itertools import count
from typing import Any, Iterator, TypeVar

T = TypeVar("T")


class ReloadLevel(IntEnum):
    """How deep a reload must go before an entity is removed."""

    SOFT = 0
    HARD = 1


@dataclass(frozen=True)
class Entity:
    """A spawned object together with its reload level."""

    id: int
    shape: Any
    level: ReloadLevel


class World:
    """Holds entities in spawn order."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._ids = count()

    def spawn(self, shape: Any, level: ReloadLevel = ReloadLevel.SOFT) -> int:
        """Add a shape and return its entity id."""
        entity = Entity(next(self._ids), shape, ReloadLevel(level))
        self._entities.append(entity)
        return entity.id

    def despawn_up_to(self, level: ReloadLevel) -> int:
        """Remove every entity whose level is at most ``level``; return how many went."""
        kept = [entity for entity in self._entities if entity.level > level]
        removed = len(self._entities) - len(kept)
        self._entities = kept
        return removed

    def of_type(self, kind: type[T]) -> list[T]:
        """All shapes that are instances of ``kind``, in spawn order."""
        return [entity.shape for entity in self._entities if isinstance(entity.shape, kind)]

    def entities(self) -> list[Entity]:
        return list(self._entities)

    def __iter__(self) -> Iterator[Any]:
        return (entity.shape for entity in self._entities)

    def __len__(self) -> int:
        return len(self._entities)