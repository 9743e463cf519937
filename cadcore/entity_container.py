"""An entity that holds an ordered collection of other entities."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterator

from cadcore.entity import Entity
from cadcore.signals import Signal


class NotifyCollectionChangedAction(Enum):
    ADD = auto()
    REMOVE = auto()
    REPLACE = auto()
    RESET = auto()


class EntityContainer(Entity):
    """An ordered list of entities that reports additions and removals.

    Signals:
        collection_changed(NotifyCollectionChangedAction, Entity, int)
    """

    def __init__(self) -> None:
        super().__init__()
        self._entities: list[Entity] = []
        self.collection_changed = Signal()

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))

    def add(self, entity: Entity, update: bool = True) -> None:
        """Append ``entity``; with ``update`` the addition is announced."""
        self._entities.append(entity)
        if update:
            self.collection_changed.emit(
                NotifyCollectionChangedAction.ADD, entity, len(self._entities) - 1
            )

    def remove_entity(self, entity: Entity, update: bool = True) -> None:
        """Take ``entity`` out and remove it; nothing happens if it is absent."""
        index = self.index_of(entity)
        if index < 0:
            return
        del self._entities[index]
        entity.remove()
        if update:
            self.collection_changed.emit(NotifyCollectionChangedAction.REMOVE, entity, index)

    def get(self, index: int) -> Entity | None:
        """Return the entity at ``index``, or None when the index is out of range."""
        if 0 <= index < len(self._entities):
            return self._entities[index]
        return None

    def index_of(self, entity: Entity) -> int:
        """Return the position of ``entity``, or -1 if it is not held."""
        for position, held in enumerate(self._entities):
            if held is entity:
                return position
        return -1

    def remove(self) -> None:
        """Remove every held entity, empty the container, then remove itself."""
        for entity in self._entities:
            entity.remove()
        self._entities.clear()
        super().remove()