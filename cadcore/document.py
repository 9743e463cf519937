"""A document: a container of entities that can look them up by guid."""

from __future__ import annotations

import uuid
import weakref

from cadcore.entity import Entity, IDocument
from cadcore.entity_container import EntityContainer, NotifyCollectionChangedAction


class Document(EntityContainer, IDocument):
    """Holds entities and keeps weak references to registered instances by guid."""

    def __init__(self) -> None:
        super().__init__()
        self._instances: dict[uuid.UUID, weakref.ref[Entity]] = {}

    def register_instance(self, entity: Entity) -> None:
        """Index ``entity`` by its guid; entities with the nil guid are ignored."""
        if entity.guid.int == 0:
            return
        self._instances[entity.guid] = weakref.ref(entity)

    def unregister_instance(self, entity: Entity) -> None:
        self._instances.pop(entity.guid, None)

    def find_instance(self, instance_guid: uuid.UUID) -> Entity | None:
        """Return the document itself or a live registered entity with that guid."""
        if instance_guid == self.guid:
            return self
        ref = self._instances.get(instance_guid)
        if ref is None:
            return None
        entity = ref()
        if entity is None:
            del self._instances[instance_guid]
        return entity

    def instance_changed(self, entity: Entity) -> None:
        """Announce a replacement if ``entity`` is held directly by this document."""
        index = self.index_of(entity)
        if index != -1:
            self.collection_changed.emit(NotifyCollectionChangedAction.REPLACE, entity, index)