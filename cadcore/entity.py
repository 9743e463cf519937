"""Base class of everything that lives in a document, and the document interface."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from cadcore.signals import Signal


class IDocument(ABC):
    """What an entity needs from the document that owns it."""

    @abstractmethod
    def register_instance(self, entity: Entity) -> None:
        """Make ``entity`` findable by its guid."""

    @abstractmethod
    def unregister_instance(self, entity: Entity) -> None:
        """Forget ``entity``."""

    @abstractmethod
    def find_instance(self, instance_guid: uuid.UUID) -> Entity | None:
        """Return the entity registered under ``instance_guid``, if any."""

    @abstractmethod
    def instance_changed(self, entity: Entity) -> None:
        """Tell the document that ``entity`` was modified."""


class Entity:
    """An identifiable object with an error state, optionally owned by a document.

    Signals:
        has_errors_changed(bool)
        error_state_changed(Entity)
        undo_saved(Entity)
    """

    def __init__(self) -> None:
        self._guid = uuid.uuid4()
        self._has_errors = False
        self._document: IDocument | None = None
        self.has_errors_changed = Signal()
        self.error_state_changed = Signal()
        self.undo_saved = Signal()

    @property
    def guid(self) -> uuid.UUID:
        return self._guid

    @guid.setter
    def guid(self, value: uuid.UUID) -> None:
        # The document indexes by guid, so re-register under the new one.
        if self._document is not None:
            self._document.unregister_instance(self)
        self._guid = value
        if self._document is not None:
            self._document.register_instance(self)

    @property
    def type_name(self) -> str:
        return type(self).__name__

    @property
    def name(self) -> str:
        return "Unknown"

    @name.setter
    def name(self, value: str) -> None:
        pass

    @property
    def has_errors(self) -> bool:
        return self._has_errors

    @has_errors.setter
    def has_errors(self, value: bool) -> None:
        if self._has_errors != value:
            self._has_errors = value
            self.has_errors_changed.emit(value)
            self.error_state_changed.emit(self)

    @property
    def document(self) -> IDocument | None:
        return self._document

    @document.setter
    def document(self, value: IDocument | None) -> None:
        if self._document is not None:
            self._document.unregister_instance(self)
        self._document = value
        if self._document is not None:
            self._document.register_instance(self)

    def remove(self) -> None:
        """Release whatever the entity holds; the base entity holds nothing."""

    def save_undo(self) -> None:
        """Announce that the entity's state is about to change, for undo handlers."""
        self.undo_saved.emit(self)

    def __str__(self) -> str:
        return self.name