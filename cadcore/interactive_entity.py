"""Entities that are shown in the viewer and carry visibility and layer settings."""

from __future__ import annotations

import uuid

from cadcore.entity import Entity
from cadcore.signals import Signal


class InteractiveEntity(Entity):
    """A named, displayable entity assigned to a layer.

    Signals:
        visual_changed()
    """

    def __init__(self) -> None:
        super().__init__()
        self._name = "Unnamed"
        self._is_visible = True
        self._layer_id = uuid.uuid4()
        self.visual_changed = Signal()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if self._name != value:
            self.save_undo()
            self._name = value
            self._notify_document()

    @property
    def is_visible(self) -> bool:
        return self._is_visible

    @is_visible.setter
    def is_visible(self, value: bool) -> None:
        if self._is_visible != value:
            self.save_undo()
            self._is_visible = value
            self._notify_document()
            self.raise_visual_changed()

    @property
    def layer_id(self) -> uuid.UUID:
        return self._layer_id

    @layer_id.setter
    def layer_id(self, value: uuid.UUID) -> None:
        if self._layer_id != value:
            self.save_undo()
            self._layer_id = value
            self.invalidate()
            self._notify_document()

    def invalidate(self) -> None:
        """Mark the displayed presentation as out of date."""
        self.raise_visual_changed()

    def remove(self) -> None:
        super().remove()

    def raise_visual_changed(self) -> None:
        self.visual_changed.emit()

    def _notify_document(self) -> None:
        if self.document is not None:
            self.document.instance_changed(self)