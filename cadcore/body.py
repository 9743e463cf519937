"""Bodies: positioned, rotated holders of shapes."""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING

from cadcore.interactive_entity import InteractiveEntity
from cadcore.signals import Signal

if TYPE_CHECKING:
    from cadcore.shape import Shape

Point = tuple[float, float, float]
Quaternion = tuple[float, float, float, float]

ORIGIN: Point = (0.0, 0.0, 0.0)
IDENTITY_ROTATION: Quaternion = (0.0, 0.0, 0.0, 1.0)


class Body(InteractiveEntity):
    """An entity placed in space that owns a stack of shapes.

    Signals:
        topology_undo_saved(Body, tuple of shapes)
    """

    def __init__(self) -> None:
        super().__init__()
        self._position: Point = ORIGIN
        self._rotation: Quaternion = IDENTITY_ROTATION
        self._shapes: list[Shape] = []
        self.topology_undo_saved = Signal()

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return tuple(self._shapes)

    def add_shape(self, shape: Shape, save_undo: bool = True) -> bool:
        """Attach ``shape`` to this body; returns True on success."""
        if save_undo:
            self.save_topology_undo()
        self._shapes.append(shape)
        shape._set_body(self)
        return True

    def save_topology_undo(self) -> None:
        """Announce the shape structure before it changes, for undo handlers."""
        self.topology_undo_saved.emit(self, self.shapes)

    @property
    def position(self) -> Point:
        return self._position

    @position.setter
    def position(self, value: Point) -> None:
        value = tuple(float(c) for c in value)
        if math.dist(self._position, value) > sys.float_info.epsilon:
            self.save_undo()
            self._position = value
            self._invalidate_transformation()

    @property
    def rotation(self) -> Quaternion:
        """The rotation as a quaternion ``(x, y, z, w)``."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: Quaternion) -> None:
        value = tuple(float(c) for c in value)
        if value != self._rotation:
            self.save_undo()
            self._rotation = value
            self._invalidate_transformation()

    @classmethod
    def create(cls, shape: Shape) -> Body:
        """Make a new body holding ``shape``."""
        body = cls()
        body.add_shape(shape, False)
        return body

    def _invalidate_transformation(self) -> None:
        self.invalidate()