"""The base of all modelling shapes and the kinds of topology they produce."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto

from cadcore.body import Body
from cadcore.entity import Entity


class ShapeType(Enum):
    SOLID = auto()
    SHELL = auto()
    WIRE = auto()
    FACE = auto()
    EDGE = auto()
    VERTEX = auto()


class Shape(Entity, ABC):
    """A shape in a body's modelling stack; subclasses say what they produce."""

    def __init__(self) -> None:
        super().__init__()
        self._body = Body()

    @abstractmethod
    def shape_type(self) -> ShapeType:
        """The kind of topology this shape produces."""

    def body(self) -> Body:
        """The body this shape belongs to."""
        return self._body

    def _set_body(self, body: Body) -> None:
        self._body = body