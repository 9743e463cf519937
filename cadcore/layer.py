"""Layers group entities and carry shared display settings."""

from __future__ import annotations

from cadcore.color import Color
from cadcore.entity import Entity
from cadcore.signals import Signal


def _fuzzy_equal(a: float, b: float) -> bool:
    return abs(a - b) * 100000.0 <= min(abs(a), abs(b))


class Layer(Entity):
    """A named layer with visibility, lock state, colour and transparency.

    Signals:
        name_changed(str), visibility_changed(bool), lock_status_changed(bool),
        color_changed(Color), transparency_changed(float)
    """

    def __init__(self) -> None:
        super().__init__()
        self._name = ""
        self._is_visible = True
        self._is_locked = False
        self._color = Color.WHITE
        self._transparency = 0.0
        self.name_changed = Signal()
        self.visibility_changed = Signal()
        self.lock_status_changed = Signal()
        self.color_changed = Signal()
        self.transparency_changed = Signal()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if self._name != value:
            self.save_undo()
            self._name = value
            self.name_changed.emit(value)

    @property
    def is_visible(self) -> bool:
        return self._is_visible

    @is_visible.setter
    def is_visible(self, value: bool) -> None:
        if self._is_visible != value:
            self.save_undo()
            self._is_visible = value
            self.visibility_changed.emit(value)

    @property
    def is_locked(self) -> bool:
        return self._is_locked

    @is_locked.setter
    def is_locked(self, value: bool) -> None:
        if self._is_locked != value:
            self.save_undo()
            self._is_locked = value
            self.lock_status_changed.emit(value)

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        if self._color != value:
            self.save_undo()
            self._color = value
            self.color_changed.emit(value)

    @property
    def transparency(self) -> float:
        return self._transparency

    @transparency.setter
    def transparency(self, value: float) -> None:
        if not _fuzzy_equal(self._transparency, value):
            self.save_undo()
            self._transparency = value
            self.transparency_changed.emit(value)