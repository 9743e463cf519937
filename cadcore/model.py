"""The model: the top-level document that owns the workspaces."""

from __future__ import annotations

from typing import Any

from cadcore.signals import Signal


class Model:
    """A model file with its workspaces.

    Signals:
        reset_unsaved_changes()
    """

    def __init__(self) -> None:
        self._workspaces: list[Any] = []
        self.reset_unsaved_changes = Signal()

    @property
    def workspaces(self) -> list[Any]:
        """The workspaces of the model; the list itself is shared."""
        return self._workspaces

    @classmethod
    def file_extension(cls) -> str:
        return "step"

    @property
    def file_path(self) -> str:
        return ""

    def save(self) -> bool:
        """Save the model; without a file path nothing is written and False is returned."""
        return False

    def has_unsaved_changes(self) -> bool:
        return False