"""State shared by the steps of one serialization run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, TypeVar

T = TypeVar("T")


class SerializationScope(Enum):
    STORAGE = auto()
    UNDO_REDO = auto()
    COPY_PASTE = auto()


class SerializationResult(Enum):
    NONE = auto()
    VERSION_MISMATCH = auto()


@dataclass
class SerializationContext:
    """Holds errors, named parameters and per-type instances for a run."""

    scope: SerializationScope = SerializationScope.STORAGE
    result: SerializationResult = SerializationResult.NONE
    _parameters: dict[str, Any] = field(default_factory=dict, repr=False)
    _instances: dict[type, Any] = field(default_factory=dict, repr=False)
    _errors: list[str] = field(default_factory=list, repr=False)

    def add_error(self, message: str) -> None:
        self._errors.append(message)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def get_errors(self) -> list[str]:
        """Return a copy of the recorded error messages, oldest first."""
        return list(self._errors)

    def set_parameter(self, key: str, value: Any) -> None:
        self._parameters[key] = value

    def get_parameter(self, key: str, default: Any = None) -> Any:
        return self._parameters.get(key, default)

    def remove_parameter(self, key: str) -> None:
        self._parameters.pop(key, None)

    def set_instance(self, instance: Any) -> None:
        """Store ``instance`` under its own type, replacing any earlier one."""
        self._instances[type(instance)] = instance

    def get_instance(self, cls: type[T]) -> T | None:
        return self._instances.get(cls)

    def remove_instance(self, cls: type) -> None:
        self._instances.pop(cls, None)