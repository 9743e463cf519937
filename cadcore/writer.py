"""A text writer for the serialization format of maps, lists and references."""

from __future__ import annotations

import uuid
from typing import Any

_VALUE_ESCAPES = str.maketrans({
    '"': '\\"',
    "'": "\\'",
    "\\": "\\\\",
    "{": "\\{",
    "}": "\\}",
    ":": "\\:",
    ",": "\\,",
})

_QUOTED_ESCAPES = str.maketrans({'"': '\\"', "\\": "\\\\"})


class Writer:
    """Accumulates serialized text and tracks the nesting of maps and lists."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._written_instances: dict[uuid.UUID, Any] = {}
        self._blocks_open = 0
        self._map_keys = 0
        self._map_values = 0
        self._is_first_element = False

    def is_valid(self) -> bool:
        """True when every block is closed and every map key has a value."""
        return self._blocks_open == 0 and self._map_keys == self._map_values

    def to_string(self) -> str:
        return "".join(self._parts)

    __str__ = to_string

    def write_char(self, value: str) -> None:
        self._parts.append(value)

    def write_raw_string(self, value: str) -> None:
        self._parts.append(value)

    def write_value_string(self, value: str) -> None:
        """Write ``value`` with the format's structural characters escaped."""
        self._parts.append(value.translate(_VALUE_ESCAPES))

    def write_quoted_string(self, value: str) -> None:
        """Write ``value`` in double quotes, escaping quotes and backslashes."""
        self._parts.append('"' + value.translate(_QUOTED_ESCAPES) + '"')

    def write_null_reference(self) -> None:
        self.write_raw_string("?null")

    def write_instance_reference(self, instance: Any, guid: uuid.UUID | None) -> bool:
        """Write a reference if ``instance`` is None or was already written.

        Returns True when a reference was written; False when the caller must
        write the instance itself (first occurrence, or no usable guid).
        """
        if instance is None:
            self.write_null_reference()
            return True
        if guid is None or guid.int == 0:
            return False
        if guid in self._written_instances:
            self.write_char("?")
            self.write_value_string(str(guid))
            return True
        self._written_instances[guid] = instance
        return False

    def begin_map(self) -> None:
        self._parts.append("{")
        self._blocks_open += 1
        self._is_first_element = True

    def begin_map_key(self) -> None:
        if not self._is_first_element:
            self._parts.append(",")
        self._is_first_element = False
        self._map_keys += 1

    def begin_map_value(self) -> None:
        self._parts.append(":")
        self._map_values += 1

    def end_map(self) -> None:
        self._parts.append("}")
        self._blocks_open -= 1
        self._is_first_element = False

    def begin_list(self) -> None:
        self._parts.append("[")
        self._blocks_open += 1
        self._is_first_element = True

    def begin_list_value(self) -> None:
        if not self._is_first_element:
            self._parts.append(",")
        self._is_first_element = False

    def end_list(self) -> None:
        self._parts.append("]")
        self._blocks_open -= 1
        self._is_first_element = False