"""Tagged configuration values.

Configuration documents are JSON objects. Each value is wrapped in an
immutable ConfigValue carrying an explicit ValueKind tag, so accessors can
check the kind without relying on Python's looser type relationships
(bool is a subclass of int, for example).

Example:
    value = ConfigValue.from_python(["a", "b"])
    value.kind  # ValueKind.ARRAY
    value.to_python()  # ["a", "b"]
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

# Read-only mapping of key -> ConfigValue
ConfigDocument = Mapping[str, "ConfigValue"]

# Arrays and objects may nest at most this deep
MAX_NESTING_DEPTH = 128


class ValueKind(Enum):
    """Tag for a ConfigValue."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    REAL = "real"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


@dataclass(frozen=True)
class ConfigValue:
    """Immutable tagged configuration value.

    Arrays hold a tuple of ConfigValue, objects hold a read-only mapping of
    str to ConfigValue. JSON null is kept as a NULL value so that a document
    containing one still loads; every typed accessor rejects it. Build
    instances with from_python() rather than calling the constructor
    directly.
    """

    kind: ValueKind
    value: Any

    @classmethod
    def from_python(cls, obj: Any) -> ConfigValue:
        """Convert a JSON-compatible Python object into a ConfigValue.

        Args:
            obj: None, str, int, bool, float, list/tuple, dict, or ConfigValue.

        Returns:
            The tagged, deeply immutable equivalent.

        Raises:
            TypeError: If obj (or a nested element) is not JSON-compatible.
            ValueError: If obj is a non-finite float, or arrays and objects
                nest deeper than MAX_NESTING_DEPTH.
        """
        return cls._convert(obj, 0)

    @classmethod
    def _convert(cls, obj: Any, depth: int) -> ConfigValue:
        if isinstance(obj, ConfigValue):
            return obj
        if obj is None:
            return cls(ValueKind.NULL, None)
        # bool must be checked before int
        if isinstance(obj, bool):
            return cls(ValueKind.BOOLEAN, obj)
        if isinstance(obj, int):
            return cls(ValueKind.INTEGER, obj)
        if isinstance(obj, float):
            if not math.isfinite(obj):
                raise ValueError(f"Config values must be finite, got {obj!r}")
            return cls(ValueKind.REAL, obj)
        if isinstance(obj, str):
            return cls(ValueKind.STRING, obj)
        if isinstance(obj, (list, tuple, Mapping)) and depth >= MAX_NESTING_DEPTH:
            raise ValueError(
                f"Config values may nest at most {MAX_NESTING_DEPTH} levels deep"
            )
        if isinstance(obj, (list, tuple)):
            return cls(
                ValueKind.ARRAY, tuple(cls._convert(item, depth + 1) for item in obj)
            )
        if isinstance(obj, Mapping):
            items: dict[str, ConfigValue] = {}
            for key, item in obj.items():
                if not isinstance(key, str):
                    raise TypeError(
                        f"Config object keys must be strings, got {type(key).__name__}"
                    )
                items[key] = cls._convert(item, depth + 1)
            return cls(ValueKind.OBJECT, MappingProxyType(items))
        raise TypeError(f"Unsupported config value type: {type(obj).__name__}")

    @property
    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    @property
    def is_integer(self) -> bool:
        return self.kind is ValueKind.INTEGER

    @property
    def is_boolean(self) -> bool:
        return self.kind is ValueKind.BOOLEAN

    @property
    def is_real(self) -> bool:
        return self.kind is ValueKind.REAL

    @property
    def is_number(self) -> bool:
        return self.kind in (ValueKind.INTEGER, ValueKind.REAL)

    @property
    def is_array(self) -> bool:
        return self.kind is ValueKind.ARRAY

    @property
    def is_object(self) -> bool:
        return self.kind is ValueKind.OBJECT

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def to_python(self) -> Any:
        """Return a plain, mutable Python copy (lists and dicts)."""
        if self.kind is ValueKind.ARRAY:
            return [item.to_python() for item in self.value]
        if self.kind is ValueKind.OBJECT:
            return {key: item.to_python() for key, item in self.value.items()}
        return self.value

    def to_json(self) -> str:
        """Serialize the value as JSON text."""
        return json.dumps(self.to_python())


def document_from_python(obj: Mapping[str, Any]) -> ConfigDocument:
    """Build a read-only ConfigDocument from a JSON object.

    Args:
        obj: Mapping of key to JSON-compatible value.

    Returns:
        Read-only mapping of key to ConfigValue.

    Raises:
        TypeError: If obj is not a mapping or holds unsupported values.
        ValueError: If a value is non-finite or nested too deeply.
    """
    if not isinstance(obj, Mapping):
        raise TypeError(f"Config document must be an object, got {type(obj).__name__}")
    return ConfigValue.from_python(obj).value


def document_to_python(document: ConfigDocument) -> dict[str, Any]:
    """Return a plain dict copy of a ConfigDocument."""
    return {key: value.to_python() for key, value in document.items()}
