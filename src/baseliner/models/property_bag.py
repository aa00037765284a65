# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Named-value property storage with lazy, type-checked deserialization.

Values are kept as serialized JSON payloads tagged with whether they were
written as a bare string.  Strings are stored wrapped in quotes (without JSON
escaping) so they read back byte-for-byte, and the tag lets a reader tell the
string ``"1"`` from the integer ``1`` without deserializing.

Usage::

    bag = PropertyBag()
    bag.set_property("message", "Possible SQL injection")
    bag.set_property("rank", 0.7)

    bag.get_property("message")            # 'Possible SQL injection'
    bag.get_property_as("rank", float)     # 0.7
    bag.get_property_as("message", str)    # raises PropertyTypeError
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic_core import from_json, to_json

from baseliner.core.exceptions import PropertyNotFoundError, PropertyTypeError

T = TypeVar("T")

_CALL_GENERIC = (
    "Property {name!r} holds a non-string value; "
    "read it with get_property_as(name, value_type)"
)
_CALL_STRING = (
    "Property {name!r} holds a string value; read it with get_property(name)"
)


@lru_cache(maxsize=256)
def _adapter(value_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(value_type)


@dataclass(frozen=True, slots=True)
class SerializedProperty:
    """A stored property: raw payload plus a bare-string discriminator."""

    payload: str
    is_string: bool

    def same_value(self, other: SerializedProperty) -> bool:
        """Payload equality for strings, decoded equality otherwise."""
        if self.is_string or other.is_string:
            return self == other
        if self.payload == other.payload:
            return True
        try:
            return from_json(self.payload) == from_json(other.payload)
        except ValueError:
            return False


class PropertyBag:
    """Mapping from property name to a lazily deserialized value.

    The backing dict is not allocated until the first write.  Reading a
    string property through the generic accessor, or a non-string property
    through the string accessor, raises ``PropertyTypeError``: that is a
    caller bug, not a data condition.
    """

    __slots__ = ("_properties",)

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._properties: dict[str, SerializedProperty] | None = None
        if values:
            for name, value in values.items():
                self.set_property(name, value)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_property(self, name: str, value: Any, value_type: Any = None) -> None:
        """Serialize and store *value* under *name*.

        Args:
            name: Property name, unique within the bag.
            value: The value to store.
            value_type: Declared type of *value*.  When omitted, strings are
                detected with ``isinstance`` and everything else is serialized
                from its runtime type.
        """
        if value_type is None:
            is_string = isinstance(value, str)
        else:
            is_string = value_type is str

        if is_string:
            serialized = SerializedProperty('"' + str(value) + '"', True)
        elif value_type is None:
            serialized = SerializedProperty(to_json(value).decode("utf-8"), False)
        else:
            payload = _adapter(value_type).dump_json(value).decode("utf-8")
            serialized = SerializedProperty(payload, False)

        self.set_serialized(name, serialized)

    def set_serialized(self, name: str, serialized: SerializedProperty) -> None:
        """Store an already-serialized payload verbatim."""
        if self._properties is None:
            self._properties = {}
        self._properties[name] = serialized

    def remove_property(self, name: str) -> bool:
        if self._properties is None or name not in self._properties:
            return False
        del self._properties[name]
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_serialized(self, name: str) -> SerializedProperty:
        if self._properties is None or name not in self._properties:
            raise PropertyNotFoundError(name)
        return self._properties[name]

    def get_property(self, name: str) -> str:
        """Return a string property exactly as it was written."""
        serialized = self.get_serialized(name)
        if not serialized.is_string:
            raise PropertyTypeError(_CALL_GENERIC.format(name=name))
        # '"x"' -> 'x'
        return serialized.payload[1:-1]

    def get_property_as(self, name: str, value_type: type[T]) -> T:
        """Deserialize a non-string property as *value_type*."""
        if value_type is str:
            raise PropertyTypeError(_CALL_STRING.format(name=name))
        serialized = self.get_serialized(name)
        if serialized.is_string:
            raise PropertyTypeError(_CALL_STRING.format(name=name))
        return _adapter(value_type).validate_json(serialized.payload)

    def try_get_property(self, name: str) -> tuple[bool, str | None]:
        if not self.has_property(name):
            return False, None
        return True, self.get_property(name)

    def try_get_property_as(self, name: str, value_type: type[T]) -> tuple[bool, T | None]:
        if value_type is str:
            raise PropertyTypeError(_CALL_STRING.format(name=name))
        if not self.has_property(name):
            return False, None
        return True, self.get_property_as(name, value_type)

    def has_property(self, name: str) -> bool:
        return self._properties is not None and name in self._properties

    @property
    def property_names(self) -> list[str]:
        """Snapshot of the stored names."""
        if self._properties is None:
            return []
        return list(self._properties)

    # ------------------------------------------------------------------
    # Copying and plain-data conversion
    # ------------------------------------------------------------------

    def copy(self) -> PropertyBag:
        clone = PropertyBag()
        if self._properties is not None:
            clone._properties = dict(self._properties)
        return clone

    def to_dict(self) -> dict[str, Any]:
        """Decode every property into plain JSON-compatible data.

        Lossy for payloads stored with ``set_serialized``: decoding and
        re-encoding normalizes whitespace and number formatting.  Use
        ``to_payloads`` / ``from_payloads`` to round-trip them verbatim.
        """
        result: dict[str, Any] = {}
        for name in sorted(self.property_names):
            serialized = self.get_serialized(name)
            if serialized.is_string:
                result[name] = serialized.payload[1:-1]
            else:
                result[name] = from_json(serialized.payload)
        return result

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> PropertyBag:
        return cls(values)

    def to_payloads(self) -> dict[str, dict[str, Any]]:
        """Raw tagged payloads, keyed by name in sorted order."""
        return {
            name: {"payload": serialized.payload, "is_string": serialized.is_string}
            for name, serialized in sorted((self._properties or {}).items())
        }

    @classmethod
    def from_payloads(cls, payloads: Mapping[str, Mapping[str, Any]]) -> PropertyBag:
        bag = cls()
        for name, entry in payloads.items():
            bag.set_serialized(
                name, SerializedProperty(str(entry["payload"]), bool(entry["is_string"]))
            )
        return bag

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_property(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.property_names)

    def __len__(self) -> int:
        return 0 if self._properties is None else len(self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyBag):
            return NotImplemented
        return (self._properties or {}) == (other._properties or {})

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PropertyBag({self.property_names!r})"
