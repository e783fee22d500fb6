# src/github_manager/models/base.py
"""
Shared building blocks for the typed entity model.

GitHub omits optional fields freely and nests partial objects inside full
ones, so every entity reads its payload through a FieldReader that never
fails on a missing key. Closed state sets are WireEnum subclasses whose
member values are the literal strings GitHub puts on the wire.
"""

import math
from dataclasses import fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

E = TypeVar('E', bound='WireEnum')
T = TypeVar('T')

# Returned by to_timestamp when the source string is missing or malformed
INVALID_TIMESTAMP = -1


class DecodingError(ValueError):
    """Raised when a payload cannot be turned into the requested representation."""
    pass


class WireEnum(Enum):
    """
    Enum whose member values are GitHub wire strings.

    The value table is the only mapping between the wire and Python
    names: ``RepoVisibility.PRIVATE`` decodes from ``"private"`` and
    ``HttpsCertificateState.AUTHORIZATION_PENDING`` from
    ``"authorization_pending"``.
    """

    @classmethod
    def from_wire(cls: Type[E], value: str) -> E:
        """
        Decode a wire string into a member.

        Raises:
            DecodingError: If the value matches no declared member
        """
        for member in cls:
            if member.value == value:
                return member
        expected = ', '.join(repr(member.value) for member in cls)
        raise DecodingError(
            f"Unexpected value {value!r} for {cls.__name__}; expected one of: {expected}"
        )

    def __str__(self) -> str:
        return self.value


def to_timestamp(value: Optional[str]) -> int:
    """
    Convert an ISO-8601 string into epoch milliseconds.

    Values without an offset (plain dates included) are read as UTC.
    Returns INVALID_TIMESTAMP for None or unparseable input.
    """
    if not value or not isinstance(value, str):
        return INVALID_TIMESTAMP
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return INVALID_TIMESTAMP
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp() * 1000)


class FieldReader:
    """
    Tolerant reader over a decoded JSON object.

    Every getter returns a well-defined default when the key is absent or
    holds a value of the wrong type. Only get_enum can fail, and only for
    a present value that is not a declared wire string.
    """

    def __init__(self, data: Optional[Dict[str, Any]]):
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DecodingError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        self._data = data

    @property
    def raw(self) -> Dict[str, Any]:
        return self._data

    def has(self, key: str) -> bool:
        return self._data.get(key) is not None

    def get_string(self, key: str) -> Optional[str]:
        value = self._data.get(key)
        if isinstance(value, str):
            return value
        return None

    def _number(self, key: str) -> Optional[Any]:
        value = self._data.get(key)
        # bool is an int subclass but never a numeric field on the wire
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        # 1e400, NaN and Infinity all parse as JSON
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._number(key)
        if value is None:
            return default
        return int(value)

    def get_long(self, key: str, default: int = 0) -> int:
        # Python ints are unbounded; kept for parity with 64-bit ids
        return self.get_int(key, default)

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._number(key)
        if value is None:
            return default
        return float(value)

    def get_boolean(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key)
        if isinstance(value, bool):
            return value
        return default

    def get_object(self, key: str) -> Optional[Dict[str, Any]]:
        value = self._data.get(key)
        if isinstance(value, dict):
            return value
        return None

    def get_array(self, key: str, default: Iterable[Any] = ()) -> List[Any]:
        value = self._data.get(key)
        if isinstance(value, list):
            return value
        return list(default)

    def get_strings(self, key: str) -> Tuple[str, ...]:
        return tuple(item for item in self.get_array(key) if isinstance(item, str))

    def get_enum(self, key: str, enum_cls: Type[E]) -> Optional[E]:
        value = self._data.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise DecodingError(
                f"Expected a string for {key}, got {type(value).__name__}"
            )
        return enum_cls.from_wire(value)

    def get_nested(self, key: str, factory: Any) -> Optional[Any]:
        """Decode a nested entity only when its object is present."""
        value = self.get_object(key)
        if value is None:
            return None
        return factory.from_json(value)

    def get_nested_list(self, key: str, factory: Any) -> Tuple[Any, ...]:
        return tuple(decode_items(self.get_array(key), factory))


def decode_items(items: Iterable[Any], factory: Any) -> List[Any]:
    """
    Decode every element of a JSON array with factory.from_json.

    Raises:
        DecodingError: If an element is not a JSON object
    """
    decoded = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise DecodingError(
                f"Expected a JSON object at index {index}, got {type(item).__name__}"
            )
        decoded.append(factory.from_json(item))
    return decoded


class Entity:
    """
    Mixin for frozen dataclass entities.

    Subclasses list fields whose Python name differs from the wire key in
    _wire_names so to_dict can rebuild the original payload shape.
    """

    _wire_names: ClassVar[Dict[str, str]] = {}

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for item in fields(self):
            wire_name = self._wire_names.get(item.name, item.name)
            payload[wire_name] = serialize(getattr(self, item.name))
        return payload


def serialize(value: Any) -> Any:
    """Render entities, enums and containers into plain JSON-compatible values."""
    if isinstance(value, Enum):
        return value.value
    to_dict = getattr(value, 'to_dict', None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


class Direction(WireEnum):
    """Sort direction accepted by list endpoints."""
    ASC = 'asc'
    DESC = 'desc'
