# src/github_manager/adapters/params.py
"""
Accumulator for query-string and JSON-body parameters.

GitHub treats an omitted body field as "leave unchanged" and an explicit
null as "clear", so the builder keeps the two apart: add() always emits
the pair (None becomes JSON null), add_optional() emits nothing for None
or UNSET.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from github_manager.models.base import serialize


class _Unset:
    """Marker for an argument the caller did not pass at all."""

    _instance: Optional['_Unset'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


class Params:
    """
    Ordered list of request parameters.

    Duplicate keys are retained; serialization resolves them so each key
    keeps the position of its first insertion and the value of its last.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._pairs: List[Tuple[str, Any]] = []
        if initial:
            for key, value in initial.items():
                self.add(key, value)

    def add(self, key: str, value: Any) -> 'Params':
        self._pairs.append((key, value))
        return self

    def add_optional(self, key: str, value: Any) -> 'Params':
        """Add the pair unless value is None or UNSET."""
        if value is None or value is UNSET:
            return self
        return self.add(key, value)

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(existing == key for existing, _ in self._pairs)

    def __repr__(self) -> str:
        return f"Params({self._pairs!r})"

    def _resolved(self) -> Dict[str, Any]:
        resolved: Dict[str, Any] = {}
        for key, value in self._pairs:
            resolved[key] = value
        return resolved

    def to_query_string(self) -> str:
        """
        Render as ``?key=value&...``, or an empty string when nothing was added.

        None values have no query-string form and are skipped.
        """
        pairs = [
            f"{quote(str(key), safe='')}={quote(_query_value(value), safe='')}"
            for key, value in self._resolved().items()
            if value is not None
        ]
        if not pairs:
            return ''
        return '?' + '&'.join(pairs)

    def to_dict(self) -> Dict[str, Any]:
        return {key: serialize(value) for key, value in self._resolved().items()}

    def to_request_body(self) -> str:
        """Render as compact JSON text, e.g. ``{"name":"value"}``."""
        return json.dumps(self.to_dict(), separators=(',', ':'))


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ','.join(_query_value(item) for item in value)
    return str(value)
