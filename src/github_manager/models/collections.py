# src/github_manager/models/collections.py
"""
Collection wrapper for paginated list responses.

GitHub reports how many entities exist in total next to the page it
returned, so total_count is read from the payload and never derived
from the number of items.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, Optional, Sequence, Tuple, TypeVar

from github_manager.models.base import FieldReader, serialize

T = TypeVar('T')


@dataclass(frozen=True)
class GitHubList(Generic[T]):
    """A single page of entities plus the total count GitHub declared."""
    total_count: int = 0
    items: Tuple[T, ...] = ()

    @classmethod
    def of(cls, items: Sequence[T], total_count: Optional[int] = None) -> 'GitHubList[T]':
        """Build a wrapper programmatically; total defaults to the page length."""
        items = tuple(items)
        if total_count is None:
            total_count = len(items)
        return cls(total_count=total_count, items=items)

    @classmethod
    def from_json(
        cls,
        data: Dict[str, Any],
        factory: Any,
        items_key: str = 'items'
    ) -> 'GitHubList[T]':
        """
        Decode a ``{"total_count": N, "<items_key>": [...]}`` payload.

        Args:
            data: Decoded JSON object
            factory: Entity class exposing from_json
            items_key: Key holding the page of entities

        Returns:
            GitHubList with the items in payload order
        """
        reader = FieldReader(data)
        return cls(
            total_count=reader.get_int('total_count', 0),
            items=reader.get_nested_list(items_key, factory)
        )

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self, items_key: str = 'items') -> Dict[str, Any]:
        return {'total_count': self.total_count, items_key: serialize(self.items)}
