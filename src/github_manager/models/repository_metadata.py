# src/github_manager/models/repository_metadata.py
"""
Smaller repository resources: languages, tags, tag protections,
CODEOWNERS errors and the Actions-enabled repository page.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

from github_manager.models.base import Entity, FieldReader, to_timestamp
from github_manager.models.collections import GitHubList
from github_manager.models.repository import Repository


@dataclass(frozen=True)
class ShaItem(Entity):
    sha: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'ShaItem':
        reader = FieldReader(data)
        return cls(sha=reader.get_string('sha'), url=reader.get_string('url'))


@dataclass(frozen=True)
class RepositoryTag(Entity):
    name: Optional[str] = None
    commit: Optional[ShaItem] = None
    zipball_url: Optional[str] = None
    tarball_url: Optional[str] = None
    node_id: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'RepositoryTag':
        reader = FieldReader(data)
        return cls(
            name=reader.get_string('name'),
            commit=reader.get_nested('commit', ShaItem),
            zipball_url=reader.get_string('zipball_url'),
            tarball_url=reader.get_string('tarball_url'),
            node_id=reader.get_string('node_id')
        )


@dataclass(frozen=True)
class RepositoryLanguages:
    """
    Bytes of code per language, as reported by the languages endpoint.

    The payload is a bare ``{"Python": 1024, ...}`` object with no id.
    Lookups ignore case, the original spelling is kept for display.
    """
    languages: Tuple[Tuple[str, int], ...] = ()
    _index: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        for language, size in self.languages:
            self._index[language.lower()] = size

    @classmethod
    def of(cls, languages: Sequence[str], sizes: Sequence[int]) -> 'RepositoryLanguages':
        """
        Build from parallel sequences of language names and byte counts.

        Raises:
            ValueError: If the two sequences differ in length
        """
        if len(languages) != len(sizes):
            raise ValueError("Every language needs exactly one byte count")
        return cls(languages=tuple(zip(languages, sizes)))

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'RepositoryLanguages':
        reader = FieldReader(data)
        return cls(
            languages=tuple((language, reader.get_int(language)) for language in reader.raw)
        )

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(language for language, _ in self.languages)

    @property
    def total_bytes(self) -> int:
        return sum(size for _, size in self.languages)

    def get_language_bytes(self, language: str) -> Optional[int]:
        return self._index.get(language.lower())

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and language.lower() in self._index

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self.languages)

    def __len__(self) -> int:
        return len(self.languages)

    def to_dict(self) -> Dict[str, int]:
        return dict(self.languages)


@dataclass(frozen=True)
class CodeOwnersError(Entity):
    """A syntax error GitHub found in a CODEOWNERS file."""
    line: int = 0
    column: int = 0
    source: Optional[str] = None
    kind: Optional[str] = None
    suggestion: Optional[str] = None
    message: Optional[str] = None
    path: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'CodeOwnersError':
        reader = FieldReader(data)
        return cls(
            line=reader.get_int('line'),
            column=reader.get_int('column'),
            source=reader.get_string('source'),
            kind=reader.get_string('kind'),
            suggestion=reader.get_string('suggestion'),
            message=reader.get_string('message'),
            path=reader.get_string('path')
        )


@dataclass(frozen=True)
class TagProtection(Entity):
    id: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    enabled: bool = False
    pattern: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'TagProtection':
        reader = FieldReader(data)
        return cls(
            id=reader.get_long('id'),
            created_at=reader.get_string('created_at'),
            updated_at=reader.get_string('updated_at'),
            enabled=reader.get_boolean('enabled'),
            pattern=reader.get_string('pattern')
        )

    @property
    def created_at_timestamp(self) -> int:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int:
        return to_timestamp(self.updated_at)


class OrganizationRepositoriesList(GitHubList[Repository]):
    """Page of repositories an organization enabled for GitHub Actions."""

    ITEMS_KEY = 'repositories'

    @classmethod
    def from_json(
        cls,
        data: Dict[str, Any],
        factory: Any = Repository,
        items_key: str = ITEMS_KEY
    ) -> 'OrganizationRepositoriesList':
        return super().from_json(data, factory, items_key)

    @property
    def repositories(self) -> Tuple[Repository, ...]:
        return self.items

    def to_dict(self, items_key: str = ITEMS_KEY) -> Dict[str, Any]:
        return super().to_dict(items_key)

