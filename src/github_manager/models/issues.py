# src/github_manager/models/issues.py
"""
Issue comment model with its reactions summary and the GitHub App that
may have posted it.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from github_manager.models.base import Entity, FieldReader, WireEnum, to_timestamp
from github_manager.models.user import User


class AuthorAssociation(WireEnum):
    """How the author of a comment relates to the repository."""
    COLLABORATOR = 'COLLABORATOR'
    CONTRIBUTOR = 'CONTRIBUTOR'
    FIRST_TIMER = 'FIRST_TIMER'
    FIRST_TIME_CONTRIBUTOR = 'FIRST_TIME_CONTRIBUTOR'
    MANNEQUIN = 'MANNEQUIN'
    MEMBER = 'MEMBER'
    NONE = 'NONE'
    OWNER = 'OWNER'


class CommentSort(WireEnum):
    CREATED = 'created'
    UPDATED = 'updated'


@dataclass(frozen=True)
class Reactions(Entity):
    _wire_names: ClassVar[Dict[str, str]] = {'plus_one': '+1', 'minus_one': '-1'}

    url: Optional[str] = None
    total_count: int = 0
    plus_one: int = 0
    minus_one: int = 0
    laugh: int = 0
    confused: int = 0
    heart: int = 0
    hooray: int = 0
    eyes: int = 0
    rocket: int = 0

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'Reactions':
        reader = FieldReader(data)
        return cls(
            url=reader.get_string('url'),
            total_count=reader.get_int('total_count'),
            plus_one=reader.get_int('+1'),
            minus_one=reader.get_int('-1'),
            laugh=reader.get_int('laugh'),
            confused=reader.get_int('confused'),
            heart=reader.get_int('heart'),
            hooray=reader.get_int('hooray'),
            eyes=reader.get_int('eyes'),
            rocket=reader.get_int('rocket')
        )


@dataclass(frozen=True)
class GitHubApp(Entity):
    """Public view of a GitHub App; secrets are only returned at creation and are not kept."""
    id: int = 0
    slug: Optional[str] = None
    node_id: Optional[str] = None
    owner: Optional[User] = None
    name: Optional[str] = None
    description: Optional[str] = None
    external_url: Optional[str] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    permissions: Tuple[Tuple[str, str], ...] = ()
    events: Tuple[str, ...] = ()

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'GitHubApp':
        reader = FieldReader(data)
        permissions = reader.get_object('permissions') or {}
        return cls(
            id=reader.get_long('id'),
            slug=reader.get_string('slug'),
            node_id=reader.get_string('node_id'),
            owner=reader.get_nested('owner', User),
            name=reader.get_string('name'),
            description=reader.get_string('description'),
            external_url=reader.get_string('external_url'),
            html_url=reader.get_string('html_url'),
            created_at=reader.get_string('created_at'),
            updated_at=reader.get_string('updated_at'),
            permissions=tuple(
                (scope, level) for scope, level in permissions.items() if isinstance(level, str)
            ),
            events=reader.get_strings('events')
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload['permissions'] = dict(self.permissions)
        return payload


@dataclass(frozen=True)
class IssueComment(Entity):
    id: int = 0
    node_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    body: Optional[str] = None
    body_text: Optional[str] = None
    body_html: Optional[str] = None
    user: Optional[User] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    issue_url: Optional[str] = None
    author_association: Optional[AuthorAssociation] = None
    performed_via_github_app: Optional[GitHubApp] = None
    reactions: Optional[Reactions] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'IssueComment':
        reader = FieldReader(data)
        return cls(
            id=reader.get_long('id'),
            node_id=reader.get_string('node_id'),
            url=reader.get_string('url'),
            html_url=reader.get_string('html_url'),
            body=reader.get_string('body'),
            body_text=reader.get_string('body_text'),
            body_html=reader.get_string('body_html'),
            user=reader.get_nested('user', User),
            created_at=reader.get_string('created_at'),
            updated_at=reader.get_string('updated_at'),
            issue_url=reader.get_string('issue_url'),
            author_association=reader.get_enum('author_association', AuthorAssociation),
            performed_via_github_app=reader.get_nested('performed_via_github_app', GitHubApp),
            reactions=reader.get_nested('reactions', Reactions)
        )

    @property
    def created_at_timestamp(self) -> int:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int:
        return to_timestamp(self.updated_at)
