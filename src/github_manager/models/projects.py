# src/github_manager/models/projects.py
"""
Project board model (classic projects).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from github_manager.models.base import Entity, FieldReader, WireEnum, to_timestamp
from github_manager.models.user import User


class ProjectState(WireEnum):
    """State of a project; ALL is only meaningful as a list filter."""
    OPEN = 'open'
    CLOSED = 'closed'
    ALL = 'all'


class OrganizationPermission(WireEnum):
    READ = 'read'
    WRITE = 'write'
    ADMIN = 'admin'
    NONE = 'none'


@dataclass(frozen=True)
class Project(Entity):
    """
    A classic project board owned by a repository, organization or user.

    organization_permission and private are only reported for
    organization projects.
    """
    id: int = 0
    url: Optional[str] = None
    node_id: Optional[str] = None
    creator: Optional[User] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    name: Optional[str] = None
    owner_url: Optional[str] = None
    html_url: Optional[str] = None
    columns_url: Optional[str] = None
    body: Optional[str] = None
    number: int = 0
    state: Optional[ProjectState] = None
    organization_permission: Optional[OrganizationPermission] = None
    private: bool = False

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'Project':
        reader = FieldReader(data)
        return cls(
            id=reader.get_long('id'),
            url=reader.get_string('url'),
            node_id=reader.get_string('node_id'),
            creator=reader.get_nested('creator', User),
            created_at=reader.get_string('created_at'),
            updated_at=reader.get_string('updated_at'),
            name=reader.get_string('name'),
            owner_url=reader.get_string('owner_url'),
            html_url=reader.get_string('html_url'),
            columns_url=reader.get_string('columns_url'),
            body=reader.get_string('body'),
            number=reader.get_int('number'),
            state=reader.get_enum('state', ProjectState),
            organization_permission=reader.get_enum(
                'organization_permission', OrganizationPermission
            ),
            private=reader.get_boolean('private')
        )

    @property
    def created_at_timestamp(self) -> int:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int:
        return to_timestamp(self.updated_at)
