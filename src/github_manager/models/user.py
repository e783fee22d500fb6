# src/github_manager/models/user.py
"""
Simple user model embedded in most GitHub resources (owners, pushers,
creators, members).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from github_manager.models.base import Entity, FieldReader


@dataclass(frozen=True)
class User(Entity):
    """A GitHub account as it appears nested inside other resources."""
    login: Optional[str] = None
    id: int = 0
    node_id: Optional[str] = None
    avatar_url: Optional[str] = None
    gravatar_id: Optional[str] = None
    url: Optional[str] = None
    html_url: Optional[str] = None
    followers_url: Optional[str] = None
    following_url: Optional[str] = None
    gists_url: Optional[str] = None
    starred_url: Optional[str] = None
    subscriptions_url: Optional[str] = None
    organizations_url: Optional[str] = None
    repos_url: Optional[str] = None
    events_url: Optional[str] = None
    received_events_url: Optional[str] = None
    type: Optional[str] = None
    site_admin: bool = False

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'User':
        reader = FieldReader(data)
        return cls(
            login=reader.get_string('login'),
            id=reader.get_long('id'),
            node_id=reader.get_string('node_id'),
            avatar_url=reader.get_string('avatar_url'),
            gravatar_id=reader.get_string('gravatar_id'),
            url=reader.get_string('url'),
            html_url=reader.get_string('html_url'),
            followers_url=reader.get_string('followers_url'),
            following_url=reader.get_string('following_url'),
            gists_url=reader.get_string('gists_url'),
            starred_url=reader.get_string('starred_url'),
            subscriptions_url=reader.get_string('subscriptions_url'),
            organizations_url=reader.get_string('organizations_url'),
            repos_url=reader.get_string('repos_url'),
            events_url=reader.get_string('events_url'),
            received_events_url=reader.get_string('received_events_url'),
            type=reader.get_string('type'),
            site_admin=reader.get_boolean('site_admin')
        )

