# src/github_manager/models/teams.py
"""Team membership and pending invitation models."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from github_manager.models.base import Entity, FieldReader, WireEnum, to_timestamp
from github_manager.models.user import User


class TeamRole(WireEnum):
    MEMBER = 'member'
    MAINTAINER = 'maintainer'


class TeamMemberRole(WireEnum):
    """Role filter for listing team members."""
    MEMBER = 'member'
    MAINTAINER = 'maintainer'
    ALL = 'all'


class MembershipState(WireEnum):
    ACTIVE = 'active'
    PENDING = 'pending'


class InvitationRole(WireEnum):
    """Organization role the invitee receives on acceptance."""
    ADMIN = 'admin'
    DIRECT_MEMBER = 'direct_member'
    BILLING_MANAGER = 'billing_manager'
    HIRING_MANAGER = 'hiring_manager'
    REINSTATE = 'reinstate'


class InvitationSource(WireEnum):
    UNKNOWN = 'unknown'
    MEMBER = 'member'
    SCIM = 'scim'


@dataclass(frozen=True)
class TeamMembership(Entity):
    url: Optional[str] = None
    role: Optional[TeamRole] = None
    state: Optional[MembershipState] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'TeamMembership':
        reader = FieldReader(data)
        return cls(
            url=reader.get_string('url'),
            role=reader.get_enum('role', TeamRole),
            state=reader.get_enum('state', MembershipState)
        )

    @property
    def is_pending(self) -> bool:
        return self.state is MembershipState.PENDING


@dataclass(frozen=True)
class TeamInvitation(Entity):
    """
    An invitation to join an organization that is still waiting for an answer.

    login is None when the invitation was sent to an email address.
    """
    id: int = 0
    node_id: Optional[str] = None
    login: Optional[str] = None
    email: Optional[str] = None
    role: Optional[InvitationRole] = None
    created_at: Optional[str] = None
    failed_at: Optional[str] = None
    failed_reason: Optional[str] = None
    inviter: Optional[User] = None
    team_count: int = 0
    invitation_teams_url: Optional[str] = None
    invitation_source: Optional[InvitationSource] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'TeamInvitation':
        reader = FieldReader(data)
        return cls(
            id=reader.get_long('id'),
            node_id=reader.get_string('node_id'),
            login=reader.get_string('login'),
            email=reader.get_string('email'),
            role=reader.get_enum('role', InvitationRole),
            created_at=reader.get_string('created_at'),
            failed_at=reader.get_string('failed_at'),
            failed_reason=reader.get_string('failed_reason'),
            inviter=reader.get_nested('inviter', User),
            team_count=reader.get_int('team_count'),
            invitation_teams_url=reader.get_string('invitation_teams_url'),
            invitation_source=reader.get_enum('invitation_source', InvitationSource)
        )

    @property
    def created_at_timestamp(self) -> int:
        return to_timestamp(self.created_at)

    @property
    def failed_at_timestamp(self) -> int:
        return to_timestamp(self.failed_at)
