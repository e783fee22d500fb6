# src/github_manager/services/team_members.py
"""Team member, team membership and pending invitation endpoints of an organization."""

from typing import Optional

from github_manager.adapters.params import Params
from github_manager.adapters.response_format import ReturnFormat, materialize, materialize_list
from github_manager.models.teams import TeamInvitation, TeamMemberRole, TeamMembership, TeamRole
from github_manager.models.user import User
from github_manager.services.base import GitHubManager, paging, segment


class TeamMembersManager(GitHubManager):

    @staticmethod
    def _team_path(org: str, team_slug: str) -> str:
        return f"/orgs/{segment(org)}/teams/{segment(team_slug)}"

    def list_team_members(
        self,
        org: str,
        team_slug: str,
        role: Optional[TeamMemberRole] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        params = Params().add_optional('role', role)
        paging(per_page, page, params)
        text = self._get_text(f"{self._team_path(org, team_slug)}/members", params)
        return materialize_list(text, fmt, User)

    def get_team_membership(self, org: str, team_slug: str, username: str,
                            fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        text = self._get_text(
            f"{self._team_path(org, team_slug)}/memberships/{segment(username)}"
        )
        return materialize(text, fmt, TeamMembership)

    def add_or_update_team_membership(
        self,
        org: str,
        team_slug: str,
        username: str,
        role: Optional[TeamRole] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Add a user to a team, or change the role of an existing member.

        Users outside the organization are invited first, so the returned
        membership may be in the PENDING state.
        """
        response = self._adapter.put(
            f"{self._team_path(org, team_slug)}/memberships/{segment(username)}",
            body=Params().add_optional('role', role)
        )
        return materialize(response.text, fmt, TeamMembership)

    def remove_team_membership(self, org: str, team_slug: str, username: str) -> bool:
        return self._void_request(
            'DELETE', f"{self._team_path(org, team_slug)}/memberships/{segment(username)}"
        )

    def list_pending_team_invitations(
        self,
        org: str,
        team_slug: str,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        List invitations to the team that have not been accepted yet.

        Args:
            org: Organization login
            team_slug: Team slug
            per_page: Page size (max 100)
            page: Page number
            fmt: Representation of the result

        Returns:
            List of TeamInvitation in GitHub's order
        """
        text = self._get_text(
            f"{self._team_path(org, team_slug)}/invitations", paging(per_page, page)
        )
        return materialize_list(text, fmt, TeamInvitation)
