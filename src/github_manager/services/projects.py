# src/github_manager/services/projects.py
"""
Classic project board endpoints for repositories, organizations and users.
"""

from typing import Optional

from github_manager.adapters.params import Params
from github_manager.adapters.response_format import ReturnFormat, materialize, materialize_list
from github_manager.models.projects import OrganizationPermission, Project, ProjectState
from github_manager.services.base import GitHubManager, paging, segment


class ProjectsManager(GitHubManager):

    def _list_projects(self, path: str, state: Optional[ProjectState],
                       per_page: Optional[int], page: Optional[int], fmt: ReturnFormat):
        params = Params().add_optional('state', state)
        paging(per_page, page, params)
        return materialize_list(self._get_text(path, params), fmt, Project)

    def _create_project(self, path: str, name: str, body: Optional[str], fmt: ReturnFormat):
        payload = Params().add('name', name).add_optional('body', body)
        response = self._adapter.post(path, body=payload)
        return materialize(response.text, fmt, Project)

    def list_repository_projects(
        self,
        owner: str,
        repo: str,
        state: Optional[ProjectState] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        return self._list_projects(
            f"/repos/{segment(owner)}/{segment(repo)}/projects", state, per_page, page, fmt
        )

    def list_organization_projects(
        self,
        org: str,
        state: Optional[ProjectState] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        return self._list_projects(f"/orgs/{segment(org)}/projects", state, per_page, page, fmt)

    def list_user_projects(
        self,
        username: str,
        state: Optional[ProjectState] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        return self._list_projects(
            f"/users/{segment(username)}/projects", state, per_page, page, fmt
        )

    def create_repository_project(self, owner: str, repo: str, name: str,
                                  body: Optional[str] = None,
                                  fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        return self._create_project(
            f"/repos/{segment(owner)}/{segment(repo)}/projects", name, body, fmt
        )

    def create_organization_project(self, org: str, name: str, body: Optional[str] = None,
                                    fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        return self._create_project(f"/orgs/{segment(org)}/projects", name, body, fmt)

    def create_user_project(self, name: str, body: Optional[str] = None,
                            fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        """Create a project board owned by the authenticated user."""
        return self._create_project('/user/projects', name, body, fmt)

    def get_project(self, project_id: int, fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        return materialize(self._get_text(f"/projects/{segment(project_id)}"), fmt, Project)

    def update_project(
        self,
        project_id: int,
        name: Optional[str] = None,
        body: Optional[str] = None,
        state: Optional[ProjectState] = None,
        organization_permission: Optional[OrganizationPermission] = None,
        private: Optional[bool] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Update a project board; only the arguments given are sent.

        Args:
            project_id: Project identifier
            name: New name
            body: New description
            state: OPEN or CLOSED
            organization_permission: Baseline permission of organization members
            private: Visibility of an organization project
            fmt: Representation of the result

        Returns:
            The updated Project
        """
        payload = Params()
        payload.add_optional('name', name)
        payload.add_optional('body', body)
        payload.add_optional('state', state)
        payload.add_optional('organization_permission', organization_permission)
        payload.add_optional('private', private)
        response = self._adapter.patch(f"/projects/{segment(project_id)}", body=payload)
        return materialize(response.text, fmt, Project)

    def delete_project(self, project_id: int) -> bool:
        return self._void_request('DELETE', f"/projects/{segment(project_id)}")
