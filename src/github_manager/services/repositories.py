# src/github_manager/services/repositories.py
"""
Repository endpoints: single repositories, organization and user
listings, languages, tags, CODEOWNERS errors and the repositories an
organization enabled for GitHub Actions.
"""

from typing import Optional

from github_manager.adapters.params import Params
from github_manager.adapters.response_format import (
    ReturnFormat,
    materialize,
    materialize_collection,
    materialize_list,
)
from github_manager.models.base import Direction
from github_manager.models.repository import Repository, RepositorySort, RepositoryType
from github_manager.models.repository_metadata import (
    CodeOwnersError,
    OrganizationRepositoriesList,
    RepositoryLanguages,
    RepositoryTag,
)
from github_manager.services.base import GitHubManager, paging, segment


class RepositoriesManager(GitHubManager):

    def get_repository(self, owner: str, repo: str,
                       fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        """
        Get a repository.

        Args:
            owner: Account owning the repository
            repo: Repository name
            fmt: Representation of the result

        Returns:
            Repository (or the raw/parsed body, depending on fmt)
        """
        text = self._get_text(f"/repos/{segment(owner)}/{segment(repo)}")
        return materialize(text, fmt, Repository)

    def _list_repositories(
        self,
        path: str,
        repo_type: Optional[RepositoryType],
        sort: Optional[RepositorySort],
        direction: Optional[Direction],
        per_page: Optional[int],
        page: Optional[int],
        fmt: ReturnFormat
    ):
        params = Params()
        params.add_optional('type', repo_type)
        params.add_optional('sort', sort)
        params.add_optional('direction', direction)
        paging(per_page, page, params)
        text = self._get_text(path, params)
        return materialize_list(text, fmt, Repository)

    def list_organization_repositories(
        self,
        org: str,
        repo_type: Optional[RepositoryType] = None,
        sort: Optional[RepositorySort] = None,
        direction: Optional[Direction] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """List repositories of an organization, in the order GitHub returns them."""
        return self._list_repositories(
            f"/orgs/{segment(org)}/repos", repo_type, sort, direction, per_page, page, fmt
        )

    def list_user_repositories(
        self,
        username: str,
        repo_type: Optional[RepositoryType] = None,
        sort: Optional[RepositorySort] = None,
        direction: Optional[Direction] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        return self._list_repositories(
            f"/users/{segment(username)}/repos", repo_type, sort, direction, per_page, page, fmt
        )

    def get_repository_languages(self, owner: str, repo: str,
                                 fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        text = self._get_text(f"/repos/{segment(owner)}/{segment(repo)}/languages")
        return materialize(text, fmt, RepositoryLanguages)

    def list_repository_tags(
        self,
        owner: str,
        repo: str,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        text = self._get_text(
            f"/repos/{segment(owner)}/{segment(repo)}/tags", paging(per_page, page)
        )
        return materialize_list(text, fmt, RepositoryTag)

    def list_codeowners_errors(
        self,
        owner: str,
        repo: str,
        ref: Optional[str] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        List syntax errors in the repository's CODEOWNERS file.

        Args:
            owner: Account owning the repository
            repo: Repository name
            ref: Branch, tag or commit to check (default branch when omitted)
            fmt: Representation of the result

        Returns:
            List of CodeOwnersError, empty when the file is valid
        """
        params = Params().add_optional('ref', ref)
        text = self._get_text(
            f"/repos/{segment(owner)}/{segment(repo)}/codeowners/errors", params
        )
        return materialize_list(text, fmt, CodeOwnersError, items_key='errors')

    def list_actions_enabled_repositories(
        self,
        org: str,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """List repositories enabled for GitHub Actions in an organization."""
        text = self._get_text(
            f"/orgs/{segment(org)}/actions/permissions/repositories", paging(per_page, page)
        )
        return materialize_collection(
            text,
            fmt,
            Repository,
            items_key=OrganizationRepositoriesList.ITEMS_KEY,
            collection_cls=OrganizationRepositoriesList
        )
