# src/github_manager/services/pages.py
"""
GitHub Pages endpoints under ``/repos/{owner}/{repo}/pages``.
"""

from typing import Any, Optional

from github_manager.adapters.params import Params, UNSET
from github_manager.adapters.response_format import ReturnFormat, materialize, materialize_list
from github_manager.models.pages import (
    BuildType,
    PagesBuild,
    PagesDeployment,
    PagesHealthCheck,
    PagesSite,
    PagesSource,
)
from github_manager.services.base import GitHubManager, paging, segment


class PagesManager(GitHubManager):

    @staticmethod
    def _pages_path(owner: str, repo: str, suffix: str = '') -> str:
        return f"/repos/{segment(owner)}/{segment(repo)}/pages{suffix}"

    def get_pages_site(self, owner: str, repo: str,
                       fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        return materialize(self._get_text(self._pages_path(owner, repo)), fmt, PagesSite)

    def create_pages_site(
        self,
        owner: str,
        repo: str,
        source: Optional[PagesSource] = None,
        build_type: Optional[BuildType] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Enable GitHub Pages for a repository.

        Args:
            owner: Account owning the repository
            repo: Repository name
            source: Branch and folder to publish (required for legacy builds)
            build_type: Workflow or legacy (branch) builds
            fmt: Representation of the result

        Returns:
            The created PagesSite
        """
        body = Params()
        body.add_optional('build_type', build_type)
        body.add_optional('source', source)
        response = self._adapter.post(self._pages_path(owner, repo), body=body)
        return materialize(response.text, fmt, PagesSite)

    def update_pages_site(
        self,
        owner: str,
        repo: str,
        cname: Any = UNSET,
        https_enforced: Optional[bool] = None,
        build_type: Optional[BuildType] = None,
        source: Optional[PagesSource] = None
    ) -> bool:
        """
        Update the Pages site configuration.

        Pass ``cname=None`` to remove the custom domain; leaving cname
        out keeps the current one.

        Returns:
            True if GitHub accepted the update (204), False otherwise
        """
        body = Params()
        if cname is not UNSET:
            body.add('cname', cname)
        body.add_optional('https_enforced', https_enforced)
        body.add_optional('build_type', build_type)
        body.add_optional('source', source)
        return self._void_request('PUT', self._pages_path(owner, repo), body=body)

    def delete_pages_site(self, owner: str, repo: str) -> bool:
        return self._void_request('DELETE', self._pages_path(owner, repo))

    def list_pages_builds(
        self,
        owner: str,
        repo: str,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        text = self._get_text(self._pages_path(owner, repo, '/builds'), paging(per_page, page))
        return materialize_list(text, fmt, PagesBuild)

    def request_pages_build(self, owner: str, repo: str,
                            fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        """Queue a build from the latest revision; GitHub only reports url and status."""
        response = self._adapter.post(self._pages_path(owner, repo, '/builds'))
        return materialize(response.text, fmt, PagesBuild)

    def get_latest_pages_build(self, owner: str, repo: str,
                               fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        text = self._get_text(self._pages_path(owner, repo, '/builds/latest'))
        return materialize(text, fmt, PagesBuild)

    def get_pages_build(self, owner: str, repo: str, build_id: int,
                        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        text = self._get_text(self._pages_path(owner, repo, f'/builds/{segment(build_id)}'))
        return materialize(text, fmt, PagesBuild)

    def create_pages_deployment(
        self,
        owner: str,
        repo: str,
        artifact_url: str,
        pages_build_version: str,
        oidc_token: str,
        environment: Optional[str] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        Deploy a Pages artifact built by a workflow.

        Args:
            owner: Account owning the repository
            repo: Repository name
            artifact_url: URL of the uploaded artifact
            pages_build_version: Commit SHA or other unique build identifier
            oidc_token: OIDC token issued by GitHub Actions
            environment: Target environment (GitHub defaults to github-pages)
            fmt: Representation of the result

        Returns:
            PagesDeployment with the status and page urls
        """
        body = Params()
        body.add('artifact_url', artifact_url)
        body.add_optional('environment', environment)
        body.add('pages_build_version', pages_build_version)
        body.add('oidc_token', oidc_token)
        response = self._adapter.post(self._pages_path(owner, repo, '/deployment'), body=body)
        return materialize(response.text, fmt, PagesDeployment)

    def get_dns_health_check(self, owner: str, repo: str,
                             fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        """
        Get the DNS health check of the custom domain.

        GitHub answers 202 with an empty object while the check is still
        running; that decodes into a PagesHealthCheck without domains.
        """
        text = self._get_text(self._pages_path(owner, repo, '/health'))
        return materialize(text or '{}', fmt, PagesHealthCheck)
