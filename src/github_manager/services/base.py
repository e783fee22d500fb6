# src/github_manager/services/base.py
"""
Shared plumbing for the endpoint managers.

A manager owns no connection of its own: it is handed a GitHubRestAdapter
and several managers may share one. Each method builds a path and its
Params, performs one request and hands the body to response_format.
"""

import logging
from typing import Optional
from urllib.parse import quote

from github_manager.adapters.github_api import GitHubAPIError, GitHubRestAdapter
from github_manager.adapters.params import Params
from github_manager.config.settings import GitHubConfig

logger = logging.getLogger(__name__)


def segment(value) -> str:
    """Percent-escape a single path segment (owner, repo, slug, ...)."""
    return quote(str(value), safe='')


def paging(per_page: Optional[int] = None, page: Optional[int] = None,
           params: Optional[Params] = None) -> Params:
    params = params if params is not None else Params()
    params.add_optional('per_page', per_page)
    params.add_optional('page', page)
    return params


class GitHubManager:
    """Base class holding the adapter every endpoint method goes through."""

    def __init__(self, adapter: GitHubRestAdapter):
        self._adapter = adapter

    @classmethod
    def from_config(cls, config: GitHubConfig) -> 'GitHubManager':
        return cls(GitHubRestAdapter.from_config(config))

    @property
    def adapter(self) -> GitHubRestAdapter:
        return self._adapter

    def _get_text(self, path: str, params: Optional[Params] = None) -> str:
        return self._adapter.get(path, params=params).text

    def _void_request(
        self,
        method: str,
        path: str,
        body: Optional[Params] = None,
        success_status: int = 204
    ) -> bool:
        """
        Perform a request whose success carries no body.

        Returns:
            True when GitHub answered with success_status, False otherwise
            (API failures are logged, not raised)
        """
        try:
            response = self._adapter.request(method, path, body=body)
        except GitHubAPIError as e:
            logger.error(f"{method} {path} failed: {e}")
            return False
        if response.status_code != success_status:
            logger.warning(
                f"{method} {path} returned {response.status_code}, expected {success_status}"
            )
            return False
        return True
