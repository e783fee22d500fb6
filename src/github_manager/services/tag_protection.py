# src/github_manager/services/tag_protection.py
"""Tag protection states of a repository."""

from github_manager.adapters.params import Params
from github_manager.adapters.response_format import ReturnFormat, materialize, materialize_list
from github_manager.models.repository_metadata import TagProtection
from github_manager.services.base import GitHubManager, segment


class TagProtectionManager(GitHubManager):

    @staticmethod
    def _protection_path(owner: str, repo: str) -> str:
        return f"/repos/{segment(owner)}/{segment(repo)}/tags/protection"

    def list_tag_protections(self, owner: str, repo: str,
                             fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        text = self._get_text(self._protection_path(owner, repo))
        return materialize_list(text, fmt, TagProtection)

    def create_tag_protection(self, owner: str, repo: str, pattern: str,
                              fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        """
        Protect tags matching a pattern.

        Args:
            owner: Account owning the repository
            repo: Repository name
            pattern: fnmatch-style pattern, e.g. ``v1.*``
            fmt: Representation of the result

        Returns:
            The created TagProtection
        """
        response = self._adapter.post(
            self._protection_path(owner, repo), body=Params().add('pattern', pattern)
        )
        return materialize(response.text, fmt, TagProtection)

    def delete_tag_protection(self, owner: str, repo: str, tag_protection_id: int) -> bool:
        return self._void_request(
            'DELETE', f"{self._protection_path(owner, repo)}/{segment(tag_protection_id)}"
        )
