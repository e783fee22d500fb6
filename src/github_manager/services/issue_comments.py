# src/github_manager/services/issue_comments.py
"""
Issue comment endpoints. Pull request conversation comments are issue
comments too, so these methods cover both.
"""

from typing import Optional

from github_manager.adapters.params import Params
from github_manager.adapters.response_format import ReturnFormat, materialize, materialize_list
from github_manager.models.base import Direction
from github_manager.models.issues import CommentSort, IssueComment
from github_manager.services.base import GitHubManager, paging, segment


class IssueCommentsManager(GitHubManager):

    @staticmethod
    def _repo_path(owner: str, repo: str) -> str:
        return f"/repos/{segment(owner)}/{segment(repo)}"

    def list_repository_comments(
        self,
        owner: str,
        repo: str,
        sort: Optional[CommentSort] = None,
        direction: Optional[Direction] = None,
        since: Optional[str] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        """
        List comments on every issue and pull request of a repository.

        Args:
            owner: Account owning the repository
            repo: Repository name
            sort: Order by creation or update time
            direction: Ignored by GitHub unless sort is given
            since: ISO-8601 timestamp; only comments updated at or after it
            per_page: Page size (max 100)
            page: Page number
            fmt: Representation of the result

        Returns:
            List of IssueComment in GitHub's order
        """
        params = Params()
        params.add_optional('sort', sort)
        params.add_optional('direction', direction)
        params.add_optional('since', since)
        paging(per_page, page, params)
        text = self._get_text(f"{self._repo_path(owner, repo)}/issues/comments", params)
        return materialize_list(text, fmt, IssueComment)

    def get_comment(self, owner: str, repo: str, comment_id: int,
                    fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        text = self._get_text(
            f"{self._repo_path(owner, repo)}/issues/comments/{segment(comment_id)}"
        )
        return materialize(text, fmt, IssueComment)

    def update_comment(self, owner: str, repo: str, comment_id: int, body: str,
                       fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        response = self._adapter.patch(
            f"{self._repo_path(owner, repo)}/issues/comments/{segment(comment_id)}",
            body=Params().add('body', body)
        )
        return materialize(response.text, fmt, IssueComment)

    def delete_comment(self, owner: str, repo: str, comment_id: int) -> bool:
        return self._void_request(
            'DELETE', f"{self._repo_path(owner, repo)}/issues/comments/{segment(comment_id)}"
        )

    def list_issue_comments(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        since: Optional[str] = None,
        per_page: Optional[int] = None,
        page: Optional[int] = None,
        fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT
    ):
        params = Params().add_optional('since', since)
        paging(per_page, page, params)
        text = self._get_text(
            f"{self._repo_path(owner, repo)}/issues/{segment(issue_number)}/comments", params
        )
        return materialize_list(text, fmt, IssueComment)

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str,
                       fmt: ReturnFormat = ReturnFormat.LIBRARY_OBJECT):
        response = self._adapter.post(
            f"{self._repo_path(owner, repo)}/issues/{segment(issue_number)}/comments",
            body=Params().add('body', body)
        )
        return materialize(response.text, fmt, IssueComment)
