# services package
from github_manager.services.base import GitHubManager
from github_manager.services.issue_comments import IssueCommentsManager
from github_manager.services.pages import PagesManager
from github_manager.services.projects import ProjectsManager
from github_manager.services.repositories import RepositoriesManager
from github_manager.services.tag_protection import TagProtectionManager
from github_manager.services.team_members import TeamMembersManager

__all__ = [
    'GitHubManager', 'IssueCommentsManager', 'PagesManager', 'ProjectsManager',
    'RepositoriesManager', 'TagProtectionManager', 'TeamMembersManager',
]
