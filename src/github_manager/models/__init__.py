# models package
from github_manager.models.base import (
    DecodingError,
    Direction,
    FieldReader,
    INVALID_TIMESTAMP,
    WireEnum,
    to_timestamp,
)
from github_manager.models.collections import GitHubList
from github_manager.models.issues import AuthorAssociation, CommentSort, GitHubApp, IssueComment, Reactions
from github_manager.models.license import CodeOfConduct, License
from github_manager.models.pages import (
    BuildType,
    HttpsCertificate,
    HttpsCertificateState,
    PagesBuild,
    PagesBuildStatus,
    PagesDeployment,
    PagesDomain,
    PagesHealthCheck,
    PagesSite,
    PagesSiteStatus,
    PagesSource,
    ProtectedDomainState,
)
from github_manager.models.projects import OrganizationPermission, Project, ProjectState
from github_manager.models.repository import (
    MergeCommitMessage,
    MergeCommitTitle,
    Permissions,
    RepoVisibility,
    Repository,
    RepositorySort,
    RepositoryType,
    SecurityAnalysis,
    SecurityAnalysisStatus,
    SquashMergeCommitMessage,
    SquashMergeCommitTitle,
)
from github_manager.models.repository_metadata import (
    CodeOwnersError,
    OrganizationRepositoriesList,
    RepositoryLanguages,
    RepositoryTag,
    ShaItem,
    TagProtection,
)
from github_manager.models.teams import (
    InvitationRole,
    InvitationSource,
    MembershipState,
    TeamInvitation,
    TeamMemberRole,
    TeamMembership,
    TeamRole,
)
from github_manager.models.user import User

__all__ = [
    'AuthorAssociation', 'BuildType', 'CodeOfConduct', 'CodeOwnersError', 'CommentSort',
    'DecodingError', 'Direction', 'FieldReader', 'GitHubApp', 'GitHubList',
    'HttpsCertificate', 'HttpsCertificateState', 'INVALID_TIMESTAMP', 'InvitationRole',
    'InvitationSource', 'IssueComment',
    'License', 'MembershipState', 'MergeCommitMessage', 'MergeCommitTitle',
    'OrganizationPermission', 'OrganizationRepositoriesList', 'PagesBuild',
    'PagesBuildStatus', 'PagesDeployment', 'PagesDomain',
    'PagesHealthCheck', 'PagesSite', 'PagesSiteStatus', 'PagesSource', 'Permissions',
    'Project', 'ProjectState', 'ProtectedDomainState', 'Reactions', 'RepoVisibility',
    'Repository', 'RepositoryLanguages', 'RepositorySort', 'RepositoryTag',
    'RepositoryType', 'SecurityAnalysis', 'SecurityAnalysisStatus', 'ShaItem',
    'SquashMergeCommitMessage', 'SquashMergeCommitTitle', 'TagProtection',
    'TeamInvitation', 'TeamMemberRole', 'TeamMembership', 'TeamRole', 'User', 'WireEnum',
    'to_timestamp',
]
