# src/github_manager/models/repository.py
"""
Immutable repository model and the enums that describe repository state.

Repository is the largest entity GitHub returns and the only one that
embeds itself: template_repository, parent and source are Repositories
decoded with the same factory. GitHub only ever inlines a partial copy,
so the recursion ends after one level in practice.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from github_manager.models.base import Entity, FieldReader, WireEnum, to_timestamp
from github_manager.models.license import CodeOfConduct, License
from github_manager.models.user import User


class RepoVisibility(WireEnum):
    PUBLIC = 'public'
    PRIVATE = 'private'
    INTERNAL = 'internal'


class RepositoryType(WireEnum):
    """Filter accepted by the organization and user repository listings."""
    ALL = 'all'
    PUBLIC = 'public'
    PRIVATE = 'private'
    FORKS = 'forks'
    SOURCES = 'sources'
    MEMBER = 'member'
    OWNER = 'owner'


class RepositorySort(WireEnum):
    CREATED = 'created'
    UPDATED = 'updated'
    PUSHED = 'pushed'
    FULL_NAME = 'full_name'


class SquashMergeCommitTitle(WireEnum):
    PR_TITLE = 'PR_TITLE'
    COMMIT_OR_PR_TITLE = 'COMMIT_OR_PR_TITLE'


class SquashMergeCommitMessage(WireEnum):
    PR_BODY = 'PR_BODY'
    COMMIT_MESSAGES = 'COMMIT_MESSAGES'
    BLANK = 'BLANK'


class MergeCommitTitle(WireEnum):
    PR_TITLE = 'PR_TITLE'
    MERGE_MESSAGE = 'MERGE_MESSAGE'


class MergeCommitMessage(WireEnum):
    PR_BODY = 'PR_BODY'
    PR_TITLE = 'PR_TITLE'
    BLANK = 'BLANK'


class SecurityAnalysisStatus(WireEnum):
    ENABLED = 'enabled'
    DISABLED = 'disabled'


@dataclass(frozen=True)
class Permissions(Entity):
    """Permissions the authenticated user holds on a repository."""
    admin: bool = False
    maintain: bool = False
    push: bool = False
    triage: bool = False
    pull: bool = False

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'Permissions':
        reader = FieldReader(data)
        return cls(
            admin=reader.get_boolean('admin'),
            maintain=reader.get_boolean('maintain'),
            push=reader.get_boolean('push'),
            triage=reader.get_boolean('triage'),
            pull=reader.get_boolean('pull')
        )


@dataclass(frozen=True)
class SecurityAnalysis(Entity):
    """
    Security and analysis settings of a repository.

    Each feature is wrapped on the wire as ``{"status": "enabled"}``; a
    feature GitHub did not report stays None.
    """
    advanced_security: Optional[SecurityAnalysisStatus] = None
    secret_scanning: Optional[SecurityAnalysisStatus] = None
    secret_scanning_push_protection: Optional[SecurityAnalysisStatus] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'SecurityAnalysis':
        reader = FieldReader(data)
        return cls(
            advanced_security=cls._read_status(reader, 'advanced_security'),
            secret_scanning=cls._read_status(reader, 'secret_scanning'),
            secret_scanning_push_protection=cls._read_status(
                reader, 'secret_scanning_push_protection'
            )
        )

    @staticmethod
    def _read_status(reader: FieldReader, key: str) -> Optional[SecurityAnalysisStatus]:
        feature = reader.get_object(key)
        if feature is None:
            return None
        return FieldReader(feature).get_enum('status', SecurityAnalysisStatus)

    def to_dict(self) -> Dict[str, Any]:
        payload = {}
        for key in ('advanced_security', 'secret_scanning', 'secret_scanning_push_protection'):
            status = getattr(self, key)
            if status is not None:
                payload[key] = {'status': status.value}
        return payload


@dataclass(frozen=True)
class Repository(Entity):
    """
    A GitHub repository - immutable data transfer object.

    Timestamps keep the raw ISO-8601 string; the *_timestamp properties
    expose them as epoch milliseconds.
    """
    id: int = 0
    node_id: Optional[str] = None
    name: Optional[str] = None
    full_name: Optional[str] = None
    owner: Optional[User] = None
    private: bool = False
    html_url: Optional[str] = None
    description: Optional[str] = None
    fork: bool = False
    url: Optional[str] = None
    archive_url: Optional[str] = None
    assignees_url: Optional[str] = None
    blobs_url: Optional[str] = None
    branches_url: Optional[str] = None
    collaborators_url: Optional[str] = None
    comments_url: Optional[str] = None
    commits_url: Optional[str] = None
    compare_url: Optional[str] = None
    contents_url: Optional[str] = None
    contributors_url: Optional[str] = None
    deployments_url: Optional[str] = None
    downloads_url: Optional[str] = None
    events_url: Optional[str] = None
    forks_url: Optional[str] = None
    git_commits_url: Optional[str] = None
    git_refs_url: Optional[str] = None
    git_tags_url: Optional[str] = None
    git_url: Optional[str] = None
    issue_comment_url: Optional[str] = None
    issue_events_url: Optional[str] = None
    issues_url: Optional[str] = None
    keys_url: Optional[str] = None
    labels_url: Optional[str] = None
    languages_url: Optional[str] = None
    merges_url: Optional[str] = None
    milestones_url: Optional[str] = None
    notifications_url: Optional[str] = None
    pulls_url: Optional[str] = None
    releases_url: Optional[str] = None
    ssh_url: Optional[str] = None
    stargazers_url: Optional[str] = None
    statuses_url: Optional[str] = None
    subscribers_url: Optional[str] = None
    subscription_url: Optional[str] = None
    tags_url: Optional[str] = None
    teams_url: Optional[str] = None
    trees_url: Optional[str] = None
    clone_url: Optional[str] = None
    mirror_url: Optional[str] = None
    hooks_url: Optional[str] = None
    svn_url: Optional[str] = None
    homepage: Optional[str] = None
    language: Optional[str] = None
    forks_count: int = 0
    stargazers_count: int = 0
    watchers_count: int = 0
    size: int = 0
    default_branch: Optional[str] = None
    open_issues_count: int = 0
    is_template: bool = False
    template_repository: Optional['Repository'] = None
    topics: Tuple[str, ...] = ()
    has_issues: bool = False
    has_projects: bool = False
    has_wiki: bool = False
    has_pages: bool = False
    has_downloads: bool = False
    archived: bool = False
    disabled: bool = False
    visibility: Optional[RepoVisibility] = None
    pushed_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    permissions: Optional[Permissions] = None
    allow_rebase_merge: bool = False
    temp_clone_token: Optional[str] = None
    allow_squash_merge: bool = False
    allow_auto_merge: bool = False
    delete_branch_on_merge: bool = False
    allow_merge_commit: bool = False
    allow_update_branch: bool = False
    use_squash_pr_title_as_default: bool = False
    squash_merge_commit_title: Optional[SquashMergeCommitTitle] = None
    squash_merge_commit_message: Optional[SquashMergeCommitMessage] = None
    merge_commit_title: Optional[MergeCommitTitle] = None
    merge_commit_message: Optional[MergeCommitMessage] = None
    allow_forking: bool = False
    web_commit_signoff_required: bool = False
    subscribers_count: int = 0
    network_count: int = 0
    license: Optional[License] = None
    forks: int = 0
    open_issues: int = 0
    watchers: int = 0
    master_branch: Optional[str] = None
    starred_at: Optional[str] = None
    anonymous_access_enabled: bool = False
    organization: Optional[User] = None
    parent: Optional['Repository'] = None
    source: Optional['Repository'] = None
    code_of_conduct: Optional[CodeOfConduct] = None
    security_and_analysis: Optional[SecurityAnalysis] = None

    def __post_init__(self):
        # Older payloads and partial nested copies omit visibility
        if self.visibility is None:
            derived = RepoVisibility.PRIVATE if self.private else RepoVisibility.PUBLIC
            object.__setattr__(self, 'visibility', derived)

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'Repository':
        """
        Factory method to create a Repository from a REST API response.

        Args:
            data: Decoded repository object (full or partial)

        Returns:
            Repository instance; absent fields keep their defaults

        Raises:
            DecodingError: If an enum-valued field holds an unknown value
        """
        reader = FieldReader(data)
        return cls(
            id=reader.get_long('id'),
            node_id=reader.get_string('node_id'),
            name=reader.get_string('name'),
            full_name=reader.get_string('full_name'),
            owner=reader.get_nested('owner', User),
            private=reader.get_boolean('private'),
            html_url=reader.get_string('html_url'),
            description=reader.get_string('description'),
            fork=reader.get_boolean('fork'),
            url=reader.get_string('url'),
            archive_url=reader.get_string('archive_url'),
            assignees_url=reader.get_string('assignees_url'),
            blobs_url=reader.get_string('blobs_url'),
            branches_url=reader.get_string('branches_url'),
            collaborators_url=reader.get_string('collaborators_url'),
            comments_url=reader.get_string('comments_url'),
            commits_url=reader.get_string('commits_url'),
            compare_url=reader.get_string('compare_url'),
            contents_url=reader.get_string('contents_url'),
            contributors_url=reader.get_string('contributors_url'),
            deployments_url=reader.get_string('deployments_url'),
            downloads_url=reader.get_string('downloads_url'),
            events_url=reader.get_string('events_url'),
            forks_url=reader.get_string('forks_url'),
            git_commits_url=reader.get_string('git_commits_url'),
            git_refs_url=reader.get_string('git_refs_url'),
            git_tags_url=reader.get_string('git_tags_url'),
            git_url=reader.get_string('git_url'),
            issue_comment_url=reader.get_string('issue_comment_url'),
            issue_events_url=reader.get_string('issue_events_url'),
            issues_url=reader.get_string('issues_url'),
            keys_url=reader.get_string('keys_url'),
            labels_url=reader.get_string('labels_url'),
            languages_url=reader.get_string('languages_url'),
            merges_url=reader.get_string('merges_url'),
            milestones_url=reader.get_string('milestones_url'),
            notifications_url=reader.get_string('notifications_url'),
            pulls_url=reader.get_string('pulls_url'),
            releases_url=reader.get_string('releases_url'),
            ssh_url=reader.get_string('ssh_url'),
            stargazers_url=reader.get_string('stargazers_url'),
            statuses_url=reader.get_string('statuses_url'),
            subscribers_url=reader.get_string('subscribers_url'),
            subscription_url=reader.get_string('subscription_url'),
            tags_url=reader.get_string('tags_url'),
            teams_url=reader.get_string('teams_url'),
            trees_url=reader.get_string('trees_url'),
            clone_url=reader.get_string('clone_url'),
            mirror_url=reader.get_string('mirror_url'),
            hooks_url=reader.get_string('hooks_url'),
            svn_url=reader.get_string('svn_url'),
            homepage=reader.get_string('homepage'),
            language=reader.get_string('language'),
            forks_count=reader.get_int('forks_count'),
            stargazers_count=reader.get_int('stargazers_count'),
            watchers_count=reader.get_int('watchers_count'),
            size=reader.get_int('size'),
            default_branch=reader.get_string('default_branch'),
            open_issues_count=reader.get_int('open_issues_count'),
            is_template=reader.get_boolean('is_template'),
            template_repository=reader.get_nested('template_repository', cls),
            topics=reader.get_strings('topics'),
            has_issues=reader.get_boolean('has_issues'),
            has_projects=reader.get_boolean('has_projects'),
            has_wiki=reader.get_boolean('has_wiki'),
            has_pages=reader.get_boolean('has_pages'),
            has_downloads=reader.get_boolean('has_downloads'),
            archived=reader.get_boolean('archived'),
            disabled=reader.get_boolean('disabled'),
            visibility=reader.get_enum('visibility', RepoVisibility),
            pushed_at=reader.get_string('pushed_at'),
            created_at=reader.get_string('created_at'),
            updated_at=reader.get_string('updated_at'),
            permissions=reader.get_nested('permissions', Permissions),
            allow_rebase_merge=reader.get_boolean('allow_rebase_merge'),
            temp_clone_token=reader.get_string('temp_clone_token'),
            allow_squash_merge=reader.get_boolean('allow_squash_merge'),
            allow_auto_merge=reader.get_boolean('allow_auto_merge'),
            delete_branch_on_merge=reader.get_boolean('delete_branch_on_merge'),
            allow_merge_commit=reader.get_boolean('allow_merge_commit'),
            allow_update_branch=reader.get_boolean('allow_update_branch'),
            use_squash_pr_title_as_default=reader.get_boolean('use_squash_pr_title_as_default'),
            squash_merge_commit_title=reader.get_enum(
                'squash_merge_commit_title', SquashMergeCommitTitle
            ),
            squash_merge_commit_message=reader.get_enum(
                'squash_merge_commit_message', SquashMergeCommitMessage
            ),
            merge_commit_title=reader.get_enum('merge_commit_title', MergeCommitTitle),
            merge_commit_message=reader.get_enum('merge_commit_message', MergeCommitMessage),
            allow_forking=reader.get_boolean('allow_forking'),
            web_commit_signoff_required=reader.get_boolean('web_commit_signoff_required'),
            subscribers_count=reader.get_int('subscribers_count'),
            network_count=reader.get_int('network_count'),
            license=reader.get_nested('license', License),
            forks=reader.get_int('forks'),
            open_issues=reader.get_int('open_issues'),
            watchers=reader.get_int('watchers'),
            master_branch=reader.get_string('master_branch'),
            starred_at=reader.get_string('starred_at'),
            anonymous_access_enabled=reader.get_boolean('anonymous_access_enabled'),
            organization=reader.get_nested('organization', User),
            parent=reader.get_nested('parent', cls),
            source=reader.get_nested('source', cls),
            code_of_conduct=reader.get_nested('code_of_conduct', CodeOfConduct),
            security_and_analysis=reader.get_nested('security_and_analysis', SecurityAnalysis)
        )

    @property
    def owner_login(self) -> Optional[str]:
        if self.owner is not None:
            return self.owner.login
        if self.full_name and '/' in self.full_name:
            return self.full_name.split('/', 1)[0]
        return None

    @property
    def created_at_timestamp(self) -> int:
        return to_timestamp(self.created_at)

    @property
    def updated_at_timestamp(self) -> int:
        return to_timestamp(self.updated_at)

    @property
    def pushed_at_timestamp(self) -> int:
        return to_timestamp(self.pushed_at)


def split_full_name(full_name: str) -> Tuple[str, str]:
    """
    Split ``owner/name`` into its two parts.

    Raises:
        ValueError: If the value is not of the form owner/name
    """
    owner, sep, name = full_name.partition('/')
    if not sep or not owner or not name or '/' in name:
        raise ValueError(f"Expected OWNER/NAME, got {full_name!r}")
    return owner, name
