import json

import pytest
from conftest import make_response, sent_request

from github_manager.adapters.params import UNSET
from github_manager.adapters.response_format import ReturnFormat
from github_manager.config.settings import GitHubConfig
from github_manager.models.base import DecodingError, Direction
from github_manager.models.collections import GitHubList
from github_manager.models.issues import CommentSort, IssueComment
from github_manager.models.pages import BuildType, PagesBuildStatus, PagesSource
from github_manager.models.projects import OrganizationPermission, ProjectState
from github_manager.models.repository import RepositorySort, RepositoryType
from github_manager.models.teams import InvitationRole, MembershipState, TeamMemberRole, TeamRole
from github_manager.services import (
    IssueCommentsManager,
    PagesManager,
    ProjectsManager,
    RepositoriesManager,
    TagProtectionManager,
    TeamMembersManager,
)

API = 'https://api.github.com'


class TestRepositoriesManager:

    def test_get_repository(self, adapter, session):
        session.request.return_value = make_response(200, {'name': 'hello', 'fork': False})

        repository = RepositoriesManager(adapter).get_repository('octocat', 'hello')

        assert sent_request(session)[:2] == ('GET', f'{API}/repos/octocat/hello')
        assert repository.name == 'hello'

    def test_get_repository_raw_formats(self, adapter, session):
        session.request.return_value = make_response(200, text='{"name": "hello"}')
        manager = RepositoriesManager(adapter)

        assert manager.get_repository('o', 'r', fmt=ReturnFormat.STRING) == '{"name": "hello"}'
        assert manager.get_repository('o', 'r', fmt=ReturnFormat.JSON) == {'name': 'hello'}

    def test_path_segments_are_escaped(self, adapter, session):
        session.request.return_value = make_response(200, {})

        RepositoriesManager(adapter).get_repository('octo cat', 'a/b')

        assert sent_request(session)[1] == f'{API}/repos/octo%20cat/a%2Fb'

    def test_list_organization_repositories(self, adapter, session):
        session.request.return_value = make_response(200, [{'name': 'b'}, {'name': 'a'}])

        repositories = RepositoriesManager(adapter).list_organization_repositories(
            'github',
            repo_type=RepositoryType.SOURCES,
            sort=RepositorySort.FULL_NAME,
            direction=Direction.DESC,
            per_page=2,
        )

        assert sent_request(session)[1] == (
            f'{API}/orgs/github/repos?type=sources&sort=full_name&direction=desc&per_page=2'
        )
        assert [repository.name for repository in repositories] == ['b', 'a']

    def test_list_user_repositories_without_filters(self, adapter, session):
        session.request.return_value = make_response(200, [])

        assert RepositoriesManager(adapter).list_user_repositories('octocat') == []
        assert sent_request(session)[1] == f'{API}/users/octocat/repos'

    def test_get_repository_languages(self, adapter, session):
        session.request.return_value = make_response(200, {'Python': 100, 'Shell': 5})

        languages = RepositoriesManager(adapter).get_repository_languages('o', 'r')

        assert sent_request(session)[1] == f'{API}/repos/o/r/languages'
        assert languages.get_language_bytes('shell') == 5

    def test_list_repository_tags(self, adapter, session):
        session.request.return_value = make_response(200, [{'name': 'v2'}, {'name': 'v1'}])

        tags = RepositoriesManager(adapter).list_repository_tags('o', 'r', page=2)

        assert sent_request(session)[1] == f'{API}/repos/o/r/tags?page=2'
        assert [tag.name for tag in tags] == ['v2', 'v1']

    def test_list_codeowners_errors(self, adapter, session):
        session.request.return_value = make_response(200, {'errors': [
            {'line': 3, 'column': 1, 'kind': 'Unknown owner', 'path': '.github/CODEOWNERS'},
        ]})

        errors = RepositoriesManager(adapter).list_codeowners_errors('o', 'r', ref='main')

        assert sent_request(session)[1] == f'{API}/repos/o/r/codeowners/errors?ref=main'
        assert errors[0].kind == 'Unknown owner'
        assert errors[0].path == '.github/CODEOWNERS'

    def test_list_actions_enabled_repositories(self, adapter, session):
        session.request.return_value = make_response(200, {
            'total_count': 40,
            'repositories': [{'name': 'one'}],
        })

        page = RepositoriesManager(adapter).list_actions_enabled_repositories('github')

        assert sent_request(session)[1] == f'{API}/orgs/github/actions/permissions/repositories'
        assert isinstance(page, GitHubList)
        assert page.total_count == 40
        assert page.repositories[0].name == 'one'

    def test_decoding_errors_propagate(self, adapter, session):
        session.request.return_value = make_response(200, {'visibility': 'secret'})

        with pytest.raises(DecodingError):
            RepositoriesManager(adapter).get_repository('o', 'r')

    def test_from_config(self):
        manager = RepositoriesManager.from_config(GitHubConfig(token='t'))

        assert isinstance(manager, RepositoriesManager)
        manager.adapter.close()


class TestPagesManager:

    def test_get_pages_site(self, adapter, session):
        session.request.return_value = make_response(200, {'status': 'built', 'public': True})

        site = PagesManager(adapter).get_pages_site('o', 'r')

        assert sent_request(session)[1] == f'{API}/repos/o/r/pages'
        assert site.is_public is True

    def test_create_pages_site(self, adapter, session):
        session.request.return_value = make_response(201, {'build_type': 'legacy'})

        site = PagesManager(adapter).create_pages_site(
            'o', 'r', source=PagesSource(branch='main', path='/docs'), build_type=BuildType.LEGACY
        )

        method, url, body = sent_request(session)
        assert (method, url) == ('POST', f'{API}/repos/o/r/pages')
        assert body == {'build_type': 'legacy', 'source': {'branch': 'main', 'path': '/docs'}}
        assert site.build_type is BuildType.LEGACY

    def test_update_omits_cname_unless_given(self, adapter, session):
        session.request.return_value = make_response(204)

        assert PagesManager(adapter).update_pages_site('o', 'r', https_enforced=True) is True

        method, _, body = sent_request(session)
        assert method == 'PUT'
        assert body == {'https_enforced': True}

    def test_update_with_none_cname_clears_domain(self, adapter, session):
        session.request.return_value = make_response(204)

        PagesManager(adapter).update_pages_site('o', 'r', cname=None)

        assert sent_request(session)[2] == {'cname': None}

    def test_update_sets_cname(self, adapter, session):
        session.request.return_value = make_response(204)

        PagesManager(adapter).update_pages_site('o', 'r', cname='docs.example.com')

        assert sent_request(session)[2] == {'cname': 'docs.example.com'}

    def test_update_failure_returns_false(self, adapter, session):
        session.request.return_value = make_response(400, {'message': 'Invalid cname'})

        assert PagesManager(adapter).update_pages_site('o', 'r', cname=UNSET) is False

    def test_delete_requires_no_content(self, adapter, session):
        manager = PagesManager(adapter)
        session.request.return_value = make_response(204)
        assert manager.delete_pages_site('o', 'r') is True

        session.request.return_value = make_response(200, {})
        assert manager.delete_pages_site('o', 'r') is False

        session.request.return_value = make_response(404, {'message': 'Not Found'})
        assert manager.delete_pages_site('o', 'r') is False

    def test_builds(self, adapter, session):
        manager = PagesManager(adapter)

        session.request.return_value = make_response(200, [{'status': 'built'}, {'status': 'errored'}])
        builds = manager.list_pages_builds('o', 'r', per_page=2)
        assert sent_request(session)[1] == f'{API}/repos/o/r/pages/builds?per_page=2'
        assert [build.status for build in builds] == [PagesBuildStatus.BUILT, PagesBuildStatus.ERRORED]

        session.request.return_value = make_response(201, {'url': 'u', 'status': 'queued'})
        queued = manager.request_pages_build('o', 'r')
        assert sent_request(session)[:2] == ('POST', f'{API}/repos/o/r/pages/builds')
        assert queued.status is PagesBuildStatus.QUEUED

        session.request.return_value = make_response(200, {'status': 'built'})
        manager.get_latest_pages_build('o', 'r')
        assert sent_request(session)[1] == f'{API}/repos/o/r/pages/builds/latest'

        manager.get_pages_build('o', 'r', 5)
        assert sent_request(session)[1] == f'{API}/repos/o/r/pages/builds/5'

    def test_create_pages_deployment(self, adapter, session):
        session.request.return_value = make_response(200, {
            'status_url': 's', 'page_url': 'https://octo.github.io', 'preview_url': None,
        })

        deployment = PagesManager(adapter).create_pages_deployment(
            'o', 'r', artifact_url='https://artifact', pages_build_version='abc123',
            oidc_token='token'
        )

        method, url, body = sent_request(session)
        assert (method, url) == ('POST', f'{API}/repos/o/r/pages/deployment')
        assert body == {
            'artifact_url': 'https://artifact',
            'pages_build_version': 'abc123',
            'oidc_token': 'token',
        }
        assert deployment.page_url == 'https://octo.github.io'
        assert deployment.preview_url is None

    def test_dns_health_check_in_progress(self, adapter, session):
        session.request.return_value = make_response(202, text='')

        health = PagesManager(adapter).get_dns_health_check('o', 'r')

        assert sent_request(session)[1] == f'{API}/repos/o/r/pages/health'
        assert health.domain is None


class TestIssueCommentsManager:

    def test_list_repository_comments(self, adapter, session):
        session.request.return_value = make_response(200, [{'id': 2}, {'id': 1}])

        comments = IssueCommentsManager(adapter).list_repository_comments(
            'o', 'r', sort=CommentSort.UPDATED, direction=Direction.ASC,
            since='2024-01-01T00:00:00Z', per_page=100, page=1
        )

        assert sent_request(session)[1] == (
            f'{API}/repos/o/r/issues/comments?sort=updated&direction=asc'
            f'&since=2024-01-01T00%3A00%3A00Z&per_page=100&page=1'
        )
        assert [comment.id for comment in comments] == [2, 1]

    def test_single_comment_operations(self, adapter, session):
        manager = IssueCommentsManager(adapter)

        session.request.return_value = make_response(200, {'id': 9, 'body': 'old'})
        assert manager.get_comment('o', 'r', 9).body == 'old'
        assert sent_request(session)[1] == f'{API}/repos/o/r/issues/comments/9'

        session.request.return_value = make_response(200, {'id': 9, 'body': 'new'})
        updated = manager.update_comment('o', 'r', 9, 'new')
        method, url, body = sent_request(session)
        assert (method, url, body) == ('PATCH', f'{API}/repos/o/r/issues/comments/9', {'body': 'new'})
        assert updated.body == 'new'

        session.request.return_value = make_response(204)
        assert manager.delete_comment('o', 'r', 9) is True
        assert sent_request(session)[0] == 'DELETE'

    def test_issue_comments(self, adapter, session):
        manager = IssueCommentsManager(adapter)

        session.request.return_value = make_response(200, [{'id': 1}])
        manager.list_issue_comments('o', 'r', 1347, since='2024-05-01')
        assert sent_request(session)[1] == f'{API}/repos/o/r/issues/1347/comments?since=2024-05-01'

        session.request.return_value = make_response(201, {'id': 2, 'body': 'Me too'})
        comment = manager.create_comment('o', 'r', 1347, 'Me too')
        method, url, body = sent_request(session)
        assert (method, url, body) == ('POST', f'{API}/repos/o/r/issues/1347/comments', {'body': 'Me too'})
        assert isinstance(comment, IssueComment)

    def test_create_comment_json_format(self, adapter, session):
        session.request.return_value = make_response(201, {'id': 2})

        result = IssueCommentsManager(adapter).create_comment(
            'o', 'r', 1, 'hi', fmt=ReturnFormat.JSON
        )

        assert result == {'id': 2}


class TestProjectsManager:

    @pytest.mark.parametrize('call, path', [
        (lambda m: m.list_repository_projects('o', 'r', state=ProjectState.ALL), '/repos/o/r/projects'),
        (lambda m: m.list_organization_projects('org', state=ProjectState.ALL), '/orgs/org/projects'),
        (lambda m: m.list_user_projects('octocat', state=ProjectState.ALL), '/users/octocat/projects'),
    ])
    def test_list_projects(self, adapter, session, call, path):
        session.request.return_value = make_response(200, [{'id': 1, 'state': 'open'}])

        projects = call(ProjectsManager(adapter))

        assert sent_request(session)[1] == f'{API}{path}?state=all'
        assert projects[0].state is ProjectState.OPEN

    @pytest.mark.parametrize('call, path', [
        (lambda m: m.create_repository_project('o', 'r', 'Board', body='desc'), '/repos/o/r/projects'),
        (lambda m: m.create_organization_project('org', 'Board', body='desc'), '/orgs/org/projects'),
        (lambda m: m.create_user_project('Board', body='desc'), '/user/projects'),
    ])
    def test_create_projects(self, adapter, session, call, path):
        session.request.return_value = make_response(201, {'id': 5, 'name': 'Board'})

        project = call(ProjectsManager(adapter))

        method, url, body = sent_request(session)
        assert (method, url) == ('POST', f'{API}{path}')
        assert body == {'name': 'Board', 'body': 'desc'}
        assert project.name == 'Board'

    def test_create_project_without_body(self, adapter, session):
        session.request.return_value = make_response(201, {'id': 5})

        ProjectsManager(adapter).create_user_project('Board')

        assert sent_request(session)[2] == {'name': 'Board'}

    def test_get_update_delete(self, adapter, session):
        manager = ProjectsManager(adapter)

        session.request.return_value = make_response(200, {'id': 7})
        assert manager.get_project(7).id == 7
        assert sent_request(session)[1] == f'{API}/projects/7'

        session.request.return_value = make_response(200, {
            'id': 7, 'state': 'closed', 'organization_permission': 'read',
        })
        project = manager.update_project(
            7, state=ProjectState.CLOSED, organization_permission=OrganizationPermission.READ,
            private=False
        )
        method, _, body = sent_request(session)
        assert method == 'PATCH'
        assert body == {'state': 'closed', 'organization_permission': 'read', 'private': False}
        assert project.organization_permission is OrganizationPermission.READ

        session.request.return_value = make_response(204)
        assert manager.delete_project(7) is True


class TestTeamMembersManager:

    def test_list_team_members(self, adapter, session):
        session.request.return_value = make_response(200, [{'login': 'octocat'}])

        members = TeamMembersManager(adapter).list_team_members(
            'github', 'justice-league', role=TeamMemberRole.MAINTAINER
        )

        assert sent_request(session)[1] == (
            f'{API}/orgs/github/teams/justice-league/members?role=maintainer'
        )
        assert members[0].login == 'octocat'

    def test_membership_operations(self, adapter, session):
        manager = TeamMembersManager(adapter)
        path = f'{API}/orgs/github/teams/justice-league/memberships/octocat'

        session.request.return_value = make_response(200, {'role': 'member', 'state': 'active'})
        membership = manager.get_team_membership('github', 'justice-league', 'octocat')
        assert sent_request(session)[1] == path
        assert membership.state is MembershipState.ACTIVE

        session.request.return_value = make_response(200, {'role': 'maintainer', 'state': 'pending'})
        membership = manager.add_or_update_team_membership(
            'github', 'justice-league', 'octocat', role=TeamRole.MAINTAINER
        )
        assert sent_request(session) == ('PUT', path, {'role': 'maintainer'})
        assert membership.is_pending

        session.request.return_value = make_response(204)
        assert manager.remove_team_membership('github', 'justice-league', 'octocat') is True

        session.request.return_value = make_response(403, {'message': 'Forbidden'})
        assert manager.remove_team_membership('github', 'justice-league', 'octocat') is False

    def test_list_pending_team_invitations(self, adapter, session):
        session.request.return_value = make_response(200, [
            {'id': 1, 'login': 'monalisa', 'role': 'direct_member', 'invitation_source': 'member'},
            {'id': 2, 'email': 'octo@example.com', 'role': 'admin'},
        ])

        invitations = TeamMembersManager(adapter).list_pending_team_invitations(
            'github', 'justice-league', per_page=30, page=2
        )

        assert sent_request(session)[:2] == (
            'GET', f'{API}/orgs/github/teams/justice-league/invitations?per_page=30&page=2'
        )
        assert [invitation.id for invitation in invitations] == [1, 2]
        assert invitations[0].role is InvitationRole.DIRECT_MEMBER
        assert invitations[1].login is None
        assert invitations[1].email == 'octo@example.com'

    def test_list_pending_team_invitations_json_format(self, adapter, session):
        session.request.return_value = make_response(200, [])

        assert TeamMembersManager(adapter).list_pending_team_invitations(
            'github', 'justice-league', fmt=ReturnFormat.JSON
        ) == []
        assert sent_request(session)[1] == f'{API}/orgs/github/teams/justice-league/invitations'


class TestTagProtectionManager:

    def test_tag_protection_lifecycle(self, adapter, session):
        manager = TagProtectionManager(adapter)
        path = f'{API}/repos/o/r/tags/protection'

        session.request.return_value = make_response(200, [{'id': 2, 'pattern': 'v1.*'}])
        protections = manager.list_tag_protections('o', 'r')
        assert sent_request(session)[1] == path
        assert protections[0].pattern == 'v1.*'

        session.request.return_value = make_response(201, {'id': 3, 'pattern': 'v2.*', 'enabled': True})
        created = manager.create_tag_protection('o', 'r', 'v2.*')
        assert sent_request(session) == ('POST', path, {'pattern': 'v2.*'})
        assert created.enabled is True

        session.request.return_value = make_response(204)
        assert manager.delete_tag_protection('o', 'r', 3) is True
        assert sent_request(session)[:2] == ('DELETE', f'{path}/3')

    def test_string_format_returns_raw_body(self, adapter, session):
        body = json.dumps([{'id': 2}])
        session.request.return_value = make_response(200, text=body)

        assert TagProtectionManager(adapter).list_tag_protections(
            'o', 'r', fmt=ReturnFormat.STRING
        ) == body
