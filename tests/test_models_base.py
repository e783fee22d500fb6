import time

import pytest

from github_manager.models.base import (
    INVALID_TIMESTAMP,
    DecodingError,
    Direction,
    FieldReader,
    to_timestamp,
)
from github_manager.models.collections import GitHubList
from github_manager.models.repository import RepoVisibility
from github_manager.models.user import User


def test_field_reader_defaults_for_missing_keys():
    reader = FieldReader({})

    assert reader.get_string('name') is None
    assert reader.get_int('count') == 0
    assert reader.get_int('count', 7) == 7
    assert reader.get_long('id') == 0
    assert reader.get_float('score') == 0.0
    assert reader.get_boolean('fork') is False
    assert reader.get_object('owner') is None
    assert reader.get_array('topics') == []
    assert reader.get_array('topics', ['a']) == ['a']
    assert reader.get_strings('topics') == ()
    assert reader.get_enum('visibility', RepoVisibility) is None
    assert reader.get_nested('owner', User) is None
    assert reader.get_nested_list('users', User) == ()


def test_field_reader_treats_null_and_wrong_types_as_absent():
    reader = FieldReader({
        'name': None,
        'count': 'twelve',
        'flag': 'true',
        'big': True,
        'owner': [],
        'topics': {'a': 1},
    })

    assert reader.get_string('name') is None
    assert reader.get_int('count', 3) == 3
    assert reader.get_boolean('flag') is False
    assert reader.get_int('big') == 0
    assert reader.get_object('owner') is None
    assert reader.get_array('topics') == []


def test_field_reader_reads_present_values():
    reader = FieldReader({
        'name': 'octo',
        'count': 12,
        'ratio': 2.5,
        'fork': True,
        'topics': ['api', 3, 'python'],
        'visibility': 'internal',
    })

    assert reader.get_string('name') == 'octo'
    assert reader.get_int('count') == 12
    assert reader.get_int('ratio') == 2
    assert reader.get_float('ratio') == 2.5
    assert reader.get_boolean('fork') is True
    assert reader.get_strings('topics') == ('api', 'python')
    assert reader.get_enum('visibility', RepoVisibility) is RepoVisibility.INTERNAL


def test_field_reader_none_payload_is_empty_object():
    assert FieldReader(None).get_string('anything') is None


def test_field_reader_rejects_non_object_payload():
    with pytest.raises(DecodingError):
        FieldReader(['not', 'an', 'object'])


def test_get_enum_rejects_unknown_wire_value():
    with pytest.raises(DecodingError) as excinfo:
        FieldReader({'visibility': 'secret'}).get_enum('visibility', RepoVisibility)

    assert "'secret'" in str(excinfo.value)
    assert "'private'" in str(excinfo.value)


def test_get_enum_is_case_sensitive():
    with pytest.raises(DecodingError):
        FieldReader({'visibility': 'Private'}).get_enum('visibility', RepoVisibility)


def test_get_enum_rejects_non_string_value():
    with pytest.raises(DecodingError):
        FieldReader({'visibility': 1}).get_enum('visibility', RepoVisibility)


def test_wire_enum_str_is_wire_value():
    assert str(Direction.DESC) == 'desc'
    assert Direction.from_wire('asc') is Direction.ASC


def test_to_timestamp_parses_utc_and_offsets():
    assert to_timestamp('1970-01-01T00:00:01Z') == 1000
    assert to_timestamp('2011-01-26T19:01:12Z') == 1296068472000
    assert to_timestamp('2011-01-26T20:01:12+01:00') == 1296068472000


@pytest.mark.parametrize('value', [None, '', 'yesterday', '2011-13-45T99:00:00Z', 42])
def test_to_timestamp_returns_sentinel_for_bad_input(value):
    assert to_timestamp(value) == INVALID_TIMESTAMP


def test_github_list_total_count_is_independent_of_page_size():
    payload = {
        'total_count': 57,
        'items': [{'login': 'a'}, {'login': 'b'}, {'login': 'c'}],
    }

    page = GitHubList.from_json(payload, User)

    assert page.total_count == 57
    assert len(page.items) == 3
    assert [user.login for user in page] == ['a', 'b', 'c']


def test_github_list_missing_total_count_defaults_to_zero():
    page = GitHubList.from_json({'items': [{'login': 'a'}]}, User)

    assert page.total_count == 0
    assert len(page) == 1


def test_github_list_of_uses_page_length_unless_given():
    users = [User(login='a'), User(login='b')]

    assert GitHubList.of(users).total_count == 2
    assert GitHubList.of(users, total_count=40).total_count == 40
    assert GitHubList.of(users).to_dict()['items'][1]['login'] == 'b'


@pytest.fixture
def new_york_time(monkeypatch):
    if not hasattr(time, 'tzset'):
        pytest.skip('time.tzset is not available on this platform')
    monkeypatch.setenv('TZ', 'America/New_York')
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_to_timestamp_reads_values_without_offset_as_utc(new_york_time):
    assert to_timestamp('2022-01-01') == 1640995200000
    assert to_timestamp('2022-01-01T00:00:00') == 1640995200000
    assert to_timestamp('2022-01-01T00:00:00Z') == 1640995200000


@pytest.mark.parametrize('value', [float('inf'), float('-inf'), float('nan')])
def test_field_reader_non_finite_numbers_use_default(value):
    reader = FieldReader({'size': value})

    assert reader.get_int('size') == 0
    assert reader.get_long('size', 5) == 5
    assert reader.get_float('size', 1.5) == 1.5


def test_github_list_rejects_non_object_items():
    with pytest.raises(DecodingError):
        GitHubList.from_json({'total_count': 2, 'items': [{'login': 'a'}, 'b']}, User)


def test_nested_list_rejects_null_items():
    with pytest.raises(DecodingError):
        FieldReader({'users': [None]}).get_nested_list('users', User)
