import json

from github_manager.adapters.params import UNSET, Params
from github_manager.models.base import Direction
from github_manager.models.pages import PagesSource


def test_empty_params_serialize_to_nothing():
    params = Params()

    assert params.to_query_string() == ''
    assert params.to_request_body() == '{}'


def test_single_string_parameter():
    params = Params().add('name', 'value')

    assert params.to_query_string() == '?name=value'
    assert params.to_request_body() == '{"name":"value"}'


def test_query_values_are_escaped():
    params = Params().add('q', 'a b&c=d/e')

    assert params.to_query_string() == '?q=a%20b%26c%3Dd%2Fe'


def test_query_string_keeps_insertion_order():
    params = Params().add('per_page', 30).add('page', 2).add('sort', 'created')

    assert params.to_query_string() == '?per_page=30&page=2&sort=created'


def test_duplicate_keys_are_retained_and_last_value_wins():
    params = Params().add('page', 1).add('per_page', 10).add('page', 3)

    assert params.items() == [('page', 1), ('per_page', 10), ('page', 3)]
    assert params.to_query_string() == '?page=3&per_page=10'
    assert json.loads(params.to_request_body()) == {'page': 3, 'per_page': 10}


def test_value_rendering():
    params = (
        Params()
        .add('archived', False)
        .add('direction', Direction.ASC)
        .add('labels', ['bug', 'ui'])
    )

    assert params.to_query_string() == '?archived=false&direction=asc&labels=bug%2Cui'
    assert json.loads(params.to_request_body()) == {
        'archived': False,
        'direction': 'asc',
        'labels': ['bug', 'ui'],
    }


def test_body_preserves_value_types_and_nests_entities():
    params = (
        Params()
        .add('count', 3)
        .add('enabled', True)
        .add('source', PagesSource(branch='main', path='/docs'))
    )

    assert params.to_request_body() == (
        '{"count":3,"enabled":true,"source":{"branch":"main","path":"/docs"}}'
    )


def test_nested_params_are_serialized_recursively():
    params = Params().add('outer', Params().add('inner', 1))

    assert params.to_request_body() == '{"outer":{"inner":1}}'


def test_add_optional_skips_missing_values():
    params = Params().add_optional('since', None).add_optional('cname', UNSET)

    assert len(params) == 0
    assert params.to_query_string() == ''
    assert params.to_request_body() == '{}'


def test_explicit_null_is_kept_in_body_only():
    params = Params().add('cname', None)

    assert 'cname' in params
    assert params.to_request_body() == '{"cname":null}'
    assert params.to_query_string() == ''


def test_initial_mapping():
    assert Params({'a': 1, 'b': 'x'}).to_query_string() == '?a=1&b=x'


def test_unset_is_a_falsy_singleton():
    assert not UNSET
    assert repr(UNSET) == 'UNSET'
