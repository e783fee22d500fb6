# adapters package
from github_manager.adapters.github_api import (
    ApiResponse,
    GitHubAPIError,
    GitHubRestAdapter,
    RateLimitExceeded,
    RateLimitInfo,
    TransientServerError,
)
from github_manager.adapters.params import Params, UNSET
from github_manager.adapters.response_format import (
    ReturnFormat,
    materialize,
    materialize_collection,
    materialize_list,
    parse_json,
)

__all__ = [
    'ApiResponse', 'GitHubAPIError', 'GitHubRestAdapter', 'Params', 'RateLimitExceeded',
    'RateLimitInfo', 'ReturnFormat', 'TransientServerError', 'UNSET', 'materialize',
    'materialize_collection', 'materialize_list', 'parse_json',
]
