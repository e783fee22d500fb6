import json
from unittest.mock import MagicMock

import pytest

from github_manager.adapters.github_api import GitHubRestAdapter


def make_response(status_code=200, payload=None, text=None, headers=None):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload) if payload is not None else ''
    response.text = text
    response.headers = headers or {}
    return response


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch):
    monkeypatch.setattr('time.sleep', lambda _: None)


@pytest.fixture
def session():
    fake = MagicMock()
    fake.headers = {}
    return fake


@pytest.fixture
def adapter(session):
    return GitHubRestAdapter(token='test-token', session=session)


def sent_request(session, index=-1):
    """Return (method, url, json body or None) of a recorded session.request call."""
    call = session.request.call_args_list[index]
    method, url = call.args[0], call.args[1]
    data = call.kwargs.get('data')
    return method, url, json.loads(data) if data is not None else None
