import json

import pytest
import requests

from cnamewatch import NoRecord, ResolutionFailed


class FakeResolver(object):
    """Answers from a dict; an exception class as value is raised."""

    def __init__(self, answers=None):
        self.answers = answers or {}
        self.calls = []

    def resolve_cname(self, hostname):
        self.calls.append(hostname)
        answer = self.answers.get(hostname, NoRecord)
        if isinstance(answer, type) and issubclass(answer, Exception):
            raise answer(hostname)
        return answer


class FakeResponse(object):

    def __init__(self, payload=None, status_code=200, body=None):
        self.body = body if body is not None else json.dumps(payload).encode()
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]

    def close(self):
        self.closed = True


class FakeSession(object):

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def fake_resolver():
    return FakeResolver


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def failing_resolver():
    return FakeResolver({'old.example.com': ResolutionFailed})
