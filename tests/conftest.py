# tests/conftest.py
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

# Trimmed GET /repos/rust-lang/rust response; extra keys are left in to check they are ignored.
_RUST_REPO = {
    "id": 724712,
    "name": "rust",
    "full_name": "rust-lang/rust",
    "private": False,
    "html_url": "https://github.com/rust-lang/rust",
    "owner": {
        "login": "rust-lang",
        "id": 5430905,
        "html_url": "https://github.com/rust-lang",
        "avatar_url": "https://avatars.githubusercontent.com/u/5430905?v=4",
        "type": "Organization",
        "site_admin": False,
    },
    "stargazers_count": 82127,
    "subscribers_count": 1489,
    "forks_count": 10830,
    "open_issues_count": 9549,
    "fork": False,
    "archived": False,
    "default_branch": "master",
    "homepage": "https://www.rust-lang.org",
    "description": "Empowering everyone to build reliable and efficient software.",
    "license": {
        "key": "other",
        "name": "Other",
        "spdx_id": "NOASSERTION",
        "url": None,
    },
    "language": "Rust",
    "topics": ["compiler", "hacktoberfest", "language", "rust"],
}


@pytest.fixture
def repo_payload():
    """A fresh copy of the canned repository response, safe to mutate per test."""
    return json.loads(json.dumps(_RUST_REPO))


@pytest.fixture
def repo_body(repo_payload):
    return json.dumps(repo_payload).encode("utf-8")


def make_aiohttp_mock(status: int, body: bytes, reason: str | None = "OK"):
    """Returns (ClientSession replacement, session object yielded by `async with`)."""
    mock_resp = AsyncMock()
    mock_resp.status = status
    mock_resp.reason = reason
    mock_resp.read = AsyncMock(return_value=body)

    mock_get_cm = AsyncMock()
    mock_get_cm.__aenter__ = AsyncMock(return_value=mock_resp)
    mock_get_cm.__aexit__ = AsyncMock(return_value=False)

    mock_http = AsyncMock()
    mock_http.get = MagicMock(return_value=mock_get_cm)

    mock_session_cm = AsyncMock()
    mock_session_cm.__aenter__ = AsyncMock(return_value=mock_http)
    mock_session_cm.__aexit__ = AsyncMock(return_value=False)

    return MagicMock(return_value=mock_session_cm), mock_http


def make_requests_mock(status: int, body: bytes, reason: str | None = "OK"):
    """Returns (requests.Session replacement, session object yielded by `with`)."""
    mock_resp = MagicMock()
    mock_resp.status_code = status
    mock_resp.reason = reason
    mock_resp.content = body

    mock_http = MagicMock()
    mock_http.get = MagicMock(return_value=mock_resp)

    mock_session_cm = MagicMock()
    mock_session_cm.__enter__.return_value = mock_http
    mock_session_cm.__exit__.return_value = False

    return MagicMock(return_value=mock_session_cm), mock_http


@pytest.fixture
def fake_aiohttp_session():
    return make_aiohttp_mock


@pytest.fixture
def fake_requests_session():
    return make_requests_mock
