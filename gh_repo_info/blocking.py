# gh_repo_info/blocking.py
#
# Blocking counterpart of gh_repo_info.client. Calling it from a coroutine
# stalls the event loop for the whole round trip; use the async client there.
import logging

import requests

from gh_repo_info.core.config import settings
from gh_repo_info.core.errors import SendRequestError
from gh_repo_info.core.models import RepoInfo, decode_repo
from gh_repo_info.core.request import api_url, check_status, request_headers

log = logging.getLogger(__name__)


def get(owner: str, repo: str, *, session: requests.Session | None = None) -> RepoInfo:
    """Get GitHub repository information given an owner and repo."""
    url = api_url(owner, repo, settings.API_BASE)
    headers = request_headers(settings.USER_AGENT)

    log.debug("GET %s", url)
    try:
        if session is None:
            with requests.Session() as http:
                resp = http.get(url, headers=headers)
        else:
            resp = session.get(url, headers=headers)
    except requests.RequestException as e:
        raise SendRequestError(e) from e

    log.debug("GitHub API returned HTTP %s for %s/%s", resp.status_code, owner, repo)
    check_status(resp.status_code, resp.reason)
    return decode_repo(resp.content)
