# gh_repo_info/client.py
import asyncio
import logging

import aiohttp

from gh_repo_info.core.config import settings
from gh_repo_info.core.errors import SendRequestError
from gh_repo_info.core.models import RepoInfo, decode_repo
from gh_repo_info.core.request import api_url, check_status, request_headers

log = logging.getLogger(__name__)


async def get(
    owner: str, repo: str, *, session: aiohttp.ClientSession | None = None
) -> RepoInfo:
    """
    Get GitHub repository information given an owner and repo.

    A session passed in by the caller is reused and left open; otherwise a
    short-lived one is opened and closed around the request.

    Raises SendRequestError, ResponseNonSuccessError or DeserializeError.
    """
    url = api_url(owner, repo, settings.API_BASE)
    headers = request_headers(settings.USER_AGENT)

    try:
        if session is None:
            async with aiohttp.ClientSession() as http:
                status, reason, body = await _fetch(http, url, headers)
        else:
            status, reason, body = await _fetch(session, url, headers)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise SendRequestError(e) from e

    log.debug("GitHub API returned HTTP %s for %s/%s", status, owner, repo)
    check_status(status, reason)
    return decode_repo(body)


async def _fetch(
    http: aiohttp.ClientSession, url: str, headers: dict[str, str]
) -> tuple[int, str | None, bytes]:
    log.debug("GET %s", url)
    async with http.get(url, headers=headers) as resp:
        return resp.status, resp.reason, await resp.read()
