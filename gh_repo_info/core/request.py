# gh_repo_info/core/request.py
from urllib.parse import quote

from gh_repo_info.core.constants import GitHubConfig
from gh_repo_info.core.errors import ResponseNonSuccessError


def api_url(owner: str, repo: str, api_base: str | None = None) -> str:
    """Return the repository endpoint, encoding owner and repo as single path segments."""
    base = (api_base or GitHubConfig.API_BASE).rstrip("/")
    return f"{base}/{quote(owner, safe='')}/{quote(repo, safe='')}"


def request_headers(user_agent: str | None = None) -> dict[str, str]:
    return {
        "Accept": GitHubConfig.ACCEPT,
        "User-Agent": user_agent or GitHubConfig.USER_AGENT,
    }


def check_status(status: int, reason: str | None = None) -> None:
    """Raise ResponseNonSuccessError unless status is 2xx."""
    if not 200 <= status < 300:
        raise ResponseNonSuccessError(status, reason)
