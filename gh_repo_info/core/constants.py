# gh_repo_info/core/constants.py
from enum import Enum


class OwnerKind(str, Enum):
    USER = "User"
    ORGANIZATION = "Organization"


class GitHubConfig:
    API_BASE = "https://api.github.com/repos"
    ACCEPT = "application/vnd.github+json"
    # GitHub rejects requests without a User-Agent header
    USER_AGENT = "gh-repo-info"
