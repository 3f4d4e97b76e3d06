# gh_repo_info/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict

from gh_repo_info.core.constants import GitHubConfig


class Settings(BaseSettings):
    """
    Overridable request settings.
    Every value has a default, so nothing has to be set in the environment.
    Example: GH_REPO_INFO_API_BASE=https://ghe.example.com/api/v3/repos
    """

    model_config = SettingsConfigDict(
        env_prefix="GH_REPO_INFO_", env_file_encoding="utf-8", extra="ignore"
    )

    API_BASE: str = GitHubConfig.API_BASE
    USER_AGENT: str = GitHubConfig.USER_AGENT


# Single importable instance, created once on first import.
settings = Settings()
