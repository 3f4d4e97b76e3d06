# gh_repo_info/core/models.py

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, ValidationError

from gh_repo_info.core.constants import OwnerKind
from gh_repo_info.core.errors import DeserializeError


class _Model(BaseModel):
    # populate_by_name lets callers build models with the Python field names
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class OwnerInfo(_Model):
    name: str = Field(alias="login")
    url: str = Field(alias="html_url")
    avatar_url: str
    kind: OwnerKind = Field(alias="type")


class LicenseInfo(_Model):
    key: str | None = None
    name: str | None = None


class RepoInfo(_Model):
    """Repository metadata as returned by GET /repos/{owner}/{repo}."""

    name: str
    full_name: str
    url: str = Field(alias="html_url")

    owner: OwnerInfo

    stargazers_count: StrictInt
    subscribers_count: StrictInt
    forks_count: StrictInt
    # Open issues + open pull requests
    open_issues_count: StrictInt

    is_fork: StrictBool = Field(alias="fork")
    is_archived: StrictBool = Field(alias="archived")

    default_branch: str

    homepage: str | None = None
    description: str | None = None
    license: LicenseInfo | None = None

    language: str | None = None
    topics: tuple[str, ...] = ()


def decode_repo(payload: str | bytes | dict) -> RepoInfo:
    """
    Build a RepoInfo from a raw response body or an already-parsed JSON object.
    Raises DeserializeError for invalid JSON, a non-object body, missing
    required fields or wrongly typed values.
    """
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return RepoInfo.model_validate_json(payload)
        return RepoInfo.model_validate(payload)
    except ValidationError as e:
        raise DeserializeError(e) from e
