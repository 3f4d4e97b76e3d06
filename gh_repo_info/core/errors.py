# gh_repo_info/core/errors.py


class GhRepoInfoError(Exception):
    """Base class for every failure raised while fetching repository info."""


class SendRequestError(GhRepoInfoError):
    """Raised when the request never produced a response (connection, DNS, TLS, timeout)."""

    def __init__(self, error: BaseException):
        super().__init__(f"send request failed: {error}")
        self.error = error


class ResponseNonSuccessError(GhRepoInfoError):
    """Raised when GitHub answers with a non-2xx status, e.g. 404 for an unknown repo."""

    def __init__(self, status: int, reason: str | None = None):
        text = f"{status} {reason}" if reason else str(status)
        super().__init__(f"response non-successful: {text}")
        self.status = status
        self.reason = reason


class DeserializeError(GhRepoInfoError):
    """Raised when the response body is not JSON or does not match the repository schema."""

    def __init__(self, error: BaseException):
        super().__init__(f"deserialization failed: {error}")
        self.error = error
