"""Smart Genesis exception classes."""

from pathlib import Path


class GenesisError(Exception):
    """Base exception for all Smart Genesis errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GenesisError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class BrowserOpenError(GenesisError):
    """Raised when the consent screen could not be opened."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__("BROWSER_OPEN_FAILED", f"Could not open {url}: {reason}")
        self.url = url


class PollTimeoutError(GenesisError, TimeoutError):
    """Raised when no access token arrived within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(
            "POLL_TIMEOUT",
            f"Timed out waiting for access token after {attempts} attempts",
        )
        self.attempts = attempts


class APIError(GenesisError):
    """Base class for HTTP failures against the OAuth server or the repository API."""

    pass


class AuthenticationError(APIError):
    """Raised when the access token is rejected."""

    pass


class AuthorizationError(APIError):
    """Raised when the token lacks the required scope."""

    pass


class NotFoundError(APIError):
    """Raised when the API endpoint is not found."""

    pass


class ConflictError(APIError):
    """Raised when the repository name already exists."""

    pass


class RateLimitedError(APIError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(APIError):
    """Raised on other client errors (4xx)."""

    pass


class ServerError(APIError):
    """Raised on server errors (5xx), network errors and malformed responses."""

    pass


class BootstrapError(GenesisError):
    """Raised when a local directory is not ready to be bootstrapped."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__("BOOTSTRAP_ERROR", f"{path}: {reason}")
        self.path = path


class CommandError(GenesisError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(
        self,
        command: list[str],
        cwd: Path,
        returncode: int | None,
        reason: str | None = None,
    ) -> None:
        rendered = " ".join(command)
        detail = reason or f"exit status {returncode}"
        super().__init__("COMMAND_FAILED", f"`{rendered}` in {cwd} failed: {detail}")
        self.command = command
        self.cwd = cwd
        self.returncode = returncode
