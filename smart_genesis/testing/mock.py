"""
Test doubles for Smart Genesis.

Provides a MockGitHubClient that mimics the real client interface without
making API calls, and a RecordingRunner that records external commands
instead of running them.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import httpx

from smart_genesis.commands import CommandRunner
from smart_genesis.exceptions import APIError, CommandError
from smart_genesis.types.repos import CreationResult, Repository, RepositoryDescriptor


@dataclass
class MockResponse:
    """Configuration for a mock response."""

    data: Any
    error: Exception | None = None
    call_count: int = 0


@dataclass
class MockCall:
    """Record of a method call."""

    method: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MockReposClient:
    """Mock repos client for testing."""

    def __init__(self, mock_client: "MockGitHubClient") -> None:
        self._mock = mock_client
        self._responses: dict[str, MockResponse] = {}

    def configure_create(
        self,
        response: Repository | None = None,
        error: Exception | None = None,
        name: str | None = None,
    ) -> None:
        """
        Configure the response for create() calls.

        Args:
            response: Repository to return
            error: Exception to raise instead
            name: Only apply to this repository name (default: every name)
        """
        key = f"create:{name}" if name else "create"
        self._responses[key] = MockResponse(data=response, error=error)

    def create(self, descriptor: RepositoryDescriptor) -> Repository:
        """Mock create method."""
        self._mock._record_call("repos.create", (descriptor,), {})
        return self._get_response(
            descriptor.name,
            Repository(
                name=descriptor.name,
                clone_url=f"https://github.com/{self._mock.owner}/{descriptor.name}.git",
                full_name=f"{self._mock.owner}/{descriptor.name}",
                html_url=f"https://github.com/{self._mock.owner}/{descriptor.name}",
                private=descriptor.private,
                default_branch="main",
            ),
        )

    def try_create(self, descriptor: RepositoryDescriptor) -> CreationResult:
        """Mock try_create method; configured APIErrors become failed results."""
        try:
            repository = self.create(descriptor)
        except APIError as e:
            return CreationResult(descriptor=descriptor, error=e)
        return CreationResult(descriptor=descriptor, repository=repository)

    def _get_response(self, name: str, default: Repository) -> Repository:
        """Get configured response (name-specific first) or default."""
        for key in (f"create:{name}", "create"):
            if key in self._responses:
                resp = self._responses[key]
                resp.call_count += 1
                if resp.error:
                    raise resp.error
                if resp.data is not None:
                    return resp.data
                break
        return default


class MockGitHubClient:
    """
    Mock GitHub client for testing.

    Provides the same ``repos`` interface as GitHubClient but returns
    configurable mock responses instead of making real API calls.

    Example:
        ```python
        from smart_genesis.exceptions import ConflictError
        from smart_genesis.testing import MockGitHubClient

        mock = MockGitHubClient()
        mock.repos.configure_create(
            error=ConflictError("CONFLICT", "name already exists"),
            name="demo-backend",
        )

        bootstrapper = RepositoryBootstrapper(mock, git=GitHelper(RecordingRunner()))
        result = bootstrapper.run("demo", tmp_path, StructureMode.DUAL_FRONTEND_BACKEND)
        assert mock.call_count("repos.create") == 2
        ```
    """

    def __init__(self, owner: str = "mock-user") -> None:
        """
        Initialize the mock client.

        Args:
            owner: Account name used in generated clone URLs
        """
        self.owner = owner
        self._calls: list[MockCall] = []
        self.repos = MockReposClient(self)

    def _record_call(
        self,
        method: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        """Record a method call for verification."""
        self._calls.append(MockCall(method=method, args=args, kwargs=kwargs))

    def was_called(self, method: str) -> bool:
        """Check if a method (e.g., "repos.create") was called."""
        return any(call.method == method for call in self._calls)

    def call_count(self, method: str) -> int:
        """Get the number of times a method was called."""
        return sum(1 for call in self._calls if call.method == method)

    def get_calls(self, method: str | None = None) -> list[MockCall]:
        """Get recorded calls, optionally filtered by method."""
        if method is None:
            return list(self._calls)
        return [call for call in self._calls if call.method == method]

    def created_names(self) -> list[str]:
        """Repository names passed to repos.create, in call order."""
        return [call.args[0].name for call in self.get_calls("repos.create")]

    def reset(self) -> None:
        """Reset all recorded calls and configured responses."""
        self._calls.clear()
        self.repos._responses.clear()

    def close(self) -> None:
        """No-op for compatibility with real client."""
        pass

    def __enter__(self) -> "MockGitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class RecordingRunner(CommandRunner):
    """
    Command runner that records commands instead of executing them.

    Args:
        fail_when: Optional predicate; a command for which it returns True
            raises CommandError with exit status 1 (after being recorded)
    """

    def __init__(
        self, fail_when: Callable[[list[str]], bool] | None = None
    ) -> None:
        self.commands: list[tuple[list[str], Path]] = []
        self.fail_when = fail_when

    def run(self, command: list[str], cwd: str | Path) -> None:
        cwd = Path(cwd)
        self.commands.append((list(command), cwd))
        if self.fail_when is not None and self.fail_when(command):
            raise CommandError(command, cwd, 1)

    def commands_in(self, cwd: str | Path) -> list[list[str]]:
        """Commands that ran in ``cwd``, in order."""
        return [command for command, where in self.commands if where == Path(cwd)]


class ScriptedEndpoint:
    """
    httpx.MockTransport handler that replays a script of responses.

    Each entry is ``(status_code, json_body)`` or an ``httpx.RequestError``
    instance to raise. Once the script runs out the last entry repeats.

    Example:
        ```python
        endpoint = ScriptedEndpoint([(200, {}), (200, {"token": "abc123"})])
        http = HTTPTransport(transport=httpx.MockTransport(endpoint))
        ```
    """

    def __init__(self, script: list[Any]) -> None:
        if not script:
            raise ValueError("script must not be empty")
        self.script = list(script)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        index = min(len(self.requests), len(self.script) - 1)
        self.requests.append(request)
        entry = self.script[index]
        if isinstance(entry, httpx.RequestError):
            raise entry
        status_code, body = entry
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, text=body or "")

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


__all__ = [
    "MockGitHubClient",
    "MockReposClient",
    "ScriptedEndpoint",
    "MockCall",
    "MockResponse",
    "RecordingRunner",
]
