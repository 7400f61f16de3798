"""
Smart Genesis logging utilities.

Provides configurable logging for HTTP requests/responses and external
commands. Ensures access tokens are never logged in full.
"""

import logging
import re
from typing import Any

# Create package loggers
_sdk_logger = logging.getLogger("smart_genesis")
_http_logger = logging.getLogger("smart_genesis.http")
_git_logger = logging.getLogger("smart_genesis.git")

# Handler added by the last configure_logging() call
_installed_handler: logging.Handler | None = None

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # GitHub token formats (classic prefixes and fine-grained)
    (re.compile(r"\b(gh[pousr]_[A-Za-z0-9]{20,}|github_pat_[A-Za-z0-9_]{20,})\b"), "[TOKEN_REDACTED]"),
    # Authorization header values
    (re.compile(r"(Authorization['\"]?\s*[:=]\s*['\"]?)(token|bearer)\s+[^\s'\",}]+", re.IGNORECASE), r"\1\2 [REDACTED]"),
    # Credentials embedded in URLs
    (re.compile(r"(https?://)[^/@\s:]+(:[^/@\s]+)?@"), r"\1[REDACTED]@"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

# Number of characters kept at each end of a token preview
_TOKEN_PREVIEW_LENGTH = 4


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    git_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure Smart Genesis logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        git_level: Log level for external command logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from smart_genesis.logging import configure_logging

        # Show every poll attempt and API call
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    # Configure main package logger, replacing a handler from an earlier call
    global _installed_handler
    if _installed_handler is not None:
        _sdk_logger.removeHandler(_installed_handler)
    _installed_handler = handler
    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    # Configure HTTP logger
    _http_logger.setLevel(http_level if http_level is not None else level)

    # Configure command logger
    _git_logger.setLevel(git_level if git_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a Smart Genesis logger.

    Args:
        name: Logger name suffix (e.g., "http", "git"). If None, returns main package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"smart_genesis.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces GitHub tokens, authorization headers and URL credentials
    with redacted placeholders.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def truncate_token(token: str) -> str:
    """
    Truncate an access token for safe display.

    Args:
        token: Full token string

    Returns:
        Truncated token like "ghp_...wxyz", or a placeholder for short tokens
    """
    if len(token) <= _TOKEN_PREVIEW_LENGTH * 3:
        return "[TOKEN_REDACTED]"

    return f"{token[:_TOKEN_PREVIEW_LENGTH]}...{token[-_TOKEN_PREVIEW_LENGTH:]}"


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: token, authorization, secret, password, api_key)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = {"token", "authorization", "secret", "password", "api_key"}

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers (optional)
        body: Request body (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if headers:
        safe_headers = safe_log_dict(headers)
        log_parts.append(f"headers={safe_headers}")

    if body:
        safe_body = safe_log_dict(body)
        log_parts.append(f"body={safe_body}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    body: dict[str, Any] | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level with sensitive data masked.

    Args:
        status_code: HTTP status code
        url: Request URL
        body: Response body (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if body:
        safe_body = safe_log_dict(body)
        log_parts.append(f"body={safe_body}")

    _http_logger.debug(" | ".join(log_parts))


def log_command(command: list[str], cwd: str) -> None:
    """
    Log an external command at INFO level.

    Remote URLs in the arguments are masked in case they carry credentials.

    Args:
        command: Command and arguments
        cwd: Working directory the command runs in
    """
    if not _git_logger.isEnabledFor(logging.INFO):
        return

    rendered = mask_sensitive_data(" ".join(command))
    _git_logger.info(f"Running: {rendered} in {cwd}")


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "truncate_token",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_command",
]
