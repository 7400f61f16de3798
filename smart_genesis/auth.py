"""
OAuth token acquisition.

The consent screen and the token endpoint are served by a separate OAuth
server. This module opens the consent screen in the user's browser and then
polls the token endpoint on a fixed interval until a token shows up or the
attempt budget runs out.
"""

import time
import webbrowser
from collections.abc import Callable
from typing import Any

from smart_genesis.config import GenesisConfig
from smart_genesis.exceptions import APIError, BrowserOpenError, PollTimeoutError
from smart_genesis.logging import get_logger, truncate_token
from smart_genesis.transport import HTTPTransport

logger = get_logger()


class ConsentInitiator:
    """Opens the OAuth consent screen and returns immediately."""

    def __init__(
        self,
        login_url: str,
        opener: Callable[[str], Any] = webbrowser.open,
    ) -> None:
        """
        Args:
            login_url: Consent screen URL on the OAuth server
            opener: Callable that opens a URL (default: ``webbrowser.open``)
        """
        self.login_url = login_url
        self.opener = opener

    def open(self) -> None:
        """
        Open the consent screen without waiting for the user.

        Raises:
            BrowserOpenError: If the opener raises or reports that no browser
                could be launched
        """
        logger.info("Opening GitHub OAuth consent screen...")
        try:
            opened = self.opener(self.login_url)
        except (webbrowser.Error, OSError) as e:
            raise BrowserOpenError(self.login_url, str(e)) from e

        if opened is False:
            raise BrowserOpenError(self.login_url, "no runnable browser found")


class TokenPoller:
    """
    Polls the token endpoint until an access token is available.

    No backoff and no jitter: every attempt is one GET, followed by a fixed
    delay unless it was the last one.

    Example:
        ```python
        from smart_genesis.auth import TokenPoller

        poller = TokenPoller("https://oauth.example.com/token", max_attempts=5)
        token = poller.poll()
        ```
    """

    def __init__(
        self,
        token_url: str,
        max_attempts: int = 20,
        interval: float = 3.0,
        http: HTTPTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Args:
            token_url: Token endpoint on the OAuth server
            max_attempts: Number of GET requests before giving up
            interval: Seconds to wait between attempts
            http: HTTP transport (default: a new one with a 30 second timeout)
            sleep: Sleep function, replaceable in tests
        """
        self.token_url = token_url
        self.max_attempts = max_attempts
        self.interval = interval
        self.http = http or HTTPTransport()
        self.sleep = sleep

    @classmethod
    def from_config(
        cls,
        config: GenesisConfig,
        http: HTTPTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "TokenPoller":
        return cls(
            token_url=config.token_url,
            max_attempts=config.max_attempts,
            interval=config.poll_interval,
            http=http or HTTPTransport(timeout=config.request_timeout),
            sleep=sleep,
        )

    def poll(self) -> str:
        """
        Wait for the OAuth server to hand out a token.

        Returns:
            The access token

        Raises:
            PollTimeoutError: If no attempt returned a token
        """
        logger.info("Waiting for access token from the OAuth server...")

        for attempt in range(1, self.max_attempts + 1):
            token = self._attempt(attempt)
            if token:
                logger.info(f"Access token received ({truncate_token(token)})")
                return token

            if attempt < self.max_attempts:
                self.sleep(self.interval)

        raise PollTimeoutError(self.max_attempts)

    def _attempt(self, attempt: int) -> str | None:
        try:
            data = self.http.get_json(self.token_url)
        except APIError as e:
            logger.warning(f"Polling error (attempt {attempt}/{self.max_attempts}): {e.message}")
            return None

        token = data.get("token")
        if isinstance(token, str) and token:
            return token

        logger.debug(f"No token yet (attempt {attempt}/{self.max_attempts})")
        return None


def acquire_token(
    config: GenesisConfig,
    opener: Callable[[str], Any] = webbrowser.open,
    http: HTTPTransport | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """
    Open the consent screen, then poll for the token.

    Args:
        config: Login/token URLs and the poll budget
        opener: Browser opener
        http: HTTP transport for polling
        sleep: Sleep function for the poll delay

    Returns:
        The access token

    Raises:
        BrowserOpenError: If the consent screen could not be opened
        PollTimeoutError: If no token arrived in time
    """
    ConsentInitiator(config.login_url, opener=opener).open()

    if http is not None:
        return TokenPoller.from_config(config, http=http, sleep=sleep).poll()

    with HTTPTransport(timeout=config.request_timeout) as owned:
        return TokenPoller.from_config(config, http=owned, sleep=sleep).poll()
