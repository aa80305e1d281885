"""Custom exceptions and the central handler that reports them to the user."""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class GodexError(Exception):
    """Base exception carrying a message fit to print at the prompt."""

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message)
        self.user_message = user_message or message


class UsageError(GodexError):
    """Wrong number or shape of command arguments."""


class NotRegisteredError(GodexError):
    def __init__(self, name: str):
        super().__init__(f"{name} has not been registered in Godex")
        self.name = name


class FetchError(GodexError):
    """Remote request failed: transport error or non-2xx response."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url
        self.status_code = status_code


class DecodeError(GodexError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Could not decode response from {url}: {reason}")
        self.url = url


class ExitRequested(Exception):
    """Raised by the exit command to stop the prompt loop."""


def handle_error(exc: Exception, echo: Callable[[str], None]) -> None:
    """Report a failed command. The command is aborted, state is left as is."""
    if isinstance(exc, GodexError):
        logger.info("Command failed: %s", exc)
        echo(exc.user_message)
        return
    logger.exception("Unhandled error: %s", exc)
    echo("Something went wrong. Run with --log-level DEBUG for details.")
