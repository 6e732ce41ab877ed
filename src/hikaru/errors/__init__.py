"""Custom error types used in hikaru."""

from __future__ import annotations


class HikaruError(Exception):
    """Base class for errors raised while downloading games.

    Attributes:
        url: The request URL that failed, when there is one.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class NetworkError(HikaruError):
    """Transport failure or unexpected HTTP status."""


class NotFoundError(HikaruError):
    """The API has no game archive for a player."""

    def __init__(
        self, message: str, *, identifier: str | None = None, url: str | None = None
    ) -> None:
        super().__init__(message, url=url)
        self.identifier = identifier


class ParseError(HikaruError):
    """Response body is not JSON or does not match the expected schema."""


__all__ = ["HikaruError", "NetworkError", "NotFoundError", "ParseError"]
