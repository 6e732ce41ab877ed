from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from hikaru.config import Settings
from hikaru.models import GameRecord


@dataclass(slots=True)
class BaseChessClientContext:
    """Shared context for chess API clients.

    Attributes:
        settings: Settings used for API calls.
        logger: Logger for client-specific messages.
    """

    settings: Settings
    logger: logging.Logger


class BaseChessClient:
    """Base class for chess API clients.

    Subclasses are expected to implement `download`.
    """

    def __init__(self, context: BaseChessClientContext) -> None:
        """Initialize the client with shared context.

        Args:
            context: Base context containing settings and logger.
        """

        self._context = context

    @property
    def settings(self) -> Settings:
        """Expose the settings from the context.

        Returns:
            The active `Settings` instance.
        """

        return self._context.settings

    @property
    def logger(self) -> logging.Logger:
        """Expose the logger from the context.

        Returns:
            Logger used by the client.
        """

        return self._context.logger

    def download(self, identifiers: str | Iterable[str]) -> list[GameRecord]:
        """Download every game for the given players.

        Args:
            identifiers: One username or an iterable of usernames.

        Returns:
            Game records in player order, then archive order.

        Raises:
            NotImplementedError: When the subclass does not implement this method.
        """

        raise NotImplementedError("Subclasses must implement download")

    def _request_headers(self) -> dict[str, str]:
        """Headers sent with every request.

        Returns:
            Headers dict for the request.
        """

        return {"User-Agent": self.settings.user_agent, "Accept": "application/json"}
