from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from hikaru.chess_clients.base_chess_client import BaseChessClient, BaseChessClientContext
from hikaru.config import Settings, get_settings
from hikaru.errors import NetworkError, NotFoundError, ParseError
from hikaru.models import ArchiveGame, ArchiveIndex, ArchiveMonth, GameRecord
from hikaru.utils import get_logger

logger = get_logger(__name__)

ARCHIVES_PATH = "/player/{username}/games/archives"
HTTP_STATUS_NOT_FOUND = 404
HTTP_STATUS_GONE = 410
MISSING_ARCHIVE_STATUSES = frozenset({HTTP_STATUS_NOT_FOUND, HTTP_STATUS_GONE})

ModelT = TypeVar("ModelT", bound=BaseModel)

__all__ = [
    "ARCHIVES_PATH",
    "ChesscomClient",
    "ChesscomClientContext",
    "build_client",
    "download",
]


@dataclass(slots=True)
class ChesscomClientContext(BaseChessClientContext):
    """Context for Chess.com API interactions."""


class ChesscomClient(BaseChessClient):
    """Client for the Chess.com Published-Data game archives.

    Requests are issued one at a time. Nothing is retried and nothing is
    cached: any failure aborts the download and is raised to the caller.
    """

    def __init__(self, context: ChesscomClientContext) -> None:
        """Initialize the client with Chess.com-specific context.

        Args:
            context: Client context containing settings and logger.
        """

        super().__init__(context)

    def download(self, identifiers: str | Iterable[str]) -> list[GameRecord]:
        """Download every archived game for a batch of players.

        Args:
            identifiers: One username or an iterable of usernames.

        Returns:
            Game records grouped by player in the order supplied, each group in
            archive-chronological order.

        Raises:
            NetworkError: When a request fails or returns an unexpected status.
            NotFoundError: When a player has no game archive.
            ParseError: When a response body does not match the expected schema.

        Example:
            >>> client.download(["hikaru", "GMHikaruOnTwitch"])
        """

        usernames = _normalize_identifiers(identifiers)
        records: list[GameRecord] = []
        for username in usernames:
            records.extend(self.fetch_player_games(username))
        self.logger.info("Downloaded %s games for %s players", len(records), len(usernames))
        return records

    def fetch_player_games(self, identifier: str) -> list[GameRecord]:
        """Download every archived game for one player.

        Args:
            identifier: Chess.com username.

        Returns:
            Game records in archive-chronological order.
        """

        archives = self.fetch_archive_index(identifier)
        records: list[GameRecord] = []
        for archive_url in archives:
            games = self.fetch_archive_games(archive_url, identifier=identifier)
            records.extend(GameRecord.from_archive_game(game, identifier) for game in games)
        self.logger.info(
            "Fetched %s games from %s archives for %s",
            len(records),
            len(archives),
            identifier,
        )
        return records

    def fetch_archive_index(self, identifier: str) -> list[str]:
        """Fetch the monthly archive URLs for a player.

        Args:
            identifier: Chess.com username.

        Returns:
            Archive URLs, oldest month first.

        Raises:
            NotFoundError: When the player is unknown or has no archives.
        """

        url = self._archive_index_url(identifier)
        payload = self._get_json(url, self.settings.index_timeout_s, identifier)
        index = self._validate(ArchiveIndex, payload, url)
        if not index.archives:
            self.logger.warning("No archives returned for %s", identifier)
            raise NotFoundError(
                f"No game archives for player {identifier!r}",
                identifier=identifier,
                url=url,
            )
        return index.archives

    def fetch_archive_games(
        self, archive_url: str, *, identifier: str | None = None
    ) -> list[ArchiveGame]:
        """Fetch and decode the games of one monthly archive.

        Args:
            archive_url: Monthly archive endpoint URL.
            identifier: Player the archive belongs to, used in error reports.

        Returns:
            Games in the order the archive lists them.
        """

        payload = self._get_json(archive_url, self.settings.archive_timeout_s, identifier)
        return self._validate(ArchiveMonth, payload, archive_url).games

    def _archive_index_url(self, identifier: str) -> str:
        username = quote(identifier.strip().lower(), safe="")
        return self.settings.api_base_url + ARCHIVES_PATH.format(username=username)

    def _get_json(self, url: str, timeout: float, identifier: str | None) -> object:
        """GET a URL and decode its JSON body.

        Args:
            url: URL to request.
            timeout: Timeout in seconds.
            identifier: Player the request is for, if any.

        Returns:
            Decoded JSON payload.
        """

        response = self._get(url, timeout)
        if response.status_code in MISSING_ARCHIVE_STATUSES:
            self.logger.warning("Chess.com returned %s for %s", response.status_code, url)
            target = f"player {identifier!r}" if identifier else url
            raise NotFoundError(
                f"No game archive found for {target}",
                identifier=identifier,
                url=url,
            )
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            self.logger.warning("Unexpected status %s from %s", response.status_code, url)
            raise NetworkError(f"Request to {url} failed: {exc}", url=url) from exc
        try:
            return response.json()
        except ValueError as exc:
            self.logger.warning("Response from %s is not valid JSON", url)
            raise ParseError(f"Response from {url} is not valid JSON: {exc}", url=url) from exc

    def _validate(self, model_cls: type[ModelT], payload: object, url: str) -> ModelT:
        try:
            return model_cls.model_validate(payload)
        except ValidationError as exc:
            self.logger.warning("Response from %s does not match %s", url, model_cls.__name__)
            raise ParseError(
                f"Response from {url} does not match {model_cls.__name__}: {exc}",
                url=url,
            ) from exc

    def _get(self, url: str, timeout: float) -> requests.Response:
        self.logger.debug("GET %s", url)
        try:
            return requests.get(url, headers=self._request_headers(), timeout=timeout)
        except requests.RequestException as exc:
            self.logger.warning("Request to %s failed: %s", url, exc)
            raise NetworkError(f"Request to {url} failed: {exc}", url=url) from exc


def _normalize_identifiers(identifiers: str | Iterable[str]) -> list[str]:
    """Turn the caller's identifiers into a list of usernames.

    Args:
        identifiers: One username or an iterable of usernames.

    Returns:
        Stripped usernames in the order supplied.

    Raises:
        ValueError: When an identifier is not a non-empty string.
    """

    if isinstance(identifiers, str):
        identifiers = [identifiers]
    usernames: list[str] = []
    for identifier in identifiers:
        if not isinstance(identifier, str) or not identifier.strip():
            raise ValueError(f"Player identifiers must be non-empty strings, got {identifier!r}")
        usernames.append(identifier.strip())
    return usernames


def _client_logger(settings: Settings) -> logging.Logger:
    """Logger beneath the module logger holding the client's configured level.

    One child per level name, so clients built with different levels do not
    overwrite each other.
    """

    client_logger = get_logger(f"{logger.name}.{settings.log_level.lower()}")
    client_logger.setLevel(settings.log_level_value)
    return client_logger


def build_client(settings: Settings) -> ChesscomClient:
    """Build a Chess.com client for the given settings.

    Args:
        settings: Settings for the client.

    Returns:
        Configured client.
    """

    context = ChesscomClientContext(settings=settings, logger=_client_logger(settings))
    return ChesscomClient(context)


def download(
    identifiers: str | Iterable[str], settings: Settings | None = None
) -> list[GameRecord]:
    """Download every archived game for one or more Chess.com players.

    Args:
        identifiers: One username or an iterable of usernames.
        settings: Settings to use; loaded from the environment when omitted.

    Returns:
        Game records grouped by player in the order supplied.

    Example:
        >>> games = download(["hikaru", "GMHikaruOnTwitch"])
        >>> games[0].white_username
    """

    return build_client(settings or get_settings()).download(identifiers)
