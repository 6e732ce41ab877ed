"""Download a player's Chess.com game history as structured records.

Example:
    >>> import hikaru
    >>> games = hikaru.download(["hikaru", "GMHikaruOnTwitch"])
    >>> games[0].white_username
"""

from hikaru.chess_clients import download
from hikaru.config import Settings, get_settings
from hikaru.errors import HikaruError, NetworkError, NotFoundError, ParseError
from hikaru.models import GameOutcome, GameRecord, GameResult, Rules, TimeClass
from hikaru.version import __version__

__all__ = [
    "GameOutcome",
    "GameRecord",
    "GameResult",
    "HikaruError",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "Rules",
    "Settings",
    "TimeClass",
    "__version__",
    "download",
    "get_settings",
]
