"""Public exports for game models."""

from hikaru.models.archive import ArchiveGame, ArchiveIndex, ArchiveMonth, ArchivePlayer
from hikaru.models.game_record import GameRecord
from hikaru.models.game_result import GameOutcome, GameResult
from hikaru.models.rules import Rules
from hikaru.models.time_class import TimeClass

__all__ = [
    "ArchiveGame",
    "ArchiveIndex",
    "ArchiveMonth",
    "ArchivePlayer",
    "GameOutcome",
    "GameRecord",
    "GameResult",
    "Rules",
    "TimeClass",
]
