from __future__ import annotations

from enum import StrEnum


class GameOutcome(StrEnum):
    """
    Enumeration representing the outcome of a game for one player.

    Attributes:
        WIN: The player won.
        LOSS: The player lost.
        DRAW: The game was drawn.
    """

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"

    @property
    def score(self) -> float:
        """Tournament score for the outcome: 1, 0.5 or 0."""
        return _OUTCOME_SCORES[self]


class GameResult(StrEnum):
    """
    Per-side result codes reported by the Chess.com API.

    Each side of a game carries its own code: the winner gets ``win`` and the
    loser gets the reason they lost (``checkmated``, ``timeout``, ...). Draws
    give both sides the same draw reason.

    Methods:
        outcome() -> GameOutcome:
            Collapses the code into a win, loss or draw.
    """

    WIN = "win"
    TIMEOUT = "timeout"
    CHECKMATED = "checkmated"
    STALEMATE = "stalemate"
    RESIGNED = "resigned"
    AGREED = "agreed"
    REPETITION = "repetition"
    INSUFFICIENT = "insufficient"
    ABANDONED = "abandoned"
    FIFTY_MOVE = "50move"
    TIME_VS_INSUFFICIENT = "timevsinsufficient"
    KING_OF_THE_HILL = "kingofthehill"
    THREE_CHECK = "threecheck"
    BUGHOUSE_PARTNER_LOSE = "bughousepartnerlose"
    BUGHOUSE_PARTNER_WIN = "bughousepartnerwin"

    def outcome(self) -> GameOutcome:
        if self in _WINNING_RESULTS:
            return GameOutcome.WIN
        if self in _LOSING_RESULTS:
            return GameOutcome.LOSS
        return GameOutcome.DRAW


_WINNING_RESULTS = frozenset({GameResult.WIN, GameResult.BUGHOUSE_PARTNER_WIN})
# kingofthehill and threecheck name how the opponent won.
_LOSING_RESULTS = frozenset(
    {
        GameResult.CHECKMATED,
        GameResult.TIMEOUT,
        GameResult.RESIGNED,
        GameResult.ABANDONED,
        GameResult.KING_OF_THE_HILL,
        GameResult.THREE_CHECK,
        GameResult.BUGHOUSE_PARTNER_LOSE,
    }
)
_OUTCOME_SCORES = {
    GameOutcome.WIN: 1.0,
    GameOutcome.DRAW: 0.5,
    GameOutcome.LOSS: 0.0,
}
