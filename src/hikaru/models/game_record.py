"""The normalized record returned for each downloaded game."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from hikaru.models.archive import ArchiveGame
from hikaru.models.game_result import GameOutcome, GameResult
from hikaru.models.rules import Rules
from hikaru.models.time_class import TimeClass
from hikaru.pgn_headers import extract_pgn_tags


class GameRecord(BaseModel):
    """One downloaded game, seen from the player it was downloaded for.

    The first block of fields mirrors the archive game object. ``eco_pgn``,
    ``eco_url`` and ``date`` come from the PGN tags. The remaining fields
    describe the game from ``player_username``'s side of the board.

    Example:
        >>> record = GameRecord.from_archive_game(game, "hikaru")
        >>> record.colour, record.result_win_lose
        ('White', <GameOutcome.WIN: 'win'>)
    """

    model_config = ConfigDict(frozen=True)

    game_url: str
    pgn: str | None
    time_control: str
    start_time: int | None
    end_time: int
    rated: bool
    fen: str
    time_class: TimeClass
    rules: Rules
    eco_game: str | None
    tournament: str | None
    team_match: str | None
    white_username: str
    white_rating: int
    white_result: GameResult
    black_username: str
    black_rating: int
    black_result: GameResult
    eco_pgn: str | None
    eco_url: str | None
    date: str | None
    player_username: str
    colour: Literal["White", "Black"]
    rating: int
    result: GameResult
    result_win_lose: GameOutcome
    win: float

    @classmethod
    def from_archive_game(cls, game: ArchiveGame, player_username: str) -> GameRecord:
        """Build a record for ``player_username`` from a raw archive game.

        The player is White when the white username matches ignoring case,
        otherwise Black.
        """
        is_white = game.white.username.casefold() == player_username.casefold()
        side = game.white if is_white else game.black
        outcome = side.result.outcome()
        tags = extract_pgn_tags(game.pgn)
        return cls(
            game_url=game.game_url,
            pgn=game.pgn,
            time_control=game.time_control,
            start_time=game.start_time,
            end_time=game.end_time,
            rated=game.rated,
            fen=game.fen,
            time_class=game.time_class,
            rules=game.rules,
            eco_game=game.eco,
            tournament=game.tournament,
            team_match=game.team_match,
            white_username=game.white.username,
            white_rating=game.white.rating,
            white_result=game.white.result,
            black_username=game.black.username,
            black_rating=game.black.rating,
            black_result=game.black.result,
            eco_pgn=tags.eco,
            eco_url=tags.eco_url,
            date=tags.utc_date,
            player_username=player_username,
            colour="White" if is_white else "Black",
            rating=side.rating,
            result=side.result,
            result_win_lose=outcome,
            win=outcome.score,
        )
