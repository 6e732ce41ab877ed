"""Models for the Chess.com game archive payloads."""

from pydantic import BaseModel, ConfigDict, Field

from hikaru.models.game_result import GameResult
from hikaru.models.rules import Rules
from hikaru.models.time_class import TimeClass


class ArchivePlayer(BaseModel):
    """One side of a game as reported by the archive endpoint.

    Attributes:
        username: Chess.com username, in the player's own casing.
        rating: Rating after the game.
        result: Result code for this side.
        profile_url: API URL of the player's profile (the ``@id`` key).
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str
    rating: int
    result: GameResult
    profile_url: str = Field(alias="@id")


class ArchiveGame(BaseModel):
    """A single game object from a monthly archive.

    Attributes:
        game_url: Web URL of the game (the ``url`` key).
        pgn: Full PGN text, absent for some aborted games.
        time_control: PGN-style time control, e.g. ``"180+2"`` or ``"1/86400"``.
        start_time: Epoch seconds the game started; daily games only.
        end_time: Epoch seconds the game ended.
        rated: Whether the game was rated.
        fen: Final position.
        time_class: Speed category.
        rules: Variant.
        eco: Opening URL.
        tournament: Tournament API URL, when played in one.
        team_match: Team match API URL (the ``match`` key).
        white: The white player.
        black: The black player.
    """

    model_config = ConfigDict(populate_by_name=True)

    game_url: str = Field(alias="url")
    pgn: str | None = None
    time_control: str
    start_time: int | None = None
    end_time: int
    rated: bool
    fen: str
    time_class: TimeClass
    rules: Rules
    eco: str | None = None
    tournament: str | None = None
    team_match: str | None = Field(default=None, alias="match")
    white: ArchivePlayer
    black: ArchivePlayer


class ArchiveIndex(BaseModel):
    """Monthly archive URLs for a player, oldest first."""

    archives: list[str]


class ArchiveMonth(BaseModel):
    """Games played by a player in one month, in the order the API lists them."""

    games: list[ArchiveGame]
