from enum import StrEnum


class Rules(StrEnum):
    """Chess variant a game was played under."""

    CHESS = "chess"
    CHESS960 = "chess960"
    CRAZYHOUSE = "crazyhouse"
    THREE_CHECK = "threecheck"
    KING_OF_THE_HILL = "kingofthehill"
    HORDE = "horde"
    BUGHOUSE = "bughouse"
    ODDS_CHESS = "oddschess"
