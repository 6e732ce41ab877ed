from enum import StrEnum


class TimeClass(StrEnum):
    """Speed category of a Chess.com game."""

    BULLET = "bullet"
    BLITZ = "blitz"
    RAPID = "rapid"
    DAILY = "daily"
