"""PGN tag extraction for archive games."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from io import StringIO

import chess.pgn

_UNKNOWN_CHARS = frozenset("?.")


@dataclass(frozen=True, slots=True)
class PgnTags:
    """Tag pairs read from a Chess.com PGN.

    Attributes:
        eco: ECO opening code, e.g. ``"C50"``.
        eco_url: Chess.com opening page from the ``ECOUrl`` tag.
        utc_date: ``UTCDate`` tag in PGN date form, e.g. ``"2024.07.01"``.
    """

    eco: str | None = None
    eco_url: str | None = None
    utc_date: str | None = None


def extract_pgn_tags(pgn: str | None) -> PgnTags:
    """Return the ECO, ECOUrl and UTCDate tags of a PGN.

    Missing, blank or unknown (``?``) values come back as None, as does
    everything when the PGN itself is absent or has no tag section.
    """
    if not pgn or not pgn.strip().startswith("["):
        return PgnTags()
    headers = chess.pgn.read_headers(StringIO(pgn))
    if headers is None:
        return PgnTags()
    return PgnTags(
        eco=_header_value(headers, "ECO"),
        eco_url=_header_value(headers, "ECOUrl"),
        utc_date=_header_value(headers, "UTCDate"),
    )


def _header_value(headers: Mapping[str, str], name: str) -> str | None:
    value = (headers.get(name) or "").strip()
    if not value or set(value) <= _UNKNOWN_CHARS:
        return None
    return value
