"""Public exports for chess client abstractions."""

from hikaru.chess_clients.base_chess_client import BaseChessClient, BaseChessClientContext
from hikaru.chess_clients.chesscom_client import (
    ChesscomClient,
    ChesscomClientContext,
    build_client,
    download,
)

__all__ = [
    "BaseChessClient",
    "BaseChessClientContext",
    "ChesscomClient",
    "ChesscomClientContext",
    "build_client",
    "download",
]
