"""Notation package: FEN parsing."""

from chessgrid.core.notation.fen import (
    CASTLING_SYMBOLS,
    DEFAULT_CASTLING,
    EMPTY_FEN,
    STARTING_FEN,
    decode_placement,
    game_from_fen,
)

__all__ = [
    "CASTLING_SYMBOLS",
    "DEFAULT_CASTLING",
    "EMPTY_FEN",
    "STARTING_FEN",
    "decode_placement",
    "game_from_fen",
]
