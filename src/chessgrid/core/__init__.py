"""Core domain layer — board model and FEN decoding, no external dependencies.

Quick start::

    from chessgrid.core import STARTING_FEN, game_from_fen

    game = game_from_fen(STARTING_FEN)
    print(game.board)
    print(game.turn, game.castling)
"""

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import (
    FenError,
    InvalidCastlingCharError,
    InvalidTurnError,
    MalformedPlacementError,
    MissingFieldError,
    NumericParseError,
)
from chessgrid.core.game import Game
from chessgrid.core.notation import (
    CASTLING_SYMBOLS,
    EMPTY_FEN,
    STARTING_FEN,
    decode_placement,
    game_from_fen,
)
from chessgrid.core.piece import Piece
from chessgrid.core.types import (
    BOARD_SIZE,
    SQUARE_COUNT,
    Square,
    coordinate_to_index,
    index_to_coordinate,
    is_valid_coordinate,
    is_valid_index,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "SQUARE_COUNT",
    "Square",
    "coordinate_to_index",
    "index_to_coordinate",
    "is_valid_coordinate",
    "is_valid_index",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Game",
    "Piece",
    # Errors
    "FenError",
    "InvalidCastlingCharError",
    "InvalidTurnError",
    "MalformedPlacementError",
    "MissingFieldError",
    "NumericParseError",
    # Notation
    "CASTLING_SYMBOLS",
    "EMPTY_FEN",
    "STARTING_FEN",
    "decode_placement",
    "game_from_fen",
]
