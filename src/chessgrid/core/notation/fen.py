"""FEN parsing."""

from __future__ import annotations

import logging
from collections import deque

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.errors import (
    InvalidCastlingCharError,
    InvalidTurnError,
    MissingFieldError,
    NumericParseError,
)
from chessgrid.core.game import Game

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
EMPTY_FEN = "8/8/8/8/8/8/8/8 w - - 0 1"

CASTLING_SYMBOLS = "KQkq"
# Rights assumed when the castling field is absent.
DEFAULT_CASTLING: tuple[str, ...] = tuple(CASTLING_SYMBOLS)

_HALFMOVE_FIELD = 5
_FULLMOVE_FIELD = 6
# Counters are unsigned 64-bit values.
_COUNTER_MAX = 2**64 - 1


def decode_placement(field: str) -> Board:
    """Decode a piece-placement field; see :meth:`Board.from_placement`."""
    return Board.from_placement(field)


def game_from_fen(fen: str) -> Game:
    """Parse a FEN string into a :class:`Game`.

    Fields are separated by single ASCII spaces. Only the placement field is
    required; the others default when the string ends early (White to move,
    full castling rights, zero counters). A field that is present but
    malformed always raises a :class:`~chessgrid.core.errors.FenError`.
    """
    fields = deque(fen.split(" "))

    # 1. Piece placement
    placement = fields.popleft()
    if not placement:
        raise MissingFieldError()
    board = Board.from_placement(placement)

    # 2. Side to move
    turn = _decode_turn(_pop(fields))

    # 3. Castling
    castling = _decode_castling(_pop(fields))

    # 4. En passant target: consumed, not interpreted.
    _pop(fields)

    # 5–6. Clocks
    fifty_move_rule = _decode_counter(_pop(fields), _HALFMOVE_FIELD)
    full_turn_num = _decode_counter(_pop(fields), _FULLMOVE_FIELD)

    if fields:
        _LOGGER.debug(
            "Ignoring %d trailing FEN field(s): %r", len(fields), list(fields)
        )

    half_turn_num = full_turn_num * 2 + 1 if turn == Color.BLACK else full_turn_num * 2

    return Game(
        board=board,
        turn=turn,
        start_turn=full_turn_num,
        half_turn_num=half_turn_num,
        full_turn_num=full_turn_num,
        castling=castling,
        fifty_move_rule=fifty_move_rule,
    )


def _pop(fields: deque[str]) -> str | None:
    return fields.popleft() if fields else None


def _decode_turn(token: str | None) -> Color:
    if token is None:
        _LOGGER.debug("FEN turn field absent, defaulting to white")
        return Color.WHITE
    if token == "w":
        return Color.WHITE
    if token == "b":
        return Color.BLACK
    raise InvalidTurnError(token)


def _decode_castling(token: str | None) -> tuple[str, ...]:
    if token is None:
        _LOGGER.debug("FEN castling field absent, assuming %s", CASTLING_SYMBOLS)
        return DEFAULT_CASTLING
    if token == "-":
        return ()
    rights: list[str] = []
    for ch in token:
        if ch not in CASTLING_SYMBOLS:
            raise InvalidCastlingCharError(ch)
        rights.append(ch)
    return tuple(rights)


def _decode_counter(token: str | None, field: int) -> int:
    if token is None:
        _LOGGER.debug("FEN field %d absent, defaulting to 0", field)
        token = "0"
    # One leading "+" is allowed; int() would also take "-", whitespace and
    # underscores.
    digits = token[1:] if token.startswith("+") else token
    if not (digits.isascii() and digits.isdigit()):
        raise NumericParseError(token, field=field)
    value = int(digits)
    if value > _COUNTER_MAX:
        raise NumericParseError(token, field=field)
    return value
