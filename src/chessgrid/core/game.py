"""Game — decoded position plus turn bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.board import Board
from chessgrid.core.enums import Color


@dataclass(frozen=True, slots=True)
class Game:
    """Snapshot of a position as described by a FEN string.

    Built in one piece by :func:`chessgrid.core.notation.game_from_fen`; a
    decode either yields a complete ``Game`` or raises.
    """

    board: Board
    turn: Color
    # Fullmove number the position began at.
    start_turn: int
    # Ply counter: full_turn_num * 2, plus one when Black is to move.
    half_turn_num: int
    full_turn_num: int
    # Subset of "KQkq" in input order; uppercase = White's rights.
    castling: tuple[str, ...]
    # Halfmove clock toward the fifty-move rule.
    fifty_move_rule: int

    @classmethod
    def from_fen(cls, fen: str) -> Game:
        """Shortcut for :func:`chessgrid.core.notation.game_from_fen`."""
        from chessgrid.core.notation.fen import game_from_fen

        return game_from_fen(fen)
