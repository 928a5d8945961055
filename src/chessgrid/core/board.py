"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chessgrid.core.errors import MalformedPlacementError
from chessgrid.core.piece import Piece, is_piece_char
from chessgrid.core.types import (
    BOARD_SIZE,
    SQUARE_COUNT,
    Square,
    coordinate_to_index,
    is_valid_coordinate,
)

_EMPTY_RUN_DIGITS = "12345678"


class Board:
    """Fixed 64-square board; each cell holds a :class:`Piece` or ``None``.

    Index 0 is a8 and index 63 is h1 (see :mod:`chessgrid.core.types`).
    There is no mutation API: a board is either blank or decoded wholesale.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        cells = tuple(squares) if squares is not None else (None,) * SQUARE_COUNT
        if len(cells) != SQUARE_COUNT:
            raise ValueError(
                f"Board needs exactly {SQUARE_COUNT} cells, got {len(cells)}"
            )
        self._squares: tuple[Piece | None, ...] = cells

    # -- Factory ------------------------------------------------------------

    @classmethod
    def blank(cls) -> Board:
        """Board with every cell empty."""
        return cls()

    @classmethod
    def from_placement(cls, field: str) -> Board:
        """Decode the piece-placement field of a FEN string.

        The scan is a single pass with a cursor starting at a8. Piece letters
        land on the cursor square and move it one file right, ``/`` starts the
        next row and a digit skips that many files. A run may end exactly on
        the board edge, but a piece arriving after the cursor has left the
        board raises :class:`MalformedPlacementError`.

        Rank widths and the number of ranks are not checked: a short field
        leaves the remaining cells empty.
        """
        squares: list[Piece | None] = [None] * SQUARE_COUNT
        x = y = 0
        off_board = False

        for ch in field:
            index = coordinate_to_index(x, y)
            piece: Piece | None = None
            if is_piece_char(ch):
                piece = Piece.from_char(ch)
                x += 1
            elif ch == "/":
                x = 0
                y += 1
            elif ch in _EMPTY_RUN_DIGITS:
                x += int(ch)
            else:
                raise MalformedPlacementError.invalid_character(ch)

            if piece is not None:
                if off_board:
                    raise MalformedPlacementError.invalid_coordinate(ch, x, y)
                squares[index] = piece
            off_board = not is_valid_coordinate(x, y)

        return cls(squares)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def at(self, x: int, y: int) -> Piece | None:
        """Cell at coordinate ``(x, y)``."""
        if not is_valid_coordinate(x, y):
            raise IndexError(f"Coordinate off the board: ({x}, {y})")
        return self._squares[coordinate_to_index(x, y)]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def __len__(self) -> int:
        return SQUARE_COUNT

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(index, piece)`` for every non-empty cell, in index order."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def rows(self) -> Iterator[tuple[Piece | None, ...]]:
        """The eight rows top to bottom (rank 8 first)."""
        for y in range(BOARD_SIZE):
            start = y * BOARD_SIZE
            yield self._squares[start : start + BOARD_SIZE]

    def diagram(self, *, unicode: bool = False) -> str:
        """Text drawing with rank and file labels."""
        lines: list[str] = []
        for y, row in enumerate(self.rows()):
            cells = [
                "." if p is None else (p.symbol if unicode else str(p)) for p in row
            ]
            lines.append(f"{BOARD_SIZE - y} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        return self.diagram()
