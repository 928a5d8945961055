"""Tests for Board and placement decoding."""

import pytest

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.errors import MalformedPlacementError
from chessgrid.core.piece import Piece
from chessgrid.core.types import A1, A8, D1, E1, E2, E4, E8, H1, H8, SQUARE_COUNT

START_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def _expand(placement: str) -> list[str | None]:
    """Independent reference expansion of a well-formed placement field."""
    cells: list[str | None] = []
    for rank in placement.split("/"):
        for ch in rank:
            if ch.isdigit():
                cells.extend([None] * int(ch))
            else:
                cells.append(ch)
    return cells


class TestBoardBlank:
    def test_all_empty(self) -> None:
        board = Board.blank()
        assert all(cell is None for cell in board)

    def test_length_is_fixed(self) -> None:
        assert len(Board.blank()) == SQUARE_COUNT
        assert len(list(Board.blank())) == SQUARE_COUNT

    def test_wrong_cell_count_raises(self) -> None:
        with pytest.raises(ValueError, match="exactly 64"):
            Board([None] * 63)

    def test_no_item_assignment(self) -> None:
        board = Board.blank()
        with pytest.raises(TypeError):
            board[0] = Piece(Color.WHITE, PieceType.KING)  # type: ignore[index]


class TestPlacementDecoding:
    def test_starting_corners(self) -> None:
        board = Board.from_placement(START_PLACEMENT)
        assert board[A8] == Piece(Color.BLACK, PieceType.ROOK)
        assert board[H8] == Piece(Color.BLACK, PieceType.ROOK)
        assert board[A1] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[H1] == Piece(Color.WHITE, PieceType.ROOK)

    def test_starting_kings_and_queen(self) -> None:
        board = Board.from_placement(START_PLACEMENT)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[D1] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_starting_empty_middle(self) -> None:
        board = Board.from_placement(START_PLACEMENT)
        for sq in range(16, 48):
            assert board.is_empty(sq)

    def test_pawn_ranks(self) -> None:
        board = Board.from_placement(START_PLACEMENT)
        assert all(board[sq] == Piece(Color.BLACK, PieceType.PAWN) for sq in range(8, 16))
        assert all(board[sq] == Piece(Color.WHITE, PieceType.PAWN) for sq in range(48, 56))

    @pytest.mark.parametrize(
        "placement",
        [
            START_PLACEMENT,
            "8/8/8/8/8/8/8/8",
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R",
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
            "8/8/4k3/8/8/4K3/8/8",
            "7k/8/8/8/8/8/8/K7",
        ],
    )
    def test_reconstructs_well_formed_placement(self, placement: str) -> None:
        board = Board.from_placement(placement)
        expected = _expand(placement)
        assert len(expected) == SQUARE_COUNT
        assert [None if p is None else str(p) for p in board] == expected

    def test_run_may_end_on_board_edge(self) -> None:
        board = Board.from_placement("7k")
        assert board[7] == Piece(Color.BLACK, PieceType.KING)

    def test_digit_advances_cursor(self) -> None:
        board = Board.from_placement("8/8/8/8/4P3")
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[E2] is None


class TestPlacementErrors:
    @pytest.mark.parametrize("char", ["z", "x", "0", "9", "-", " ", "♜"])
    def test_invalid_character(self, char: str) -> None:
        with pytest.raises(MalformedPlacementError, match="Invalid character") as info:
            Board.from_placement(f"rnbq{char}bnr")
        assert info.value.char == char
        assert info.value.field == 1

    def test_ninth_piece_in_rank(self) -> None:
        with pytest.raises(MalformedPlacementError, match="Invalid coordinate") as info:
            Board.from_placement("ppppppppp")
        assert (info.value.x, info.value.y) == (9, 0)
        assert info.value.char == "p"

    def test_piece_after_full_empty_run(self) -> None:
        with pytest.raises(MalformedPlacementError, match="Invalid coordinate"):
            Board.from_placement("8p")

    def test_piece_below_last_rank(self) -> None:
        with pytest.raises(MalformedPlacementError, match="Invalid coordinate") as info:
            Board.from_placement("8/8/8/8/8/8/8/8/p")
        assert (info.value.x, info.value.y) == (1, 8)


class TestPlacementKnownGaps:
    """Rank widths and rank count are not validated."""

    def test_short_field_leaves_cells_empty(self) -> None:
        board = Board.from_placement("4k3")
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)
        assert sum(1 for _ in board.occupied()) == 1

    def test_over_wide_empty_run_accepted(self) -> None:
        board = Board.from_placement("45/8/8/8/8/8/8/8")
        assert board == Board.blank()

    def test_narrow_rank_accepted(self) -> None:
        board = Board.from_placement("k/8/8/8/8/8/8/K")
        assert board[A8] == Piece(Color.BLACK, PieceType.KING)
        assert board[A1] == Piece(Color.WHITE, PieceType.KING)

    def test_extra_rank_accepted(self) -> None:
        assert Board.from_placement("8/8/8/8/8/8/8/8/8") == Board.blank()

    def test_empty_field_is_blank(self) -> None:
        assert Board.from_placement("") == Board.blank()


class TestBoardQueries:
    def test_at_matches_index(self) -> None:
        board = Board.from_placement(START_PLACEMENT)
        assert board.at(4, 0) == board[E8]
        assert board.at(4, 7) == board[E1]

    def test_at_off_board_raises(self) -> None:
        with pytest.raises(IndexError):
            Board.blank().at(8, 0)

    def test_occupied(self) -> None:
        board = Board.from_placement("8/8/8/8/8/8/8/4K3")
        assert list(board.occupied()) == [(E1, Piece(Color.WHITE, PieceType.KING))]

    def test_rows(self) -> None:
        rows = list(Board.from_placement(START_PLACEMENT).rows())
        assert len(rows) == 8
        assert all(len(row) == 8 for row in rows)
        assert str(rows[0][4]) == "k"

    def test_equality_and_hash(self) -> None:
        a = Board.from_placement(START_PLACEMENT)
        b = Board.from_placement(START_PLACEMENT)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Board.blank()

    def test_repr_diagram(self) -> None:
        text = repr(Board.from_placement(START_PLACEMENT))
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[-1] == "  a b c d e f g h"

    def test_unicode_diagram(self) -> None:
        text = Board.from_placement(START_PLACEMENT).diagram(unicode=True)
        assert "♚" in text
        assert "♔" in text
