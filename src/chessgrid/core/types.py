"""Square type alias and coordinate helpers.

Board layout (top-left origin, White's point of view):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

``x`` is the file (0–7, a–h) and ``y`` counts rows downward from rank 8.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE


def coordinate_to_index(x: int, y: int) -> Square:
    """Linear index for ``(x, y)``. The coordinate must already be valid."""
    return y * BOARD_SIZE + x


def index_to_coordinate(sq: Square) -> tuple[int, int]:
    """Inverse of :func:`coordinate_to_index`, e.g. 12 → (4, 1)."""
    y, x = divmod(sq, BOARD_SIZE)
    return x, y


def is_valid_coordinate(x: int, y: int) -> bool:
    """Whether both components lie in ``[0, 8)``."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def is_valid_index(sq: int) -> bool:
    """Whether *sq* lies in 0–63 (a8 = 0 through h1 = 63)."""
    return 0 <= sq < SQUARE_COUNT


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a8', 63 → 'h1'."""
    x, y = index_to_coordinate(sq)
    return chr(ord("a") + x) + str(BOARD_SIZE - y)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e1' → 60."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return coordinate_to_index(ord(name[0]) - ord("a"), BOARD_SIZE - int(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = range(0, 8)
A7, B7, C7, D7, E7, F7, G7, H7 = range(8, 16)
A6, B6, C6, D6, E6, F6, G6, H6 = range(16, 24)
A5, B5, C5, D5, E5, F5, G5, H5 = range(24, 32)
A4, B4, C4, D4, E4, F4, G4, H4 = range(32, 40)
A3, B3, C3, D3, E3, F3, G3, H3 = range(40, 48)
A2, B2, C2, D2, E2, F2, G2, H2 = range(48, 56)
A1, B1, C1, D1, E1, F1, G1, H1 = range(56, 64)
