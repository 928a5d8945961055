"""FEN decode failures.

All of them are :class:`ValueError` subclasses carrying the failing FEN field
number and the offending token.
"""

from __future__ import annotations


class FenError(ValueError):
    """Base class for all FEN decode failures.

    ``field`` is the 1-based FEN field number that failed and ``token`` is the
    offending text (the whole field, or a single character of it).
    """

    def __init__(self, message: str, *, field: int, token: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.token = token


class MissingFieldError(FenError):
    """The piece-placement field is absent."""

    def __init__(self) -> None:
        super().__init__("Missing FEN piece-placement field", field=1)


class MalformedPlacementError(FenError):
    """Bad character in, or a piece placed off the edge of, the placement field."""

    def __init__(
        self,
        message: str,
        *,
        char: str,
        x: int | None = None,
        y: int | None = None,
    ) -> None:
        super().__init__(message, field=1, token=char)
        self.char = char
        self.x = x
        self.y = y

    @classmethod
    def invalid_character(cls, char: str) -> MalformedPlacementError:
        return cls(f"Invalid character in FEN placement field: {char!r}", char=char)

    @classmethod
    def invalid_coordinate(cls, char: str, x: int, y: int) -> MalformedPlacementError:
        return cls(
            f"Invalid coordinate reached in FEN placement field: {x}, {y} "
            f"(at {char!r})",
            char=char,
            x=x,
            y=y,
        )


class InvalidTurnError(FenError):
    """Active-color field is present but neither ``w`` nor ``b``."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid FEN turn specifier: {token!r}", field=2, token=token)


class InvalidCastlingCharError(FenError):
    """Castling field holds a character outside ``KQkq``."""

    def __init__(self, char: str) -> None:
        super().__init__(
            f"Invalid character in FEN castling field: {char!r}", field=3, token=char
        )
        self.char = char


class NumericParseError(FenError):
    """Halfmove clock or fullmove number is not a non-negative integer."""

    def __init__(self, token: str, *, field: int) -> None:
        name = "halfmove clock" if field == 5 else "fullmove number"
        super().__init__(f"Invalid FEN {name}: {token!r}", field=field, token=token)
