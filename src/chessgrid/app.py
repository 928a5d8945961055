"""Command-line entry point: decode a FEN and print the resulting game state."""

from __future__ import annotations

import argparse
import logging
import sys

from chessgrid.core import FenError, Game, STARTING_FEN, game_from_fen

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessgrid",
        description="Decode a FEN string and print the board and game state",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        default=STARTING_FEN,
        help="FEN string, quoted as one argument (default: starting position)",
    )
    parser.add_argument(
        "--unicode",
        action="store_true",
        help="Draw pieces with Unicode chess glyphs instead of FEN letters",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def format_game(game: Game, *, unicode: bool = False) -> str:
    """Board diagram followed by one ``name: value`` line per state field."""
    castling = "".join(game.castling) or "-"
    lines = [
        game.board.diagram(unicode=unicode),
        "",
        f"turn: {game.turn!s}",
        f"castling: {castling}",
        f"fifty_move_rule: {game.fifty_move_rule}",
        f"full_turn_num: {game.full_turn_num}",
        f"half_turn_num: {game.half_turn_num}",
        f"start_turn: {game.start_turn}",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        game = game_from_fen(args.fen)
    except FenError as exc:
        _LOGGER.debug("FEN field %d rejected (token %r)", exc.field, exc.token)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(format_game(game, unicode=args.unicode))
    return 0


if __name__ == "__main__":
    sys.exit(main())
