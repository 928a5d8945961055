"""chessgrid — FEN decoding into an 8x8 board and game-state record."""

__version__ = "0.1.0"
