"""chessroom - a chess rules engine and game-state machine for network play."""

__version__ = "0.1.0"
