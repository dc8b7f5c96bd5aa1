"""tactician: time-bounded game-tree search for two-player games."""

__version__ = "0.1.0"
