"""chessref — a small chess move referee."""

__version__ = "0.1.0"
