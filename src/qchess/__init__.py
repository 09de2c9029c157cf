"""qchess — chess position model, FEN codec and pseudo-legal move generator."""

__version__ = "0.1.0"
