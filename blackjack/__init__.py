"""A terminal blackjack game with human and AI players, a dealer and per-player statistics."""

__version__ = "0.1.0"