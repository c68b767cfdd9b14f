"""A deterministic snake board game: board state, stepping rules, a one-step command and an interactive terminal game."""

__version__ = "0.1.0"
__all__ = ["state", "snake_utils", "cli", "interactive"]