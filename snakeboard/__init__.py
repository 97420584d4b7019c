"""Text-board snake game engine with a one-step command and an interactive terminal game."""

__version__ = "0.1.0"
__all__ = ["cli", "interactive", "snake_utils", "state"]