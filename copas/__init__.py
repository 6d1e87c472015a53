"""A console shell game: register players and bet on which cup hides the ball."""

__version__ = "0.1.0"
__all__ = ["models", "game", "cli"]