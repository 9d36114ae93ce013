"""Monte Carlo Texas Hold'em simulator: cards and deals, hand scoring, and SQLite-stored statistics."""

__version__ = "0.1.0"