"""Chess rules engine: legal moves, immutable game states, status and notation."""

__version__ = "0.1.0"
