"""Rule thresholds carried by every game state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RulesConfig:
    """Draw-classification thresholds.

    Args:
        fifty_move_threshold: Half-move clock value at which the position
            is classified as a draw.
        insufficient_material_max_pieces: Total piece count (kings
            included) at or below which a board holding only kings and minor
            pieces is a draw.
    """

    fifty_move_threshold: int = 50
    insufficient_material_max_pieces: int = 3


DEFAULT_RULES = RulesConfig()
