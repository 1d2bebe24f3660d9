"""Move and edit validation.

Rejected actions never change any state; the exception message is meant
to be shown to the player as is.
"""

from __future__ import annotations

from typing import Optional

from ..config import BLACK


class InvalidMove(Exception):
    """Raised when the player tries a move the alternation rule forbids."""

    pass


class InvalidEdit(Exception):
    """Raised when an editor action would corrupt the board."""

    pass


def is_legal_color(color: str, last_color: Optional[str]) -> bool:
    """Check the alternation rule for crossing a wall of ``color``.

    Black walls are never crossable; any other color is allowed on the
    first move and afterwards only if it differs from the previous one.
    """
    if color == BLACK:
        return False
    return last_color is None or color != last_color


def validate_crossing(wall_id: str, color: str, last_color: Optional[str]) -> None:
    """Raise InvalidMove with a player-facing reason if the crossing is illegal."""
    if color == BLACK:
        raise InvalidMove(f"Wall {wall_id} is black and cannot be crossed")
    if not is_legal_color(color, last_color):
        raise InvalidMove(f"You crossed a {last_color} wall last, pick the other color")
