# Copyright (C) 2025 Richard Owen
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""Event domain models for the match engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class EventType(Enum):
    """Kinds of match event, named from the home side's point of view."""

    PASS = "pass"
    SHOT = "shot"
    GOAL_FOR = "goal_for"
    GOAL_AGAINST = "goal_against"
    SAVE = "save"
    PRESS = "press"  # dribble duel won or lost by the home side
    DANGER = "danger"  # away pass into a threatening area
    FOUL = "foul"


@dataclass(frozen=True)
class MatchEvent:
    """Snapshot of a noteworthy moment during a simulation.

    Parameters
    ----------
    minute : int
        Match minute of the event (1-90).
    event_type : EventType
        Category of the event.
    description : str
        Human-readable summary of what happened.
    ball : Tuple[float, float]
        Ball location where the event resolved.
    origin : Optional[Tuple[float, float]]
        Ball location where the action started, when it travelled.
    action : str
        Name of the underlying action, for example ``"SHOOT"``.
    success : bool
        Whether the underlying action came off.
    home_possession : bool
        Whether the home side holds the ball after the event.
    side : str
        Side of the acting player.
    player_name : str
        Name of the acting player.
    """

    minute: int
    event_type: EventType
    description: str
    ball: Tuple[float, float]
    origin: Optional[Tuple[float, float]]
    action: str
    success: bool
    home_possession: bool
    side: str
    player_name: str

    @property
    def is_goal(self) -> bool:
        """Return ``True`` for goals scored by either side."""
        return self.event_type in (EventType.GOAL_FOR, EventType.GOAL_AGAINST)


@dataclass(frozen=True)
class HeatSample:
    """One ball-location sample for the heat map.

    Parameters
    ----------
    x : float
        Lateral coordinate.
    y : float
        Longitudinal coordinate.
    side : str
        Side in possession when the sample was taken.
    """

    x: float
    y: float
    side: str


@dataclass(frozen=True)
class PassEdge:
    """Directed pass between two squad slots of the same side.

    Parameters
    ----------
    from_slot : int
        Slot index of the passer.
    to_slot : int
        Slot index of the intended receiver.
    side : str
        Side that made the pass.
    """

    from_slot: int
    to_slot: int
    side: str
