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
"""Mutable session object holding everything one match accumulates."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from pitchside.engine.events import HeatSample, PassEdge
from pitchside.models.team import DEFAULT_FORMATION, Squad


@dataclass
class MatchState:
    """Running state of a single match.

    A fresh instance is created on every reset. Only the engine and the
    functions it calls mutate it, and the logs are append-only.

    Parameters
    ----------
    home : Squad
        Home eleven.
    away : Squad
        Away eleven.
    formation : str
        Active formation id.
    home_score : int
        Goals scored by the home side.
    away_score : int
        Goals scored by the away side.
    home_shots : int
        Shots taken by the home side.
    away_shots : int
        Shots taken by the away side.
    home_passes : int
        Passes attempted by the home side.
    away_passes : int
        Passes attempted by the away side.
    home_xg : float
        Cumulative expected goals of the home side.
    away_xg : float
        Cumulative expected goals of the away side.
    momentum : float
        Home-perspective momentum in ``[0.05, 0.95]``.
    heat_map : List[HeatSample]
        Ball samples, one per generated event.
    pass_map : List[PassEdge]
        Directed pass edges in the order they were generated.
    minute : int
        Minute of the last applied event.
    """

    home: Squad
    away: Squad
    formation: str = DEFAULT_FORMATION
    home_score: int = 0
    away_score: int = 0
    home_shots: int = 0
    away_shots: int = 0
    home_passes: int = 0
    away_passes: int = 0
    home_xg: float = 0.0
    away_xg: float = 0.0
    momentum: float = 0.5
    heat_map: List[HeatSample] = field(default_factory=list)
    pass_map: List[PassEdge] = field(default_factory=list)
    minute: int = 0

    def squad(self, side: str) -> Squad:
        """Return the squad playing on ``side``.

        Parameters
        ----------
        side : str
            ``"home"`` or ``"away"``.

        Returns
        -------
        Squad
            The matching squad.
        """
        if side == "home":
            return self.home
        if side == "away":
            return self.away
        raise ValueError("side must be either 'home' or 'away'")
