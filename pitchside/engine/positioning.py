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
"""Continuous player positions between events.

Positions are derived from the formation template, the ball and the current
possession on every scheduler tick. Each player's role picks a
:class:`~pitchside.engine.roles.RoleBehaviour`; the behaviour works in the
home frame and this module mirrors the y-axis for the away side.
"""
from __future__ import annotations

import random
from typing import List

from pitchside.engine.config import ENGINE_CONFIG, PositioningConfig
from pitchside.engine.roles import PlayerPosition, PositionRequest, create_role_behaviour
from pitchside.engine.state import MatchState
from pitchside.models.player import Player, clamp
from pitchside.models.team import get_positions


def freshness(player: Player, config: PositioningConfig = ENGINE_CONFIG.positioning) -> float:
    """Return how fresh ``player`` is on a 0-1 scale.

    Parameters
    ----------
    player : Player
        Player whose fatigue is read.
    config : PositioningConfig
        Supplies the fatigue scale.

    Returns
    -------
    float
        ``1 - fatigue/fatigue_scale``, never below zero.
    """
    return max(0.0, 1.0 - player.condition.fatigue / config.fatigue_scale)


def calc_player_position(
    slot: int,
    side: str,
    home_possession: bool,
    ball_x: float,
    ball_y: float,
    press_intensity: float,
    formation: str,
    player: Player,
    rng: random.Random,
    config: PositioningConfig = ENGINE_CONFIG.positioning,
) -> PlayerPosition:
    """Compute the instantaneous position and posture of one player.

    Parameters
    ----------
    slot : int
        Squad slot index (0-10), used to look up the template position.
    side : str
        ``"home"`` or ``"away"``.
    home_possession : bool
        Whether the home side has the ball.
    ball_x : float
        Ball x-coordinate.
    ball_y : float
        Ball y-coordinate.
    press_intensity : float
        Pressing dial rescaled to 0-1.
    formation : str
        Formation id; unknown ids fall back to the default.
    player : Player
        Player being positioned; their posture is updated in place.
    rng : random.Random
        Random source for the jitter.
    config : PositioningConfig
        Displacement ranges and clamp bands.

    Returns
    -------
    PlayerPosition
        Position clamped to the pitch bounds.
    """
    if side not in {"home", "away"}:
        raise ValueError("side must be either 'home' or 'away'")
    away = side == "away"
    base_x, base_y = get_positions(formation)[slot]

    request = PositionRequest(
        base_x=base_x,
        base_y=base_y,
        ball_x=ball_x,
        ball_y=100.0 - ball_y if away else ball_y,
        freshness=freshness(player, config),
        press_intensity=press_intensity,
    )
    in_possession = home_possession != away
    result = create_role_behaviour(player.role, config).position(request, in_possession, rng)

    y = 100.0 - result.y if away else result.y
    low, high = config.pitch_bounds
    player.posture = result.posture
    return PlayerPosition(clamp(result.x, low, high), clamp(y, low, high), result.posture)


def calc_all_positions(
    state: MatchState,
    home_possession: bool,
    ball_x: float,
    ball_y: float,
    press_intensity: float,
    rng: random.Random,
    config: PositioningConfig = ENGINE_CONFIG.positioning,
) -> List[PlayerPosition]:
    """Position all 22 players for one tick.

    Parameters
    ----------
    state : MatchState
        Supplies both squads and the active formation.
    home_possession : bool
        Whether the home side has the ball.
    ball_x : float
        Ball x-coordinate.
    ball_y : float
        Ball y-coordinate.
    press_intensity : float
        Pressing dial rescaled to 0-1.
    rng : random.Random
        Random source for the jitter.
    config : PositioningConfig
        Displacement ranges and clamp bands.

    Returns
    -------
    List[PlayerPosition]
        Home and away player of slot 0, then slot 1, and so on.
    """
    positions: List[PlayerPosition] = []
    for slot in range(len(state.home)):
        for squad in (state.home, state.away):
            positions.append(
                calc_player_position(
                    slot,
                    squad.side,
                    home_possession,
                    ball_x,
                    ball_y,
                    press_intensity,
                    state.formation,
                    squad.players[slot],
                    rng,
                    config,
                )
            )
    return positions
