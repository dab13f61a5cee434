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
"""Shared role behaviour scaffolding for off-ball positioning.

Behaviours work in the home frame: own goal near ``y = 100`` and the
attacked goal at ``y = 0``. The positioning engine mirrors inputs and
outputs for the away side.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

from pitchside.engine.config import ENGINE_CONFIG, PositioningConfig
from pitchside.models.player import Line, Posture, clamp


@dataclass(frozen=True)
class PlayerPosition:
    """Instantaneous position of one player.

    Parameters
    ----------
    x : float
        Lateral coordinate in ``[2, 98]``.
    y : float
        Longitudinal coordinate in ``[2, 98]``.
    posture : Posture
        Off-ball behaviour on this tick.
    """

    x: float
    y: float
    posture: Posture = Posture.NORMAL


@dataclass(frozen=True)
class PositionRequest:
    """Inputs for one positioning decision, already in the home frame.

    Parameters
    ----------
    base_x : float
        Template slot x-coordinate.
    base_y : float
        Template slot y-coordinate.
    ball_x : float
        Ball x-coordinate.
    ball_y : float
        Ball y-coordinate.
    freshness : float
        ``1 - fatigue/150``; scales runs, presses and line movement.
    press_intensity : float
        Pressing dial rescaled to 0-1.
    """

    base_x: float
    base_y: float
    ball_x: float
    ball_y: float
    freshness: float
    press_intensity: float


class RoleBehaviour:
    """Base positioning behaviour for all tactical lines.

    Subclasses override :meth:`attacking_position` and
    :meth:`defending_position`; the defaults hold the template slot.

    Parameters
    ----------
    line : Line
        Tactical line controlled by this behaviour instance.
    config : PositioningConfig
        Displacement ranges and clamp bands.
    """

    def __init__(self, line: Line, config: PositioningConfig = ENGINE_CONFIG.positioning) -> None:
        """Store the controlled line and tuning values.

        Parameters
        ----------
        line : Line
            Tactical line controlled by this behaviour instance.
        config : PositioningConfig
            Displacement ranges and clamp bands.
        """
        self.line = line
        self.config = config

    def position(self, request: PositionRequest, in_possession: bool, rng: random.Random) -> PlayerPosition:
        """Dispatch to the attacking or defending phase.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        in_possession : bool
            Whether the player's side has the ball.
        rng : random.Random
            Random source for the jitter.

        Returns
        -------
        PlayerPosition
            Unclamped home-frame position.
        """
        if in_possession:
            return self.attacking_position(request, rng)
        return self.defending_position(request, rng)

    def attacking_position(self, request: PositionRequest, rng: random.Random) -> PlayerPosition:
        """Position while the player's side has the ball.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        rng : random.Random
            Random source.

        Returns
        -------
        PlayerPosition
            Template slot by default.
        """
        return PlayerPosition(request.base_x, request.base_y)

    def defending_position(self, request: PositionRequest, rng: random.Random) -> PlayerPosition:
        """Position while the opponent has the ball.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        rng : random.Random
            Random source.

        Returns
        -------
        PlayerPosition
            Template slot by default.
        """
        return PlayerPosition(request.base_x, request.base_y)

    @staticmethod
    def _advance(
        request: PositionRequest,
        profile: Tuple[float, float, float, float, float],
        x_band: Tuple[float, float],
        rng: random.Random,
        scale: float = 1.0,
        forward: bool = True,
    ) -> Tuple[float, float]:
        """Jitter the slot sideways and shift it along the pitch.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        profile : Tuple[float, float, float, float, float]
            ``(lateral, shift_min, shift_max, y_min, y_max)``.
        x_band : Tuple[float, float]
            Clamp band for the lateral coordinate.
        rng : random.Random
            Random source.
        scale : float
            Multiplier on the shift, usually the player's freshness.
        forward : bool
            ``True`` to move toward the attacked goal, ``False`` to drop
            toward the player's own goal.

        Returns
        -------
        Tuple[float, float]
            Clamped ``(x, y)``.
        """
        lateral, shift_min, shift_max, y_min, y_max = profile
        x = clamp(request.base_x + rng.uniform(-lateral, lateral), *x_band)
        shift = rng.uniform(shift_min, shift_max) * scale
        y = request.base_y - shift if forward else request.base_y + shift
        return x, clamp(y, y_min, y_max)
