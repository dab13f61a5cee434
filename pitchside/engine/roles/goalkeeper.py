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
"""Role behaviour focused on goalkeeping duties."""
from __future__ import annotations

import random

from pitchside.engine.config import ENGINE_CONFIG, PositioningConfig
from pitchside.models.player import Line, clamp

from .base import PlayerPosition, PositionRequest, RoleBehaviour


class GoalkeeperRoleBehaviour(RoleBehaviour):
    """Keeper that shadows the ball laterally and stays on the goal line.

    Parameters
    ----------
    config : PositioningConfig
        Keeper band and jitter values.
    """

    def __init__(self, config: PositioningConfig = ENGINE_CONFIG.positioning) -> None:
        """Instantiate the goalkeeper behaviour.

        Parameters
        ----------
        config : PositioningConfig
            Keeper band and jitter values.
        """
        super().__init__(Line.GOALKEEPER, config)

    def position(self, request: PositionRequest, in_possession: bool, rng: random.Random) -> PlayerPosition:
        """Track the ball's x-coordinate regardless of possession.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        in_possession : bool
            Ignored; the keeper behaves the same in both phases.
        rng : random.Random
            Random source for the shuffle.

        Returns
        -------
        PlayerPosition
            Home-frame keeper position.
        """
        cfg = self.config
        weight = cfg.keeper_ball_weight
        jitter = cfg.keeper_jitter
        x = clamp(
            request.ball_x * weight + request.base_x * (1 - weight) + rng.uniform(-jitter, jitter),
            *cfg.keeper_x_band,
        )
        y = request.base_y + rng.uniform(-jitter, jitter)
        return PlayerPosition(x, y)
