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
"""Forward positioning: off-ball runs in possession, pressing out of it."""
from __future__ import annotations

import random

from pitchside.engine.config import ENGINE_CONFIG, PositioningConfig
from pitchside.models.player import Line, Posture, clamp

from .base import PlayerPosition, PositionRequest, RoleBehaviour


class ForwardRoleBehaviour(RoleBehaviour):
    """Front line that makes runs in behind and presses the ball carrier.

    Parameters
    ----------
    config : PositioningConfig
        Run and press profiles.
    """

    def __init__(self, config: PositioningConfig = ENGINE_CONFIG.positioning) -> None:
        """Instantiate the forward behaviour.

        Parameters
        ----------
        config : PositioningConfig
            Run and press profiles.
        """
        super().__init__(Line.ATTACKER, config)

    def attacking_position(self, request: PositionRequest, rng: random.Random) -> PlayerPosition:
        """Either make a run toward goal or hold an advanced slot.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        rng : random.Random
            Random source.

        Returns
        -------
        PlayerPosition
            Home-frame position with posture ``RUN`` during a run.
        """
        cfg = self.config
        if rng.random() < cfg.run_probability * request.freshness:
            x, y = self._advance(request, cfg.attacker_run, cfg.outfield_x_band, rng)
            return PlayerPosition(x, y, Posture.RUN)
        x, y = self._advance(request, cfg.attacker_hold, cfg.outfield_x_band, rng)
        return PlayerPosition(x, y)

    def defending_position(self, request: PositionRequest, rng: random.Random) -> PlayerPosition:
        """Press the ball or hold the template slot.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        rng : random.Random
            Random source.

        Returns
        -------
        PlayerPosition
            Home-frame position with posture ``PRESS`` while pressing.
        """
        cfg = self.config
        if rng.random() < request.press_intensity * cfg.press_probability * request.freshness:
            x = clamp(request.ball_x + rng.uniform(-cfg.press_lateral, cfg.press_lateral), *cfg.press_x_band)
            y = clamp(min(request.ball_y + rng.uniform(0.0, cfg.press_depth), cfg.press_y_cap), *cfg.press_y_band)
            return PlayerPosition(x, y, Posture.PRESS)
        return PlayerPosition(request.base_x, request.base_y)
