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
"""Midfielder positioning."""
from __future__ import annotations

import random

from pitchside.engine.config import ENGINE_CONFIG, PositioningConfig
from pitchside.models.player import Line

from .base import PlayerPosition, PositionRequest, RoleBehaviour


class MidfielderRoleBehaviour(RoleBehaviour):
    """Midfield line that supports attacks and recovers when out of possession.

    Parameters
    ----------
    config : PositioningConfig
        Midfield displacement profiles.
    """

    def __init__(self, config: PositioningConfig = ENGINE_CONFIG.positioning) -> None:
        """Instantiate the midfielder behaviour.

        Parameters
        ----------
        config : PositioningConfig
            Midfield displacement profiles.
        """
        super().__init__(Line.MIDFIELDER, config)

    def attacking_position(self, request: PositionRequest, rng: random.Random) -> PlayerPosition:
        """Push up in support of the attack.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        rng : random.Random
            Random source.

        Returns
        -------
        PlayerPosition
            Home-frame position.
        """
        x, y = self._advance(
            request, self.config.midfield_attack, self.config.outfield_x_band, rng, scale=request.freshness
        )
        return PlayerPosition(x, y)

    def defending_position(self, request: PositionRequest, rng: random.Random) -> PlayerPosition:
        """Recover toward the player's own goal.

        Parameters
        ----------
        request : PositionRequest
            Home-frame inputs.
        rng : random.Random
            Random source.

        Returns
        -------
        PlayerPosition
            Home-frame position.
        """
        x, y = self._advance(
            request,
            self.config.midfield_defend,
            self.config.outfield_x_band,
            rng,
            scale=request.freshness,
            forward=False,
        )
        return PlayerPosition(x, y)
