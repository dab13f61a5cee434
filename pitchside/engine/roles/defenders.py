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
"""Defender positioning: cautious step-ups and deep recovery."""
from __future__ import annotations

import random

from pitchside.engine.config import ENGINE_CONFIG, PositioningConfig
from pitchside.models.player import Line

from .base import PlayerPosition, PositionRequest, RoleBehaviour


class DefenderRoleBehaviour(RoleBehaviour):
    """Back line that pushes up the least and drops the deepest.

    Parameters
    ----------
    config : PositioningConfig
        Defender displacement profiles.
    """

    def __init__(self, config: PositioningConfig = ENGINE_CONFIG.positioning) -> None:
        """Instantiate the defender behaviour.

        Parameters
        ----------
        config : PositioningConfig
            Defender displacement profiles.
        """
        super().__init__(Line.DEFENDER, config)

    def attacking_position(self, request: PositionRequest, rng: random.Random) -> PlayerPosition:
        """Step up slightly, scaled by freshness.

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
            request, self.config.defence_attack, self.config.defence_x_band, rng, scale=request.freshness
        )
        return PlayerPosition(x, y)

    def defending_position(self, request: PositionRequest, rng: random.Random) -> PlayerPosition:
        """Drop toward goal; tired legs do not slow the retreat.

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
        x, y = self._advance(request, self.config.defence_defend, self.config.defence_x_band, rng, forward=False)
        return PlayerPosition(x, y)
