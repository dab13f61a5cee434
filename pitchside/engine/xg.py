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
"""Expected-goals estimate for a shot taken from a point on the pitch.

The model works in unit pitch space with the attacked goal on the line
``y = 0``. Shot quality grows with the angle the goal mouth subtends and
decays exponentially with the radial distance from the centre of the goal.
"""
import math

from pitchside.models.player import clamp

GOAL_HALF_WIDTH = 0.11
DISTANCE_DECAY = 3.5
MIN_DEPTH = 0.01
XG_BOUNDS = (0.01, 0.95)


def estimate_shot_quality(x: float, y: float, away_side: bool = False) -> float:
    """Return the probability that a shot from ``(x, y)`` is scored.

    Parameters
    ----------
    x : float
        Lateral shot coordinate in the 0-100 pitch space.
    y : float
        Longitudinal shot coordinate in the 0-100 pitch space.
    away_side : bool
        ``True`` when the away side shoots; its target goal sits at ``y = 100``
        so the coordinate is mirrored first.

    Returns
    -------
    float
        Expected-goals value clamped to ``[0.01, 0.95]``.
    """
    px = x / 100.0
    py = (100.0 - y) / 100.0 if away_side else y / 100.0

    dx = px - 0.5
    dy = py
    radial = math.sqrt(dx * dx + dy * dy)
    angle = 2.0 * math.atan2(GOAL_HALF_WIDTH, max(dy, MIN_DEPTH))

    return clamp((angle / math.pi) * math.exp(-DISTANCE_DECAY * radial), *XG_BOUNDS)
