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
"""Pitchside: a real-time probabilistic football match simulator."""
from pitchside.engine.config import ENGINE_CONFIG, EngineConfig
from pitchside.engine.match_engine import (
    EngineStatus,
    EventUpdate,
    MatchObserver,
    MatchSummary,
    RealTimeMatchEngine,
    TickSnapshot,
)
from pitchside.engine.state import MatchState
from pitchside.engine.xg import estimate_shot_quality
from pitchside.models.team import FORMATIONS, get_positions

__version__ = "0.1.0"

__all__ = [
    "ENGINE_CONFIG",
    "EngineConfig",
    "EngineStatus",
    "EventUpdate",
    "FORMATIONS",
    "MatchObserver",
    "MatchState",
    "MatchSummary",
    "RealTimeMatchEngine",
    "TickSnapshot",
    "estimate_shot_quality",
    "get_positions",
    "__version__",
]
