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
"""Shared momentum scalar describing which side controls the game.

Momentum is a single value in ``[0.05, 0.95]`` read from the home side's
perspective: high values favour the home side, low values the away side.
Each event decays it toward 0.5 and then nudges it by a per-event delta.
"""
from typing import Optional

from pitchside.engine.config import ENGINE_CONFIG, MomentumConfig
from pitchside.engine.events import EventType
from pitchside.models.player import clamp


def update_momentum(
    momentum: float,
    event_type: EventType,
    success: bool,
    config: MomentumConfig = ENGINE_CONFIG.momentum,
) -> float:
    """Return the momentum after one event.

    Parameters
    ----------
    momentum : float
        Current momentum.
    event_type : EventType
        Type of the event that just happened.
    success : bool
        Whether the underlying action succeeded; only shot, press and pass
        use different deltas for success and failure.
    config : MomentumConfig
        Decay rate, bounds and per-event deltas.

    Returns
    -------
    float
        New momentum clamped to ``config.bounds``.
    """
    on_success, on_failure = config.deltas.get(event_type.value, (0.0, 0.0))
    delta = on_success if success else on_failure
    decayed = momentum * config.decay + config.initial * (1.0 - config.decay)
    return clamp(decayed + delta, *config.bounds)


def side_momentum(momentum: float, side: str) -> float:
    """Express the shared momentum from ``side``'s point of view.

    Parameters
    ----------
    momentum : float
        Home-perspective momentum.
    side : str
        ``"home"`` or ``"away"``.

    Returns
    -------
    float
        ``momentum`` for the home side, ``1 - momentum`` for the away side.
    """
    if side == "home":
        return momentum
    if side == "away":
        return 1.0 - momentum
    raise ValueError("side must be either 'home' or 'away'")


def dominance_message(
    momentum: float,
    event_type: Optional[EventType] = None,
    config: MomentumConfig = ENGINE_CONFIG.momentum,
) -> Optional[str]:
    """Describe a lopsided run of play, if there is one.

    No message accompanies a goal scored by the dominant side.

    Parameters
    ----------
    momentum : float
        Home-perspective momentum after the event.
    event_type : Optional[EventType]
        Type of the event just applied.
    config : MomentumConfig
        Dominance thresholds.

    Returns
    -------
    Optional[str]
        A short commentary line, or ``None`` when neither side dominates.
    """
    if momentum > config.dominance_high and event_type is not EventType.GOAL_FOR:
        return "Home side are completely dominating the game"
    if momentum < config.dominance_low and event_type is not EventType.GOAL_AGAINST:
        return "Away side have seized control of the game"
    return None
