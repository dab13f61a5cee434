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
"""Central configuration for engine tuning parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(slots=True)
class SimulationConfig:
    """Timing controls for the real-time playback loop.

    Parameters
    ----------
    ms_per_minute : float, default=600000 / 90
        Wall-clock milliseconds that represent one match minute (ten real
        minutes for a full match).
    tick_ms : float, default=350.0
        Length of one positioning tick between events in milliseconds.
    min_gap_ms : float, default=30.0
        Smallest wall-clock gap allowed between two consecutive events.
    settle_ms : float, default=10.0
        Minimum sleep applied after the tick loop before an event lands.
    ball_walk_step : float, default=9.0
        Maximum per-axis displacement of the ball on each tick.
    ball_bounds : Tuple[float, float], default=(4.0, 96.0)
        Range the wandering ball is clamped into on both axes.
    default_formation : str, default="4-4-2"
        Formation used when none (or an unknown one) is requested.
    max_dial : float, default=10.0
        Upper bound accepted for the pressing and tempo dials.
    """

    ms_per_minute: float = 600000 / 90
    tick_ms: float = 350.0
    min_gap_ms: float = 30.0
    settle_ms: float = 10.0
    ball_walk_step: float = 9.0
    ball_bounds: Tuple[float, float] = (4.0, 96.0)
    default_formation: str = "4-4-2"
    max_dial: float = 10.0

    def __post_init__(self) -> None:
        """Reject timing values that would stall the playback loop."""
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        if self.ms_per_minute < 0 or self.min_gap_ms < 0 or self.settle_ms < 0:
            raise ValueError("timing values must not be negative")


@dataclass(slots=True)
class AttributeConfig:
    """Sampling ranges used when synthesising players.

    Parameters
    ----------
    bounds : Tuple[float, float], default=(40.0, 99.0)
        Clamp range applied to every skill attribute.
    noise : Dict[str, float]
        Half-width of the uniform noise added to the base rating, per skill.
    mentality_range : Tuple[int, int], default=(5, 15)
        Inclusive range for the player's mentality dial.
    urgency_range : Tuple[float, float], default=(0.5, 2.0)
        Range for the personal urgency factor.
    pressure_range : Tuple[float, float], default=(0.0, 30.0)
        Range for the starting pressure value.
    panic_range : Tuple[float, float], default=(0.0, 20.0)
        Range for the starting panic value.
    fatigue_range : Tuple[float, float], default=(0.0, 5.0)
        Range for pre-match fatigue.
    injury_risk_range : Tuple[float, float], default=(0.0, 5.0)
        Range for the baseline injury risk.
    form_range : Tuple[float, float], default=(6.0, 8.0)
        Range for the player's current form.
    jersey_numbers : Tuple[int, ...]
        Squad numbers handed out by slot index.
    """

    bounds: Tuple[float, float] = (40.0, 99.0)
    noise: Dict[str, float] = field(
        default_factory=lambda: {
            "passing": 8.0,
            "finishing": 10.0,
            "dribbling": 8.0,
            "technique": 6.0,
            "vision": 8.0,
            "long_shots": 12.0,
            "strength": 10.0,
            "balance": 8.0,
            "agility": 8.0,
            "composure": 6.0,
            "stamina": 8.0,
            "pace": 10.0,
        }
    )
    mentality_range: Tuple[int, int] = (5, 15)
    urgency_range: Tuple[float, float] = (0.5, 2.0)
    pressure_range: Tuple[float, float] = (0.0, 30.0)
    panic_range: Tuple[float, float] = (0.0, 20.0)
    fatigue_range: Tuple[float, float] = (0.0, 5.0)
    injury_risk_range: Tuple[float, float] = (0.0, 5.0)
    form_range: Tuple[float, float] = (6.0, 8.0)
    jersey_numbers: Tuple[int, ...] = (1, 2, 5, 6, 3, 8, 10, 7, 11, 9, 18)


@dataclass(slots=True)
class DecisionConfig:
    """Weights and multipliers feeding the per-player action scoring model.

    Parameters
    ----------
    action_weights : Dict[str, Dict[str, float]]
        Attribute weights per action; every row sums to one.
    score_floor : float, default=0.01
        Smallest score any action may receive so it stays selectable.
    noise_std : float, default=0.05
        Spread of the multiplicative Gaussian perturbation.
    selfish_shoot_bonus : float, default=1.18
        Multiplier for SHOOT when the player is selfish.
    selfish_pass_penalty : float, default=0.88
        Multiplier for PASS when the player is selfish.
    big_match_bonus : float, default=1.12
        Multiplier for big-match players in high-stakes games.
    nervous_penalty : float, default=0.82
        Multiplier for nervous players in high-stakes games.
    high_momentum : float, default=0.65
        Momentum above which attacking actions gain a bonus.
    high_momentum_bonus : float, default=1.1
        Bonus for SHOOT and THROUGH while momentum is high.
    low_momentum : float, default=0.35
        Momentum below which holding the ball gains a bonus.
    low_momentum_bonus : float, default=1.15
        Bonus for HOLD while momentum is low.
    success_confidence : float, default=2.0
        Confidence gained after a successful action.
    success_morale : float, default=1.0
        Morale gained after a successful action.
    failure_confidence : float, default=1.5
        Confidence lost after a failed action.
    failure_panic : float, default=1.0
        Panic gained after a failed action.
    fatigue_gain : Tuple[float, float], default=(0.3, 1.2)
        Range of fatigue added by every decision.
    """

    action_weights: Dict[str, Dict[str, float]] = field(
        default_factory=lambda: {
            "PASS": {"passing": 0.5, "vision": 0.3, "technique": 0.2},
            "SHOOT": {"finishing": 0.5, "long_shots": 0.2, "technique": 0.3},
            "DRIBBLE": {"dribbling": 0.5, "agility": 0.3, "technique": 0.2},
            "HOLD": {"strength": 0.4, "balance": 0.4, "composure": 0.2},
            "THROUGH": {"vision": 0.5, "passing": 0.3, "technique": 0.2},
            "LONGSHOT": {"long_shots": 0.6, "technique": 0.2, "finishing": 0.2},
            "PRESS": {"stamina": 0.5, "strength": 0.3, "agility": 0.2},
            "RUN": {"pace": 0.6, "stamina": 0.3, "agility": 0.1},
        }
    )
    score_floor: float = 0.01
    noise_std: float = 0.05
    selfish_shoot_bonus: float = 1.18
    selfish_pass_penalty: float = 0.88
    big_match_bonus: float = 1.12
    nervous_penalty: float = 0.82
    high_momentum: float = 0.65
    high_momentum_bonus: float = 1.1
    low_momentum: float = 0.35
    low_momentum_bonus: float = 1.15
    success_confidence: float = 2.0
    success_morale: float = 1.0
    failure_confidence: float = 1.5
    failure_panic: float = 1.0
    fatigue_gain: Tuple[float, float] = (0.3, 1.2)


@dataclass(slots=True)
class MomentumConfig:
    """Exponential smoothing parameters for the shared momentum scalar.

    Parameters
    ----------
    initial : float, default=0.5
        Momentum at kick-off; also the value the scalar decays toward.
    decay : float, default=0.92
        Weight kept from the previous momentum on each update.
    bounds : Tuple[float, float], default=(0.05, 0.95)
        Hard clamp applied after every update.
    deltas : Dict[str, Tuple[float, float]]
        ``(success, failure)`` nudges per event type.
    dominance_high : float, default=0.78
        Momentum above which the home side is reported as dominant.
    dominance_low : float, default=0.22
        Momentum below which the away side is reported as dominant.
    """

    initial: float = 0.5
    decay: float = 0.92
    bounds: Tuple[float, float] = (0.05, 0.95)
    deltas: Dict[str, Tuple[float, float]] = field(
        default_factory=lambda: {
            "goal_for": (0.18, 0.18),
            "goal_against": (-0.18, -0.18),
            "shot": (0.05, -0.01),
            "save": (-0.04, -0.04),
            "press": (0.04, -0.01),
            "pass": (0.02, -0.01),
            "danger": (-0.03, -0.03),
            "foul": (-0.01, -0.01),
        }
    )
    dominance_high: float = 0.78
    dominance_low: float = 0.22


@dataclass(slots=True)
class EventConfig:
    """Probabilities and sampling zones used by the event generator.

    Parameters
    ----------
    first_minute : int, default=1
        Minute of the first decision checkpoint.
    final_minute : int, default=89
        Minute of the closing checkpoint, always present.
    gap_range : Tuple[float, float], default=(2.0, 5.0)
        Range of the gap between two decision minutes.
    home_kickoff_probability : float, default=0.55
        Chance the home side starts with the ball.
    crowd : float, default=72.0
        Fixed crowd intensity of the environment profile.
    weather_range : Tuple[int, int], default=(0, 15)
        Severity range for the randomised weather.
    pitch_range : Tuple[int, int], default=(0, 10)
        Severity range for the randomised pitch condition.
    opponent_pressing_base : int, default=50
        Baseline pressing intensity of the synthetic opponent.
    opponent_pressing_spread : Tuple[int, int], default=(-10, 20)
        Random adjustment added to the opponent pressing baseline.
    opponent_counter_range : Tuple[int, int], default=(0, 30)
        Range for the opponent's tactical-counter tendency.
    home_shot_zone : Tuple[int, int, int, int], default=(28, 72, 10, 35)
        ``(x_min, x_max, y_min, y_max)`` of home shot locations.
    away_shot_zone : Tuple[int, int, int, int], default=(28, 72, 65, 90)
        ``(x_min, x_max, y_min, y_max)`` of away shot locations.
    home_goal_origin : Tuple[int, int, int, int], default=(25, 75, 18, 40)
        Zone where the move leading to a home goal starts.
    home_shot_origin : Tuple[int, int, int, int], default=(20, 80, 20, 45)
        Zone where the move leading to a missed home shot starts.
    home_pass_origin : Tuple[int, int, int, int], default=(20, 80, 28, 65)
        Zone where home passes are played from.
    home_pass_target : Tuple[int, int, int, int], default=(20, 80, 18, 58)
        Zone where home passes arrive.
    home_dribble_zone : Tuple[int, int, int, int], default=(20, 80, 18, 55)
        Ball location after a home dribble.
    home_run_zone : Tuple[int, int, int, int], default=(25, 75, 18, 50)
        Ball location after a home off-ball run.
    home_hold_zone : Tuple[int, int, int, int], default=(30, 70, 30, 62)
        Ball location while the home side holds or presses.
    away_goal_origin : Tuple[int, int, int, int], default=(25, 75, 55, 80)
        Zone where the move leading to an away goal starts.
    away_shot_origin : Tuple[int, int, int, int], default=(20, 80, 55, 80)
        Zone where the move leading to a saved away shot starts.
    away_pass_zone : Tuple[int, int, int, int], default=(20, 80, 55, 90)
        Ball location after an away pass.
    away_dribble_zone : Tuple[int, int, int, int], default=(15, 85, 50, 85)
        Ball location after an away dribble.
    away_hold_zone : Tuple[int, int, int, int], default=(20, 80, 45, 80)
        Ball location while the away side keeps the ball.
    momentum_goal_factor : float, default=0.3
        Scaling applied to the side momentum when converting xG into a goal chance.
    home_retain_after_miss : float, default=0.28
        Chance the home side keeps the ball after missing.
    home_regain_after_save : float, default=0.65
        Chance the home side collects the ball after an away shot is saved.
    home_retain_after_run : float, default=0.75
        Chance the home side keeps the ball after an off-ball run.
    home_retain_after_hold : float, default=0.72
        Chance the home side keeps the ball after a failed holding action.
    away_lose_after_hold : float, default=0.45
        Chance the away side loses the ball after a holding action.
    goal_rating_bonus : float, default=0.6
        Rating gained by a goalscorer.
    keeper_rating_swing : float, default=0.3
        Rating gained (save) or lost (goal) by the home goalkeeper.
    pass_rating_gain : float, default=0.05
        Rating gained by a successful passer.
    pass_rating_loss : float, default=0.1
        Rating lost by a passer whose ball is cut out.
    """

    first_minute: int = 1
    final_minute: int = 89
    gap_range: Tuple[float, float] = (2.0, 5.0)
    home_kickoff_probability: float = 0.55
    crowd: float = 72.0
    weather_range: Tuple[int, int] = (0, 15)
    pitch_range: Tuple[int, int] = (0, 10)
    opponent_pressing_base: int = 50
    opponent_pressing_spread: Tuple[int, int] = (-10, 20)
    opponent_counter_range: Tuple[int, int] = (0, 30)
    home_shot_zone: Tuple[int, int, int, int] = (28, 72, 10, 35)
    away_shot_zone: Tuple[int, int, int, int] = (28, 72, 65, 90)
    home_goal_origin: Tuple[int, int, int, int] = (25, 75, 18, 40)
    home_shot_origin: Tuple[int, int, int, int] = (20, 80, 20, 45)
    home_pass_origin: Tuple[int, int, int, int] = (20, 80, 28, 65)
    home_pass_target: Tuple[int, int, int, int] = (20, 80, 18, 58)
    home_dribble_zone: Tuple[int, int, int, int] = (20, 80, 18, 55)
    home_run_zone: Tuple[int, int, int, int] = (25, 75, 18, 50)
    home_hold_zone: Tuple[int, int, int, int] = (30, 70, 30, 62)
    away_goal_origin: Tuple[int, int, int, int] = (25, 75, 55, 80)
    away_shot_origin: Tuple[int, int, int, int] = (20, 80, 55, 80)
    away_pass_zone: Tuple[int, int, int, int] = (20, 80, 55, 90)
    away_dribble_zone: Tuple[int, int, int, int] = (15, 85, 50, 85)
    away_hold_zone: Tuple[int, int, int, int] = (20, 80, 45, 80)
    momentum_goal_factor: float = 0.3
    home_retain_after_miss: float = 0.28
    home_regain_after_save: float = 0.65
    home_retain_after_run: float = 0.75
    home_retain_after_hold: float = 0.72
    away_lose_after_hold: float = 0.45
    goal_rating_bonus: float = 0.6
    keeper_rating_swing: float = 0.3
    pass_rating_gain: float = 0.05
    pass_rating_loss: float = 0.1


@dataclass(slots=True)
class PositioningConfig:
    """Displacement ranges and clamp bands for off-ball positioning.

    All bands are expressed in the home frame (own goal near ``y=100``) and
    mirrored for the away side.

    Parameters
    ----------
    pitch_bounds : Tuple[float, float], default=(2.0, 98.0)
        Final clamp applied to every coordinate.
    fatigue_scale : float, default=150.0
        Fatigue value at which a player's freshness reaches zero.
    keeper_ball_weight : float, default=0.1
        Share of the ball's x-coordinate the goalkeeper tracks.
    keeper_x_band : Tuple[float, float], default=(40.0, 60.0)
        Lateral band the goalkeeper stays within.
    keeper_jitter : float, default=1.0
        Random shuffle applied to the goalkeeper each tick.
    run_probability : float, default=0.3
        Chance per tick that a fresh attacker makes an off-ball run.
    press_probability : float, default=0.5
        Share of the pressing dial converted into a pressing chance.
    attacker_run : Tuple[float, float, float, float, float]
        ``(lateral, advance_min, advance_max, y_min, y_max)`` for runs.
    attacker_hold : Tuple[float, float, float, float, float]
        Same layout for attackers holding an advanced slot.
    midfield_attack : Tuple[float, float, float, float, float]
        Same layout for midfielders supporting an attack.
    defence_attack : Tuple[float, float, float, float, float]
        Same layout for defenders stepping up during an attack.
    midfield_defend : Tuple[float, float, float, float, float]
        ``(lateral, drop_min, drop_max, y_min, y_max)`` for midfielders
        recovering toward their own goal.
    defence_defend : Tuple[float, float, float, float, float]
        Same layout for defenders dropping deep.
    press_lateral : float, default=16.0
        Lateral spread around the ball when pressing.
    press_depth : float, default=10.0
        Maximum goal-side offset taken while pressing.
    press_x_band : Tuple[float, float], default=(8.0, 92.0)
        Lateral band for pressing attackers.
    press_y_band : Tuple[float, float], default=(15.0, 50.0)
        Vertical band for pressing attackers.
    press_y_cap : float, default=48.0
        Deepest point a pressing attacker follows the ball to.
    outfield_x_band : Tuple[float, float], default=(6.0, 94.0)
        Lateral band for attackers and midfielders.
    defence_x_band : Tuple[float, float], default=(4.0, 96.0)
        Lateral band for defenders.
    """

    pitch_bounds: Tuple[float, float] = (2.0, 98.0)
    fatigue_scale: float = 150.0
    keeper_ball_weight: float = 0.1
    keeper_x_band: Tuple[float, float] = (40.0, 60.0)
    keeper_jitter: float = 1.0
    run_probability: float = 0.3
    press_probability: float = 0.5
    attacker_run: Tuple[float, float, float, float, float] = (14.0, -4.0, 12.0, 6.0, 40.0)
    attacker_hold: Tuple[float, float, float, float, float] = (6.0, -2.0, 4.0, 6.0, 42.0)
    midfield_attack: Tuple[float, float, float, float, float] = (8.0, -4.0, 8.0, 24.0, 66.0)
    defence_attack: Tuple[float, float, float, float, float] = (4.0, 0.0, 5.0, 55.0, 87.0)
    midfield_defend: Tuple[float, float, float, float, float] = (5.0, 0.0, 10.0, 35.0, 72.0)
    defence_defend: Tuple[float, float, float, float, float] = (4.0, 0.0, 8.0, 62.0, 90.0)
    press_lateral: float = 16.0
    press_depth: float = 10.0
    press_x_band: Tuple[float, float] = (8.0, 92.0)
    press_y_band: Tuple[float, float] = (15.0, 50.0)
    press_y_cap: float = 48.0
    outfield_x_band: Tuple[float, float] = (6.0, 94.0)
    defence_x_band: Tuple[float, float] = (4.0, 96.0)


@dataclass(slots=True)
class EngineConfig:
    """Top-level container for all engine tuning structures.

    Parameters
    ----------
    simulation : SimulationConfig, default=SimulationConfig()
        Real-time playback settings.
    attributes : AttributeConfig, default=AttributeConfig()
        Player generation ranges.
    decision : DecisionConfig, default=DecisionConfig()
        Action scoring weights and multipliers.
    momentum : MomentumConfig, default=MomentumConfig()
        Momentum smoothing parameters.
    events : EventConfig, default=EventConfig()
        Event generator probabilities.
    positioning : PositioningConfig, default=PositioningConfig()
        Off-ball positioning ranges.
    """

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    attributes: AttributeConfig = field(default_factory=AttributeConfig)
    decision: DecisionConfig = field(default_factory=DecisionConfig)
    momentum: MomentumConfig = field(default_factory=MomentumConfig)
    events: EventConfig = field(default_factory=EventConfig)
    positioning: PositioningConfig = field(default_factory=PositioningConfig)


ENGINE_CONFIG = EngineConfig()
"""Singleton-style access to the engine configuration."""
