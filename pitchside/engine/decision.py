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
"""Per-player action selection.

Each candidate action gets a base desirability from a weighted blend of the
player's skills, which is then scaled by independent modifiers (tactical fit,
match situation, emotional state, fatigue, opposition, personality, form and
environment) and a small Gaussian perturbation. The scores are turned into a
distribution with a stable softmax, one action is sampled, and the outcome
feeds back into the player's condition.
"""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, TypeVar

from pitchside.engine.config import ENGINE_CONFIG, DecisionConfig
from pitchside.models.player import Personality, Player

T = TypeVar("T")


class ActionType(Enum):
    """Closed set of actions a player can choose on the ball."""

    PASS = "PASS"
    SHOOT = "SHOOT"
    DRIBBLE = "DRIBBLE"
    HOLD = "HOLD"
    THROUGH = "THROUGH"
    LONGSHOT = "LONGSHOT"
    PRESS = "PRESS"
    RUN = "RUN"


ACTIONS: List[ActionType] = list(ActionType)


@dataclass(frozen=True)
class OpponentProfile:
    """How the opposition plays against the acting player.

    Parameters
    ----------
    pressing : float
        Pressing intensity on a 0-100 scale.
    tactic_counter : float
        Tendency to counter the team's plan on a 0-100 scale.
    """

    pressing: float
    tactic_counter: float


@dataclass(frozen=True)
class Environment:
    """Match-day conditions.

    Parameters
    ----------
    crowd : float
        Crowd intensity; higher values lift performance.
    weather : float
        Weather severity; higher values hurt performance.
    pitch : float
        Pitch condition severity; higher values hurt performance.
    """

    crowd: float
    weather: float
    pitch: float


@dataclass(frozen=True)
class DecisionContext:
    """Snapshot of the match situation at the moment of a decision.

    Parameters
    ----------
    minute : int
        Current match minute.
    goal_diff : int
        Goal differential from the acting side's point of view.
    big_match : bool
        Whether the fixture counts as high stakes.
    momentum : float
        Momentum as seen by the acting side (0.05-0.95).
    """

    minute: int
    goal_diff: int
    big_match: bool
    momentum: float


@dataclass(frozen=True)
class Decision:
    """Outcome of one pass through the decision model.

    Parameters
    ----------
    action : ActionType
        Chosen action.
    success : bool
        Whether the action came off.
    probability : float
        Probability the model gave the chosen action.
    """

    action: ActionType
    success: bool
    probability: float


def softmax(scores: Sequence[float]) -> List[float]:
    """Convert raw scores into a probability distribution.

    The maximum is subtracted before exponentiating so large scores cannot
    overflow.

    Parameters
    ----------
    scores : Sequence[float]
        Raw, unnormalised scores.

    Returns
    -------
    List[float]
        Non-negative probabilities summing to one.
    """
    top = max(scores)
    exps = [math.exp(s - top) for s in scores]
    total = sum(exps)
    return [e / total for e in exps]


def weighted_choice(items: Sequence[T], probs: Sequence[float], rng: random.Random) -> T:
    """Pick one item by inverse-CDF sampling.

    Parameters
    ----------
    items : Sequence[T]
        Candidates to choose from.
    probs : Sequence[float]
        Probability of each candidate, in the same order.
    rng : random.Random
        Random source for the draw.

    Returns
    -------
    T
        The selected item; the last one absorbs any rounding shortfall.
    """
    r = rng.random()
    cumulative = 0.0
    for item, p in zip(items, probs):
        cumulative += p
        if r < cumulative:
            return item
    return items[-1]


def base_desirability(player: Player, action: ActionType, config: DecisionConfig = ENGINE_CONFIG.decision) -> float:
    """Weighted blend of the skills that matter for ``action``, scaled to 0-1.

    Parameters
    ----------
    player : Player
        Acting player.
    action : ActionType
        Candidate action.
    config : DecisionConfig
        Weight table source.

    Returns
    -------
    float
        Base score, roughly in ``[0.4, 1.0]``.
    """
    weights = config.action_weights.get(action.value, {})
    return sum(player.attributes.get(name) * weight for name, weight in weights.items()) / 100.0


def personality_multiplier(
    player: Player,
    action: ActionType,
    context: DecisionContext,
    config: DecisionConfig = ENGINE_CONFIG.decision,
) -> float:
    """Bonus or penalty from the player's temperament and the run of play.

    Parameters
    ----------
    player : Player
        Acting player.
    action : ActionType
        Candidate action.
    context : DecisionContext
        Match situation, used for the high-stakes flag and momentum.
    config : DecisionConfig
        Multiplier values.

    Returns
    -------
    float
        Combined multiplier (1.0 when nothing applies).
    """
    factor = 1.0
    personality = player.personality
    if personality is Personality.SELFISH:
        if action is ActionType.SHOOT:
            factor *= config.selfish_shoot_bonus
        elif action is ActionType.PASS:
            factor *= config.selfish_pass_penalty
    elif personality is Personality.BIGMATCH:
        if context.big_match:
            factor *= config.big_match_bonus
    elif personality is Personality.NERVOUS:
        if context.big_match:
            factor *= config.nervous_penalty
    elif personality is Personality.NORMAL:
        pass
    else:  # pragma: no cover - enum is closed
        raise ValueError(f"Unhandled personality {personality!r}")

    if context.momentum > config.high_momentum and action in (ActionType.SHOOT, ActionType.THROUGH):
        factor *= config.high_momentum_bonus
    if context.momentum < config.low_momentum and action is ActionType.HOLD:
        factor *= config.low_momentum_bonus
    return factor


def score_action(
    player: Player,
    action: ActionType,
    team_mentality: float,
    opponent: OpponentProfile,
    context: DecisionContext,
    environment: Environment,
    rng: random.Random,
    config: DecisionConfig = ENGINE_CONFIG.decision,
) -> float:
    """Score one candidate action for ``player``.

    Parameters
    ----------
    player : Player
        Acting player.
    action : ActionType
        Candidate action.
    team_mentality : float
        Team's tactical mentality derived from the pressing and tempo dials.
    opponent : OpponentProfile
        Opposition pressing and counter tendencies.
    context : DecisionContext
        Match situation snapshot.
    environment : Environment
        Crowd, weather and pitch conditions.
    rng : random.Random
        Random source for the Gaussian perturbation.
    config : DecisionConfig
        Model weights and multipliers.

    Returns
    -------
    float
        Strictly positive score (at least ``config.score_floor``).
    """
    cond = player.condition
    base = base_desirability(player, action, config)

    tactical_fit = (1 - abs(cond.mentality - team_mentality) / 20) * (cond.role_familiarity / 100)
    situation = (1 + context.goal_diff * cond.resilience / 200) * (1 + (context.minute / 120) * cond.urgency)
    emotion = (
        (cond.confidence / 100)
        * (1 - cond.pressure / 200)
        * (cond.morale / 100)
        * (1 - cond.panic / 150)
    )
    drag = (1 - cond.fatigue * cond.fatigue / 10000) * (1 - cond.injury_risk * 0.01)
    balance = player.attributes.get("balance")
    resistance = (1 - opponent.pressing * (1 - balance / 200) / 100) * (1 + opponent.tactic_counter / 100)
    form = 1 + (cond.form - 6.5) / 10
    surroundings = (1 + environment.crowd / 200) * (1 - environment.weather / 100) * (1 - environment.pitch / 150)

    score = (
        base
        * tactical_fit
        * situation
        * emotion
        * drag
        * resistance
        * personality_multiplier(player, action, context, config)
        * form
        * surroundings
        * rng.gauss(1.0, config.noise_std)
    )
    return max(score, config.score_floor)


def action_probabilities(
    player: Player,
    team_mentality: float,
    opponent: OpponentProfile,
    context: DecisionContext,
    environment: Environment,
    rng: random.Random,
    config: DecisionConfig = ENGINE_CONFIG.decision,
) -> List[float]:
    """Score every action and normalise the scores with a softmax.

    Parameters
    ----------
    player : Player
        Acting player.
    team_mentality : float
        Team's tactical mentality.
    opponent : OpponentProfile
        Opposition profile.
    context : DecisionContext
        Match situation snapshot.
    environment : Environment
        Match-day conditions.
    rng : random.Random
        Random source for the perturbations.
    config : DecisionConfig
        Model weights and multipliers.

    Returns
    -------
    List[float]
        One probability per entry of ``ACTIONS``.
    """
    scores = [
        score_action(player, action, team_mentality, opponent, context, environment, rng, config)
        for action in ACTIONS
    ]
    return softmax(scores)


def apply_feedback(
    player: Player,
    success: bool,
    rng: random.Random,
    config: DecisionConfig = ENGINE_CONFIG.decision,
) -> None:
    """Update the player's condition after an action resolves.

    Parameters
    ----------
    player : Player
        Player whose condition changes.
    success : bool
        Whether the action succeeded.
    rng : random.Random
        Random source for the fatigue increment.
    config : DecisionConfig
        Feedback magnitudes.
    """
    cond = player.condition
    if success:
        cond.adjust_confidence(config.success_confidence)
        cond.adjust_morale(config.success_morale)
    else:
        cond.adjust_confidence(-config.failure_confidence)
        cond.adjust_panic(config.failure_panic)
    cond.add_fatigue(rng.uniform(*config.fatigue_gain))


def decide(
    player: Player,
    team_mentality: float,
    opponent: OpponentProfile,
    context: DecisionContext,
    environment: Environment,
    rng: random.Random,
    config: DecisionConfig = ENGINE_CONFIG.decision,
) -> Decision:
    """Choose an action for ``player``, resolve it and apply the feedback.

    Parameters
    ----------
    player : Player
        Acting player; their condition is updated in place.
    team_mentality : float
        Team's tactical mentality.
    opponent : OpponentProfile
        Opposition profile.
    context : DecisionContext
        Match situation snapshot.
    environment : Environment
        Match-day conditions.
    rng : random.Random
        Random source for scoring, sampling and feedback.
    config : DecisionConfig
        Model weights and multipliers.

    Returns
    -------
    Decision
        Chosen action, its success flag and its probability.
    """
    probs = action_probabilities(player, team_mentality, opponent, context, environment, rng, config)
    chosen = weighted_choice(ACTIONS, probs, rng)
    probability = probs[ACTIONS.index(chosen)]
    success = rng.random() < probability

    apply_feedback(player, success, rng, config)
    return Decision(action=chosen, success=success, probability=probability)
