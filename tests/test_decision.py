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
"""Tests for the per-player action selection model."""

import random
from collections import Counter

import pytest

from pitchside.engine.config import ENGINE_CONFIG
from pitchside.engine.decision import (
    ACTIONS,
    ActionType,
    DecisionContext,
    Environment,
    OpponentProfile,
    action_probabilities,
    apply_feedback,
    base_desirability,
    decide,
    personality_multiplier,
    score_action,
    softmax,
    weighted_choice,
)
from pitchside.models.player import Personality, Player, PlayerAttributes, PlayerCondition, Role

OPPONENT = OpponentProfile(pressing=55, tactic_counter=10)
ENVIRONMENT = Environment(crowd=72, weather=5, pitch=3)


def _player(personality: Personality = Personality.NORMAL, rating: float = 80, **condition: float) -> Player:
    attrs = PlayerAttributes(**{name: rating for name in ENGINE_CONFIG.attributes.noise})
    return Player(
        name="Test Player",
        number=10,
        role=Role.CAM,
        base_rating=rating,
        attributes=attrs,
        condition=PlayerCondition(**condition),
        personality=personality,
    )


def _context(momentum: float = 0.5, big_match: bool = True) -> DecisionContext:
    return DecisionContext(minute=30, goal_diff=0, big_match=big_match, momentum=momentum)


class TestSoftmax:
    """Tests for the probability normalisation."""

    def test_sums_to_one(self) -> None:
        """Probabilities are non-negative and sum to one."""
        probs = softmax([0.2, 0.5, 0.01, 0.9])
        assert sum(probs) == pytest.approx(1.0)
        assert all(p >= 0 for p in probs)
        assert probs.index(max(probs)) == 3

    def test_stable_for_large_scores(self) -> None:
        """Large scores do not overflow."""
        probs = softmax([1000.0, 1001.0, 999.0])
        assert sum(probs) == pytest.approx(1.0)
        assert probs[1] > probs[0] > probs[2]

    def test_uniform_for_equal_scores(self) -> None:
        """Equal scores produce a uniform distribution."""
        assert softmax([0.3] * 8) == pytest.approx([0.125] * 8)


class TestWeightedChoice:
    """Tests for inverse-CDF sampling."""

    def test_converges_to_distribution(self) -> None:
        """Sample frequencies approach the requested probabilities."""
        rng = random.Random(2024)
        items = ["a", "b", "c", "d"]
        probs = [0.1, 0.2, 0.3, 0.4]
        draws = 40000
        counts = Counter(weighted_choice(items, probs, rng) for _ in range(draws))
        for item, p in zip(items, probs):
            assert counts[item] / draws == pytest.approx(p, abs=0.015)

    def test_shortfall_falls_back_to_last_item(self) -> None:
        """If rounding leaves the CDF short, the last item is returned."""
        rng = random.Random(1)
        assert weighted_choice(["x", "y"], [0.0, 0.0], rng) == "y"


class TestScoring:
    """Tests for the multi-factor scoring model."""

    def test_weight_rows_sum_to_one(self) -> None:
        """Every action's attribute weights sum to one."""
        for action in ACTIONS:
            weights = ENGINE_CONFIG.decision.action_weights[action.value]
            assert sum(weights.values()) == pytest.approx(1.0)
            assert 2 <= len(weights) <= 3

    def test_base_desirability_uniform_attributes(self) -> None:
        """With every skill at 80 each base score is 0.8."""
        player = _player(rating=80)
        for action in ACTIONS:
            assert base_desirability(player, action) == pytest.approx(0.8)

    def test_selfish_multipliers(self) -> None:
        """Selfish players favour shooting and disfavour passing."""
        player = _player(Personality.SELFISH)
        ctx = _context()
        assert personality_multiplier(player, ActionType.SHOOT, ctx) == pytest.approx(1.18)
        assert personality_multiplier(player, ActionType.PASS, ctx) == pytest.approx(0.88)
        assert personality_multiplier(player, ActionType.DRIBBLE, ctx) == pytest.approx(1.0)

    def test_big_match_temperaments(self) -> None:
        """Big-match and nervous players only react in high-stakes games."""
        big = _player(Personality.BIGMATCH)
        nervous = _player(Personality.NERVOUS)
        assert personality_multiplier(big, ActionType.PASS, _context()) == pytest.approx(1.12)
        assert personality_multiplier(nervous, ActionType.PASS, _context()) == pytest.approx(0.82)
        assert personality_multiplier(big, ActionType.PASS, _context(big_match=False)) == pytest.approx(1.0)
        assert personality_multiplier(nervous, ActionType.PASS, _context(big_match=False)) == pytest.approx(1.0)

    def test_momentum_bonuses(self) -> None:
        """High momentum boosts SHOOT and THROUGH; low momentum boosts HOLD."""
        player = _player()
        assert personality_multiplier(player, ActionType.SHOOT, _context(0.8)) == pytest.approx(1.1)
        assert personality_multiplier(player, ActionType.THROUGH, _context(0.8)) == pytest.approx(1.1)
        assert personality_multiplier(player, ActionType.HOLD, _context(0.8)) == pytest.approx(1.0)
        assert personality_multiplier(player, ActionType.HOLD, _context(0.2)) == pytest.approx(1.15)
        selfish = _player(Personality.SELFISH)
        assert personality_multiplier(selfish, ActionType.SHOOT, _context(0.8)) == pytest.approx(1.18 * 1.1)

    def test_score_floor(self) -> None:
        """A fully panicked player still scores every action above zero."""
        player = _player(panic=150)
        rng = random.Random(0)
        for action in ACTIONS:
            score = score_action(player, action, 10, OPPONENT, _context(), ENVIRONMENT, rng)
            assert score == pytest.approx(ENGINE_CONFIG.decision.score_floor)

    def test_probabilities_form_distribution(self) -> None:
        """The eight action probabilities sum to one."""
        rng = random.Random(9)
        for seed_player in range(20):
            player = _player(rating=40 + seed_player * 3, confidence=rng.uniform(0, 100))
            probs = action_probabilities(player, 9.5, OPPONENT, _context(), ENVIRONMENT, rng)
            assert len(probs) == len(ACTIONS)
            assert sum(probs) == pytest.approx(1.0)
            assert all(0 <= p <= 1 for p in probs)


class TestDecide:
    """Tests for the full decision and feedback step."""

    def test_feedback_follows_outcome(self) -> None:
        """Success lifts confidence and morale; failure costs confidence and adds panic."""
        rng = random.Random(77)
        for _ in range(50):
            player = _player(confidence=60, morale=60, panic=10, fatigue=20)
            decision = decide(player, 10, OPPONENT, _context(), ENVIRONMENT, rng)
            assert decision.action in ACTIONS
            assert 0 < decision.probability <= 1
            cond = player.condition
            if decision.success:
                assert cond.confidence == pytest.approx(62)
                assert cond.morale == pytest.approx(61)
                assert cond.panic == pytest.approx(10)
            else:
                assert cond.confidence == pytest.approx(58.5)
                assert cond.panic == pytest.approx(11)
                assert cond.morale == pytest.approx(60)
            assert 20.3 <= cond.fatigue <= 21.2

    def test_feedback_is_clamped(self) -> None:
        """Repeated feedback never pushes condition out of range."""
        rng = random.Random(4)
        player = _player(confidence=99, morale=99.5, panic=149.5, fatigue=99.9)
        for _ in range(20):
            apply_feedback(player, True, rng)
            apply_feedback(player, False, rng)
        cond = player.condition
        assert 0 <= cond.confidence <= 100
        assert cond.morale == 100
        assert cond.panic == 150
        assert cond.fatigue == 100

    def test_seeded_decisions_repeat(self) -> None:
        """The same seed produces the same sequence of decisions."""

        def run(seed: int) -> list:
            rng = random.Random(seed)
            player = _player()
            return [decide(player, 10, OPPONENT, _context(), ENVIRONMENT, rng) for _ in range(25)]

        assert run(13) == run(13)
