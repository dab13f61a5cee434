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
"""Tests for the shared momentum scalar."""

import random

import pytest

from pitchside.engine.config import ENGINE_CONFIG
from pitchside.engine.events import EventType
from pitchside.engine.momentum import dominance_message, side_momentum, update_momentum


class TestUpdateMomentum:
    """Tests for the decay-and-nudge update."""

    def test_goal_from_kickoff(self) -> None:
        """A home goal at 0.5 lands at 0.68."""
        assert update_momentum(0.5, EventType.GOAL_FOR, True) == pytest.approx(0.68)
        assert update_momentum(0.5, EventType.GOAL_AGAINST, True) == pytest.approx(0.32)

    def test_decay_toward_centre(self) -> None:
        """Momentum decays toward 0.5 before the event nudge is added."""
        expected = 0.9 * 0.92 + 0.5 * 0.08 - 0.01
        assert update_momentum(0.9, EventType.FOUL, True) == pytest.approx(expected)

    def test_success_and_failure_deltas(self) -> None:
        """Shots, presses and passes nudge differently on failure."""
        assert update_momentum(0.5, EventType.SHOT, True) == pytest.approx(0.55)
        assert update_momentum(0.5, EventType.SHOT, False) == pytest.approx(0.49)
        assert update_momentum(0.5, EventType.PRESS, True) == pytest.approx(0.54)
        assert update_momentum(0.5, EventType.PASS, False) == pytest.approx(0.49)
        assert update_momentum(0.5, EventType.SAVE, True) == update_momentum(0.5, EventType.SAVE, False)

    def test_clamped_at_bounds(self) -> None:
        """Momentum never leaves [0.05, 0.95]."""
        momentum = 0.5
        for _ in range(30):
            momentum = update_momentum(momentum, EventType.GOAL_FOR, True)
        assert momentum == pytest.approx(0.95)
        for _ in range(30):
            momentum = update_momentum(momentum, EventType.GOAL_AGAINST, True)
        assert momentum == pytest.approx(0.05)

    def test_random_sequences_stay_in_bounds(self) -> None:
        """Arbitrary event sequences keep momentum in range."""
        rng = random.Random(5)
        low, high = ENGINE_CONFIG.momentum.bounds
        momentum = ENGINE_CONFIG.momentum.initial
        for _ in range(2000):
            momentum = update_momentum(momentum, rng.choice(list(EventType)), rng.random() < 0.5)
            assert low <= momentum <= high


class TestSideMomentum:
    """Tests for the side-relative view of momentum."""

    def test_home_and_away(self) -> None:
        """The away view is the complement of the home view."""
        assert side_momentum(0.7, "home") == pytest.approx(0.7)
        assert side_momentum(0.7, "away") == pytest.approx(0.3)

    def test_unknown_side(self) -> None:
        """Unknown sides are rejected."""
        with pytest.raises(ValueError):
            side_momentum(0.5, "neutral")


class TestDominanceMessage:
    """Tests for the dominance commentary."""

    def test_home_dominance(self) -> None:
        """High momentum reports home control except on a home goal."""
        assert dominance_message(0.8, EventType.PASS) == "Home side are completely dominating the game"
        assert dominance_message(0.8, EventType.GOAL_FOR) is None

    def test_away_dominance(self) -> None:
        """Low momentum reports away control except on an away goal."""
        assert dominance_message(0.2, EventType.SHOT) == "Away side have seized control of the game"
        assert dominance_message(0.2, EventType.GOAL_AGAINST) is None

    def test_balanced(self) -> None:
        """Balanced games produce no message."""
        assert dominance_message(0.5, EventType.PASS) is None
        assert dominance_message(0.78, EventType.PASS) is None
        assert dominance_message(0.22, EventType.PASS) is None
