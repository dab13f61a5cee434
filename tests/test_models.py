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
"""Tests for player, formation, and squad models."""

import pytest

from pitchside.models.player import (
    Line,
    MatchStats,
    Personality,
    Player,
    PlayerAttributes,
    PlayerCondition,
    Role,
)
from pitchside.models.team import FORMATIONS, Formation, Squad, get_formation, get_positions


def _player(role: Role = Role.CM, number: int = 8) -> Player:
    return Player(
        name=f"Player {number}",
        number=number,
        role=role,
        base_rating=75,
        attributes=PlayerAttributes(),
        condition=PlayerCondition(),
        personality=Personality.NORMAL,
    )


def _eleven() -> list:
    roles = [Role.GK, Role.RB, Role.CB, Role.CB, Role.LB, Role.CM, Role.CAM, Role.CM, Role.LW, Role.ST, Role.RW]
    return [_player(role, i + 1) for i, role in enumerate(roles)]


class TestPlayerAttributes:
    """Tests for PlayerAttributes class."""

    def test_defaults_to_fifty(self) -> None:
        """Unspecified skills default to 50."""
        attrs = PlayerAttributes(passing=70)
        assert attrs.passing == 70
        assert attrs.finishing == 50
        assert attrs.pace == 50

    def test_values_are_clamped(self) -> None:
        """Ratings outside 40-99 are clamped rather than rejected."""
        attrs = PlayerAttributes(passing=120, finishing=10)
        assert attrs.passing == 99
        assert attrs.finishing == 40

    def test_get_unknown_attribute_returns_default(self) -> None:
        """Lookups of unknown skills fall back to 50."""
        attrs = PlayerAttributes(vision=80)
        assert attrs.get("vision") == 80
        assert attrs.get("heading") == 50


class TestPlayerCondition:
    """Tests for the clamped condition mutators."""

    def test_confidence_and_morale_stay_in_range(self) -> None:
        """Confidence and morale never leave 0-100."""
        cond = PlayerCondition(confidence=99, morale=1)
        cond.adjust_confidence(10)
        cond.adjust_morale(-10)
        assert cond.confidence == 100
        assert cond.morale == 0

    def test_panic_capped_at_150(self) -> None:
        """Panic saturates at 150."""
        cond = PlayerCondition(panic=149)
        for _ in range(10):
            cond.adjust_panic(3)
        assert cond.panic == 150

    def test_fatigue_never_decreases(self) -> None:
        """Negative fatigue increments are ignored and the cap is 100."""
        cond = PlayerCondition(fatigue=40)
        cond.add_fatigue(-5)
        assert cond.fatigue == 40
        cond.add_fatigue(500)
        assert cond.fatigue == 100

    def test_out_of_range_values_are_clamped(self) -> None:
        """Construction pulls bounded fields back into range."""
        cond = PlayerCondition(confidence=500, morale=-40, panic=900, fatigue=250, urgency=9, mentality=1)
        assert cond.confidence == 100
        assert cond.morale == 0
        assert cond.panic == 150
        assert cond.fatigue == 100
        assert cond.urgency == 2.0
        assert cond.mentality == 5

    def test_pressure_only_floored(self) -> None:
        """Pressure may exceed its nominal 30 but never drops below zero."""
        assert PlayerCondition(pressure=65).pressure == 65
        assert PlayerCondition(pressure=-10).pressure == 0


class TestMatchStats:
    """Tests for per-match statistics."""

    def test_rating_clamped(self) -> None:
        """The match rating stays within 4-10."""
        stats = MatchStats()
        stats.adjust_rating(10)
        assert stats.rating == 10
        stats.adjust_rating(-20)
        assert stats.rating == 4

    def test_reset(self) -> None:
        """Reset restores kick-off values."""
        stats = MatchStats(shots=3, goals=1, rating=8.2, xg=0.7)
        stats.reset()
        assert stats == MatchStats()


class TestPlayer:
    """Tests for Player class."""

    def test_role_line(self) -> None:
        """Roles map onto tactical lines."""
        assert _player(Role.GK).line is Line.GOALKEEPER
        assert _player(Role.CB).line is Line.DEFENDER
        assert _player(Role.CAM).line is Line.MIDFIELDER
        assert _player(Role.RW).line is Line.ATTACKER

    def test_base_rating_clamped(self) -> None:
        """Base ratings are clamped to 40-99."""
        player = _player()
        player.base_rating = 150
        player.__post_init__()
        assert player.base_rating == 99

    def test_stats_are_independent(self) -> None:
        """Each player gets their own stats object."""
        a, b = _player(number=1), _player(number=2)
        a.stats.shots += 1
        assert b.stats.shots == 0


class TestFormation:
    """Tests for the formation registry."""

    def test_registry_has_six_templates(self) -> None:
        """Six standard formations with eleven slots each are registered."""
        assert set(FORMATIONS) == {"4-4-2", "4-3-3", "4-2-3-1", "3-5-2", "5-3-2", "3-4-3"}
        for formation in FORMATIONS.values():
            assert len(formation.slots) == 11

    def test_formation_requires_eleven_slots(self) -> None:
        """A formation with the wrong number of slots is rejected."""
        with pytest.raises(ValueError):
            Formation("broken", ((50, 50),) * 10)

    def test_unknown_formation_falls_back(self) -> None:
        """Unknown ids resolve to 4-4-2."""
        assert get_formation("9-0-1") is FORMATIONS["4-4-2"]
        assert get_positions("nope") == list(FORMATIONS["4-4-2"].slots)

    def test_get_positions_returns_copy(self) -> None:
        """Mutating the returned list does not affect the template."""
        positions = get_positions("4-3-3")
        positions.clear()
        assert len(get_positions("4-3-3")) == 11

    def test_goalkeeper_slot_near_own_goal(self) -> None:
        """Slot 0 sits in front of the home goal in every formation."""
        for formation in FORMATIONS.values():
            x, y = formation.slots[0]
            assert x == 50
            assert y > 85


class TestSquad:
    """Tests for Squad class."""

    def test_squad_requires_eleven(self) -> None:
        """Squads must have exactly eleven players."""
        with pytest.raises(ValueError):
            Squad(name="Short", side="home", players=_eleven()[:10])

    def test_squad_requires_valid_side(self) -> None:
        """The side label must be home or away."""
        with pytest.raises(ValueError):
            Squad(name="Nowhere", side="neutral", players=_eleven())

    def test_squad_rejects_keeper_in_striker_slot(self) -> None:
        """Every slot must hold a player of the slot's line."""
        players = _eleven()
        players[0], players[9] = players[9], players[0]
        with pytest.raises(ValueError, match="Slot 0"):
            Squad(name="Muddled", side="home", players=players)

    def test_squad_rejects_swapped_lines(self) -> None:
        """A midfielder in a defender slot is rejected."""
        players = _eleven()
        players[4], players[5] = players[5], players[4]
        with pytest.raises(ValueError, match="Slot 4"):
            Squad(name="Muddled", side="home", players=players)

    def test_lines_and_slots(self) -> None:
        """Line filters and slot lookups follow the slot order."""
        squad = Squad(name="Test FC", side="home", players=_eleven())
        assert len(squad) == 11
        assert squad.goalkeeper.role is Role.GK
        assert len(squad.players_in_line(Line.DEFENDER)) == 4
        assert len(squad.players_in_line(Line.MIDFIELDER)) == 3
        assert len(squad.players_in_line(Line.ATTACKER)) == 3
        assert squad.slot_of(squad.players[9]) == 9
        assert squad.slot_of(_player()) == -1
