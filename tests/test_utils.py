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
"""Tests for utility modules (generator, roster, debug)."""

import json
import random
from pathlib import Path

import pytest

from pitchside.engine.config import ENGINE_CONFIG
from pitchside.models.player import Personality, Role
from pitchside.utils.debug import MatchDebugger
from pitchside.utils.generator import AWAY_TEMPLATE, HOME_TEMPLATE, create_player, create_squad
from pitchside.utils.roster import load_squads_from_json, player_from_dict


class TestGenerator:
    """Tests for generator utility functions."""

    def test_create_player_attributes_in_bounds(self) -> None:
        """Every sampled attribute lands within 40-99, even at the extremes."""
        rng = random.Random(3)
        for rating in (40, 60, 99):
            player = create_player(rating, Role.ST, rng=rng)
            for name in ENGINE_CONFIG.attributes.noise:
                value = player.attributes.get(name)
                assert 40 <= value <= 99
                assert abs(value - rating) <= ENGINE_CONFIG.attributes.noise[name]

    def test_create_player_condition_ranges(self) -> None:
        """Condition fields are derived within their documented ranges."""
        rng = random.Random(5)
        player = create_player(80, Role.CM, Personality.SELFISH, rng=rng)
        cond = player.condition
        assert 5 <= cond.mentality <= 15
        assert cond.role_familiarity == 70
        assert cond.resilience == 75
        assert cond.confidence == 75
        assert cond.morale == 70
        assert 0.5 <= cond.urgency <= 2.0
        assert 0 <= cond.pressure <= 30
        assert 0 <= cond.panic <= 20
        assert 0 <= cond.fatigue <= 5
        assert 0 <= cond.injury_risk <= 5
        assert 6.0 <= cond.form <= 8.0
        assert player.personality is Personality.SELFISH

    def test_personality_defaults_to_random_variant(self) -> None:
        """Omitting the personality picks from all four variants."""
        rng = random.Random(11)
        seen = {create_player(70, Role.CM, rng=rng).personality for _ in range(200)}
        assert seen == set(Personality)

    def test_create_squad_follows_template(self) -> None:
        """Squads have eleven players in template order with fixed numbers."""
        squad = create_squad("home", rng=random.Random(1))
        assert len(squad.players) == 11
        assert [p.role for p in squad.players] == [role for role, _, _ in HOME_TEMPLATE]
        assert [p.number for p in squad.players] == [1, 2, 5, 6, 3, 8, 10, 7, 11, 9, 18]
        assert [p.personality for p in squad.players] == [pers for _, _, pers in HOME_TEMPLATE]
        assert squad.name == "Home"

    def test_create_away_squad(self) -> None:
        """The away template differs from the home one."""
        squad = create_squad("away", name="Visitors", rng=random.Random(1))
        assert squad.side == "away"
        assert squad.name == "Visitors"
        assert [p.role for p in squad.players] == [role for role, _, _ in AWAY_TEMPLATE]
        assert squad.players[7].role is Role.CAM

    def test_create_squad_rejects_unknown_side(self) -> None:
        """Only home and away are valid sides."""
        with pytest.raises(ValueError):
            create_squad("neutral")

    def test_seeded_generation_is_reproducible(self) -> None:
        """The same seed yields the same squad."""
        a = create_squad("home", rng=random.Random(42))
        b = create_squad("home", rng=random.Random(42))
        assert [p.name for p in a.players] == [p.name for p in b.players]
        assert [p.attributes for p in a.players] == [p.attributes for p in b.players]


def _roster_entry(number: int, role: str) -> dict:
    return {"name": f"Player {number}", "number": number, "role": role, "rating": 72}


class TestRoster:
    """Tests for roster loading utility functions."""

    def test_player_from_dict(self) -> None:
        """Test loading a player from dictionary."""
        player = player_from_dict(
            {
                "name": "Test Player",
                "number": 10,
                "role": "cam",
                "rating": 84,
                "personality": "bigmatch",
                "attributes": {"passing": 88, "vision": 91},
                "condition": {"confidence": 80, "unknown": 1},
            }
        )
        assert player.name == "Test Player"
        assert player.number == 10
        assert player.role is Role.CAM
        assert player.base_rating == 84
        assert player.personality is Personality.BIGMATCH
        assert player.attributes.passing == 88
        assert player.attributes.finishing == 50
        assert player.condition.confidence == 80

    def test_player_from_dict_legacy_position_key(self) -> None:
        """The legacy position key is accepted for the role."""
        player = player_from_dict({"name": "Old", "position": "ST"})
        assert player.role is Role.ST
        assert player.personality is Personality.NORMAL
        assert player.base_rating == 70

    def test_player_from_dict_unknown_role(self) -> None:
        """Unknown role codes are rejected with the list of known roles."""
        with pytest.raises(ValueError, match="Known roles"):
            player_from_dict({"name": "Nobody", "role": "SW"})

    def test_load_squads_from_json(self, tmp_path: Path) -> None:
        """Both sections of a roster file become squads."""
        roles = ["GK", "RB", "CB", "CB", "LB", "CM", "CAM", "CM", "LW", "ST", "RW"]
        payload = {
            "home": {"name": "Reds", "players": [_roster_entry(i, r) for i, r in enumerate(roles, 1)]},
            "away": {"name": "Blues", "players": [_roster_entry(i, r) for i, r in enumerate(roles, 1)]},
        }
        path = tmp_path / "players.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        home, away = load_squads_from_json(str(path))
        assert home.name == "Reds" and home.side == "home"
        assert away.name == "Blues" and away.side == "away"
        assert len(home.players) == 11
        assert home.players[0].role is Role.GK

    def test_load_squads_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_squads_from_json(str(tmp_path / "missing.json"))

    def test_player_from_dict_clamps_condition(self) -> None:
        """Out-of-range condition values are pulled back into range."""
        player = player_from_dict(
            {"name": "Wild", "role": "CM", "condition": {"confidence": 500, "panic": 900, "morale": -40, "fatigue": 250}}
        )
        assert player.condition.confidence == 100
        assert player.condition.panic == 150
        assert player.condition.morale == 0
        assert player.condition.fatigue == 100

    def test_load_squads_rejects_misordered_roster(self, tmp_path: Path) -> None:
        """A roster that does not list the goalkeeper first is rejected."""
        roles = ["ST", "RB", "CB", "CB", "LB", "CM", "CAM", "CM", "LW", "GK", "RW"]
        good = ["GK", "RB", "CB", "CB", "LB", "CM", "CAM", "CM", "LW", "ST", "RW"]
        payload = {
            "home": {"players": [_roster_entry(i, r) for i, r in enumerate(roles, 1)]},
            "away": {"players": [_roster_entry(i, r) for i, r in enumerate(good, 1)]},
        }
        path = tmp_path / "players.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(ValueError, match="Slot 0"):
            load_squads_from_json(str(path))

    def test_load_squads_short_roster(self, tmp_path: Path) -> None:
        """A section with fewer than eleven players is rejected."""
        payload = {
            "home": {"players": [_roster_entry(1, "GK")]},
            "away": {"players": [_roster_entry(1, "GK")]},
        }
        path = tmp_path / "players.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(ValueError):
            load_squads_from_json(str(path))


class TestMatchDebugger:
    """Tests for the match debugger."""

    def test_memory_only_session(self) -> None:
        """Without an output directory entries are kept in memory only."""
        debugger = MatchDebugger(output_dir=None)
        debugger.log_match_event(12, "goal_for", "Striker scores")
        debugger.log_decision(12, "home", "#9 ST Striker", "SHOOT", True, 0.25)
        assert debugger.log_path is None
        assert [e.event_type for e in debugger.events] == ["MATCH_EVENT", "DECISION"]
        recent = debugger.get_recent_events()
        assert recent[0].startswith("00001 ")
        assert "Event: goal_for" in recent[0]
        assert "Action: SHOOT" in recent[1]

    def test_writes_session_file(self, tmp_path: Path) -> None:
        """Entries are streamed to a session file inside the output directory."""
        debugger = MatchDebugger(output_dir=str(tmp_path / "logs"))
        debugger.log_ball_state(3, (51.0, 47.5), "away")
        debugger.log_error("config", "bad value")
        debugger.close()

        assert debugger.log_path is not None
        text = debugger.log_path.read_text(encoding="utf-8")
        assert "BALL_STATE: Minute: 3 | Pos: (51.0, 47.5) | Possession: away" in text
        assert "ERROR: Type: config | Details: bad value" in text

    def test_recent_events_limit(self) -> None:
        """The recent-events view honours its limit."""
        debugger = MatchDebugger(output_dir=None)
        for minute in range(30):
            debugger.log_match_event(minute, "pass", "ok")
        assert len(debugger.get_recent_events(limit=5)) == 5
        assert debugger.get_recent_events(limit=5)[-1].startswith("00030 ")

    def test_structured_buffer_is_bounded(self) -> None:
        """Only the newest entries survive once the buffer is full."""
        debugger = MatchDebugger(output_dir=None, max_events=10)
        for minute in range(25):
            debugger.log_match_event(minute, "pass", "ok")
        assert len(debugger.events) == 10
        assert [e.minute for e in debugger.events] == list(range(15, 25))
        debugger.start_new_session()
        assert len(debugger.events) == 0
