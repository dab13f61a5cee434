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
"""Tests for the pre-match event timeline generator."""

from __future__ import annotations

import random
from dataclasses import fields, replace

from pitchside.engine.config import ENGINE_CONFIG, EngineConfig
from pitchside.engine.event_generator import decision_minutes, generate_events, team_mentality
from pitchside.engine.events import EventType
from pitchside.engine.momentum import update_momentum
from pitchside.engine.state import MatchState
from pitchside.utils.debug import MatchDebugger
from pitchside.utils.generator import create_squad


def _build_state(seed: int) -> MatchState:
    """Create a fresh state with generated squads for deterministic tests."""
    rng = random.Random(seed)
    return MatchState(home=create_squad("home", rng=rng), away=create_squad("away", rng=rng))


def _generate(seed: int, press: float = 5.0, tempo: float = 5.0):
    state = _build_state(seed)
    events = generate_events(state, press, tempo, random.Random(seed + 1))
    return state, events


def test_team_mentality_from_dials() -> None:
    """The dials map linearly onto the mentality scale."""
    assert team_mentality(0, 0) == 5
    assert team_mentality(10, 10) == 13
    assert team_mentality(5, 5) == 9


def test_decision_minutes_cover_the_match() -> None:
    """Decision minutes start at 1, never decrease and end on 89."""
    for seed in range(25):
        minutes = decision_minutes(random.Random(seed))
        assert minutes[0] == 1
        assert minutes[-1] == 89
        assert all(1 <= m <= 89 for m in minutes)
        assert minutes == sorted(minutes)
        assert minutes.count(89) == 1


def test_events_are_ordered_and_bounded() -> None:
    """Generated events stay inside the match and keep minute order."""
    for seed in range(10):
        _, events = _generate(seed)
        minutes = [e.minute for e in events]
        assert minutes == sorted(minutes)
        assert minutes[-1] == 89
        assert all(1 <= m <= 89 for m in minutes)
        for event in events:
            assert 0 <= event.ball[0] <= 100 and 0 <= event.ball[1] <= 100
            assert event.side in {"home", "away"}


def test_heat_map_has_one_sample_per_event() -> None:
    """Every event leaves exactly one heat sample."""
    state, events = _generate(3)
    assert len(state.heat_map) == len(events)
    for sample, event in zip(state.heat_map, events):
        assert (sample.x, sample.y) == event.ball
        assert sample.side in {"home", "away"}


def test_pass_map_edges_reference_distinct_slots() -> None:
    """Pass edges connect two different squad slots."""
    state, events = _generate(11)
    passes = [e for e in events if e.action in {"PASS", "THROUGH"}]
    assert len(state.pass_map) == len(passes)
    assert state.home_passes + state.away_passes == len(passes)
    for edge in state.pass_map:
        assert 0 <= edge.from_slot <= 10
        assert 0 <= edge.to_slot <= 10
        assert edge.from_slot != edge.to_slot


def test_event_locations_follow_configured_zones() -> None:
    """Every sampled ball location comes from the configured zones."""
    suffixes = ("_zone", "_origin", "_target")
    zones = {f.name: (33, 33, 44, 44) for f in fields(ENGINE_CONFIG.events) if f.name.endswith(suffixes)}
    config = EngineConfig(events=replace(ENGINE_CONFIG.events, **zones))
    for seed in range(5):
        state = _build_state(seed)
        events = generate_events(state, 5.0, 5.0, random.Random(seed), config=config)
        for event in events:
            assert event.ball == (33.0, 44.0)
            assert event.origin in (None, (33.0, 44.0))


def test_shot_counters_match_shot_events() -> None:
    """Shot and xG totals agree with the shooting events."""
    state, events = _generate(21)
    shots = [e for e in events if e.action in {"SHOOT", "LONGSHOT"}]
    assert state.home_shots + state.away_shots == len(shots)
    assert state.home_xg >= 0.0 and state.away_xg >= 0.0
    if state.home_shots:
        assert 0.01 * state.home_shots <= state.home_xg <= 0.95 * state.home_shots


def test_goal_events_leave_score_untouched() -> None:
    """Scores are only applied during playback."""
    state, events = _generate(8)
    assert state.home_score == 0 and state.away_score == 0
    for event in events:
        if event.is_goal:
            assert event.success
            assert event.side == ("home" if event.event_type is EventType.GOAL_FOR else "away")


def test_generation_is_reproducible() -> None:
    """The same seeds produce the same timeline."""
    _, first = _generate(42)
    _, second = _generate(42)
    assert first == second


def test_replayed_momentum_stays_in_bounds() -> None:
    """Folding momentum over the timeline keeps it inside its bounds."""
    _, events = _generate(17)
    low, high = ENGINE_CONFIG.momentum.bounds
    momentum = ENGINE_CONFIG.momentum.initial
    for event in events:
        momentum = update_momentum(momentum, event.event_type, event.success)
        assert low <= momentum <= high


def test_decisions_are_logged() -> None:
    """The debugger records one decision per generated event."""
    state = _build_state(5)
    debugger = MatchDebugger(output_dir=None)
    events = generate_events(state, 5.0, 5.0, random.Random(6), debugger=debugger)
    decisions = [e for e in debugger.events if e.event_type == "DECISION"]
    assert len(decisions) == len(events)
