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
"""Tests for the console entry point."""

from __future__ import annotations

import pytest

from pitchside.engine.config import ENGINE_CONFIG
from pitchside.main import build_config, main, parse_args


def test_build_config_scales_timing() -> None:
    """Every playback interval shrinks by the speed factor."""
    config = build_config(4.0)
    sim = config.simulation
    assert sim.ms_per_minute == pytest.approx(ENGINE_CONFIG.simulation.ms_per_minute / 4)
    assert sim.tick_ms == pytest.approx(ENGINE_CONFIG.simulation.tick_ms / 4)
    assert sim.min_gap_ms == pytest.approx(ENGINE_CONFIG.simulation.min_gap_ms / 4)
    assert config.momentum is ENGINE_CONFIG.momentum


def test_build_config_rejects_non_positive_speed() -> None:
    """Playback speed must be positive."""
    with pytest.raises(ValueError):
        build_config(0)


def test_parse_args_defaults() -> None:
    """Dials default to the middle of their range."""
    args = parse_args([])
    assert args.press == 5.0
    assert args.tempo == 5.0
    assert args.formation == "4-4-2"
    assert args.seed is None


def test_parse_args_rejects_unknown_formation() -> None:
    """Only registered formations are accepted on the command line."""
    with pytest.raises(SystemExit):
        parse_args(["--formation", "1-1-8"])


def test_main_plays_a_match(tmp_path, capsys) -> None:
    """A fast console run prints the result and writes a session log."""
    main(
        [
            "--seed", "5",
            "--speed", "20000",
            "--roster", str(tmp_path / "missing.json"),
            "--log-dir", str(tmp_path / "logs"),
        ]
    )
    out = capsys.readouterr().out
    assert "Kick-off!" in out
    assert "Final Score:" in out
    assert list((tmp_path / "logs").glob("*.txt"))


def test_main_falls_back_on_bad_roster(tmp_path, capsys) -> None:
    """An unreadable roster is logged and generated squads are used."""
    roster = tmp_path / "players.json"
    roster.write_text('{"home": {"players": []}}', encoding="utf-8")
    main(["--seed", "1", "--speed", "20000", "--roster", str(roster), "--log-dir", str(tmp_path / "logs")])
    out = capsys.readouterr().out
    assert "Falling back to generated squads" in out
    log = next((tmp_path / "logs").glob("*.txt")).read_text(encoding="utf-8")
    assert "ERROR: Type: roster" in log
