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
"""Entry point for manual match simulations in the console."""
import argparse
import time
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from pitchside.engine.config import ENGINE_CONFIG, EngineConfig
from pitchside.engine.events import EventType
from pitchside.engine.match_engine import (
    EventUpdate,
    MatchObserver,
    MatchSummary,
    RealTimeMatchEngine,
)
from pitchside.models.team import FORMATIONS
from pitchside.utils.debug import MatchDebugger
from pitchside.utils.roster import load_squads_from_json  # For loading saved rosters


class ConsoleObserver(MatchObserver):
    """Prints commentary, the running score and the final statistics."""

    def on_start(self) -> None:
        """Announce kick-off."""
        print("Kick-off!")

    def on_event(self, update: EventUpdate) -> None:
        """Print the event line and any commentary.

        Parameters
        ----------
        update : EventUpdate
            Event plus the live match state.
        """
        event = update.event
        state = update.state
        line = f"{event.minute:2d}' {event.description}"
        if event.event_type in (EventType.GOAL_FOR, EventType.GOAL_AGAINST):
            line += f"  [{state.home.name} {state.home_score} - {state.away_score} {state.away.name}]"
        print(line)
        if update.fatigue_warning:
            print(f"    {update.fatigue_warning}")
        if update.momentum_message:
            print(f"    {update.momentum_message}")

    def on_end(self, summary: MatchSummary) -> None:
        """Print the final score and match statistics.

        Parameters
        ----------
        summary : MatchSummary
            Final aggregate numbers.
        """
        print(
            f"\nFinal Score: {summary.home_name} {summary.home_score} - "
            f"{summary.away_score} {summary.away_name}"
        )
        print("\nMatch Statistics:")
        print(f"{summary.home_name}:")
        print(f"Shots: {summary.home_shots}  xG: {summary.home_xg:.2f}  Passes: {summary.home_passes}")
        print(f"\n{summary.away_name}:")
        print(f"Shots: {summary.away_shots}  xG: {summary.away_xg:.2f}  Passes: {summary.away_passes}")


def build_config(speed: float) -> EngineConfig:
    """Return the default configuration with playback sped up by ``speed``.

    Parameters
    ----------
    speed : float
        Playback speed multiplier; ``1.0`` plays a match in ten minutes.

    Returns
    -------
    EngineConfig
        Configuration with a rescaled simulation section.
    """
    if speed <= 0:
        raise ValueError("speed must be positive")
    sim = ENGINE_CONFIG.simulation
    simulation = replace(
        sim,
        ms_per_minute=sim.ms_per_minute / speed,
        tick_ms=sim.tick_ms / speed,
        min_gap_ms=sim.min_gap_ms / speed,
        settle_ms=sim.settle_ms / speed,
    )
    return replace(ENGINE_CONFIG, simulation=simulation)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command-line options.

    Parameters
    ----------
    argv : Optional[List[str]]
        Arguments to parse; ``sys.argv`` is used when ``None``.

    Returns
    -------
    argparse.Namespace
        Parsed options.
    """
    parser = argparse.ArgumentParser(description="Simulate a football match in compressed real time")
    parser.add_argument("--press", type=float, default=5.0, help="Pressing dial, 0-10")
    parser.add_argument("--tempo", type=float, default=5.0, help="Tempo dial, 0-10")
    parser.add_argument("--formation", choices=sorted(FORMATIONS), default="4-4-2")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible match")
    parser.add_argument("--speed", type=float, default=1.0, help="Playback speed multiplier")
    parser.add_argument("--roster", type=Path, default=Path("data/players.json"), help="Roster JSON file")
    parser.add_argument("--log-dir", default="debug_logs", help="Directory for debug logs")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Run one match on a worker thread and print it to the console.

    Parameters
    ----------
    argv : Optional[List[str]]
        Command-line arguments; ``sys.argv`` is used when ``None``.
    """
    args = parse_args(argv)
    config = build_config(args.speed)

    debugger = MatchDebugger(args.log_dir)

    # Try to load squads from JSON file, fall back to generated squads if not found
    home = away = None
    if args.roster.exists():
        try:
            home, away = load_squads_from_json(str(args.roster))
        except (KeyError, ValueError) as e:
            debugger.log_error("roster", f"{args.roster}: {e}")
            print(f"Error loading squads from {args.roster}: {e}")
            print("Falling back to generated squads...")
            home = away = None
    else:
        print(f"No roster file found at {args.roster}")
        print("Using generated squads...")

    engine = RealTimeMatchEngine(
        config=config,
        seed=args.seed,
        debugger=debugger,
        home=home,
        away=away,
    )
    engine_thread = engine.start(args.press, args.tempo, [ConsoleObserver()], args.formation)

    try:
        while engine_thread.is_alive():
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\nMatch simulation interrupted.")
        engine.stop()
        engine_thread.join()
    finally:
        engine.close()

    if engine.debugger.log_path is not None:
        print(f"\nDebug log written to {engine.debugger.log_path}")


if __name__ == "__main__":
    main()
