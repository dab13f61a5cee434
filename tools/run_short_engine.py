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
"""Run a fully compressed match and print the summary."""
import argparse
from typing import Optional

from pitchside.engine.config import EngineConfig, SimulationConfig
from pitchside.engine.match_engine import RealTimeMatchEngine
from pitchside.utils.debug import MatchDebugger


def run_short_simulation(
    seed: Optional[int] = None,
    press: float = 5.0,
    tempo: float = 5.0,
    formation: str = "4-4-2",
    log_dir: str = "debug_logs",
) -> None:
    """Play a whole match with near-zero sleeps and print the result.

    Parameters
    ----------
    seed : Optional[int]
        Seed for a reproducible run.
    press : float
        Pressing dial (0-10).
    tempo : float
        Tempo dial (0-10).
    formation : str
        Formation id.
    log_dir : str
        Directory for the debug log.
    """
    config = EngineConfig(simulation=SimulationConfig(ms_per_minute=2.0, tick_ms=1.0, min_gap_ms=0.0, settle_ms=0.0))
    engine = RealTimeMatchEngine(config=config, seed=seed, debugger=MatchDebugger(log_dir))
    summary = engine.run(press, tempo, formation=formation)
    engine.close()

    if summary is None:
        print("Match did not finish")
        return
    print(
        f"{summary.home_name} {summary.home_score} - {summary.away_score} {summary.away_name} | "
        f"shots {summary.home_shots}-{summary.away_shots} | "
        f"xG {summary.home_xg:.2f}-{summary.away_xg:.2f} | momentum {summary.momentum:.3f}"
    )
    print(f"Done running {len(engine.events)} events; log at {engine.debugger.log_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run a compressed match simulation")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--press", type=float, default=5.0)
    parser.add_argument("--tempo", type=float, default=5.0)
    parser.add_argument("--formation", default="4-4-2")
    args = parser.parse_args()
    run_short_simulation(args.seed, args.press, args.tempo, args.formation)
