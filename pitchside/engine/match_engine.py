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
"""Real-time playback of a generated match.

:class:`RealTimeMatchEngine` generates the full event timeline up front and
then replays it against the wall clock. Between two events it sleeps in
fixed increments, random-walks the ball and repositions all 22 players on
every increment. When an event lands its side effects are applied to the
:class:`~pitchside.engine.state.MatchState` and observers are notified.
"""
from __future__ import annotations

import copy
import math
import random
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from pitchside.engine.config import ENGINE_CONFIG, EngineConfig
from pitchside.engine.event_generator import generate_events
from pitchside.engine.events import EventType, MatchEvent
from pitchside.engine.momentum import dominance_message, update_momentum
from pitchside.engine.positioning import calc_all_positions
from pitchside.engine.roles import PlayerPosition
from pitchside.engine.state import MatchState
from pitchside.engine.xg import estimate_shot_quality
from pitchside.models.player import Posture, clamp
from pitchside.models.team import FORMATIONS, Squad, get_positions
from pitchside.utils.debug import MatchDebugger
from pitchside.utils.generator import create_squad

FATIGUE_WINDOW: Tuple[int, int] = (58, 62)
FATIGUE_THRESHOLD = 65.0
GOAL_MORALE_BOOST = 5.0
CONCEDED_PANIC = 3.0


class EngineStatus(Enum):
    """Lifecycle of the playback loop."""

    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class CancellationToken:
    """Cooperative stop signal shared between the engine and its callers.

    Waiting on the token doubles as the loop's sleep so a stop request wakes
    the loop immediately.
    """

    def __init__(self) -> None:
        """Create an uncancelled token."""
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """Return ``True`` once :meth:`cancel` has been called."""
        return self._event.is_set()

    def wait(self, seconds: float) -> bool:
        """Sleep for up to ``seconds`` or until cancelled.

        Parameters
        ----------
        seconds : float
            Maximum time to block.

        Returns
        -------
        bool
            ``True`` when the token was cancelled.
        """
        return self._event.wait(max(0.0, seconds))


@dataclass(frozen=True)
class TickSnapshot:
    """Positions delivered on every tick between two events.

    Parameters
    ----------
    ball_x : float
        Ball x-coordinate.
    ball_y : float
        Ball y-coordinate.
    positions : Tuple[PlayerPosition, ...]
        22 positions, home and away interleaved per slot.
    minute : int
        Minute of the event being played towards.
    """

    ball_x: float
    ball_y: float
    positions: Tuple[PlayerPosition, ...]
    minute: int


@dataclass(frozen=True)
class EventUpdate:
    """Notification sent after an event has been applied.

    Parameters
    ----------
    event : MatchEvent
        The event that just landed.
    state : MatchState
        Live match state, including the updated score and momentum.
    fatigue_warning : Optional[str]
        Commentary about a tiring home player around the hour mark.
    momentum_message : Optional[str]
        Commentary when one side dominates the run of play.
    """

    event: MatchEvent
    state: MatchState
    fatigue_warning: Optional[str] = None
    momentum_message: Optional[str] = None


@dataclass(frozen=True)
class MatchSummary:
    """Final aggregate numbers of a completed match.

    Parameters
    ----------
    home_name : str
        Home squad name.
    away_name : str
        Away squad name.
    home_score : int
        Home goals.
    away_score : int
        Away goals.
    home_shots : int
        Home shots.
    away_shots : int
        Away shots.
    home_xg : float
        Home expected goals.
    away_xg : float
        Away expected goals.
    home_passes : int
        Home passes.
    away_passes : int
        Away passes.
    momentum : float
        Momentum at full time.
    state : MatchState
        The final match state.
    """

    home_name: str
    away_name: str
    home_score: int
    away_score: int
    home_shots: int
    away_shots: int
    home_xg: float
    away_xg: float
    home_passes: int
    away_passes: int
    momentum: float
    state: MatchState

    @classmethod
    def from_state(cls, state: MatchState) -> "MatchSummary":
        """Snapshot the aggregate numbers of ``state``.

        Parameters
        ----------
        state : MatchState
            Final match state.

        Returns
        -------
        MatchSummary
            Summary referencing ``state``.
        """
        return cls(
            home_name=state.home.name,
            away_name=state.away.name,
            home_score=state.home_score,
            away_score=state.away_score,
            home_shots=state.home_shots,
            away_shots=state.away_shots,
            home_xg=state.home_xg,
            away_xg=state.away_xg,
            home_passes=state.home_passes,
            away_passes=state.away_passes,
            momentum=state.momentum,
            state=state,
        )


class MatchObserver:
    """Receiver of playback notifications; every hook defaults to a no-op.

    Observers are called synchronously from the playback thread and should
    return quickly.
    """

    def on_start(self) -> None:
        """Handle kick-off."""

    def on_tick(self, snapshot: TickSnapshot) -> None:
        """Handle a positioning tick.

        Parameters
        ----------
        snapshot : TickSnapshot
            Ball and player positions.
        """

    def on_event(self, update: EventUpdate) -> None:
        """Handle an applied event.

        Parameters
        ----------
        update : EventUpdate
            Event plus the live match state.
        """

    def on_end(self, summary: MatchSummary) -> None:
        """Handle full time.

        Parameters
        ----------
        summary : MatchSummary
            Final aggregate numbers.
        """


class RealTimeMatchEngine:
    """Replays a generated match in compressed real time.

    Parameters
    ----------
    config : EngineConfig
        Engine tuning values; pass a compressed simulation section to replay
        faster than real time.
    seed : Optional[int]
        Seed for a private random generator; ignored when ``rng`` is given.
    rng : Optional[random.Random]
        Random source shared by every stochastic component.
    debugger : Optional[MatchDebugger]
        Telemetry sink; an in-memory debugger is created when omitted.
    home : Optional[Squad]
        Home squad to play with instead of a generated one. A pristine copy
        is kept and every match starts from a fresh copy of it.
    away : Optional[Squad]
        Away squad to play with instead of a generated one, copied the same
        way as ``home``.
    """

    def __init__(
        self,
        config: EngineConfig = ENGINE_CONFIG,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        debugger: Optional[MatchDebugger] = None,
        home: Optional[Squad] = None,
        away: Optional[Squad] = None,
    ) -> None:
        """Create the engine and an initial match state.

        Parameters
        ----------
        config : EngineConfig
            Engine tuning values.
        seed : Optional[int]
            Seed for a private random generator.
        rng : Optional[random.Random]
            Random source shared by every stochastic component.
        debugger : Optional[MatchDebugger]
            Telemetry sink.
        home : Optional[Squad]
            Fixed home squad.
        away : Optional[Squad]
            Fixed away squad.
        """
        if home is not None and home.side != "home":
            raise ValueError("home squad must have side 'home'")
        if away is not None and away.side != "away":
            raise ValueError("away squad must have side 'away'")
        self.config = config
        self.rng = rng if rng is not None else random.Random(seed)
        self.debugger = debugger if debugger is not None else MatchDebugger(output_dir=None)
        self._fixed_home = copy.deepcopy(home)
        self._fixed_away = copy.deepcopy(away)
        self._status = EngineStatus.IDLE
        self._status_lock = threading.Lock()
        self._token = CancellationToken()
        self._played = False
        self.events: List[MatchEvent] = []
        self.state = self._new_state()

    @property
    def status(self) -> EngineStatus:
        """Return the current lifecycle status."""
        return self._status

    @property
    def is_running(self) -> bool:
        """Return ``True`` while a match is being played back."""
        return self._status is EngineStatus.RUNNING

    def _new_state(self) -> MatchState:
        """Build a fresh match state with kick-off values.

        Fixed squads are deep-copied, so condition changes from an earlier
        match never carry over.

        Returns
        -------
        MatchState
            New session object.
        """
        if self._fixed_home is not None:
            home = copy.deepcopy(self._fixed_home)
        else:
            home = create_squad("home", rng=self.rng, config=self.config.attributes)
        if self._fixed_away is not None:
            away = copy.deepcopy(self._fixed_away)
        else:
            away = create_squad("away", rng=self.rng, config=self.config.attributes)
        for player in home.players + away.players:
            player.stats.reset()
            player.posture = Posture.NORMAL
        return MatchState(
            home=home,
            away=away,
            formation=self.config.simulation.default_formation,
            momentum=self.config.momentum.initial,
        )

    def reset_state(self) -> None:
        """Reinitialise both squads and every match counter.

        Ignored while a match is running.
        """
        if self.is_running:
            return
        self.state = self._new_state()
        self.events = []
        self._played = False
        self._status = EngineStatus.IDLE

    def _validate_dials(self, press_setting: float, tempo_setting: float) -> None:
        """Reject dial values outside ``[0, max_dial]``.

        Parameters
        ----------
        press_setting : float
            Pressing dial.
        tempo_setting : float
            Tempo dial.
        """
        limit = self.config.simulation.max_dial
        for name, value in (("press_setting", press_setting), ("tempo_setting", tempo_setting)):
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if math.isnan(value) or value < 0 or value > limit:
                raise ValueError(f"{name} must be between 0 and {limit:g}, got {value!r}")

    def run(
        self,
        press_setting: float,
        tempo_setting: float,
        observers: Optional[Iterable[MatchObserver]] = None,
        formation: Optional[str] = None,
    ) -> Optional[MatchSummary]:
        """Generate a match and play it back, blocking until it ends.

        Parameters
        ----------
        press_setting : float
            Pressing dial (0-10).
        tempo_setting : float
            Tempo dial (0-10).
        observers : Optional[Iterable[MatchObserver]]
            Receivers of the playback notifications.
        formation : Optional[str]
            Formation id for both sides; unknown ids fall back to the default.

        Returns
        -------
        Optional[MatchSummary]
            Final numbers on natural completion; ``None`` when the call was
            ignored because a match was already running, or when the match
            was stopped.

        Raises
        ------
        ValueError
            If a dial is negative, NaN or above the maximum.
        """
        if not self._claim(press_setting, tempo_setting):
            return None
        return self._run_claimed(press_setting, tempo_setting, list(observers or []), formation)

    def start(
        self,
        press_setting: float,
        tempo_setting: float,
        observers: Optional[Iterable[MatchObserver]] = None,
        formation: Optional[str] = None,
    ) -> Optional[threading.Thread]:
        """Run the match on a daemon worker thread.

        The engine is marked as running before this method returns, so a
        :meth:`stop` issued straight afterwards cancels the new match.

        Parameters
        ----------
        press_setting : float
            Pressing dial (0-10).
        tempo_setting : float
            Tempo dial (0-10).
        observers : Optional[Iterable[MatchObserver]]
            Receivers of the playback notifications.
        formation : Optional[str]
            Formation id.

        Returns
        -------
        Optional[threading.Thread]
            The started worker thread, or ``None`` when a match is already
            running.

        Raises
        ------
        ValueError
            If a dial is negative, NaN or above the maximum.
        """
        if not self._claim(press_setting, tempo_setting):
            return None
        worker = threading.Thread(
            target=self._run_claimed,
            args=(press_setting, tempo_setting, list(observers or []), formation),
            name="pitchside-match",
            daemon=True,
        )
        worker.start()
        return worker

    def _claim(self, press_setting: float, tempo_setting: float) -> bool:
        """Validate the dials and move to RUNNING with a fresh token.

        Parameters
        ----------
        press_setting : float
            Pressing dial.
        tempo_setting : float
            Tempo dial.

        Returns
        -------
        bool
            ``False`` when a match is already running.
        """
        with self._status_lock:
            if self._status is EngineStatus.RUNNING:
                return False
            self._validate_dials(press_setting, tempo_setting)
            self._token = CancellationToken()
            self._status = EngineStatus.RUNNING
        return True

    def _run_claimed(
        self,
        press_setting: float,
        tempo_setting: float,
        observers: Sequence[MatchObserver],
        formation: Optional[str],
    ) -> Optional[MatchSummary]:
        """Play a claimed match and release the running status afterwards.

        Parameters
        ----------
        press_setting : float
            Pressing dial.
        tempo_setting : float
            Tempo dial.
        observers : Sequence[MatchObserver]
            Notification receivers.
        formation : Optional[str]
            Requested formation id.

        Returns
        -------
        Optional[MatchSummary]
            Final numbers, or ``None`` when cancelled.
        """
        try:
            return self._play(press_setting, tempo_setting, observers, formation)
        finally:
            if self._status is EngineStatus.RUNNING:
                self._status = EngineStatus.IDLE

    def stop(self) -> None:
        """Request cooperative cancellation of the running match."""
        if not self.is_running:
            return
        self._token.cancel()
        self.debugger.log_match_event(self.state.minute, "stop", "Stop requested")

    def close(self) -> None:
        """Stop any running match and close the debug log."""
        self.stop()
        self.debugger.close()

    def _play(
        self,
        press_setting: float,
        tempo_setting: float,
        observers: Sequence[MatchObserver],
        formation: Optional[str],
    ) -> Optional[MatchSummary]:
        """Body of :meth:`run` once the engine is marked as running.

        Parameters
        ----------
        press_setting : float
            Pressing dial.
        tempo_setting : float
            Tempo dial.
        observers : Sequence[MatchObserver]
            Notification receivers.
        formation : Optional[str]
            Requested formation id.

        Returns
        -------
        Optional[MatchSummary]
            Final numbers, or ``None`` when cancelled.
        """
        if self._played:
            self.state = self._new_state()
        self._played = True

        sim = self.config.simulation
        state = self.state
        token = self._token
        state.formation = formation if formation in FORMATIONS else sim.default_formation

        self.events = generate_events(
            state, press_setting, tempo_setting, self.rng, self.config, self.debugger
        )
        self.debugger.log_match_event(
            0,
            "kickoff",
            f"{state.home.name} vs {state.away.name} | Formation: {state.formation} | "
            f"Press: {press_setting} | Tempo: {tempo_setting} | Events: {len(self.events)}",
        )
        for observer in observers:
            observer.on_start()

        press_intensity = press_setting / sim.max_dial
        ball_x, ball_y = 50.0, 50.0
        prev_minute = 0

        for event in self.events:
            if token.cancelled:
                break
            gap = max((event.minute - prev_minute) * sim.ms_per_minute, sim.min_gap_ms)
            elapsed = 0.0

            while elapsed + sim.tick_ms < gap:
                if token.wait(sim.tick_ms / 1000.0):
                    break
                elapsed += sim.tick_ms
                ball_x = self._walk(ball_x)
                ball_y = self._walk(ball_y)
                positions = calc_all_positions(
                    state,
                    event.home_possession,
                    ball_x,
                    ball_y,
                    press_intensity,
                    self.rng,
                    self.config.positioning,
                )
                self.debugger.log_ball_state(
                    event.minute, (ball_x, ball_y), "home" if event.home_possession else "away"
                )
                snapshot = TickSnapshot(ball_x, ball_y, tuple(positions), event.minute)
                for observer in observers:
                    observer.on_tick(snapshot)

            if token.cancelled or token.wait(max(gap - elapsed, sim.settle_ms) / 1000.0):
                break

            update = self._apply_event(event)
            for observer in observers:
                observer.on_event(update)
            prev_minute = event.minute

        if token.cancelled:
            self._status = EngineStatus.IDLE
            self.debugger.log_match_event(state.minute, "stopped", "Match stopped before full time")
            return None

        self._status = EngineStatus.ENDED
        summary = MatchSummary.from_state(state)
        self.debugger.log_match_event(
            state.minute,
            "full_time",
            f"{state.home.name} {state.home_score} - {state.away_score} {state.away.name} | "
            f"Shots: {state.home_shots}-{state.away_shots} | xG: {state.home_xg:.2f}-{state.away_xg:.2f}",
        )
        for observer in observers:
            observer.on_end(summary)
        return summary

    def _walk(self, value: float) -> float:
        """Move one ball coordinate by a bounded random step.

        Parameters
        ----------
        value : float
            Current coordinate.

        Returns
        -------
        float
            New coordinate clamped to the ball bounds.
        """
        sim = self.config.simulation
        return clamp(value + self.rng.uniform(-1.0, 1.0) * sim.ball_walk_step, *sim.ball_bounds)

    def _apply_event(self, event: MatchEvent) -> EventUpdate:
        """Apply the side effects of ``event`` to the match state.

        Parameters
        ----------
        event : MatchEvent
            Event that has just landed.

        Returns
        -------
        EventUpdate
            Notification payload for observers.
        """
        state = self.state
        if event.event_type is EventType.GOAL_FOR:
            state.home_score += 1
            for player in state.home.players:
                player.condition.adjust_morale(GOAL_MORALE_BOOST)
        elif event.event_type is EventType.GOAL_AGAINST:
            state.away_score += 1
            for player in state.home.players:
                player.condition.adjust_panic(CONCEDED_PANIC)

        state.momentum = update_momentum(state.momentum, event.event_type, event.success, self.config.momentum)
        state.minute = event.minute

        fatigue_warning = None
        if FATIGUE_WINDOW[0] <= event.minute <= FATIGUE_WINDOW[1]:
            tired = [p for p in state.home.players if p.condition.fatigue > FATIGUE_THRESHOLD]
            if tired:
                fatigue_warning = f"{tired[0].name} is showing signs of fatigue"

        momentum_message = dominance_message(state.momentum, event.event_type, self.config.momentum)

        self.debugger.log_match_event(event.minute, event.event_type.value, event.description)
        return EventUpdate(event, state, fatigue_warning, momentum_message)

    @staticmethod
    def get_positions(formation_id: str) -> List[Tuple[float, float]]:
        """Return the template slots of ``formation_id``.

        Parameters
        ----------
        formation_id : str
            Formation id; unknown ids fall back to the default.

        Returns
        -------
        List[Tuple[float, float]]
            Eleven base positions.
        """
        return get_positions(formation_id)

    @staticmethod
    def estimate_shot_quality(x: float, y: float, away_side: bool = False) -> float:
        """Return the expected-goals value of a shot from ``(x, y)``.

        Parameters
        ----------
        x : float
            Lateral coordinate.
        y : float
            Longitudinal coordinate.
        away_side : bool
            ``True`` for a shot by the away side.

        Returns
        -------
        float
            Probability in ``[0.01, 0.95]``.
        """
        return estimate_shot_quality(x, y, away_side)
