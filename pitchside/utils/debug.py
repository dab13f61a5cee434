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
"""Session log for match playback, the decision trace and loader errors."""
import time
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Deque, List, Optional, TextIO, Tuple

MAX_BUFFERED_EVENTS = 5000


@dataclass
class DebugEvent:
    """One buffered log entry, kept for tests and post-match inspection.

    Parameters
    ----------
    minute : int
        Match minute when the event was recorded.
    event_type : str
        Category label describing the event, for example ``"goal_for"``.
    details : str
        Human-readable description providing additional context.
    """

    minute: int
    event_type: str
    details: str


class MatchDebugger:
    """Helper object that records structured match telemetry.

    Entries are kept in a bounded in-memory buffer and, when an output
    directory is given, streamed to a per-session text file.

    Parameters
    ----------
    output_dir : str | None, default="debug_logs"
        Directory where new session logs are created; created automatically when
        missing. ``None`` keeps the log in memory only.
    max_events : int, default=5000
        Capacity of :attr:`events`; the oldest entries are dropped first.
    """

    def __init__(self, output_dir: Optional[str] = "debug_logs", max_events: int = MAX_BUFFERED_EVENTS) -> None:
        """Initialise the debugger and start the first logging session.

        Parameters
        ----------
        output_dir : str | None
            Filesystem directory where log files are created, or ``None`` to
            skip writing files.
        max_events : int
            Number of structured entries kept in memory.
        """
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.log_file: Optional[TextIO] = None
        self.log_path: Optional[Path] = None
        self.session_start = time.strftime("%Y%m%d_%H%M%S")
        self._lock = Lock()
        self._line_number = 1
        self._recent_events: Deque[Tuple[int, str]] = deque(maxlen=200)
        self.events: Deque[DebugEvent] = deque(maxlen=max_events)
        self.start_new_session()

    def start_new_session(self) -> None:
        """Start a new debug logging session."""
        with self._lock:
            if self.log_file:
                self.log_file.close()
                self.log_file = None
            self.events.clear()
            self._recent_events.clear()
            self._line_number = 1

            if self.output_dir is None:
                return

            self.output_dir.mkdir(parents=True, exist_ok=True)
            self.log_path = self.output_dir / f"match_debug_{self.session_start}.txt"
            self.log_file = open(self.log_path, "w", encoding="utf-8")
            self.log_file.write(f"=== Match Debug Session: {time.strftime('%Y-%m-%d %H:%M:%S')} ===\n\n")

    def log_ball_state(self, minute: int, position: Tuple[float, float], possession_side: Optional[str] = None) -> None:
        """Log where the ball is and who holds it.

        Parameters
        ----------
        minute : int
            Match minute in progress.
        position : tuple[float, float]
            Ball coordinates in the normalised pitch space.
        possession_side : str | None
            ``"home"`` or ``"away"`` when known.
        """
        possession_str = f" | Possession: {possession_side}" if possession_side else ""
        self._write_log(
            minute,
            "BALL_STATE",
            f"Minute: {minute} | Pos: ({position[0]:.1f}, {position[1]:.1f}){possession_str}",
        )

    def log_decision(
        self,
        minute: int,
        side: str,
        player_label: str,
        action: str,
        success: bool,
        probability: float,
    ) -> None:
        """Log one action chosen by the decision model.

        Parameters
        ----------
        minute : int
            Decision minute.
        side : str
            Side of the acting player.
        player_label : str
            Compact identifier such as ``"#9 ST Smith"``.
        action : str
            Chosen action name.
        success : bool
            Outcome of the action.
        probability : float
            Probability the model assigned to the chosen action.
        """
        self._write_log(
            minute,
            "DECISION",
            f"Minute: {minute} | Side: {side} | {player_label} | Action: {action} | "
            f"Success: {success} | P: {probability:.3f}",
        )

    def log_match_event(self, minute: int, event_type: str, description: str) -> None:
        """Log a kickoff, an applied event, a stop request or the final score.

        Parameters
        ----------
        minute : int
            Match minute of the event.
        event_type : str
            Short label identifying the event category.
        description : str
            Human-readable summary of the event.
        """
        self._write_log(minute, "MATCH_EVENT", f"Minute: {minute} | Event: {event_type} | Details: {description}")

    def log_error(self, error_type: str, description: str) -> None:
        """Log a recoverable problem such as an unreadable roster.

        Parameters
        ----------
        error_type : str
            Label describing the error classification.
        description : str
            Human-readable explanation of the issue.
        """
        self._write_log(-1, "ERROR", f"Type: {error_type} | Details: {description}")

    def _write_log(self, minute: int, event_type: str, details: str) -> None:
        """Write a log entry to the buffer and, when open, the session file.

        Parameters
        ----------
        minute : int
            Match minute the entry belongs to (``-1`` when not tied to play).
        event_type : str
            Category label for the log entry.
        details : str
            Formatted message body to persist.
        """
        timestamp = time.strftime("%H:%M:%S")
        log_entry = f"[{timestamp}] {event_type}: {details}"

        with self._lock:
            line_no = self._line_number
            self._line_number += 1
            self._recent_events.append((line_no, log_entry))
            self.events.append(DebugEvent(minute, event_type, details))

            if self.log_file:
                self.log_file.write(f"{log_entry}\n")
                self.log_file.flush()

    def get_recent_events(self, limit: int = 20) -> List[str]:
        """Return the latest debug entries with line numbers for live displays.

        Parameters
        ----------
        limit : int
            Maximum number of entries to return.

        Returns
        -------
        List[str]
            Up to ``limit`` most recent log lines with prefixed line numbers.
        """
        with self._lock:
            selected = list(self._recent_events)[-limit:]
        return [f"{line_no:05d} {entry}" for line_no, entry in selected]

    def close(self) -> None:
        """Close the log file."""
        with self._lock:
            if self.log_file:
                self.log_file.close()
                self.log_file = None
