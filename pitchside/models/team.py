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
"""Squad and formation domain models."""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from pitchside.models.player import Line, Player

SQUAD_SIZE = 11
DEFAULT_FORMATION = "4-4-2"

# Tactical line expected in each squad slot; every formation template uses this order.
SLOT_LINES: Tuple[Line, ...] = (
    (Line.GOALKEEPER,)
    + (Line.DEFENDER,) * 4
    + (Line.MIDFIELDER,) * 3
    + (Line.ATTACKER,) * 3
)


@dataclass(frozen=True)
class Formation:
    """Named layout of the eleven base positions that define a team's shape.

    Coordinates live in the normalised 0-100 pitch space of the home side
    (``x`` across the pitch, own goal near ``y=100``).

    Parameters
    ----------
    name : str
        Human-readable name of the formation (for example ``"4-4-2"``).
    slots : Tuple[Tuple[float, float], ...]
        Base ``(x, y)`` position for each squad slot, goalkeeper first.
    """

    name: str
    slots: Tuple[Tuple[float, float], ...]

    def __post_init__(self) -> None:
        """Ensure the formation places exactly eleven players."""
        if len(self.slots) != SQUAD_SIZE:
            raise ValueError(f"Formation must have exactly {SQUAD_SIZE} slots")


FORMATIONS: Dict[str, Formation] = {
    formation.name: formation
    for formation in (
        Formation(
            "4-4-2",
            ((50, 92), (80, 76), (60, 70), (40, 70), (20, 76), (80, 52), (60, 47), (40, 47), (20, 52), (38, 27), (62, 27)),
        ),
        Formation(
            "4-3-3",
            ((50, 92), (80, 76), (60, 70), (40, 70), (20, 76), (65, 51), (50, 45), (35, 51), (20, 25), (50, 19), (80, 25)),
        ),
        Formation(
            "4-2-3-1",
            ((50, 92), (80, 76), (60, 70), (40, 70), (20, 76), (65, 59), (35, 59), (78, 42), (50, 37), (22, 42), (50, 22)),
        ),
        Formation(
            "3-5-2",
            ((50, 92), (65, 73), (50, 68), (35, 73), (83, 55), (63, 47), (50, 42), (37, 47), (17, 55), (38, 25), (62, 25)),
        ),
        Formation(
            "5-3-2",
            ((50, 92), (87, 70), (68, 76), (50, 79), (32, 76), (13, 70), (65, 51), (50, 45), (35, 51), (38, 25), (62, 25)),
        ),
        Formation(
            "3-4-3",
            ((50, 92), (65, 76), (50, 70), (35, 76), (80, 53), (60, 47), (40, 47), (20, 53), (20, 25), (50, 19), (80, 25)),
        ),
    )
}


def get_formation(formation_id: str) -> Formation:
    """Look up a formation, falling back to the default for unknown ids.

    Parameters
    ----------
    formation_id : str
        Registry key such as ``"4-3-3"``.

    Returns
    -------
    Formation
        The requested template, or ``4-4-2`` when the id is unknown.
    """
    return FORMATIONS.get(formation_id, FORMATIONS[DEFAULT_FORMATION])


def get_positions(formation_id: str) -> List[Tuple[float, float]]:
    """Return the eleven template coordinates for ``formation_id``.

    Parameters
    ----------
    formation_id : str
        Registry key; unknown ids resolve to ``4-4-2``.

    Returns
    -------
    List[Tuple[float, float]]
        Copy of the base ``(x, y)`` slots in squad order.
    """
    return list(get_formation(formation_id).slots)


@dataclass
class Squad:
    """Eleven players of one side in fixed slot order.

    Parameters
    ----------
    name : str
        Display name for the side.
    side : str
        ``"home"`` or ``"away"``.
    players : List[Player]
        Starting eleven in slot order: a goalkeeper, four defenders, three
        midfielders and three attackers.
    """

    name: str
    side: str
    players: List[Player]

    def __post_init__(self) -> None:
        """Validate the side label, the squad size and the line of every slot."""
        if self.side not in {"home", "away"}:
            raise ValueError("side must be either 'home' or 'away'")
        if len(self.players) != SQUAD_SIZE:
            raise ValueError(f"Squad must have exactly {SQUAD_SIZE} players")
        for slot, (player, line) in enumerate(zip(self.players, SLOT_LINES)):
            if player.line is not line:
                raise ValueError(
                    f"Slot {slot} needs a {line.value} but {player.name} plays {player.role.value}"
                )

    def __len__(self) -> int:
        """Return the number of players in the squad (always eleven).

        Returns
        -------
        int
            Squad size.
        """
        return len(self.players)

    @property
    def goalkeeper(self) -> Player:
        """Return the player in slot 0."""
        return self.players[0]

    def players_in_line(self, line: Line) -> List[Player]:
        """Get all players whose role belongs to ``line``.

        Parameters
        ----------
        line : Line
            Tactical line to filter by.

        Returns
        -------
        List[Player]
            Matching players in slot order.
        """
        return [p for p in self.players if p.line == line]

    def slot_of(self, player: Player) -> int:
        """Return the slot index of ``player`` or ``-1`` if they are not in the squad.

        Parameters
        ----------
        player : Player
            Player to locate (compared by identity).

        Returns
        -------
        int
            Zero-based slot index.
        """
        for index, candidate in enumerate(self.players):
            if candidate is player:
                return index
        return -1
