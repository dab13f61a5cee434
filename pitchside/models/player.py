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
"""Domain models representing football players, their attributes and condition."""
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, Tuple

ATTRIBUTE_BOUNDS: Tuple[float, float] = (40.0, 99.0)
DEFAULT_ATTRIBUTE = 50.0
CONDITION_BOUNDS: Dict[str, Tuple[float, float]] = {
    "mentality": (5.0, 15.0),
    "role_familiarity": (0.0, 100.0),
    "resilience": (0.0, 100.0),
    "urgency": (0.5, 2.0),
    "confidence": (0.0, 100.0),
    "morale": (0.0, 100.0),
    "panic": (0.0, 150.0),
    "fatigue": (0.0, 100.0),
    "injury_risk": (0.0, 100.0),
    "form": (0.0, 10.0),
}


def clamp(value: float, low: float, high: float) -> float:
    """Restrict ``value`` to the closed interval ``[low, high]``.

    Parameters
    ----------
    value : float
        Number to restrict.
    low : float
        Lower bound.
    high : float
        Upper bound.

    Returns
    -------
    float
        ``value`` clipped into range.
    """
    return max(low, min(high, value))


class Line(Enum):
    """Tactical line a role belongs to."""

    GOALKEEPER = "goalkeeper"
    DEFENDER = "defender"
    MIDFIELDER = "midfielder"
    ATTACKER = "attacker"


class Role(Enum):
    """Positional role codes used by the 11-slot squad template."""

    GK = "GK"
    RB = "RB"
    CB = "CB"
    LB = "LB"
    CM = "CM"
    CAM = "CAM"
    LW = "LW"
    ST = "ST"
    RW = "RW"

    @property
    def line(self) -> Line:
        """Return the tactical line this role plays in."""
        return _ROLE_LINES[self]


_ROLE_LINES = {
    Role.GK: Line.GOALKEEPER,
    Role.RB: Line.DEFENDER,
    Role.CB: Line.DEFENDER,
    Role.LB: Line.DEFENDER,
    Role.CM: Line.MIDFIELDER,
    Role.CAM: Line.MIDFIELDER,
    Role.LW: Line.ATTACKER,
    Role.ST: Line.ATTACKER,
    Role.RW: Line.ATTACKER,
}


class Personality(Enum):
    """Fixed temperament that skews a player's action preferences."""

    NORMAL = "NORMAL"
    SELFISH = "SELFISH"
    BIGMATCH = "BIGMATCH"
    NERVOUS = "NERVOUS"


class Posture(Enum):
    """Transient off-ball behaviour recomputed on every positioning tick."""

    NORMAL = "NORMAL"
    RUN = "RUN"
    PRESS = "PRESS"


@dataclass
class PlayerAttributes:
    """Collection of technical, physical, and mental skill ratings.

    Every rating is clamped to the 40-99 scale on construction.

    Parameters
    ----------
    passing : float
        Accuracy and weight of ground passes.
    finishing : float
        Shot placement inside the box.
    dribbling : float
        Close control when running with the ball.
    technique : float
        First touch and general ball striking.
    vision : float
        Awareness of teammates and passing lanes.
    long_shots : float
        Shooting quality from distance.
    strength : float
        Physical power in challenges.
    balance : float
        Ability to stay upright under pressure.
    agility : float
        Change of direction and reaction speed.
    composure : float
        Calmness on the ball.
    stamina : float
        Resistance to fatigue over a match.
    pace : float
        Top running speed.
    """

    # Technical
    passing: float = DEFAULT_ATTRIBUTE
    finishing: float = DEFAULT_ATTRIBUTE
    dribbling: float = DEFAULT_ATTRIBUTE
    technique: float = DEFAULT_ATTRIBUTE
    vision: float = DEFAULT_ATTRIBUTE
    long_shots: float = DEFAULT_ATTRIBUTE

    # Physical
    strength: float = DEFAULT_ATTRIBUTE
    balance: float = DEFAULT_ATTRIBUTE
    agility: float = DEFAULT_ATTRIBUTE
    stamina: float = DEFAULT_ATTRIBUTE
    pace: float = DEFAULT_ATTRIBUTE

    # Mental
    composure: float = DEFAULT_ATTRIBUTE

    def __post_init__(self) -> None:
        """Clamp every attribute into the 40-99 rating scale."""
        low, high = ATTRIBUTE_BOUNDS
        for attr in fields(self):
            setattr(self, attr.name, clamp(float(getattr(self, attr.name)), low, high))

    def get(self, name: str, default: float = DEFAULT_ATTRIBUTE) -> float:
        """Return the rating called ``name`` or ``default`` when it does not exist.

        Parameters
        ----------
        name : str
            Attribute name such as ``"passing"``.
        default : float
            Value used for unknown attribute names.

        Returns
        -------
        float
            The stored rating or the fallback.
        """
        return getattr(self, name, default)


@dataclass
class PlayerCondition:
    """Psychological and physical state that drifts during a match.

    Parameters
    ----------
    mentality : float
        Personal attacking appetite on a 5-15 dial.
    role_familiarity : float
        Comfort in the assigned role (60-100).
    resilience : float
        Ability to respond to the scoreline (50-100).
    urgency : float
        How strongly the clock drives risk taking (0.5-2.0).
    confidence : float
        Self-belief (0-100).
    pressure : float
        Felt pressure; nominally 0-30 with only a floor of zero enforced.
    morale : float
        Team spirit as felt by the player (0-100).
    panic : float
        Accumulated stress from mistakes (0-150).
    fatigue : float
        Tiredness (0-100); never decreases during a match.
    injury_risk : float
        Baseline risk of picking up a knock (0-5).
    form : float
        Recent form rating (6.0-8.0).
    """

    mentality: float = 10.0
    role_familiarity: float = 80.0
    resilience: float = 75.0
    urgency: float = 1.0
    confidence: float = 70.0
    pressure: float = 10.0
    morale: float = 70.0
    panic: float = 10.0
    fatigue: float = 0.0
    injury_risk: float = 0.0
    form: float = 7.0

    def __post_init__(self) -> None:
        """Clamp every bounded field; pressure is only floored at zero."""
        for name, (low, high) in CONDITION_BOUNDS.items():
            setattr(self, name, clamp(float(getattr(self, name)), low, high))
        self.pressure = max(0.0, float(self.pressure))

    def adjust_confidence(self, delta: float) -> None:
        """Shift confidence by ``delta`` while keeping it within 0-100.

        Parameters
        ----------
        delta : float
            Signed change to apply.
        """
        self.confidence = clamp(self.confidence + delta, 0.0, 100.0)

    def adjust_morale(self, delta: float) -> None:
        """Shift morale by ``delta`` while keeping it within 0-100.

        Parameters
        ----------
        delta : float
            Signed change to apply.
        """
        self.morale = clamp(self.morale + delta, 0.0, 100.0)

    def adjust_panic(self, delta: float) -> None:
        """Shift panic by ``delta`` while keeping it within 0-150.

        Parameters
        ----------
        delta : float
            Signed change to apply.
        """
        self.panic = clamp(self.panic + delta, 0.0, 150.0)

    def add_fatigue(self, amount: float) -> None:
        """Accumulate fatigue up to 100; negative amounts are ignored.

        Parameters
        ----------
        amount : float
            Non-negative fatigue increment.
        """
        self.fatigue = clamp(self.fatigue + max(0.0, amount), 0.0, 100.0)


@dataclass
class MatchStats:
    """Per-match counters that only the event generator mutates.

    Parameters
    ----------
    shots : int
        Shots attempted.
    passes : int
        Passes attempted.
    touches : int
        Ball touches.
    rating : float
        Running match rating (starts at 6.0, clamped to 4-10).
    xg : float
        Cumulative expected goals of the player's shots.
    goals : int
        Goals scored.
    assists : int
        Goals assisted.
    """

    shots: int = 0
    passes: int = 0
    touches: int = 0
    rating: float = 6.0
    xg: float = 0.0
    goals: int = 0
    assists: int = 0

    def adjust_rating(self, delta: float) -> None:
        """Move the match rating by ``delta`` within 4-10.

        Parameters
        ----------
        delta : float
            Signed change to apply.
        """
        self.rating = clamp(self.rating + delta, 4.0, 10.0)

    def reset(self) -> None:
        """Restore every counter to its kick-off value."""
        self.shots = 0
        self.passes = 0
        self.touches = 0
        self.rating = 6.0
        self.xg = 0.0
        self.goals = 0
        self.assists = 0


@dataclass
class Player:
    """Squad member combining identity, skills, condition and match stats.

    Parameters
    ----------
    name : str
        Display name.
    number : int
        Squad (jersey) number.
    role : Role
        Positional role fixed by the squad slot.
    base_rating : float
        Overall rating (40-99) the attributes were derived from.
    attributes : PlayerAttributes
        Skill ratings.
    condition : PlayerCondition
        Mutable psychological and physical state.
    personality : Personality
        Temperament, fixed at creation.
    stats : MatchStats, optional
        Per-match counters; fresh for every new player.
    posture : Posture, optional
        Current off-ball posture.
    """

    name: str
    number: int
    role: Role
    base_rating: float
    attributes: PlayerAttributes
    condition: PlayerCondition
    personality: Personality
    stats: MatchStats = field(default_factory=MatchStats)
    posture: Posture = Posture.NORMAL

    def __post_init__(self) -> None:
        """Clamp the base rating into the 40-99 scale."""
        self.base_rating = clamp(float(self.base_rating), *ATTRIBUTE_BOUNDS)

    @property
    def line(self) -> Line:
        """Return the tactical line of the player's role."""
        return self.role.line
