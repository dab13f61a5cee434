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
"""Utilities that synthesise players and squads for quick simulations."""
import random
from typing import List, Optional, Tuple

from pitchside.engine.config import ENGINE_CONFIG, AttributeConfig
from pitchside.models.player import (
    Personality,
    Player,
    PlayerAttributes,
    PlayerCondition,
    Role,
    clamp,
)
from pitchside.models.team import Squad

# (role, base rating, personality) per slot
HOME_TEMPLATE: Tuple[Tuple[Role, int, Personality], ...] = (
    (Role.GK, 82, Personality.NORMAL),
    (Role.RB, 76, Personality.NORMAL),
    (Role.CB, 80, Personality.BIGMATCH),
    (Role.CB, 78, Personality.NORMAL),
    (Role.LB, 75, Personality.NORMAL),
    (Role.CM, 83, Personality.BIGMATCH),
    (Role.CAM, 85, Personality.SELFISH),
    (Role.CM, 84, Personality.BIGMATCH),
    (Role.LW, 79, Personality.NERVOUS),
    (Role.ST, 81, Personality.SELFISH),
    (Role.RW, 83, Personality.BIGMATCH),
)

AWAY_TEMPLATE: Tuple[Tuple[Role, int, Personality], ...] = (
    (Role.GK, 80, Personality.NORMAL),
    (Role.RB, 75, Personality.NORMAL),
    (Role.CB, 82, Personality.BIGMATCH),
    (Role.CB, 79, Personality.NORMAL),
    (Role.LB, 76, Personality.NORMAL),
    (Role.CM, 81, Personality.SELFISH),
    (Role.CM, 83, Personality.BIGMATCH),
    (Role.CAM, 82, Personality.NORMAL),
    (Role.LW, 84, Personality.BIGMATCH),
    (Role.ST, 80, Personality.SELFISH),
    (Role.RW, 82, Personality.NERVOUS),
)

FIRST_NAMES = ["John", "James", "David", "Michael", "Robert", "Carlos", "Juan", "Luis", "Min", "Jae"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Rodriguez", "Kim", "Park"]


def random_name(rng: random.Random) -> str:
    """Compose a simple two-part player name.

    Parameters
    ----------
    rng : random.Random
        Random source used for the pick.

    Returns
    -------
    str
        Name in ``"First Last"`` form.
    """
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"


def create_player(
    base_rating: float,
    role: Role,
    personality: Optional[Personality] = None,
    *,
    name: Optional[str] = None,
    number: int = 0,
    rng: Optional[random.Random] = None,
    config: AttributeConfig = ENGINE_CONFIG.attributes,
) -> Player:
    """Generate a player whose skills scatter around ``base_rating``.

    Parameters
    ----------
    base_rating : float
        Overall rating (40-99) every attribute is derived from.
    role : Role
        Positional role of the player's slot.
    personality : Optional[Personality]
        Temperament to apply; picked uniformly at random when ``None``.
    name : Optional[str]
        Display name; a pseudo-random name is chosen when omitted.
    number : int
        Squad number.
    rng : Optional[random.Random]
        Random source; a fresh unseeded generator is used when omitted.
    config : AttributeConfig
        Sampling ranges for attributes and condition.

    Returns
    -------
    Player
        Newly constructed player with stochastic attributes and condition.
    """
    rng = rng or random.Random()
    low, high = config.bounds

    def sample(attribute: str) -> float:
        spread = config.noise.get(attribute, 0.0)
        return clamp(base_rating + rng.uniform(-spread, spread), low, high)

    attributes = PlayerAttributes(**{attr: sample(attr) for attr in config.noise})

    condition = PlayerCondition(
        mentality=rng.randint(*config.mentality_range),
        role_familiarity=clamp(base_rating - 10, 60, 100),
        resilience=clamp(base_rating - 5, 50, 100),
        urgency=rng.uniform(*config.urgency_range),
        confidence=clamp(base_rating - 5, 50, 100),
        pressure=rng.uniform(*config.pressure_range),
        morale=clamp(base_rating - 10, 50, 100),
        panic=rng.uniform(*config.panic_range),
        fatigue=rng.uniform(*config.fatigue_range),
        injury_risk=rng.uniform(*config.injury_risk_range),
        form=rng.uniform(*config.form_range),
    )

    if personality is None:
        personality = rng.choice(list(Personality))

    return Player(
        name=name if name is not None else random_name(rng),
        number=number,
        role=role,
        base_rating=base_rating,
        attributes=attributes,
        condition=condition,
        personality=personality,
    )


def create_squad(
    side: str = "home",
    name: Optional[str] = None,
    rng: Optional[random.Random] = None,
    config: AttributeConfig = ENGINE_CONFIG.attributes,
) -> Squad:
    """Generate a full eleven bound to the fixed slot template of ``side``.

    Parameters
    ----------
    side : {"home", "away"}
        Which template to use; the home and away sides have different
        ratings and personalities.
    name : Optional[str]
        Squad name; defaults to ``"Home"`` or ``"Away"``.
    rng : Optional[random.Random]
        Random source shared by every generated player.
    config : AttributeConfig
        Sampling ranges and jersey sequence.

    Returns
    -------
    Squad
        Eleven players in slot order with squad numbers assigned by slot.
    """
    if side not in {"home", "away"}:
        raise ValueError("side must be either 'home' or 'away'")
    rng = rng or random.Random()
    template = HOME_TEMPLATE if side == "home" else AWAY_TEMPLATE

    players: List[Player] = []
    for slot, (role, rating, personality) in enumerate(template):
        players.append(
            create_player(
                rating,
                role,
                personality,
                number=config.jersey_numbers[slot],
                rng=rng,
                config=config,
            )
        )

    return Squad(name=name or side.capitalize(), side=side, players=players)
