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
"""Utilities for constructing squads from serialized roster data.

The helpers translate plain dictionaries or JSON payloads into the domain
objects the match engine understands, so an external squad source can stand
in for the synthetic squads from :mod:`pitchside.utils.generator`. Missing
skill ratings default to 50 and missing condition fields fall back to the
model defaults, keeping incomplete datasets usable.
"""
import json
from dataclasses import fields
from pathlib import Path
from typing import Tuple

from pitchside.models.player import Personality, Player, PlayerAttributes, PlayerCondition, Role
from pitchside.models.team import Squad


def player_from_dict(d: dict) -> Player:
    """Build a ``Player`` from a plain dictionary payload.

    Parameters
    ----------
    d
        A mapping containing the serialized player information. Supported keys
        include ``name``, ``number``, ``role`` (or legacy ``position``),
        ``rating``, ``personality``, an ``attributes`` mapping of skill ratings
        and an optional ``condition`` mapping.

    Returns
    -------
    Player
        A fully initialised player instance with sane defaults for any missing
        values.

    Raises
    ------
    ValueError
        Raised when the role or personality code is not recognised.

    """
    attrs = d.get("attributes", {}) or {}
    known = {f.name for f in fields(PlayerAttributes)}
    pa = PlayerAttributes(**{name: attrs.get(name, 50) for name in known})

    cond = d.get("condition", {}) or {}
    condition_names = {f.name for f in fields(PlayerCondition)}
    pc = PlayerCondition(**{k: v for k, v in cond.items() if k in condition_names})

    role_value = d.get("role") or d.get("position", "CM")
    try:
        role = Role(str(role_value).upper())
    except ValueError as exc:
        known_roles = ", ".join(r.value for r in Role)
        raise ValueError(f"Unknown role '{role_value}'. Known roles: {known_roles}") from exc

    personality_value = str(d.get("personality", "NORMAL")).upper()
    try:
        personality = Personality(personality_value)
    except ValueError as exc:
        raise ValueError(f"Unknown personality '{personality_value}'") from exc

    return Player(
        name=d.get("name", f"player_{d.get('number', 0)}"),
        number=d.get("number", 0),
        role=role,
        base_rating=d.get("rating", 70),
        attributes=pa,
        condition=pc,
        personality=personality,
    )


def load_squads_from_json(path: str) -> Tuple[Squad, Squad]:
    """Load home and away squads from a roster JSON document.

    The document holds ``home`` and ``away`` sections, each with a ``name``
    and a ``players`` list of exactly eleven entries in slot order.

    Parameters
    ----------
    path
        The filesystem path to the JSON document.

    Returns
    -------
    tuple[Squad, Squad]
        A pair of ``Squad`` objects in ``(home, away)`` order.

    Raises
    ------
    FileNotFoundError
        Raised when ``path`` does not exist.
    KeyError
        Raised when the JSON payload is missing required top-level sections.
    ValueError
        Raised when a section does not list exactly eleven valid players.

    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Roster JSON not found: {path}")

    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    def build_squad(section: str) -> Squad:
        sdata = data[section]
        players = [player_from_dict(pl) for pl in sdata.get("players", [])]
        return Squad(name=sdata.get("name", section.capitalize()), side=section, players=players)

    return build_squad("home"), build_squad("away")
