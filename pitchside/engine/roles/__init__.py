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
from __future__ import annotations

from typing import Dict, Type

from pitchside.engine.config import ENGINE_CONFIG, PositioningConfig
from pitchside.models.player import Role

from .base import PlayerPosition, PositionRequest, RoleBehaviour
from .defenders import DefenderRoleBehaviour
from .forwards import ForwardRoleBehaviour
from .goalkeeper import GoalkeeperRoleBehaviour
from .midfielders import MidfielderRoleBehaviour

ROLE_BEHAVIOUR_CLASSES: Dict[Role, Type[RoleBehaviour]] = {
    Role.GK: GoalkeeperRoleBehaviour,
    Role.RB: DefenderRoleBehaviour,
    Role.CB: DefenderRoleBehaviour,
    Role.LB: DefenderRoleBehaviour,
    Role.CM: MidfielderRoleBehaviour,
    Role.CAM: MidfielderRoleBehaviour,
    Role.LW: ForwardRoleBehaviour,
    Role.ST: ForwardRoleBehaviour,
    Role.RW: ForwardRoleBehaviour,
}


def create_role_behaviour(role: Role, config: PositioningConfig = ENGINE_CONFIG.positioning) -> RoleBehaviour:
    """Instantiate the positioning behaviour for ``role``.

    Parameters
    ----------
    role : Role
        Role code of the player being positioned.
    config : PositioningConfig
        Tuning values handed to the behaviour.

    Returns
    -------
    RoleBehaviour
        Behaviour for the role's tactical line.
    """
    try:
        behaviour_cls = ROLE_BEHAVIOUR_CLASSES[role]
    except KeyError as exc:
        known_roles = ", ".join(r.value for r in ROLE_BEHAVIOUR_CLASSES)
        raise ValueError(f"Unknown role '{role}'. Known roles: {known_roles}") from exc
    return behaviour_cls(config)


__all__ = [
    "PlayerPosition",
    "PositionRequest",
    "RoleBehaviour",
    "GoalkeeperRoleBehaviour",
    "DefenderRoleBehaviour",
    "MidfielderRoleBehaviour",
    "ForwardRoleBehaviour",
    "ROLE_BEHAVIOUR_CLASSES",
    "create_role_behaviour",
]
