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
"""Turn a sequence of player decisions into the full event timeline of a match.

The generator runs before playback. It walks an irregular list of decision
minutes, asks one player of the side in possession to act, and resolves the
chosen action into a :class:`~pitchside.engine.events.MatchEvent`. Shot, xG
and pass counters plus the heat and pass maps are written to the match state
as the timeline is built; scores are left to the playback loop.
"""
from __future__ import annotations

import random
from typing import List, Optional, Tuple

from pitchside.engine.config import ENGINE_CONFIG, EngineConfig
from pitchside.engine.decision import (
    ActionType,
    Decision,
    DecisionContext,
    Environment,
    OpponentProfile,
    decide,
)
from pitchside.engine.events import EventType, HeatSample, MatchEvent, PassEdge
from pitchside.engine.momentum import side_momentum, update_momentum
from pitchside.engine.state import MatchState
from pitchside.engine.xg import estimate_shot_quality
from pitchside.models.player import Line, Player
from pitchside.models.team import Squad
from pitchside.utils.debug import MatchDebugger

Zone = Tuple[int, int, int, int]


def team_mentality(press_setting: float, tempo_setting: float) -> float:
    """Convert the pressing and tempo dials into a team mentality value.

    Parameters
    ----------
    press_setting : float
        Pressing dial (0-10).
    tempo_setting : float
        Tempo dial (0-10).

    Returns
    -------
    float
        Mentality on the same 5-15ish scale as the player dial.
    """
    return 5 + press_setting * 0.5 + tempo_setting * 0.3


def decision_minutes(rng: random.Random, config: EngineConfig = ENGINE_CONFIG) -> List[int]:
    """Sample the irregular minutes at which a decision is resolved.

    Parameters
    ----------
    rng : random.Random
        Random source for the gaps.
    config : EngineConfig
        Supplies the first and final minute and the gap range.

    Returns
    -------
    List[int]
        Non-decreasing minutes ending with the final checkpoint.
    """
    events_cfg = config.events
    minutes: List[int] = []
    minute = float(events_cfg.first_minute)
    while minute <= events_cfg.final_minute:
        minutes.append(int(round(minute)))
        minute += rng.uniform(*events_cfg.gap_range)
    if minutes[-1] < events_cfg.final_minute:
        minutes.append(events_cfg.final_minute)
    return minutes


def _sample(zone: Zone, rng: random.Random) -> Tuple[float, float]:
    """Draw an integer location inside ``zone``.

    Parameters
    ----------
    zone : Zone
        ``(x_min, x_max, y_min, y_max)`` bounds, inclusive.
    rng : random.Random
        Random source.

    Returns
    -------
    Tuple[float, float]
        Sampled ``(x, y)``.
    """
    x_min, x_max, y_min, y_max = zone
    return float(rng.randint(x_min, x_max)), float(rng.randint(y_min, y_max))


class EventGenerator:
    """Builds the event timeline for one match.

    Parameters
    ----------
    state : MatchState
        Session object whose counters and logs are filled in.
    press_setting : float
        Pressing dial (0-10).
    tempo_setting : float
        Tempo dial (0-10).
    rng : random.Random
        Random source for every draw.
    config : EngineConfig
        Engine tuning values.
    debugger : Optional[MatchDebugger]
        Receives one decision entry per minute when provided.
    """

    def __init__(
        self,
        state: MatchState,
        press_setting: float,
        tempo_setting: float,
        rng: random.Random,
        config: EngineConfig = ENGINE_CONFIG,
        debugger: Optional[MatchDebugger] = None,
    ) -> None:
        """Prepare the synthetic opponent and environment profiles.

        Parameters
        ----------
        state : MatchState
            Session object to fill in.
        press_setting : float
            Pressing dial (0-10).
        tempo_setting : float
            Tempo dial (0-10).
        rng : random.Random
            Random source for every draw.
        config : EngineConfig
            Engine tuning values.
        debugger : Optional[MatchDebugger]
            Optional telemetry sink.
        """
        self.state = state
        self.rng = rng
        self.config = config
        self.debugger = debugger
        self.mentality = team_mentality(press_setting, tempo_setting)

        cfg = config.events
        self.opponent = OpponentProfile(
            pressing=cfg.opponent_pressing_base + rng.randint(*cfg.opponent_pressing_spread),
            tactic_counter=rng.randint(*cfg.opponent_counter_range),
        )
        self.environment = Environment(
            crowd=cfg.crowd,
            weather=rng.randint(*cfg.weather_range),
            pitch=rng.randint(*cfg.pitch_range),
        )

        self.home_possession = True
        # Simulated running values; the playback loop reaches the same numbers.
        self.goal_diff = 0
        self.momentum = state.momentum

    def generate(self) -> List[MatchEvent]:
        """Resolve every decision minute into an event.

        Returns
        -------
        List[MatchEvent]
            Events in non-decreasing minute order.
        """
        minutes = decision_minutes(self.rng, self.config)
        self.home_possession = self.rng.random() < self.config.events.home_kickoff_probability

        events: List[MatchEvent] = []
        for minute in minutes:
            event = self._resolve_minute(minute)
            self.state.heat_map.append(
                HeatSample(event.ball[0], event.ball[1], "home" if self.home_possession else "away")
            )
            events.append(event)

            self.momentum = update_momentum(self.momentum, event.event_type, event.success, self.config.momentum)
            if event.event_type is EventType.GOAL_FOR:
                self.goal_diff += 1
            elif event.event_type is EventType.GOAL_AGAINST:
                self.goal_diff -= 1
        return events

    def _resolve_minute(self, minute: int) -> MatchEvent:
        """Pick an actor, run the decision model and resolve its action.

        Parameters
        ----------
        minute : int
            Decision minute being resolved.

        Returns
        -------
        MatchEvent
            The event produced by this minute.
        """
        side = "home" if self.home_possession else "away"
        squad = self.state.squad(side)
        actor = self.rng.choice(self._attacking_pool(squad))

        context = DecisionContext(
            minute=minute,
            goal_diff=self.goal_diff if side == "home" else -self.goal_diff,
            big_match=True,
            momentum=side_momentum(self.momentum, side),
        )
        decision = decide(
            actor,
            self.mentality,
            self.opponent,
            context,
            self.environment,
            self.rng,
            self.config.decision,
        )
        if self.debugger is not None:
            self.debugger.log_decision(
                minute,
                side,
                f"#{actor.number} {actor.role.value} {actor.name}",
                decision.action.value,
                decision.success,
                decision.probability,
            )

        action = decision.action
        if action in (ActionType.SHOOT, ActionType.LONGSHOT):
            return self._resolve_shot(minute, squad, actor, decision)
        if action in (ActionType.PASS, ActionType.THROUGH):
            return self._resolve_pass(minute, squad, actor, decision)
        if action is ActionType.DRIBBLE:
            return self._resolve_dribble(minute, squad, actor, decision)
        return self._resolve_retention(minute, squad, actor, decision)

    @staticmethod
    def _attacking_pool(squad: Squad) -> List[Player]:
        """Return the attackers and midfielders eligible to act.

        Parameters
        ----------
        squad : Squad
            Squad in possession.

        Returns
        -------
        List[Player]
            Attackers followed by midfielders; all outfield players when a
            roster has neither.
        """
        pool = squad.players_in_line(Line.ATTACKER) + squad.players_in_line(Line.MIDFIELDER)
        if not pool:
            pool = [p for p in squad.players if p.line is not Line.GOALKEEPER] or list(squad.players)
        return pool

    def _event(
        self,
        minute: int,
        event_type: EventType,
        description: str,
        ball: Tuple[float, float],
        actor: Player,
        side: str,
        action: ActionType,
        success: bool,
        origin: Optional[Tuple[float, float]] = None,
    ) -> MatchEvent:
        """Freeze the current possession into a new event.

        Parameters
        ----------
        minute : int
            Minute of the event.
        event_type : EventType
            Category of the event.
        description : str
            Commentary line.
        ball : Tuple[float, float]
            Resolved ball location.
        actor : Player
            Acting player.
        side : str
            Side of the acting player.
        action : ActionType
            Underlying action.
        success : bool
            Whether the action came off.
        origin : Optional[Tuple[float, float]]
            Starting ball location for travelling actions.

        Returns
        -------
        MatchEvent
            Immutable event record.
        """
        return MatchEvent(
            minute=minute,
            event_type=event_type,
            description=description,
            ball=ball,
            origin=origin,
            action=action.value,
            success=success,
            home_possession=self.home_possession,
            side=side,
            player_name=actor.name,
        )

    def _resolve_shot(self, minute: int, squad: Squad, actor: Player, decision: Decision) -> MatchEvent:
        """Resolve a shot or long-range effort.

        Parameters
        ----------
        minute : int
            Decision minute.
        squad : Squad
            Shooting squad.
        actor : Player
            Shooter.
        decision : Decision
            Output of the decision model.

        Returns
        -------
        MatchEvent
            Goal, missed-shot or save event.
        """
        cfg = self.config.events
        state = self.state
        home = squad.side == "home"
        zone = cfg.home_shot_zone if home else cfg.away_shot_zone
        ball = _sample(zone, self.rng)
        xg = estimate_shot_quality(ball[0], ball[1], away_side=not home)

        if home:
            state.home_xg += xg
            state.home_shots += 1
        else:
            state.away_xg += xg
            state.away_shots += 1
        actor.stats.shots += 1
        actor.stats.touches += 1
        actor.stats.xg += xg

        bias = side_momentum(self.momentum, squad.side)
        scored = self.rng.random() < xg * (1 + bias * cfg.momentum_goal_factor)
        keeper = state.home.goalkeeper

        if home and scored:
            midfielders = [p for p in squad.players_in_line(Line.MIDFIELDER) if p is not actor]
            assist = self.rng.choice(midfielders) if midfielders else None
            if assist is not None:
                assist.stats.assists += 1
            actor.stats.goals += 1
            actor.stats.adjust_rating(cfg.goal_rating_bonus)
            self.home_possession = True
            credit = f" (assist: {assist.name})" if assist is not None else ""
            return self._event(
                minute,
                EventType.GOAL_FOR,
                f"GOAL! {actor.name} scores{credit}",
                ball,
                actor,
                squad.side,
                ActionType.SHOOT,
                True,
                origin=_sample(cfg.home_goal_origin, self.rng),
            )

        if home:
            kind = "long-range effort" if decision.action is ActionType.LONGSHOT else "shot"
            outcome = "saved by the keeper" if self.rng.random() < 0.5 else "off target"
            origin = _sample(cfg.home_shot_origin, self.rng)
            self.home_possession = self.rng.random() < cfg.home_retain_after_miss
            return self._event(
                minute,
                EventType.SHOT,
                f"{actor.name} {kind}: {outcome}",
                ball,
                actor,
                squad.side,
                decision.action,
                False,
                origin=origin,
            )

        if scored:
            actor.stats.goals += 1
            actor.stats.adjust_rating(cfg.goal_rating_bonus)
            keeper.stats.adjust_rating(-cfg.keeper_rating_swing)
            self.home_possession = False
            return self._event(
                minute,
                EventType.GOAL_AGAINST,
                f"{actor.name} scores for {squad.name}",
                ball,
                actor,
                squad.side,
                ActionType.SHOOT,
                True,
                origin=_sample(cfg.away_goal_origin, self.rng),
            )

        keeper.stats.adjust_rating(cfg.keeper_rating_swing)
        origin = _sample(cfg.away_shot_origin, self.rng)
        self.home_possession = self.rng.random() < cfg.home_regain_after_save
        return self._event(
            minute,
            EventType.SAVE,
            f"{actor.name} shoots, saved by {keeper.name}",
            ball,
            actor,
            squad.side,
            decision.action,
            False,
            origin=origin,
        )

    def _resolve_pass(self, minute: int, squad: Squad, actor: Player, decision: Decision) -> MatchEvent:
        """Resolve a pass or through ball.

        Parameters
        ----------
        minute : int
            Decision minute.
        squad : Squad
            Passing squad.
        actor : Player
            Passer.
        decision : Decision
            Output of the decision model.

        Returns
        -------
        MatchEvent
            ``pass`` event for the home side, ``danger`` for the away side.
        """
        cfg = self.config.events
        home = squad.side == "home"
        success = decision.success

        pool = self._attacking_pool(squad) if home else squad.players_in_line(Line.ATTACKER)
        targets = [p for p in pool if p is not actor] or [p for p in squad.players if p is not actor]
        target = self.rng.choice(targets)

        actor.stats.passes += 1
        actor.stats.touches += 1
        if home:
            target.stats.touches += 1
            self.state.home_passes += 1
        else:
            self.state.away_passes += 1
        self.state.pass_map.append(PassEdge(squad.slot_of(actor), squad.slot_of(target), squad.side))

        if home:
            origin = _sample(cfg.home_pass_origin, self.rng)
            ball = _sample(cfg.home_pass_target, self.rng)
            kind = "through ball" if decision.action is ActionType.THROUGH else "pass"
            description = f"{actor.name} {kind} to {target.name}" + ("" if success else " (intercepted)")
            event_type = EventType.PASS
            if success:
                actor.stats.adjust_rating(cfg.pass_rating_gain)
            else:
                actor.stats.adjust_rating(-cfg.pass_rating_loss)
            self.home_possession = success
        else:
            origin = None
            ball = _sample(cfg.away_pass_zone, self.rng)
            outcome = "into a dangerous area" if success else "cut out"
            description = f"{actor.name} to {target.name}, {outcome}"
            event_type = EventType.DANGER
            self.home_possession = not success

        return self._event(
            minute, event_type, description, ball, actor, squad.side, decision.action, success, origin=origin
        )

    def _resolve_dribble(self, minute: int, squad: Squad, actor: Player, decision: Decision) -> MatchEvent:
        """Resolve a one-on-one dribble.

        Parameters
        ----------
        minute : int
            Decision minute.
        squad : Squad
            Dribbling squad.
        actor : Player
            Dribbler.
        decision : Decision
            Output of the decision model.

        Returns
        -------
        MatchEvent
            ``press`` event for the home side, ``foul`` for the away side.
        """
        cfg = self.config.events
        success = decision.success
        actor.stats.touches += 1
        if squad.side == "home":
            ball = _sample(cfg.home_dribble_zone, self.rng)
            outcome = "gets past the defender" if success else "is stopped"
            self.home_possession = success
            return self._event(
                minute, EventType.PRESS, f"{actor.name} dribbles and {outcome}", ball, actor, "home",
                decision.action, success,
            )

        ball = _sample(cfg.away_dribble_zone, self.rng)
        outcome = "wins a foul" if success else "is dispossessed"
        self.home_possession = not success
        return self._event(
            minute, EventType.FOUL, f"{actor.name} dribbles and {outcome}", ball, actor, "away",
            decision.action, success,
        )

    def _resolve_retention(self, minute: int, squad: Squad, actor: Player, decision: Decision) -> MatchEvent:
        """Resolve the low-risk actions (RUN, HOLD, PRESS).

        Parameters
        ----------
        minute : int
            Decision minute.
        squad : Squad
            Squad in possession.
        actor : Player
            Acting player.
        decision : Decision
            Output of the decision model.

        Returns
        -------
        MatchEvent
            Neutral possession event recorded as a successful ``pass``.
        """
        cfg = self.config.events
        if squad.side == "away":
            self.home_possession = self.rng.random() < cfg.away_lose_after_hold
            ball = _sample(cfg.away_hold_zone, self.rng)
            return self._event(
                minute, EventType.PASS, f"{actor.name} keeps possession", ball, actor, "away",
                decision.action, True,
            )

        actor.stats.touches += 1
        if decision.action is ActionType.RUN:
            ball = _sample(cfg.home_run_zone, self.rng)
            description = f"{actor.name} makes an off-the-ball run"
            self.home_possession = self.rng.random() < cfg.home_retain_after_run
        else:
            ball = _sample(cfg.home_hold_zone, self.rng)
            description = f"{actor.name} holds the ball up"
            self.home_possession = decision.success or self.rng.random() < cfg.home_retain_after_hold
        return self._event(
            minute, EventType.PASS, description, ball, actor, "home", decision.action, True,
        )


def generate_events(
    state: MatchState,
    press_setting: float,
    tempo_setting: float,
    rng: random.Random,
    config: EngineConfig = ENGINE_CONFIG,
    debugger: Optional[MatchDebugger] = None,
) -> List[MatchEvent]:
    """Build the complete, ordered event list for one match.

    Parameters
    ----------
    state : MatchState
        Fresh session object; its shot, xG and pass counters and its heat
        and pass maps are filled in.
    press_setting : float
        Pressing dial (0-10).
    tempo_setting : float
        Tempo dial (0-10).
    rng : random.Random
        Random source for every draw.
    config : EngineConfig
        Engine tuning values.
    debugger : Optional[MatchDebugger]
        Receives the decision trace when provided.

    Returns
    -------
    List[MatchEvent]
        Events covering minutes ``1`` to ``89`` in non-decreasing order.
    """
    return EventGenerator(state, press_setting, tempo_setting, rng, config, debugger).generate()
