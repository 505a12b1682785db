from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import regex as re

from srcdslog.logline import models as m
from srcdslog.logline.fields import parse_int, parse_player, parse_properties
from srcdslog.logline.models import Event, PlayerRef, Timestamp


Builder = Callable[["LineShape", "re.Match", Timestamp], Event]


@dataclass(frozen=True)
class LineShape:
    name: str
    rx: "re.Pattern"
    build: Builder

    def try_build(self, body: str, ts: Timestamp) -> Optional[Event]:
        mt = self.rx.match(body)
        if not mt:
            return None
        return self.build(self, mt, ts)


def _player(shape: LineShape, mt: "re.Match", group: str) -> PlayerRef:
    return parse_player(mt.group(group), pattern=shape.name, field=group)


# -----------------
# Pattern fragments
# -----------------

# A quoted player reference: name<id><steamid><team>. Angle brackets never
# appear in names, so the group cannot run past a closed reference into the
# rest of the line. The [^"]* fallback keeps a bracket-less reference matching
# so it is reported as a malformed field.
def _ref(group: str) -> str:
    return r'"(?P<' + group + r'>[^<>]*<[^<>]*><[^<>]*><[^<>]*>|[^"]*)"'


_P = _ref("player")
_TARGET = _ref("target")

# Optional CS:GO style position after a player reference: [93 -75 64]
_POS = r"(?:\s\[[^\]]*\])?"

_PROPS = r"(?P<props>.*)"


# -----------------
# Builders
# -----------------


def _log_file_started(shape, mt, ts):
    props = parse_properties(mt.group("props"))
    return m.LogFileStarted(
        timestamp=ts,
        file=props.get("file", ""),
        game=props.get("game", ""),
        version=props.get("version", ""),
    )


def _log_file_closed(shape, mt, ts):
    return m.LogFileClosed(timestamp=ts)


def _server_cvars_start(shape, mt, ts):
    return m.ServerCvarsStart(timestamp=ts)


def _server_cvars_end(shape, mt, ts):
    return m.ServerCvarsEnd(timestamp=ts)


def _cvar(shape, mt, ts):
    return m.CvarChanged(timestamp=ts, cvar_name=mt.group("name"), new_value=mt.group("value"))


def _loading_map(shape, mt, ts):
    return m.LoadingMap(timestamp=ts, map_name=mt.group("map"))


def _started_map(shape, mt, ts):
    return m.StartedMap(timestamp=ts, map_name=mt.group("map"), crc=mt.group("crc") or "")


def _rcon(shape, mt, ts):
    return m.RconCommand(timestamp=ts, address=mt.group("address"), command=mt.group("command"))


def _rcon_rejected(shape, mt, ts):
    return m.RconRejected(timestamp=ts, address=mt.group("address"), command=mt.group("command"))


def _server_message(shape, mt, ts):
    return m.ServerMessage(timestamp=ts, text=mt.group("text"))


def _team_score(shape, mt, ts):
    return m.TeamScore(
        timestamp=ts,
        team=mt.group("team"),
        score=parse_int(mt.group("score"), pattern=shape.name, field="score"),
        players=parse_int(mt.group("players"), pattern=shape.name, field="players"),
        final=mt.group("which").lower() == "final",
    )


def _team_triggered(shape, mt, ts):
    return m.TeamTriggered(
        timestamp=ts,
        team=mt.group("team"),
        action=mt.group("action"),
        extra_fields=parse_properties(mt.group("props")),
    )


def _world_triggered(shape, mt, ts):
    return m.WorldTriggered(
        timestamp=ts,
        action=mt.group("action"),
        extra_fields=parse_properties(mt.group("props")),
    )


def _player_kicked(shape, mt, ts):
    return m.PlayerKicked(
        timestamp=ts,
        player=_player(shape, mt, "player"),
        kicked_by=mt.group("by"),
        reason=mt.group("reason") or "",
    )


def _player_connect(shape, mt, ts):
    return m.PlayerConnect(timestamp=ts, player=_player(shape, mt, "player"), address=mt.group("address"))


def _player_validated(shape, mt, ts):
    return m.PlayerValidated(timestamp=ts, player=_player(shape, mt, "player"))


def _player_entered_game(shape, mt, ts):
    return m.PlayerEnteredGame(timestamp=ts, player=_player(shape, mt, "player"))


def _player_disconnect(shape, mt, ts):
    return m.PlayerDisconnect(timestamp=ts, player=_player(shape, mt, "player"), reason=mt.group("reason"))


def _player_switched_team(shape, mt, ts):
    return m.PlayerChangedTeam(
        timestamp=ts,
        player=_player(shape, mt, "player"),
        team=mt.group("to"),
        previous_team=mt.group("from"),
    )


def _player_joined_team(shape, mt, ts):
    return m.PlayerChangedTeam(timestamp=ts, player=_player(shape, mt, "player"), team=mt.group("team"))


def _player_changed_role(shape, mt, ts):
    return m.PlayerChangedRole(timestamp=ts, player=_player(shape, mt, "player"), role=mt.group("role"))


def _player_changed_name(shape, mt, ts):
    return m.PlayerChangedName(timestamp=ts, player=_player(shape, mt, "player"), new_name=mt.group("new_name"))


def _player_say_team(shape, mt, ts):
    return m.PlayerSayTeam(
        timestamp=ts,
        player=_player(shape, mt, "player"),
        message=mt.group("message"),
        dead=bool(mt.group("dead")),
    )


def _player_say(shape, mt, ts):
    return m.PlayerSay(
        timestamp=ts,
        player=_player(shape, mt, "player"),
        message=mt.group("message"),
        dead=bool(mt.group("dead")),
    )


def _player_killed(shape, mt, ts):
    return m.PlayerKilled(
        timestamp=ts,
        killer=_player(shape, mt, "killer"),
        victim=_player(shape, mt, "victim"),
        weapon=mt.group("weapon"),
        extra_fields=parse_properties(mt.group("props")),
    )


def _player_suicide(shape, mt, ts):
    return m.PlayerSuicide(
        timestamp=ts,
        player=_player(shape, mt, "player"),
        weapon=mt.group("weapon"),
        extra_fields=parse_properties(mt.group("props")),
    )


def _player_triggered_against(shape, mt, ts):
    return m.PlayerTriggeredAgainst(
        timestamp=ts,
        player=_player(shape, mt, "player"),
        action=mt.group("action"),
        target=_player(shape, mt, "target"),
        extra_fields=parse_properties(mt.group("props")),
    )


def _player_triggered(shape, mt, ts):
    return m.PlayerTriggered(
        timestamp=ts,
        player=_player(shape, mt, "player"),
        action=mt.group("action"),
        extra_fields=parse_properties(mt.group("props")),
    )


def _shape(name: str, pattern: str, build: Builder, flags: int = 0) -> LineShape:
    return LineShape(name=name, rx=re.compile(pattern, flags), build=build)


# -----------------
# The table
# -----------------
#
# Order is priority: the first shape whose markers match wins. Shapes whose
# markers contain another shape's markers must come first (say_team before
# say, suicide before triggered, "triggered ... against" before triggered).

LINE_SHAPES: Tuple[LineShape, ...] = (
    # Server / log lifecycle
    _shape("log_file_started", r"^Log file started\b" + _PROPS + r"$", _log_file_started, re.I),
    _shape("log_file_closed", r"^Log file closed\.?\s*$", _log_file_closed, re.I),
    _shape("server_cvars_start", r"^Server cvars start\s*$", _server_cvars_start, re.I),
    _shape("server_cvars_end", r"^Server cvars end\s*$", _server_cvars_end, re.I),
    _shape("server_cvar", r'^server_cvar: "(?P<name>[^"]*)" "(?P<value>.*)"$', _cvar),
    _shape("cvar_dump", r'^"(?P<name>[^"<>]*)" = "(?P<value>.*)"$', _cvar),
    _shape("loading_map", r'^Loading map "(?P<map>[^"]*)"\s*$', _loading_map, re.I),
    _shape(
        "started_map",
        r'^Started map "(?P<map>[^"]*)"(?:\s+\(CRC "(?P<crc>[^"]*)"\))?\s*$',
        _started_map,
        re.I,
    ),
    _shape("rcon_command", r'^rcon from "(?P<address>[^"]*)": command "(?P<command>.*)"$', _rcon, re.I),
    _shape("rcon_rejected", r'^Bad Rcon: "(?P<command>.*)" from "(?P<address>[^"]*)"$', _rcon_rejected, re.I),
    _shape("server_message", r'^server_message: "(?P<text>.*)"$', _server_message),
    # Teams / world
    _shape(
        "team_score",
        r'^Team "(?P<team>[^"]*)" (?P<which>current|final) score "(?P<score>[^"]*)" with "(?P<players>[^"]*)" players$',
        _team_score,
    ),
    _shape("team_triggered", r'^Team "(?P<team>[^"]*)" triggered "(?P<action>[^"]*)"' + _PROPS + r"$", _team_triggered),
    _shape("world_triggered", r'^World triggered "(?P<action>[^"]*)"' + _PROPS + r"$", _world_triggered),
    # Players
    _shape(
        "player_kicked",
        r'^Kick: ' + _P + r' was kicked by "(?P<by>[^"]*)"(?: \(message "(?P<reason>.*)"\))?$',
        _player_kicked,
    ),
    _shape("player_connect", r"^" + _P + r' connected, address "(?P<address>[^"]*)"$', _player_connect),
    _shape("player_validated", r"^" + _P + r" STEAM USERID validated$", _player_validated),
    _shape("player_entered_game", r"^" + _P + r" entered the game$", _player_entered_game),
    _shape(
        "player_disconnect",
        r"^" + _P + r' disconnected(?: \(reason "(?P<reason>.*)"\))?$',
        _player_disconnect,
    ),
    _shape(
        "player_switched_team",
        r"^" + _P + r" switched from team <(?P<from>[^<>]*)> to <(?P<to>[^<>]*)>$",
        _player_switched_team,
    ),
    _shape("player_joined_team", r"^" + _P + r' joined team "(?P<team>[^"]*)"$', _player_joined_team),
    _shape("player_changed_role", r"^" + _P + r' changed role to "(?P<role>[^"]*)"$', _player_changed_role),
    _shape("player_changed_name", r"^" + _P + r' changed name to "(?P<new_name>.*)"$', _player_changed_name),
    _shape("player_say_team", r"^" + _P + r' say_team "(?P<message>.*)"(?P<dead> \(dead\))?$', _player_say_team),
    _shape("player_say", r"^" + _P + r' say "(?P<message>.*)"(?P<dead> \(dead\))?$', _player_say),
    _shape(
        "player_killed",
        r"^" + _ref("killer") + _POS + r" killed " + _ref("victim") + _POS + r' with "(?P<weapon>[^"]*)"' + _PROPS + r"$",
        _player_killed,
    ),
    _shape(
        "player_suicide",
        r"^" + _P + _POS + r' committed suicide with "(?P<weapon>[^"]*)"' + _PROPS + r"$",
        _player_suicide,
    ),
    _shape(
        "player_triggered_against",
        r"^" + _P + r' triggered "(?P<action>[^"]*)" against ' + _TARGET + _PROPS + r"$",
        _player_triggered_against,
    ),
    _shape("player_triggered", r"^" + _P + r' triggered "(?P<action>[^"]*)"' + _PROPS + r"$", _player_triggered),
)
