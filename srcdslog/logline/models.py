from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Dict, Optional, Tuple


@dataclass(frozen=True, order=True)
class Timestamp:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    def to_datetime(self) -> datetime:
        """Naive local server time. Raises ValueError for dates like 02/30."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return (
            f"{self.month:02d}/{self.day:02d}/{self.year:04d} - "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


@dataclass(frozen=True)
class PlayerRef:
    name: str
    user_id: int
    steam_id: str
    team: str

    @property
    def is_bot(self) -> bool:
        return self.steam_id == "BOT"

    @property
    def is_console(self) -> bool:
        return self.steam_id == "Console"


def _split_address(address: str) -> Tuple[str, Optional[int]]:
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        return address, None
    return host, int(port)


# -----------------
# Events
# -----------------


@dataclass(frozen=True)
class Event:
    kind: ClassVar[str] = "event"

    timestamp: Timestamp

    @property
    def is_unrecognized(self) -> bool:
        return False


@dataclass(frozen=True)
class LogFileStarted(Event):
    kind: ClassVar[str] = "log_file_started"

    file: str
    game: str
    version: str


@dataclass(frozen=True)
class LogFileClosed(Event):
    kind: ClassVar[str] = "log_file_closed"


@dataclass(frozen=True)
class ServerCvarsStart(Event):
    kind: ClassVar[str] = "server_cvars_start"


@dataclass(frozen=True)
class ServerCvarsEnd(Event):
    kind: ClassVar[str] = "server_cvars_end"


@dataclass(frozen=True)
class CvarChanged(Event):
    kind: ClassVar[str] = "cvar_changed"

    cvar_name: str
    new_value: str
    # srcds never logs the previous value; kept for callers that track it.
    old_value: Optional[str] = None


@dataclass(frozen=True)
class LoadingMap(Event):
    kind: ClassVar[str] = "loading_map"

    map_name: str


@dataclass(frozen=True)
class StartedMap(Event):
    kind: ClassVar[str] = "started_map"

    map_name: str
    crc: str


@dataclass(frozen=True)
class RconCommand(Event):
    kind: ClassVar[str] = "rcon_command"

    address: str
    command: str

    @property
    def host(self) -> str:
        return _split_address(self.address)[0]

    @property
    def port(self) -> Optional[int]:
        return _split_address(self.address)[1]


@dataclass(frozen=True)
class RconRejected(RconCommand):
    kind: ClassVar[str] = "rcon_rejected"


@dataclass(frozen=True)
class ServerMessage(Event):
    kind: ClassVar[str] = "server_message"

    text: str


@dataclass(frozen=True)
class PlayerConnect(Event):
    kind: ClassVar[str] = "player_connect"

    player: PlayerRef
    address: str

    @property
    def host(self) -> str:
        return _split_address(self.address)[0]

    @property
    def port(self) -> Optional[int]:
        return _split_address(self.address)[1]


@dataclass(frozen=True)
class PlayerValidated(Event):
    kind: ClassVar[str] = "player_validated"

    player: PlayerRef


@dataclass(frozen=True)
class PlayerEnteredGame(Event):
    kind: ClassVar[str] = "player_entered_game"

    player: PlayerRef


@dataclass(frozen=True)
class PlayerDisconnect(Event):
    kind: ClassVar[str] = "player_disconnect"

    player: PlayerRef
    reason: Optional[str] = None


@dataclass(frozen=True)
class PlayerKicked(Event):
    kind: ClassVar[str] = "player_kicked"

    player: PlayerRef
    kicked_by: str
    reason: str = ""


@dataclass(frozen=True)
class PlayerChangedTeam(Event):
    kind: ClassVar[str] = "player_changed_team"

    player: PlayerRef
    team: str
    previous_team: Optional[str] = None


@dataclass(frozen=True)
class PlayerChangedRole(Event):
    kind: ClassVar[str] = "player_changed_role"

    player: PlayerRef
    role: str


@dataclass(frozen=True)
class PlayerChangedName(Event):
    kind: ClassVar[str] = "player_changed_name"

    player: PlayerRef
    new_name: str


@dataclass(frozen=True)
class PlayerSay(Event):
    kind: ClassVar[str] = "player_say"

    player: PlayerRef
    message: str
    dead: bool = False


@dataclass(frozen=True)
class PlayerSayTeam(PlayerSay):
    kind: ClassVar[str] = "player_say_team"


@dataclass(frozen=True)
class PlayerKilled(Event):
    kind: ClassVar[str] = "player_killed"

    killer: PlayerRef
    victim: PlayerRef
    weapon: str
    extra_fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PlayerSuicide(Event):
    kind: ClassVar[str] = "player_suicide"

    player: PlayerRef
    weapon: str
    extra_fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PlayerTriggered(Event):
    kind: ClassVar[str] = "player_triggered"

    player: PlayerRef
    action: str
    extra_fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PlayerTriggeredAgainst(Event):
    kind: ClassVar[str] = "player_triggered_against"

    player: PlayerRef
    action: str
    target: PlayerRef
    extra_fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TeamTriggered(Event):
    kind: ClassVar[str] = "team_triggered"

    team: str
    action: str
    extra_fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TeamScore(Event):
    kind: ClassVar[str] = "team_score"

    team: str
    score: int
    players: int
    final: bool = False


@dataclass(frozen=True)
class WorldTriggered(Event):
    kind: ClassVar[str] = "world_triggered"

    action: str
    extra_fields: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Unrecognized(Event):
    """No line shape matched; the body is kept so the caller can still log it."""

    kind: ClassVar[str] = "unrecognized"

    raw_body: str

    @property
    def is_unrecognized(self) -> bool:
        return True
