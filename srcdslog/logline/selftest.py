from __future__ import annotations

import logging
from typing import List, Optional

from srcdslog.errors import ParseError
from srcdslog.logline.classify import match_shape
from srcdslog.logline.parser import parse
from srcdslog.logline.prefix import split_prefix

logger = logging.getLogger("srcdslog")


DEFAULT_SELFTEST_LINES: List[str] = [
    'L 02/09/2024 - 08:00:00: Log file started (file "logs/L0209000.log") (game "/srv/tf2/tf") (version "8622567")',
    "L 02/09/2024 - 08:00:00: Server cvars start",
    'L 02/09/2024 - 08:00:00: "mp_timelimit" = "30"',
    "L 02/09/2024 - 08:00:00: Server cvars end",
    'L 02/09/2024 - 08:00:01: server_cvar: "sv_cheats" "0"',
    'L 02/09/2024 - 08:00:01: Loading map "ctf_2fort"',
    'L 02/09/2024 - 08:00:02: Started map "ctf_2fort" (CRC "a1b2c3d4")',
    'L 02/09/2024 - 08:00:03: rcon from "192.168.0.2:51234": command "status"',
    'L 02/09/2024 - 08:00:03: Bad Rcon: "rcon 1234 "hunter2" status" from "192.168.0.9:50000"',
    'L 02/09/2024 - 08:00:04: server_message: "quit"',
    'L 02/09/2024 - 08:00:50: "TheirUsername<6><[U:1:1324124512]><>" connected, address "192.168.0.1:27005"',
    'L 02/09/2024 - 08:00:51: "TheirUsername<6><[U:1:1324124512]><>" STEAM USERID validated',
    'L 02/09/2024 - 08:00:52: "TheirUsername<6><[U:1:1324124512]><>" entered the game',
    'L 02/09/2024 - 08:00:53: "TheirUsername<6><[U:1:1324124512]><Unassigned>" joined team "Red"',
    'L 02/09/2024 - 08:00:53: "Anna<7><STEAM_1:0:4242><>" switched from team <Unassigned> to <CT>',
    'L 02/09/2024 - 08:00:54: "TheirUsername<6><[U:1:1324124512]><Red>" changed role to "scout"',
    'L 02/09/2024 - 08:00:55: "TheirUsername<6><[U:1:1324124512]><Red>" changed name to "Renamed"',
    'L 02/09/2024 - 08:01:00: "TheirUsername<6><[U:1:1324124512]><Red>" say "gg"',
    'L 02/09/2024 - 08:01:01: "TheirUsername<6><[U:1:1324124512]><Red>" say_team "push left"',
    'L 02/09/2024 - 08:01:02: "Alice<2><STEAM_0:1:111><Red>" killed "Bob<3><STEAM_0:0:222><Blue>" with "scattergun" (attacker_position "1 2 3")',
    'L 02/09/2024 - 08:01:03: "Bob<3><STEAM_0:0:222><Blue>" committed suicide with "world"',
    'L 02/09/2024 - 08:01:04: "Alice<2><STEAM_0:1:111><Red>" triggered "domination" against "Bob<3><STEAM_0:0:222><Blue>"',
    'L 02/09/2024 - 08:01:05: "Alice<2><STEAM_0:1:111><Red>" triggered "flagevent" (event "picked up")',
    'L 02/09/2024 - 08:01:06: Team "Red" triggered "pointcaptured" (cp "0") (cpname "#Gravelpit_cap_A")',
    'L 02/09/2024 - 08:01:07: Team "Red" final score "3" with "12" players',
    'L 02/09/2024 - 08:01:08: World triggered "Round_Win" (winner "Red")',
    'L 02/09/2024 - 08:01:09: Kick: "Bob<3><STEAM_0:0:222><Blue>" was kicked by "Console" (message "afk")',
    'L 02/09/2024 - 08:01:10: "Bob<3><STEAM_0:0:222><Blue>" disconnected (reason "Disconnect by user.")',
    "L 02/09/2024 - 08:02:00: Log file closed",
]


def run_parser_selftest(lines: Optional[List[str]] = None) -> None:
    """Smoke-test the line shape table so a broken pattern fails at startup."""
    test_lines = lines or DEFAULT_SELFTEST_LINES
    covered = set()
    for s in test_lines:
        try:
            ev = parse(s)
        except ParseError as e:
            raise RuntimeError(f"Parser self-test: {s!r} failed: {e}") from e
        if ev.is_unrecognized:
            raise RuntimeError(f"Parser self-test: no line shape matched {s!r}")
        shape = match_shape(split_prefix(s)[1])
        if shape is not None:
            covered.add(shape.name)

    logger.info("Parser self-test passed (%d lines, %d shapes).", len(test_lines), len(covered))
