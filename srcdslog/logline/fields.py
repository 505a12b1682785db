from __future__ import annotations

import regex as re
from typing import Dict

from srcdslog.errors import MalformedField
from srcdslog.logline.models import PlayerRef


# Trailing property list, e.g.
#   (attacker_position "-2456 1949 -127") (victim_position "1 2 3") (headshot)
_RX_PROPERTY = re.compile(r"\((?P<key>[\w\-]+)(?:\s+\"(?P<value>[^\"]*)\")?\)")

_RX_INT = re.compile(r"-?\d+", re.ASCII)


def parse_player(text: str, *, pattern: str, field: str) -> PlayerRef:
    """Split the inside of a quoted player reference: name<id><steamid><team>.

    Angle brackets never appear in player names, so the first '<' ends the
    name and the remainder must be exactly three bracketed parts.
    """
    i = text.find("<")
    if i < 0 or not text.endswith(">"):
        raise MalformedField(pattern, field)

    parts = text[i + 1 : -1].split("><")
    if len(parts) != 3 or any("<" in p or ">" in p for p in parts):
        raise MalformedField(pattern, field)

    uid, steam_id, team = parts
    if not _RX_INT.fullmatch(uid):
        raise MalformedField(pattern, field)

    return PlayerRef(name=text[:i], user_id=int(uid), steam_id=steam_id, team=team)


def parse_properties(text: str) -> Dict[str, str]:
    """Collect (key "value") pairs; bare (flag) entries map to ""."""
    out: Dict[str, str] = {}
    for m in _RX_PROPERTY.finditer(text or ""):
        out[m.group("key")] = m.group("value") or ""
    return out


def parse_int(text: str, *, pattern: str, field: str) -> int:
    s = (text or "").strip()
    if not _RX_INT.fullmatch(s):
        raise MalformedField(pattern, field)
    return int(s)
