from __future__ import annotations

import regex as re
from typing import Tuple

from srcdslog.errors import EmptyLine, MalformedTimestamp
from srcdslog.logline.models import Timestamp


# Every srcds log line starts with:
#   L 02/09/2024 - 08:00:50: <body>
# - "L " opens the prefix
# - the ":" right after the time of day closes it
# - exactly one space separates the prefix from the body
# The date and time parts are captured loosely and validated afterwards so a
# bad value is reported as a malformed timestamp instead of a missing prefix.
_RX_PREFIX = re.compile(
    r"""
    ^L[ ]
    (?P<date>[^ ]+)
    [ ]-[ ]
    (?P<time>[^ ]+?)
    :(?:[ ]|$)
    """,
    re.VERBOSE,
)

_RX_DATE = re.compile(r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{4})", re.ASCII)
_RX_TIME = re.compile(r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})", re.ASCII)

_RANGES = (
    ("month", 1, 12),
    ("day", 1, 31),
    ("hour", 0, 23),
    ("minute", 0, 59),
    ("second", 0, 59),
)


def parse_timestamp(date_s: str, time_s: str) -> Timestamp:
    md = _RX_DATE.fullmatch(date_s)
    if not md:
        raise MalformedTimestamp(f"bad date {date_s!r}")
    mt = _RX_TIME.fullmatch(time_s)
    if not mt:
        raise MalformedTimestamp(f"bad time {time_s!r}")

    values = {k: int(v) for k, v in {**md.groupdict(), **mt.groupdict()}.items()}
    for name, lo, hi in _RANGES:
        if not lo <= values[name] <= hi:
            raise MalformedTimestamp(f"{name} {values[name]} out of range {lo}-{hi}")

    return Timestamp(**values)


def split_prefix(line: str) -> Tuple[Timestamp, str]:
    """Split a raw log line into its timestamp and the event body."""
    if not line or not line.strip():
        raise EmptyLine()

    s = line.lstrip().rstrip("\r\n")
    m = _RX_PREFIX.match(s)
    if not m:
        raise MalformedTimestamp(f"no 'L <date> - <time>:' prefix in {s[:32]!r}")

    ts = parse_timestamp(m.group("date"), m.group("time"))
    return ts, s[m.end():]
