from __future__ import annotations

from srcdslog.logline.classify import classify
from srcdslog.logline.models import Event
from srcdslog.logline.prefix import split_prefix


def parse(line: str) -> Event:
    """Parse one srcds log line.

    Raises EmptyLine, MalformedTimestamp or MalformedField (all ParseError).
    Unknown line shapes are returned as Unrecognized, not raised.
    """
    ts, body = split_prefix(line)
    return classify(body, ts)
