import logging

from srcdslog.config import Settings
from srcdslog.logline import models as m
from srcdslog.stream import parse_lines

LINES = [
    'L 02/09/2024 - 08:00:00: Loading map "ctf_2fort"',
    "",
    "garbage",
    'L 02/09/2024 - 08:00:01: "Alice" say "hi"',
    "L 02/09/2024 - 08:00:02: something brand new",
    'L 02/09/2024 - 08:00:03: "Alice<2><STEAM_0:1:111><Red>" say "hi"',
]


def test_bad_lines_are_skipped():
    events = list(parse_lines(LINES))
    assert [e.kind for e in events] == ["loading_map", "unrecognized", "player_say"]


def test_bad_lines_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="srcdslog"):
        list(parse_lines(LINES))
    messages = [r.getMessage() for r in caplog.records]
    assert any("line 3" in s for s in messages)
    assert any("line 4" in s and "player_say" in s for s in messages)
    assert not any("line 2" in s for s in messages)


def test_unrecognized_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="srcdslog"):
        list(parse_lines(LINES, Settings(log_unrecognized=True)))
    assert any("something brand new" in r.getMessage() for r in caplog.records)


def test_unrecognized_quiet_by_default(caplog):
    with caplog.at_level(logging.DEBUG, logger="srcdslog"):
        list(parse_lines(LINES))
    assert not any("something brand new" in r.getMessage() for r in caplog.records)


def test_generator_input():
    events = list(parse_lines(s for s in LINES[:1]))
    assert events[0] == m.LoadingMap(timestamp=events[0].timestamp, map_name="ctf_2fort")
