import pytest

from srcdslog.errors import EmptyLine, MalformedTimestamp
from srcdslog.logline.models import Timestamp
from srcdslog.logline.prefix import split_prefix


def test_splits_timestamp_and_body():
    ts, body = split_prefix('L 02/09/2024 - 08:00:50: "A<1><BOT><>" entered the game')
    assert ts == Timestamp(year=2024, month=2, day=9, hour=8, minute=0, second=50)
    assert body == '"A<1><BOT><>" entered the game'


def test_removes_exactly_one_separator():
    _, body = split_prefix("L 01/02/2024 - 03:04:05:   spaced")
    assert body == "  spaced"


def test_trailing_newline_is_dropped():
    _, body = split_prefix("L 01/02/2024 - 03:04:05: Log file closed\r\n")
    assert body == "Log file closed"


def test_empty_body():
    ts, body = split_prefix("L 01/02/2024 - 03:04:05:")
    assert body == ""
    assert ts.second == 5


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_empty_line(line):
    with pytest.raises(EmptyLine):
        split_prefix(line)


@pytest.mark.parametrize(
    "line",
    [
        "L 13/02/2024 - 03:04:05: x",
        "L 00/02/2024 - 03:04:05: x",
        "L 01/32/2024 - 03:04:05: x",
        "L 01/02/2024 - 24:04:05: x",
        "L 01/02/2024 - 03:60:05: x",
        "L 01/02/2024 - 03:04:60: x",
    ],
)
def test_out_of_range_fields(line):
    with pytest.raises(MalformedTimestamp):
        split_prefix(line)


@pytest.mark.parametrize(
    "line",
    [
        "hello world",
        "02/09/2024 - 08:00:50: no marker",
        "L 02-09-2024 - 08:00:50: dashes",
        "L 02/09/24 - 08:00:50: short year",
        "L 02/09/2024 - 08:00: no seconds",
        "L ab/09/2024 - 08:00:50: letters",
    ],
)
def test_malformed_prefix(line):
    with pytest.raises(MalformedTimestamp):
        split_prefix(line)


def test_timestamp_helpers():
    ts, _ = split_prefix("L 02/09/2024 - 08:00:50: x")
    assert str(ts) == "02/09/2024 - 08:00:50"
    assert ts.to_datetime().isoformat() == "2024-02-09T08:00:50"
