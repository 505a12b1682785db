import pytest

from srcdslog.errors import MalformedField
from srcdslog.logline import models as m
from srcdslog.logline.classify import classify, match_shape
from srcdslog.logline.models import Timestamp
from srcdslog.logline.selftest import DEFAULT_SELFTEST_LINES
from srcdslog.logline.prefix import split_prefix
from srcdslog.logline.shapes import LINE_SHAPES

TS = Timestamp(year=2024, month=1, day=2, hour=3, minute=4, second=5)

# The name contains a quoted 'triggered "x' so the body also fits the
# generic triggered shape.
SUICIDE_AND_TRIGGERED = '"Bob" triggered "x<3><STEAM_0:0:9><Blue>" committed suicide with "world"'


def _shape(name):
    return next(s for s in LINE_SHAPES if s.name == name)


def test_shape_names_are_unique():
    names = [s.name for s in LINE_SHAPES]
    assert len(names) == len(set(names))


def test_every_shape_has_a_sample_line():
    covered = {match_shape(split_prefix(s)[1]).name for s in DEFAULT_SELFTEST_LINES}
    assert covered == {s.name for s in LINE_SHAPES}


def test_suicide_wins_over_triggered():
    assert _shape("player_triggered").rx.match(SUICIDE_AND_TRIGGERED)
    assert _shape("player_suicide").rx.match(SUICIDE_AND_TRIGGERED)

    ev = classify(SUICIDE_AND_TRIGGERED, TS)
    assert isinstance(ev, m.PlayerSuicide)
    assert ev.weapon == "world"
    assert ev.player.name == 'Bob" triggered "x'
    assert ev.player.user_id == 3


def test_order_is_what_decides():
    swapped = [_shape("player_triggered"), _shape("player_suicide")]
    with pytest.raises(MalformedField) as ei:
        classify(SUICIDE_AND_TRIGGERED, TS, shapes=swapped)
    assert ei.value.pattern == "player_triggered"


def test_triggered_against_precedes_triggered():
    body = '"A<1><BOT><Red>" triggered "revenge" against "B<2><BOT><Blue>"'
    assert _shape("player_triggered").rx.match(body)
    assert match_shape(body).name == "player_triggered_against"


def test_say_team_precedes_say():
    body = '"A<1><BOT><Red>" say_team "x" say "y"'
    assert match_shape(body).name == "player_say_team"
    assert classify(body, TS).message == 'x" say "y'


def test_server_cvar_precedes_cvar_dump():
    assert match_shape('server_cvar: "a" "b"').name == "server_cvar"


def test_no_match_is_unrecognized():
    assert match_shape("something new") is None
    assert classify("something new", TS) == m.Unrecognized(timestamp=TS, raw_body="something new")


def test_empty_table_recognizes_nothing():
    body = '"A<1><BOT><Red>" say "hi"'
    assert classify(body, TS, shapes=()).is_unrecognized


def test_table_can_be_extended():
    import regex

    from srcdslog.logline.shapes import LineShape

    extra = LineShape(
        name="custom_banner",
        rx=regex.compile(r'^Banner "(?P<text>[^"]*)"$'),
        build=lambda shape, mt, ts: m.ServerMessage(timestamp=ts, text=mt.group("text")),
    )
    shapes = (extra,) + LINE_SHAPES
    assert classify('Banner "welcome"', TS, shapes=shapes) == m.ServerMessage(timestamp=TS, text="welcome")
    assert classify('Banner "welcome"', TS).is_unrecognized


def test_real_suicide_line_with_properties():
    body = '"Bob<3><STEAM_0:0:222><Blue>" committed suicide with "world" (attacker_position "-2456 1949 -127")'
    ev = classify(body, TS)
    assert isinstance(ev, m.PlayerSuicide)
    assert ev.player.name == "Bob"
    assert ev.weapon == "world"
    assert ev.extra_fields == {"attacker_position": "-2456 1949 -127"}


def test_real_suicide_line_is_not_taken_by_triggered():
    body = '"Bob<3><STEAM_0:0:222><Blue>" committed suicide with "tf_projectile_rocket" (customkill "suicide")'
    assert match_shape(body).name == "player_suicide"
    ev = classify(body, TS)
    assert isinstance(ev, m.PlayerSuicide)
    assert ev.extra_fields == {"customkill": "suicide"}
