from .config import Settings
from .errors import EmptyLine, MalformedField, MalformedPacket, MalformedTimestamp, ParseError
from .logline import LINE_SHAPES, Event, PlayerRef, Timestamp, Unrecognized, classify, parse, split_prefix
from .packet import LogPacket, parse_packet
from .stream import parse_lines

__all__ = [
    "Settings",
    "EmptyLine",
    "MalformedField",
    "MalformedPacket",
    "MalformedTimestamp",
    "ParseError",
    "LINE_SHAPES",
    "Event",
    "PlayerRef",
    "Timestamp",
    "Unrecognized",
    "classify",
    "parse",
    "split_prefix",
    "LogPacket",
    "parse_packet",
    "parse_lines",
]
