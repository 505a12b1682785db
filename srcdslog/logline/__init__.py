from .classify import classify, match_shape
from .models import Event, PlayerRef, Timestamp, Unrecognized
from .parser import parse
from .prefix import split_prefix
from .shapes import LINE_SHAPES, LineShape

__all__ = [
    "classify",
    "match_shape",
    "Event",
    "PlayerRef",
    "Timestamp",
    "Unrecognized",
    "parse",
    "split_prefix",
    "LINE_SHAPES",
    "LineShape",
]
