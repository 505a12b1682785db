from __future__ import annotations

from typing import Optional, Sequence

from srcdslog.logline.models import Event, Timestamp, Unrecognized
from srcdslog.logline.shapes import LINE_SHAPES, LineShape


def match_shape(body: str, shapes: Sequence[LineShape] = LINE_SHAPES) -> Optional[LineShape]:
    """Return the first shape whose markers match, without building the event."""
    for shape in shapes:
        if shape.rx.match(body):
            return shape
    return None


def classify(body: str, timestamp: Timestamp, shapes: Sequence[LineShape] = LINE_SHAPES) -> Event:
    """Turn an event body into a typed event.

    Shapes are tried in order and the first match wins. A body no shape
    recognizes comes back as Unrecognized; a matching shape with a broken
    sub-field raises MalformedField.
    """
    for shape in shapes:
        ev = shape.try_build(body, timestamp)
        if ev is not None:
            return ev
    return Unrecognized(timestamp=timestamp, raw_body=body)
