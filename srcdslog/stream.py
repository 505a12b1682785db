from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from srcdslog.config import Settings
from srcdslog.errors import ParseError
from srcdslog.logline.models import Event
from srcdslog.logline.parser import parse

logger = logging.getLogger("srcdslog")


def parse_lines(lines: Iterable[str], settings: Optional[Settings] = None) -> Iterator[Event]:
    """Parse many lines, skipping the ones that fail.

    Each line is independent: a bad line is logged and the batch keeps going.
    """
    st = settings or Settings()
    for lineno, raw in enumerate(lines or [], start=1):
        if not (raw or "").strip():
            continue
        try:
            ev = parse(raw)
        except ParseError as e:
            logger.warning("Skipping log line %d: %s", lineno, e)
            continue

        if ev.is_unrecognized and st.log_unrecognized:
            logger.debug("Unrecognized log line %d: %r", lineno, ev.raw_body)
        yield ev
