from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from srcdslog.config import Settings
from srcdslog.errors import MalformedPacket
from srcdslog.logline.models import Event
from srcdslog.logline.parser import parse

logger = logging.getLogger("srcdslog")


# UDP log packets (logaddress_add) look like:
#   FF FF FF FF  'R'          'L 02/09/2024 - ...'   no sv_logsecret
#   FF FF FF FF  'S' <secret> 'L 02/09/2024 - ...'   sv_logsecret set
# and usually end with "\n\0".
PACKET_HEADER = b"\xff\xff\xff\xff"
MAGIC_NO_SECRET = ord("R")
MAGIC_SECRET = ord("S")
MAGIC_LINE_START = ord("L")


@dataclass(frozen=True)
class LogPacket:
    event: Event
    secret: Optional[str] = None


def split_packet(data: bytes, encoding: str = "utf-8") -> Tuple[Optional[str], bytes]:
    """Strip the packet header. Returns (secret, line bytes starting at 'L')."""
    if data.startswith(PACKET_HEADER):
        data = data[len(PACKET_HEADER):]

    idx = data.find(MAGIC_LINE_START)
    if idx < 0:
        raise MalformedPacket("no 'L' line start")

    header, rest = data[:idx], data[idx:].rstrip(b"\r\n\x00")
    if not header:
        return None, rest

    magic = header[0]
    if magic == MAGIC_NO_SECRET:
        return None, rest
    if magic == MAGIC_SECRET:
        return header[1:].decode(encoding, errors="replace"), rest

    raise MalformedPacket(f"unknown magic byte 0x{magic:02X}")


def parse_packet(data: bytes, settings: Optional[Settings] = None) -> LogPacket:
    st = settings or Settings()
    secret, rest = split_packet(data, st.packet_encoding)

    if st.expected_secret and secret != st.expected_secret:
        logger.debug("Rejected log packet with secret %r.", secret)
        raise MalformedPacket("sv_logsecret mismatch")

    event = parse(rest.decode(st.packet_encoding, errors="replace"))
    return LogPacket(event=event, secret=secret)
