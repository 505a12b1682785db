from __future__ import annotations


class ParseError(ValueError):
    """Base class for a line (or packet) that cannot be turned into an event."""


class EmptyLine(ParseError):
    def __init__(self) -> None:
        super().__init__("empty log line")


class MalformedTimestamp(ParseError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"malformed timestamp: {detail}")
        self.detail = detail


class MalformedField(ParseError):
    """A line shape matched but one of its sub-fields could not be split."""

    def __init__(self, pattern: str, field: str) -> None:
        super().__init__(f"malformed field {field!r} in {pattern!r} line")
        self.pattern = pattern
        self.field = field


class MalformedPacket(ParseError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"malformed log packet: {detail}")
        self.detail = detail
