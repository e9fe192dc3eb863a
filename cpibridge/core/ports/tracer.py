from typing import Protocol, Any


class Tracer(Protocol):
    """
    Capability handed to the codecs by their caller to observe each stage
    of an encode or decode (sizes, padding, magic bytes).

    The codecs never log on their own: whatever a Tracer does with the
    events (log them, count them, drop them) is decided by whoever built it.
    """

    def trace(self, operation: str, stage: str, **fields: Any) -> None:
        """Record that `stage` of `operation` completed with `fields`."""


class NullTracer:
    def trace(self, operation: str, stage: str, **fields: Any) -> None:
        return None
