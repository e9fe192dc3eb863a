from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for turning a document into the bytes that get
    compressed into a transport string, and back.

    Implementations must be:
    - deterministic (same input, same bytes)
    - pure (no side effects)
    """

    def serialize(self, document: Any) -> bytes:
        """Encode a Python object into bytes."""

    def deserialize(self, data: bytes) -> Any:
        """Decode bytes into a Python object."""
