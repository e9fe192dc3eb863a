from typing import Protocol, Any, Mapping

from cpibridge.core.models.payload import DebugPayload


class Remapper(Protocol):
    """
    Converts a decoded CPI Helper document into the DebugPayload expected by
    the web IDE. The mapping is supplied by the caller; the codecs never
    look inside the documents they carry.
    """

    def __call__(self, document: Mapping[str, Any]) -> DebugPayload:
        ...
