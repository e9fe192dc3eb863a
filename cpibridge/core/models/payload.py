from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


TransportString = str
"""
A value that can be placed as-is in a URL path segment or query parameter.
"""


class TransportVariant(str, Enum):
    """
    Selects one of the two codecs from a user-facing surface (CLI flag,
    HTTP route). The codecs themselves are distinct classes.
    """
    ZIP = "zip"
    DEFLATE = "deflate"


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _frozen(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class DebugPayload:
    """
    The document the web IDE opens a debugging session from.
    Field order matches the order the IDE consumer expects on the wire.
    """
    current_session_type: str = ""
    script_input: str = ""
    script: str = ""
    function_name: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _frozen(self.headers))
        object.__setattr__(self, "properties", _frozen(self.properties))

    def __hash__(self) -> int:
        return hash((
            self.current_session_type,
            self.script_input,
            self.script,
            self.function_name,
            tuple(sorted(self.headers.items())),
            tuple(sorted(self.properties.items())),
        ))

    def to_dict(self) -> dict[str, Any]:
        """Return the document keyed by its wire field names."""
        return {
            "currentSessionType": self.current_session_type,
            "scriptInput": self.script_input,
            "script": self.script,
            "functionName": self.function_name,
            "headers": dict(self.headers),
            "properties": dict(self.properties),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DebugPayload":
        return cls(
            current_session_type=data.get("currentSessionType", ""),
            script_input=data.get("scriptInput", ""),
            script=data.get("script", ""),
            function_name=data.get("functionName", ""),
            headers=_mapping(data.get("headers")),
            properties=_mapping(data.get("properties")),
        )


# The ZIP format cannot represent dates before 1980; an epoch-zero date
# is clamped to this value by archive writers.
DOS_EPOCH = (1980, 1, 1, 0, 0, 0)


@dataclass(frozen=True)
class ArchiveEntry:
    """
    A single file placed in the archive built by the ZIP variant encoder.
    """
    content: bytes
    name: str = "data.json"
    date_time: tuple[int, int, int, int, int, int] = DOS_EPOCH
