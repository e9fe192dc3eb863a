from enum import Enum


class DecodeStage(str, Enum):
    PERCENT = "percent"
    BASE64 = "base64"
    DECOMPRESS = "decompress"
    ARCHIVE = "archive"


class CodecError(Exception):
    """
    Base class for every failure of an encode or decode.

    Codec operations are deterministic: the same input fails the same way
    every time, so callers should not retry.
    """


class EncodeError(CodecError):
    """Serialization or compression failed on the encode path."""


class DecodeError(CodecError):
    def __init__(self, stage: DecodeStage, message: str) -> None:
        super().__init__(f"{stage.value}: {message}")
        self.stage = stage
        self.message = message


class EncodingError(CodecError):
    """Decompressed bytes are not valid UTF-8."""


class ParseError(CodecError):
    """Decompressed text is not valid JSON."""


class PayloadTooLarge(CodecError):
    def __init__(self, limit: int) -> None:
        super().__init__(f"decompressed payload exceeds {limit} bytes")
        self.limit = limit


class LaunchError(Exception):
    """No browser could be opened for a URL."""


class DocumentError(Exception):
    """A decoded document does not have the shape a workflow needs."""
