from typing import Any

from cpibridge.core.codec import framing
from cpibridge.core.codec.alphabet import to_standard_base64, to_url_safe_base64
from cpibridge.core.models.errors import EncodeError
from cpibridge.core.models.payload import DebugPayload, TransportString
from cpibridge.core.ports.serializer import Serializer
from cpibridge.core.ports.tracer import Tracer, NullTracer


class DeflateTransportCodec:
    """
    Transport codec used by the CPI Helper plugin.

    Encoding:
        document -> JSON -> raw deflate (no zlib/gzip header or trailer)
                 -> URL-safe base64 without padding [-> percent-encoding]

    Decoding accepts padded or unpadded input in either base64 alphabet,
    percent-encoded or not, and returns the parsed JSON value.
    """

    def __init__(
        self,
        serializer: Serializer,
        tracer: Tracer | None = None,
        max_decompressed_size: int = 4 * 1024 * 1024,
        level: int = 9,
    ) -> None:
        if max_decompressed_size < 1:
            raise ValueError(f"max_decompressed_size must be positive, got {max_decompressed_size}")

        self._serializer = serializer
        self._tracer = tracer or NullTracer()
        self._max_decompressed_size = max_decompressed_size
        self._level = level

    def encode(self, document: Any, quote: bool = False) -> TransportString:
        if isinstance(document, DebugPayload):
            document = document.to_dict()

        try:
            text = self._serializer.serialize(document)
            self._tracer.trace("deflate.encode", "serialize", size=len(text))
            compressed = framing.compress(text, framing.RAW_DEFLATE_WBITS, self._level)
            self._tracer.trace("deflate.encode", "deflate", size=len(compressed))
        except (TypeError, ValueError, OverflowError) as exc:
            raise EncodeError(f"cannot encode document: {exc}") from exc

        encoded = to_url_safe_base64(framing.b64encode(compressed))
        self._tracer.trace("deflate.encode", "base64", length=len(encoded))

        if quote:
            # The URL-safe alphabet has nothing left to escape; kept for
            # callers that always quote what they embed.
            encoded = framing.percent_encode(encoded)
        return encoded

    def decode(self, encoded: TransportString) -> Any:
        text = framing.percent_decode(encoded)
        self._tracer.trace("deflate.decode", "percent", length=len(text))

        standard = to_standard_base64(text)
        self._tracer.trace(
            "deflate.decode", "pad",
            length=len(standard), padding=len(standard) - len(text)
        )

        compressed = framing.b64decode(standard)
        self._tracer.trace("deflate.decode", "base64", size=len(compressed))

        raw = framing.decompress(
            compressed, framing.RAW_DEFLATE_WBITS, self._max_decompressed_size
        )
        self._tracer.trace("deflate.decode", "inflate", size=len(raw))

        document = self._serializer.deserialize(raw)
        self._tracer.trace("deflate.decode", "parse", kind=type(document).__name__)
        return document
