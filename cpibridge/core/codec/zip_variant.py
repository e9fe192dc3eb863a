from typing import Any, Mapping

from cpibridge.core.codec import framing
from cpibridge.core.codec.alphabet import to_standard_alphabet
from cpibridge.core.codec.archive import ArchiveCodec
from cpibridge.core.models.errors import EncodeError, ParseError
from cpibridge.core.models.payload import ArchiveEntry, DebugPayload, TransportString
from cpibridge.core.ports.serializer import Serializer
from cpibridge.core.ports.tracer import Tracer, NullTracer


class ZipTransportCodec:
    """
    Transport codec used by the web IDE.

    Encoding:
        document -> JSON -> ZIP archive holding a single `data.json`
                 -> gzip -> standard base64 (padded) -> percent-encoding

    Decoding reverses the pipeline down to the raw archive bytes only.
    Opening the archive is left to the caller (see `read_archive` and
    `decode_payload`).

    The archive entry timestamp and the gzip mtime are both pinned, so
    encoding equal documents twice yields the same transport string.
    """
    ENTRY_NAME: str = "data.json"

    def __init__(
        self,
        serializer: Serializer,
        tracer: Tracer | None = None,
        max_decompressed_size: int = 4 * 1024 * 1024,
        archive_level: int = 9,
        gzip_level: int = 6,
    ) -> None:
        if max_decompressed_size < 1:
            raise ValueError(f"max_decompressed_size must be positive, got {max_decompressed_size}")

        self._serializer = serializer
        self._tracer = tracer or NullTracer()
        self._max_decompressed_size = max_decompressed_size
        self._archive_level = archive_level
        self._gzip_level = gzip_level

    def encode(self, document: DebugPayload | Mapping[str, Any]) -> TransportString:
        if isinstance(document, DebugPayload):
            document = document.to_dict()

        try:
            text = self._serializer.serialize(document)
            self._tracer.trace("zip.encode", "serialize", size=len(text))

            archive = ArchiveCodec.build(
                ArchiveEntry(content=text, name=self.ENTRY_NAME),
                level=self._archive_level
            )
            self._tracer.trace(
                "zip.encode", "archive",
                size=len(archive), head=archive[:16].hex(), tail=archive[-16:].hex()
            )

            # zlib's gzip wrapper always writes a zero mtime
            gzipped = framing.compress(archive, framing.GZIP_WBITS, self._gzip_level)
            self._tracer.trace("zip.encode", "gzip", size=len(gzipped))
        except (TypeError, ValueError, OverflowError) as exc:
            raise EncodeError(f"cannot encode document: {exc}") from exc

        b64 = framing.b64encode(gzipped)
        self._tracer.trace("zip.encode", "base64", length=len(b64))

        encoded = framing.percent_encode(b64)
        self._tracer.trace("zip.encode", "percent", length=len(encoded))
        return encoded

    def decode(self, encoded: TransportString) -> bytes:
        text = framing.percent_decode(encoded)
        self._tracer.trace("zip.decode", "percent", length=len(text))

        # Replacement is a no-op on input already in the standard alphabet.
        # Padding must already be there: a ragged length fails in b64decode.
        standard = to_standard_alphabet(text)
        gzipped = framing.b64decode(standard)
        self._tracer.trace("zip.decode", "base64", size=len(gzipped))

        archive = framing.decompress(
            gzipped, framing.GZIP_WBITS, self._max_decompressed_size
        )
        self._tracer.trace("zip.decode", "gunzip", size=len(archive), magic=archive[:4].hex())
        return archive

    def read_archive(self, archive: bytes) -> bytes:
        return ArchiveCodec.read_entry(archive, self.ENTRY_NAME)

    def decode_payload(self, encoded: TransportString) -> DebugPayload:
        """
        Decode a transport string all the way to a DebugPayload: decode,
        then open the archive and parse its `data.json`.
        """
        content = self.read_archive(self.decode(encoded))
        document = self._serializer.deserialize(content)
        if not isinstance(document, dict):
            raise ParseError(f"expected a JSON object, got {type(document).__name__}")
        return DebugPayload.from_dict(document)

