"""
Byte-level steps shared by both transport variants: percent-encoding,
strict base64 and size-bounded (de)compression.

Each step raises the codec error for its own stage so a failure can be
attributed without inspecting library exceptions.
"""
import base64
import re
import zlib
from urllib.parse import quote, unquote

from cpibridge.core.models.errors import DecodeError, DecodeStage, EncodeError, PayloadTooLarge


RAW_DEFLATE_WBITS = -zlib.MAX_WBITS
GZIP_WBITS = 16 + zlib.MAX_WBITS

_BROKEN_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_encode(text: str) -> str:
    # Nothing but unreserved characters survive, as with encodeURIComponent
    return quote(text, safe="")


def percent_decode(text: str) -> str:
    match = _BROKEN_ESCAPE.search(text)
    if match is not None:
        raise DecodeError(
            DecodeStage.PERCENT,
            f"malformed escape at position {match.start()}"
        )

    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise DecodeError(DecodeStage.PERCENT, f"escaped bytes are not UTF-8: {exc}") from exc


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode(text: str) -> bytes:
    """
    Decode standard, padded base64. Characters outside the alphabet and
    wrong padding are errors, never skipped.
    """
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as exc:
        raise DecodeError(DecodeStage.BASE64, str(exc)) from exc


def compress(data: bytes, wbits: int, level: int) -> bytes:
    try:
        compressor = zlib.compressobj(level, zlib.DEFLATED, wbits)
        return compressor.compress(data) + compressor.flush()
    except zlib.error as exc:
        raise EncodeError(f"compression failed: {exc}") from exc


def decompress(data: bytes, wbits: int, limit: int) -> bytes:
    """
    Decompress a complete stream, letting zlib grow the output up to
    `limit` bytes.

    Raises PayloadTooLarge as soon as the output would exceed `limit`, and
    DecodeError(DECOMPRESS) for a corrupt, truncated or over-long stream.
    """
    decompressor = zlib.decompressobj(wbits)

    try:
        # One byte past the limit is enough to tell "fits" from "too large"
        out = decompressor.decompress(data, limit + 1)
    except zlib.error as exc:
        raise DecodeError(DecodeStage.DECOMPRESS, str(exc)) from exc

    if len(out) > limit:
        raise PayloadTooLarge(limit)

    if not decompressor.eof:
        raise DecodeError(DecodeStage.DECOMPRESS, "compressed stream is truncated")

    if decompressor.unused_data:
        raise DecodeError(
            DecodeStage.DECOMPRESS,
            f"{len(decompressor.unused_data)} trailing bytes after compressed stream"
        )

    return out
