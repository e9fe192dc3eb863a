import base64
from urllib.parse import quote

import pytest

from cpibridge.core.codec.alphabet import to_standard_base64
from cpibridge.core.codec.deflate_variant import DeflateTransportCodec
from cpibridge.core.models.errors import (
    DecodeError,
    DecodeStage,
    EncodeError,
    EncodingError,
    ParseError,
    PayloadTooLarge,
)
from tests.helpers import plugin_string


@pytest.mark.ut
def test_round_trip(deflate_codec, cpihelper_document):
    assert deflate_codec.decode(deflate_codec.encode(cpihelper_document)) == cpihelper_document


@pytest.mark.ut
def test_round_trip_debug_payload(deflate_codec, payload):
    assert deflate_codec.decode(deflate_codec.encode(payload)) == payload.to_dict()


@pytest.mark.ut
def test_round_trip_unicode(deflate_codec):
    document = {"input": {"body": "Grüße, 東京 ✓"}}
    assert deflate_codec.decode(deflate_codec.encode(document)) == document


@pytest.mark.ut
def test_encode_is_url_safe_and_unpadded(deflate_codec, cpihelper_document):
    encoded = deflate_codec.encode(cpihelper_document)

    assert "=" not in encoded
    assert "+" not in encoded and "/" not in encoded


@pytest.mark.ut
def test_quoted_encoding_is_identical(deflate_codec, cpihelper_document):
    # Nothing in the URL-safe alphabet needs escaping
    assert deflate_codec.encode(cpihelper_document, quote=True) == deflate_codec.encode(cpihelper_document)


@pytest.mark.ut
def test_encode_is_deterministic(serializer, cpihelper_document):
    assert (
        DeflateTransportCodec(serializer).encode(cpihelper_document)
        == DeflateTransportCodec(serializer).encode(cpihelper_document)
    )


@pytest.mark.ut
def test_encode_uses_raw_deflate(deflate_codec, cpihelper_document):
    raw = base64.b64decode(to_standard_base64(deflate_codec.encode(cpihelper_document)))
    # Neither a zlib (0x78) nor a gzip (0x1f 0x8b) header
    assert raw[0] != 0x78
    assert raw[:2] != b"\x1f\x8b"


@pytest.mark.ut
@pytest.mark.parametrize("transform", [
    lambda s: s,
    to_standard_base64,
    lambda s: quote(to_standard_base64(s), safe=""),
    lambda s: quote(s, safe=""),
])
def test_decode_accepts_every_alphabet_and_padding(deflate_codec, cpihelper_document, transform):
    encoded = deflate_codec.encode(cpihelper_document)
    assert deflate_codec.decode(transform(encoded)) == cpihelper_document


@pytest.mark.ut
def test_invalid_base64_length(deflate_codec):
    with pytest.raises(DecodeError) as info:
        deflate_codec.decode("abcde")
    assert info.value.stage is DecodeStage.BASE64


@pytest.mark.ut
def test_invalid_base64_character(deflate_codec):
    with pytest.raises(DecodeError) as info:
        deflate_codec.decode("ab*d")
    assert info.value.stage is DecodeStage.BASE64


@pytest.mark.ut
def test_corrupt_deflate_stream(deflate_codec):
    garbage = base64.urlsafe_b64encode(b"\xff" * 8).decode().rstrip("=")

    with pytest.raises(DecodeError) as info:
        deflate_codec.decode(garbage)
    assert info.value.stage is DecodeStage.DECOMPRESS


@pytest.mark.ut
def test_truncated_deflate_stream(deflate_codec, cpihelper_document):
    encoded = deflate_codec.encode(cpihelper_document)

    with pytest.raises(DecodeError) as info:
        deflate_codec.decode(encoded[: len(encoded) // 2])
    assert info.value.stage in (DecodeStage.DECOMPRESS, DecodeStage.BASE64)


@pytest.mark.ut
def test_oversized_payload(serializer):
    encoded = DeflateTransportCodec(serializer).encode({"body": "a" * 5000})
    small = DeflateTransportCodec(serializer, max_decompressed_size=1024)

    with pytest.raises(PayloadTooLarge) as info:
        small.decode(encoded)
    assert info.value.limit == 1024


@pytest.mark.ut
def test_payload_exactly_at_ceiling(serializer):
    document = {"body": "a" * 100}
    limit = len(serializer.serialize(document))
    codec = DeflateTransportCodec(serializer, max_decompressed_size=limit)

    assert codec.decode(codec.encode(document)) == document


@pytest.mark.ut
def test_invalid_utf8(deflate_codec):
    with pytest.raises(EncodingError):
        deflate_codec.decode(plugin_string(b'{"a": "\xff\xfe"}'))


@pytest.mark.ut
def test_invalid_json(deflate_codec):
    with pytest.raises(ParseError):
        deflate_codec.decode(plugin_string(b'{"input": '))


@pytest.mark.ut
def test_encode_rejects_unserializable(deflate_codec):
    with pytest.raises(EncodeError):
        deflate_codec.encode({"value": {1, 2}})


@pytest.mark.ut
def test_decode_stages_are_traced(deflate_codec, tracer, cpihelper_document):
    deflate_codec.decode(deflate_codec.encode(cpihelper_document))

    assert tracer.stages("deflate.decode") == ["percent", "pad", "base64", "inflate", "parse"]


@pytest.mark.ut
@pytest.mark.parametrize("size", [0, -1, -5])
def test_rejects_non_positive_ceiling(serializer, size):
    with pytest.raises(ValueError):
        DeflateTransportCodec(serializer, max_decompressed_size=size)
