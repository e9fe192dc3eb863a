import argparse
import json

from cpibridge.core.models.errors import ParseError
from cpibridge.core.models.payload import TransportVariant
from cpibridgectl.bootstrap.deps import get_dispatcher, get_zip_codec, get_deflate_codec
from cpibridgectl.core.parser import read_source


dispatcher = get_dispatcher()


def _load_document(file: str):
    try:
        return json.loads(read_source(file))
    except json.JSONDecodeError as exc:
        raise ParseError(f"input is not valid JSON: {exc}") from exc


@dispatcher.command("encode-zip")
def encode_zip(namespace: argparse.Namespace) -> dict:
    codec = get_zip_codec(namespace.max_size)
    encoded = codec.encode(_load_document(namespace.file))
    return {"variant": TransportVariant.ZIP.value, "length": len(encoded), "encoded": encoded}


@dispatcher.command("decode-zip")
def decode_zip(namespace: argparse.Namespace) -> dict:
    codec = get_zip_codec(namespace.max_size)

    if namespace.extract:
        document = codec.decode_payload(namespace.encoded)
        return {"variant": TransportVariant.ZIP.value, "data": document.to_dict()}

    archive = codec.decode(namespace.encoded)
    return {"variant": TransportVariant.ZIP.value, "size": len(archive), "magic": archive[:4].hex()}


@dispatcher.command("encode-deflate")
def encode_deflate(namespace: argparse.Namespace) -> dict:
    codec = get_deflate_codec(namespace.max_size)
    encoded = codec.encode(_load_document(namespace.file), quote=namespace.quote)
    return {"variant": TransportVariant.DEFLATE.value, "length": len(encoded), "encoded": encoded}


@dispatcher.command("decode-deflate")
def decode_deflate(namespace: argparse.Namespace) -> dict:
    codec = get_deflate_codec(namespace.max_size)
    return {"variant": TransportVariant.DEFLATE.value, "data": codec.decode(namespace.encoded)}
