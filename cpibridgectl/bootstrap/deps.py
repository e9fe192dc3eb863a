from functools import lru_cache

from cpibridge.core.codec.deflate_variant import DeflateTransportCodec
from cpibridge.core.codec.zip_variant import ZipTransportCodec
from cpibridge.infra.json_serializer import JsonSerializer
from cpibridge.infra.log_tracer import LoggingTracer
from cpibridgectl.core.dispatcher import CommandDispatcher
from cpibridgectl.core.ports.render import Renderer
from cpibridgectl.infra.format_renderer import JsonRenderer, YamlRenderer


@lru_cache
def get_dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


def get_renderer(output: str) -> Renderer:
    if output == "yaml":
        return YamlRenderer()
    return JsonRenderer()


def get_zip_codec(max_size: int) -> ZipTransportCodec:
    return ZipTransportCodec(
        serializer=JsonSerializer(),
        tracer=LoggingTracer("cpibridgectl.codec.zip"),
        max_decompressed_size=max_size
    )


def get_deflate_codec(max_size: int) -> DeflateTransportCodec:
    return DeflateTransportCodec(
        serializer=JsonSerializer(),
        tracer=LoggingTracer("cpibridgectl.codec.deflate"),
        max_decompressed_size=max_size
    )
