import json
import time
from functools import lru_cache

from fastapi import FastAPI
from pydantic import ValidationError

from cpibridge.bootstrap.config.settings import BridgeConfig
from cpibridge.core.codec.deflate_variant import DeflateTransportCodec
from cpibridge.core.codec.zip_variant import ZipTransportCodec
from cpibridge.core.service.bridge import BridgeService
from cpibridge.core.service.remap import cpihelper_to_debug_payload
from cpibridge.infra.browser import WebBrowserLauncher
from cpibridge.infra.json_serializer import JsonSerializer
from cpibridge.infra.log_tracer import LoggingTracer
from cpibridge.infra.properties_dump import PropertiesDumpWriter


@lru_cache
def get_service() -> BridgeService:
    config = get_config()

    dump_writer = None
    if config.dump.enabled:
        dump_writer = PropertiesDumpWriter(config.dump.directory)

    launcher = None
    if config.ide.open_browser:
        launcher = WebBrowserLauncher(config.ide.browser)

    return BridgeService(
        plugin_codec=get_plugin_codec(),
        ide_codec=get_ide_codec(),
        remapper=cpihelper_to_debug_payload,
        ide_url=config.ide.url,
        dump_writer=dump_writer,
        launcher=launcher
    )


@lru_cache
def get_plugin_codec() -> DeflateTransportCodec:
    config = get_config()
    return DeflateTransportCodec(
        serializer=JsonSerializer(),
        tracer=LoggingTracer("core.codec.deflate"),
        max_decompressed_size=config.codec.max_decompressed_size
    )


@lru_cache
def get_ide_codec() -> ZipTransportCodec:
    config = get_config()
    return ZipTransportCodec(
        serializer=JsonSerializer(),
        tracer=LoggingTracer("core.codec.zip"),
        max_decompressed_size=config.codec.max_decompressed_size,
        archive_level=config.codec.archive_level,
        gzip_level=config.codec.gzip_level
    )


@lru_cache
def get_http_app() -> FastAPI:
    app = FastAPI(title="cpibridge", version="1.0.0")
    app.state.started_at = time.monotonic()
    return app


@lru_cache
def get_config() -> BridgeConfig:
    try:
        return BridgeConfig()
    except FileNotFoundError as ex:
        raise SystemExit(f"Provide a correct configuration file path: {ex}")
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(part) for part in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))
