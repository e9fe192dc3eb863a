import argparse

from cpibridge.core.service.bridge import BridgeService
from cpibridge.core.service.remap import cpihelper_to_debug_payload
from cpibridge.infra.browser import WebBrowserLauncher
from cpibridgectl.bootstrap.deps import get_dispatcher, get_zip_codec, get_deflate_codec


dispatcher = get_dispatcher()


@dispatcher.command("convert")
def convert(namespace: argparse.Namespace) -> dict:
    service = BridgeService(
        plugin_codec=get_deflate_codec(namespace.max_size),
        ide_codec=get_zip_codec(namespace.max_size),
        remapper=cpihelper_to_debug_payload,
        ide_url=namespace.ide_url,
        launcher=WebBrowserLauncher() if namespace.open else None
    )

    result = service.convert(namespace.encoded, launch=namespace.open)
    output = {
        "contivaData": result.payload.to_dict(),
        "url": result.url,
        "launched": result.launched,
    }
    if result.warning is not None:
        output["warning"] = result.warning
    return output
