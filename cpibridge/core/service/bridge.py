import logging
from dataclasses import dataclass
from typing import Any

from cpibridge.core.codec.deflate_variant import DeflateTransportCodec
from cpibridge.core.codec.zip_variant import ZipTransportCodec
from cpibridge.core.models.errors import DocumentError, LaunchError
from cpibridge.core.models.payload import DebugPayload, TransportString
from cpibridge.core.ports.dump import DumpWriter
from cpibridge.core.ports.launcher import Launcher
from cpibridge.core.ports.remapper import Remapper


@dataclass
class DumpResult:
    data: Any
    files: dict[str, str] | None


@dataclass
class ConversionResult:
    payload: DebugPayload
    encoded: TransportString
    url: str
    launched: bool
    warning: str | None = None


class BridgeService:
    """
    The two workflows of the bridge, independent of how they are triggered.

    - `dump`: decode a CPI Helper transport string and write its fields to
      disk so a local script runner can replay the debugging session.
    - `convert`: decode a CPI Helper transport string, remap it to the IDE
      document, encode it for the IDE and open the resulting URL.

    Codec errors propagate unchanged to the caller. A launcher failure does
    not fail a conversion: the URL is still returned, with a warning.
    """

    def __init__(
        self,
        plugin_codec: DeflateTransportCodec,
        ide_codec: ZipTransportCodec,
        remapper: Remapper,
        ide_url: str,
        dump_writer: DumpWriter | None = None,
        launcher: Launcher | None = None,
    ) -> None:
        self._plugin_codec = plugin_codec
        self._ide_codec = ide_codec
        self._remapper = remapper
        self._ide_url = ide_url
        self._dump_writer = dump_writer
        self._launcher = launcher
        self._logger = logging.getLogger("core.service.bridge")

    def decode(self, encoded: TransportString) -> Any:
        self._logger.debug(f"Decoding {len(encoded)} chars: {encoded[:40]}...")
        return self._plugin_codec.decode(encoded)

    def dump(self, encoded: TransportString) -> DumpResult:
        document = self.decode(encoded)

        if self._dump_writer is None:
            return DumpResult(data=document, files=None)

        if not isinstance(document, dict):
            raise DocumentError(
                f"Decoded data is not an object: {type(document).__name__}"
            )

        files = self._dump_writer.write(document)
        self._logger.info(f"Dumped decoded data to {len(files)} files")
        return DumpResult(data=document, files=files)

    def ide_link(self, encoded: TransportString) -> str:
        return f"{self._ide_url}?data={encoded}"

    def convert(self, encoded: TransportString, launch: bool = True) -> ConversionResult:
        document = self.decode(encoded)

        if not isinstance(document, dict):
            raise DocumentError(
                f"Decoded data is not an object: {type(document).__name__}"
            )

        self._logger.debug(
            f"input field: {'input' in document}, script field: {'script' in document}"
        )

        payload = self._remapper(document)
        ide_encoded = self._ide_codec.encode(payload)
        url = self.ide_link(ide_encoded)
        self._logger.info(f"Encoded IDE payload ({len(ide_encoded)} chars)")

        result = ConversionResult(
            payload=payload,
            encoded=ide_encoded,
            url=url,
            launched=False
        )

        if not launch or self._launcher is None:
            return result

        try:
            self._launcher.open(url)
            result.launched = True
        except LaunchError as exc:
            self._logger.warning(f"Could not open browser: {exc}. Open this URL manually: {url}")
            result.warning = str(exc)

        return result
