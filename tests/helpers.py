import os
import zlib

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, YamlConfigSettingsSource

from cpibridge.bootstrap.config.settings import BridgeConfig
from cpibridge.core.codec.alphabet import to_url_safe_base64
from cpibridge.core.codec.framing import b64encode


class FakeBridgeConfig(BridgeConfig):
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=os.environ["TEST_CPIBRIDGECONFIG"]),
        )


def raw_deflate(data: bytes) -> bytes:
    compressor = zlib.compressobj(9, zlib.DEFLATED, -zlib.MAX_WBITS)
    return compressor.compress(data) + compressor.flush()


def plugin_string(data: bytes) -> str:
    """Build a CPI Helper style transport string around arbitrary bytes."""
    return to_url_safe_base64(b64encode(raw_deflate(data)))
