from pathlib import Path

from pydantic import BaseModel, Field
from typing import Annotated
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from cpibridge.bootstrap.config.loader import get_configfile


class ServerSettings(BaseModel):
    host: Annotated[
        str,
        Field(
            description="Bind address of the HTTP bridge.",
            default="127.0.0.1"
        )
    ]

    port: Annotated[
        int,
        Field(
            description=(
                "TCP port of the HTTP bridge.\n"
                "The CPI Helper plugin must be pointed at this port."
            ),
            default=4004,
            ge=0,
            le=65535
        )
    ]


class CodecSettings(BaseModel):
    max_decompressed_size: Annotated[
        int,
        Field(
            description=(
                "Upper bound, in bytes, of a decompressed payload.\n"
                "Larger payloads are rejected instead of being truncated."
            ),
            default=4 * 1024 * 1024,
            gt=0
        )
    ]

    archive_level: Annotated[
        int,
        Field(
            description="Deflate level of the data.json entry inside the IDE archive.",
            default=9,
            ge=0,
            le=9
        )
    ]

    gzip_level: Annotated[
        int,
        Field(
            description="Compression level of the gzip container around the IDE archive.",
            default=6,
            ge=0,
            le=9
        )
    ]


class DumpSettings(BaseModel):
    enabled: Annotated[
        bool,
        Field(
            description="Write decoded payloads to disk on /debug requests.",
            default=True
        )
    ]

    directory: Annotated[
        Path,
        Field(
            description=(
                "Directory receiving debug.body, debug.header and debug.properties.\n"
                "It is created on first use; existing files are overwritten."
            ),
            default=Path("DataDump") / "Debug"
        )
    ]


class IdeSettings(BaseModel):
    url: Annotated[
        str,
        Field(
            description="Address of the web IDE debug page; the payload is appended as ?data=.",
            default="https://ide.contiva.com/cpi/script/debug"
        )
    ]

    open_browser: Annotated[
        bool,
        Field(
            description="Open the IDE in a browser after a conversion.",
            default=True
        )
    ]

    browser: Annotated[
        str | None,
        Field(
            description=(
                "Browser to use, as named by Python's webbrowser module (e.g. 'chrome').\n"
                "Unset means the system default browser."
            ),
            default=None
        )
    ]


class BridgeConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CPIBRIDGE_",
        env_nested_delimiter="__",
        extra="allow"
    )

    server: Annotated[
        ServerSettings,
        Field(
            description="HTTP listener configuration.",
            default_factory=ServerSettings
        )
    ]

    codec: Annotated[
        CodecSettings,
        Field(
            description=(
                "Codec limits and compression levels.\n"
                "Changing the levels changes the produced transport strings."
            ),
            default_factory=CodecSettings
        )
    ]

    dump: Annotated[
        DumpSettings,
        Field(
            description="Where and whether decoded payloads are written to disk.",
            default_factory=DumpSettings
        )
    ]

    ide: Annotated[
        IdeSettings,
        Field(
            description="Web IDE target of converted payloads.",
            default_factory=IdeSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        configfile = get_configfile()
        if configfile is None:
            return init_settings, env_settings

        return init_settings, env_settings, YamlConfigSettingsSource(settings_cls, yaml_file=configfile)
