import json
import logging
import re
from datetime import datetime, UTC
from email.utils import format_datetime
from pathlib import Path
from typing import Any, Callable, Mapping

from cpibridge.core.ports.dump import DumpWriter


_SPECIAL = re.compile(r"([=:\t])")


def _section(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def to_properties(values: Mapping[str, Any], title: str, now: datetime) -> str:
    """
    Render `values` in the layout of a Java .properties file:

        #<title>
        #<date>
        key=value
        ...

    Non-string values are written as JSON; `=`, `:` and tabs in values are
    escaped with a backslash.
    """
    lines = [f"#{title}", f"#{format_datetime(now, usegmt=True)}"]

    for key, value in values.items():
        escaped = _SPECIAL.sub(r"\\\1", _as_text(value))
        lines.append(f"{key}={escaped}")

    return "\n".join(lines)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


class PropertiesDumpWriter(DumpWriter):
    """
    Writes a decoded CPI Helper payload as three files with fixed names in
    `directory`:

    - debug.body        the message body, as-is
    - debug.header      the message headers, properties layout
    - debug.properties  the exchange properties, properties layout

    Files from a previous dump are overwritten.
    """
    BASENAME: str = "debug"

    def __init__(
        self,
        directory: Path,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._directory = directory
        self._clock = clock or (lambda: datetime.now(tz=UTC))
        self._logger = logging.getLogger("infra.properties_dump")

    @property
    def directory(self) -> Path:
        return self._directory

    def write(self, payload: Mapping[str, Any]) -> dict[str, str]:
        self._directory.mkdir(parents=True, exist_ok=True)

        data = _section(payload.get("input"))
        now = self._clock()

        body = data.get("body") or ""
        if not isinstance(body, str):
            body = _as_text(body)

        files = {
            "body": self._save("body", body),
            "header": self._save(
                "header",
                to_properties(_section(data.get("headers")), "Header Contents", now)
            ),
            "properties": self._save(
                "properties",
                to_properties(_section(data.get("properties")), "Properties Contents", now)
            ),
        }
        return files

    def _save(self, extension: str, content: str) -> str:
        path = self._directory / f"{self.BASENAME}.{extension}"
        path.write_text(content, encoding="utf-8")
        self._logger.debug(f"Saved {path} ({len(content)} chars)")
        return str(path)
