import json
from typing import Any

from cpibridge.core.models.errors import EncodingError, ParseError
from cpibridge.core.ports.serializer import Serializer


class JsonSerializer(Serializer):
    """
    JSON implementation of the Serializer interface.

    - compact output, same text as JavaScript's JSON.stringify
    - keys kept in insertion order
    - non-ASCII characters written as UTF-8, not escaped
    """
    def serialize(self, document: Any) -> bytes:
        text = json.dumps(
            document,
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        )
        return text.encode("utf-8")

    def deserialize(self, data: bytes) -> Any:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(f"payload is not valid UTF-8: {exc}") from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"payload is not valid JSON: {exc}") from exc
