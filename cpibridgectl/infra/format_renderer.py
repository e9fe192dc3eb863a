import json
from collections.abc import Mapping

import yaml

from cpibridgectl.core.ports.render import Renderer


class JsonRenderer(Renderer):
    def render(self, data: dict) -> str:
        return json.dumps(self._normalize(data), indent=2, ensure_ascii=False, sort_keys=False)

    def _normalize(self, obj):
        if isinstance(obj, Mapping):
            return {k: self._normalize(v) for k, v in obj.items()}

        if isinstance(obj, (list, tuple)):
            return [self._normalize(x) for x in obj]

        return obj


class YamlRenderer(JsonRenderer):
    def render(self, data: dict) -> str:
        normalized = self._normalize(data)
        return yaml.safe_dump(normalized, sort_keys=False, allow_unicode=True)
