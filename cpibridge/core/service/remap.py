from typing import Any, Mapping

from cpibridge.core.models.payload import DebugPayload


def _section(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def cpihelper_to_debug_payload(document: Mapping[str, Any]) -> DebugPayload:
    """
    Default Remapper: a straight field rename from the CPI Helper layout

        {"input": {"body", "headers", "properties"},
         "script": {"code", "function"}}

    to a groovy DebugPayload. Missing fields, and sections that are not
    objects, fall back to empty values and the function name to `processData`.
    """
    data = _section(document.get("input"))
    script = _section(document.get("script"))

    return DebugPayload(
        current_session_type="groovy",
        script_input=data.get("body") or "",
        script=script.get("code") or "",
        function_name=script.get("function") or "processData",
        headers=_section(data.get("headers")),
        properties=_section(data.get("properties")),
    )
