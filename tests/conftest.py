import pytest

from cpibridge.core.codec.deflate_variant import DeflateTransportCodec
from cpibridge.core.codec.zip_variant import ZipTransportCodec
from cpibridge.core.models.payload import DebugPayload
from cpibridge.infra.json_serializer import JsonSerializer
from tests.fake.fake_ports import RecordingTracer


SCRIPT = (
    "import com.sap.gateway.ip.core.customdev.util.Message;\n\n"
    "def Message processData(Message message) {\n    return message;\n}"
)


@pytest.fixture
def serializer():
    return JsonSerializer()


@pytest.fixture
def tracer():
    return RecordingTracer()


@pytest.fixture
def zip_codec(serializer, tracer):
    return ZipTransportCodec(serializer, tracer=tracer)


@pytest.fixture
def deflate_codec(serializer, tracer):
    return DeflateTransportCodec(serializer, tracer=tracer)


@pytest.fixture
def payload() -> DebugPayload:
    return DebugPayload(
        current_session_type="groovy",
        script_input='{ "test": "testval3" }',
        script=SCRIPT,
        function_name="processData",
        headers={"SAP_MessageProcessingLogID": "AGlnwRPCOT1y6HLEfkmHVDXWnnu0"},
        properties={"AnotherProp": "conf1"},
    )


@pytest.fixture
def cpihelper_document() -> dict:
    return {
        "input": {
            "body": "<order id=\"42\"/>",
            "headers": {"Content-Type": "application/xml", "SAP_Sender": "S4"},
            "properties": {"Retry": "3", "Target": "https://host:443/path"},
        },
        "script": {
            "code": SCRIPT,
            "function": "processData",
        },
    }
