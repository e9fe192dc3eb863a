import pytest

from cpibridge.core.models.errors import DecodeError, DocumentError
from cpibridge.core.service.bridge import BridgeService
from cpibridge.core.service.remap import cpihelper_to_debug_payload
from tests.fake.fake_ports import FakeDumpWriter, FakeLauncher, FailingLauncher


IDE_URL = "https://ide.example.com/cpi/script/debug"


@pytest.fixture
def dump_writer():
    return FakeDumpWriter()


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def service(deflate_codec, zip_codec, dump_writer, launcher):
    return BridgeService(
        plugin_codec=deflate_codec,
        ide_codec=zip_codec,
        remapper=cpihelper_to_debug_payload,
        ide_url=IDE_URL,
        dump_writer=dump_writer,
        launcher=launcher,
    )


@pytest.mark.ut
def test_dump_writes_decoded_document(service, deflate_codec, dump_writer, cpihelper_document):
    result = service.dump(deflate_codec.encode(cpihelper_document))

    assert result.data == cpihelper_document
    assert dump_writer.written == [cpihelper_document]
    assert set(result.files) == {"body", "header", "properties"}


@pytest.mark.ut
def test_dump_without_writer(deflate_codec, zip_codec, cpihelper_document):
    service = BridgeService(deflate_codec, zip_codec, cpihelper_to_debug_payload, IDE_URL)
    result = service.dump(deflate_codec.encode(cpihelper_document))

    assert result.data == cpihelper_document
    assert result.files is None


@pytest.mark.ut
def test_dump_rejects_non_object(service, deflate_codec, dump_writer):
    with pytest.raises(DocumentError):
        service.dump(deflate_codec.encode(["a", "b"]))
    assert dump_writer.written == []


@pytest.mark.ut
def test_dump_propagates_codec_errors(service, dump_writer):
    with pytest.raises(DecodeError):
        service.dump("abcde")
    assert dump_writer.written == []


@pytest.mark.ut
def test_convert_reencodes_for_ide(service, deflate_codec, zip_codec, launcher, cpihelper_document):
    result = service.convert(deflate_codec.encode(cpihelper_document))

    assert result.payload.to_dict() == cpihelper_to_debug_payload(cpihelper_document).to_dict()
    assert result.url == f"{IDE_URL}?data={result.encoded}"
    assert zip_codec.decode_payload(result.encoded).to_dict() == result.payload.to_dict()
    assert result.launched is True
    assert launcher.opened == [result.url]


@pytest.mark.ut
def test_convert_without_launch(service, deflate_codec, launcher, cpihelper_document):
    result = service.convert(deflate_codec.encode(cpihelper_document), launch=False)

    assert result.launched is False
    assert launcher.opened == []


@pytest.mark.ut
def test_convert_survives_launcher_failure(deflate_codec, zip_codec, cpihelper_document):
    service = BridgeService(
        deflate_codec, zip_codec, cpihelper_to_debug_payload, IDE_URL,
        launcher=FailingLauncher()
    )
    result = service.convert(deflate_codec.encode(cpihelper_document))

    assert result.launched is False
    assert result.warning == "no usable browser"
    assert result.url.startswith(IDE_URL)


@pytest.mark.ut
def test_convert_rejects_non_object(service, deflate_codec):
    with pytest.raises(DocumentError):
        service.convert(deflate_codec.encode("just a string"))


@pytest.mark.ut
def test_custom_remapper_is_used(deflate_codec, zip_codec, payload):
    service = BridgeService(deflate_codec, zip_codec, lambda document: payload, IDE_URL)
    result = service.convert(deflate_codec.encode({"anything": True}))

    assert result.payload is payload


@pytest.mark.ut
def test_convert_tolerates_non_object_sections(service, deflate_codec, zip_codec):
    result = service.convert(deflate_codec.encode({"input": {"headers": "x"}, "script": "plain"}))

    assert dict(result.payload.headers) == {}
    assert result.payload.function_name == "processData"
    assert zip_codec.decode_payload(result.encoded).to_dict() == result.payload.to_dict()
