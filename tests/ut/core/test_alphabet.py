import base64

import pytest

from cpibridge.core.codec.alphabet import (
    padding_needed,
    to_standard_alphabet,
    to_standard_base64,
    to_url_safe_base64,
)


@pytest.mark.ut
@pytest.mark.parametrize("length", range(0, 13))
def test_padding_completes_a_quantum(length):
    need = padding_needed(length)
    assert 0 <= need <= 3
    assert (length + need) % 4 == 0


@pytest.mark.ut
def test_standard_padded_input_is_left_alone():
    text = base64.b64encode(b"\xfb\xff\xbe hello").decode()
    assert "+" in text or "/" in text
    assert to_standard_base64(text) == text


@pytest.mark.ut
def test_url_safe_unpadded_input_is_restored():
    raw = b"\xfb\xff\xbe?"
    standard = base64.b64encode(raw).decode()
    url_safe = base64.urlsafe_b64encode(raw).decode().rstrip("=")

    assert to_standard_base64(url_safe) == standard


@pytest.mark.ut
def test_to_url_safe_strips_padding_and_swaps_alphabet():
    assert to_url_safe_base64("+/A=") == "-_A"
    assert to_url_safe_base64("ab+/cd==") == "ab-_cd"


@pytest.mark.ut
def test_alphabet_only_conversion_keeps_length():
    assert to_standard_alphabet("a-b_c") == "a+b/c"


@pytest.mark.ut
def test_functions_never_fail_on_garbage():
    # Broken input stays broken; it is rejected when decoded
    assert to_standard_base64("$$$") == "$$$="
    assert to_url_safe_base64("") == ""
    assert to_standard_base64("") == ""
