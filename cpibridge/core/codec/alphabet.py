"""
Conversion between the URL-safe base64 alphabet (`-`, `_`, usually without
padding) and the standard one (`+`, `/`, padded to a multiple of 4).

These functions are total: they never fail. A string that is not base64 at
all comes out just as broken and is rejected later, when it is decoded.
"""

_TO_STANDARD = str.maketrans("-_", "+/")
_TO_URL_SAFE = str.maketrans("+/", "-_")


def padding_needed(length: int) -> int:
    return (4 - (length % 4)) % 4


def to_standard_alphabet(text: str) -> str:
    return text.translate(_TO_STANDARD)


def to_standard_base64(text: str) -> str:
    standard = to_standard_alphabet(text)
    return standard + "=" * padding_needed(len(standard))


def to_url_safe_base64(text: str) -> str:
    return text.translate(_TO_URL_SAFE).rstrip("=")
