import argparse
import sys
from pathlib import Path


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive number of bytes, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpibridgectl",
        description=(
            "Encode and decode cpibridge transport strings.\n\n"
            "zip     → the web IDE format (ZIP archive, gzip, base64, percent-encoding)\n"
            "deflate → the CPI Helper format (raw deflate, URL-safe base64)"
        ),
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument(
        "-o", "--output",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)."
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every codec stage to stderr."
    )

    parser.add_argument(
        "--max-size",
        type=positive_int,
        default=4 * 1024 * 1024,
        help="Largest decompressed payload accepted, in bytes (default: 4 MiB)."
    )

    sub = parser.add_subparsers(dest="command", required=True)

    encode_zip = sub.add_parser("encode-zip", help="Encode a JSON document for the web IDE")
    encode_zip.add_argument("file", nargs="?", default="-", help="JSON file, '-' for stdin (default)")

    decode_zip = sub.add_parser("decode-zip", help="Decode a web IDE transport string")
    decode_zip.add_argument("encoded", help="Transport string")
    decode_zip.add_argument(
        "--extract",
        action="store_true",
        help="Open the archive and print the embedded data.json document"
    )

    encode_deflate = sub.add_parser("encode-deflate", help="Encode a JSON document as CPI Helper does")
    encode_deflate.add_argument("file", nargs="?", default="-", help="JSON file, '-' for stdin (default)")
    encode_deflate.add_argument("--quote", action="store_true", help="Percent-encode the result")

    decode_deflate = sub.add_parser("decode-deflate", help="Decode a CPI Helper transport string")
    decode_deflate.add_argument("encoded", help="Transport string")

    convert = sub.add_parser(
        "convert",
        help="Turn a CPI Helper transport string into a web IDE link"
    )
    convert.add_argument("encoded", help="CPI Helper transport string")
    convert.add_argument(
        "--ide-url",
        default="https://ide.contiva.com/cpi/script/debug",
        help="Web IDE debug page"
    )
    convert.add_argument("--open", action="store_true", help="Open the link in a browser")

    return parser


def read_source(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")
