import logging
import sys

from cpibridge.core.helpers.utils import scan, setup_logging
from cpibridge.core.models.errors import CodecError, DocumentError
from cpibridgectl.bootstrap.deps import get_dispatcher, get_renderer
from cpibridgectl.core.parser import build_parser


@scan("cpibridgectl.bootstrap.commands")
def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    renderer = get_renderer(args.output)

    try:
        result = get_dispatcher().dispatch(args.command, args)
    except (CodecError, DocumentError, OSError) as ex:
        logging.getLogger("cpibridgectl").debug("Command failed", exc_info=ex)
        print(f"error: {ex}", file=sys.stderr)
        return 1

    print(renderer.render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
