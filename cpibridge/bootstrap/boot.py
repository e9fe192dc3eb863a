import logging

import uvicorn

from cpibridge.bootstrap.config.loader import get_cli_args
from cpibridge.bootstrap.deps import get_config, get_http_app
from cpibridge.core.helpers.utils import setup_logging, scan


@scan("cpibridge.bootstrap.handlers")
def main():
    cli = get_cli_args()
    setup_logging(cli.log_level)

    config = get_config()
    logger = logging.getLogger("bootstrap.boot")
    if config.dump.enabled:
        logger.info(f"Dumping decoded payloads to {config.dump.directory.resolve()}")
    logger.info(f"Converted payloads open {config.ide.url}")

    uvicorn.run(
        get_http_app(),
        host=config.server.host,
        port=config.server.port,
        log_level=cli.log_level.lower(),
        access_log=False,
    )
