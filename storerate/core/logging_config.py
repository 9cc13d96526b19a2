"""Root logging setup shared by the API and the CLI scripts."""

import logging
import time

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


class UTCFormatter(logging.Formatter):
    """Formats asctime in UTC so the trailing Z in LOG_DATEFMT holds."""

    converter = time.gmtime


def configure_logging(level: str | int = logging.INFO) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(UTCFormatter(LOG_FORMAT, LOG_DATEFMT))
    logging.basicConfig(level=level, handlers=[handler])
