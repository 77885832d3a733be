from __future__ import annotations

import logging

CLIENT_LOGGER = "cent_client"


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # request/response tracing from the client library, shown only with -v
    logging.getLogger(CLIENT_LOGGER).setLevel(level)
    # httpx logs every request at INFO
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(level)
