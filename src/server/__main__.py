"""Server module entry point for running with python -m server."""

import logging
import os

import uvicorn

from tocnav.config import TOCNAV_LOG_LEVEL

logger = logging.getLogger("server")

if __name__ == "__main__":
    logging.basicConfig(level=TOCNAV_LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("Starting tocnav server on %s:%d", host, port)

    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )
