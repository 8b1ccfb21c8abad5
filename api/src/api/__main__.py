"""API entry point for running as a module: python -m api."""

from __future__ import annotations

import logging
import sys

import uvicorn
from aspectwire.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("api").info("Starting aspectwire API on %s:%d", settings.host, settings.port)
    uvicorn.run("api.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
