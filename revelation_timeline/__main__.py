"""Run the API with uvicorn: ``python -m revelation_timeline``."""

from __future__ import annotations

import logging

import uvicorn

from revelation_timeline.config import settings


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(
        "revelation_timeline.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
