"""
Start the intake server.

Usage:
  python -m intake [--host 0.0.0.0] [--port 3000]
"""
from __future__ import annotations

import argparse
from dataclasses import replace

import uvicorn

from intake.app import create_app
from intake.core.config import get_settings
from intake.core.logging import configure_logging


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Project intake server")
    ap.add_argument("--host", default=settings.host, help="Bind address (env HOST)")
    ap.add_argument("--port", type=int, default=settings.port, help="Listen port (env PORT)")
    args = ap.parse_args(argv)
    settings = replace(settings, host=args.host, port=args.port)

    logger = configure_logging(settings.log_level)
    app = create_app(settings)

    logger.info("Server running on port %s", settings.port)
    logger.info("Data directory: %s", settings.data_dir)
    logger.info("Frontend: http://localhost:%s", settings.port)
    logger.info("API Endpoint: http://localhost:%s/api/submit", settings.port)
    logger.info("Ready to receive project submissions!")

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
