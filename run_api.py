#!/usr/bin/env python
"""
Run the Gatehouse API server.

Usage:
    python run_api.py
    python run_api.py --reload --log-level debug
"""

import argparse
import uvicorn

from shared.config import get_settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Gatehouse profile and session API")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--host", type=str, help="Bind address (default: HOST setting)")
    parser.add_argument("--port", type=int, help="Bind port (default: PORT setting)")
    parser.add_argument("--log-level", type=str, help="Log level (default: LOG_LEVEL setting)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    settings = get_settings()

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=(args.log_level or settings.log_level).lower(),
    )


if __name__ == "__main__":
    main()
