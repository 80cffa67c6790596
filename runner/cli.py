from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the smoke runner."""
    parser = argparse.ArgumentParser(description="Debug probe smoke check")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8000"))
    parser.add_argument(
        "--session",
        default=None,
        help="Send XDEBUG_SESSION=<value> with the home request (e.g. PHPSTORM)",
    )
    parser.add_argument(
        "--expect-debugger",
        action="store_true",
        help="Fail unless the page reports the debugger as loaded",
    )
    parser.add_argument("--timeout", type=float, default=20.0)
    return parser.parse_args(argv)
