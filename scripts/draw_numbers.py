"""Draw numbers from the command line.

Reads DRAW_LOCALE / DRAW_MAX_RANGE_SIZE / DRAW_PREVIEW_LIMIT from .env / environment.

Usage:
  python scripts/draw_numbers.py 1 45 6 --exclude "3, 7"
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from app.config import BaseConfig, int_env, resolve_locale
from app.services.draw_service import DrawService


logger = logging.getLogger("draw_numbers")


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Draw distinct random numbers from a range")
    parser.add_argument("start", type=str)
    parser.add_argument("end", type=str)
    parser.add_argument("count", type=str)
    parser.add_argument("--exclude", dest="exclude", type=str, default="")
    parser.add_argument("--locale", dest="locale", type=str, default=None, choices=["en", "ko"])
    parser.add_argument("--show-preview", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    service = DrawService(
        locale=args.locale or resolve_locale(),
        max_range_size=int_env("DRAW_MAX_RANGE_SIZE", BaseConfig.DRAW_MAX_RANGE_SIZE),
        preview_limit=int_env("DRAW_PREVIEW_LIMIT", BaseConfig.DRAW_PREVIEW_LIMIT),
    )
    request = service.prepare(args.start, args.end, args.count, args.exclude)

    failure = service.check(request)
    if failure is not None:
        print(failure.message, file=sys.stderr)
        return 2

    outcome = service.run(request)
    print(" ".join(str(n) for n in outcome.numbers))
    if args.show_preview:
        print("preview: " + " ".join(str(n) for n in outcome.preview))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
