"""Create the job board tables in the configured database.

MySQL schemas are never touched by the API process itself; run this once per
environment instead.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from jobboard.config import get_settings, mask_db_url, validate_db_url  # noqa: E402
from jobboard.database import Base, build_engine  # noqa: E402
import jobboard.models  # noqa: F401,E402  # register every table on Base.metadata


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the job board tables (explicit DDL action).")
    parser.add_argument(
        "--db-url",
        default=None,
        help="Target DB URL (defaults to DB_URL / DB_* settings from .env or the environment).",
    )
    parser.add_argument(
        "--i-understand",
        action="store_true",
        help="Required safety flag. Prevents accidental DDL against shared databases.",
    )
    args = parser.parse_args(argv)

    if not args.i_understand:
        print("Refusing to run without --i-understand (safety).")
        return 2

    settings = get_settings()
    if args.db_url:
        settings = settings.model_copy(update={"db_url": validate_db_url(args.db_url)})

    engine = build_engine(settings)
    print("creating tables on:", mask_db_url(str(engine.url)))
    Base.metadata.create_all(bind=engine)
    engine.dispose()
    print("done:", ", ".join(sorted(Base.metadata.tables)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
