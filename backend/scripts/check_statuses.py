"""Report the distinct status values stored in attendance_logs.

Only "present" is written by the application; anything else points at rows
imported or edited by hand.

    python scripts/check_statuses.py [--log-level DEBUG]
"""
import argparse
import logging

from sqlalchemy import text

from attendance.database import SessionLocal
from attendance.logging_config import configure_logging

logger = logging.getLogger("check_statuses")


def status_summary(db) -> list[tuple[str, int, object]]:
    """(status, row count, earliest scanned_at) per distinct status.

    Reads the raw column so values outside the declared set still show up.
    """
    rows = db.execute(text(
        "SELECT status, COUNT(*), MIN(scanned_at) FROM attendance_logs GROUP BY status ORDER BY status"
    ))
    return [(status, count, sample) for status, count, sample in rows]


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()
    configure_logging(args.log_level)

    db = SessionLocal()
    try:
        summary = status_summary(db)
    finally:
        db.close()

    if not summary:
        logger.info("No data found in attendance_logs")
        return 0
    logger.info("Unique statuses found: %s", ", ".join(status for status, _, _ in summary))
    for status, count, sample in summary:
        logger.info("  %-8s %6d row(s), sample scanned_at %s", status, count, sample)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
