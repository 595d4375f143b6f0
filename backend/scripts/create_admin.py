"""Create a back-office administrator account.

    python scripts/create_admin.py admin@example.org
"""
import argparse
import getpass
import logging

from fastapi import HTTPException

from attendance.database import SessionLocal
from attendance.logging_config import configure_logging
from attendance.services.auth_service import create_admin

logger = logging.getLogger("create_admin")


def main() -> int:
    parser = argparse.ArgumentParser(description="Create an administrator account.")
    parser.add_argument("email")
    parser.add_argument("--password", help="prompted for when omitted")
    args = parser.parse_args()
    configure_logging()

    password = args.password or getpass.getpass("Password: ")
    if not password:
        logger.error("Password must not be empty")
        return 1

    db = SessionLocal()
    try:
        admin = create_admin(db, args.email, password)
    except HTTPException as exc:
        logger.error("%s", exc.detail)
        return 1
    finally:
        db.close()
    logger.info("Administrator %s ready (%s)", admin.email, admin.user_id)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
