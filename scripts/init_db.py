#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates all PlanIT tables in the database named by DATABASE_URL.
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import init_database

logger = logging.getLogger("planit.scripts.init_db")


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    try:
        init_database()
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("PlanIT Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("SUCCESS! Tables are ready.")
    else:
        print("FAILED! Check the errors above.")

    sys.exit(exit_code)
