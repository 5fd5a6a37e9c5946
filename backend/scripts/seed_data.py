"""Seed the database with the default site content, services, news and admin account."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse

from voipfit.config import Settings, configure_logging
from voipfit.database import Database
from voipfit.services.seed_service import initialize_default_content

SEED_OUTCOMES = {True: "seeded", False: "already present", None: "FAILED (see log)"}


def seed(database_url=None):
    settings = Settings(DATABASE_URL=database_url) if database_url else Settings()
    configure_logging(settings)
    database = Database(settings.DATABASE_URL)
    database.create_all()
    try:
        with database.session() as db:
            results = initialize_default_content(db, settings)
    finally:
        database.dispose()

    print("Seed run finished.")
    for step, outcome in results.items():
        print(f"  {step}: {SEED_OUTCOMES[outcome]}")
    print()
    print(f"Admin login: username={settings.DEFAULT_ADMIN_USERNAME}")
    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--database-url", help="override DATABASE_URL for this run")
    args = parser.parse_args()
    seed(args.database_url)
