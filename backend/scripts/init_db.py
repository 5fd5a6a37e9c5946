"""Initialize the database - creates all tables."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from voipfit.config import get_settings
from voipfit.database import Database


def init_db():
    settings = get_settings()
    database = Database(settings.DATABASE_URL)
    print("Creating all database tables...")
    database.create_all()
    database.dispose()
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
