"""
Script to create the tables of DATABASE_URL and seed the demo data.
"""
import logging

from bacprep.core.config import settings
from bacprep.services.storage import SQLStorage

logging.basicConfig(level=settings.LOG_LEVEL, format='%(levelname)s:\t%(name)s\t%(message)s')


def init() -> None:
    """Initialize database."""
    if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        print("⚠️  DATABASE_URL points to an in-memory database; seeded data will not outlive this script")

    print("Creating database tables...")
    storage = SQLStorage.from_url(settings.DATABASE_URL)
    print("✅ Database tables created")

    print("Seeding demo data...")
    storage.initialize_demo_data()
    print("✅ Demo data seeded")

    print("🎉 Database initialization complete!")


if __name__ == "__main__":
    init()
