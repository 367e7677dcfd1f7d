"""Database setup and seeding."""
