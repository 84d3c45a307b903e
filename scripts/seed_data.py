"""Seed script to populate the database with sample data."""

import argparse

from realestate.core.config import settings
from realestate.core.database import close_client, ensure_indexes, get_database
from realestate.core.logging import setup_logging
from realestate.services.seed import clear_data, seed_data


def main() -> None:
    parser = argparse.ArgumentParser(description="Load demo owners and properties into MongoDB.")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="delete all owners, properties, images and traces before seeding",
    )
    args = parser.parse_args()

    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    db = get_database()
    try:
        ensure_indexes(db)
        if args.clear:
            clear_data(db)

        result = seed_data(db)
        if result.skipped:
            print("Database already has data. Skipping seed.")
            return

        print("Seed data created successfully!")
        print(f"- {result.owners} owners")
        print(f"- {result.properties} properties")
        print(f"- {result.images} property images")
        print(f"- {result.traces} property traces")
    finally:
        close_client()


if __name__ == "__main__":
    main()
