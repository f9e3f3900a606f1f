"""Marine Tracking database management CLI.

Provides commands to create and drop the Tracking projection tables and to
load a demo data set.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed-demo  # Load demo orders, events and shipments
"""

import argparse
import sys


def _tracking_domain():
    from tracking.domain import tracking

    print("Initializing tracking domain...")
    tracking.init()
    return tracking


def setup_database():
    """Create the projection tables of the tracking domain."""
    from tracking.utils.db import setup_db

    domain = _tracking_domain()
    print("Creating tracking database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the projection tables of the tracking domain."""
    from tracking.utils.db import drop_db

    domain = _tracking_domain()
    print("Dropping tracking database schema...")
    drop_db(domain)
    print("Done.")


def seed_demo():
    """Load the demo data set into the tracking projections."""
    from tracking.utils.demo_data import seed_demo_data

    domain = _tracking_domain()
    count = seed_demo_data(domain)
    print(f"Loaded {count} demo rows.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Marine Tracking database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-demo", help="Load the demo data set")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-demo":
        seed_demo()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
