"""CLI script to load the sample career catalog into the backend DB.
Usage: python scripts/seed_db.py [--keep-existing]
"""
import sys
import argparse
import pathlib
# Ensure `backend/` is on sys.path so `career_explorer` package imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from career_explorer.database import check_connection, create_db_and_tables, engine
from career_explorer import services


def main(reset: bool = True) -> int:
    """Create missing tables and insert the sample roles and resources.

    With `reset` (the default) the existing catalog is deleted first.
    Returns a process exit code.
    """
    if not check_connection():
        print('Cannot proceed with seeding - database connection failed')
        return 1
    create_db_and_tables()
    with Session(engine) as session:
        try:
            summary = services.SeedService(session).seed(reset=reset)
        except SQLAlchemyError as e:
            print(f'Seeding failed: {e}')
            return 1
    print('Seeding completed successfully!')
    print(f"  - {summary['roles']} roles created")
    print(f"  - {summary['resources']} resources created")
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--keep-existing', action='store_true', help='Add the sample catalog without clearing existing rows')
    args = parser.parse_args()
    sys.exit(main(reset=not args.keep_existing))
