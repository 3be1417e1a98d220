"""Create the database schema for the configured `DATABASE_URL`."""
import sys

from career_explorer.database import check_connection, create_db_and_tables, engine


def run():
    """Create the `roles` and `resources` tables with their indexes.

    Existing tables are kept as they are, so running this twice is a
    no-op. Exits with status 1 when the database cannot be reached.
    """
    print("Using database:", engine.url.render_as_string(hide_password=True))
    if not check_connection():
        print("Cannot proceed with migration - database connection failed")
        sys.exit(1)
    create_db_and_tables()
    print("Migrations applied.")


if __name__ == '__main__':
    run()
