"""
File: seed.py
Purpose: Creates the airline schema and loads the sample data set.

Usage: python seed.py <dbname> <port> <user> [--host HOST] [--schema-only]
"""
import sys
from pathlib import Path

from airline.exceptions import StoreError
from airline.logger_config import configure_logging
from run import build_parser, load_settings
from database.db_manager import DBManager

SQL_DIR = Path(__file__).resolve().parent / 'sql'
SCHEMA_FILE = 'schema.sql'
SEED_FILE = 'seed_data.sql'


def seed_database(db, sql_dir=SQL_DIR, schema_only=False):
    """Runs the schema (and seed) scripts. Returns the number of failed statements."""
    files = [SCHEMA_FILE] if schema_only else [SCHEMA_FILE, SEED_FILE]
    failed_total = 0
    for name in files:
        executed, failed = db.execute_sql_script(Path(sql_dir) / name)
        print(f"{name}: executed {executed} statements, {failed} failed")
        failed_total += failed
    return failed_total


def main(argv=None):
    parser = build_parser(description="Create the airline schema and load sample data")
    parser.add_argument('--schema-only', action='store_true', help="create tables without sample data")
    args = parser.parse_args(argv)

    settings = load_settings(args)
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    try:
        with DBManager(settings.connection_args, statement_timeout=settings.STATEMENT_TIMEOUT_SECONDS) as db:
            failed = seed_database(db, schema_only=args.schema_only)
    except StoreError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if failed:
        print("Database seeded with warnings, see log output.")
        return 1
    print("Database seeded successfully!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
