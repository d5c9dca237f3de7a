"""
File: run.py
Purpose: Command-line entry point. Connects to the store and runs the menu session.

Usage: python run.py <dbname> <port> <user> [--host HOST]
The password is read from AIRLINE_DB_PASSWORD (or .env), otherwise asked for.
"""
import argparse
import getpass
import sys

import pydantic
from loguru import logger
from pydantic import SecretStr

from airline.classes.console import Console
from airline.config import Settings
from airline.exceptions import FatalStartupError, StoreError
from airline.logger_config import configure_logging
from airline.menu_engine import Services, build_menu
from database.db_manager import DBManager


def build_parser(description="Airline management console"):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument('dbname', help="database name")
    parser.add_argument('port', type=int, help="database server port")
    parser.add_argument('user', help="database user")
    parser.add_argument('--host', default=None, help="database server host (default: localhost)")
    return parser


def load_settings(args, password_prompt=getpass.getpass):
    """Merges command-line arguments over environment settings."""
    overrides = {'DB_NAME': args.dbname, 'DB_PORT': args.port, 'DB_USER': args.user}
    if args.host:
        overrides['DB_HOST'] = args.host
    settings = Settings(**overrides)

    if settings.DB_PASSWORD is None:
        password = password_prompt(f"Password for {args.user}@{settings.DB_HOST}: ")
        settings = settings.model_copy(update={'DB_PASSWORD': SecretStr(password)})
    return settings


def open_store(settings):
    db = DBManager(settings.connection_args, statement_timeout=settings.STATEMENT_TIMEOUT_SECONDS)
    try:
        db.connect()
    except StoreError as e:
        raise FatalStartupError(e.message) from e
    return db


def main(argv=None, stdin=None, stdout=None, password_prompt=getpass.getpass):
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args, password_prompt)
    except pydantic.ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    except EOFError:
        print("No database password supplied.", file=sys.stderr)
        return 1

    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    console = Console(stdin, stdout)

    console.say(f"Connecting to database {settings.DB_NAME} on {settings.DB_HOST}:{settings.DB_PORT}...")
    try:
        db = open_store(settings)
    except FatalStartupError as e:
        print(f"Error - Unable to Connect to Database: {e.message}", file=sys.stderr)
        print("Make sure the database server is running on this machine", file=sys.stderr)
        return 1
    console.say("Done")

    try:
        services = Services(db, isolation_level=settings.RESERVATION_ISOLATION_LEVEL)
        build_menu(console, services).run()
    finally:
        console.say("Disconnecting from database...")
        db.close()
        console.say("Done\n\nBye !")
        logger.info("Session ended")
    return 0


if __name__ == '__main__':
    sys.exit(main())
