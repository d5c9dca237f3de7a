"""
File: db_manager.py
Purpose: Owns the MySQL connection and executes parameterized statements.
"""
from contextlib import contextmanager
from datetime import timedelta

import mysql.connector
from loguru import logger
from mysql.connector import errorcode

from airline.exceptions import DuplicateKeyError, StoreError


def _stringify(value):
    """Rows leave the gateway as str-or-None, whatever the column type."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return value.decode('utf-8')
    if isinstance(value, timedelta):
        # MySQL TIME columns arrive as timedelta
        seconds = int(value.total_seconds())
        return '%02d:%02d:%02d' % (seconds // 3600, (seconds % 3600) // 60, seconds % 60)
    return str(value)


def _stringify_row(row):
    return {column: _stringify(value) for column, value in row.items()}


class DBManager:
    """
    Gateway to the relational store.

    Holds a single connection for the lifetime of a session. Every statement
    goes through bound parameters (``%s`` placeholders); driver errors are
    re-raised as ``StoreError`` so callers never see mysql.connector types.

    Usage::

        with DBManager(settings.connection_args) as db:
            rows = db.fetch_all("SELECT * FROM Plane WHERE PlaneID = %s", (plane_id,))
    """

    def __init__(self, connection_args, statement_timeout=10):
        self.connection_args = dict(connection_args)
        self.statement_timeout = statement_timeout
        self._connection = None
        self._in_transaction = False
        self._last_insert_id = None

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # =================================================================
    # Connection lifecycle
    # =================================================================

    def connect(self):
        """Opens the connection and applies the session timeouts."""
        if self._connection is not None:
            return self._connection

        try:
            connection = mysql.connector.connect(autocommit=True, **self.connection_args)
            cursor = connection.cursor()
            try:
                # max_execution_time bounds SELECTs, lock wait bounds FOR UPDATE / UPDATE
                cursor.execute("SET SESSION max_execution_time = %s", (self.statement_timeout * 1000,))
                cursor.execute("SET SESSION innodb_lock_wait_timeout = %s", (self.statement_timeout,))
            finally:
                cursor.close()
        except mysql.connector.Error as e:
            logger.error("Failed to connect to {}: {}", self.connection_args.get('database'), e)
            raise StoreError(f"Unable to connect to database: {e.msg}") from e

        self._connection = connection
        logger.info("Connected to database {}", self.connection_args.get('database'))
        return connection

    def get_connection(self):
        if self._connection is None:
            raise StoreError("Not connected to the database")
        return self._connection

    def close(self):
        """Releases the connection. Safe to call more than once."""
        if self._connection is None:
            return
        try:
            self._connection.close()
        except mysql.connector.Error as e:
            logger.warning("Error while closing connection: {}", e)
        finally:
            self._connection = None
            self._in_transaction = False

    @property
    def is_connected(self):
        return self._connection is not None

    # =================================================================
    # Statements
    # =================================================================

    def _run(self, statement, params, fetch):
        connection = self.get_connection()
        cursor = None
        try:
            cursor = connection.cursor(dictionary=True, buffered=True)
            cursor.execute(statement, tuple(params or ()))
            if fetch:
                return [_stringify_row(row) for row in cursor.fetchall()]
            self._last_insert_id = cursor.lastrowid
            return cursor.rowcount
        except mysql.connector.IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateKeyError(f"Duplicate key: {e.msg}") from e
            logger.error("Constraint violation: {}", e)
            raise StoreError(f"Constraint violation: {e.msg}") from e
        except mysql.connector.Error as e:
            logger.error("Query Error: {}", e)
            raise StoreError(f"Query Error: {e.msg}") from e
        finally:
            if cursor:
                cursor.close()

    def fetch_all(self, query, params=None):
        """Executes a SELECT and returns every row as a dict of column -> str or None."""
        return self._run(query, params, fetch=True)

    def fetch_one(self, query, params=None):
        """Executes a SELECT and returns the first row, or None."""
        rows = self._run(query, params, fetch=True)
        return rows[0] if rows else None

    def execute_query(self, query, params=None):
        """Executes INSERT, UPDATE or DELETE and returns the affected row count."""
        return self._run(query, params, fetch=False)

    def last_insert_id(self):
        """AUTO_INCREMENT id produced by the last execute_query() INSERT."""
        return self._last_insert_id

    # =================================================================
    # Transactions
    # =================================================================

    def _rollback(self, connection):
        try:
            connection.rollback()
        except mysql.connector.Error as e:
            logger.warning("Rollback failed: {}", e)

    @contextmanager
    def transaction(self, isolation_level='READ COMMITTED'):
        """
        Groups statements into one unit of work.

        Commits when the block exits normally and rolls back on any exception.
        A nested call joins the outer transaction.
        """
        connection = self.get_connection()
        if self._in_transaction:
            yield self
            return

        try:
            connection.start_transaction(isolation_level=isolation_level)
        except mysql.connector.Error as e:
            logger.error("Could not start transaction: {}", e)
            raise StoreError(f"Could not start transaction: {e.msg}") from e

        self._in_transaction = True
        try:
            yield self
        except BaseException:
            self._rollback(connection)
            raise
        else:
            try:
                connection.commit()
            except mysql.connector.Error as e:
                self._rollback(connection)
                logger.error("Commit failed: {}", e)
                raise StoreError(f"Commit failed: {e.msg}") from e
        finally:
            self._in_transaction = False

    # =================================================================
    # Scripts
    # =================================================================

    def execute_sql_script(self, file_path):
        """
        Runs a multi-statement SQL file, one ``;``-terminated statement at a time.

        Returns (executed, failed) counts. Failing statements are logged and
        skipped so a re-run over an existing schema still loads what it can.
        """
        logger.info("Reading SQL script: {}", file_path)
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line for line in f if not line.lstrip().startswith('--')]
        sql_script = ''.join(lines)

        connection = self.get_connection()
        cursor = connection.cursor()
        executed = failed = 0
        try:
            for statement in sql_script.split(';'):
                if not statement.strip():
                    continue
                try:
                    cursor.execute(statement)
                    executed += 1
                except mysql.connector.Error as err:
                    failed += 1
                    logger.warning("Warning executing statement: {}", err)
        finally:
            cursor.close()

        logger.info("Executed {} SQL statements from {} ({} failed)", executed, file_path, failed)
        return executed, failed
