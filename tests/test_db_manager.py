from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import MagicMock, call, patch

import mysql.connector
import pytest

from airline.exceptions import DuplicateKeyError, StoreError
from database.db_manager import DBManager


CONNECTION_ARGS = {'host': 'localhost', 'port': 3306, 'user': 'tester', 'password': 'pw', 'database': 'airline'}


@pytest.fixture
def connection():
    conn = MagicMock()
    conn.cursor.return_value = MagicMock()
    return conn


@pytest.fixture
def db(connection):
    with patch('database.db_manager.mysql.connector.connect', return_value=connection) as mock_connect:
        manager = DBManager(CONNECTION_ARGS, statement_timeout=5)
        manager.connect()
        manager.mock_connect = mock_connect
        yield manager


class TestConnection:
    def test_connect_applies_session_timeouts(self, db, connection):
        db.mock_connect.assert_called_once_with(autocommit=True, **CONNECTION_ARGS)
        cursor = connection.cursor.return_value
        cursor.execute.assert_has_calls([
            call("SET SESSION max_execution_time = %s", (5000,)),
            call("SET SESSION innodb_lock_wait_timeout = %s", (5,)),
        ])

    def test_connect_failure_raises_store_error(self):
        error = mysql.connector.errors.InterfaceError(msg="Can't connect to MySQL server", errno=2003)
        with patch('database.db_manager.mysql.connector.connect', side_effect=error):
            with pytest.raises(StoreError) as exc:
                DBManager(CONNECTION_ARGS).connect()
        assert "Can't connect" in exc.value.message

    def test_statements_before_connect_raise_store_error(self):
        with pytest.raises(StoreError):
            DBManager(CONNECTION_ARGS).fetch_all("SELECT 1")

    def test_close_is_idempotent(self, db, connection):
        db.close()
        db.close()
        connection.close.assert_called_once()
        assert not db.is_connected

    def test_context_manager_releases_connection_on_error(self, connection):
        with patch('database.db_manager.mysql.connector.connect', return_value=connection):
            with pytest.raises(RuntimeError):
                with DBManager(CONNECTION_ARGS):
                    raise RuntimeError('boom')
        connection.close.assert_called_once()


class TestStatements:
    def test_fetch_all_binds_parameters_and_stringifies_values(self, db, connection):
        cursor = connection.cursor.return_value
        cursor.fetchall.return_value = [{
            'SeatsSold': 3,
            'FlightDate': date(2025, 6, 2),
            'DepartureTime': timedelta(hours=8, minutes=30),
            'TicketCost': Decimal('189.00'),
            'LastRepairDate': None,
        }]

        rows = db.fetch_all("SELECT * FROM FlightInstance WHERE FlightNumber = %s", ['F100'])

        cursor.execute.assert_called_with("SELECT * FROM FlightInstance WHERE FlightNumber = %s", ('F100',))
        assert rows == [{
            'SeatsSold': '3',
            'FlightDate': '2025-06-02',
            'DepartureTime': '08:30:00',
            'TicketCost': '189.00',
            'LastRepairDate': None,
        }]
        cursor.close.assert_called()

    def test_fetch_one_returns_none_without_rows(self, db, connection):
        connection.cursor.return_value.fetchall.return_value = []
        assert db.fetch_one("SELECT 1 FROM Plane WHERE PlaneID = %s", ('X',)) is None

    def test_execute_query_returns_rowcount_and_insert_id(self, db, connection):
        cursor = connection.cursor.return_value
        cursor.rowcount = 1
        cursor.lastrowid = 42

        assert db.execute_query("INSERT INTO Repair (PlaneID) VALUES (%s)", ('PL001',)) == 1
        assert db.last_insert_id() == 42

    def test_driver_error_becomes_store_error(self, db, connection):
        cursor = connection.cursor.return_value
        cursor.execute.side_effect = mysql.connector.errors.OperationalError(msg='Lost connection', errno=2013)

        with pytest.raises(StoreError) as exc:
            db.fetch_all("SELECT * FROM Plane")
        assert 'Lost connection' in exc.value.message
        cursor.close.assert_called()

    def test_duplicate_primary_key_becomes_duplicate_key_error(self, db, connection):
        connection.cursor.return_value.execute.side_effect = mysql.connector.errors.IntegrityError(
            msg="Duplicate entry 'R00A1B2C3' for key 'PRIMARY'", errno=1062
        )
        with pytest.raises(DuplicateKeyError):
            db.execute_query("INSERT INTO Reservation VALUES (%s)", ('R00A1B2C3',))

    def test_other_constraint_violation_is_plain_store_error(self, db, connection):
        connection.cursor.return_value.execute.side_effect = mysql.connector.errors.IntegrityError(
            msg='Check constraint violated', errno=3819
        )
        with pytest.raises(StoreError) as exc:
            db.execute_query("UPDATE FlightInstance SET SeatsSold = 999")
        assert not isinstance(exc.value, DuplicateKeyError)


class TestTransactions:
    def test_commit_on_success(self, db, connection):
        with db.transaction(isolation_level='SERIALIZABLE'):
            pass
        connection.start_transaction.assert_called_once_with(isolation_level='SERIALIZABLE')
        connection.commit.assert_called_once()
        connection.rollback.assert_not_called()

    def test_rollback_on_exception(self, db, connection):
        with pytest.raises(ValueError):
            with db.transaction():
                raise ValueError('abort')
        connection.rollback.assert_called_once()
        connection.commit.assert_not_called()

    def test_nested_transaction_joins_outer(self, db, connection):
        with db.transaction():
            with db.transaction():
                pass
        connection.start_transaction.assert_called_once()
        connection.commit.assert_called_once()

    def test_commit_failure_rolls_back_and_raises_store_error(self, db, connection):
        connection.commit.side_effect = mysql.connector.errors.OperationalError(msg='Deadlock found', errno=1213)
        with pytest.raises(StoreError):
            with db.transaction():
                pass
        connection.rollback.assert_called_once()


def test_execute_sql_script_skips_comments_and_counts_failures(db, connection, tmp_path):
    script = tmp_path / 'schema.sql'
    script.write_text(
        "-- tables\n"
        "CREATE TABLE A (id INT);\n"
        "CREATE TABLE B (id INT);\n"
        "\n",
        encoding='utf-8',
    )
    cursor = connection.cursor.return_value
    cursor.execute.reset_mock()
    cursor.execute.side_effect = [None, mysql.connector.errors.ProgrammingError(msg='exists', errno=1050)]

    assert db.execute_sql_script(script) == (1, 1)
    assert cursor.execute.call_count == 2
