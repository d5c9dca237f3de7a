"""
Concurrent reservations against a live MySQL server.

Skipped unless AIRLINE_TEST_DB_NAME names a scratch database; host, port,
user and password come from AIRLINE_TEST_DB_HOST/PORT/USER/PASSWORD.
"""
import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from airline.models.entities.reservation import ReservationStatus
from airline.services.booking_service import BookingService
from database.db_manager import DBManager
from seed import seed_database

pytestmark = pytest.mark.skipif(
    not os.environ.get('AIRLINE_TEST_DB_NAME'), reason="AIRLINE_TEST_DB_NAME not set"
)

INSTANCE_ID = 9001
SEATS_TOTAL = 5
SEATS_SOLD = 2
REQUESTS = 12


def connection_args():
    return {
        'host': os.environ.get('AIRLINE_TEST_DB_HOST', 'localhost'),
        'port': int(os.environ.get('AIRLINE_TEST_DB_PORT', '3306')),
        'user': os.environ.get('AIRLINE_TEST_DB_USER', 'root'),
        'password': os.environ.get('AIRLINE_TEST_DB_PASSWORD', ''),
        'database': os.environ.get('AIRLINE_TEST_DB_NAME'),
        'connection_timeout': 10,
    }


@pytest.fixture
def nearly_full_instance():
    with DBManager(connection_args()) as db:
        seed_database(db)
        db.execute_query("DELETE FROM Reservation WHERE FlightInstanceID = %s", (INSTANCE_ID,))
        db.execute_query("DELETE FROM FlightInstance WHERE FlightInstanceID = %s", (INSTANCE_ID,))
        db.execute_query(
            """
            INSERT INTO FlightInstance
                (FlightInstanceID, FlightNumber, FlightDate, SeatsTotal, SeatsSold, NumOfStops, TicketCost)
            VALUES (%s, 'F300', '2030-01-01', %s, %s, 0, 99.00)
            """,
            (INSTANCE_ID, SEATS_TOTAL, SEATS_SOLD),
        )
    yield INSTANCE_ID
    with DBManager(connection_args()) as db:
        db.execute_query("DELETE FROM Reservation WHERE FlightInstanceID = %s", (INSTANCE_ID,))
        db.execute_query("DELETE FROM FlightInstance WHERE FlightInstanceID = %s", (INSTANCE_ID,))


def reserve(instance_id):
    with DBManager(connection_args()) as db:
        return BookingService(db).make_reservation(1, instance_id).status


def test_concurrent_sessions_never_oversell(nearly_full_instance):
    with ThreadPoolExecutor(max_workers=REQUESTS) as pool:
        outcomes = list(pool.map(reserve, [nearly_full_instance] * REQUESTS))

    free_seats = SEATS_TOTAL - SEATS_SOLD
    assert outcomes.count(ReservationStatus.RESERVED) == free_seats
    assert outcomes.count(ReservationStatus.WAITLISTED) == REQUESTS - free_seats

    with DBManager(connection_args()) as db:
        row = db.fetch_one(
            "SELECT SeatsSold, SeatsTotal FROM FlightInstance WHERE FlightInstanceID = %s", (nearly_full_instance,)
        )
        count = db.fetch_one(
            "SELECT COUNT(*) AS N FROM Reservation WHERE FlightInstanceID = %s", (nearly_full_instance,)
        )
    assert row == {'SeatsSold': str(SEATS_TOTAL), 'SeatsTotal': str(SEATS_TOTAL)}
    assert count['N'] == str(REQUESTS)
