"""
File: booking_service.py
Purpose: Service Layer for Reservations (Booking, Waitlist, Passenger Lists).
"""
import uuid

from loguru import logger

from airline.exceptions import DuplicateKeyError
from airline.models.daos.flight_dao import FlightDAO
from airline.models.daos.reservation_dao import ReservationDAO

RESERVATION_ID_PREFIX = 'R'
MAX_ID_ATTEMPTS = 3


def generate_reservation_id():
    """Single-letter prefix followed by 8 hex characters, e.g. 'R1F0C93AB'."""
    return RESERVATION_ID_PREFIX + uuid.uuid4().hex[:8].upper()


class BookingService:
    """
    Orchestrates the reservation flow and the reservation reports.
    """
    def __init__(self, db_manager, isolation_level='READ COMMITTED', id_factory=generate_reservation_id):
        self.flight_dao = FlightDAO(db_manager)
        self.reservation_dao = ReservationDAO(db_manager)
        self.isolation_level = isolation_level
        self.id_factory = id_factory

    # --- Booking Flow ---
    def get_flight_for_booking(self, flight_instance_id):
        """Retrieves the FlightInstance a customer is about to book, or None."""
        return self.flight_dao.get_flight_instance(flight_instance_id)

    def make_reservation(self, customer_id, flight_instance_id):
        """
        Reserves a seat, or waitlists the customer when the instance is full.

        ReservationID is the primary key, so the store rejects a colliding ID;
        a fresh one is drawn up to MAX_ID_ATTEMPTS times. The seat claim lives
        in the same transaction as the insert and is rolled back with it.
        """
        for attempt in range(1, MAX_ID_ATTEMPTS + 1):
            reservation_id = self.id_factory()
            try:
                return self.reservation_dao.create_reservation(
                    reservation_id=reservation_id,
                    customer_id=customer_id,
                    flight_instance_id=flight_instance_id,
                    isolation_level=self.isolation_level,
                )
            except DuplicateKeyError:
                if attempt == MAX_ID_ATTEMPTS:
                    raise
                logger.warning("Reservation ID {} already taken, drawing another", reservation_id)

    # --- Reports ---
    def get_passengers(self, flight_number, flight_date):
        return self.reservation_dao.get_passengers(flight_number, flight_date)

    def get_traveler_info(self, reservation_id):
        return self.reservation_dao.get_traveler_info(reservation_id)
