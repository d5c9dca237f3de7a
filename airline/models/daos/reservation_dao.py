from loguru import logger

from airline.exceptions import NotFoundError
from airline.models.entities.reservation import Reservation, ReservationStatus


class ReservationDAO:
    """
    Data Access Object for Reservation Logic.

    This class manages customer reservations, including:
    1.  **Creation**: Claiming a seat (or joining the waitlist) and storing the reservation.
    2.  **Retrieval**: Passenger lists per flight and traveler details per reservation.

    **Seat accounting**: ``0 <= SeatsSold <= SeatsTotal`` for every FlightInstance, and
    each 'reserved' row matches exactly one increment of SeatsSold.
    """

    def __init__(self, db_manager):
        self.db = db_manager

    # =================================================================
    # Part A: Reservation Creation
    # =================================================================

    def create_reservation(self, reservation_id, customer_id, flight_instance_id,
                           isolation_level='READ COMMITTED'):
        """
        Creates a reservation in a single transaction.

        **Process:**
        1.  Locks the FlightInstance row (FOR UPDATE). Missing instance -> NotFoundError.
        2.  Claims a seat with a compare-and-set UPDATE guarded by
            ``SeatsSold < SeatsTotal``. One affected row means the seat is ours.
        3.  Inserts the Reservation as 'reserved' or 'waitlisted' accordingly.

        Any failure rolls back both the seat claim and the insert.
        """
        with self.db.transaction(isolation_level=isolation_level):
            query_lock = "SELECT FlightInstanceID FROM FlightInstance WHERE FlightInstanceID = %s FOR UPDATE"
            if self.db.fetch_one(query_lock, (flight_instance_id,)) is None:
                raise NotFoundError(f"Flight instance {flight_instance_id} does not exist.")

            query_claim = """
                UPDATE FlightInstance
                SET SeatsSold = SeatsSold + 1
                WHERE FlightInstanceID = %s AND SeatsSold < SeatsTotal
            """
            claimed = self.db.execute_query(query_claim, (flight_instance_id,))
            status = ReservationStatus.RESERVED if claimed == 1 else ReservationStatus.WAITLISTED

            query_insert = """
                INSERT INTO Reservation (ReservationID, CustomerID, FlightInstanceID, Status)
                VALUES (%s, %s, %s, %s)
            """
            self.db.execute_query(query_insert, (reservation_id, customer_id, flight_instance_id, status.value))

        logger.info("Reservation {} for customer {} on instance {}: {}",
                    reservation_id, customer_id, flight_instance_id, status.value)
        return Reservation(reservation_id, customer_id, flight_instance_id, status)

    # =================================================================
    # Part B: Reservation Retrieval
    # =================================================================

    def get_passengers(self, flight_number, flight_date):
        """Everyone holding a reservation on a flight/date, reserved before waitlisted."""
        query = """
            SELECT
                r.ReservationID,
                c.CustomerID,
                c.FirstName,
                c.LastName,
                r.Status
            FROM Reservation r
            JOIN FlightInstance fi ON r.FlightInstanceID = fi.FlightInstanceID
            JOIN Customer c ON r.CustomerID = c.CustomerID
            WHERE fi.FlightNumber = %s AND fi.FlightDate = %s
            ORDER BY r.Status, c.LastName, c.FirstName
        """
        return self.db.fetch_all(query, (flight_number, flight_date))

    def get_traveler_info(self, reservation_id):
        query = """
            SELECT
                r.ReservationID,
                c.FirstName,
                c.LastName,
                c.Gender,
                c.DOB,
                c.Address,
                c.Phone,
                c.Zip
            FROM Reservation r
            JOIN Customer c ON r.CustomerID = c.CustomerID
            WHERE r.ReservationID = %s
        """
        return self.db.fetch_all(query, (reservation_id,))
