from airline.models.entities.flight import FlightInstance


class FlightDAO:
    """
    Data Access Object for Flights, Schedules and Flight Instances.

    This class serves the read side of flight data:
    1.  **Schedules**: Weekly recurring departure/arrival times per flight.
    2.  **Daily Operations**: Which flights run on a date and whether they were on time.
    3.  **Customer Search**: Matching instances by city pair and date, with cost and seats.

    Seat counts are only ever changed by ReservationDAO.
    """

    def __init__(self, db_manager):
        self.db = db_manager

    # =================================================================
    # Part A: Flights & Schedules
    # =================================================================

    def get_weekly_schedule(self, flight_number):
        """
        Weekly schedule rows for a flight.
        Returned unordered; callers sort by weekday ordinal.
        """
        query = """
            SELECT s.FlightNumber, s.DayOfWeek, s.DepartureTime, s.ArrivalTime
            FROM Schedule s
            WHERE s.FlightNumber = %s
        """
        return self.db.fetch_all(query, (flight_number,))

    # =================================================================
    # Part B: Flight Instances
    # =================================================================

    def get_flight_instance(self, flight_instance_id, for_update=False):
        """Fetches a single instance as a FlightInstance, optionally row-locked."""
        query = """
            SELECT FlightInstanceID, FlightNumber, FlightDate, SeatsTotal, SeatsSold, NumOfStops, TicketCost
            FROM FlightInstance
            WHERE FlightInstanceID = %s
        """
        if for_update:
            query += " FOR UPDATE"
        row = self.db.fetch_one(query, (flight_instance_id,))
        return FlightInstance.from_row(row) if row else None

    def get_flight_status(self, flight_number, flight_date):
        """Departed / arrived on time for one flight on one date."""
        query = """
            SELECT
                fi.FlightNumber,
                fi.FlightDate,
                CASE WHEN fi.DepartedOnTime THEN 'Yes' ELSE 'No' END AS DepartedOnTime,
                CASE WHEN fi.ArrivedOnTime THEN 'Yes' ELSE 'No' END AS ArrivedOnTime
            FROM FlightInstance fi
            WHERE fi.FlightNumber = %s AND fi.FlightDate = %s
        """
        return self.db.fetch_all(query, (flight_number, flight_date))

    def get_flights_on_date(self, flight_date):
        """All instances flying on a date, with the schedule times of that weekday."""
        query = """
            SELECT
                fi.FlightInstanceID,
                f.FlightNumber,
                f.DepartureCity,
                f.ArrivalCity,
                s.DepartureTime,
                s.ArrivalTime
            FROM FlightInstance fi
            JOIN Flight f ON fi.FlightNumber = f.FlightNumber
            LEFT JOIN Schedule s
                ON s.FlightNumber = f.FlightNumber AND s.DayOfWeek = DAYNAME(fi.FlightDate)
            WHERE fi.FlightDate = %s
            ORDER BY s.DepartureTime, f.FlightNumber
        """
        return self.db.fetch_all(query, (flight_date,))

    def get_ticket_cost(self, flight_number, flight_date):
        query = """
            SELECT FlightNumber, FlightDate, TicketCost
            FROM FlightInstance
            WHERE FlightNumber = %s AND FlightDate = %s
        """
        return self.db.fetch_all(query, (flight_number, flight_date))

    def get_available_seats(self, flight_number, flight_date):
        query = """
            SELECT
                FlightInstanceID,
                FlightNumber,
                FlightDate,
                SeatsTotal,
                SeatsSold,
                SeatsTotal - SeatsSold AS SeatsAvailable
            FROM FlightInstance
            WHERE FlightNumber = %s AND FlightDate = %s
        """
        return self.db.fetch_all(query, (flight_number, flight_date))

    # =================================================================
    # Part C: Search
    # =================================================================

    def search_flights(self, departure_city, arrival_city, flight_date):
        """
        Customer search by city pair and date.

        OnTimePercent is the share of all recorded instances of the flight that
        arrived on time; NULLIF keeps a flight without history at NULL instead
        of dividing by zero.
        """
        query = """
            SELECT
                fi.FlightInstanceID,
                f.FlightNumber,
                s.DepartureTime,
                s.ArrivalTime,
                fi.NumOfStops,
                fi.TicketCost,
                (
                    SELECT ROUND(100.0 * SUM(h.ArrivedOnTime) / NULLIF(COUNT(h.FlightInstanceID), 0), 2)
                    FROM FlightInstance h
                    WHERE h.FlightNumber = f.FlightNumber
                ) AS OnTimePercent
            FROM Flight f
            JOIN FlightInstance fi ON fi.FlightNumber = f.FlightNumber
            LEFT JOIN Schedule s
                ON s.FlightNumber = f.FlightNumber AND s.DayOfWeek = DAYNAME(fi.FlightDate)
            WHERE f.DepartureCity = %s AND f.ArrivalCity = %s AND fi.FlightDate = %s
            ORDER BY s.DepartureTime, f.FlightNumber
        """
        return self.db.fetch_all(query, (departure_city, arrival_city, flight_date))
