"""
File: flight_service.py
Purpose: Service Layer for Flight Reports (Schedules, Daily Operations, Statistics, Search).
"""
from airline.exceptions import NotFoundError
from airline.models.daos.flight_dao import FlightDAO
from airline.models.daos.statistics_dao import StatisticsDAO
from airline.utils.validators import validate_date_range

WEEKDAYS = ('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday')
WEEKDAY_ORDER = {day: index for index, day in enumerate(WEEKDAYS)}

NO_DATA = 'no data'


def sort_by_weekday(rows, key='DayOfWeek'):
    """Monday-to-Sunday ordering; unknown day names sink to the end."""
    def ordinal(row):
        day = (row.get(key) or '').strip().capitalize()
        return WEEKDAY_ORDER.get(day, len(WEEKDAYS))
    return sorted(rows, key=ordinal)


class FlightService:
    """
    Read-only flight reporting for managers and customers.
    """
    def __init__(self, db_manager):
        self.flight_dao = FlightDAO(db_manager)
        self.stats_dao = StatisticsDAO(db_manager)

    # --- Schedules & Daily Operations ---
    def get_weekly_schedule(self, flight_number):
        return sort_by_weekday(self.flight_dao.get_weekly_schedule(flight_number))

    def get_flight_status(self, flight_number, flight_date):
        return self.flight_dao.get_flight_status(flight_number, flight_date)

    def get_flights_on_date(self, flight_date):
        return self.flight_dao.get_flights_on_date(flight_date)

    # --- Statistics ---
    def get_flight_statistics(self, flight_number, start_date, end_date):
        """One aggregate row, or nothing when the flight did not fly in the range."""
        validate_date_range(start_date, end_date)
        row = self.stats_dao.get_flight_statistics(flight_number, start_date, end_date)
        if not row or int(row['Instances'] or 0) == 0:
            return []
        return [row]

    def get_on_time_rate(self, flight_number):
        """
        On-time percentages for a flight.
        A flight without recorded instances reports NO_DATA instead of a number.
        """
        row = self.stats_dao.get_on_time_rate(flight_number)
        if row is None:
            raise NotFoundError(f"Flight {flight_number} does not exist.")

        if int(row['Instances'] or 0) == 0:
            row['DepartedOnTimePercent'] = NO_DATA
            row['ArrivedOnTimePercent'] = NO_DATA
        return [row]

    # --- Customer Search ---
    def search_flights(self, departure_city, arrival_city, flight_date):
        rows = self.flight_dao.search_flights(departure_city, arrival_city, flight_date)
        for row in rows:
            if row.get('OnTimePercent') is None:
                row['OnTimePercent'] = NO_DATA
        return rows

    def get_ticket_cost(self, flight_number, flight_date):
        return self.flight_dao.get_ticket_cost(flight_number, flight_date)

    def get_available_seats(self, flight_number, flight_date):
        return self.flight_dao.get_available_seats(flight_number, flight_date)
