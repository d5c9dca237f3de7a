class StatisticsDAO:
    """
    Data Access Object for Flight Reporting.

    Aggregates FlightInstance history for the manager reports:
    1.  **Flight Statistics**: Days flown on time and tickets sold vs. unsold over a date range.
    2.  **On-Time Rate**: Departure and arrival punctuality as percentages.

    Percentages are computed by the store and rounded to 2 decimals. Every
    division goes through NULLIF(..., 0), so a flight with no instances yields
    NULL rather than a division error.
    """

    def __init__(self, db_manager):
        self.db = db_manager

    def get_flight_statistics(self, flight_number, start_date, end_date):
        """
        Report: Flight statistics for a date range.
        Returns one aggregate row; Instances is '0' when nothing flew in the range.
        """
        query = """
            SELECT
                COUNT(*) AS Instances,
                COALESCE(SUM(DepartedOnTime), 0) AS DaysDepartedOnTime,
                COALESCE(SUM(ArrivedOnTime), 0) AS DaysArrivedOnTime,
                COALESCE(SUM(SeatsSold), 0) AS TicketsSold,
                COALESCE(SUM(SeatsTotal - SeatsSold), 0) AS TicketsUnsold
            FROM FlightInstance
            WHERE FlightNumber = %s AND FlightDate BETWEEN %s AND %s
        """
        return self.db.fetch_one(query, (flight_number, start_date, end_date))

    def get_on_time_rate(self, flight_number):
        """
        KPI: On-time percentage of a flight over its whole history.
        Returns None for an unknown flight number.
        """
        query = """
            SELECT
                f.FlightNumber,
                COUNT(fi.FlightInstanceID) AS Instances,
                ROUND(100.0 * SUM(fi.DepartedOnTime) / NULLIF(COUNT(fi.FlightInstanceID), 0), 2)
                    AS DepartedOnTimePercent,
                ROUND(100.0 * SUM(fi.ArrivedOnTime) / NULLIF(COUNT(fi.FlightInstanceID), 0), 2)
                    AS ArrivedOnTimePercent
            FROM Flight f
            LEFT JOIN FlightInstance fi ON fi.FlightNumber = f.FlightNumber
            WHERE f.FlightNumber = %s
            GROUP BY f.FlightNumber
        """
        return self.db.fetch_one(query, (flight_number,))
