class FlightInstance:
    """
    Data Transfer Object for a dated occurrence of a Flight.
    """
    def __init__(self, flight_instance_id, flight_number, flight_date, seats_total, seats_sold,
                 num_of_stops=0, ticket_cost=None):
        self.flight_instance_id = flight_instance_id
        self.flight_number = flight_number
        self.flight_date = flight_date
        self.seats_total = seats_total
        self.seats_sold = seats_sold
        self.num_of_stops = num_of_stops
        self.ticket_cost = ticket_cost

    @property
    def seats_available(self):
        return max(self.seats_total - self.seats_sold, 0)

    @property
    def is_full(self):
        return self.seats_sold >= self.seats_total

    @classmethod
    def from_row(cls, row):
        return cls(
            flight_instance_id=int(row['FlightInstanceID']),
            flight_number=row['FlightNumber'],
            flight_date=row['FlightDate'],
            seats_total=int(row['SeatsTotal']),
            seats_sold=int(row['SeatsSold']),
            num_of_stops=int(row['NumOfStops'] or 0),
            ticket_cost=row['TicketCost'],
        )
