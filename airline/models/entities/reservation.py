from enum import Enum


class ReservationStatus(str, Enum):
    RESERVED = 'reserved'
    WAITLISTED = 'waitlisted'


class Reservation:
    def __init__(self, reservation_id, customer_id, flight_instance_id, status):
        self.reservation_id = reservation_id
        self.customer_id = customer_id
        self.flight_instance_id = flight_instance_id
        self.status = status

    @property
    def is_waitlisted(self):
        return self.status is ReservationStatus.WAITLISTED
