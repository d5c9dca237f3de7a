from airline.exceptions import NotFoundError
from airline.models.entities.user import Role
from airline.routes.blueprint import Blueprint
from airline.routes.prompts import ask_date, ask_flight_number, ask_id
from airline.utils import validators

booking_bp = Blueprint('booking', role=Role.CUSTOMER)


# --- Search ---
@booking_bp.command(11, "Search Flights")
def search_flights(ctx):
    console = ctx.console
    departure_city = console.ask("Please Enter The Departure City: ", validators.require_text('Departure city'))
    arrival_city = console.ask("Please Enter The Arrival City: ", validators.require_text('Arrival city'))
    flight_date = ask_date(console)
    rows = ctx.services.flights.search_flights(departure_city, arrival_city, flight_date)
    console.print_rows(rows, f"No flights from {departure_city} to {arrival_city} on {flight_date}.")


@booking_bp.command(12, "View Ticket Cost")
def view_ticket_cost(ctx):
    flight_number = ask_flight_number(ctx.console)
    flight_date = ask_date(ctx.console)
    rows = ctx.services.flights.get_ticket_cost(flight_number, flight_date)
    ctx.console.print_rows(rows, f"Flight {flight_number} does not fly on {flight_date}.")


@booking_bp.command(13, "View Available Seats")
def view_available_seats(ctx):
    flight_number = ask_flight_number(ctx.console)
    flight_date = ask_date(ctx.console)
    rows = ctx.services.flights.get_available_seats(flight_number, flight_date)
    ctx.console.print_rows(rows, f"Flight {flight_number} does not fly on {flight_date}.")


# --- Booking ---
@booking_bp.command(14, "Make a Reservation")
def make_reservation(ctx):
    console = ctx.console
    flight_instance_id = ask_id(console, 'Flight Instance ID')

    flight = ctx.services.booking.get_flight_for_booking(flight_instance_id)
    if not flight:
        raise NotFoundError(f"Flight instance {flight_instance_id} does not exist.")
    if flight.is_full:
        console.say(f"Flight {flight.flight_number} on {flight.flight_date} is sold out.")
    else:
        console.say(f"Flight {flight.flight_number} on {flight.flight_date}: "
                    f"{flight.seats_available} seat(s) left, ticket cost {flight.ticket_cost}.")

    reservation = ctx.services.booking.make_reservation(ctx.session.user_id, flight_instance_id)
    if reservation.is_waitlisted:
        console.say(f"The flight is full. You have been added to the waitlist "
                    f"(reservation {reservation.reservation_id}).")
    else:
        console.say(f"Reservation {reservation.reservation_id} confirmed.")
