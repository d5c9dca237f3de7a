from airline.models.entities.user import Role
from airline.routes.blueprint import Blueprint
from airline.routes.prompts import ask_date, ask_date_range, ask_flight_number, ask_id, ask_plane_id
from airline.utils import validators

admin_bp = Blueprint('admin', role=Role.MANAGER)


# --- Flights ---
@admin_bp.command(1, "View Flight Schedule")
def view_flight_schedule(ctx):
    flight_number = ask_flight_number(ctx.console)
    rows = ctx.services.flights.get_weekly_schedule(flight_number)
    ctx.console.print_rows(rows, f"No schedule found for flight {flight_number}.")


@admin_bp.command(2, "View Flight Status")
def view_flight_status(ctx):
    flight_number = ask_flight_number(ctx.console)
    flight_date = ask_date(ctx.console)
    rows = ctx.services.flights.get_flight_status(flight_number, flight_date)
    ctx.console.print_rows(rows, f"Flight {flight_number} did not fly on {flight_date}.")


@admin_bp.command(3, "View Flights of the Day")
def view_flights_of_the_day(ctx):
    flight_date = ask_date(ctx.console)
    rows = ctx.services.flights.get_flights_on_date(flight_date)
    ctx.console.print_rows(rows, f"No flights scheduled on {flight_date}.")


# --- Reservations ---
@admin_bp.command(4, "View Passenger List")
def view_passenger_list(ctx):
    flight_number = ask_flight_number(ctx.console)
    flight_date = ask_date(ctx.console)
    rows = ctx.services.booking.get_passengers(flight_number, flight_date)
    ctx.console.print_rows(rows, f"No reservations for flight {flight_number} on {flight_date}.")


@admin_bp.command(5, "View Traveler Information")
def view_traveler_information(ctx):
    reservation_id = ctx.console.ask(
        "Please Enter The Reservation ID: ", validators.require_text('Reservation ID')
    ).upper()
    rows = ctx.services.booking.get_traveler_info(reservation_id)
    ctx.console.print_rows(rows, f"No reservation found with ID {reservation_id}.")


# --- Fleet ---
@admin_bp.command(6, "View Plane Information")
def view_plane_information(ctx):
    plane_id = ask_plane_id(ctx.console)
    rows = ctx.services.maintenance.get_plane_info(plane_id)
    ctx.console.print_rows(rows, f"No plane found with ID {plane_id}.")


@admin_bp.command(7, "View Repairs by Technician")
def view_repairs_by_technician(ctx):
    technician_id = ask_id(ctx.console, 'Technician ID')
    rows = ctx.services.maintenance.get_repairs_by_technician(technician_id)
    ctx.console.print_rows(rows, f"No repairs recorded for technician {technician_id}.")


@admin_bp.command(8, "View Plane Repairs in Date Range")
def view_plane_repairs(ctx):
    plane_id = ask_plane_id(ctx.console)
    start_date, end_date = ask_date_range(ctx.console)
    rows = ctx.services.maintenance.get_repairs_for_plane(plane_id, start_date, end_date)
    ctx.console.print_rows(rows, f"No repairs for plane {plane_id} between {start_date} and {end_date}.")


# --- Statistics ---
@admin_bp.command(9, "View Flight Statistics")
def view_flight_statistics(ctx):
    flight_number = ask_flight_number(ctx.console)
    start_date, end_date = ask_date_range(ctx.console)
    rows = ctx.services.flights.get_flight_statistics(flight_number, start_date, end_date)
    ctx.console.print_rows(rows, f"Flight {flight_number} has no instances between {start_date} and {end_date}.")


@admin_bp.command(10, "View On-Time Percentage")
def view_on_time_percentage(ctx):
    flight_number = ask_flight_number(ctx.console)
    rows = ctx.services.flights.get_on_time_rate(flight_number)
    ctx.console.print_rows(rows, f"No data for flight {flight_number}.")
