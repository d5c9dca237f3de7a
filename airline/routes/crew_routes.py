from airline.models.entities.user import Role
from airline.routes.blueprint import Blueprint
from airline.routes.prompts import ask_date, ask_date_range, ask_id, ask_plane_id
from airline.utils import validators

pilot_bp = Blueprint('pilot', role=Role.PILOT)
technician_bp = Blueprint('technician', role=Role.TECHNICIAN)


def ask_repair_code(console):
    return console.ask("Please Enter The Repair Code: ", validators.require_text('Repair code')).upper()


# --- Pilots ---
@pilot_bp.command(15, "Maintenance Request")
def maintenance_request(ctx):
    plane_id = ask_plane_id(ctx.console)
    repair_code = ask_repair_code(ctx.console)
    request_id = ctx.services.maintenance.file_maintenance_request(ctx.session.user_id, plane_id, repair_code)
    ctx.console.say(f"Maintenance request {request_id} filed for plane {plane_id}.")


# --- Technicians ---
@technician_bp.command(16, "View Plane Repairs in Date Range")
def view_plane_repairs(ctx):
    plane_id = ask_plane_id(ctx.console)
    start_date, end_date = ask_date_range(ctx.console)
    rows = ctx.services.maintenance.get_repairs_for_plane(plane_id, start_date, end_date)
    ctx.console.print_rows(rows, f"No repairs for plane {plane_id} between {start_date} and {end_date}.")


@technician_bp.command(17, "View Maintenance Requests by Pilot")
def view_requests_by_pilot(ctx):
    pilot_id = ask_id(ctx.console, 'Pilot ID')
    rows = ctx.services.maintenance.get_requests_by_pilot(pilot_id)
    ctx.console.print_rows(rows, f"No maintenance requests filed by pilot {pilot_id}.")


@technician_bp.command(18, "Log a Repair")
def log_repair(ctx):
    plane_id = ask_plane_id(ctx.console)
    repair_code = ask_repair_code(ctx.console)
    repair_date = ask_date(ctx.console, 'Repair Date')
    repair_id = ctx.services.maintenance.log_repair(ctx.session.user_id, plane_id, repair_code, repair_date)
    ctx.console.say(f"Repair {repair_id} logged for plane {plane_id}.")
