from airline.models.entities.user import Role
from airline.routes.blueprint import Blueprint
from airline.utils import validators

# Logged-out menu (role=None)
auth_bp = Blueprint('auth')


# --- Register ---
@auth_bp.command(1, "Create user")
def create_user(ctx):
    console = ctx.console
    role = console.ask("Please Enter Your Role (Customer/Pilot/Technician/Manager): ", validators.validate_role)

    form_data = {}
    if role is Role.CUSTOMER:
        form_data['first_name'] = console.ask("Please Enter Your First Name: ", validators.require_text('First name'))
        form_data['last_name'] = console.ask("Please Enter Your Last Name: ", validators.require_text('Last name'))
        form_data['gender'] = console.ask("Please Enter Your Gender (M/F): ", validators.validate_gender)
        form_data['dob'] = console.ask("Please Enter DOB (YYYY-MM-DD): ", validators.validate_date)
        form_data['address'] = console.ask("Please Enter Your Address: ", validators.require_text('Address'))
        form_data['phone'] = console.ask("Please Enter Your Phone Number: ", validators.validate_phone)
        form_data['zip'] = console.ask("Please Enter Your Zipcode: ", validators.validate_zip)
    elif role in (Role.PILOT, Role.TECHNICIAN):
        form_data['staff_id'] = console.ask(
            f"Please Enter Your {role.value} ID: ", validators.validate_int(f"{role.value} ID")
        )

    username = console.ask("Please Enter A Username: ", validators.require_text('Username'))
    password = console.ask("Please Enter A Password: ", validators.validate_password)

    user_id = ctx.services.auth.register(role, username, password, form_data)
    console.say(f"User was successfully created! Your {role.value} ID is {user_id}.")


# --- Login ---
@auth_bp.command(2, "Log in")
def log_in(ctx):
    console = ctx.console
    username = console.ask("Please Enter Your Username: ")
    password = console.ask("Please Enter Your Password: ")

    principal = ctx.services.auth.login(username, password)
    if principal:
        ctx.session.start(principal)
        console.say(f"The Login Was Successful! Welcome, {principal.username} ({principal.role.value}).")
    else:
        console.say("The Login Was Not Successful.")
