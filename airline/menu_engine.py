"""
File: menu_engine.py
Purpose: Read-choice / dispatch loop with role-gated menus.
"""
from loguru import logger

from airline.classes.console import EndOfInput
from airline.classes.session import Session
from airline.exceptions import AirlineError, NotFoundError, StoreError, ValidationError
from airline.routes.admin_routes import admin_bp
from airline.routes.auth_routes import auth_bp
from airline.routes.booking_routes import booking_bp
from airline.routes.crew_routes import pilot_bp, technician_bp
from airline.services.auth_service import AuthService
from airline.services.booking_service import BookingService
from airline.services.flight_service import FlightService
from airline.services.maintenance_service import MaintenanceService

EXIT_CODE = 9
LOGOUT_CODE = 20

GREETING = (
    "\n\n*******************************************************\n"
    "              User Interface                           \n"
    "*******************************************************\n"
)


class Services:
    """The service layer shared by every handler of a session."""
    def __init__(self, db_manager, isolation_level='READ COMMITTED'):
        self.auth = AuthService(db_manager)
        self.booking = BookingService(db_manager, isolation_level=isolation_level)
        self.flights = FlightService(db_manager)
        self.maintenance = MaintenanceService(db_manager)


class MenuContext:
    """What a handler gets: console, session and services."""
    def __init__(self, console, session, services):
        self.console = console
        self.session = session
        self.services = services


class MenuEngine:
    """
    Two-level menu state machine.

    - **LoggedOut**: logged-out commands plus ``9`` (Exit).
    - **LoggedIn(role)**: that role's commands only, plus ``20`` (Log out).

    Commands are looked up by (role, code), so a code that belongs to another
    role is simply not found and never runs.
    """

    def __init__(self, console, services, session=None):
        self.console = console
        self.services = services
        self.session = session or Session()
        self.context = MenuContext(console, self.session, services)
        self.commands = {}

    def register_blueprint(self, blueprint):
        for command in blueprint.commands:
            reserved = EXIT_CODE if blueprint.role is None else LOGOUT_CODE
            if command.code == reserved:
                raise ValueError(f"Command code {command.code} is reserved")
            key = (blueprint.role, command.code)
            if key in self.commands:
                raise ValueError(f"Command {command.code} already registered for {blueprint.role}")
            self.commands[key] = command

    def commands_for(self, role):
        return sorted(
            (command for (command_role, _), command in self.commands.items() if command_role is role),
            key=lambda command: command.code,
        )

    # =================================================================
    # Loop
    # =================================================================

    def run(self):
        """Runs until Exit is chosen or input ends."""
        self.console.say(GREETING)
        try:
            while True:
                if self.session.is_authenticated:
                    self.user_menu_step()
                elif not self.main_menu_step():
                    break
        except EndOfInput:
            self.console.say()
            logger.info("Input closed, ending session")

    def _show_menu(self, title, commands, closing_line):
        self.console.say(title)
        self.console.say('-' * len(title))
        for command in commands:
            self.console.say(f"{command.code}. {command.label}")
        self.console.say(closing_line)

    def main_menu_step(self):
        """One LoggedOut round. Returns False when the user chose Exit."""
        self._show_menu("MAIN MENU", self.commands_for(None), f"{EXIT_CODE}. < EXIT")
        choice = self.console.read_choice()
        if choice == EXIT_CODE:
            return False
        self.dispatch(None, choice)
        return True

    def user_menu_step(self):
        role = self.session.role
        self._show_menu(f"{role.value.upper()} MENU", self.commands_for(role), f"{LOGOUT_CODE}. Log out")
        choice = self.console.read_choice()
        if choice == LOGOUT_CODE:
            logger.info("{} logged out", self.session.principal.username)
            self.session.end()
            self.console.say("You have been logged out.")
            return
        self.dispatch(role, choice)

    def dispatch(self, role, code):
        """
        Runs the handler registered for (role, code).

        Any error ends only this handler: its message is shown and control
        returns to the menu. End of input still ends the session.
        """
        command = self.commands.get((role, code))
        if command is None:
            self.console.say("Unrecognized choice!")
            return False

        try:
            command.handler(self.context)
        except (ValidationError, NotFoundError) as e:
            self.console.say(e.message)
        except StoreError as e:
            logger.warning("Command {} failed: {}", command.code, e.message)
            self.console.say(f"Error: {e.message}")
        except AirlineError as e:
            logger.warning("Command {} failed: {}", command.code, e.message)
            self.console.say(e.message)
        except EndOfInput:
            raise
        except Exception as e:
            logger.exception("Unexpected error in command {}", command.code)
            self.console.say(f"Error: {e}")
        return True


def build_menu(console, services, session=None):
    engine = MenuEngine(console, services, session)
    for blueprint in (auth_bp, admin_bp, booking_bp, pilot_bp, technician_bp):
        engine.register_blueprint(blueprint)
    return engine
