"""Field prompts shared by the menu handlers."""
from airline.exceptions import ValidationError
from airline.utils import validators


def ask_flight_number(console):
    return console.ask("Please Enter The Flight Number: ", validators.require_text('Flight number'))


def ask_plane_id(console):
    return console.ask("Please Enter The Plane ID: ", validators.require_text('Plane ID'))


def ask_date(console, label='Date'):
    return console.ask(f"Please Enter The {label} (YYYY-MM-DD): ", validators.validate_date)


def ask_date_range(console):
    while True:
        start = ask_date(console, 'Start Date')
        end = ask_date(console, 'End Date')
        try:
            return validators.validate_date_range(start, end)
        except ValidationError as e:
            console.say(e.message)


def ask_id(console, label):
    return console.ask(f"Please Enter The {label}: ", validators.validate_int(label))
