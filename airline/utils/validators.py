"""
Field validators for console input.

Each validator takes the raw (stripped) text and returns the normalized
value, or raises ValidationError with a message fit for the user.
"""
import re
from datetime import datetime

from airline.exceptions import ValidationError
from airline.models.entities.user import Role

DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
PHONE_PATTERN = re.compile(r'[0-9()+\-.x ]{7,30}')
ZIP_PATTERN = re.compile(r'[0-9]{5}')
INT_PATTERN = re.compile(r'[+-]?[0-9]+')

PASSWORD_MIN_LENGTH = 6
PASSWORD_SPECIAL_CHARACTERS = '!@#$%^&*()-_=+[]{};:,.<>?/~'


def require_text(field_name):
    def validate(value):
        value = (value or '').strip()
        if not value:
            raise ValidationError(f"{field_name} cannot be empty.")
        return value
    return validate


def validate_gender(value):
    gender = (value or '').strip().upper()
    if gender not in ('M', 'F'):
        raise ValidationError("This is an Invalid gender. Please enter M or F.")
    return gender


def validate_date(value):
    """Strict YYYY-MM-DD that is also a real calendar date."""
    value = (value or '').strip()
    if not DATE_PATTERN.fullmatch(value):
        raise ValidationError("This is an Invalid date format. Use YYYY-MM-DD.")
    try:
        datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        raise ValidationError(f"{value} is not a valid calendar date.")
    return value


def validate_date_range(start, end):
    # both already validated, so string order is date order
    if start > end:
        raise ValidationError("The start date must not be after the end date.")
    return start, end


def validate_phone(value):
    value = (value or '').strip()
    if not PHONE_PATTERN.fullmatch(value):
        raise ValidationError("This is an Invalid phone number format.")
    return value


def validate_zip(value):
    value = (value or '').strip()
    if not ZIP_PATTERN.fullmatch(value):
        raise ValidationError("The Zipcode must be exactly 5 digits.")
    return value


def validate_password(value):
    value = value or ''
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValidationError(f"The password must be at least {PASSWORD_MIN_LENGTH} characters long.")
    if not any(ch.isupper() for ch in value):
        raise ValidationError("The password must contain at least one uppercase letter.")
    if not any(ch in PASSWORD_SPECIAL_CHARACTERS for ch in value):
        raise ValidationError(
            f"The password must contain at least one special character ({PASSWORD_SPECIAL_CHARACTERS})."
        )
    return value


def validate_role(value):
    try:
        return Role.parse(value)
    except ValueError:
        raise ValidationError("The role must be one of: " + ", ".join(role.value for role in Role))


def validate_int(field_name):
    def validate(value):
        value = (value or '').strip()
        # int() alone would also take '1_000' and non-ASCII digits
        if not INT_PATTERN.fullmatch(value):
            raise ValidationError(f"{field_name} must be a whole number.")
        return int(value)
    return validate
