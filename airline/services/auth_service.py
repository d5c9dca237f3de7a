from loguru import logger

from airline.exceptions import ValidationError
from airline.models.daos.user_dao import UserDAO
from airline.models.entities.user import Customer, Role
from airline.utils import validators


class AuthService:
    """
    Service Layer for Authentication and Account Registration.
    """
    def __init__(self, db_manager):
        self.user_dao = UserDAO(db_manager)

    def login(self, username, password):
        """Authenticates any role. Returns a Principal or None."""
        principal = self.user_dao.get_principal(username, password)
        if principal:
            logger.info("Login succeeded for {} ({})", username, principal.role.value)
        else:
            logger.info("Login failed for {}", username)
        return principal

    def register(self, role, username, password, form_data=None):
        """
        Registers a new account and returns its UserID.

        Expected form_data keys:
        - Customer: first_name, last_name, gender, dob, address, phone, zip
        - Pilot / Technician: staff_id (must already exist in Pilot / Technician)
        - Manager: none

        Every field is validated before anything is written.
        """
        if not isinstance(role, Role):
            role = validators.validate_role(role)
        username = validators.require_text('Username')(username)
        password = validators.validate_password(password)
        form_data = form_data or {}

        if role is Role.CUSTOMER:
            customer = self.build_customer(form_data)
            self._ensure_username_free(username)
            user_id = self.user_dao.create_customer(customer, username, password)

        elif role in (Role.PILOT, Role.TECHNICIAN):
            staff_id = validators.validate_int(f"{role.value} ID")(str(form_data.get('staff_id', '')))
            if not self.user_dao.staff_member_exists(role, staff_id):
                raise ValidationError(f"unknown ID: no {role.value} with ID {staff_id}")
            self._ensure_username_free(username)
            user_id = self.user_dao.create_staff_login(username, password, role, staff_id)

        else:
            self._ensure_username_free(username)
            user_id = self.user_dao.create_manager_login(username, password)

        logger.info("Registered {} account {} with UserID {}", role.value, username, user_id)
        return user_id

    def _ensure_username_free(self, username):
        if self.user_dao.username_exists(username):
            raise ValidationError(f"The username {username} is already taken.")

    @staticmethod
    def build_customer(form_data):
        """Validates raw customer fields into a Customer (no ID yet)."""
        return Customer(
            first_name=validators.require_text('First name')(form_data.get('first_name')),
            last_name=validators.require_text('Last name')(form_data.get('last_name')),
            gender=validators.validate_gender(form_data.get('gender')),
            dob=validators.validate_date(form_data.get('dob')),
            address=validators.require_text('Address')(form_data.get('address')),
            phone=validators.validate_phone(form_data.get('phone')),
            zip_code=validators.validate_zip(form_data.get('zip')),
        )
