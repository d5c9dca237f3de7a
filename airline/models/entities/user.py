from enum import Enum


class Role(str, Enum):
    CUSTOMER = 'Customer'
    PILOT = 'Pilot'
    TECHNICIAN = 'Technician'
    MANAGER = 'Manager'

    @classmethod
    def parse(cls, value):
        """Case-insensitive lookup on the canonical names only."""
        text = (value or '').strip().lower()
        for role in cls:
            if role.value.lower() == text:
                return role
        raise ValueError(f"Unknown role: {value!r}")


# --- Principal (authenticated session user) ---
class Principal:
    def __init__(self, username, role, user_id):
        self.username = username
        self.role = role                        # Role member, never a raw string
        self.user_id = user_id                  # CustomerID / PilotID / TechnicianID / negative manager id

    def __repr__(self):
        return f"Principal(username={self.username!r}, role={self.role.value}, user_id={self.user_id})"


# --- Customer Entity ---
class Customer:
    def __init__(self, first_name, last_name, gender, dob, address, phone, zip_code, customer_id=None):
        self.customer_id = customer_id          # CustomerID (PK), assigned on insert
        self.first_name = first_name
        self.last_name = last_name
        self.gender = gender                    # 'M' or 'F'
        self.date_of_birth = dob                # 'YYYY-MM-DD'
        self.address = address
        self.phone = phone
        self.zip_code = zip_code
