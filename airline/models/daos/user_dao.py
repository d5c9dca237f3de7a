from loguru import logger

from airline.models.entities.user import Principal, Role

# Role -> (table, id column) for staff whose IDs must pre-exist
STAFF_TABLES = {
    Role.PILOT: ('Pilot', 'PilotID'),
    Role.TECHNICIAN: ('Technician', 'TechnicianID'),
}


class UserDAO:
    """
    Data Access Object for Accounts (Login rows and Customer records).

    Every account is a ``Login`` row (username, password, role, UserID).
    The UserID points into the role's own table:
    - **Customer**: a new ``Customer`` row, ID = MAX(CustomerID) + 1.
    - **Pilot / Technician**: an existing ``Pilot`` / ``Technician`` row.
    - **Manager**: no table; a synthetic negative ID below every other one.
    """

    def __init__(self, db_manager):
        self.db = db_manager

    # =================================================================
    # Part A: Lookups
    # =================================================================

    def get_login(self, username):
        """Returns the Login row for a username, or None."""
        query = "SELECT Username, Password, Role, UserID FROM Login WHERE Username = %s"
        return self.db.fetch_one(query, (username,))

    def get_principal(self, username, password):
        """Plaintext credential check. Returns a Principal or None."""
        row = self.get_login(username)
        if not row or row['Password'] != password:
            return None

        try:
            role = Role.parse(row['Role'])
        except ValueError:
            logger.warning("Login {} has unknown role {!r}", username, row['Role'])
            return None

        return Principal(username=row['Username'], role=role, user_id=int(row['UserID']))

    def username_exists(self, username):
        query = "SELECT 1 AS found FROM Login WHERE Username = %s"
        return self.db.fetch_one(query, (username,)) is not None

    def staff_member_exists(self, role, staff_id):
        """Checks the Pilot / Technician table for an ID."""
        table, column = STAFF_TABLES[role]
        # table and column come from the closed STAFF_TABLES map, never from input
        query = f"SELECT 1 AS found FROM {table} WHERE {column} = %s"
        return self.db.fetch_one(query, (staff_id,)) is not None

    # =================================================================
    # Part B: Account Creation
    # =================================================================

    def _insert_login(self, username, password, role, user_id):
        query = "INSERT INTO Login (Username, Password, Role, UserID) VALUES (%s, %s, %s, %s)"
        self.db.execute_query(query, (username, password, role.value, user_id))

    def create_customer(self, customer, username, password):
        """
        Inserts a Customer and its Login in a single transaction.

        The new ID is MAX(CustomerID) + 1 (or 1 on an empty table), read with
        FOR UPDATE so InnoDB locks the index tail until commit. A primary key
        collision still surfaces as DuplicateKeyError.
        """
        with self.db.transaction():
            row = self.db.fetch_one("SELECT MAX(CustomerID) AS MaxID FROM Customer FOR UPDATE")
            customer_id = int(row['MaxID']) + 1 if row and row['MaxID'] is not None else 1

            query_customer = """
                INSERT INTO Customer
                (CustomerID, FirstName, LastName, Gender, DOB, Address, Phone, Zip)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
            """
            params_customer = (
                customer_id, customer.first_name, customer.last_name, customer.gender,
                customer.date_of_birth, customer.address, customer.phone, customer.zip_code,
            )
            self.db.execute_query(query_customer, params_customer)
            self._insert_login(username, password, Role.CUSTOMER, customer_id)

        customer.customer_id = customer_id
        return customer_id

    def create_staff_login(self, username, password, role, staff_id):
        """Links a Login to an existing Pilot or Technician."""
        self._insert_login(username, password, role, staff_id)
        return staff_id

    def create_manager_login(self, username, password):
        """
        Managers get a synthetic ID one below the smallest negative UserID,
        or -1 when there is none yet.
        """
        with self.db.transaction():
            row = self.db.fetch_one("SELECT MIN(UserID) AS MinID FROM Login WHERE UserID < 0 FOR UPDATE")
            manager_id = int(row['MinID']) - 1 if row and row['MinID'] is not None else -1
            self._insert_login(username, password, Role.MANAGER, manager_id)
        return manager_id
