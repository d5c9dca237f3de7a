from airline.models.entities.plane import Plane


class PlaneDAO:
    """
    Data Access Object for Planes, Repairs and Maintenance Requests.

    - **Plane**: make, model, manufacture year and last repair date.
    - **Repair**: work logged by a technician (RepairID is AUTO_INCREMENT).
    - **MaintenanceRequest**: work asked for by a pilot (RequestID is AUTO_INCREMENT).
    """

    def __init__(self, db_manager):
        self.db = db_manager

    # =================================================================
    # Part A: Planes
    # =================================================================

    def get_plane(self, plane_id):
        query = "SELECT PlaneID, Make, Model, Year, LastRepairDate FROM Plane WHERE PlaneID = %s"
        row = self.db.fetch_one(query, (plane_id,))
        return Plane.from_row(row) if row else None

    # =================================================================
    # Part B: Repairs
    # =================================================================

    def get_repairs_by_technician(self, technician_id):
        query = """
            SELECT RepairID, PlaneID, RepairCode, RepairDate
            FROM Repair
            WHERE TechnicianID = %s
            ORDER BY RepairDate DESC, RepairID DESC
        """
        return self.db.fetch_all(query, (technician_id,))

    def get_repairs_for_plane(self, plane_id, start_date, end_date):
        query = """
            SELECT RepairDate, RepairCode, RepairID, TechnicianID
            FROM Repair
            WHERE PlaneID = %s AND RepairDate BETWEEN %s AND %s
            ORDER BY RepairDate, RepairID
        """
        return self.db.fetch_all(query, (plane_id, start_date, end_date))

    def insert_repair(self, plane_id, repair_code, repair_date, technician_id):
        """
        Logs a repair and moves Plane.LastRepairDate forward in one transaction.
        Returns the new RepairID.
        """
        with self.db.transaction():
            query_repair = """
                INSERT INTO Repair (PlaneID, RepairCode, RepairDate, TechnicianID)
                VALUES (%s, %s, %s, %s)
            """
            self.db.execute_query(query_repair, (plane_id, repair_code, repair_date, technician_id))
            repair_id = self.db.last_insert_id()

            # a back-dated repair must not move LastRepairDate backwards
            query_plane = """
                UPDATE Plane
                SET LastRepairDate = %s
                WHERE PlaneID = %s AND (LastRepairDate IS NULL OR LastRepairDate < %s)
            """
            self.db.execute_query(query_plane, (repair_date, plane_id, repair_date))
        return repair_id

    # =================================================================
    # Part C: Maintenance Requests
    # =================================================================

    def get_requests_by_pilot(self, pilot_id):
        query = """
            SELECT RequestID, PlaneID, RepairCode, RequestDate
            FROM MaintenanceRequest
            WHERE PilotID = %s
            ORDER BY RequestDate DESC, RequestID DESC
        """
        return self.db.fetch_all(query, (pilot_id,))

    def insert_maintenance_request(self, plane_id, repair_code, request_date, pilot_id):
        query = """
            INSERT INTO MaintenanceRequest (PlaneID, RepairCode, RequestDate, PilotID)
            VALUES (%s, %s, %s, %s)
        """
        self.db.execute_query(query, (plane_id, repair_code, request_date, pilot_id))
        return self.db.last_insert_id()
