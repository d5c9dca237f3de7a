from datetime import date

from loguru import logger

from airline.exceptions import NotFoundError
from airline.models.daos.plane_dao import PlaneDAO
from airline.utils.validators import validate_date_range


class MaintenanceService:
    """
    Service Layer for Plane Maintenance (Plane Info, Repairs, Pilot Requests).
    """
    def __init__(self, db_manager, today=date.today):
        self.plane_dao = PlaneDAO(db_manager)
        self.today = today

    def _require_plane(self, plane_id):
        plane = self.plane_dao.get_plane(plane_id)
        if not plane:
            raise NotFoundError(f"Plane {plane_id} does not exist.")
        return plane

    # --- Reports ---
    def get_plane_info(self, plane_id):
        """Make, model, age in years and last repair date of a plane."""
        plane = self.plane_dao.get_plane(plane_id)
        if not plane:
            return []
        return [{
            'PlaneID': plane.plane_id,
            'Make': plane.make,
            'Model': plane.model,
            'Age': str(plane.age(self.today().year)),
            'LastRepairDate': plane.last_repair_date,
        }]

    def get_repairs_by_technician(self, technician_id):
        return self.plane_dao.get_repairs_by_technician(technician_id)

    def get_repairs_for_plane(self, plane_id, start_date, end_date):
        validate_date_range(start_date, end_date)
        return self.plane_dao.get_repairs_for_plane(plane_id, start_date, end_date)

    def get_requests_by_pilot(self, pilot_id):
        return self.plane_dao.get_requests_by_pilot(pilot_id)

    # --- Workflows ---
    def file_maintenance_request(self, pilot_id, plane_id, repair_code):
        """Records a pilot's request dated today. Returns the RequestID."""
        self._require_plane(plane_id)
        request_id = self.plane_dao.insert_maintenance_request(
            plane_id, repair_code, self.today().isoformat(), pilot_id
        )
        logger.info("Pilot {} filed maintenance request {} for plane {}", pilot_id, request_id, plane_id)
        return request_id

    def log_repair(self, technician_id, plane_id, repair_code, repair_date):
        """Records a repair by a technician. Returns the RepairID."""
        self._require_plane(plane_id)
        repair_id = self.plane_dao.insert_repair(plane_id, repair_code, repair_date, technician_id)
        logger.info("Technician {} logged repair {} on plane {}", technician_id, repair_id, plane_id)
        return repair_id
