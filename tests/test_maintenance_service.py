from datetime import date
from unittest.mock import MagicMock

import pytest

from airline.exceptions import NotFoundError, ValidationError
from airline.models.entities.plane import Plane
from airline.services.maintenance_service import MaintenanceService


@pytest.fixture
def service(mock_db):
    service = MaintenanceService(mock_db, today=lambda: date(2026, 10, 18))
    service.plane_dao = MagicMock()
    return service


def test_plane_info_reports_age(service):
    service.plane_dao.get_plane.return_value = Plane('PL001', 'Boeing', '737-800', 2012, '2025-03-14')
    [row] = service.get_plane_info('PL001')
    assert row == {
        'PlaneID': 'PL001', 'Make': 'Boeing', 'Model': '737-800', 'Age': '14', 'LastRepairDate': '2025-03-14',
    }


def test_plane_info_for_unknown_plane_is_empty(service):
    service.plane_dao.get_plane.return_value = None
    assert service.get_plane_info('NOPE') == []


def test_maintenance_request_is_dated_today(service):
    service.plane_dao.get_plane.return_value = Plane('PL002', 'Airbus', 'A320neo', 2019)
    service.plane_dao.insert_maintenance_request.return_value = 5

    assert service.file_maintenance_request(pilot_id=1, plane_id='PL002', repair_code='HYD2') == 5
    service.plane_dao.insert_maintenance_request.assert_called_once_with('PL002', 'HYD2', '2026-10-18', 1)


def test_requests_and_repairs_need_an_existing_plane(service):
    service.plane_dao.get_plane.return_value = None
    with pytest.raises(NotFoundError):
        service.file_maintenance_request(1, 'NOPE', 'ENG1')
    with pytest.raises(NotFoundError):
        service.log_repair(1, 'NOPE', 'ENG1', '2026-10-01')
    service.plane_dao.insert_maintenance_request.assert_not_called()
    service.plane_dao.insert_repair.assert_not_called()


def test_log_repair(service):
    service.plane_dao.get_plane.return_value = Plane('PL003', 'Embraer', 'E175', 2008)
    service.plane_dao.insert_repair.return_value = 9

    assert service.log_repair(2, 'PL003', 'ENG1', '2026-10-01') == 9
    service.plane_dao.insert_repair.assert_called_once_with('PL003', 'ENG1', '2026-10-01', 2)


def test_repairs_for_plane_checks_range(service):
    with pytest.raises(ValidationError):
        service.get_repairs_for_plane('PL001', '2025-12-31', '2025-01-01')
    service.plane_dao.get_repairs_for_plane.assert_not_called()
