from unittest.mock import MagicMock

import pytest

from airline.exceptions import NotFoundError, ValidationError
from airline.services.flight_service import NO_DATA, FlightService, sort_by_weekday


@pytest.fixture
def service(mock_db):
    service = FlightService(mock_db)
    service.flight_dao = MagicMock()
    service.stats_dao = MagicMock()
    return service


def test_schedule_is_ordered_monday_to_sunday(service):
    service.flight_dao.get_weekly_schedule.return_value = [
        {'DayOfWeek': 'Friday', 'DepartureTime': '08:30:00'},
        {'DayOfWeek': 'Monday', 'DepartureTime': '08:30:00'},
        {'DayOfWeek': 'Wednesday', 'DepartureTime': '17:45:00'},
    ]
    days = [row['DayOfWeek'] for row in service.get_weekly_schedule('F100')]
    assert days == ['Monday', 'Wednesday', 'Friday']


def test_weekday_sort_is_not_lexical():
    rows = [{'DayOfWeek': day} for day in ('Sunday', 'saturday', 'Thursday', 'Tuesday', 'Monday')]
    assert [row['DayOfWeek'] for row in sort_by_weekday(rows)] == [
        'Monday', 'Tuesday', 'Thursday', 'saturday', 'Sunday'
    ]


class TestOnTimeRate:
    def test_flight_without_instances_reports_no_data(self, service):
        service.stats_dao.get_on_time_rate.return_value = {
            'FlightNumber': 'F300', 'Instances': '0',
            'DepartedOnTimePercent': None, 'ArrivedOnTimePercent': None,
        }
        [row] = service.get_on_time_rate('F300')
        assert row['DepartedOnTimePercent'] == NO_DATA
        assert row['ArrivedOnTimePercent'] == NO_DATA

    def test_percentages_pass_through(self, service):
        service.stats_dao.get_on_time_rate.return_value = {
            'FlightNumber': 'F100', 'Instances': '3',
            'DepartedOnTimePercent': '66.67', 'ArrivedOnTimePercent': '66.67',
        }
        assert service.get_on_time_rate('F100')[0]['ArrivedOnTimePercent'] == '66.67'

    def test_unknown_flight_is_not_found(self, service):
        service.stats_dao.get_on_time_rate.return_value = None
        with pytest.raises(NotFoundError):
            service.get_on_time_rate('F999')


class TestFlightStatistics:
    def test_empty_range_returns_no_rows(self, service):
        service.stats_dao.get_flight_statistics.return_value = {'Instances': '0', 'TicketsSold': '0'}
        assert service.get_flight_statistics('F100', '2024-01-01', '2024-01-31') == []

    def test_aggregate_row_is_returned(self, service):
        row = {'Instances': '3', 'TicketsSold': '415', 'TicketsUnsold': '65'}
        service.stats_dao.get_flight_statistics.return_value = row
        assert service.get_flight_statistics('F100', '2025-06-01', '2025-06-30') == [row]

    def test_reversed_range_is_rejected_before_querying(self, service):
        with pytest.raises(ValidationError):
            service.get_flight_statistics('F100', '2025-06-30', '2025-06-01')
        service.stats_dao.get_flight_statistics.assert_not_called()


def test_search_marks_flights_without_history(service):
    service.flight_dao.search_flights.return_value = [
        {'FlightNumber': 'F100', 'OnTimePercent': '66.67'},
        {'FlightNumber': 'F101', 'OnTimePercent': None},
    ]
    rows = service.search_flights('Los Angeles', 'Seattle', '2025-06-02')
    assert [row['OnTimePercent'] for row in rows] == ['66.67', NO_DATA]
