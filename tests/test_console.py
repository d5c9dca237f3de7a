import pytest

from airline.classes.console import EndOfInput
from airline.utils.validators import validate_zip

from helpers import output_of, scripted_console


def test_read_choice_reprompts_on_non_numeric_input():
    console = scripted_console('abc', '', '7')
    assert console.read_choice() == 7
    assert output_of(console).count('Your input is invalid!') == 2


def test_read_line_raises_at_end_of_input():
    console = scripted_console()
    with pytest.raises(EndOfInput):
        console.read_line('> ')


def test_ask_reprompts_until_validator_passes():
    console = scripted_console('9252', '925211', '92521')
    assert console.ask('Zip: ', validate_zip) == '92521'
    assert output_of(console).count('The Zipcode must be exactly 5 digits.') == 2


def test_print_rows_prints_header_and_null_values():
    console = scripted_console()
    rows = [
        {'PlaneID': 'PL001', 'LastRepairDate': '2025-03-14'},
        {'PlaneID': 'PL002', 'LastRepairDate': None},
    ]
    assert console.print_rows(rows, 'nothing') == 2
    lines = output_of(console).splitlines()
    assert lines == ['PlaneID\tLastRepairDate', 'PL001\t2025-03-14', 'PL002\tnull']


def test_print_rows_reports_empty_result():
    console = scripted_console()
    assert console.print_rows([], 'No plane found.') == 0
    assert output_of(console) == 'No plane found.\n'
