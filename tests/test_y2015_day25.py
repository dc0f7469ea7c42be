import pytest

from aocsolver.y2015_day25 import MODULUS, MULTIPLIER, parse_input, solve_part1


def _line(row, col):
    return (
        "To continue, please consult the code grid in the manual.  "
        f"Enter the code at row {row}, column {col}."
    )


def test_parse_input_reads_row_and_column():
    assert parse_input([_line(2981, 3075)]) == (2981, 3075)


def test_first_cell_holds_first_code():
    assert solve_part1([_line(1, 1)]) == 20151125


def test_known_cells():
    assert solve_part1([_line(2, 1)]) == 31916031
    assert solve_part1([_line(1, 2)]) == 18749137


@pytest.mark.parametrize("row, col", [(4, 7), (10, 3), (25, 25)])
def test_codes_stay_below_modulus(row, col):
    assert 0 < solve_part1([_line(row, col)]) < MODULUS


def test_invalid_position_raises():
    with pytest.raises(ValueError):
        solve_part1([_line(0, 3)])