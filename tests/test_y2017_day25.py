import pytest

from aocsolver.y2017_day25 import (
    Action,
    Blueprint,
    parse_program,
    run_blueprint,
    solve_part1,
)

EXAMPLE = """Begin in state A.
Perform a diagnostic checksum after 6 steps.

In state A:
  If the current value is 0:
    - Write the value 1.
    - Move one slot to the right.
    - Continue with state B.
  If the current value is 1:
    - Write the value 0.
    - Move one slot to the left.
    - Continue with state B.

In state B:
  If the current value is 0:
    - Write the value 1.
    - Move one slot to the left.
    - Continue with state A.
  If the current value is 1:
    - Write the value 1.
    - Move one slot to the right.
    - Continue with state A.""".split("\n")


def test_parse_program():
    blueprint = parse_program(EXAMPLE)
    assert blueprint.start == "A"
    assert blueprint.steps == 6
    assert blueprint.states["A"][0] == Action(write=1, move=1, next_state="B")
    assert blueprint.states["A"][1] == Action(write=0, move=-1, next_state="B")
    assert blueprint.states["B"][0] == Action(write=1, move=-1, next_state="A")
    assert set(blueprint.states) == {"A", "B"}


def test_example_checksum():
    assert solve_part1(EXAMPLE) == 3


def test_zero_steps_leave_blank_tape():
    blueprint = parse_program(EXAMPLE)
    empty = Blueprint(start=blueprint.start, steps=0, states=blueprint.states)
    assert run_blueprint(empty) == 0


def test_single_write_step():
    blueprint = parse_program(EXAMPLE)
    one = Blueprint(start="A", steps=1, states=blueprint.states)
    assert run_blueprint(one) == 1


def test_incomplete_state_is_rejected():
    with pytest.raises(ValueError):
        parse_program(EXAMPLE[:8])