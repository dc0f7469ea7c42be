from collections import deque

from aocsolver.y2017_day18 import Program, solve_part1, solve_part2

SOUNDS = [
    "set a 1",
    "add a 2",
    "mul a a",
    "mod a 5",
    "snd a",
    "set a 0",
    "rcv a",
    "jgz a -1",
    "set a 1",
    "jgz a -2",
]

MESSAGES = ["snd 1", "snd 2", "snd p", "rcv a", "rcv b", "rcv c", "rcv d"]


def test_example_part1():
    assert solve_part1(SOUNDS) == 4


def test_example_part2():
    assert solve_part2(MESSAGES) == 3


def test_mod_keeps_sign_of_dividend():
    assert solve_part1(["set a -7", "mod a 3", "snd a", "rcv a"]) == -1


def test_part1_without_recover_returns_zero():
    assert solve_part1(["set a 5", "snd a"]) == 0


def test_program_sends_to_outbox_and_blocks():
    outbox = deque()
    program = Program(["snd 7", "snd p", "rcv a"], 1, outbox=outbox)
    program.run()
    assert list(outbox) == [7, 1]
    assert program.sent == len(outbox)
    assert not program.terminated
    assert program.run() == 0


def test_program_resumes_after_receiving():
    inbox = deque()
    program = Program(["rcv a", "add a 1"], 0, inbox=inbox)
    assert program.run() == 0
    inbox.append(9)
    program.run()
    assert program.registers["a"] == 9 + 1
    assert program.terminated


def test_program_id_sets_register_p():
    assert Program([], 5).registers == {"p": 5}