from aocsolver.y2017_day04 import is_valid, solve_part1, solve_part2

PART1 = ["aa bb cc dd ee", "aa bb cc dd aa", "aa bb cc dd aaa"]
PART2 = [
    "abcde fghij",
    "abcde xyz ecdab",
    "a ab abc abd abf abj",
    "iiii oiii ooii oooi oooo",
    "oiii ioii iioi iiio",
]


def test_is_valid_examples():
    assert is_valid("aa bb cc dd ee")
    assert not is_valid("aa bb cc dd aa")
    assert is_valid("aa bb cc dd aaa")


def test_anagrams_pass_plain_check():
    assert is_valid("abcde xyz ecdab")


def test_part1_example():
    assert solve_part1(PART1) == 2


def test_part2_example():
    assert solve_part2(PART2) == 3


def test_anagram_rule_is_stricter():
    lines = PART1 + PART2
    assert solve_part2(lines) <= solve_part1(lines)


def test_every_line_valid_when_words_unique():
    lines = ["one two three", "alpha beta", "x"]
    assert solve_part1(lines) == len(lines)
    assert solve_part2(lines) == len(lines)