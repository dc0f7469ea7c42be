import pytest

from aocsolver.y2018_day10 import Point, message_frames, parse_input, render


def test_parse_input():
    points = parse_input(["position=< 9,  1> velocity=< 0,  2>", "position=<-3, 11> velocity=< 1, -2>"])
    assert points == [Point((9, 1), (0, 2)), Point((-3, 11), (1, -2))]


def test_parse_input_rejects_garbage():
    with pytest.raises(ValueError):
        parse_input(["position=< 1, 2>"])


def test_move():
    point = Point((9, 1), (0, 2))
    point.move()
    point.move()
    assert point.position == (9, 5)
    assert point.velocity == (0, 2)


def test_render_single_point():
    assert render([Point((5, 5), (0, 0))]) == "█\n"


def test_render_gap_and_rows():
    points = [Point((0, 0), (0, 0)), Point((2, 0), (0, 0)), Point((1, 1), (0, 0))]
    assert render(points) == "█ █\n █ \n"


def test_render_spread_out_points_is_empty():
    assert render([Point((0, 0), (0, 0)), Point((200, 0), (0, 0))]) == ""
    assert render([]) == ""


def test_message_frames_appear_when_points_converge():
    lines = ["position=<0, 0> velocity=<1, 0>", "position=<300, 0> velocity=<-1, 0>"]
    frames = list(message_frames(lines, limit=102))
    assert [second for second, _ in frames] == [100, 101]
    assert all(frame.count("█") == 2 for _, frame in frames)