"""Stream processing: groups and garbage."""

from __future__ import annotations


def solve(stream: str) -> tuple[int, int]:
    """Total group score and number of non-cancelled garbage characters.

    Raises ValueError on a closing brace with no open group.
    """
    depth = score = garbage = 0
    in_garbage = False
    chars = iter(stream)
    for char in chars:
        if char == "!":
            next(chars, None)
        elif not in_garbage and char == "<":
            in_garbage = True
        elif in_garbage and char == ">":
            in_garbage = False
        elif not in_garbage and char == "{":
            depth += 1
        elif not in_garbage and char == "}":
            if depth == 0:
                raise ValueError("closing brace without an open group")
            score += depth
            depth -= 1
        elif in_garbage:
            garbage += 1
    return score, garbage