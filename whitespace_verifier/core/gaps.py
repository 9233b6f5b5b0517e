"""
Gap checkers.

Primitive predicates over token positions. A gap of 1 means the two tokens
are adjacent, so a gap of ``n + 1`` encodes ``n`` literal spaces.
"""

from .position import Token


def same_line(a: Token, b: Token) -> bool:
    return a.line == b.line


def different_lines(a: Token, b: Token) -> bool:
    return a.line != b.line


def gap(before: Token, after: Token) -> int:
    """Column distance from the end of `before` to the start of `after`."""
    return after.start_column - before.last_column


def has_exact_gap(before: Token, after: Token, num_spaces: int) -> bool:
    """
    Return True when `before` and `after` share a line and are NOT separated
    by exactly `num_spaces` spaces.

    Tokens on different lines never produce a violation here; callers that
    need to police line breaks must compare lines themselves.
    """
    return same_line(before, after) and gap(before, after) != num_spaces + 1


def check_left_spaces(left: Token, op: Token, num_spaces: int) -> bool:
    """Spacing violation between `left` and the operator that follows it."""
    return has_exact_gap(left, op, num_spaces)


def check_right_spaces(right: Token, op: Token, num_spaces: int) -> bool:
    """Spacing violation between the operator and `right`, which follows it."""
    return has_exact_gap(op, right, num_spaces)
