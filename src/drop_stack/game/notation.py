"""Compact placement codes: a shape letter followed by a column digit.

A line such as ``"I0,I4,Q8"`` is a comma-separated sequence of such codes.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .errors import InvalidToken
from .shapes import ShapeType


Move = Tuple[ShapeType, int]


def parse_token(token: str) -> Move:
    code = token.strip()
    if len(code) != 2:
        raise InvalidToken(token, "expected a shape letter and a column digit")
    letter, digit = code
    try:
        kind = ShapeType.from_letter(letter)
    except InvalidToken:
        raise InvalidToken(token, f"unknown shape {letter!r}") from None
    if not ("0" <= digit <= "9"):
        raise InvalidToken(token, "column must be a decimal digit")
    return kind, int(digit)


def parse_line(line: str) -> List[Move]:
    return [parse_token(token) for token in line.strip().split(",")]


def format_placements(moves: Iterable[Move]) -> str:
    return ",".join(f"{ShapeType(kind).name}{int(column)}" for kind, column in moves)
