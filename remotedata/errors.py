"""Errors in user input. Failed fetches are not errors in this sense: they
are represented by the `Failure` variant."""

from dataclasses import dataclass
from typing import Any


class UserError(Exception):
    def __str__(self):
        return "Unknown user error."


@dataclass
class HelpfulUserError(UserError):
    msg: str

    def __str__(self):
        return self.msg


@dataclass
class InputError(UserError):
    expected: Any
    got: Any

    def __str__(self):
        expected = getattr(self.expected, "__name__", self.expected)
        return f"Expected {expected}, got: {self.got!r}"
