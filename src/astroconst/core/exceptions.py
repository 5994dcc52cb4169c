"""
Exception hierarchy for astroconst.

Exports:
    - AstroConstError: Base class for every package error.
    - UnknownConstantError: Lookup of a name that is not in the table.
    - FrozenConstantError: Attempt to rebind or delete a constant.
"""

import difflib
from typing import Iterable

__all__ = [
    "AstroConstError",
    "UnknownConstantError",
    "FrozenConstantError",
]


class AstroConstError(Exception):
    """Base class for astroconst errors."""


class UnknownConstantError(AstroConstError, KeyError):
    """Raised when a constant name is not present in the registry."""

    def __init__(self, name: str, known: Iterable[str] = ()):
        self.name = name
        self.suggestions = []
        if isinstance(name, str):
            self.suggestions = difflib.get_close_matches(name, list(known), n=3)
        super().__init__(name)

    def __str__(self) -> str:
        msg = f"Unknown constant: {self.name!r}"
        if self.suggestions:
            msg += f" (did you mean: {', '.join(self.suggestions)}?)"
        return msg


class FrozenConstantError(AstroConstError, AttributeError):
    """Raised when code tries to reassign or delete a constant."""

    def __init__(self, name: str):
        super().__init__(f"Constant {name!r} is read-only")
        # AttributeError.__init__ resets .name
        self.name = name
