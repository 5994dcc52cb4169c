"""
Module type whose selected attributes cannot be rebound or deleted.

Usage:
    __frozen__ = frozenset({"AU", "PI"})
    sys.modules[__name__].__class__ = ReadOnlyModule
"""
import types

from astroconst.core.exceptions import FrozenConstantError

__all__ = ["ReadOnlyModule"]


class ReadOnlyModule(types.ModuleType):
    """ModuleType that refuses writes to the names listed in ``__frozen__``."""

    def __setattr__(self, name, value):
        if name in self.__dict__.get("__frozen__", ()):
            raise FrozenConstantError(name)
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if name in self.__dict__.get("__frozen__", ()):
            raise FrozenConstantError(name)
        super().__delattr__(name)
