"""
astroconst: a single source of truth for physical and astronomical constants.

Usage:
    from astroconst import AU, SOLAR_MASS, GRAVITATIONAL
    from astroconst import get_constant
    get_constant("SOLAR_MASS").relation
"""
import sys

from loguru import logger

from astroconst.core.constants import *  # noqa: F401,F403
from astroconst.core.constants import __all__ as _constants_all
from astroconst.core.constants import VALUES as _VALUES
from astroconst.core.exceptions import AstroConstError, FrozenConstantError, UnknownConstantError
from astroconst.core.version import __version__
from astroconst.utils.readonly import ReadOnlyModule

# Library default: silent until an application (or the CLI) enables it
logger.disable("astroconst")

__all__ = list(_constants_all) + [
    "AstroConstError",
    "FrozenConstantError",
    "UnknownConstantError",
    "__version__",
]

__frozen__ = frozenset(_VALUES) | {"CONSTANTS", "CONSTANTS_DICT", "SYMBOLS", "VALUES", "__frozen__"}
sys.modules[__name__].__class__ = ReadOnlyModule
