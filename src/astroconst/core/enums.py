# astroconst/core/enums.py

from enum import Enum

class ConstantKind(str, Enum):
    """How a value enters the table."""
    PRIMARY = "Primary"  # Literal with an external citation
    DERIVED = "Derived"  # Computed from other entries

class ConstantCategory(str, Enum):
    """Provenance group a constant belongs to."""
    MATHEMATICAL = "Mathematical"
    TIME = "Time Conventions"
    IAU = "IAU Numerical Standards (NSFA)"
    NASA = "NASA Fact Sheets"
    NIST = "NIST CODATA"
    LITERATURE = "Literature Values"

__all__ = [
    "ConstantKind",
    "ConstantCategory",
]
