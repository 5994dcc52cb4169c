"""
Reusable validators and utilities for astroconst Pydantic models.

Exports:
    - asdict: Model-to-dict converter.
    - finite_value: Field validator (value must be a finite float).
    - valid_units: Field validator (units must be a non-empty string).
"""

__all__ = [
    "asdict",
    "finite_value",
    "valid_units",
]

import math


def asdict(model):
    """
    Return the dictionary representation of a Pydantic model.

    Args:
        model (BaseModel): The Pydantic model instance.

    Returns:
        dict: Dictionary representation of the model.
    """
    return model.model_dump()


def finite_value(cls, v):
    """
    Ensure a field's value is a finite number.

    Args:
        cls: The model class (required by Pydantic validator signature).
        v: The value to validate.

    Returns:
        The validated value as a float.

    Raises:
        ValueError: If the value is NaN or infinite.
    """
    try:
        v = float(v)
    except TypeError:
        raise ValueError(f"Value must be a number, got {type(v).__name__}") from None
    if not math.isfinite(v):
        raise ValueError(f"Value must be finite, got {v}")
    return v


def valid_units(cls, v):
    """
    Ensure a units string is present.

    Args:
        cls: The model class (required by Pydantic validator signature).
        v: The unit string.

    Returns:
        The stripped units string.

    Raises:
        ValueError: If the string is empty.
    """
    v = v.strip()
    if not v:
        raise ValueError("Units must be a non-empty string (use 'dimensionless')")
    return v
