"""Tests for the registry helpers in astroconst.core.constants.

Lookups, filtering, dependency-order and relation checks, plus the metadata
validation performed by ConstantInfo.
"""

import math

import pytest
import sympy as sp
from pydantic import ValidationError

from astroconst.core.constants import (
    CONSTANTS,
    ConstantCategory,
    ConstantInfo,
    ConstantKind,
    check_dependency_order,
    find_duplicate_names,
    get_constant,
    get_constants_by_category,
    get_constants_by_kind,
    run_self_test,
    validate_relations,
)
from astroconst.core.exceptions import AstroConstError, UnknownConstantError


def _primary(name, value, **overrides):
    """Return a minimal primary ConstantInfo for ad-hoc tables."""
    fields = {
        "name": name,
        "value": value,
        "category": ConstantCategory.LITERATURE,
    }
    fields.update(overrides)
    return ConstantInfo(**fields)


def _derived(name, value, expr, **overrides):
    return _primary(name, value, kind=ConstantKind.DERIVED, eval_expr=expr, **overrides)


def test_get_constant():
    const = get_constant("SOLAR_MASS")
    assert const.name == "SOLAR_MASS"
    assert const.kind == ConstantKind.DERIVED
    assert const.depends_on == ("GRAVITATIONAL", "GRAVITATIONAL_SOLAR_MASS")
    assert const.units == "kg"


def test_get_constant_unknown_name_suggests_matches():
    with pytest.raises(UnknownConstantError) as excinfo:
        get_constant("SOLAR_MAS")
    err = excinfo.value
    assert isinstance(err, KeyError)
    assert isinstance(err, AstroConstError)
    assert "SOLAR_MASS" in err.suggestions
    assert "did you mean" in str(err)


def test_primary_constants_have_provenance():
    for const in get_constants_by_kind(ConstantKind.PRIMARY):
        if const.category == ConstantCategory.MATHEMATICAL:
            continue
        assert const.source, f"{const.name} has no citation"
        assert const.depends_on == ()


def test_get_constants_by_category():
    nist = get_constants_by_category(ConstantCategory.NIST)
    assert {c.name for c in nist} == {"GAS_CONSTANT", "PROTON_MASS"}
    assert all(c.category == ConstantCategory.NIST for c in nist)


def test_every_category_is_used():
    used = {c.category for c in CONSTANTS}
    assert used == set(ConstantCategory)


def test_solar_mass_loss_rate_unit_left_open():
    const = get_constant("SOLAR_MASS_LOSS_RATE")
    assert const.units.startswith("unspecified")
    assert const.value == 2.3e-14


# --- Self-consistency checks on the shipped table ---

def test_validate_relations_finds_no_errors():
    errors = validate_relations()
    assert not errors, f"Found relation validation errors: {errors}"


def test_dependency_order_holds():
    errors = check_dependency_order()
    assert not errors, f"Found dependency order errors: {errors}"


def test_no_duplicate_names():
    assert find_duplicate_names() == []


def test_run_self_test_passes():
    assert run_self_test() is True


# --- Checks against deliberately broken tables ---

def test_dependency_order_flags_forward_reference():
    table = [
        _derived("DOUBLE", 4.0, 2 * sp.Symbol("BASE")),
        _primary("BASE", 2.0),
    ]
    errors = check_dependency_order(table)
    assert set(errors) == {"DOUBLE"}
    assert "before it is declared" in errors["DOUBLE"]


def test_dependency_order_flags_unknown_reference():
    table = [_derived("DOUBLE", 4.0, 2 * sp.Symbol("NOPE"))]
    errors = check_dependency_order(table)
    assert "unknown constant NOPE" in errors["DOUBLE"]


def test_dependency_order_flags_self_reference():
    table = [_derived("LOOP", 1.0, sp.Symbol("LOOP") + 0)]
    assert "LOOP" in check_dependency_order(table)


def test_validate_relations_flags_stale_value():
    table = [
        _primary("BASE", 2.0),
        _derived("DOUBLE", 4.000001, 2 * sp.Symbol("BASE")),
    ]
    errors = validate_relations(table)
    assert set(errors) == {"DOUBLE"}
    assert "rel_error" in errors["DOUBLE"]


def test_validate_relations_accepts_consistent_table():
    table = [
        _primary("BASE", 3.0),
        _derived("THIRD", 1.0 / 3.0, sp.Symbol("BASE") ** -1),
    ]
    assert validate_relations(table) == {}


def test_validate_relations_reports_missing_dependency():
    table = [_derived("DOUBLE", 4.0, 2 * sp.Symbol("BASE"))]
    errors = validate_relations(table)
    assert errors["DOUBLE"] == "Missing dependencies: BASE"


def test_find_duplicate_names():
    table = [_primary("A", 1.0), _primary("B", 2.0), _primary("A", 3.0)]
    assert find_duplicate_names(table) == ["A"]


# --- ConstantInfo validation ---

def test_derived_requires_expression():
    with pytest.raises(ValidationError, match="has no eval_expr"):
        _primary("BROKEN", 1.0, kind=ConstantKind.DERIVED)


def test_primary_rejects_expression():
    with pytest.raises(ValidationError, match="must not define eval_expr"):
        _primary("BROKEN", 1.0, eval_expr=sp.Symbol("X"))


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, None, "abc"])
def test_value_must_be_finite_number(value):
    with pytest.raises(ValidationError):
        _primary("BROKEN", value)


def test_integer_value_is_stored_as_float():
    const = _primary("COUNT", 86400)
    assert isinstance(const.value, float)


@pytest.mark.parametrize("name", ["2PI", "SOLAR MASS", ""])
def test_name_must_be_identifier(name):
    with pytest.raises(ValidationError):
        _primary(name, 1.0)


def test_units_must_not_be_blank():
    with pytest.raises(ValidationError):
        _primary("BROKEN", 1.0, units="  ")


def test_validate_relations_reports_mismatch_against_zero_value():
    table = [
        _primary("BASE", 3.0),
        _derived("ZERO", 0.0, sp.Symbol("BASE") - 2),
    ]
    errors = validate_relations(table)
    assert set(errors) == {"ZERO"}
    assert "abs_error=1.00e+00" in errors["ZERO"]


def test_validate_relations_accepts_exact_zero():
    table = [
        _primary("BASE", 2.0),
        _derived("ZERO", 0.0, sp.Symbol("BASE") - 2),
    ]
    assert validate_relations(table) == {}


@pytest.mark.parametrize("name", [42, None, ("AU",)])
def test_get_constant_non_string_name(name):
    with pytest.raises(UnknownConstantError) as excinfo:
        get_constant(name)
    assert excinfo.value.suggestions == []
    assert "Unknown constant" in str(excinfo.value)
