"""
Physical and astronomical constants for astrophysics code.

This file is the canonical Single Source of Truth (SSoT) for the numerical
values used by downstream simulations: gravitational parameters, solar and
planetary properties, and a handful of CODATA values. Every entry is a plain
double-precision float, computed once at import and read-only afterwards.

Primary entries are literals with a citation. Derived entries are computed
from entries declared above them and are never re-literaled, so updating an
upstream value updates everything downstream.

Exports:
    - ConstantInfo: Pydantic model for constant metadata.
    - CONSTANTS: The canonical tuple of all constants, in dependency order.
    - CONSTANTS_DICT: Mapping of constant names to ConstantInfo objects.
    - SYMBOLS: Mapping of names to SymPy symbols.
    - VALUES: Mapping of names to float values.
    - All constant names available as read-only module attributes.
"""

# --- Core Imports ---
import math
import sys
from collections import Counter
from types import MappingProxyType
from typing import Dict, Final, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import sympy as sp
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from astroconst.core.enums import ConstantCategory, ConstantKind
from astroconst.core.exceptions import UnknownConstantError
from astroconst.core.logging import logger
from astroconst.core.version import __date__, __version__
from astroconst.utils.readonly import ReadOnlyModule
from astroconst.utils.validators import finite_value, valid_units

# Relative tolerance used when re-evaluating symbolic relations
RELATION_RTOL = 1e-12

# --- Core Data Structures ---

class ConstantInfo(BaseModel):
    """Complete metadata and value for a single constant."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Core identification
    name: str = Field(..., description="Canonical name (used as key)")
    symbol: Optional[sp.Symbol] = Field(None, description="SymPy symbol for analytics")
    latex: Optional[str] = Field(None, description="LaTeX representation")

    # Value and units
    value: float = Field(..., description="Numeric value (double precision)")
    units: str = Field("dimensionless", description="Physical units")

    # Documentation
    description: str = Field("", description="Brief description")
    kind: ConstantKind = Field(ConstantKind.PRIMARY)
    category: ConstantCategory = Field(..., description="Provenance group")

    # Relations and provenance
    relation: Optional[str] = Field(None, description="Human-readable defining relation")
    eval_expr: Optional[sp.Expr] = Field(None, description="Evaluatable SymPy expression")
    source: str = Field("", description="Citation: organization, document, year")
    source_refs: List[str] = Field(default_factory=list, description="DOIs/URLs")
    introduced_in: Optional[str] = Field("1.0.0", description="Version introduced")

    @field_validator("value", mode="before")
    @classmethod
    def value_is_finite(cls, v):
        return finite_value(cls, v)

    @field_validator("units")
    @classmethod
    def units_present(cls, v):
        return valid_units(cls, v)

    @field_validator("name")
    @classmethod
    def name_is_identifier(cls, v):
        if not v.isidentifier():
            raise ValueError(f"Constant name must be a valid identifier, got {v!r}")
        return v

    @model_validator(mode="after")
    def kind_matches_expression(self):
        """Derived entries need an expression; primary entries must not have one."""
        if self.kind == ConstantKind.DERIVED and self.eval_expr is None:
            raise ValueError(f"Derived constant {self.name} has no eval_expr")
        if self.kind == ConstantKind.PRIMARY and self.eval_expr is not None:
            raise ValueError(f"Primary constant {self.name} must not define eval_expr")
        return self

    @property
    def depends_on(self) -> Tuple[str, ...]:
        """Names referenced by ``eval_expr`` (empty for primary constants)."""
        if self.eval_expr is None:
            return ()
        return tuple(sorted(str(s) for s in self.eval_expr.free_symbols))


def _S(name: str) -> sp.Symbol:
    """Registry symbol, with the assumptions shared by every entry."""
    return sp.Symbol(name, positive=True)


# --- Numerical Values ---
# Declaration order is dependency order.

PI: Final[float] = float(np.pi)
TWO_PI: Final[float] = 2. * PI
SECONDS_IN_YEAR: Final[float] = 3.15576e7
SECONDS_IN_DAY: Final[float] = 86400.

# IAU Division I Working Group, Numerical Standards for Fundamental Astronomy
AU: Final[float] = 1.495_978_707_00e11
GRAVITATIONAL: Final[float] = 6.674_28e-11
EARTH_RADIUS: Final[float] = 6.378_136_6e6
GRAVITATIONAL_SOLAR_MASS: Final[float] = 1.327_124_420_99e20
SOLAR_MASS: Final[float] = GRAVITATIONAL_SOLAR_MASS / GRAVITATIONAL
GRAVITATIONAL_EARTH_MASS: Final[float] = 3.986_004_415e14
EARTH_MASS: Final[float] = GRAVITATIONAL_EARTH_MASS / GRAVITATIONAL
MOON_MASS_OVER_EARTH_MASS: Final[float] = 1.230_003_71e-2
MOON_MASS: Final[float] = MOON_MASS_OVER_EARTH_MASS * EARTH_MASS
SOLAR_MASS_OVER_JUPITER_MASS: Final[float] = 1.047_348_644e3
JUPITER_MASS: Final[float] = SOLAR_MASS / SOLAR_MASS_OVER_JUPITER_MASS

# NASA fact sheets
MOON_RADIUS: Final[float] = 1737.4e3
SOLAR_RADIUS: Final[float] = 6.957e8
SOLAR_LUMINOSITY: Final[float] = 382.8  # 1e24 J/s
SOLAR_PERIOD_HR: Final[float] = 609.12
SOLAR_PERIOD: Final[float] = SOLAR_PERIOD_HR / 24.
SOLAR_ANGULAR_VELOCITY: Final[float] = TWO_PI / (SOLAR_PERIOD * SECONDS_IN_DAY)

# NIST
GAS_CONSTANT: Final[float] = 8.314_462_618
PROTON_MASS: Final[float] = 1.672_621_925_95e-27

# Externally sourced
BOLTZMANN_CONST: Final[float] = 1.380_649e-23
ROSSBY_SUN: Final[float] = 1.113
ROSSBY_SATURATION: Final[float] = 0.09
SOLAR_SURFACE_MAGNETIC_FIELD: Final[float] = 2e-4
SOLAR_CORONA_TEMPERATURE: Final[float] = 1.5e06
SOLAR_CORONA_DENSITY: Final[float] = 7.25e13
SOLAR_MASS_LOSS_RATE: Final[float] = 2.3e-14
MAGNETIC_PERMEABILITY_OF_VACUUM: Final[float] = 4. * PI * 1e-07

_IAU_NSFA = "IAU Division I Working Group, Numerical Standards for Fundamental Astronomy"
_NSFA_URL = "https://iau-a3.gitlab.io/NSFA/NSFA_cbe.html"
_NASA_SUN = "https://nssdc.gsfc.nasa.gov/planetary/factsheet/sunfact.html"
_NASA_MOON = "https://nssdc.gsfc.nasa.gov/planetary/factsheet/moonfact.html"

# === The Single Source of Truth: Canonical Constants Registry ===
CONSTANTS: Tuple[ConstantInfo, ...] = (

    # ========== 1. MATHEMATICAL & TIME ==========

    ConstantInfo(
        name="PI",
        symbol=_S("PI"),
        latex=r"\pi",
        value=PI,
        units="rad",
        description="Number pi",
        category=ConstantCategory.MATHEMATICAL,
        source="IEEE 754 double nearest to pi",
    ),

    ConstantInfo(
        name="TWO_PI",
        symbol=_S("TWO_PI"),
        latex=r"2\pi",
        value=TWO_PI,
        units="rad",
        description="Number 2 * pi (one full turn)",
        kind=ConstantKind.DERIVED,
        category=ConstantCategory.MATHEMATICAL,
        relation="TWO_PI = 2 * PI",
        eval_expr=2 * _S("PI"),
    ),

    ConstantInfo(
        name="SECONDS_IN_YEAR",
        symbol=_S("SECONDS_IN_YEAR"),
        latex=r"\mathrm{yr}",
        value=SECONDS_IN_YEAR,
        units="s",
        description="Number of seconds in a Julian year (365.25 d)",
        category=ConstantCategory.TIME,
        source="Julian year convention",
    ),

    ConstantInfo(
        name="SECONDS_IN_DAY",
        symbol=_S("SECONDS_IN_DAY"),
        latex=r"\mathrm{d}",
        value=SECONDS_IN_DAY,
        units="s",
        description="Number of seconds in a day",
        category=ConstantCategory.TIME,
        source="SI day of 86400 s",
    ),

    # ========== 2. IAU NUMERICAL STANDARDS ==========

    ConstantInfo(
        name="AU",
        symbol=_S("AU"),
        latex=r"\mathrm{au}",
        value=AU,
        units="m",
        description="Astronomical unit",
        category=ConstantCategory.IAU,
        source="IAU 2012 Resolution B2",
        source_refs=["https://www.iau.org/static/resolutions/IAU2012_English.pdf"],
    ),

    ConstantInfo(
        name="GRAVITATIONAL",
        symbol=_S("GRAVITATIONAL"),
        latex=r"G",
        value=GRAVITATIONAL,
        units="m³kg⁻¹s⁻²",
        description="Newtonian constant of gravitation",
        category=ConstantCategory.IAU,
        source=f"{_IAU_NSFA}, 2009",
        source_refs=[f"{_NSFA_URL}#ConstGrav2009"],
    ),

    ConstantInfo(
        name="EARTH_RADIUS",
        symbol=_S("EARTH_RADIUS"),
        latex=r"R_\oplus",
        value=EARTH_RADIUS,
        units="m",
        description="Equatorial radius of the Earth",
        category=ConstantCategory.IAU,
        source=f"{_IAU_NSFA}, 2009",
        source_refs=[f"{_NSFA_URL}#EarthRadius2009"],
    ),

    ConstantInfo(
        name="GRAVITATIONAL_SOLAR_MASS",
        symbol=_S("GRAVITATIONAL_SOLAR_MASS"),
        latex=r"GM_\odot",
        value=GRAVITATIONAL_SOLAR_MASS,
        units="m³s⁻²",
        description="Heliocentric gravitational constant (solar mass parameter)",
        category=ConstantCategory.IAU,
        source=f"{_IAU_NSFA}, 2012",
        source_refs=[f"{_NSFA_URL}#GMS2012"],
    ),

    ConstantInfo(
        name="SOLAR_MASS",
        symbol=_S("SOLAR_MASS"),
        latex=r"M_\odot",
        value=SOLAR_MASS,
        units="kg",
        description="Solar mass",
        kind=ConstantKind.DERIVED,
        category=ConstantCategory.IAU,
        relation="SOLAR_MASS = GRAVITATIONAL_SOLAR_MASS / GRAVITATIONAL",
        eval_expr=_S("GRAVITATIONAL_SOLAR_MASS") / _S("GRAVITATIONAL"),
    ),

    ConstantInfo(
        name="GRAVITATIONAL_EARTH_MASS",
        symbol=_S("GRAVITATIONAL_EARTH_MASS"),
        latex=r"GM_\oplus",
        value=GRAVITATIONAL_EARTH_MASS,
        units="m³s⁻²",
        description="Geocentric gravitational constant (TT-compatible)",
        category=ConstantCategory.IAU,
        source=f"{_IAU_NSFA}, 2009",
        source_refs=[f"{_NSFA_URL}#GME2009"],
    ),

    ConstantInfo(
        name="EARTH_MASS",
        symbol=_S("EARTH_MASS"),
        latex=r"M_\oplus",
        value=EARTH_MASS,
        units="kg",
        description="Earth mass",
        kind=ConstantKind.DERIVED,
        category=ConstantCategory.IAU,
        relation="EARTH_MASS = GRAVITATIONAL_EARTH_MASS / GRAVITATIONAL",
        eval_expr=_S("GRAVITATIONAL_EARTH_MASS") / _S("GRAVITATIONAL"),
    ),

    ConstantInfo(
        name="MOON_MASS_OVER_EARTH_MASS",
        symbol=_S("MOON_MASS_OVER_EARTH_MASS"),
        latex=r"M_{\leftmoon}/M_\oplus",
        value=MOON_MASS_OVER_EARTH_MASS,
        description="Ratio of the mass of the Moon to the mass of the Earth",
        category=ConstantCategory.IAU,
        source=f"{_IAU_NSFA}, 2009",
        source_refs=[f"{_NSFA_URL}#MMME2009"],
    ),

    ConstantInfo(
        name="MOON_MASS",
        symbol=_S("MOON_MASS"),
        latex=r"M_{\leftmoon}",
        value=MOON_MASS,
        units="kg",
        description="Moon mass",
        kind=ConstantKind.DERIVED,
        category=ConstantCategory.IAU,
        relation="MOON_MASS = MOON_MASS_OVER_EARTH_MASS * EARTH_MASS",
        eval_expr=_S("MOON_MASS_OVER_EARTH_MASS") * _S("EARTH_MASS"),
    ),

    ConstantInfo(
        name="SOLAR_MASS_OVER_JUPITER_MASS",
        symbol=_S("SOLAR_MASS_OVER_JUPITER_MASS"),
        latex=r"M_\odot/M_J",
        value=SOLAR_MASS_OVER_JUPITER_MASS,
        description="Ratio of the mass of the Sun to the mass of Jupiter",
        category=ConstantCategory.IAU,
        source=f"{_IAU_NSFA}, 2009",
        source_refs=[f"{_NSFA_URL}#MSMJ2009"],
    ),

    ConstantInfo(
        name="JUPITER_MASS",
        symbol=_S("JUPITER_MASS"),
        latex=r"M_J",
        value=JUPITER_MASS,
        units="kg",
        description="Mass of Jupiter",
        kind=ConstantKind.DERIVED,
        category=ConstantCategory.IAU,
        relation="JUPITER_MASS = SOLAR_MASS / SOLAR_MASS_OVER_JUPITER_MASS",
        eval_expr=_S("SOLAR_MASS") / _S("SOLAR_MASS_OVER_JUPITER_MASS"),
    ),

    # ========== 3. NASA FACT SHEETS ==========

    ConstantInfo(
        name="MOON_RADIUS",
        symbol=_S("MOON_RADIUS"),
        latex=r"R_{\leftmoon}",
        value=MOON_RADIUS,
        units="m",
        description="Moon volumetric mean radius",
        category=ConstantCategory.NASA,
        source="NASA Moon fact sheet",
        source_refs=[_NASA_MOON],
    ),

    ConstantInfo(
        name="SOLAR_RADIUS",
        symbol=_S("SOLAR_RADIUS"),
        latex=r"R_\odot",
        value=SOLAR_RADIUS,
        units="m",
        description="Solar volumetric mean radius",
        category=ConstantCategory.NASA,
        source="NASA Sun fact sheet",
        source_refs=[_NASA_SUN],
    ),

    ConstantInfo(
        name="SOLAR_LUMINOSITY",
        symbol=_S("SOLAR_LUMINOSITY"),
        latex=r"L_\odot",
        value=SOLAR_LUMINOSITY,
        units="1e24 J/s",
        description="Solar luminosity, in units of 10^24 J/s",
        category=ConstantCategory.NASA,
        source="NASA Sun fact sheet",
        source_refs=[_NASA_SUN],
    ),

    ConstantInfo(
        name="SOLAR_PERIOD_HR",
        symbol=_S("SOLAR_PERIOD_HR"),
        latex=r"P_{\odot,\mathrm{hr}}",
        value=SOLAR_PERIOD_HR,
        units="hr",
        description="Solar sidereal rotation period",
        category=ConstantCategory.NASA,
        source="NASA Sun fact sheet",
        source_refs=[_NASA_SUN],
    ),

    ConstantInfo(
        name="SOLAR_PERIOD",
        symbol=_S("SOLAR_PERIOD"),
        latex=r"P_\odot",
        value=SOLAR_PERIOD,
        units="days",
        description="Solar sidereal rotation period",
        kind=ConstantKind.DERIVED,
        category=ConstantCategory.NASA,
        relation="SOLAR_PERIOD = SOLAR_PERIOD_HR / 24",
        eval_expr=_S("SOLAR_PERIOD_HR") / 24,
    ),

    ConstantInfo(
        name="SOLAR_ANGULAR_VELOCITY",
        symbol=_S("SOLAR_ANGULAR_VELOCITY"),
        latex=r"\Omega_\odot",
        value=SOLAR_ANGULAR_VELOCITY,
        units="rad/s",
        description="Solar angular velocity",
        kind=ConstantKind.DERIVED,
        category=ConstantCategory.NASA,
        relation="SOLAR_ANGULAR_VELOCITY = TWO_PI / (SOLAR_PERIOD * SECONDS_IN_DAY)",
        eval_expr=_S("TWO_PI") / (_S("SOLAR_PERIOD") * _S("SECONDS_IN_DAY")),
    ),

    # ========== 4. NIST CODATA ==========

    ConstantInfo(
        name="GAS_CONSTANT",
        symbol=_S("GAS_CONSTANT"),
        latex=r"R",
        value=GAS_CONSTANT,
        units="J/(mol·K)",
        description="Molar (perfect) gas constant",
        category=ConstantCategory.NIST,
        source="NIST, 2022 CODATA recommended value",
        source_refs=["https://physics.nist.gov/cgi-bin/cuu/Value?r"],
    ),

    ConstantInfo(
        name="PROTON_MASS",
        symbol=_S("PROTON_MASS"),
        latex=r"m_p",
        value=PROTON_MASS,
        units="kg",
        description="Mass of a proton",
        category=ConstantCategory.NIST,
        source="NIST, 2022 CODATA recommended value",
        source_refs=["https://physics.nist.gov/cgi-bin/cuu/Value?mp"],
    ),

    # ========== 5. LITERATURE VALUES ==========

    ConstantInfo(
        name="BOLTZMANN_CONST",
        symbol=_S("BOLTZMANN_CONST"),
        latex=r"k_B",
        value=BOLTZMANN_CONST,
        units="J/K",
        description="Boltzmann constant (CODATA 2017)",
        category=ConstantCategory.LITERATURE,
        source="Newell et al. 2018, Table 3",
        source_refs=["https://iopscience.iop.org/article/10.1088/1681-7575/aa950a/pdf"],
    ),

    ConstantInfo(
        name="ROSSBY_SUN",
        symbol=_S("ROSSBY_SUN"),
        latex=r"Ro_\odot",
        value=ROSSBY_SUN,
        description="Solar Rossby number",
        category=ConstantCategory.LITERATURE,
        source="Ardestani et al. 2017",
        source_refs=["https://doi.org/10.1093/mnras/stx2039"],
    ),

    ConstantInfo(
        name="ROSSBY_SATURATION",
        symbol=_S("ROSSBY_SATURATION"),
        latex=r"Ro_{\mathrm{sat}}",
        value=ROSSBY_SATURATION,
        description="Rossby number at saturation",
        category=ConstantCategory.LITERATURE,
        source="Ardestani et al. 2017",
        source_refs=["https://doi.org/10.1093/mnras/stx2039"],
    ),

    ConstantInfo(
        name="SOLAR_SURFACE_MAGNETIC_FIELD",
        symbol=_S("SOLAR_SURFACE_MAGNETIC_FIELD"),
        latex=r"B_\odot",
        value=SOLAR_SURFACE_MAGNETIC_FIELD,
        units="T",
        description="Magnetic field at the surface of the Sun",
        category=ConstantCategory.LITERATURE,
        source="Vidotto et al. 2014",
        source_refs=["https://doi.org/10.1093/mnras/stu728"],
    ),

    ConstantInfo(
        name="SOLAR_CORONA_TEMPERATURE",
        symbol=_S("SOLAR_CORONA_TEMPERATURE"),
        latex=r"T_{c,\odot}",
        value=SOLAR_CORONA_TEMPERATURE,
        units="K",
        description="Temperature of the solar corona",
        category=ConstantCategory.LITERATURE,
        source="Ahuir et al. 2021, Eq. 20",
        source_refs=["https://doi.org/10.1051/0004-6361/202040173"],
    ),

    ConstantInfo(
        name="SOLAR_CORONA_DENSITY",
        symbol=_S("SOLAR_CORONA_DENSITY"),
        latex=r"n_{c,\odot}",
        value=SOLAR_CORONA_DENSITY,
        units="m⁻³",
        description="Number density of the solar corona",
        category=ConstantCategory.LITERATURE,
        source="Ahuir et al. 2021, Eq. 21",
        source_refs=["https://doi.org/10.1051/0004-6361/202040173"],
    ),

    ConstantInfo(
        name="SOLAR_MASS_LOSS_RATE",
        symbol=_S("SOLAR_MASS_LOSS_RATE"),
        latex=r"\dot{M}_\odot",
        value=SOLAR_MASS_LOSS_RATE,
        units="unspecified (see Ahuir et al. 2020, Eq. 70)",
        description="Solar mass-loss rate; the source quotes it in solar masses per year",
        category=ConstantCategory.LITERATURE,
        source="Ahuir et al. 2020, Eq. 70",
        source_refs=["https://doi.org/10.1051/0004-6361/201936974"],
    ),

    ConstantInfo(
        name="MAGNETIC_PERMEABILITY_OF_VACUUM",
        symbol=_S("MAGNETIC_PERMEABILITY_OF_VACUUM"),
        latex=r"\mu_0",
        value=MAGNETIC_PERMEABILITY_OF_VACUUM,
        units="T·m/A",
        description="Magnetic permeability of vacuum (classical SI definition)",
        kind=ConstantKind.DERIVED,
        category=ConstantCategory.LITERATURE,
        relation="MAGNETIC_PERMEABILITY_OF_VACUUM = 4 * PI * 1e-7",
        eval_expr=4 * _S("PI") / 10**7,
        source="Wikipedia, Vacuum permeability",
        source_refs=["https://en.wikipedia.org/wiki/Vacuum_permeability"],
    ),
)

# --- Generate Derived Exports ---

# Dictionary access by name
CONSTANTS_DICT: Mapping[str, ConstantInfo] = MappingProxyType(
    {c.name: c for c in CONSTANTS}
)

# Symbol dictionary for analytics
SYMBOLS: Mapping[str, sp.Symbol] = MappingProxyType(
    {c.name: c.symbol for c in CONSTANTS if c.symbol is not None}
)

# Numeric values dictionary
VALUES: Mapping[str, float] = MappingProxyType(
    {c.name: c.value for c in CONSTANTS}
)

# --- Utility Functions ---

def get_constant(name: str) -> ConstantInfo:
    """Return the ConstantInfo for ``name`` or raise UnknownConstantError."""
    try:
        return CONSTANTS_DICT[name]
    except (KeyError, TypeError):
        raise UnknownConstantError(name, CONSTANTS_DICT) from None

def get_constants_by_kind(kind: ConstantKind) -> List[ConstantInfo]:
    """Return all constants of a given kind."""
    return [c for c in CONSTANTS if c.kind == kind]

def get_constants_by_category(category: ConstantCategory) -> List[ConstantInfo]:
    """Return all constants in a given category."""
    return [c for c in CONSTANTS if c.category == category]

def find_duplicate_names(constants: Optional[Sequence[ConstantInfo]] = None) -> List[str]:
    """Return names declared more than once."""
    constants = CONSTANTS if constants is None else constants
    counts = Counter(c.name for c in constants)
    return sorted(name for name, n in counts.items() if n > 1)

def check_dependency_order(constants: Optional[Sequence[ConstantInfo]] = None) -> Dict[str, str]:
    """
    Check that every derived entry only references entries declared before it.

    A table that passes has no cycles and no forward references.
    Returns dict of any errors found.
    """
    constants = CONSTANTS if constants is None else constants
    known = {c.name for c in constants}
    seen = set()
    errors = {}

    for const in constants:
        for dep in const.depends_on:
            if dep not in known:
                errors[const.name] = f"References unknown constant {dep}"
                break
            if dep not in seen:
                errors[const.name] = f"References {dep} before it is declared"
                break
        seen.add(const.name)

    return errors

def validate_relations(
    constants: Optional[Sequence[ConstantInfo]] = None,
    rtol: float = RELATION_RTOL,
) -> Dict[str, str]:
    """
    Re-evaluate every eval_expr from the stored values of its dependencies
    and compare against the stored value.
    Returns dict of any errors found.
    """
    constants = CONSTANTS if constants is None else constants
    values = {c.name: c.value for c in constants}
    errors = {}

    for const in constants:
        if const.eval_expr is None:
            continue
        deps = const.depends_on
        missing = [d for d in deps if d not in values]
        if missing:
            errors[const.name] = f"Missing dependencies: {', '.join(missing)}"
            continue

        by_name = {str(s): s for s in const.eval_expr.free_symbols}
        func = sp.lambdify([by_name[d] for d in deps], const.eval_expr, modules="math")
        try:
            result = float(func(*(values[d] for d in deps)))
        except (ArithmeticError, ValueError) as e:
            errors[const.name] = f"Evaluation failed: {e}"
            continue

        if not math.isclose(result, const.value, rel_tol=rtol, abs_tol=0.0):
            diff = abs(result - const.value)
            if const.value != 0:
                detail = f"rel_error={diff / abs(const.value):.2e}"
            else:
                detail = f"abs_error={diff:.2e}"
            errors[const.name] = f"Computed {result!r}, stated {const.value!r} ({detail})"

    for name, err in errors.items():
        logger.warning(f"Relation check failed for {name}: {err}")
    return errors

def run_self_test() -> bool:
    """
    Run self-consistency tests on the constants registry.

    Returns True when names are unique, dependency order holds, and every
    derived value matches its relation.
    """
    logger.info(f"astroconst constants self-test (v{__version__}, {__date__})")
    ok = True

    duplicates = find_duplicate_names()
    if duplicates:
        ok = False
        logger.error(f"Duplicate constant names: {', '.join(duplicates)}")

    for name, err in check_dependency_order().items():
        ok = False
        logger.error(f"Dependency order: {name}: {err}")

    if validate_relations():
        ok = False
    else:
        logger.info("All relations validated successfully")

    derived = get_constants_by_kind(ConstantKind.DERIVED)
    logger.info(
        f"Registry: {len(CONSTANTS)} constants, "
        f"{len(CONSTANTS) - len(derived)} primary, {len(derived)} derived, "
        f"{len({c.category for c in CONSTANTS})} categories"
    )
    if ok:
        logger.success("Self-test passed")
    else:
        logger.error("Self-test failed")
    return ok

# --- Export all public names ---
__all__ = [
    # Core classes
    "ConstantInfo", "ConstantKind", "ConstantCategory",
    # Main registry
    "CONSTANTS", "CONSTANTS_DICT", "SYMBOLS", "VALUES",
    # Utility functions
    "get_constant", "get_constants_by_kind", "get_constants_by_category",
    "find_duplicate_names", "check_dependency_order", "validate_relations",
    "run_self_test",
    "RELATION_RTOL",
]

# Add all constant names to __all__ for clean imports
__all__.extend(c.name for c in CONSTANTS)

# Constants and registry views cannot be rebound on the module
__frozen__ = frozenset(VALUES) | {"CONSTANTS", "CONSTANTS_DICT", "SYMBOLS", "VALUES", "__frozen__"}
sys.modules[__name__].__class__ = ReadOnlyModule
