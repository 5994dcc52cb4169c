import json

import yaml

from astroconst.core.constants import CONSTANTS, VALUES, get_constant
from astroconst.core.export import (
    EXPORTERS,
    constant_to_dict,
    export_to_json,
    export_to_latex,
    export_to_yaml,
    registry_to_dict,
)
from astroconst.core.version import __version__


def test_constant_to_dict_is_plain_data():
    data = constant_to_dict(get_constant("JUPITER_MASS"))
    assert data["name"] == "JUPITER_MASS"
    assert data["kind"] == "Derived"
    assert data["symbol"] == "JUPITER_MASS"
    assert data["eval_expr"] == "SOLAR_MASS/SOLAR_MASS_OVER_JUPITER_MASS"
    assert data["depends_on"] == ["SOLAR_MASS", "SOLAR_MASS_OVER_JUPITER_MASS"]
    # Must survive JSON encoding without a custom encoder
    json.dumps(data)


def test_registry_to_dict_covers_every_constant():
    data = registry_to_dict()
    assert data["version"] == __version__
    assert list(data["constants"]) == [c.name for c in CONSTANTS]
    assert "name" not in data["constants"]["AU"]


def test_export_to_yaml(tmp_path):
    path = export_to_yaml(tmp_path / "nested" / "constants.yaml")
    assert path.exists()

    with open(path, encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    assert set(loaded["constants"]) == set(VALUES)
    for name, entry in loaded["constants"].items():
        assert entry["value"] == VALUES[name], name
    assert loaded["constants"]["EARTH_MASS"]["units"] == "kg"


def test_export_to_json(tmp_path):
    path = export_to_json(tmp_path / "constants.json")

    with open(path, encoding="utf-8") as f:
        loaded = json.load(f)

    assert set(loaded["constants"]) == set(VALUES)
    for name, entry in loaded["constants"].items():
        assert entry["value"] == VALUES[name], name
    assert loaded["constants"]["MOON_MASS"]["relation"] == "MOON_MASS = MOON_MASS_OVER_EARTH_MASS * EARTH_MASS"


def test_export_to_latex(tmp_path):
    path = export_to_latex(str(tmp_path / "constants.tex"))
    text = path.read_text(encoding="utf-8")

    assert text.startswith(r"\documentclass{article}")
    assert r"\begin{longtable}" in text
    assert r"\end{document}" in text
    assert r"MAGNETIC\_PERMEABILITY\_OF\_VACUUM" in text
    assert r"$M_\odot$" in text
    # One row per constant
    assert text.count(r" \\") == len(CONSTANTS) + 1


def test_exporters_registry():
    assert set(EXPORTERS) == {"yaml", "json", "latex"}


def test_export_to_latex_units_are_ascii_markup(tmp_path):
    text = export_to_latex(tmp_path / "constants.tex").read_text(encoding="utf-8")

    assert text.isascii()
    assert r"m$^{3}$kg$^{-1}$s$^{-2}$" in text
    assert r"J/(mol$\cdot$K)" in text
    assert r"T$\cdot$m/A" in text
    assert r"m$^{-3}$" in text
