"""
Export the constants registry to external formats (YAML, JSON, LaTeX).

Exports are write-only: nothing in astroconst reads them back.
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from astroconst.core.constants import CONSTANTS, ConstantInfo
from astroconst.core.logging import logger
from astroconst.core.version import __date__, __version__
from astroconst.utils.validators import asdict

__all__ = [
    "constant_to_dict",
    "registry_to_dict",
    "export_to_yaml",
    "export_to_json",
    "export_to_latex",
    "EXPORTERS",
]

PathLike = Union[str, Path]


def constant_to_dict(const: ConstantInfo) -> Dict[str, Any]:
    """Plain-data view of one constant (SymPy objects as strings, enums as values)."""
    data = asdict(const)
    data["symbol"] = str(const.symbol) if const.symbol is not None else None
    data["eval_expr"] = str(const.eval_expr) if const.eval_expr is not None else None
    data["kind"] = const.kind.value
    data["category"] = const.category.value
    data["depends_on"] = list(const.depends_on)
    return data


def registry_to_dict() -> Dict[str, Any]:
    data = {
        "version": __version__,
        "date": __date__,
        "constants": {},
    }
    for const in CONSTANTS:
        entry = constant_to_dict(const)
        del entry["name"]
        data["constants"][const.name] = entry
    return data


def _prepare(filename: PathLike) -> Path:
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def export_to_yaml(filename: PathLike = "constants.yaml") -> Path:
    """Export all constants to YAML format for external tools."""
    path = _prepare(filename)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(registry_to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    logger.info(f"Exported {len(CONSTANTS)} constants to {path}")
    return path


def export_to_json(filename: PathLike = "constants.json") -> Path:
    """Export all constants to JSON."""
    path = _prepare(filename)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(registry_to_dict(), f, indent=2, ensure_ascii=False)
    logger.info(f"Exported {len(CONSTANTS)} constants to {path}")
    return path


def _latex_escape(text: str) -> str:
    return text.replace("_", r"\_").replace("%", r"\%").replace("&", r"\&")


_SUPERSCRIPTS = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹⁻", "0123456789-")
_SUPERSCRIPT_RUN = re.compile("[⁰¹²³⁴⁵⁶⁷⁸⁹⁻]+")


def _latex_units(units: str) -> str:
    """Units string with Unicode superscripts and middle dots as ASCII math (pdflatex-safe)."""
    text = _latex_escape(units)
    text = _SUPERSCRIPT_RUN.sub(lambda m: f"$^{{{m.group(0).translate(_SUPERSCRIPTS)}}}$", text)
    return text.replace("·", r"$\cdot$")


def export_to_latex(filename: PathLike = "constants.tex") -> Path:
    """Generate LaTeX table of constants for documentation."""
    lines = [
        r"\documentclass{article}",
        r"\usepackage{booktabs}",
        r"\usepackage{longtable}",
        r"\usepackage{wasysym}",
        r"\begin{document}",
        r"\begin{longtable}{lllll}",
        r"\toprule",
        r"Symbol & Name & Value & Units & Kind \\",
        r"\midrule",
    ]

    for const in CONSTANTS:
        # Prefer LaTeX, fall back to escaped name
        symbol = f"${const.latex}$" if const.latex else _latex_escape(const.name)
        # repr() keeps full double precision
        value = f"{const.value!r}"
        lines.append(
            f"{symbol} & {_latex_escape(const.name)} & {value} & "
            f"{_latex_units(const.units)} & {const.kind.value} \\\\"
        )

    lines.extend([
        r"\bottomrule",
        r"\end{longtable}",
        r"\end{document}",
    ])

    path = _prepare(filename)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
    logger.info(f"Exported {len(CONSTANTS)} constants to {path}")
    return path


EXPORTERS = {
    "yaml": export_to_yaml,
    "json": export_to_json,
    "latex": export_to_latex,
}
