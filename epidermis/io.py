"""I/O utilities for simulation input/output.

Handles loading the YAML configuration and saving cell snapshots and per-step
population census tables as CSV.
"""

from __future__ import annotations

import csv
import pathlib
from typing import Any, Mapping, Sequence

import yaml

from epidermis.config import SimulationConfig


# -----------------------------------------------------------------------------
# Configuration loading
# -----------------------------------------------------------------------------

def _resolve_path(value: str, base_dir: pathlib.Path) -> pathlib.Path:
    path = pathlib.Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return path.resolve()


def _require(raw: Mapping[str, Any], key: str) -> Any:
    if key not in raw:
        raise ValueError(f"Missing required config field: {key}")
    return raw[key]


def _optional_path(raw: Mapping[str, Any], key: str, base_dir: pathlib.Path) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    return str(_resolve_path(str(value), base_dir))


def load_simulation_config(path: str | pathlib.Path) -> SimulationConfig:
    """Load and validate simulation configuration from YAML."""
    path = pathlib.Path(path)
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a YAML mapping: {path}")

    base_dir = path.resolve().parent

    bound_space = raw.get("bound_space", True)
    if not isinstance(bound_space, bool):
        raise ValueError("bound_space must be a boolean")

    return SimulationConfig(
        min_bound=float(_require(raw, "min_bound")),
        max_bound=float(_require(raw, "max_bound")),
        initial_cell_count=int(raw.get("initial_cell_count", 200)),
        initial_diameter=float(raw.get("initial_diameter", 2.0)),
        n_steps=int(raw.get("n_steps", 1)),
        random_seed=int(_require(raw, "random_seed")),
        growth_rate=float(raw.get("growth_rate", 0.0)),
        dt=float(raw.get("dt", 1.0)),
        bound_space=bound_space,
        out_path=_optional_path(raw, "out_path", base_dir),
        census_out_path=_optional_path(raw, "census_out_path", base_dir),
    )


# -----------------------------------------------------------------------------
# Snapshot I/O
# -----------------------------------------------------------------------------

SNAPSHOT_FIELDS = [
    "cell_id",
    "parent_id",
    "generation",
    "x",
    "y",
    "z",
    "diameter",
    "cell_type",
    "can_divide",
]

CENSUS_FIELDS = [
    "step",
    "n_cells",
    "n_stem",
    "n_transit_amplifying",
    "n_differentiated",
    "n_retired",
]


def _write_rows(rows: Sequence[Mapping[str, object]], fieldnames: list[str], path: str | pathlib.Path) -> None:
    path_obj = pathlib.Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    with open(path_obj, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def save_snapshot_csv(rows: Sequence[Mapping[str, object]], path: str | pathlib.Path) -> None:
    """Save cell snapshots to CSV."""
    if not rows:
        raise ValueError("No snapshot rows to write")
    _write_rows(rows, SNAPSHOT_FIELDS, path)


def load_snapshot_csv(path: str | pathlib.Path) -> list[dict[str, object]]:
    """Load cell snapshots from CSV."""
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [dict(row) for row in reader]
    if not rows:
        raise ValueError(f"No snapshot rows found in {path}")
    return rows


def save_census_csv(rows: Sequence[Mapping[str, object]], path: str | pathlib.Path) -> None:
    """Save per-step population census rows to CSV."""
    if not rows:
        raise ValueError("No census rows to write")
    _write_rows(rows, CENSUS_FIELDS, path)
