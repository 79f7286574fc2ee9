# -*- coding: utf-8 -*-
#
# Copyright (C) 2025 The hfss-sweep authors
# This file is part of hfss-sweep.
#
# hfss-sweep is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# hfss-sweep is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with hfss-sweep.  If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from hfss_sweep.config.settings import SweepSettings
from hfss_sweep.core.sweep import SweepKind, SweepSpec, VariableSweep
from hfss_sweep.errors import ConfigError
from hfss_sweep.utils.log import get_logger

log = get_logger()

# TOML loader (3.11+: tomllib; else fall back to tomli)
try:  # Python 3.11+
    import tomllib as _toml  # type: ignore[attr-defined]
except ImportError:  # pragma: no cover
    import tomli as _toml  # type: ignore


# --- TOML loader helpers ---
def _load_toml(path: str) -> Dict[str, Any]:
    path = os.path.expanduser(os.path.expandvars(path))
    if not os.path.isfile(path):
        raise FileNotFoundError(f"TOML not found: {path}")
    with open(path, "rb") as f:
        try:
            data = _toml.load(f)
        except _toml.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    log.debug("Loaded TOML from {}", os.path.abspath(path))
    return data


def _require(table: Dict[str, Any], key: str, where: str) -> Any:
    if key not in table:
        raise ConfigError(f"{where}: missing required key '{key}'")
    return table[key]


def _variable_from_table(table: Dict[str, Any], where: str) -> VariableSweep:
    name = str(_require(table, "name", where))
    kind = SweepKind.parse(_require(table, "kind", where), name)
    data = _require(table, "data", where)
    values = data if isinstance(data, list) else [data]
    for v in values:
        # TOML booleans are ints to Python; neither they nor strings are sweep values
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ConfigError(f"{where}: data for '{name}' must be numeric, got {v!r}")
    sync = table.get("sync", 0)
    if isinstance(sync, bool):
        sync = int(sync)
    if not isinstance(sync, int):
        raise ConfigError(f"{where}: sync for '{name}' must be an integer group, got {sync!r}")
    return VariableSweep(variable=name, kind=kind, values=tuple(values), synchronize=sync)


def specs_from_dict(data: Dict[str, Any], default_units: str = "mm") -> List[SweepSpec]:
    """
    Build SweepSpecs from a parsed config mapping.

    Expected layout:
      [script]            optional; `units` sets the default for every setup
      [[sweep]]           one per parametric setup: name, analysis, units (optional)
      [[sweep.variable]]  one per swept variable: name, kind, data, sync (optional)
    """
    script = data.get("script", {})
    if not isinstance(script, dict):
        raise ConfigError(f"[script] must be a table, got {script!r}")
    units_default = str(script.get("units", default_units))

    setups = data.get("sweep", [])
    if not isinstance(setups, list) or not setups:
        raise ConfigError("Config must define at least one [[sweep]] table.")

    specs: List[SweepSpec] = []
    for i, setup in enumerate(setups):
        where = f"sweep[{i}]"
        if not isinstance(setup, dict):
            raise ConfigError(f"{where}: expected a table, got {setup!r}")
        name = str(_require(setup, "name", where))
        analysis = str(_require(setup, "analysis", where))
        tables = setup.get("variable", [])
        if not isinstance(tables, list) or not all(isinstance(t, dict) for t in tables):
            raise ConfigError(f"{where} ('{name}'): [[sweep.variable]] must be an array of tables")
        if not tables:
            raise ConfigError(f"{where} ('{name}'): no [[sweep.variable]] entries")
        variables = tuple(
            _variable_from_table(t, f"{where}.variable[{j}]") for j, t in enumerate(tables)
        )
        spec = SweepSpec(
            name=name,
            analysis=analysis,
            variables=variables,
            units=str(setup.get("units", units_default)),
        )
        log.debug("Parsed setup '{}' with {} variable(s)", spec.name, len(spec.variables))
        specs.append(spec)
    return specs


# --- Unified TOML config resolver ---
def resolve_toml(config_path: str, settings: Optional[SweepSettings] = None) -> List[SweepSpec]:
    """Load a sweep TOML file; units fall back to `settings.default_units`."""
    settings = settings or SweepSettings()
    return specs_from_dict(_load_toml(config_path), default_units=settings.default_units)
