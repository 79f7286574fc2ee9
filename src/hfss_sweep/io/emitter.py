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

# Purpose: Write HFSS parametric-sweep commands to an open script stream or file.

from __future__ import annotations

import os
from typing import Any, Iterable, Optional, TextIO

from hfss_sweep.core.sweep import SweepSpec, normalize_sweep_args, render_sweep_analysis
from hfss_sweep.errors import ArgumentError
from hfss_sweep.utils.log import get_logger

log = get_logger()

_REQUIRED = ("fid", "name", "analysis", "kinds", "variables", "data", "units")


def emit(
    fid: Optional[TextIO] = None,
    name: Optional[str] = None,
    analysis: Optional[str] = None,
    kinds: Any = None,
    variables: Any = None,
    data: Any = None,
    units: Optional[str] = None,
    sync: Any = None,
) -> None:
    """
    Append an ``OptiParametric`` setup to an HFSS script.

    Parameters
    ----------
    fid       : open, writable text stream of the HFSS script (left open).
    name      : name of the parametric setup to create.
    analysis  : name of the analysis setup the sweep is attached to.
    kinds     : sweep kind per variable, "SINGLE", "LIN" or "LINC" (scalar or sequence).
    variables : design variable name(s) to sweep.
    data      : values per variable; [start, stop, step] for LIN,
                [start, stop, count] for LINC, any number of points for SINGLE.
    units     : unit label for LIN/LINC values, e.g. 'mm', 'cm', 'meters'.
                SINGLE points are always written in 'deg'.
    sync      : optional group per variable (1, 2, ...) to synchronize sweeps. Default 0.

    Examples
    --------
    emit(fid, "ParSetup1", "MySetup", "LIN", "var", [1, 9, 1], "mm")
    emit(fid, "ParSetup2", "MySetup", ["LIN", "LIN"], ["pB", "pA"],
         [[0.1, 3.5, 0.2], [0.1, 3.5, 0.2]], "mm", [1, 1])
    """
    given = (fid, name, analysis, kinds, variables, data, units)
    missing = [arg for arg, value in zip(_REQUIRED, given) if value is None]
    if missing:
        raise ArgumentError(f"Insufficient # of arguments: missing {', '.join(missing)}.")

    spec = normalize_sweep_args(name, analysis, kinds, variables, data, units, sync)
    write_spec(fid, spec)


def write_spec(fid: TextIO, spec: SweepSpec) -> None:
    """Write one already-normalized setup to `fid`."""
    fid.write(render_sweep_analysis(spec))
    log.debug(
        "Parametric setup '{}' on '{}' written ({} variable(s): {})",
        spec.name,
        spec.analysis,
        len(spec.variables),
        ", ".join(v.variable for v in spec.variables),
    )


def write_sweep_script(
    out_path: str,
    specs: Iterable[SweepSpec],
    *,
    append: bool = False,
    encoding: str = "utf-8",
) -> int:
    """
    Write every setup in `specs` to `out_path`, in order.
    Truncates the file unless `append` is set. Returns the number of setups written.
    """
    specs = list(specs)
    os.makedirs(os.path.dirname(os.path.abspath(out_path)), exist_ok=True)
    with open(out_path, "a" if append else "w", encoding=encoding, newline="") as f:
        for spec in specs:
            write_spec(f, spec)
    log.debug("{} parametric setup(s) {} {}", len(specs), "appended to" if append else "written to", out_path)
    return len(specs)
