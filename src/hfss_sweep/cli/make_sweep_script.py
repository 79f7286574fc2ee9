#!/usr/bin/env python3

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

"""
make_sweep_script.py

Purpose
-------
Turn a TOML description of one or more parametric setups into HFSS
VBScript ``oModule.InsertSetup "OptiParametric"`` commands.

Usage
-----
  hfss-sweep --config sweeps.toml --out build/sweeps.vbs
  python -m hfss_sweep.cli.make_sweep_script --config sweeps.toml --out design.vbs --append

Notes
-----
- The script only adds the Optimetrics setups; the design, its variables
  and the analysis setups they reference must already exist in HFSS.
- Units for LIN/LINC values come from the setup, then ``[script].units``,
  then ``--units``/HFSS_SWEEP__DEFAULT_UNITS (default: mm).
"""
from __future__ import annotations

import argparse
import os
from typing import Sequence

from pydantic import ValidationError

from hfss_sweep.config.settings import SweepSettings
from hfss_sweep.errors import SweepScriptError
from hfss_sweep.io.emitter import write_sweep_script
from hfss_sweep.io.loader import resolve_toml
from hfss_sweep.utils.log import init_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Write HFSS parametric sweep (Optimetrics) commands from a TOML config."
    )
    ap.add_argument("--config", type=str, required=True, help="Path to the sweep TOML file.")
    ap.add_argument("--out", type=str, default="sweeps.vbs", help="Output HFSS script path (default: sweeps.vbs).")
    ap.add_argument("--append", action="store_true", default=None,
                    help="Append to an existing script instead of overwriting it.")
    ap.add_argument("--units", type=str, default=None,
                    help="Default units for LIN/LINC values when the config names none.")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level (default: INFO)")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.units is not None:
        overrides["default_units"] = args.units
    if args.append is not None:
        overrides["append"] = args.append
    if args.log_level is not None:
        overrides["log_level"] = args.log_level

    try:
        settings = SweepSettings(**overrides)
    except ValidationError as exc:
        init_logging(args.log_level)
        get_logger().error("Invalid settings: {}", exc)
        return 2

    init_logging(settings.log_level)
    log = get_logger()

    try:
        specs = resolve_toml(args.config, settings)
        n = write_sweep_script(args.out, specs, append=settings.append, encoding=settings.encoding)
    except FileNotFoundError as exc:
        log.error("{}", exc)
        return 2
    except SweepScriptError as exc:
        log.error("Could not build sweep script from {}: {}", args.config, exc)
        return 2

    out_path = os.path.abspath(args.out)
    log.success("{} parametric setup(s) {} {}", n, "appended to" if settings.append else "written to", out_path)
    for spec in specs:
        log.info(
            "  {:<16} -> {:<12} [{}]",
            spec.name,
            spec.analysis,
            ", ".join(f"{v.variable}:{v.kind.value}" for v in spec.variables),
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
