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

"""
Parametric sweep model and HFSS "OptiParametric" command rendering.

A sweep call is normalized once into a :class:`SweepSpec` (one
:class:`VariableSweep` per swept variable) and rendered from there; the
rendering never looks at the shape of the original arguments again.

Kinds
-----
SINGLE : list of discrete points, each written as ``<value>deg``.
LIN    : ``[start, stop, step]``  -> ``LIN 1.000000mm 9.000000mm 1.000000mm``
LINC   : ``[start, stop, count]`` -> ``LINC 1.000000mm 9.000000mm 9``
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from hfss_sweep.errors import ArgumentError, UnsupportedKindError

# SINGLE points always carry this tag, independent of the call's units.
SINGLE_UNIT = "deg"


class SweepKind(str, Enum):
    SINGLE = "SINGLE"
    LIN = "LIN"
    LINC = "LINC"

    @classmethod
    def parse(cls, tag: Any, variable: Optional[str] = None) -> "SweepKind":
        """Resolve a kind tag (case-sensitive) or raise UnsupportedKindError."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise UnsupportedKindError(tag, variable) from None


@dataclass(frozen=True)
class VariableSweep:
    variable: str
    kind: SweepKind
    values: Tuple[Any, ...]
    synchronize: int = 0

    def __post_init__(self) -> None:
        n = len(self.values)
        if self.kind is SweepKind.SINGLE and n < 1:
            raise ArgumentError(f"SINGLE sweep of '{self.variable}' needs at least one value.")
        if self.kind in (SweepKind.LIN, SweepKind.LINC) and n != 3:
            raise ArgumentError(
                f"{self.kind.value} sweep of '{self.variable}' needs exactly 3 values, got {n}."
            )


@dataclass(frozen=True)
class SweepSpec:
    name: str
    analysis: str
    variables: Tuple[VariableSweep, ...]
    units: str = field(default="mm")

    def __post_init__(self) -> None:
        if not self.variables:
            raise ArgumentError(f"Parametric setup '{self.name}' has no variables to sweep.")

    def render(self) -> str:
        return render_sweep_analysis(self)


# --- per-kind data strings ------------------------------------------------------

def format_point(value: Any) -> str:
    """Shortest round-trip text for one number, without exponent or trailing ``.0``."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if not isinstance(value, np.floating):
        value = float(value)
    # shortest digits for the value's own dtype, so float32 stays short too
    return np.format_float_positional(value, trim="-")


def _format_single(values: Sequence[Any], units: str) -> str:
    return " ".join(f"{format_point(v)}{SINGLE_UNIT}" for v in values)


def _format_lin(values: Sequence[Any], units: str) -> str:
    start, stop, step = (float(v) for v in values)
    return f"LIN {start:.6f}{units} {stop:.6f}{units} {step:.6f}{units}"


def _format_linc(values: Sequence[Any], units: str) -> str:
    start, stop, count = values
    return f"LINC {float(start):.6f}{units} {float(stop):.6f}{units} {int(count):d}"


_FORMATTERS: Dict[SweepKind, Callable[[Sequence[Any], str], str]] = {
    SweepKind.SINGLE: _format_single,
    SweepKind.LIN: _format_lin,
    SweepKind.LINC: _format_linc,
}


def format_sweep_data(sweep: VariableSweep, units: str) -> str:
    """Return the ``"Data:="`` string for one variable."""
    return _FORMATTERS[sweep.kind](sweep.values, units)


# --- argument normalization -----------------------------------------------------

def _as_list(value: Any) -> List[Any]:
    """A bare value becomes ``[value]``; lists and tuples become lists, arrays are flattened."""
    if isinstance(value, np.ndarray):
        # keep NumPy scalars so their dtype decides how they print
        return list(np.atleast_1d(value).ravel())
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))


def _data_sets(data: Any) -> List[List[Any]]:
    # a 2-D array, or a list holding any sequence, has one set per variable;
    # a flat list is a single set shared by every variable
    if isinstance(data, np.ndarray) and data.ndim >= 2:
        return [_as_list(row) for row in data]
    if isinstance(data, (list, tuple)) and any(_is_sequence(d) for d in data):
        return [_as_list(d) for d in data]
    return [_as_list(data)]


def _sync_flag(flag: Any, variable: str) -> int:
    if isinstance(flag, (numbers.Integral, np.bool_)):
        return int(flag)
    if isinstance(flag, numbers.Real) and float(flag).is_integer():
        return int(flag)
    raise ArgumentError(f"sync group for '{variable}' must be an integer, got {flag!r}.")


def _broadcast(items: List[Any], n: int, what: str) -> List[Any]:
    if len(items) == n:
        return items
    if len(items) == 1:
        return items * n
    raise ArgumentError(f"{what} has {len(items)} entries but {n} variables were given.")


def normalize_sweep_args(
    name: str,
    analysis: str,
    kinds: Any,
    variables: Any,
    data: Any,
    units: str,
    sync: Any = None,
) -> SweepSpec:
    """
    Build a SweepSpec from the loosely-shaped call arguments.

    `kinds`, `variables`, `data` and `sync` each accept a scalar (one variable)
    or a sequence with one entry per variable; single entries are broadcast.
    `sync` defaults to 0 (no synchronization) for every variable.
    """
    names = _as_list(variables)
    n = len(names)
    if n == 0:
        raise ArgumentError("At least one variable name is required.")

    kind_tags = _broadcast(_as_list(kinds), n, "kinds")
    data_sets = _broadcast(_data_sets(data), n, "data")
    flags = _broadcast(_as_list(0 if sync is None else sync), n, "sync")

    sweeps = []
    for var, tag, values, flag in zip(names, kind_tags, data_sets, flags):
        var = str(var)
        sweeps.append(
            VariableSweep(
                variable=var,
                kind=SweepKind.parse(tag, var),
                values=tuple(values),
                synchronize=_sync_flag(flag, var),
            )
        )
    return SweepSpec(name=str(name), analysis=str(analysis), variables=tuple(sweeps), units=str(units))


# --- command rendering ----------------------------------------------------------

def _render_definition(sweep: VariableSweep, units: str) -> str:
    return (
        '\t\tArray("NAME:SweepDefinition", _\n'
        f'\t\t"Variable:=", "{sweep.variable}", _\n'
        f'\t\t"Data:=", "{format_sweep_data(sweep, units)}", _\n'
        '\t\t"OffsetF1:=", false, _\n'
        f'\t\t"Synchronize:=", {sweep.synchronize:d})'
    )


def render_sweep_analysis(spec: SweepSpec) -> str:
    """
    Render the full ``oModule.InsertSetup "OptiParametric"`` command.

    The token layout is what HFSS expects from its recorded scripts and must
    not change; note the closing of the Sweeps array follows the last
    definition on the same line.
    """
    lines: List[str] = []
    lines.append("\n")
    lines.append('Set oModule = oDesign.GetModule("Optimetrics")\n')
    lines.append('oModule.InsertSetup "OptiParametric", _\n')
    lines.append(f'\tArray("NAME:{spec.name}", _\n')
    lines.append('\t"IsEnabled:=", true, _\n')
    lines.append('\tArray("NAME:ProdOptiSetupDataV2", _\n')
    lines.append('\t\t"SaveFields:=", false, _\n')
    lines.append('\t\t"CopyMesh:=", false, _\n')
    lines.append('\t\t"SolveWithCopiedMeshOnly:=", true), _\n')
    lines.append('\tArray("NAME:StartingPoint"), _\n')
    lines.append(f'\t"Sim. Setups:=", Array("{spec.analysis}"), _\n')
    lines.append('\tArray("NAME:Sweeps", _\n')
    # no separator after the last definition
    lines.append(", _\n".join(_render_definition(v, spec.units) for v in spec.variables))
    lines.append("\t\t), _\n")
    lines.append('\tArray("NAME:Sweep Operations"), _\n')
    lines.append('\tArray("NAME:Goals"))\n')
    return "".join(lines)
