"""hfss-sweep: HFSS parametric sweep (Optimetrics) script generation."""

from .core.sweep import (
    SweepKind,
    SweepSpec,
    VariableSweep,
    format_point,
    format_sweep_data,
    normalize_sweep_args,
    render_sweep_analysis,
)
from .errors import ArgumentError, ConfigError, SweepScriptError, UnsupportedKindError
from .io.emitter import emit, write_spec, write_sweep_script

emit_sweep_analysis = emit

__version__ = "0.1.0"

__all__ = [
    "SweepKind",
    "SweepSpec",
    "VariableSweep",
    "format_point",
    "format_sweep_data",
    "normalize_sweep_args",
    "render_sweep_analysis",
    "ArgumentError",
    "ConfigError",
    "SweepScriptError",
    "UnsupportedKindError",
    "emit",
    "emit_sweep_analysis",
    "write_spec",
    "write_sweep_script",
]
