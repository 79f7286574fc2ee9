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

"""Exceptions raised while building HFSS sweep commands."""

from __future__ import annotations


class SweepScriptError(Exception):
    """Base class for every error raised by hfss_sweep."""


class ArgumentError(SweepScriptError, TypeError):
    """Required inputs are missing or their shapes do not line up."""


class UnsupportedKindError(SweepScriptError, ValueError):
    """A sweep kind tag is not one of SINGLE, LIN or LINC."""

    def __init__(self, kind, variable: str | None = None):
        self.kind = kind
        self.variable = variable
        where = f" for variable '{variable}'" if variable is not None else ""
        super().__init__(f"Unsupported sweep kind {kind!r}{where}; expected one of SINGLE, LIN, LINC.")


class ConfigError(SweepScriptError):
    """A sweep configuration file is malformed."""
