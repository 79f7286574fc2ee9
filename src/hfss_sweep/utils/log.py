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
#
# Module: hfss_sweep.utils.log
# Purpose: Single, shared logging initializer for all modules.

from __future__ import annotations

import os
import sys
from typing import Optional

from loguru import logger

_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def init_logging(level: Optional[str] = None) -> logger.__class__:
    """
    Replace loguru's sinks with a single stderr sink.

    The level is `level`, else HFSS_SWEEP_LOG_LEVEL, else DEBUG when
    HFSS_SWEEP_DEBUG is set, else INFO. Colors only on a terminal.
    """
    if level:
        level_final = str(level).upper()
    elif os.getenv("HFSS_SWEEP_LOG_LEVEL"):
        level_final = os.environ["HFSS_SWEEP_LOG_LEVEL"].upper()
    elif os.getenv("HFSS_SWEEP_DEBUG"):
        level_final = "DEBUG"
    else:
        level_final = "INFO"

    logger.remove()
    logger.add(sys.stderr, level=level_final, colorize=None, format=_FORMAT)
    return logger


def get_logger() -> logger.__class__:
    """Shared logger; importing modules never touch its sinks."""
    return logger
