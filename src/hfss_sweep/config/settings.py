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

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env early if present (no-op if missing)
load_dotenv()


class SweepSettings(BaseSettings):
    """
    Top-level typed settings for hfss-sweep.
    Loads from environment and .env automatically.
    Override with env vars like:
        HFSS_SWEEP__DEFAULT_UNITS=um
        HFSS_SWEEP__APPEND=true
    """

    model_config = SettingsConfigDict(
        env_prefix="HFSS_SWEEP__",
        extra="ignore",
    )

    # units used by LIN/LINC setups that do not name their own
    default_units: str = Field("mm", min_length=1)
    encoding: str = "utf-8"
    log_level: str = "INFO"
    append: bool = False

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()
