"""Strictly validated configs loaded through Hydra."""

from __future__ import annotations

from tactician.config.base import StrictBaseModel
from tactician.config.loader import load_config, load_raw_config, split_config_path

__all__ = [
    "StrictBaseModel",
    "load_config",
    "load_raw_config",
    "split_config_path",
]
