"""Shared utilities for tidewave."""

from tidewave.core.utils.json import read_json, write_json
from tidewave.core.utils.math import clamp, fract, lerp

__all__ = [
    "clamp",
    "fract",
    "lerp",
    "read_json",
    "write_json",
]
