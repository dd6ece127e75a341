"""
eafcal.core.config
------------------
Process-level configuration read from the environment.

EAF_SIZE selects the integer width (32 or 64 bits) used by the unsuffixed
calendar names. It defaults to 32.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .arith import IntWidth, int_width
from .errors import ConfigError

ENV_SIZE = "EAF_SIZE"
DEFAULT_BITS = 32


def default_width(environ: Optional[Mapping[str, str]] = None) -> IntWidth:
    env = os.environ if environ is None else environ
    raw = env.get(ENV_SIZE, "").strip()
    if not raw:
        return int_width(DEFAULT_BITS)
    try:
        bits = int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_SIZE} must be 32 or 64, got {raw!r}") from None
    if bits not in (32, 64):
        raise ConfigError(f"{ENV_SIZE} must be 32 or 64, got {bits}")
    return int_width(bits)
