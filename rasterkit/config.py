"""Package-wide defaults.

Every value here can be overridden per call through keyword arguments; the
worker count can also be set for a whole process through ``RASTERKIT_WORKERS``.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

DEFAULT_WORKER_MULTIPLIER = 2
WORKERS_ENV_VAR = "RASTERKIT_WORKERS"
DEFAULT_RESAMPLE = "lanczos"


def default_worker_count(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Resolve the size of the rasterizer worker pool.

    Args:
        environ: Mapping to read ``RASTERKIT_WORKERS`` from. Defaults to ``os.environ``.

    Returns:
        The env override when present, otherwise ``DEFAULT_WORKER_MULTIPLIER``
        times the detected CPU count.

    Raises:
        ValueError: If the env override is not a positive integer.
    """
    env = os.environ if environ is None else environ
    raw = env.get(WORKERS_ENV_VAR)
    if raw is not None and raw.strip():
        try:
            workers = int(raw)
        except ValueError:
            raise ValueError(f"{WORKERS_ENV_VAR} must be an integer, got {raw!r}") from None
        if workers <= 0:
            raise ValueError(f"{WORKERS_ENV_VAR} must be > 0, got {workers}")
        return workers
    return DEFAULT_WORKER_MULTIPLIER * (os.cpu_count() or 1)
