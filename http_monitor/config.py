"""HTTP Monitor - Runtime settings"""

import os
from dataclasses import dataclass

from .patterns import (
    DEFAULT_FILENAME,
    DEFAULT_RATE_THRESHOLD,
    DEFAULT_REPORT_INTERVAL,
    DEFAULT_TOP_N,
    DEFAULT_WINDOW_SECONDS,
)

ENV_PREFIX = "HTTPMON_"

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be one of {', '.join(TRUE_VALUES + FALSE_VALUES)}, got {value!r}")


@dataclass
class Settings:
    """Monitor settings; environment first, command-line flags on top"""
    filename: str = DEFAULT_FILENAME
    rate_threshold: float = DEFAULT_RATE_THRESHOLD
    top_n: int = DEFAULT_TOP_N
    window_seconds: int = DEFAULT_WINDOW_SECONDS
    report_interval: float = DEFAULT_REPORT_INTERVAL
    from_start: bool = True
    fail_fast: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.rate_threshold < 0:
            raise ValueError(f"rate threshold must be >= 0, got {self.rate_threshold}")
        if self.top_n < 1:
            raise ValueError(f"top N must be >= 1, got {self.top_n}")
        if self.window_seconds <= 0:
            raise ValueError(f"window must be > 0 seconds, got {self.window_seconds}")
        if self.report_interval <= 0:
            raise ValueError(f"report interval must be > 0 seconds, got {self.report_interval}")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            filename=os.getenv(ENV_PREFIX + "FILENAME", DEFAULT_FILENAME),
            rate_threshold=float(os.getenv(ENV_PREFIX + "QPS", str(DEFAULT_RATE_THRESHOLD))),
            top_n=int(os.getenv(ENV_PREFIX + "TOP", str(DEFAULT_TOP_N))),
            window_seconds=int(os.getenv(ENV_PREFIX + "WINDOW_S", str(DEFAULT_WINDOW_SECONDS))),
            report_interval=float(os.getenv(ENV_PREFIX + "INTERVAL_S", str(DEFAULT_REPORT_INTERVAL))),
            from_start=_env_flag("FROM_START", True),
            fail_fast=_env_flag("FAIL_FAST", False),
            verbose=_env_flag("VERBOSE", False),
        )
