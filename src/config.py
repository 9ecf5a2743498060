from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class DemoConfig:
    log_level: str = "WARNING"
    distance_km: float = 120.0
    output: Literal["text", "json"] = "text"
    teardown: bool = True

    @staticmethod
    def from_env() -> "DemoConfig":
        """Read the demo configuration from the environment.

        Env vars:
          - TRANSIT_LOG_LEVEL: logging level name (default WARNING)
          - TRANSIT_DEMO_DISTANCE_KM: distance for the travel-time comparison
          - TRANSIT_OUTPUT: "text" or "json" (json appends a registry snapshot)
          - TRANSIT_TEARDOWN: print "destroyed" notices at exit (default on)
        """

        log_level = (os.getenv("TRANSIT_LOG_LEVEL") or "WARNING").strip().upper()
        # getLevelName maps registered names to their int level.
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Invalid TRANSIT_LOG_LEVEL: {log_level}")

        output = (os.getenv("TRANSIT_OUTPUT") or "text").strip().lower()
        if output not in {"text", "json"}:
            raise ValueError(f"Invalid TRANSIT_OUTPUT: {output}")

        return DemoConfig(
            log_level=log_level,
            distance_km=float(os.getenv("TRANSIT_DEMO_DISTANCE_KM", "120.0")),
            output="json" if output == "json" else "text",
            teardown=_env_bool("TRANSIT_TEARDOWN", True),
        )
