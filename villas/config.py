"""Runtime configuration.

Defaults live on the dataclass; ``VILLAS_*`` environment variables override
them (a ``.env`` file is honoured through python-dotenv by ``load_config``).
Command line flags take precedence over both and are applied by ``run.py``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

LOG_LEVELS = ("debug", "info", "warn", "error")
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class VillasConfig:
    log_level: str = "info"
    log_json: bool = False
    log_file: Optional[str] = None
    lattice_width: int = 5
    lattice_height: int = 5
    fuzz_seed: Optional[int] = None
    fuzz_placements: int = 200
    fuzz_group_size: int = 2

    def __post_init__(self):
        self.log_level = self.log_level.lower()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}; got {self.log_level!r}")
        if self.fuzz_placements < 0:
            raise ValueError(f"fuzz_placements must be >= 0; got {self.fuzz_placements}")
        if self.fuzz_group_size < 1:
            raise ValueError(f"fuzz_group_size must be >= 1; got {self.fuzz_group_size}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "VillasConfig":
        env = os.environ if environ is None else environ
        overrides = {}
        for env_key, (attr, kind) in ENV_MAP.items():
            if env_key in env:
                overrides[attr] = _coerce(env_key, env[env_key], kind)
        return cls(**overrides)


# env var -> (attribute, kind)
ENV_MAP: Dict[str, Tuple[str, str]] = {
    "VILLAS_LOG_LEVEL": ("log_level", "str"),
    "VILLAS_LOG_JSON": ("log_json", "bool"),
    "VILLAS_LOG_FILE": ("log_file", "optional_str"),
    "VILLAS_LATTICE_WIDTH": ("lattice_width", "int"),
    "VILLAS_LATTICE_HEIGHT": ("lattice_height", "int"),
    "VILLAS_FUZZ_SEED": ("fuzz_seed", "optional_int"),
    "VILLAS_FUZZ_PLACEMENTS": ("fuzz_placements", "int"),
    "VILLAS_FUZZ_GROUP_SIZE": ("fuzz_group_size", "int"),
}


def _coerce(env_key: str, raw: str, kind: str):
    raw = raw.strip()
    if kind == "bool":
        return raw.lower() in _TRUTHY
    if kind in ("optional_str", "optional_int") and raw == "":
        return None
    if kind in ("int", "optional_int"):
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{env_key} must be an integer; got {raw!r}") from None
    return raw


def load_config(env_file: str | None = None) -> VillasConfig:
    """Load ``.env`` (explicit path, or the nearest one above the working directory) then read the environment."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))
    return VillasConfig.from_env()


__all__ = ["VillasConfig", "ENV_MAP", "LOG_LEVELS", "load_config"]
