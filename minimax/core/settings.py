import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .enums import Player

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/solver.yaml"

# Environment variable -> settings field
ENV_OVERRIDES = {
    "MINIMAX_PLAYER": "player",
    "MINIMAX_DEPTH": "depth",
    "MINIMAX_STRATEGY": "strategy",
}


class SolverSettings(BaseModel):
    player: Player = Player.ONE
    # Negative depths are rejected here, the engine itself never checks
    depth: int = Field(default=4, ge=0)
    strategy: str = "tree"

    @field_validator("player", mode="before")
    @classmethod
    def _parse_player(cls, value):
        # Env vars arrive as strings like "2"
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return value


def load_settings(config_path: str = DEFAULT_CONFIG_PATH) -> SolverSettings:
    """
    Reads the `solver:` section of the YAML file, then applies any
    MINIMAX_* environment variables on top. A missing file means defaults.
    """
    data: Dict[str, Any] = {}
    path = Path(config_path)
    if path.exists():
        with open(path, "r") as f:
            data = dict((yaml.safe_load(f) or {}).get("solver") or {})
        logger.debug("Loaded solver settings from %s", path)
    else:
        logger.debug("No config at %s, using defaults", path)

    for env_key, field in ENV_OVERRIDES.items():
        value = os.getenv(env_key)
        if value is not None:
            data[field] = value

    return SolverSettings(**data)
