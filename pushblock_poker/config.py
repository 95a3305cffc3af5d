from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_ENV = "PUSHBLOCK_LOG_LEVEL"
LEVEL_PATH_ENV = "PUSHBLOCK_LEVEL"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    level_path: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(LOG_LEVEL_ENV, cls.log_level).upper(),
            level_path=env.get(LEVEL_PATH_ENV) or None,
        )
