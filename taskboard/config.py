from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from the environment.

    Attributes:
        intake_column: column that receives new tasks when none is given
        seed: initial board, "demo" (sample tasks) or "empty"
        log_level: root logging level name
        host, port: bind address for the uvicorn runner
    """

    intake_column: str = "todo"
    seed: str = "demo"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            intake_column=os.getenv("TASKBOARD_INTAKE_COLUMN", "todo"),
            seed=os.getenv("TASKBOARD_SEED", "demo").lower(),
            log_level=os.getenv("TASKBOARD_LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
