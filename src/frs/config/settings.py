from __future__ import annotations

import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration.

    Values can be overridden via environment variables using the `FRS_` prefix.
    For example:
      - FRS_MAX_DISTANCE=3
      - FRS_ARTIFACTS_DIR=artifacts
    RUN_ID is also supported as a fallback for run_id.
    """

    model_config = SettingsConfigDict(env_prefix="FRS_")

    # Which evaluation run to write (e.g., local, snap)
    run_id: str = "local"

    @classmethod
    def run_id_from_env(cls) -> str:
        return os.getenv("FRS_RUN_ID") or os.getenv("RUN_ID") or "local"

    # Where evaluation artifacts are stored
    artifacts_dir: str = "artifacts"

    # Where edge lists are downloaded / cached
    data_dir: str = "data"

    # Default BFS bound for distance-based recommendations
    max_distance: int = 2

    # Default cut-off for ranked lists in evaluation
    top_k: int = 10

    # Users sampled per strategy in offline evaluation
    max_users: int = 500

    log_level: str = "INFO"


settings = Settings()
