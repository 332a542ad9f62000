"""Runtime configuration for the Reviews service, read from the environment.

    REVIEWS_ENV         development | test | staging | production
    REVIEW_REPOSITORY   memory | cosmos
    COSMOS_ENDPOINT     Cosmos account endpoint
    COSMOS_KEY          Cosmos account key
    COSMOS_DATABASE     database id (default "reviews-db")
    COSMOS_CONTAINER    container id (default "reviews")
    LOG_LEVEL           overrides the level derived from REVIEWS_ENV
    LOG_DIR             write rotating log files into this directory
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    repository: str = "memory"
    cosmos_endpoint: str = ""
    cosmos_key: str = ""
    cosmos_database: str = "reviews-db"
    cosmos_container: str = "reviews"
    log_level: str | None = None
    log_dir: str | None = None

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        return cls(
            env=environ.get("REVIEWS_ENV", "development").lower(),
            repository=environ.get("REVIEW_REPOSITORY", "memory").lower(),
            cosmos_endpoint=environ.get("COSMOS_ENDPOINT", ""),
            cosmos_key=environ.get("COSMOS_KEY", ""),
            cosmos_database=environ.get("COSMOS_DATABASE", "reviews-db"),
            cosmos_container=environ.get("COSMOS_CONTAINER", "reviews"),
            log_level=environ.get("LOG_LEVEL") or None,
            log_dir=environ.get("LOG_DIR") or None,
        )
