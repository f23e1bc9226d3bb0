"""Configuration management for the idle agent runner."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from idle_agent.constants import ConfigDefaults, LogFormat


@dataclass
class Config:
    """Runner configuration loaded from .env file."""

    database_url: str
    poll_query: str
    poll_interval_seconds: float
    log_level: str

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from .env file."""
        # Load .env file from project root or /app/.env in container
        env_paths = [
            Path.cwd() / ".env",
            Path("/app/.env"),
        ]

        for env_path in env_paths:
            if env_path.exists():
                load_dotenv(env_path)
                break

        # Required fields
        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            raise ValueError("DATABASE_URL environment variable is required")

        poll_query = os.getenv("POLL_QUERY")
        if not poll_query:
            raise ValueError("POLL_QUERY environment variable is required")

        # Optional fields with defaults
        raw_interval = os.getenv("POLL_INTERVAL_SECONDS", str(ConfigDefaults.POLL_INTERVAL_SECONDS))
        try:
            poll_interval_seconds = float(raw_interval)
        except ValueError as e:
            raise ValueError(
                f"POLL_INTERVAL_SECONDS must be a number of seconds, got {raw_interval!r}"
            ) from e
        log_level = os.getenv("LOG_LEVEL", ConfigDefaults.LOG_LEVEL)

        return cls(
            database_url=database_url,
            poll_query=poll_query,
            poll_interval_seconds=poll_interval_seconds,
            log_level=log_level,
        )


def setup_logging(log_level: str) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LogFormat.FORMAT,
        datefmt=LogFormat.DATE_FORMAT,
    )
