"""Constants for the idle agent."""


class ConfigDefaults:
    """Fallback values for optional configuration."""

    POLL_INTERVAL_SECONDS = 1.0
    LOG_LEVEL = "INFO"


class LogFormat:
    """Logging layout shared by the library and the command-line runner."""

    FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
