"""FastAPI dependency injection."""

from dealcalc.config import Settings, settings


def get_settings() -> Settings:
    return settings
