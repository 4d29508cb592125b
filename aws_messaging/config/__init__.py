"""Configuration package."""

from aws_messaging.config.logging import configure_logging, get_logger
from aws_messaging.config.settings import Settings, load_settings, settings

__all__ = ["settings", "Settings", "load_settings", "configure_logging", "get_logger"]
