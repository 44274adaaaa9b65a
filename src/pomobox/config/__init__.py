"""Configuration: config manager and the packaged JSON defaults."""

from pomobox.config.config_manager import load_config

__all__ = ["load_config"]
