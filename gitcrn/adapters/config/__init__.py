"""
App config adapter
"""
from .loader import AppConfig, ConfigLoader, render_default_config

__all__ = ["AppConfig", "ConfigLoader", "render_default_config"]
