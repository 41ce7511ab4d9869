"""Data models for gutimer."""

from .config_models import AppConfig, RunOptions

__all__ = ["AppConfig", "RunOptions"]
