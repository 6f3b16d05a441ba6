"""Configuration management for SVCS."""

from .types import RepoLayout, UserConfig
from .loader import ConfigStore

__all__ = [
    "RepoLayout",
    "UserConfig",
    "ConfigStore",
]
