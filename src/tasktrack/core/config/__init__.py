"""
Configuration models and loading.

This module provides Pydantic models for tasktrack configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .env import get_env_files, load_layered_env
from .loader import (
    clear_cache,
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_config,
)
from .models import DisplayConfig, StoreConfig, TasktrackConfig, default_store_path

__all__ = [
    # Models
    "DisplayConfig",
    "StoreConfig",
    "TasktrackConfig",
    "default_store_path",
    # Loader functions
    "clear_cache",
    "get_env_files",
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_config",
    "load_layered_env",
]
