"""Public façade for the release_filter.data package.

This module exposes loading, saving and live reloading of the filter
configuration file. Callers should use this façade instead of importing
from the internal filter_config module directly.
"""

from .filter_config import (
    FilterConfigStore,
    default_filter_config,
    load_filter_config,
    save_filter_config,
)

__all__ = [
    "FilterConfigStore",
    "default_filter_config",
    "load_filter_config",
    "save_filter_config",
]
