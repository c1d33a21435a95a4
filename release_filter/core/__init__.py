"""Public façade for the release_filter.core package.

This module exposes logging helpers, filesystem utilities, errors and the
base models shared by the pipeline, data and api packages. Callers should
import these cross-cutting concerns from this façade instead of the internal
submodules.
"""

from .errors import FilterConfigError, MalformedRecordError, ReleaseFilterError
from .fs_utils import ensure_parent_dir, read_json, write_json
from .logging_config import StdoutHandler, configure_logging, configure_trace_output
from .logging_utils import (
    log_debug,
    log_error,
    log_info,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import (
    DEFAULT_ALLOWED_TAGS,
    DEFAULT_YEAR_THRESHOLD,
    AdmissionDecision,
    AdmissionReason,
    FilterConfig,
    ReleaseCriteria,
    ReleaseRecord,
    coerce_record,
)

__all__ = [
    "configure_logging",
    "configure_trace_output",
    "StdoutHandler",
    "log_section",
    "log_info",
    "log_step",
    "log_success",
    "log_debug",
    "log_warning",
    "log_error",
    "ensure_parent_dir",
    "write_json",
    "read_json",
    "ReleaseFilterError",
    "MalformedRecordError",
    "FilterConfigError",
    "DEFAULT_ALLOWED_TAGS",
    "DEFAULT_YEAR_THRESHOLD",
    "ReleaseRecord",
    "FilterConfig",
    "ReleaseCriteria",
    "AdmissionReason",
    "AdmissionDecision",
    "coerce_record",
]
