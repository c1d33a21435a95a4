"""Public façade for the release_filter.pipeline package.

This module exposes the admission filter, its trace sinks, the criteria
prefilter and the filter chain. Other packages should import pipeline
behaviour from this façade instead of the internal pipeline submodules.
"""

from .admission import AdmissionFilter, is_admitted
from .chain import ReleaseFilterChain
from .criteria import matches_criteria
from .trace import (
    TRACE_LOGGER_NAME,
    CollectingTraceSink,
    LoggingTraceSink,
    TraceSink,
    format_trace_line,
)

__all__ = [
    "AdmissionFilter",
    "is_admitted",
    "ReleaseFilterChain",
    "matches_criteria",
    "TRACE_LOGGER_NAME",
    "TraceSink",
    "LoggingTraceSink",
    "CollectingTraceSink",
    "format_trace_line",
]
