"""Trace lines for admission decisions.

Decisions are computed by AdmissionFilter.decide() and only then handed to a
TraceSink, so the formatting and destination of the audit line can change
without touching the decision logic. Whether rejections are verbose comes
from the filter's FilterConfig, passed along with each decision.

Line formats:
  [+] year=<year> <name>
  [+] tag=<tag> <name>
  [-] <name>
  [-] <name> : <year> : <tag>, <tag>     (verbose_rejections)
"""

import threading
from typing import List, Optional

from release_filter.core import AdmissionDecision, AdmissionReason, configure_trace_output

TRACE_LOGGER_NAME = "release_filter.trace"


def format_trace_line(
    decision: AdmissionDecision,
    verbose_rejections: bool = False,
) -> str:
    record = decision.record

    if decision.reason == AdmissionReason.YEAR:
        return f"[+] year={decision.matched} {record.name}"
    if decision.reason == AdmissionReason.TAG:
        return f"[+] tag={decision.matched} {record.name}"

    if verbose_rejections:
        return f"[-] {record.name} : {record.year} : {', '.join(record.tags)}"
    return f"[-] {record.name}"


class TraceSink:
    """Receives one decision per evaluated record."""

    def emit(self, decision: AdmissionDecision, verbose_rejections: bool = False) -> None:
        raise NotImplementedError


class LoggingTraceSink(TraceSink):
    """
    Print trace lines, unprefixed, on stdout through the release_filter.trace
    logger.
    """

    def __init__(self) -> None:
        self.logger = configure_trace_output(TRACE_LOGGER_NAME)

    def emit(self, decision: AdmissionDecision, verbose_rejections: bool = False) -> None:
        self.logger.info("%s", format_trace_line(decision, verbose_rejections))


class CollectingTraceSink(TraceSink):
    """Keep trace lines in memory, in emission order."""

    def __init__(self) -> None:
        self._lines: List[str] = []
        self._lock = threading.Lock()

    def emit(self, decision: AdmissionDecision, verbose_rejections: bool = False) -> None:
        line = format_trace_line(decision, verbose_rejections)
        with self._lock:
            self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        with self._lock:
            return list(self._lines)

    @property
    def last_line(self) -> Optional[str]:
        with self._lock:
            return self._lines[-1] if self._lines else None
