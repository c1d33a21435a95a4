"""Record admission: keep or drop a release by year and genre tags.

A record is admitted when its year reaches the configured threshold, or
otherwise when one of the allowed tags is attached to it. The allowed tags
are scanned in configuration order, so the tag reported for a record with
several matching tags does not depend on the order of the record's own tags.

AdmissionFilter holds no mutable state besides its sink: the same instance
can be shared between threads.
"""

import threading
from typing import Any, Mapping, Optional, Union

from release_filter.core import (
    AdmissionDecision,
    AdmissionReason,
    FilterConfig,
    ReleaseRecord,
    coerce_record,
)
from release_filter.pipeline.trace import LoggingTraceSink, TraceSink

RecordLike = Union[ReleaseRecord, Mapping[str, Any]]


class AdmissionFilter:
    def __init__(
        self,
        config: Optional[FilterConfig] = None,
        sink: Optional[TraceSink] = None,
    ) -> None:
        self.config = config or FilterConfig()
        self.sink = sink or LoggingTraceSink()

    def decide(self, record: RecordLike) -> AdmissionDecision:
        """
        Compute the decision for `record` without emitting anything.

        Raises MalformedRecordError if the record cannot be evaluated.
        """
        rec = coerce_record(record)

        if rec.year >= self.config.year_threshold:
            return AdmissionDecision(
                record=rec,
                admitted=True,
                reason=AdmissionReason.YEAR,
                matched=rec.year,
            )

        present = set(rec.tags)
        for tag in self.config.allowed_tags:
            if tag in present:
                return AdmissionDecision(
                    record=rec,
                    admitted=True,
                    reason=AdmissionReason.TAG,
                    matched=tag,
                )

        return AdmissionDecision(
            record=rec,
            admitted=False,
            reason=AdmissionReason.REJECTED,
        )

    def evaluate(self, record: RecordLike) -> AdmissionDecision:
        """Decide, then emit exactly one trace line."""
        decision = self.decide(record)
        self.sink.emit(decision, self.config.verbose_rejections)
        return decision

    def is_admitted(self, record: RecordLike) -> bool:
        return self.evaluate(record).admitted


_default_filter: Optional[AdmissionFilter] = None
_default_filter_lock = threading.Lock()


def is_admitted(record: RecordLike, config: Optional[FilterConfig] = None) -> bool:
    """
    Evaluate one record with the default configuration (or `config`) and
    print the trace line on stdout through the release_filter.trace logger.
    """
    global _default_filter

    if config is not None:
        return AdmissionFilter(config).is_admitted(record)
    with _default_filter_lock:
        if _default_filter is None:
            _default_filter = AdmissionFilter()
    return _default_filter.is_admitted(record)
