from typing import Iterable, List, Optional

from release_filter.core import ReleaseCriteria, ReleaseRecord, coerce_record
from release_filter.pipeline.admission import AdmissionFilter, RecordLike
from release_filter.pipeline.criteria import matches_criteria


class ReleaseFilterChain:
    """
    Criteria prefilter followed by the admission filter.

    Only records that pass the criteria reach the admission filter, so only
    those produce a trace line.
    """

    def __init__(
        self,
        criteria: Optional[ReleaseCriteria] = None,
        admission_filter: Optional[AdmissionFilter] = None,
    ) -> None:
        self.criteria = criteria or ReleaseCriteria()
        self.admission_filter = admission_filter or AdmissionFilter()

    def accepts(self, record: RecordLike) -> bool:
        rec = coerce_record(record)
        if not matches_criteria(rec, self.criteria):
            return False
        return self.admission_filter.is_admitted(rec)

    def filter_records(self, records: Iterable[RecordLike]) -> List[ReleaseRecord]:
        """Return the accepted records, in input order."""
        accepted: List[ReleaseRecord] = []
        for record in records:
            rec = coerce_record(record)
            if self.accepts(rec):
                accepted.append(rec)
        return accepted
