from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import MalformedRecordError

DEFAULT_ALLOWED_TAGS: Tuple[str, ...] = (
    "ambient",
    "vaporwave",
    "glitch",
    "synthpop",
    "synthwave",
)
DEFAULT_YEAR_THRESHOLD = 2016


class ReleaseRecord(BaseModel):
    """
    A music release as handed over by the caller.

    - year   : release year
    - name   : human-readable identifier, used in trace lines
    - tags   : descriptive tags; order is kept for display only
    - format : optional release format ("FLAC", "MP3", ...), only read by
               the criteria prefilter
    """

    model_config = ConfigDict(frozen=True)

    year: int
    name: str
    tags: List[str]
    format: Optional[str] = None


class FilterConfig(BaseModel):
    """
    Immutable configuration of an AdmissionFilter.

    allowed_tags keeps its order: it is the scan order used to pick the tag
    reported in the trace line.
    """

    model_config = ConfigDict(frozen=True)

    allowed_tags: Tuple[str, ...] = DEFAULT_ALLOWED_TAGS
    year_threshold: int = DEFAULT_YEAR_THRESHOLD
    verbose_rejections: bool = False

    @field_validator("allowed_tags")
    @classmethod
    def _dedupe_tags(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        # first occurrence wins
        return tuple(dict.fromkeys(value))


class ReleaseCriteria(BaseModel):
    """
    Hard prefilter applied before admission. Empty lists mean no constraint.
    """

    years: List[int] = []
    tags: List[str] = []
    formats: List[str] = []


class AdmissionReason(str, Enum):
    YEAR = "year"
    TAG = "tag"
    REJECTED = "rejected"


@dataclass(frozen=True)
class AdmissionDecision:
    record: ReleaseRecord
    admitted: bool
    reason: AdmissionReason
    matched: Union[int, str, None] = None


def coerce_record(record: Union[ReleaseRecord, Mapping[str, Any]]) -> ReleaseRecord:
    """
    Return `record` as a ReleaseRecord.

    Mappings are validated; anything that does not fit raises
    MalformedRecordError instead of a pydantic ValidationError.
    """
    if isinstance(record, ReleaseRecord):
        return record
    if not isinstance(record, Mapping):
        raise MalformedRecordError(
            f"expected a release record or mapping, got {type(record).__name__}"
        )
    try:
        return ReleaseRecord.model_validate(dict(record))
    except ValidationError as e:
        raise MalformedRecordError(str(e)) from e
