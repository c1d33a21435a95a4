from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from release_filter.core import AdmissionReason, ReleaseCriteria


class EvaluateRequest(BaseModel):
    # Validated by coerce_record so malformed records map to MalformedRecordError.
    record: Dict[str, Any]
    criteria: Optional[ReleaseCriteria] = None


class EvaluateResponse(BaseModel):
    admitted: bool
    reason: Optional[AdmissionReason] = None
    matched: Union[int, str, None] = None
    trace: Optional[str] = None
    passed_criteria: bool = True


class FilterConfigResponse(BaseModel):
    allowed_tags: List[str]
    year_threshold: int
    verbose_rejections: bool
