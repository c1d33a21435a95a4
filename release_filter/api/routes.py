import threading
from typing import Dict, Optional

from fastapi import APIRouter, HTTPException

from release_filter.core import FilterConfigError, MalformedRecordError, coerce_record
from release_filter.data import FilterConfigStore
from release_filter.pipeline import AdmissionFilter, CollectingTraceSink, matches_criteria

from .schemas import EvaluateRequest, EvaluateResponse, FilterConfigResponse

router = APIRouter()

_config_store: Optional[FilterConfigStore] = None
_config_store_lock = threading.Lock()


def get_config_store() -> FilterConfigStore:
    """Shared store for the configured file, watched for live reloads."""
    global _config_store
    with _config_store_lock:
        if _config_store is None:
            _config_store = FilterConfigStore(watch=True)
        return _config_store


@router.get("/health")
def filter_health() -> Dict[str, str]:
    return {"status": "ok"}


@router.get("/config", response_model=FilterConfigResponse)
def get_filter_config() -> FilterConfigResponse:
    try:
        current = get_config_store().get()
    except FilterConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return FilterConfigResponse(
        allowed_tags=list(current.allowed_tags),
        year_threshold=current.year_threshold,
        verbose_rejections=current.verbose_rejections,
    )


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_record(req: EvaluateRequest) -> EvaluateResponse:
    """
    Evaluate one record against the current filter config.

    If `criteria` is given and the record fails it, returns
    `admitted=false, passed_criteria=false` without a trace line.

    A malformed record returns HTTP 422 with the validation message.
    """
    try:
        current = get_config_store().get()
    except FilterConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))

    try:
        record = coerce_record(req.record)
    except MalformedRecordError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if req.criteria is not None and not matches_criteria(record, req.criteria):
        return EvaluateResponse(admitted=False, passed_criteria=False)

    sink = CollectingTraceSink()
    decision = AdmissionFilter(current, sink=sink).evaluate(record)

    return EvaluateResponse(
        admitted=decision.admitted,
        reason=decision.reason,
        matched=decision.matched,
        trace=sink.last_line,
    )


def stop_config_store() -> None:
    with _config_store_lock:
        if _config_store is not None:
            _config_store.stop()
