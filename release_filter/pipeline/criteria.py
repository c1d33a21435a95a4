from release_filter.core import ReleaseCriteria, ReleaseRecord, log_debug


def matches_criteria(record: ReleaseRecord, criteria: ReleaseCriteria) -> bool:
    """
    Return True if `record` passes every non-empty constraint in `criteria`.

      - years   : record.year must be one of them (exact match)
      - tags    : at least one of them must be among record.tags
      - formats : record.format must be one of them

    Dropped records are only logged at DEBUG; they get no trace line.
    """
    if criteria.years and record.year not in criteria.years:
        log_debug(f"criteria: {record.name} dropped, year {record.year} not wanted")
        return False

    if criteria.tags and not any(tag in record.tags for tag in criteria.tags):
        log_debug(f"criteria: {record.name} dropped, no wanted tag")
        return False

    if criteria.formats and record.format not in criteria.formats:
        log_debug(f"criteria: {record.name} dropped, format {record.format!r} not wanted")
        return False

    return True
