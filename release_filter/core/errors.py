class ReleaseFilterError(Exception):
    """Base class for release-filter errors."""


class MalformedRecordError(ReleaseFilterError, ValueError):
    """
    A record cannot be evaluated: `year`, `name` or `tags` is missing,
    the year is not numeric, or the tags are not a list of strings.
    """


class FilterConfigError(ReleaseFilterError):
    """The filter configuration file could not be parsed or validated."""
