import logging

# Project logger; trace lines use the "release_filter.trace" child.
logger = logging.getLogger("release_filter")


def log_section(title: str) -> None:
    """
    Log a section header (CLI runs).
    """
    logger.info("=== %s ===", title)


def log_info(message: str) -> None:
    logger.info("%s", message)


def log_step(message: str) -> None:
    """
    Action step, e.g. loading or reloading the filter config.
    """
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_debug(message: str) -> None:
    """
    Detail that is only useful when auditing prefilter drops.
    """
    logger.debug("%s", message)


def log_warning(message: str) -> None:
    """
    Warning / non-fatal problem, e.g. a config reload that failed.
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    logger.error("❌ %s", message)
