import logging
import sys
from typing import IO, Optional


class StdoutHandler(logging.StreamHandler):
    """
    StreamHandler writing to whatever sys.stdout is at emit time.

    Trace lines must follow stdout redirections made after the handler was
    installed (pytest capture, contextlib.redirect_stdout).
    """

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> IO[str]:
        return sys.stdout


def configure_logging(
    level: int | str = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Configure root logging for release-filter.

    - Logs go to `stream` (stdout by default; the CLI passes stderr so that
      stdout only carries trace lines)
    - Format: time, level, logger name, message
    - Only installs a handler once; later calls just adjust the level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()

    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root.addHandler(handler)
    root.setLevel(level)


def configure_trace_output(logger_name: str) -> logging.Logger:
    """
    Give the trace logger its own bare stdout handler.

    Trace lines are printed exactly as formatted (`[+] year=2020 A`), at INFO,
    whether or not the host configured logging. The logger does not
    propagate, so a root handler never prints the line a second time with a
    timestamp prefix.
    """
    trace_logger = logging.getLogger(logger_name)
    if not any(isinstance(h, StdoutHandler) for h in trace_logger.handlers):
        handler = StdoutHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        trace_logger.addHandler(handler)
    trace_logger.setLevel(logging.INFO)
    trace_logger.propagate = False
    return trace_logger
