import threading
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from release_filter import config
from release_filter.core import (
    FilterConfig,
    FilterConfigError,
    ensure_parent_dir,
    log_step,
    log_success,
    log_warning,
    read_json,
    write_json,
)


def default_filter_config() -> FilterConfig:
    """
    Built-in defaults with the RELEASE_FILTER_* environment overrides applied.
    """
    overrides: Dict[str, Any] = {"verbose_rejections": config.VERBOSE_REJECTIONS}

    if config.YEAR_THRESHOLD:
        try:
            overrides["year_threshold"] = int(config.YEAR_THRESHOLD)
        except ValueError as e:
            raise FilterConfigError(
                f"RELEASE_FILTER_YEAR_THRESHOLD is not an integer: {config.YEAR_THRESHOLD!r}"
            ) from e

    if config.ALLOWED_TAGS:
        tags = [t.strip() for t in config.ALLOWED_TAGS.split(",")]
        overrides["allowed_tags"] = tuple(t for t in tags if t)

    return FilterConfig(**overrides)


def load_filter_config(path: Optional[str | Path] = None) -> FilterConfig:
    """
    Load the filter configuration from a JSON object file.

    - missing file -> default_filter_config()
    - invalid JSON, non-object document or invalid fields -> FilterConfigError
    """
    path = path or config.FILTER_CONFIG_FILE

    errors = []
    data = read_json(path, default=None, on_error=errors.append)
    if errors:
        raise FilterConfigError(f"{path}: invalid JSON ({errors[0]})")
    if data is None:
        return default_filter_config()
    if not isinstance(data, dict):
        raise FilterConfigError(f"{path}: expected a JSON object")

    try:
        return FilterConfig.model_validate(data)
    except ValidationError as e:
        raise FilterConfigError(f"{path}: {e}") from e


def save_filter_config(
    filter_config: FilterConfig | Dict[str, Any],
    path: Optional[str | Path] = None,
) -> FilterConfig:
    """
    Validate and write a filter config; returns the config as written.

    A plain dict is validated first so an invalid document never reaches the
    file a running FilterConfigStore is watching.
    """
    path = path or config.FILTER_CONFIG_FILE
    if not isinstance(filter_config, FilterConfig):
        try:
            filter_config = FilterConfig.model_validate(filter_config)
        except ValidationError as e:
            raise FilterConfigError(f"{path}: {e}") from e

    write_json(path, filter_config.model_dump(mode="json"))
    return filter_config


def _event_path(raw: str | bytes) -> Path:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    return Path(raw).resolve()


class ConfigFileHandler(FileSystemEventHandler):
    """Forward events on the config file (and only it) to its store."""

    def __init__(self, store: "FilterConfigStore") -> None:
        super().__init__()
        self.store = store

    def on_created(self, event: FileSystemEvent) -> None:
        self._maybe_reload(event.src_path, event.is_directory)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._maybe_reload(event.src_path, event.is_directory)

    def on_moved(self, event: FileSystemEvent) -> None:
        # write_json replaces the file by moving a temporary file onto it
        self._maybe_reload(event.dest_path, event.is_directory)

    def on_deleted(self, event: FileSystemEvent) -> None:
        if not event.is_directory and _event_path(event.src_path) == self.store.path:
            self.store.removed()

    def _maybe_reload(self, raw_path: str | bytes, is_directory: bool) -> None:
        if is_directory or not raw_path:
            return
        if _event_path(raw_path) == self.store.path:
            self.store.reload()


class FilterConfigStore:
    """
    Serve the filter config from a file, reloading it when it changes.

    With watch=True (or after start()) a watchdog observer watches the
    config file's directory and reloads on every write, create or move onto
    the file. If a reload fails, or the file is removed, the previous config
    stays active and a warning is logged. get() never touches the disk.
    """

    def __init__(self, path: Optional[str | Path] = None, watch: bool = False) -> None:
        self.path = Path(path or config.FILTER_CONFIG_FILE).resolve()
        self.handler = ConfigFileHandler(self)
        self._lock = threading.Lock()
        self._observer: Optional[BaseObserver] = None

        log_step(f"Loading filter config: {self.path}")
        self._config = load_filter_config(self.path)
        log_success("Filter config loaded.")

        if watch:
            self.start()

    def get(self) -> FilterConfig:
        with self._lock:
            return self._config

    def reload(self) -> None:
        if not self.path.exists():
            # deleted again before we got to read it
            self.removed()
            return
        log_step(f"Reloading filter config: {self.path}")
        with self._lock:
            try:
                self._config = load_filter_config(self.path)
            except FilterConfigError as e:
                log_warning(f"Error loading filter config, keeping previous one: {e}")
                return
        log_success("Filter config reloaded.")

    def removed(self) -> None:
        log_warning(f"Filter config {self.path} was removed, keeping previous one.")

    def start(self) -> None:
        if self._observer is not None:
            return
        ensure_parent_dir(self.path)
        observer = Observer()
        observer.schedule(self.handler, str(self.path.parent), recursive=False)
        observer.start()
        self._observer = observer

    def stop(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None

    @property
    def watching(self) -> bool:
        return self._observer is not None

    def __enter__(self) -> "FilterConfigStore":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
