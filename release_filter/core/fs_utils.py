import json
import os
from pathlib import Path
import tempfile
from typing import Any, Callable, Optional


def ensure_parent_dir(path: Path | str) -> None:
    """
    Create the parent directory of a config file path if it is missing.
    """
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def write_json(path: str | Path, data: Any) -> None:
    """
    Write a JSON document through a temporary file and os.replace.

    The temporary file lives next to the target, so the replace shows up as a
    single move onto the target path for file watchers (FilterConfigStore
    reloads on it) and readers never see a truncated document. The file ends
    with a newline since filter configs are also edited by hand.
    """
    target_path = Path(path)
    ensure_parent_dir(target_path)

    fd, tmp_name = tempfile.mkstemp(
        dir=str(target_path.parent),
        prefix=f".{target_path.name}.",
        suffix=".tmp",
    )
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, target_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def read_json(
    path: str | Path,
    default: Any = None,
    *,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> Any:
    """
    Read a JSON file.

    - returns `default` if the file does not exist
    - returns `default` if the JSON is invalid, calling on_error first
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return default

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        if on_error:
            on_error(e)
        return default
