from pathlib import Path

from release_filter.core import ensure_parent_dir, read_json, write_json


def test_read_json_missing_file_returns_default(tmp_path: Path) -> None:
    result = read_json(tmp_path / "missing.json", default={"allowed_tags": []})

    assert result == {"allowed_tags": []}


def test_read_json_invalid_json_calls_on_error_and_returns_default(
    tmp_path: Path,
) -> None:
    path = tmp_path / "invalid.json"
    path.write_text("{ invalid json", encoding="utf-8")

    errors = []

    result = read_json(path, default=None, on_error=errors.append)

    assert result is None
    assert len(errors) == 1


def test_write_json_creates_parent_dirs_and_leaves_no_temp_files(tmp_path: Path) -> None:
    data = {"allowed_tags": ["ambient", "glitch"], "year_threshold": 2016}
    path = tmp_path / "nested" / "path" / "filter.json"

    write_json(path, data)

    assert read_json(path) == data
    assert [p.name for p in path.parent.iterdir()] == ["filter.json"]


def test_ensure_parent_dir(tmp_path: Path) -> None:
    file_path = tmp_path / "parent" / "sub" / "file.json"

    ensure_parent_dir(file_path)

    assert file_path.parent.is_dir()
    assert not file_path.exists()
