from pathlib import Path

from bakusave.data import paths
from bakusave.data.repositories import PlatformsRepository


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_get_definitions_path_bundled_exists(monkeypatch) -> None:
    monkeypatch.delenv(paths.DEFINITIONS_ENV_VAR, raising=False)
    definitions_path = paths.get_definitions_path()
    assert definitions_path.name == "definitions"
    assert (definitions_path / "platforms.json").exists()
    assert (definitions_path / "styling_fields.json").exists()


def test_get_definitions_path_env_override(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.DEFINITIONS_ENV_VAR, str(tmp_path))
    assert paths.get_definitions_path() == tmp_path


def test_explicit_base_path_beats_env_override(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.DEFINITIONS_ENV_VAR, str(tmp_path / "elsewhere"))
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_repository_reads_env_override(monkeypatch, tmp_path: Path) -> None:
    bundled = paths.get_package_root() / "data" / "definitions" / "platforms.json"
    (tmp_path / "platforms.json").write_text(bundled.read_text(encoding="utf-8"), encoding="utf-8")
    monkeypatch.setenv(paths.DEFINITIONS_ENV_VAR, str(tmp_path))

    repo = PlatformsRepository()

    assert repo.get("wii").save_size == 13952
