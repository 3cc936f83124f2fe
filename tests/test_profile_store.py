"""Unit tests for the per-user profile store."""

from pathlib import Path

import pytest

from ctxgen.config import AnalyzerConfig
from ctxgen.exceptions import ConfigError, ProfileNotFoundError
from ctxgen.profile_store import (
    delete_profile,
    get_store_dir,
    list_profiles,
    load_profile,
    materialize_profile,
    path_for_name,
    save_profile,
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "context_config.yaml"
    path.write_text("includeExtensions: [.java]\n")
    return path


def test_store_dir_uses_xdg_config_home(profile_store):
    assert get_store_dir() == profile_store


def test_store_dir_defaults_to_dot_config(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_store_dir() == tmp_path / ".config" / "ctxgen"


def test_store_dir_on_macos(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "darwin")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_store_dir() == tmp_path / "Library" / "Application Support" / "ctxgen"


def test_store_dir_on_windows(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path / "Roaming"))
    assert get_store_dir() == Path(str(tmp_path / "Roaming")) / "ctxgen"


def test_store_dir_on_windows_without_appdata(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "win32")
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_store_dir() == tmp_path / "AppData" / "Roaming" / "ctxgen"


@pytest.mark.parametrize(
    "name,file_name",
    [("java", "java.yaml"), ("java.yaml", "java.yaml"), ("java.yml", "java.yml"), ("v1.2", "v1.2.yaml")],
)
def test_path_for_name(profile_store, name, file_name):
    assert path_for_name(name) == profile_store / file_name


def test_save_and_load_profile(profile_store, config_file):
    target = save_profile(config_file, "java")
    assert target == profile_store / "java.yaml"
    assert target.read_text() == config_file.read_text()
    assert load_profile("java") == AnalyzerConfig(include_extensions={".java"})


def test_save_replaces_existing_profile(profile_store, config_file):
    save_profile(config_file, "java")
    config_file.write_text("includeExtensions: [.kt]\n")
    save_profile(config_file, "java")
    assert load_profile("java").include_extensions == {".kt"}


def test_save_missing_source(profile_store, tmp_path):
    with pytest.raises(FileNotFoundError):
        save_profile(tmp_path / "missing.yaml", "java")
    assert not profile_store.exists()


def test_load_missing_profile(profile_store):
    with pytest.raises(ProfileNotFoundError) as exc_info:
        load_profile("nope")
    assert exc_info.value.name == "nope"
    assert exc_info.value.path == str(profile_store / "nope.yaml")


def test_load_invalid_profile_is_an_error(profile_store):
    profile_store.mkdir(parents=True)
    (profile_store / "broken.yaml").write_text("- not\n- a mapping\n")
    with pytest.raises(ConfigError):
        load_profile("broken")


def test_materialize_profile(profile_store, config_file, tmp_path):
    save_profile(config_file, "java")
    destination = materialize_profile("java", tmp_path / "elsewhere.yaml")
    assert destination.read_text() == "includeExtensions: [.java]\n"


def test_materialize_missing_profile(profile_store, tmp_path):
    with pytest.raises(ProfileNotFoundError):
        materialize_profile("nope", tmp_path / "out.yaml")


def test_list_profiles(profile_store, config_file):
    assert list_profiles() == []
    save_profile(config_file, "web")
    save_profile(config_file, "java")
    save_profile(config_file, "legacy.yml")
    (profile_store / "notes.txt").write_text("not a profile")
    (profile_store / "dir.yaml").mkdir()
    assert list_profiles() == ["java", "legacy", "web"]


def test_delete_profile(profile_store, config_file):
    save_profile(config_file, "java")
    removed = delete_profile("java")
    assert removed == profile_store / "java.yaml"
    assert not removed.exists()
    assert list_profiles() == []


def test_delete_missing_profile(profile_store):
    with pytest.raises(ProfileNotFoundError):
        delete_profile("nope")
