"""Test configuration and fixtures for ctxgen."""

import pytest

from ctxgen.io.interrupts import interrupt_monitor


@pytest.fixture(autouse=True)
def reset_sigint():
    """Make sure an interrupt simulated by one test never leaks into the next."""
    interrupt_monitor.reset()
    yield
    interrupt_monitor.reset()


@pytest.fixture
def profile_store(tmp_path, monkeypatch):
    """Point the per-user profile store at a temporary directory."""
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    return tmp_path / "xdg" / "ctxgen"


@pytest.fixture
def sample_project(tmp_path):
    """A small project with nested directories and a mix of file types."""
    root = tmp_path / "project"
    (root / "src" / "main").mkdir(parents=True)
    (root / "src" / "main" / "App.java").write_text("class App {}\n")
    (root / "src" / "main" / "App.class").write_text("binary-ish\n")
    (root / "build").mkdir()
    (root / "build" / "out.txt").write_text("generated\n")
    (root / "README.md").write_text("# Readme\n")
    (root / "notes.txt").write_text("todo")
    return root
