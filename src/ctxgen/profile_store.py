"""Per-user store of named configuration profiles.

Profiles are plain copies of ``context_config.yaml`` files kept in a per-user
configuration directory:

- Windows: ``%APPDATA%\\ctxgen`` (``~/AppData/Roaming/ctxgen`` if APPDATA is unset)
- macOS: ``~/Library/Application Support/ctxgen``
- elsewhere: ``$XDG_CONFIG_HOME/ctxgen`` (``~/.config/ctxgen`` if unset)
"""

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import List

from ctxgen.config import AnalyzerConfig, load_config_file
from ctxgen.exceptions import ProfileNotFoundError
from ctxgen.types import PathType

logger = logging.getLogger(__name__)

APP_NAME = "ctxgen"
PROFILE_SUFFIXES = (".yaml", ".yml")


def get_store_dir() -> Path:
    """Return the directory profiles are stored in (it may not exist yet)."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA", "").strip()
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
        base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_NAME


def path_for_name(name: str) -> Path:
    """Return the file a profile is stored in.

    ``.yaml`` is appended unless the name already ends in ``.yaml`` or ``.yml``.
    """
    if not name.endswith(PROFILE_SUFFIXES):
        name = name + ".yaml"
    return get_store_dir() / name


def save_profile(source: PathType, name: str) -> Path:
    """Copy a configuration file into the store under ``name``, replacing any existing profile.

    Args:
        source: The configuration file to save (usually ``./context_config.yaml``).
        name: Profile name.

    Returns:
        Path: Where the profile was written.

    Raises:
        FileNotFoundError: If ``source`` does not exist.
        OSError: If the store directory or profile file cannot be written.
    """
    source = Path(source)
    if not source.is_file():
        raise FileNotFoundError(f"Config file not found: {source}")

    target = path_for_name(name)
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, target)
    logger.debug("Saved profile %s from %s to %s", name, source, target)
    return target


def load_profile(name: str) -> AnalyzerConfig:
    """Load a named profile.

    Unlike the local configuration file, a profile that cannot be parsed is an error:
    the user asked for it by name.

    Raises:
        ProfileNotFoundError: If the profile does not exist.
        ConfigError: If the profile cannot be parsed.
    """
    path = path_for_name(name)
    if not path.is_file():
        raise ProfileNotFoundError(name, str(path))
    return load_config_file(path)


def materialize_profile(name: str, destination: PathType) -> Path:
    """Copy a stored profile to ``destination`` (usually ``./context_config.yaml``).

    Raises:
        ProfileNotFoundError: If the profile does not exist.
        OSError: If the destination cannot be written.
    """
    path = path_for_name(name)
    if not path.is_file():
        raise ProfileNotFoundError(name, str(path))
    destination = Path(destination)
    shutil.copyfile(path, destination)
    return destination


def list_profiles() -> List[str]:
    """Return the sorted names of all stored profiles (without their suffix)."""
    store = get_store_dir()
    if not store.is_dir():
        return []

    names = []
    for entry in store.iterdir():
        if entry.is_file() and entry.suffix in PROFILE_SUFFIXES:
            names.append(entry.stem)
    return sorted(names)


def delete_profile(name: str) -> Path:
    """Delete a stored profile.

    Returns:
        Path: The file that was removed.

    Raises:
        ProfileNotFoundError: If the profile does not exist.
    """
    path = path_for_name(name)
    if not path.is_file():
        raise ProfileNotFoundError(name, str(path))
    path.unlink()
    return path
