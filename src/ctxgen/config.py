"""Analyzer configuration: the four selection lists and their YAML representation.

The configuration is an explicit, immutable schema. It is read from
``context_config.yaml`` (or a stored profile) with PyYAML and converted by a small
hand-written deserializer, so unknown keys are ignored and missing or ``null``
lists simply default to empty.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, FrozenSet, Iterable, Mapping, Optional, Union

import yaml

from ctxgen.exceptions import ConfigError
from ctxgen.types import PathType

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "context_config.yaml"
OUTPUT_FILENAME = "project_structure.md"

# YAML key -> dataclass field
_FIELD_KEYS = {
    "includeExtensions": "include_extensions",
    "includeNamesOrPaths": "include_names_or_paths",
    "excludeExtensions": "exclude_extensions",
    "excludeNamesOrPaths": "exclude_names_or_paths",
}
# Older configs used a single name-based exclude list
_LEGACY_EXCLUDE_KEY = "excludeNames"

DEFAULT_CONFIG_TEMPLATE = f"""\
# Include lists are ignored if any exclude list is non-empty.
# Paths are relative to analysis root and use forward slashes.

# Files to include by extension (with dot), empty = all
includeExtensions:
  # - ".java"

# Files or directories to include by name or relative path
includeNamesOrPaths:
  # - "src/main/java"

# Files to exclude by extension (with dot)
excludeExtensions:
  # - ".class"

# Files or directories to exclude by name or relative path
excludeNamesOrPaths:
  - ".git"
  - ".idea"
  - "{CONFIG_FILENAME}"
  - "{OUTPUT_FILENAME}"
  - "README.md"
  - "target"
  - "out"
"""


def normalize_extension(extension: str) -> str:
    """Lower-case an extension and make sure it starts with a dot.

    Example:
        >>> normalize_extension("JAVA")
        '.java'
        >>> normalize_extension(".Kt")
        '.kt'
    """
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def _extensions(values: Iterable[str]) -> FrozenSet[str]:
    # Blank entries are kept: they never match a file but still count for the mode
    return frozenset(normalize_extension(v) for v in values)


@dataclass(frozen=True)
class AnalyzerConfig:
    """Selection lists for one analysis run.

    If either exclude list is non-empty the configuration is in *exclude mode* and the
    include lists are ignored entirely. Otherwise it is in *include mode*, where empty
    include lists mean "include everything".

    Extensions are stored lower-cased with a leading dot. Names and paths are kept
    verbatim and compared case-sensitively. Blank entries are kept as "" so that a
    list holding only blanks still selects exclude mode, but they never match.

    Attributes:
        include_extensions: Extensions whose content is emitted in include mode.
        include_names_or_paths: File/directory names or root-relative paths whose
            content is emitted in include mode.
        exclude_extensions: Extensions removed from both tree and content.
        exclude_names_or_paths: Names or root-relative paths removed from both tree
            and content (a directory path removes its whole subtree).

    Example:
        >>> config = AnalyzerConfig(exclude_extensions={".CLASS"})
        >>> sorted(config.exclude_extensions)
        ['.class']
        >>> config.exclude_mode
        True
    """

    include_extensions: FrozenSet[str] = field(default_factory=frozenset)
    include_names_or_paths: FrozenSet[str] = field(default_factory=frozenset)
    exclude_extensions: FrozenSet[str] = field(default_factory=frozenset)
    exclude_names_or_paths: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "include_extensions", _extensions(self.include_extensions))
        object.__setattr__(self, "exclude_extensions", _extensions(self.exclude_extensions))
        object.__setattr__(self, "include_names_or_paths", frozenset(self.include_names_or_paths))
        object.__setattr__(self, "exclude_names_or_paths", frozenset(self.exclude_names_or_paths))

    @property
    def exclude_mode(self) -> bool:
        """True when any exclude list is non-empty."""
        return bool(self.exclude_extensions or self.exclude_names_or_paths)

    @property
    def has_include_rules(self) -> bool:
        """True when any include list is non-empty."""
        return bool(self.include_extensions or self.include_names_or_paths)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]], source: str = "<string>") -> "AnalyzerConfig":
        """Build a configuration from a parsed YAML document.

        Args:
            data: The parsed document. None (an empty document) yields the defaults.
            source: Description of where the document came from, used in error messages.

        Returns:
            The configuration. The legacy ``excludeNames`` key is merged into
            ``excludeNamesOrPaths``.

        Raises:
            ConfigError: If the document is not a mapping or a list value has the wrong shape.

        Example:
            >>> config = AnalyzerConfig.from_mapping({"excludeNames": ["build"], "excludeNamesOrPaths": None})
            >>> sorted(config.exclude_names_or_paths)
            ['build']
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"expected a mapping at the top level, got {type(data).__name__}", source)

        values = {attr: _string_set(data.get(key), key, source) for key, attr in _FIELD_KEYS.items()}
        legacy = _string_set(data.get(_LEGACY_EXCLUDE_KEY), _LEGACY_EXCLUDE_KEY, source)
        if legacy:
            values["exclude_names_or_paths"] = values["exclude_names_or_paths"] | legacy
        return cls(**values)


def _string_set(value: Any, key: str, source: str) -> FrozenSet[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset([value])
    if isinstance(value, (list, tuple, set, frozenset)):
        if not all(isinstance(item, (str, int, float)) for item in value):
            raise ConfigError(f"{key} must be a list of strings", source)
        # YAML turns unquoted 1.0 or 42 into numbers; keep them as written
        return frozenset(str(item) for item in value)
    raise ConfigError(f"{key} must be a list of strings, got {type(value).__name__}", source)


def parse_config(document: Union[str, IO[str]], source: str = "<string>") -> AnalyzerConfig:
    """Parse a YAML configuration document strictly.

    Args:
        document: YAML text or an open text stream.
        source: Description of the document's origin for error messages.

    Returns:
        The parsed configuration (defaults for an empty document).

    Raises:
        ConfigError: If the YAML is malformed, the text is not valid UTF-8, or the
            document does not follow the schema.

    Example:
        >>> parse_config("includeExtensions: ['.java', '.KT']").include_extensions == {".java", ".kt"}
        True
    """
    try:
        data = yaml.safe_load(document)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", source) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"not valid UTF-8: {e}", source) from e
    return AnalyzerConfig.from_mapping(data, source)


def load_config_file(path: PathType) -> AnalyzerConfig:
    """Load a configuration file strictly.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be parsed.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return parse_config(f, source=str(path))


def load_config(path: PathType = CONFIG_FILENAME) -> AnalyzerConfig:
    """Load the local configuration file, falling back to defaults.

    A missing, empty, or unreadable file never stops a run: the problem is logged and
    the default configuration (all lists empty) is used instead.

    Args:
        path: Configuration file to read. Defaults to ``context_config.yaml`` in the
            current directory.

    Returns:
        The loaded configuration, or the defaults.
    """
    path = Path(path)
    if not path.exists():
        logger.info("Configuration file '%s' not found. Using default settings (all lists are empty).", path)
        return AnalyzerConfig()

    try:
        config = load_config_file(path)
    except (OSError, ConfigError) as e:
        logger.warning("Error reading configuration file: %s. Using default settings.", e)
        return AnalyzerConfig()

    logger.info("Configuration loaded from '%s'.", path)
    return config


def write_default_config(path: PathType = CONFIG_FILENAME) -> Path:
    """Write the commented default configuration template.

    Args:
        path: Destination file. Existing content is overwritten.

    Returns:
        The path written.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(path)
    path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    return path
