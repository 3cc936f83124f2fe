class ConfigError(ValueError):
    """
    Exception raised when a configuration document cannot be turned into an AnalyzerConfig.

    This covers YAML syntax errors as well as documents that parse but do not follow the
    expected schema (for example a top-level list, or a key whose value is a mapping
    instead of a list of strings).

    Attributes:
        source (str): Where the configuration came from (a file path or "<string>").

    Example:
        >>> error = ConfigError("excludeExtensions must be a list of strings", source="context_config.yaml")
        >>> str(error)
        'context_config.yaml: excludeExtensions must be a list of strings'
    """

    def __init__(self, message: str, source: str = "<string>") -> None:
        self.source = source
        super().__init__(f"{source}: {message}")


class ProfileNotFoundError(FileNotFoundError):
    """
    Exception raised when a named profile does not exist in the profile store.

    Attributes:
        name (str): The profile name as given by the user.
        path (str): The file the profile was expected at.

    Example:
        >>> error = ProfileNotFoundError("java", "/home/me/.config/ctxgen/java.yaml")
        >>> str(error)
        'Profile not found: java (/home/me/.config/ctxgen/java.yaml)'
    """

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Profile not found: {name} ({path})")


class OutputCreationError(OSError):
    """
    Exception raised when the output artifact cannot be created or truncated.

    This is the only I/O failure that aborts a run; errors on individual directories
    and files are recovered from locally.

    Attributes:
        path (str): Path of the artifact that could not be created.

    Example:
        >>> error = OutputCreationError("/ro/project_structure.md", "Permission denied")
        >>> str(error)
        'Cannot create output file /ro/project_structure.md: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot create output file {path}: {reason}")
