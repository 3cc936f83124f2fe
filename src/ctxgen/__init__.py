"""Project context generation utilities.

This package walks a project directory and produces a single Markdown snapshot
(a tree listing followed by selected file contents) suitable for use with
Large Language Models (LLMs) or code reviewers.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("ctxgen")
except PackageNotFoundError:
    __version__ = "unknown"
