"""Selection policy deciding tree visibility and content emission for each entry."""

from typing import AbstractSet

from ctxgen.config import AnalyzerConfig

from .pattern_matcher import extension_of, matches_name_or_path, name_of


class SelectionPolicy:
    """Decides, for every filesystem entry, whether it is ignored and whether its content is emitted.

    The policy works in one of two mutually exclusive modes, chosen once from the
    configuration:

    - **Exclude mode** (any exclude list non-empty): entries matching an exclude name/path
      or extension disappear from both the tree and the content; everything else is
      shown and has its content emitted. Include lists are not consulted at all.
    - **Include mode** (both exclude lists empty): nothing is ignored, so the tree shows
      every accessible entry. Content is emitted for files matching an include
      name/path or extension, or for every file if both include lists are empty.

    Names in ``always_ignore`` (the snapshot artifact itself) are ignored in both modes
    without counting as exclude rules, so they never switch the policy into exclude mode.

    Both predicates are pure functions of the configuration and the relative path.

    Attributes:
        config (AnalyzerConfig): The configuration the decisions are based on.
        always_ignore (FrozenSet[str]): Names or paths hidden regardless of mode.

    Example:
        >>> policy = SelectionPolicy(AnalyzerConfig(exclude_names_or_paths={"build"}))
        >>> policy.should_ignore("build/out.class")
        True
        >>> policy.should_include_content("src/App.java")
        True
        >>> policy = SelectionPolicy(AnalyzerConfig(include_extensions={".java"}))
        >>> policy.should_ignore("build/out.class")
        False
        >>> policy.should_include_content("build/out.class")
        False
    """

    def __init__(self, config: AnalyzerConfig, always_ignore: AbstractSet[str] = frozenset()) -> None:
        self.config = config
        self.always_ignore = frozenset(always_ignore)
        self.exclude_mode = config.exclude_mode
        self.include_all = not config.has_include_rules

    def should_ignore(self, relative_path: str) -> bool:
        """Check whether an entry is hidden from both the tree and the content.

        Ignored directories are not descended into.

        Args:
            relative_path: Forward-slash path of the file or directory relative to the root.

        Returns:
            bool: True if the entry must be skipped.
        """
        name = name_of(relative_path)
        if matches_name_or_path(relative_path, name, self.always_ignore):
            return True
        if not self.exclude_mode:
            return False

        if matches_name_or_path(relative_path, name, self.config.exclude_names_or_paths):
            return True
        ext = extension_of(name)
        return bool(ext) and ext in self.config.exclude_extensions

    def should_include_content(self, relative_path: str) -> bool:
        """Check whether a (non-ignored) file has its content emitted.

        Args:
            relative_path: Forward-slash path of the file relative to the root.

        Returns:
            bool: True if the file body belongs in the output.
        """
        if self.exclude_mode or self.include_all:
            return True

        name = name_of(relative_path)
        if matches_name_or_path(relative_path, name, self.config.include_names_or_paths):
            return True
        ext = extension_of(name)
        return bool(ext) and ext in self.config.include_extensions
