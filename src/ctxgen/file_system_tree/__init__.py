"""File system tree representation filtered by the selection policy.

This module provides classes for building and rendering tree representations of
directory structures, leaving out the entries the selection policy ignores.
"""
