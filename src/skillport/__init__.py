"""
Skillport - local catalog and installer for SKILL.md bundles.

Browse a repository of skill bundles, search and filter them, and copy
them into a global or project-level skills directory.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("skillport")
except PackageNotFoundError:
    __version__ = "0.3.0"

__all__ = [
    "__version__",
]
