"""
tagwarden - Tag catalog housekeeping.

Keeps a shared tag catalog free of tags that no release profile or
auto-tagging rule references any more.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "tagwarden"
__email__ = "noreply@tagwarden.dev"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
