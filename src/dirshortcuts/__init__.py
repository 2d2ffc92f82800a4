from __future__ import annotations

"""
dirshortcuts: generate sourceable shell shortcuts for a directory tree.
"""

__version__ = "0.1.0"
