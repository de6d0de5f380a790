# markhop Launcher Package
"""
Bookmark search for Alfred-style launchers.

Modules:
  - search: Query routing and fuzzy ranking
  - services: Bookmark records and file loading
  - utils: Settings, logging, and output helpers
"""

__version__ = "0.1.0-dev"
