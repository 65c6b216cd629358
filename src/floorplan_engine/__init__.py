"""Geometric interaction engine for floor-plan editing.

Snapping, room boundaries, section slices and rule-based validation over
an in-memory plan snapshot.
"""

__version__ = "0.1.0"
