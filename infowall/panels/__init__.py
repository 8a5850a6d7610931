# Info Wall Panels Package
"""
GTK widgets for the info wall.

The wall window renders panel cards and applies the filter controller's
visibility decisions.
"""

from .wall import WallPanel

__all__ = ["WallPanel"]
