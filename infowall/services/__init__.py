# Info Wall Services Package
"""
Backend services for the info wall.

Services wire the filter engine to settings, content and the UI.
"""

from .announcer import VisibilityAnnouncer
from .content import InfoWallContent

__all__ = ["InfoWallContent", "VisibilityAnnouncer"]
