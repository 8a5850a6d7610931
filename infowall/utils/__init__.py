# Info Wall Utilities Package
"""
Shared utility functions and helpers for the info wall.
"""

from .helpers import load_content, load_settings
from .l10n import Dictionary
from .timers import OneShotTimer

__all__ = ["Dictionary", "OneShotTimer", "load_content", "load_settings"]
