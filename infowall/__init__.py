# Info Wall Package
"""
Filterable wall of information panels for Ignis/Wayland.

Modules:
  - search: Panel records, query tokenizer, matcher and filter controller
  - services: Content initialisation and visibility announcements
  - panels: GTK rendering adapter (titlebar, cards, live region)
"""

__version__ = "0.1.0-dev"
