"""
Search package - Panel records and the filter engine.

Queries are split into words, each word is checked against a panel's
cached searchable corpus (exact substring first, fuzzy second) and the
per-word results are combined under the configured ALL/ANY mode.
"""

from .controller import FilterController, FilterResult, FilterState
from .matcher import FilterMode, RapidfuzzMatcher, matches
from .records import Entry, PanelRecord, PropertyDescriptor, Styling, build_panels
from .tokenizer import tokenize

__all__ = [
    "Entry",
    "FilterController",
    "FilterMode",
    "FilterResult",
    "FilterState",
    "PanelRecord",
    "PropertyDescriptor",
    "RapidfuzzMatcher",
    "Styling",
    "build_panels",
    "matches",
    "tokenize",
]
