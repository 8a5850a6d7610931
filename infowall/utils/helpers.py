"""
Helper utilities for the Info Wall.

Provides common functions used across the package:
- Settings loading (TOML merged over defaults)
- Content loading (JSON authoring data)
- HTML to plain text conversion for entry text
- Image size probing and aspect-fit layout
"""

import json
from html.parser import HTMLParser
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger
from PIL import Image, UnidentifiedImageError

DATA_DIR = Path(__file__).parent.parent / "data"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "behaviour": {
        "filter_mode": "or",
        "alternate_background": True,
        "offer_filter_field": True,
        "use_fallback_image": False,
        "image_width": 150,
        "image_height": 150,
    },
    "search": {
        "fuzzy_threshold": 75,
    },
    "l10n": {
        "no_entries_error": "The author did not enter anything.",
        "no_matches_for_filter": "There are not matches for @query.",
        "enter_to_filter": "Enter a query to filter the content for relevant entries.",
        "list_changed": "List changed. Showing @visible of @total items.",
        "image": "Image",
    },
}


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load wall settings from TOML file.

    Args:
        settings_path: File to read, defaults to data/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "behaviour": {"filter_mode": "and", "alternate_background": True},
            "search": {"fuzzy_threshold": 75},
            "l10n": {"list_changed": "Showing @visible of @total."}
        }
    """
    settings_path = settings_path or DATA_DIR / "settings.toml"

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return _deep_merge(DEFAULT_SETTINGS, {})

    try:
        loaded = toml.load(settings_path)
    except Exception:
        logger.exception(f"Could not load settings from {settings_path}, using defaults")
        return _deep_merge(DEFAULT_SETTINGS, {})

    return _deep_merge(DEFAULT_SETTINGS, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence, base is not mutated)
    """
    result = {
        key: _deep_merge(value, {}) if isinstance(value, dict) else value
        for key, value in base.items()
    }

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_content(content_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load authoring data (header, properties, panels) from JSON file.

    Returns:
        Content dictionary. Missing or invalid files give empty
        properties and panels, which the wall shows as "no entries".
    """
    content_path = content_path or DATA_DIR / "content.json"
    empty = {"header": "", "properties": [], "panels": [], "fallback_image": None}

    if not content_path.exists():
        logger.info(f"Content file not found at {content_path}")
        return empty

    try:
        with open(content_path) as f:
            data = json.load(f)
    except Exception:
        logger.exception(f"Could not load content from {content_path}")
        return empty

    if not isinstance(data, dict):
        logger.warning(f"Ignoring content in {content_path}: expected an object")
        return empty

    content = dict(empty)
    content.update(data)
    for key in ("properties", "panels"):
        if not isinstance(content[key], list):
            logger.warning(f"Ignoring '{key}' in {content_path}: expected a list")
            content[key] = []
    return content


class _TextExtractor(HTMLParser):
    """Collect text nodes, dropping tags. Entities are decoded by the parser."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []

    def handle_data(self, data):
        self.parts.append(data)


def html_to_text(markup: str) -> str:
    """
    Retrieve plain text from HTML encoded rich text.

    Example:
        html_to_text("<p>Fish &amp; chips</p>") -> "Fish & chips"
    """
    if not markup:
        return ""
    parser = _TextExtractor()
    parser.feed(markup)
    parser.close()
    return "".join(parser.parts)


def read_image_size(path) -> Optional[tuple[int, int]]:
    """
    Read an image's natural size without decoding pixel data.

    Returns:
        (width, height), or None if the file can't be read
    """
    try:
        with Image.open(path) as image:
            return image.size
    except (OSError, UnidentifiedImageError):
        logger.warning(f"Could not read image size of {path}")
        return None


def aspect_fit(natural_width: int, natural_height: int, box_width: int, box_height: int) -> tuple[int, int]:
    """
    Scale an image to fit inside a box, keeping its aspect ratio.

    Relatively wider images fill the box width, all others fill its height.

    Returns:
        (width, height) of the scaled image
    """
    if min(natural_width, natural_height, box_width, box_height) <= 0:
        return box_width, box_height

    image_ratio = natural_width / natural_height
    box_ratio = box_width / box_height

    if image_ratio > box_ratio:
        return box_width, round(natural_height * box_width / natural_width)
    return round(natural_width * box_height / natural_height), box_height
